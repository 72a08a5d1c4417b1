"""CLI utilities module."""

from flightcal.cli.utils.auth import get_credential_store, prompt_api_key
from flightcal.cli.utils.data import load_flights, open_flight_cache, resolve_date
from flightcal.cli.utils.options import (
    DATE_OPTION,
    FLIGHT_CODE_ARGUMENT,
    INDEX_OPTION,
    OUTPUT_FORMAT_OPTION,
    OUTPUT_PATH_OPTION,
    REFRESH_OPTION,
    OutputFormat,
)
from flightcal.cli.utils.output import handle_json_output, handle_table_output, print_quota_info

__all__ = [
    "DATE_OPTION",
    "FLIGHT_CODE_ARGUMENT",
    "INDEX_OPTION",
    "OUTPUT_FORMAT_OPTION",
    "OUTPUT_PATH_OPTION",
    "REFRESH_OPTION",
    "OutputFormat",
    "get_credential_store",
    "handle_json_output",
    "handle_table_output",
    "load_flights",
    "open_flight_cache",
    "print_quota_info",
    "prompt_api_key",
    "resolve_date",
]
