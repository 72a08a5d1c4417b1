"""Shared CLI options and enums for commands."""

from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer


class OutputFormat(StrEnum):
    """Supported output formats across commands."""

    TABLE = "table"
    JSON = "json"


# Common typer options
FLIGHT_CODE_ARGUMENT = Annotated[
    str,
    typer.Argument(help="Flight number, e.g. AA123 or 'BA 283'"),
]

DATE_OPTION = Annotated[
    str | None,
    typer.Option(
        "--date",
        "-d",
        help="Flight date (YYYY-MM-DD, 'today', 'tomorrow', ...). Defaults to today",
    ),
]

REFRESH_OPTION = Annotated[
    bool,
    typer.Option(
        "--refresh",
        "-r",
        help="Ignore cached results and query the API",
    ),
]

OUTPUT_PATH_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Output file path for json format (prints to stdout if omitted)",
    ),
]

OUTPUT_FORMAT_OPTION = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-f",
        help="Output format (table, json)",
        case_sensitive=False,
    ),
]

INDEX_OPTION = Annotated[
    int,
    typer.Option(
        "--index",
        "-i",
        min=1,
        help="Which result to use when the flight number has several legs (1-based)",
    ),
]

VERBOSE_OPTION = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
]
