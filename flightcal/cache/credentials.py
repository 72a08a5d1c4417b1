"""Persistent storage for the RapidAPI key."""

import logging
from pathlib import Path

from flightcal.cache.base import SimpleCacheManager
from flightcal.config import Config
from flightcal.core.constants import DisplayConstants
from flightcal.exceptions import CacheError

logger = logging.getLogger(__name__)

API_KEY_SETTING = "rapidApiKey"


class CredentialStore(SimpleCacheManager):
    """Reads and writes the API key.

    A key from the environment (``FLIGHTCAL_RAPIDAPI_KEY`` or ``.env``) takes
    precedence over the saved one. Saved keys are stored unencrypted in the
    settings directory.
    """

    def __init__(self, settings_dir: Path, config: Config | None = None) -> None:
        super().__init__(settings_dir)
        self.config = config

    @classmethod
    def from_config(cls, config: Config) -> "CredentialStore":
        return cls(config.settings_dir, config)

    def get_credential(self) -> str | None:
        """Return the API key, or None if none is configured."""
        if self.config and self.config.api_key:
            return self.config.api_key.get_secret_value()

        value = self.load(API_KEY_SETTING)
        if isinstance(value, str) and value:
            return value
        return None

    def set_credential(self, key: str) -> None:
        """Save the API key.

        Raises:
            CacheError: If the key could not be written
        """
        try:
            self.cache.set(API_KEY_SETTING, key.strip())
        except Exception as e:
            logger.error(f"Error saving API key: {e}")
            raise CacheError(f"Could not save API key: {e}") from e
        logger.info("API key saved")

    def clear_credential(self) -> bool:
        return self.delete_item(API_KEY_SETTING)


def mask_api_key(key: str) -> str:
    """Mask an API key for display, keeping only its ends."""
    if len(key) < DisplayConstants.API_KEY_MASK_MIN_LENGTH:
        return "*" * len(key)
    prefix = key[: DisplayConstants.API_KEY_PREFIX_LENGTH]
    suffix = key[-DisplayConstants.API_KEY_SUFFIX_LENGTH :]
    return f"{prefix}...{suffix}"
