"""Shared diskcache plumbing for the flight and settings stores."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Generic, TypeVar

from diskcache import Cache

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseCacheManager(ABC, Generic[T]):
    """A typed store backed by one diskcache directory.

    Subclasses decide how values are serialized through ``save``/``load``;
    the housekeeping methods here work on raw keys.
    """

    def __init__(self, cache_dir: Path, cache_subdir: str | None = None) -> None:
        """Open (and create if needed) the store.

        Args:
            cache_dir: Data directory root, usually from ``Config``
            cache_subdir: Store name under the root, e.g. ``flights``
        """
        cache_path = Path(cache_dir)
        if cache_subdir:
            cache_path = cache_path / cache_subdir

        cache_path.mkdir(parents=True, exist_ok=True)

        self.cache = Cache(str(cache_path))
        self.cache_path = cache_path

        logger.debug(f"Opened store at {cache_path}")

    def clear_cache(self) -> None:
        try:
            self.cache.clear()
            logger.info(f"Cleared store at {self.cache_path}")
        except Exception as e:
            logger.error(f"Error clearing store at {self.cache_path}: {e}")

    def has_cache(self) -> bool:
        return len(self.cache) > 0

    def get_cache_size(self) -> int:
        return len(self.cache)

    def delete_item(self, key: str) -> bool:
        """Remove one key; returns False when it was not stored."""
        try:
            if key in self.cache:
                del self.cache[key]
                return True
            return False
        except Exception as e:
            logger.error(f"Error deleting {key} from {self.cache_path}: {e}")
            return False

    def exists(self, key: str) -> bool:
        return key in self.cache

    def keys(self) -> list[str]:
        return [str(key) for key in self.cache]

    def close(self) -> None:
        self.cache.close()

    @abstractmethod
    def save(self, key: str, data: T) -> None: ...

    @abstractmethod
    def load(self, key: str) -> T | None: ...

    def __del__(self) -> None:
        if hasattr(self, "cache"):
            self.cache.close()


class SimpleCacheManager(BaseCacheManager[Any]):
    """Store for plain values such as saved settings."""

    def save(self, key: str, data: Any) -> None:
        try:
            self.cache.set(key, data)
            logger.debug(f"Stored value under {key}")
        except Exception as e:
            logger.error(f"Error storing value under {key}: {e}")

    def load(self, key: str) -> Any | None:
        try:
            return self.cache.get(key)
        except Exception as e:
            logger.debug(f"Error reading {key}: {e}")
            return None
