"""TTL cache for flight lookups using DiskCache."""

import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

from flightcal.cache.base import BaseCacheManager
from flightcal.core.constants import CacheLimits
from flightcal.core.timeutils import truncate_to_day
from flightcal.models.cache import CacheEntry, CacheStatusInfo

logger = logging.getLogger(__name__)


class FlightCache(BaseCacheManager[CacheEntry]):
    """Caches raw upstream responses per (flight code, date) with a fixed TTL.

    Expired entries are never deleted on read; they are ignored until the next
    successful fetch overwrites them, or until :meth:`purge_expired` runs.
    """

    def __init__(
        self,
        cache_dir: Path,
        ttl_hours: float = CacheLimits.TTL_HOURS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the flight cache.

        Args:
            cache_dir: Root directory of the on-disk store
            ttl_hours: Time to live of each entry in hours
            clock: Source of the current time in epoch seconds
        """
        super().__init__(cache_dir, cache_subdir="flights")
        self.ttl_seconds = ttl_hours * CacheLimits.SECONDS_PER_HOUR
        self.clock = clock

    @staticmethod
    def cache_key(flight_code: str, date: str) -> str:
        """Build the cache key for a flight query.

        Args:
            flight_code: Flight number such as ``AA123``
            date: ISO date, optionally with a time-of-day suffix

        Returns:
            Key of the form ``flight_<code>_<YYYY-MM-DD>``
        """
        return f"flight_{flight_code.strip()}_{truncate_to_day(date)}"

    def save(self, key: str, data: CacheEntry) -> None:
        self.cache.set(key, data.model_dump())

    def load(self, key: str) -> CacheEntry | None:
        """Load the stored entry for a key, expired or not."""
        try:
            raw = self.cache.get(key)
            if raw:
                return CacheEntry.model_validate(raw)
        except Exception as e:
            logger.debug(f"Cache entry {key} could not be loaded: {e}")
        return None

    def get(self, key: str) -> Any | None:
        """Return the cached payload if the entry is still live.

        Args:
            key: Cache key

        Returns:
            Cached payload, or None on a miss or an expired entry
        """
        entry = self.load(key)
        now = self.clock()

        if entry is None:
            logger.debug(f"Cache MISS for {key}")
            return None

        if entry.is_expired(now):
            logger.debug(f"Cache expired for {key} (age: {entry.age_hours(now):.1f}h)")
            return None

        logger.info(f"Cache HIT for {key} (age: {entry.age_hours(now):.1f}h)")
        return entry.payload

    def set(self, key: str, payload: Any) -> CacheEntry:
        """Store a payload, replacing any previous entry for the key.

        Args:
            key: Cache key
            payload: Raw response body

        Returns:
            The stored entry
        """
        now = self.clock()
        entry = CacheEntry(key=key, payload=payload, cached_at=now, expires_at=now + self.ttl_seconds)
        self.save(key, entry)
        logger.debug(f"Cached response for {key}, valid for {self.ttl_seconds / 3600:.0f}h")
        return entry

    def purge_expired(self) -> int:
        """Delete every expired entry.

        Returns:
            Number of entries removed
        """
        now = self.clock()
        removed = 0
        for key in self.keys():
            entry = self.load(key)
            if entry is None or entry.is_expired(now):
                if self.delete_item(key):
                    removed += 1

        logger.info(f"Purged {removed} expired cache entries")
        return removed

    def get_status(self) -> CacheStatusInfo:
        """Summarize the cache contents."""
        now = self.clock()
        status = CacheStatusInfo(cache_path=str(self.cache_path))

        for key in self.keys():
            entry = self.load(key)
            status.total_entries += 1
            if entry is None or entry.is_expired(now):
                status.expired_entries += 1
                continue

            status.live_entries += 1
            age = entry.age_hours(now)
            if status.oldest_entry_hours is None or age > status.oldest_entry_hours:
                status.oldest_entry_hours = age

        return status
