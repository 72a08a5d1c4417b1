"""Cache module for flightcal."""

from flightcal.cache.base import BaseCacheManager, SimpleCacheManager
from flightcal.cache.credentials import CredentialStore
from flightcal.cache.flight import FlightCache

__all__ = [
    "BaseCacheManager",
    "CredentialStore",
    "FlightCache",
    "SimpleCacheManager",
]
