"""
Override Store Package

Persistence for state overrides, district custom standards and school
overrides. The engine depends only on the OverrideStore protocol.
"""

from config.standards_settings import DATABASE_URL
from src.store.base import OverrideStore
from src.store.memory import InMemoryOverrideStore
from src.store.sql import SqlOverrideStore


def build_override_store(database_url: str | None = None) -> SqlOverrideStore:
    """SQL store for the configured DATABASE_URL."""
    return SqlOverrideStore.from_url(database_url or DATABASE_URL)


__all__ = [
    "OverrideStore",
    "InMemoryOverrideStore",
    "SqlOverrideStore",
    "build_override_store",
]
