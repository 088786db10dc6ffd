"""Repositories package - data access layer for the store."""

from app.repositories.base import BaseRepository
from app.repositories.db import close, connect, init_tables
from app.repositories.errors import QueryFailed, StoreError, StoreUnavailable
from app.repositories.location import LocationRepository
from app.repositories.records import RecordRepository

__all__ = [
    # DB
    "connect",
    "close",
    "init_tables",
    # Errors
    "StoreError",
    "StoreUnavailable",
    "QueryFailed",
    # Base
    "BaseRepository",
    # Repositories
    "LocationRepository",
    "RecordRepository",
]
