"""
Repository Pattern for the Newspaper Circulation Collection

Public API:
- get_circulation_repository(): Factory to get the shared repository instance
- close_circulation_repository(): Close the shared client and reset the factory
- CirculationRepositoryInterface: Abstract interface for the collection
- MongoCirculationRepository: MongoDB implementation
- LoadResult: Result dataclass for bulk loads

Usage:
    from circulation.common.repositories import get_circulation_repository

    repo = get_circulation_repository()
    record_id = await repo.add({"Newspaper": "Daily Planet"})
    record = await repo.get_by_id(record_id)
    await repo.update(record_id, {"Newspaper": "Daily Bugle"})
    removed = await repo.remove(record_id)
"""

from .base import CirculationRepositoryInterface, LoadResult, RecordId
from .config import (
    get_circulation_repository,
    close_circulation_repository,
    ConnectionStrategy,
    RepositoryConfig,
)
from .mongo_repository import MongoCirculationRepository

__all__ = [
    "get_circulation_repository",
    "close_circulation_repository",
    "CirculationRepositoryInterface",
    "MongoCirculationRepository",
    "LoadResult",
    "RecordId",
    "ConnectionStrategy",
    "RepositoryConfig",
]
