"""
Repository Interface Definitions

Defines the abstract interface for the newspaper circulation collection.
Implementations differ only in how they reach the store; consumers depend
on this interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from bson import ObjectId

# Identifiers are accepted as hex strings or ObjectId instances
RecordId = Union[str, ObjectId]


@dataclass
class LoadResult:
    """
    Result of a bulk load.

    Attributes:
        inserted_count: Number of documents written
        inserted_ids: Store-generated identifiers, in input order
    """
    inserted_count: int
    inserted_ids: List[ObjectId] = field(default_factory=list)


class CirculationRepositoryInterface(ABC):
    """
    Abstract interface for newspaper circulation record operations.

    Implementations:
    - MongoCirculationRepository: MongoDB via pymongo's async client

    Every operation performs one store round trip. Store errors propagate
    to the caller unchanged; "not found" is reported as None/False.
    """

    @abstractmethod
    async def load_data(self, records: Sequence[Mapping[str, Any]]) -> LoadResult:
        """
        Insert many records in one call.

        Args:
            records: Records to insert (not mutated)

        Returns:
            LoadResult with the inserted count and generated identifiers
        """
        pass

    @abstractmethod
    async def get(
        self,
        filter: Optional[Mapping[str, Any]] = None,
        limit: Optional[int] = 0,
    ) -> List[Dict[str, Any]]:
        """
        Find records matching a filter.

        Args:
            filter: MongoDB query filter (None or {} = all records)
            limit: Maximum records to return (0, None or negative = no limit)

        Returns:
            List of matching records in the store's natural order
        """
        pass

    @abstractmethod
    async def get_by_id(self, id: RecordId) -> Optional[Dict[str, Any]]:
        """
        Fetch a single record by identifier.

        Returns:
            The record if found, None otherwise

        Raises:
            InvalidIdentifier: If id is not a well-formed identifier
        """
        pass

    @abstractmethod
    async def add(self, record: Mapping[str, Any]) -> ObjectId:
        """
        Insert a single record.

        Args:
            record: Record without an identifier (not mutated)

        Returns:
            The generated identifier
        """
        pass

    @abstractmethod
    async def update(
        self,
        id: RecordId,
        record: Mapping[str, Any],
        return_updated: bool = False,
    ) -> Optional[Dict[str, Any]]:
        """
        Replace a record entirely. Fields absent from record are dropped.

        Args:
            id: Identifier of the record to replace
            record: Replacement content
            return_updated: Return the replaced document instead of the prior one

        Returns:
            Prior record (or the replaced one), None if nothing matched

        Raises:
            InvalidIdentifier: If id is not a well-formed identifier
        """
        pass

    @abstractmethod
    async def remove(self, id: RecordId) -> bool:
        """
        Delete a record by identifier.

        Returns:
            True if a record was deleted, False if none matched

        Raises:
            InvalidIdentifier: If id is not a well-formed identifier
        """
        pass

    @abstractmethod
    async def count(self, filter: Optional[Mapping[str, Any]] = None) -> int:
        """Count records matching the filter (None = all)."""
        pass

    @abstractmethod
    async def clear(self) -> int:
        """
        Delete every record in the collection in one call.

        ⚠️ USE WITH CAUTION - This removes all data!

        Returns:
            Number of records deleted
        """
        pass
