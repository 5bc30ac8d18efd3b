"""
MongoDB Circulation Repository

Wraps the newspaper collection behind CirculationRepositoryInterface using
pymongo's async client. Each operation is one store call.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Sequence

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection

from ..database import DEFAULT_TIMEOUT_MS, DatabaseClient, connection_scope
from ..errors import to_object_id
from ..logger import get_logger
from .base import CirculationRepositoryInterface, LoadResult, RecordId
from .config import ConnectionStrategy


class MongoCirculationRepository(CirculationRepositoryInterface):
    """
    Repository for the newspaper circulation collection.

    Connection Management:
    - POOLED: one DatabaseClient per repository, connected on first use and
      reused until close()
    - PER_CALL: every operation opens its own connection and closes it on
      every exit path

    Error Handling:
    - Fail-fast: driver errors propagate to caller unchanged
    - Malformed identifiers raise InvalidIdentifier before any store call
    """

    def __init__(
        self,
        mongodb_uri: str,
        database: str = "circulation",
        collection: str = "newspaper",
        strategy: ConnectionStrategy = ConnectionStrategy.POOLED,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ):
        """
        Initialize repository with connection parameters.

        Args:
            mongodb_uri: MongoDB connection string
            database: Database name (default: "circulation")
            collection: Collection name (default: "newspaper")
            strategy: Connection strategy (default: pooled)
            timeout_ms: Server selection / connect timeout in milliseconds
        """
        self._mongodb_uri = mongodb_uri
        self._database_name = database
        self._collection_name = collection
        self._strategy = ConnectionStrategy(strategy)
        self._timeout_ms = timeout_ms
        self._client: Optional[DatabaseClient] = None
        self._log = get_logger(__name__, collection=collection)

    @property
    def strategy(self) -> ConnectionStrategy:
        return self._strategy

    @property
    def collection_name(self) -> str:
        return self._collection_name

    @asynccontextmanager
    async def _collection(self) -> AsyncIterator[AsyncCollection]:
        """Acquire the collection for one operation according to the strategy."""
        if self._strategy == ConnectionStrategy.PER_CALL:
            async with connection_scope(
                self._mongodb_uri, self._database_name, self._timeout_ms
            ) as handle:
                yield handle.collection(self._collection_name)
            return

        if self._client is None:
            self._client = DatabaseClient(
                self._mongodb_uri, self._database_name, self._timeout_ms
            )
        await self._client.connect()
        yield self._client.collection(self._collection_name)

    async def load_data(self, records: Sequence[Mapping[str, Any]]) -> LoadResult:
        documents = [dict(record) for record in records]
        async with self._collection() as collection:
            result = await collection.insert_many(documents)

        inserted_ids = list(result.inserted_ids)
        self._log.bind("load_data").info(f"Inserted {len(inserted_ids)} records")
        return LoadResult(inserted_count=len(inserted_ids), inserted_ids=inserted_ids)

    async def get(
        self,
        filter: Optional[Mapping[str, Any]] = None,
        limit: Optional[int] = 0,
    ) -> List[Dict[str, Any]]:
        query = dict(filter) if filter else {}
        async with self._collection() as collection:
            cursor = collection.find(query)
            if limit and limit > 0:
                cursor = cursor.limit(limit)
            items = await cursor.to_list()

        self._log.bind("get").debug(f"Query {query} (limit={limit}) returned {len(items)} records")
        return items

    async def get_by_id(self, id: RecordId) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(id)
        async with self._collection() as collection:
            return await collection.find_one({"_id": object_id})

    async def add(self, record: Mapping[str, Any]) -> ObjectId:
        async with self._collection() as collection:
            result = await collection.insert_one(dict(record))

        self._log.bind("add").debug(f"Inserted record {result.inserted_id}")
        return result.inserted_id

    async def update(
        self,
        id: RecordId,
        record: Mapping[str, Any],
        return_updated: bool = False,
    ) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(id)
        return_document = ReturnDocument.AFTER if return_updated else ReturnDocument.BEFORE
        async with self._collection() as collection:
            result = await collection.find_one_and_replace(
                {"_id": object_id},
                dict(record),
                return_document=return_document,
            )

        if result is None:
            self._log.bind("update").warning(f"No record matched {object_id}")
        return result

    async def remove(self, id: RecordId) -> bool:
        object_id = to_object_id(id)
        async with self._collection() as collection:
            result = await collection.delete_one({"_id": object_id})

        removed = result.deleted_count > 0
        self._log.bind("remove").debug(
            f"{'Removed' if removed else 'No record matched'} {object_id}"
        )
        return removed

    async def clear(self) -> int:
        async with self._collection() as collection:
            result = await collection.delete_many({})

        self._log.bind("clear").warning(f"⚠ Deleted {result.deleted_count} records")
        return result.deleted_count

    async def count(self, filter: Optional[Mapping[str, Any]] = None) -> int:
        async with self._collection() as collection:
            return await collection.count_documents(dict(filter) if filter else {})

    async def close(self) -> None:
        """Close the pooled client, if one was opened."""
        if self._client is not None:
            await self._client.close()
            self._client = None
