"""
Base repository with standardized read/write operations and error handling.

Provides the foundation for all entity fetchers: rows from the remote
store are validated into the entity schema, and any store or shape
failure is raised as RemoteFetchError (reads) or RemoteWriteError
(writes) carrying the underlying cause. Nothing is retried here.
"""

from typing import Any, Dict, Generic, List, Mapping, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from ecostay.core.exceptions import RemoteFetchError, RemoteWriteError
from ecostay.core.logging import get_logger
from ecostay.db.remote_store import Query, RemoteStore, StoreError
from ecostay.schemas.common import BaseCreateSchema

logger = get_logger(__name__)

# Type variable for row schemas
SchemaType = TypeVar("SchemaType", bound=BaseModel)

Payload = Union[BaseCreateSchema, Mapping[str, Any]]


class BaseRepository(Generic[SchemaType]):
    """
    Base repository bound to one remote table.

    Subclasses set `table` and `schema` and expose entity-specific
    fetch operations built on the protected helpers below.
    """

    table: str
    schema: Type[SchemaType]

    def __init__(self, store: RemoteStore):
        """
        Initialize repository.

        Args:
            store: Remote store the table lives in
        """
        self.store = store

    # ==================== Mapping ====================

    def _to_schema(self, row: Mapping[str, Any]) -> SchemaType:
        return self.schema.model_validate(row)

    @staticmethod
    def _to_row(payload: Payload) -> Dict[str, Any]:
        if isinstance(payload, BaseCreateSchema):
            return payload.to_row()
        return dict(payload)

    # ==================== Read Operations ====================

    async def _fetch(self, query: Optional[Query] = None) -> List[SchemaType]:
        """Ordered rows matching the query."""
        try:
            rows = await self.store.select(self.table, query)
            return [self._to_schema(row) for row in rows]
        except (StoreError, SchemaValidationError) as e:
            logger.debug(f"Read from {self.table} failed: {e}")
            raise RemoteFetchError(self.table, cause=e) from e

    async def _fetch_one(self, query: Optional[Query] = None) -> Optional[SchemaType]:
        """Zero or one row matching the query."""
        try:
            row = await self.store.select_one(self.table, query)
            return self._to_schema(row) if row is not None else None
        except (StoreError, SchemaValidationError) as e:
            logger.debug(f"Read from {self.table} failed: {e}")
            raise RemoteFetchError(self.table, cause=e) from e

    async def _fetch_raw(self, query: Query) -> List[Dict[str, Any]]:
        """Rows as returned by the store, for partial projections."""
        try:
            return await self.store.select(self.table, query)
        except StoreError as e:
            logger.debug(f"Read from {self.table} failed: {e}")
            raise RemoteFetchError(self.table, cause=e) from e

    # ==================== Write Operations ====================

    async def _insert(self, payload: Payload) -> SchemaType:
        try:
            row = await self.store.insert(self.table, self._to_row(payload))
            return self._to_schema(row)
        except (StoreError, SchemaValidationError) as e:
            logger.debug(f"Insert into {self.table} failed: {e}")
            raise RemoteWriteError(self.table, "insert", cause=e) from e

    async def _update(self, filters: Mapping[str, Any], patch: Mapping[str, Any]) -> List[SchemaType]:
        try:
            rows = await self.store.update(self.table, filters, patch)
            return [self._to_schema(row) for row in rows]
        except (StoreError, SchemaValidationError) as e:
            logger.debug(f"Update of {self.table} failed: {e}")
            raise RemoteWriteError(self.table, "update", cause=e) from e

    async def _delete(self, filters: Mapping[str, Any]) -> None:
        try:
            await self.store.delete(self.table, filters)
        except StoreError as e:
            logger.debug(f"Delete from {self.table} failed: {e}")
            raise RemoteWriteError(self.table, "delete", cause=e) from e

    async def _upsert(self, payload: Payload, on_conflict: Sequence[str]) -> SchemaType:
        try:
            row = await self.store.upsert(self.table, self._to_row(payload), on_conflict)
            return self._to_schema(row)
        except (StoreError, SchemaValidationError) as e:
            logger.debug(f"Upsert into {self.table} failed: {e}")
            raise RemoteWriteError(self.table, "upsert", cause=e) from e


class ActivityChildRepository(BaseRepository[SchemaType]):
    """
    Repository for rows that hang off an activity (comments, photos,
    videos, ratings).
    """

    ascending_by_created: bool = False

    async def for_activities(self, activity_ids: Sequence[str]) -> List[SchemaType]:
        """
        Rows belonging to any of the given activities.

        An empty id set returns [] without a request: an empty `in`
        filter is read as "no filter" by some stores.
        """
        if not activity_ids:
            return []
        query = Query().where_in("activity_id", activity_ids)
        if self.ascending_by_created:
            query.order_by("created_at", ascending=True)
        return await self._fetch(query)
