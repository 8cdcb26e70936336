"""
Remote store boundary.

The hosted database-as-a-service owns all durable state. This module
declares the operations the client consumes (table reads and writes,
file upload and password auth) together with the query specification
passed to reads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence


class StoreError(Exception):
    """Raised by a store implementation when a request fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (status {self.status_code})"
        return self.message


@dataclass
class Order:
    column: str
    ascending: bool = True


@dataclass
class Query:
    """
    Read specification: projection, equality and membership filters,
    ordering and an optional row limit.

    Builder methods return the query so calls can be chained:

        Query().where(hostel_id=hid).order_by("created_at", ascending=False)
    """

    columns: str = "*"
    filters: Dict[str, Any] = field(default_factory=dict)
    in_filters: Dict[str, List[Any]] = field(default_factory=dict)
    orders: List[Order] = field(default_factory=list)
    limit: Optional[int] = None

    def select(self, columns: str) -> "Query":
        self.columns = columns
        return self

    def where(self, **filters: Any) -> "Query":
        self.filters.update(filters)
        return self

    def where_in(self, column: str, values: Sequence[Any]) -> "Query":
        self.in_filters[column] = list(values)
        return self

    def order_by(self, column: str, ascending: bool = True) -> "Query":
        self.orders.append(Order(column, ascending))
        return self

    def limit_to(self, limit: int) -> "Query":
        self.limit = limit
        return self


@dataclass
class AuthUser:
    id: str
    email: str
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class AuthSession:
    access_token: str
    user: AuthUser
    refresh_token: Optional[str] = None


class RemoteStore(ABC):
    """
    Authenticated request/response access to named tables, file buckets
    and the password auth endpoint.

    Implementations raise StoreError on any failure and never retry.
    """

    @abstractmethod
    async def select(self, table: str, query: Optional[Query] = None) -> List[Dict[str, Any]]:
        """Rows of `table` matching `query`, in the requested order."""

    async def select_one(self, table: str, query: Optional[Query] = None) -> Optional[Dict[str, Any]]:
        """Zero or one row; more than one match is an error."""
        rows = await self.select(table, query)
        if len(rows) > 1:
            raise StoreError(f"Expected at most one row from {table}, got {len(rows)}")
        return rows[0] if rows else None

    @abstractmethod
    async def insert(self, table: str, row: Mapping[str, Any]) -> Dict[str, Any]:
        """Insert one row and return it as stored."""

    @abstractmethod
    async def update(
        self, table: str, filters: Mapping[str, Any], patch: Mapping[str, Any]
    ) -> List[Dict[str, Any]]:
        """Patch the rows matching `filters`."""

    @abstractmethod
    async def delete(self, table: str, filters: Mapping[str, Any]) -> None:
        """Delete the rows matching `filters`."""

    @abstractmethod
    async def upsert(
        self, table: str, row: Mapping[str, Any], on_conflict: Sequence[str]
    ) -> Dict[str, Any]:
        """Insert, or replace the row that shares the `on_conflict` key."""

    @abstractmethod
    async def upload(
        self, bucket: str, path: str, data: bytes, content_type: Optional[str] = None
    ) -> str:
        """Store a file and return its public URL."""

    @abstractmethod
    async def sign_up(
        self, email: str, password: str, metadata: Optional[Dict[str, Any]] = None
    ) -> AuthUser:
        """Register a new account."""

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Exchange credentials for a session."""

    @abstractmethod
    async def sign_out(self) -> None:
        """End the current session."""

    def set_access_token(self, token: Optional[str]) -> None:
        """Act on behalf of a signed-in user (None reverts to the anon key)."""

    async def aclose(self) -> None:
        """Release transport resources."""

    async def __aenter__(self) -> "RemoteStore":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
