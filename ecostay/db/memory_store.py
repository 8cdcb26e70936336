"""
In-process remote store.

Keeps tables as lists of dicts and applies the same query semantics as
the hosted service. Used by the test-suite and for offline demos; every
call is recorded so callers can assert which requests were issued.
"""

from __future__ import annotations

import copy
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ecostay.db.remote_store import AuthSession, AuthUser, Query, RemoteStore, StoreError

# table -> {embedded table: local foreign key}
DEFAULT_RELATIONS: Dict[str, Dict[str, str]] = {
    "wishes": {"profiles": "traveler_id"},
}


def _split_columns(columns: str) -> List[str]:
    parts, depth, current = [], 0, ""
    for char in columns:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if char == "," and depth == 0:
            parts.append(current.strip())
            current = ""
        else:
            current += char
    if current.strip():
        parts.append(current.strip())
    return parts


class InMemoryStore(RemoteStore):
    """RemoteStore holding every table in memory."""

    def __init__(self, relations: Optional[Dict[str, Dict[str, str]]] = None) -> None:
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.buckets: Dict[str, Dict[str, bytes]] = {}
        self.relations = relations or DEFAULT_RELATIONS
        self.calls: List[Tuple[str, str]] = []
        self.access_token: Optional[str] = None
        self._users: Dict[str, Tuple[str, AuthUser]] = {}
        self._failures: Dict[Tuple[str, str], BaseException] = {}
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    # ------------------------------------------------------------------
    # Test helpers
    # ------------------------------------------------------------------

    def seed(self, table: str, *rows: Dict[str, Any]) -> List[Dict[str, Any]]:
        return [self._store_row(table, row) for row in rows]

    def fail(self, operation: str, target: str, error: Optional[BaseException] = None) -> None:
        """Make the next `operation` on `target` (table or bucket) raise."""
        self._failures[(operation, target)] = error or StoreError(
            f"{operation} on {target} rejected", status_code=500
        )

    def calls_to(self, target: str, operation: Optional[str] = None) -> List[Tuple[str, str]]:
        return [
            call for call in self.calls
            if call[1] == target and (operation is None or call[0] == operation)
        ]

    def _record(self, operation: str, target: str) -> None:
        self.calls.append((operation, target))
        failure = self._failures.pop((operation, target), None)
        if failure is not None:
            raise failure

    def _now(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def _store_row(self, table: str, row: Mapping[str, Any]) -> Dict[str, Any]:
        stored = dict(row)
        stored.setdefault("id", str(uuid.uuid4()))
        stored.setdefault("created_at", self._now().isoformat())
        self.tables.setdefault(table, []).append(stored)
        return copy.deepcopy(stored)

    @staticmethod
    def _matches(row: Mapping[str, Any], filters: Mapping[str, Any]) -> bool:
        return all(row.get(column) == value for column, value in filters.items())

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _project(self, table: str, row: Dict[str, Any], columns: str) -> Dict[str, Any]:
        parts = _split_columns(columns)
        result: Dict[str, Any] = {} if "*" not in parts else copy.deepcopy(row)
        for part in parts:
            if part == "*":
                continue
            if "(" in part:
                embedded, inner = part.split("(", 1)
                embedded = embedded.strip()
                foreign_key = self.relations.get(table, {}).get(embedded)
                target = None
                if foreign_key is not None:
                    target = next(
                        (r for r in self.tables.get(embedded, []) if r.get("id") == row.get(foreign_key)),
                        None,
                    )
                result[embedded] = (
                    self._project(embedded, target, inner.rstrip(")")) if target else None
                )
            else:
                result[part] = copy.deepcopy(row.get(part))
        return result

    async def select(self, table: str, query: Optional[Query] = None) -> List[Dict[str, Any]]:
        self._record("select", table)
        query = query or Query()
        rows = [
            row for row in self.tables.get(table, [])
            if self._matches(row, query.filters)
            and all(row.get(column) in values for column, values in query.in_filters.items())
        ]
        for order in reversed(query.orders):
            present = [r for r in rows if r.get(order.column) is not None]
            missing = [r for r in rows if r.get(order.column) is None]
            present.sort(key=lambda r: r[order.column], reverse=not order.ascending)
            # Nulls sort last ascending and first descending, as in PostgREST
            rows = present + missing if order.ascending else missing + present
        if query.limit is not None:
            rows = rows[:query.limit]
        return [self._project(table, row, query.columns) for row in rows]

    async def insert(self, table: str, row: Mapping[str, Any]) -> Dict[str, Any]:
        self._record("insert", table)
        return self._store_row(table, row)

    async def update(
        self, table: str, filters: Mapping[str, Any], patch: Mapping[str, Any]
    ) -> List[Dict[str, Any]]:
        self._record("update", table)
        updated = []
        for row in self.tables.get(table, []):
            if self._matches(row, filters):
                row.update(patch)
                updated.append(copy.deepcopy(row))
        return updated

    async def delete(self, table: str, filters: Mapping[str, Any]) -> None:
        self._record("delete", table)
        self.tables[table] = [
            row for row in self.tables.get(table, []) if not self._matches(row, filters)
        ]

    async def upsert(
        self, table: str, row: Mapping[str, Any], on_conflict: Sequence[str]
    ) -> Dict[str, Any]:
        self._record("upsert", table)
        key = {column: row.get(column) for column in on_conflict}
        for existing in self.tables.get(table, []):
            if self._matches(existing, key):
                existing.update(row)
                return copy.deepcopy(existing)
        return self._store_row(table, row)

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    async def upload(
        self, bucket: str, path: str, data: bytes, content_type: Optional[str] = None
    ) -> str:
        self._record("upload", bucket)
        files = self.buckets.setdefault(bucket, {})
        if path in files:
            raise StoreError("The resource already exists", status_code=409)
        files[path] = bytes(data)
        return f"memory://{bucket}/{path}"

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    async def sign_up(
        self, email: str, password: str, metadata: Optional[Dict[str, Any]] = None
    ) -> AuthUser:
        self._record("sign_up", "auth")
        if email in self._users:
            raise StoreError("User already registered", status_code=422)
        user = AuthUser(id=str(uuid.uuid4()), email=email, metadata=dict(metadata or {}))
        self._users[email] = (password, user)
        return user

    async def sign_in(self, email: str, password: str) -> AuthSession:
        self._record("sign_in", "auth")
        entry = self._users.get(email)
        if entry is None or entry[0] != password:
            raise StoreError("Invalid login credentials", status_code=400)
        return AuthSession(access_token=f"token-{entry[1].id}", user=entry[1])

    async def sign_out(self) -> None:
        self._record("sign_out", "auth")
        self.access_token = None

    def set_access_token(self, token: Optional[str]) -> None:
        self.access_token = token
