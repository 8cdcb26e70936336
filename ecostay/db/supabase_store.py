"""
Supabase-backed remote store.

Talks to the hosted project's REST (PostgREST), storage and auth
endpoints over httpx. Row-level security is enforced server-side by
sending the signed-in user's access token; without one the anon key
is used.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence
from urllib.parse import quote

import httpx

from ecostay.config.settings import Settings
from ecostay.core.logging import get_logger
from ecostay.db.remote_store import AuthSession, AuthUser, Query, RemoteStore, StoreError

logger = get_logger(__name__)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _quote_member(value: Any) -> str:
    text = _format_value(value).replace('"', '\\"')
    return f'"{text}"'


def filter_params(filters: Mapping[str, Any]) -> List[tuple]:
    """PostgREST equality filters (`col=eq.value`, `col=is.null`)."""
    params = []
    for column, value in filters.items():
        if value is None:
            params.append((column, "is.null"))
        else:
            params.append((column, f"eq.{_format_value(value)}"))
    return params


def query_params(query: Query) -> List[tuple]:
    """Translate a Query into PostgREST query-string parameters."""
    params: List[tuple] = [("select", query.columns)]
    params.extend(filter_params(query.filters))
    for column, values in query.in_filters.items():
        members = ",".join(_quote_member(v) for v in values)
        params.append((column, f"in.({members})"))
    if query.orders:
        params.append((
            "order",
            ",".join(
                f"{order.column}.{'asc' if order.ascending else 'desc'}"
                for order in query.orders
            ),
        ))
    if query.limit is not None:
        params.append(("limit", str(query.limit)))
    return params


class SupabaseStore(RemoteStore):
    """RemoteStore over the Supabase HTTP APIs."""

    def __init__(
        self,
        url: str,
        anon_key: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url.rstrip("/")
        self.anon_key = anon_key
        self._access_token: Optional[str] = None
        # No timeout unless configured: a hung request stays pending.
        self._client = httpx.AsyncClient(
            base_url=self.url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
            headers={"apikey": anon_key},
        )

    @classmethod
    def from_settings(cls, config: Settings, **kwargs: Any) -> "SupabaseStore":
        config.require_store_config()
        return cls(
            config.SUPABASE_URL,
            config.SUPABASE_ANON_KEY,
            timeout=config.STORE_TIMEOUT_SECONDS,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def set_access_token(self, token: Optional[str]) -> None:
        self._access_token = token

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self._access_token or self.anon_key}"}
        if extra:
            headers.update(extra)
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[List[tuple]] = None,
        json: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        try:
            response = await self._client.request(
                method,
                path,
                params=params,
                json=json,
                content=content,
                headers=self._headers(headers),
            )
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise StoreError(f"{method} {path} failed: {e}") from e

        if response.status_code >= 400:
            try:
                payload = response.json()
            except ValueError:
                payload = response.text
            message = None
            if isinstance(payload, dict):
                message = payload.get("message") or payload.get("msg") or payload.get("error")
            raise StoreError(
                message or f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                payload=payload,
            )

        if not response.content:
            return None
        return response.json()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    async def select(self, table: str, query: Optional[Query] = None) -> List[Dict[str, Any]]:
        rows = await self._request("GET", f"/rest/v1/{table}", params=query_params(query or Query()))
        return rows or []

    async def insert(self, table: str, row: Mapping[str, Any]) -> Dict[str, Any]:
        rows = await self._request(
            "POST",
            f"/rest/v1/{table}",
            json=dict(row),
            headers={"Prefer": "return=representation"},
        )
        return rows[0] if rows else dict(row)

    async def update(
        self, table: str, filters: Mapping[str, Any], patch: Mapping[str, Any]
    ) -> List[Dict[str, Any]]:
        rows = await self._request(
            "PATCH",
            f"/rest/v1/{table}",
            params=filter_params(filters),
            json=dict(patch),
            headers={"Prefer": "return=representation"},
        )
        return rows or []

    async def delete(self, table: str, filters: Mapping[str, Any]) -> None:
        await self._request("DELETE", f"/rest/v1/{table}", params=filter_params(filters))

    async def upsert(
        self, table: str, row: Mapping[str, Any], on_conflict: Sequence[str]
    ) -> Dict[str, Any]:
        rows = await self._request(
            "POST",
            f"/rest/v1/{table}",
            params=[("on_conflict", ",".join(on_conflict))],
            json=[dict(row)],
            headers={"Prefer": "resolution=merge-duplicates,return=representation"},
        )
        return rows[0] if rows else dict(row)

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self.url}/storage/v1/object/public/{bucket}/{quote(path)}"

    async def upload(
        self, bucket: str, path: str, data: bytes, content_type: Optional[str] = None
    ) -> str:
        await self._request(
            "POST",
            f"/storage/v1/object/{bucket}/{quote(path)}",
            content=data,
            headers={
                "Content-Type": content_type or "application/octet-stream",
                "x-upsert": "false",
            },
        )
        return self.public_url(bucket, path)

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    @staticmethod
    def _auth_user(payload: Dict[str, Any]) -> AuthUser:
        return AuthUser(
            id=payload["id"],
            email=payload.get("email", ""),
            metadata=payload.get("user_metadata") or {},
        )

    async def sign_up(
        self, email: str, password: str, metadata: Optional[Dict[str, Any]] = None
    ) -> AuthUser:
        body = await self._request(
            "POST",
            "/auth/v1/signup",
            json={"email": email, "password": password, "data": metadata or {}},
        )
        # With email confirmation enabled the user object comes back bare
        return self._auth_user(body.get("user") or body)

    async def sign_in(self, email: str, password: str) -> AuthSession:
        body = await self._request(
            "POST",
            "/auth/v1/token",
            params=[("grant_type", "password")],
            json={"email": email, "password": password},
        )
        return AuthSession(
            access_token=body["access_token"],
            refresh_token=body.get("refresh_token"),
            user=self._auth_user(body["user"]),
        )

    async def sign_out(self) -> None:
        if self._access_token:
            await self._request("POST", "/auth/v1/logout")
        self._access_token = None
