import json

import httpx
import pytest

from ecostay.core.exceptions import ConfigurationError
from ecostay.config.settings import Settings
from ecostay.db.remote_store import Query, StoreError
from ecostay.db.supabase_store import SupabaseStore, filter_params, query_params
from ecostay.repositories import CommentRepository

BASE_URL = "https://project.supabase.co"


class Recorder:
    def __init__(self, responses=None):
        self.requests = []
        self.responses = list(responses or [])

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(200, json=[])


def _store(recorder):
    return SupabaseStore(BASE_URL, "anon-key", transport=httpx.MockTransport(recorder))


def test_query_params_translation():
    query = (
        Query()
        .select("*,profiles(full_name)")
        .where(status="open", hostel_id=None)
        .where_in("activity_id", ["a1", "a2"])
        .order_by("votes", ascending=False)
        .order_by("created_at")
        .limit_to(10)
    )

    assert query_params(query) == [
        ("select", "*,profiles(full_name)"),
        ("status", "eq.open"),
        ("hostel_id", "is.null"),
        ("activity_id", 'in.("a1","a2")'),
        ("order", "votes.desc,created_at.asc"),
        ("limit", "10"),
    ]


def test_filter_params_booleans():
    assert filter_params({"verified": True}) == [("verified", "eq.true")]


async def test_select_sends_filters_and_anon_key():
    recorder = Recorder([httpx.Response(200, json=[{"id": "h1"}])])
    store = _store(recorder)

    rows = await store.select("hostels", Query().order_by("eco_score", ascending=False))

    request = recorder.requests[0]
    assert rows == [{"id": "h1"}]
    assert request.method == "GET"
    assert request.url.path == "/rest/v1/hostels"
    assert request.url.params["order"] == "eco_score.desc"
    assert request.headers["apikey"] == "anon-key"
    assert request.headers["Authorization"] == "Bearer anon-key"
    await store.aclose()


async def test_access_token_replaces_anon_bearer():
    recorder = Recorder()
    store = _store(recorder)
    store.set_access_token("user-token")

    await store.select("profiles")

    assert recorder.requests[0].headers["Authorization"] == "Bearer user-token"
    await store.aclose()


async def test_insert_returns_representation():
    recorder = Recorder([httpx.Response(201, json=[{"id": "c1", "comment": "hi"}])])
    store = _store(recorder)

    row = await store.insert("event_comments", {"comment": "hi"})

    request = recorder.requests[0]
    assert row == {"id": "c1", "comment": "hi"}
    assert request.method == "POST"
    assert request.headers["Prefer"] == "return=representation"
    assert json.loads(request.content) == {"comment": "hi"}
    await store.aclose()


async def test_upsert_merges_on_conflict_key():
    recorder = Recorder([httpx.Response(201, json=[{"activity_id": "a1", "user_id": "u1", "rating": 5}])])
    store = _store(recorder)

    await store.upsert("event_ratings", {"activity_id": "a1", "user_id": "u1", "rating": 5}, ("activity_id", "user_id"))

    request = recorder.requests[0]
    assert request.url.params["on_conflict"] == "activity_id,user_id"
    assert "resolution=merge-duplicates" in request.headers["Prefer"]
    await store.aclose()


async def test_update_and_delete_use_equality_filters():
    recorder = Recorder([httpx.Response(200, json=[]), httpx.Response(204)])
    store = _store(recorder)

    await store.update("profiles", {"id": "u1"}, {"bio": "x"})
    await store.delete("favorites", {"user_id": "u1", "hostel_id": "h1"})

    patch, delete = recorder.requests
    assert patch.method == "PATCH"
    assert patch.url.params["id"] == "eq.u1"
    assert delete.method == "DELETE"
    assert delete.url.params["hostel_id"] == "eq.h1"
    await store.aclose()


async def test_error_status_raises_store_error():
    recorder = Recorder([httpx.Response(401, json={"message": "JWT expired"})])
    store = _store(recorder)

    with pytest.raises(StoreError) as exc_info:
        await store.select("hostels")

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "JWT expired"
    await store.aclose()


async def test_transport_failure_raises_store_error():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    store = SupabaseStore(BASE_URL, "anon-key", transport=httpx.MockTransport(refuse))

    with pytest.raises(StoreError):
        await store.select("hostels")
    await store.aclose()


async def test_upload_returns_public_url():
    recorder = Recorder([httpx.Response(200, json={"Key": "event-photos/activity_a1/1.jpg"})])
    store = _store(recorder)

    url = await store.upload("event-photos", "activity_a1/1.jpg", b"jpeg", "image/jpeg")

    request = recorder.requests[0]
    assert url == f"{BASE_URL}/storage/v1/object/public/event-photos/activity_a1/1.jpg"
    assert request.url.path == "/storage/v1/object/event-photos/activity_a1/1.jpg"
    assert request.headers["Content-Type"] == "image/jpeg"
    assert request.content == b"jpeg"
    await store.aclose()


async def test_password_sign_in():
    recorder = Recorder([
        httpx.Response(
            200,
            json={
                "access_token": "jwt",
                "refresh_token": "refresh",
                "user": {"id": "u1", "email": "a@example.com", "user_metadata": {"role": "traveler"}},
            },
        )
    ])
    store = _store(recorder)

    session = await store.sign_in("a@example.com", "pw")

    request = recorder.requests[0]
    assert request.url.path == "/auth/v1/token"
    assert request.url.params["grant_type"] == "password"
    assert session.access_token == "jwt"
    assert session.user.metadata == {"role": "traveler"}
    await store.aclose()


def test_from_settings_requires_store_config():
    config = Settings(_env_file=None, SUPABASE_URL=None, SUPABASE_ANON_KEY=None)

    with pytest.raises(ConfigurationError) as exc_info:
        SupabaseStore.from_settings(config)

    assert exc_info.value.message == "Missing Supabase environment variables"


async def test_comment_fetch_requests_chronological_order():
    recorder = Recorder([
        httpx.Response(200, json=[{"id": "c1", "activity_id": "a1", "user_id": "u1", "comment": "hi"}])
    ])
    store = _store(recorder)

    comments = await CommentRepository(store).for_activities(["a1", "a2"])

    params = recorder.requests[0].url.params
    assert [c.id for c in comments] == ["c1"]
    assert recorder.requests[0].url.path == "/rest/v1/event_comments"
    assert params["activity_id"] == 'in.("a1","a2")'
    assert params["order"] == "created_at.asc"
    await store.aclose()
