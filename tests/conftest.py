"""
Shared fixtures: an in-memory store and a service factory over it.
"""

import pytest

from ecostay.config.settings import Settings
from ecostay.db.memory_store import InMemoryStore
from ecostay.db.remote_store import AuthUser
from ecostay.services import ServiceFactory


def hostel_row(**overrides):
    row = {
        "name": "Dar Zitoun",
        "location": "Tozeur",
        "description": "Solar-powered hostel",
        "country": "tunisia",
        "latitude": 33.92,
        "longitude": 8.13,
        "eco_score": 80,
    }
    row.update(overrides)
    return row


@pytest.fixture
def config():
    return Settings(_env_file=None, SUPABASE_URL="https://project.supabase.co", SUPABASE_ANON_KEY="anon")


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def services(store, config):
    return ServiceFactory(store, config=config)


@pytest.fixture
def hostel(store):
    return store.seed("hostels", hostel_row(id="h1", manager_id="m1"))[0]


@pytest.fixture
async def manager_session(services, store):
    store.seed(
        "profiles",
        {"id": "m1", "email": "manager@example.com", "full_name": "Amal Ben", "role": "hostel_manager"},
    )
    session = services.new_session()
    await session.initialize()
    session.user = AuthUser(id="m1", email="manager@example.com")
    await session.refresh_profile()
    return session


@pytest.fixture
async def traveler_session(services, store):
    store.seed(
        "profiles",
        {"id": "t1", "email": "traveler@example.com", "full_name": "Sam Rivera", "role": "traveler"},
    )
    session = services.new_session()
    await session.initialize()
    session.user = AuthUser(id="t1", email="traveler@example.com")
    await session.refresh_profile()
    return session


@pytest.fixture
async def anonymous_session(services):
    session = services.new_session()
    await session.initialize()
    return session