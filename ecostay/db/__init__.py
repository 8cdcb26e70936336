"""
Remote store boundary and its implementations.
"""

from ecostay.db.memory_store import InMemoryStore
from ecostay.db.remote_store import (
    AuthSession,
    AuthUser,
    Order,
    Query,
    RemoteStore,
    StoreError,
)
from ecostay.db.supabase_store import SupabaseStore

__all__ = [
    "AuthSession",
    "AuthUser",
    "InMemoryStore",
    "Order",
    "Query",
    "RemoteStore",
    "StoreError",
    "SupabaseStore",
]
