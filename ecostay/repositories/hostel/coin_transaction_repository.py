"""
Coin Transaction Repository - the coin ledger.

Balances are derived from these rows on every load; nothing here
stores or caches a total.
"""

from typing import List

from ecostay.db.remote_store import Query
from ecostay.repositories.base import BaseRepository
from ecostay.schemas.coin import CoinTransaction, CoinTransactionCreate


class CoinTransactionRepository(BaseRepository[CoinTransaction]):
    """Fetchers for the `coin_transactions` table."""

    table = "coin_transactions"
    schema = CoinTransaction

    async def for_hostel(self, hostel_id: str) -> List[CoinTransaction]:
        return await self._fetch(Query().where(hostel_id=hostel_id))

    async def for_user(self, user_id: str) -> List[CoinTransaction]:
        """Ledger rows credited to a user, newest first."""
        return await self._fetch(
            Query().where(user_id=user_id).order_by("created_at", ascending=False)
        )

    async def create(self, payload: CoinTransactionCreate) -> CoinTransaction:
        return await self._insert(payload)
