"""
Coin balances for hostels and users, recomputed from the ledger on
every call.
"""

from dataclasses import dataclass, field
from typing import List

from ecostay.repositories.hostel import CoinTransactionRepository
from ecostay.schemas.coin import CoinTransaction
from ecostay.services.aggregation.activity_aggregation_service import total_coins


@dataclass
class CoinBalance:
    total: int
    transactions: List[CoinTransaction] = field(default_factory=list)


class CoinLedgerService:
    def __init__(self, transactions: CoinTransactionRepository):
        self.transactions = transactions

    async def hostel_balance(self, hostel_id: str) -> CoinBalance:
        rows = await self.transactions.for_hostel(hostel_id)
        return CoinBalance(total=total_coins(rows), transactions=rows)

    async def user_balance(self, user_id: str) -> CoinBalance:
        rows = await self.transactions.for_user(user_id)
        return CoinBalance(total=total_coins(rows), transactions=rows)
