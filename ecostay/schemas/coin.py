# --- File: ecostay/schemas/coin.py ---
"""
Coin ledger schemas. Balances are never stored; they are the sum of
the ledger rows for a hostel or a user.
"""

from typing import Optional

from ecostay.schemas.common import BaseCreateSchema, RowSchema

__all__ = [
    "CoinTransaction",
    "CoinTransactionCreate",
]


class CoinTransaction(RowSchema):
    """Row of `coin_transactions`; `coins` is signed."""

    hostel_id: Optional[str] = None
    activity_id: Optional[str] = None
    user_id: Optional[str] = None
    coins: int = 0
    description: str = ""


class CoinTransactionCreate(BaseCreateSchema):
    hostel_id: str
    activity_id: Optional[str] = None
    user_id: Optional[str] = None
    coins: int
    description: str
