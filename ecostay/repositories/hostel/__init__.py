"""
Hostel repositories: hostels, their activities and the coin ledger.
"""

from ecostay.repositories.hostel.activity_repository import ActivityRepository
from ecostay.repositories.hostel.coin_transaction_repository import CoinTransactionRepository
from ecostay.repositories.hostel.hostel_repository import HostelRepository

__all__ = [
    "ActivityRepository",
    "CoinTransactionRepository",
    "HostelRepository",
]
