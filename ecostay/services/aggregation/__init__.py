"""
Join/aggregation engine.
"""

from ecostay.services.aggregation.activity_aggregation_service import (
    NO_RATINGS,
    ActivityAggregate,
    ActivityAggregationService,
    RatingSummary,
    group_by_activity,
    summarize_ratings,
    total_coins,
)
from ecostay.services.aggregation.coin_ledger_service import CoinBalance, CoinLedgerService

__all__ = [
    "NO_RATINGS",
    "ActivityAggregate",
    "ActivityAggregationService",
    "CoinBalance",
    "CoinLedgerService",
    "RatingSummary",
    "group_by_activity",
    "summarize_ratings",
    "total_coins",
]
