"""
Read-side loaders for the hostel profile and the manager dashboard.

Each load fans out the related queries and returns an immutable
snapshot; callers replace their previous snapshot wholesale.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ecostay.repositories.hostel import ActivityRepository, HostelRepository
from ecostay.schemas.activity import Activity
from ecostay.schemas.hostel import Hostel
from ecostay.services.aggregation import (
    ActivityAggregate,
    ActivityAggregationService,
    CoinLedgerService,
)


@dataclass(frozen=True)
class HostelProfileSnapshot:
    hostel: Optional[Hostel]
    activities: List[Activity] = field(default_factory=list)
    aggregate: ActivityAggregate = field(default_factory=ActivityAggregate)


@dataclass(frozen=True)
class DashboardSnapshot:
    hostel: Optional[Hostel]
    activities: List[Activity] = field(default_factory=list)
    total_coins: int = 0


class HostelProfileService:
    def __init__(
        self,
        hostels: HostelRepository,
        activities: ActivityRepository,
        aggregation: ActivityAggregationService,
        ledger: CoinLedgerService,
    ):
        self.hostels = hostels
        self.activities = activities
        self.aggregation = aggregation
        self.ledger = ledger

    async def load_profile(self, hostel_id: str) -> HostelProfileSnapshot:
        """Hostel, its activities newest first, and their joined children."""
        hostel = await self.hostels.get(hostel_id)
        activities = await self.activities.list_for_hostel(hostel_id)
        aggregate = await self.aggregation.aggregate(activities)
        return HostelProfileSnapshot(hostel=hostel, activities=activities, aggregate=aggregate)

    async def load_dashboard(self, manager_id: str) -> DashboardSnapshot:
        """The manager's hostel with its activities and coin balance."""
        hostel = await self.hostels.get_by_manager(manager_id)
        if hostel is None:
            return DashboardSnapshot(hostel=None)
        activities = await self.activities.list_for_hostel(hostel.id)
        balance = await self.ledger.hostel_balance(hostel.id)
        return DashboardSnapshot(hostel=hostel, activities=activities, total_coins=balance.total)
