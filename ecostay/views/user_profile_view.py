"""
User profile state: the editable profile form, the managed hostel's
coin balance and the user's own coin ledger.
"""

from dataclasses import dataclass
from typing import List, Optional

from ecostay.schemas.coin import CoinTransaction
from ecostay.schemas.hostel import Hostel
from ecostay.schemas.profile import ProfileUpdate
from ecostay.services import ServiceFactory
from ecostay.services.auth import SessionContext
from ecostay.views.base import ViewState


@dataclass(frozen=True)
class _CoinsSnapshot:
    hostel: Optional[Hostel]
    hostel_coins: Optional[int]


class UserProfileView(ViewState):
    name = "user_profile"

    def __init__(self, services: ServiceFactory, session: SessionContext):
        super().__init__()
        self.services = services
        self.session = session
        self.form = ProfileUpdate()
        self.hostel: Optional[Hostel] = None
        self.hostel_coins: Optional[int] = None
        self.user_coins = 0
        self.user_transactions: List[CoinTransaction] = []
        self.saving = False
        self.reset_form()

    def reset_form(self) -> None:
        profile = self.session.profile
        if profile is None:
            self.form = ProfileUpdate()
            return
        self.form = ProfileUpdate(
            full_name=profile.full_name or "",
            phone=profile.phone or "",
            country=profile.country or "",
            bio=profile.bio or "",
        )

    async def _hostel_coins(self, user_id: str) -> _CoinsSnapshot:
        hostel = await self.services.hostels.for_manager(user_id)
        if hostel is None:
            return _CoinsSnapshot(hostel=None, hostel_coins=None)
        balance = await self.services.ledger.hostel_balance(hostel.id)
        return _CoinsSnapshot(hostel=hostel, hostel_coins=balance.total)

    async def load(self) -> None:
        if not self.session.is_authenticated:
            return
        user_id = self.session.user_id

        ok, snapshot = await self._load(
            lambda: self._hostel_coins(user_id), "Failed to load hostel coins"
        )
        if ok:
            self.hostel = snapshot.hostel
            self.hostel_coins = snapshot.hostel_coins

        # The user's own ledger loads independently of the hostel balance
        ok, balance = await self._load(
            lambda: self.services.ledger.user_balance(user_id),
            "Failed to load coin transactions",
            channel="user_coins",
            track_loading=False,
        )
        if ok:
            self.user_coins = balance.total
            self.user_transactions = balance.transactions

    async def save(self) -> bool:
        form = self.form
        self.saving = True
        try:
            return await self._perform(
                lambda: self.session.update_profile(form),
                "Failed to update profile",
                "Profile updated",
            )
        finally:
            self.saving = False
