"""
Activity submission.

Creating an activity awards points and coins from the category table,
stores the activity as pending and credits the hostel's coin ledger.
The two inserts are not transactional: when the ledger insert fails
the activity stays persisted and pending, and the failure is raised
with the activity id attached. Verification is done elsewhere.
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from ecostay.core.constants import ERROR_HOSTEL_REQUIRED, award_for
from ecostay.core.exceptions import MissingFieldError, RemoteWriteError, ValidationError
from ecostay.core.logging import get_logger
from ecostay.repositories.hostel import ActivityRepository, CoinTransactionRepository
from ecostay.schemas.activity import Activity, ActivityCreate, ActivityDraft
from ecostay.schemas.coin import CoinTransaction, CoinTransactionCreate
from ecostay.schemas.common import ActivityStatus
from ecostay.schemas.hostel import Hostel

logger = get_logger(__name__)


@dataclass
class ActivitySubmission:
    activity: Activity
    transaction: CoinTransaction


class ActivitySubmissionService:
    def __init__(
        self,
        activities: ActivityRepository,
        transactions: CoinTransactionRepository,
        today: Callable[[], date] = date.today,
    ):
        self.activities = activities
        self.transactions = transactions
        self._today = today

    @staticmethod
    def validate(hostel: Optional[Hostel], draft: ActivityDraft) -> None:
        if hostel is None:
            raise ValidationError(ERROR_HOSTEL_REQUIRED)
        missing = [name for name in ("type", "title") if not getattr(draft, name)]
        if missing:
            raise MissingFieldError("Please fill all required fields", missing)

    async def submit(self, hostel: Optional[Hostel], draft: ActivityDraft) -> ActivitySubmission:
        """
        Create a pending activity and credit its coins to the hostel.

        Raises:
            ValidationError: no hostel, or type/title missing
            RemoteWriteError: either insert failed; a ledger failure
                carries `details["activity_id"]` of the persisted activity
        """
        self.validate(hostel, draft)
        award = award_for(draft.type)

        activity = await self.activities.create(
            ActivityCreate(
                hostel_id=hostel.id,
                type=draft.type,
                title=draft.title,
                description=draft.description,
                activity_date=draft.activity_date or self._today(),
                points=award,
                coins=award,
                status=ActivityStatus.PENDING,
            )
        )

        try:
            transaction = await self.transactions.create(
                CoinTransactionCreate(
                    hostel_id=hostel.id,
                    activity_id=activity.id,
                    coins=award,
                    description=draft.title,
                )
            )
        except RemoteWriteError as e:
            logger.warning(
                f"Activity {activity.id} stored without its ledger entry",
                extra={"hostel_id": hostel.id, "activity_id": activity.id},
            )
            e.details["activity_id"] = activity.id
            raise

        logger.info(
            "Activity submitted for verification",
            extra={"hostel_id": hostel.id, "activity_id": activity.id, "coins": award},
        )
        return ActivitySubmission(activity=activity, transaction=transaction)
