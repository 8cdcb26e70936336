from datetime import date

import pytest

from ecostay.core.constants import ACTIVITY_AWARDS, DEFAULT_ACTIVITY_AWARD, award_for
from ecostay.core.exceptions import MissingFieldError, RemoteWriteError, ValidationError
from ecostay.schemas.activity import ActivityDraft
from ecostay.schemas.common import ActivityStatus, ActivityType
from ecostay.schemas.hostel import Hostel
from ecostay.services.activity import ActivitySubmissionService


@pytest.mark.parametrize(
    "activity_type, expected",
    [
        ("energy", 50),
        ("water", 40),
        ("waste", 30),
        ("community", 20),
        ("education", 25),
        ("biodiversity", 35),
        ("stargazing", 20),
        ("", 20),
    ],
)
def test_award_table(activity_type, expected):
    assert award_for(activity_type) == expected


def test_award_table_covers_every_category():
    assert set(ACTIVITY_AWARDS) == set(ActivityType)
    assert {t.value for t in ACTIVITY_AWARDS} == {"energy", "water", "waste", "community", "education", "biodiversity"}
    assert DEFAULT_ACTIVITY_AWARD == 20


def test_award_accepts_enum_members():
    assert award_for(ActivityType.WATER) == 40
    assert award_for(ActivityType.BIODIVERSITY) == 35


@pytest.fixture
def submission(services):
    return ActivitySubmissionService(
        services.activity_repository,
        services.coin_repository,
        today=lambda: date(2024, 5, 1),
    )


@pytest.fixture
def hostel_model(hostel):
    return Hostel.model_validate(hostel)


async def test_submit_water_activity(submission, hostel_model, store, services):
    result = await submission.submit(
        hostel_model, ActivityDraft(type="water", title="Rain barrels", description="Collect rain")
    )

    assert result.activity.points == 40
    assert result.activity.coins == 40
    assert result.activity.status == ActivityStatus.PENDING
    assert result.activity.activity_date == date(2024, 5, 1)

    transaction = result.transaction
    assert transaction.hostel_id == "h1"
    assert transaction.activity_id == result.activity.id
    assert transaction.coins == 40
    assert transaction.description == "Rain barrels"

    assert (await services.ledger.hostel_balance("h1")).total == 40


async def test_submit_keeps_explicit_date(submission, hostel_model):
    result = await submission.submit(
        hostel_model,
        ActivityDraft(type="energy", title="Solar", activity_date=date(2024, 3, 2)),
    )

    assert result.activity.activity_date == date(2024, 3, 2)


async def test_unknown_category_gets_default_award(submission, hostel_model):
    result = await submission.submit(hostel_model, ActivityDraft(type="other", title="Garden"))

    assert result.activity.coins == 20
    assert result.transaction.coins == 20


async def test_submit_without_hostel_makes_no_request(submission, store):
    with pytest.raises(ValidationError) as exc_info:
        await submission.submit(None, ActivityDraft(type="water", title="Rain barrels"))

    assert exc_info.value.message == "Please create a hostel first"
    assert store.calls == []


async def test_submit_requires_type_and_title(submission, hostel_model, store):
    with pytest.raises(MissingFieldError) as exc_info:
        await submission.submit(hostel_model, ActivityDraft(type="", title=""))

    assert exc_info.value.fields == ["type", "title"]
    assert store.calls_to("hostel_activities") == []


async def test_ledger_failure_keeps_activity_pending(submission, hostel_model, store):
    store.fail("insert", "coin_transactions")

    with pytest.raises(RemoteWriteError) as exc_info:
        await submission.submit(hostel_model, ActivityDraft(type="waste", title="Compost"))

    stored = store.tables["hostel_activities"]
    assert len(stored) == 1
    assert stored[0]["status"] == "pending"
    assert exc_info.value.details["activity_id"] == stored[0]["id"]
    assert store.tables.get("coin_transactions", []) == []


async def test_activity_insert_failure_skips_ledger(submission, hostel_model, store):
    store.fail("insert", "hostel_activities")

    with pytest.raises(RemoteWriteError):
        await submission.submit(hostel_model, ActivityDraft(type="waste", title="Compost"))

    assert store.calls_to("coin_transactions") == []
