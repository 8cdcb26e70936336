import pytest

from ecostay.core.exceptions import RemoteFetchError
from ecostay.schemas.coin import CoinTransaction
from ecostay.schemas.engagement import Comment, Rating
from ecostay.services.aggregation import (
    NO_RATINGS,
    RatingSummary,
    group_by_activity,
    summarize_ratings,
    total_coins,
)


def _rating(activity_id, user_id, value):
    return Rating(activity_id=activity_id, user_id=user_id, rating=value)


def test_group_by_activity_keeps_row_order():
    rows = [
        Comment(id="c1", activity_id="a1", user_id="u1", comment="first"),
        Comment(id="c2", activity_id="a2", user_id="u1", comment="other"),
        Comment(id="c3", activity_id="a1", user_id="u2", comment="second"),
    ]

    grouped = group_by_activity(rows)

    assert [c.id for c in grouped["a1"]] == ["c1", "c3"]
    assert [c.id for c in grouped["a2"]] == ["c2"]


def test_group_by_activity_empty():
    assert group_by_activity([]) == {}


def test_summarize_ratings_average_and_count():
    summaries = summarize_ratings([_rating("a1", "u1", 4), _rating("a1", "u2", 2), _rating("a2", "u1", 5)])

    assert summaries["a1"] == RatingSummary(average=3.0, count=2)
    assert summaries["a2"] == RatingSummary(average=5.0, count=1)


def test_rating_display():
    assert RatingSummary(average=3.5, count=2).display == "3.5"
    assert RatingSummary(average=4.0, count=1).display == "4.0"
    assert RatingSummary(average=10 / 3, count=3).display == "3.3"
    assert NO_RATINGS.display == "—"


def test_total_coins():
    assert total_coins([]) == 0
    assert total_coins([
        CoinTransaction(id="t1", coins=40),
        CoinTransaction(id="t2", coins=-60),
    ]) == -20


@pytest.fixture
def activities(store, hostel):
    store.seed(
        "hostel_activities",
        {"id": "a1", "hostel_id": "h1", "type": "water", "title": "Rainwater tanks", "points": 40, "coins": 40},
        {"id": "a2", "hostel_id": "h1", "type": "energy", "title": "Solar panels", "points": 50, "coins": 50},
    )


async def test_aggregate_empty_activity_set_issues_no_request(services, store):
    aggregate = await services.aggregation.aggregate([])

    assert aggregate.is_empty
    assert aggregate.rating_for("a1") is NO_RATINGS
    assert store.calls == []


async def test_aggregate_joins_children_onto_activities(services, store, activities):
    store.seed(
        "event_comments",
        {"activity_id": "a1", "user_id": "u1", "comment": "Great idea"},
        {"activity_id": "a1", "user_id": "u2", "comment": "Loved it"},
    )
    store.seed("event_photos", {"activity_id": "a2", "user_id": "u1", "url": "https://x/p.jpg"})
    store.seed(
        "event_ratings",
        {"activity_id": "a1", "user_id": "u1", "rating": 4},
        {"activity_id": "a1", "user_id": "u2", "rating": 2},
    )
    rows = await services.activity_repository.list_for_hostel("h1")

    aggregate = await services.aggregation.aggregate(rows)

    assert [c.comment for c in aggregate.comments_for("a1")] == ["Great idea", "Loved it"]
    assert aggregate.comments_for("a2") == []
    assert len(aggregate.photos_for("a2")) == 1
    assert aggregate.videos_for("a1") == []
    assert aggregate.rating_for("a1") == RatingSummary(average=3.0, count=2)
    assert aggregate.rating_for("a2").display == "—"


async def test_aggregate_propagates_child_fetch_failure(services, store, activities):
    rows = await services.activity_repository.list_for_hostel("h1")
    store.fail("select", "event_ratings")

    with pytest.raises(RemoteFetchError) as exc_info:
        await services.aggregation.aggregate(rows)

    assert exc_info.value.details["resource"] == "event_ratings"


async def test_coin_ledger_balance(services, store, hostel):
    store.seed(
        "coin_transactions",
        {"hostel_id": "h1", "coins": 50, "description": "Solar panels"},
        {"hostel_id": "h1", "coins": -80, "description": "Redeemed"},
        {"hostel_id": "other", "coins": 30, "description": "Elsewhere"},
    )

    balance = await services.ledger.hostel_balance("h1")

    assert balance.total == -30
    assert len(balance.transactions) == 2
    assert (await services.ledger.hostel_balance("empty")).total == 0


async def test_comments_come_back_oldest_first(services, store, activities):
    store.seed(
        "event_comments",
        {"id": "late", "activity_id": "a1", "user_id": "u1", "comment": "Later", "created_at": "2024-03-02T10:00:00+00:00"},
        {"id": "early", "activity_id": "a1", "user_id": "u2", "comment": "Earlier", "created_at": "2024-03-01T10:00:00+00:00"},
        {"id": "middle", "activity_id": "a1", "user_id": "u3", "comment": "Between", "created_at": "2024-03-01T18:00:00+00:00"},
    )
    rows = await services.activity_repository.list_for_hostel("h1")

    aggregate = await services.aggregation.aggregate(rows)

    assert [c.id for c in aggregate.comments_for("a1")] == ["early", "middle", "late"]
