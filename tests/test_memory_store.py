from ecostay.db.memory_store import InMemoryStore
from ecostay.db.remote_store import Query


def _seeded():
    store = InMemoryStore()
    store.seed(
        "wishes",
        {"id": "w1", "votes": 3},
        {"id": "w2", "votes": None},
        {"id": "w3", "votes": 7},
    )
    return store


async def test_descending_order_puts_nulls_first():
    rows = await _seeded().select("wishes", Query().order_by("votes", ascending=False))

    assert [r["id"] for r in rows] == ["w2", "w3", "w1"]


async def test_ascending_order_puts_nulls_last():
    rows = await _seeded().select("wishes", Query().order_by("votes"))

    assert [r["id"] for r in rows] == ["w1", "w3", "w2"]


async def test_secondary_order_breaks_ties():
    store = InMemoryStore()
    store.seed(
        "hostels",
        {"id": "h1", "eco_score": 50, "name": "b"},
        {"id": "h2", "eco_score": 80, "name": "c"},
        {"id": "h3", "eco_score": 50, "name": "a"},
    )

    rows = await store.select("hostels", Query().order_by("eco_score", ascending=False).order_by("name"))

    assert [r["id"] for r in rows] == ["h2", "h3", "h1"]


async def test_limit_and_in_filter():
    store = _seeded()

    rows = await store.select("wishes", Query().where_in("id", ["w1", "w3"]).order_by("votes").limit_to(1))

    assert [r["id"] for r in rows] == ["w1"]
