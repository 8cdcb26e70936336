import pytest

from ecostay.core.exceptions import AuthenticationError, MissingFieldError, ValidationError
from ecostay.schemas.wish import WishDraft


async def test_top_wishes_are_open_by_votes_with_author(services, store):
    store.seed("profiles", {"id": "t1", "email": "t@example.com", "full_name": "Sam Rivera"})
    store.seed(
        "wishes",
        *[
            {"traveler_id": "t1", "title": f"Wish {n}", "votes": n, "status": "open"}
            for n in range(12)
        ],
        {"traveler_id": "t1", "title": "Done", "votes": 100, "status": "completed"},
    )

    wishes = await services.wishes.top_wishes()

    assert len(wishes) == 10
    assert [w.votes for w in wishes] == list(range(11, 1, -1))
    assert wishes[0].author_name == "Sam Rivera"


async def test_wish_without_author_profile(services, store):
    store.seed("wishes", {"traveler_id": "ghost", "title": "Bike rental", "votes": 1, "status": "open"})

    wishes = await services.wishes.top_wishes()

    assert wishes[0].author_name is None


async def test_submit_wish(services, store):
    wish = await services.wishes.submit("t1", WishDraft(title="Zero-waste kitchen", description="Please", country=""))

    assert wish.traveler_id == "t1"
    assert wish.country is None
    assert store.tables["wishes"][0]["title"] == "Zero-waste kitchen"


async def test_anonymous_wish_is_rejected(services, store):
    with pytest.raises(AuthenticationError):
        await services.wishes.submit(None, WishDraft(title="Anything", description="x"))

    assert store.calls == []


async def test_wish_requires_title_and_description(services):
    with pytest.raises(MissingFieldError) as exc_info:
        await services.wishes.submit("t1", WishDraft(title="Only a title"))

    assert exc_info.value.fields == ["description"]


async def test_threads_newest_first_and_posts_oldest_first(services, store):
    store.seed(
        "forum_threads",
        {"id": "th1", "title": "Older", "creator_id": "t1"},
        {"id": "th2", "title": "Newer", "creator_id": "t1", "country": "egypt"},
    )
    store.seed(
        "forum_posts",
        {"thread_id": "th1", "author_id": "t1", "content": "first"},
        {"thread_id": "th1", "author_id": "t2", "content": "second"},
        {"thread_id": "th2", "author_id": "t2", "content": "elsewhere"},
    )

    threads = await services.forum.list_threads()
    posts = await services.forum.list_posts("th1")

    assert [t.title for t in threads] == ["Newer", "Older"]
    assert [p.content for p in posts] == ["first", "second"]


@pytest.mark.parametrize("country, stored", [("all", None), ("", None), ("morocco", "morocco")])
async def test_thread_country_scope(services, store, country, stored):
    thread = await services.forum.create_thread("t1", "Water saving tips", country)

    assert thread.country == stored


async def test_thread_requires_user_and_title(services, store):
    with pytest.raises(ValidationError):
        await services.forum.create_thread(None, "Title")
    with pytest.raises(ValidationError):
        await services.forum.create_thread("t1", "   ")

    assert store.calls == []


async def test_post_requires_thread_and_content(services, store):
    with pytest.raises(ValidationError):
        await services.forum.create_post("t1", None, "hello")
    with pytest.raises(ValidationError):
        await services.forum.create_post("t1", "th1", "")

    post = await services.forum.create_post("t1", "th1", " hello ")
    assert post.content == "hello"
