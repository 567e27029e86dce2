
import pytest
from sqlalchemy import text

from bingebase.exceptions import StoreError
from bingebase.repositories.watchlist_repository import WatchlistRepository


@pytest.fixture
def repo(engine):
    return WatchlistRepository(engine)


async def _backdate(engine, content_id, added_at):
    async with engine.begin() as conn:
        await conn.execute(
            text("UPDATE watchlist SET added_at = :added_at WHERE content_id = :content_id"),
            {"added_at": added_at, "content_id": content_id},
        )


@pytest.mark.asyncio
async def test_add_and_list(repo):
    await repo.add("alice", 550, "movie")

    entries = await repo.get_watchlist("alice")

    assert len(entries) == 1
    entry = entries[0]
    assert entry.user_id == "alice"
    assert entry.content_id == 550
    assert entry.content_type == "movie"
    assert entry.is_watched is False
    assert entry.watched_at is None
    assert entry.added_at is not None


@pytest.mark.asyncio
async def test_empty_watchlist(repo):
    assert await repo.get_watchlist("nobody") == []


@pytest.mark.asyncio
async def test_newest_first(repo, engine):
    await repo.add("alice", 1, "movie")
    await repo.add("alice", 2, "tv")
    await repo.add("alice", 3, "movie")
    await _backdate(engine, 1, "2024-01-03 00:00:00")
    await _backdate(engine, 2, "2024-01-01 00:00:00")
    await _backdate(engine, 3, "2024-01-02 00:00:00")

    entries = await repo.get_watchlist("alice")

    assert [e.content_id for e in entries] == [1, 3, 2]


@pytest.mark.asyncio
async def test_same_timestamp_latest_insert_first(repo, engine):
    await repo.add("alice", 1, "movie")
    await repo.add("alice", 2, "movie")
    await _backdate(engine, 1, "2024-01-01 00:00:00")
    await _backdate(engine, 2, "2024-01-01 00:00:00")

    entries = await repo.get_watchlist("alice")

    assert [e.content_id for e in entries] == [2, 1]


@pytest.mark.asyncio
async def test_same_id_different_kinds_are_distinct(repo):
    await repo.add("alice", 1399, "movie")
    await repo.add("alice", 1399, "tv")

    entries = await repo.get_watchlist("alice")

    assert sorted(e.content_type for e in entries) == ["movie", "tv"]


@pytest.mark.asyncio
async def test_readd_resets_watched_state(repo):
    await repo.add("alice", 550, "movie")
    await repo.mark_as_watched("alice", 550, "movie", True)

    await repo.add("alice", 550, "movie")

    entries = await repo.get_watchlist("alice")
    assert len(entries) == 1
    assert entries[0].is_watched is False
    assert entries[0].watched_at is None


@pytest.mark.asyncio
async def test_mark_watched_and_unwatched(repo):
    await repo.add("alice", 550, "movie")

    await repo.mark_as_watched("alice", 550, "movie", True)
    entry = (await repo.get_watchlist("alice"))[0]
    assert entry.is_watched is True
    assert entry.watched_at is not None

    await repo.mark_as_watched("alice", 550, "movie", False)
    entry = (await repo.get_watchlist("alice"))[0]
    assert entry.is_watched is False
    assert entry.watched_at is None


@pytest.mark.asyncio
async def test_mark_missing_entry_is_noop(repo):
    await repo.mark_as_watched("alice", 1, "movie", True)
    assert await repo.get_watchlist("alice") == []


@pytest.mark.asyncio
async def test_remove(repo):
    await repo.add("alice", 550, "movie")
    await repo.add("alice", 550, "tv")

    await repo.remove("alice", 550, "movie")

    entries = await repo.get_watchlist("alice")
    assert [(e.content_id, e.content_type) for e in entries] == [(550, "tv")]


@pytest.mark.asyncio
async def test_remove_missing_entry_is_noop(repo):
    await repo.remove("alice", 404, "tv")
    assert await repo.get_watchlist("alice") == []


@pytest.mark.asyncio
async def test_users_are_isolated(repo):
    await repo.add("alice", 1, "movie")
    await repo.add("bob", 2, "movie")

    assert [e.content_id for e in await repo.get_watchlist("alice")] == [1]
    assert [e.content_id for e in await repo.get_watchlist("bob")] == [2]


@pytest.mark.asyncio
async def test_invalid_content_type_raises_store_error(repo):
    with pytest.raises(StoreError):
        await repo.add("alice", 1, "book")
