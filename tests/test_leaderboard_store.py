import asyncio
import json

import pytest
import pytest_asyncio

from wealth_quest.create_sqlite_engine import create_sqlite_engine
from wealth_quest.errors import PersistenceError
from wealth_quest.models.dc_models import ScoreInputModel
from wealth_quest.services.leaderboard import (
    DatabaseLeaderboardStore,
    FileLeaderboardStore,
    MemoryLeaderboardStore,
    create_leaderboard_store,
    seed_demo_scores,
)


def score_input(name, score, tier="kids", **extra):
    return ScoreInputModel(player_name=name, score=score, tier=tier, **extra)


@pytest_asyncio.fixture(params=["memory", "file", "database"])
async def store(request, tmp_path):
    if request.param == "memory":
        leaderboard_store = MemoryLeaderboardStore()
    elif request.param == "file":
        leaderboard_store = FileLeaderboardStore(tmp_path / "scores-data.json")
    else:
        leaderboard_store = DatabaseLeaderboardStore(create_sqlite_engine(tmp_path / "scores.sqlite3"))
    await leaderboard_store.init()
    yield leaderboard_store
    await leaderboard_store.close()


@pytest.mark.asyncio
async def test_list_top_orders_by_score_descending(store):
    for name, score in [("a", 450), ("b", 320), ("c", 380)]:
        await store.create(score_input(name, score))
    records = await store.list_top(10)
    assert [record.score for record in records] == [450, 380, 320]


@pytest.mark.asyncio
async def test_ties_keep_insertion_order(store):
    for name in ["first", "second", "third"]:
        await store.create(score_input(name, 100))
    await store.create(score_input("best", 200))
    records = await store.list_top(10)
    assert [record.player_name for record in records] == ["best", "first", "second", "third"]


@pytest.mark.asyncio
async def test_list_top_limits_but_keeps_everything(store):
    for i in range(5):
        await store.create(score_input(f"p{i}", i * 10))
    assert len(await store.list_top(2)) == 2
    assert await store.count() == 5


@pytest.mark.asyncio
async def test_missing_counters_default_to_zero(store):
    record = await store.create(ScoreInputModel.model_validate({"playerName": "X", "score": 10, "tier": "kids"}))
    assert (record.streak, record.best_streak, record.coins, record.xp, record.passive_income) == (0, 0, 0, 0, 0)
    assert record.created_at is not None


@pytest.mark.asyncio
async def test_ids_are_unique_and_increasing(store):
    first = await store.create(score_input("a", 1))
    second = await store.create(score_input("b", 2))
    assert second.id > first.id


@pytest.mark.asyncio
async def test_concurrent_creates_get_distinct_ids(store):
    records = await asyncio.gather(*(store.create(score_input(f"p{i}", i)) for i in range(10)))
    assert len({record.id for record in records}) == 10


@pytest.mark.asyncio
async def test_seed_only_fills_empty_store(store):
    assert await seed_demo_scores(store) == 3
    assert await seed_demo_scores(store) == 0
    records = await store.list_top(10)
    assert [record.player_name for record in records] == ["MoneyMaster", "TeenTycoon", "SaverKid"]
    assert {record.tier for record in records} == {"kids", "teens", "adults"}


class TestFileStore:
    @pytest.mark.asyncio
    async def test_scores_survive_reload(self, tmp_path):
        path = tmp_path / "scores-data.json"
        store = FileLeaderboardStore(path)
        await store.create(score_input("Ada", 300, tier="adults", streak=4))
        await store.create(score_input("Bo", 120))

        document = json.loads(path.read_text(encoding="utf-8"))
        assert document["nextId"] == 3
        assert "lastUpdated" in document
        assert document["scores"][0]["playerName"] == "Ada"
        assert document["scores"][0]["bestStreak"] == 0

        reloaded = FileLeaderboardStore(path)
        records = await reloaded.list_top(10)
        assert [(r.id, r.player_name, r.streak) for r in records] == [(1, "Ada", 4), (2, "Bo", 0)]
        third = await reloaded.create(score_input("Cy", 50))
        assert third.id == 3

    @pytest.mark.asyncio
    async def test_corrupt_file_starts_empty(self, tmp_path):
        path = tmp_path / "scores-data.json"
        path.write_text("{not json", encoding="utf-8")
        store = FileLeaderboardStore(path)
        assert await store.count() == 0
        record = await store.create(score_input("a", 1))
        assert record.id == 1

    @pytest.mark.asyncio
    async def test_null_counters_do_not_discard_other_records(self, tmp_path):
        path = tmp_path / "scores-data.json"
        document = {
            "scores": [
                {"id": 1, "playerName": "A", "score": 50, "tier": "kids", "passiveIncome": 10, "streak": 1,
                 "bestStreak": 2, "coins": 3, "xp": 4, "createdAt": "2024-01-01T00:00:00+00:00"},
                {"id": 2, "playerName": "B", "score": 40, "tier": "teens", "passiveIncome": None, "streak": None,
                 "bestStreak": None, "coins": None, "xp": None},
            ],
            "nextId": 3,
        }
        path.write_text(json.dumps(document), encoding="utf-8")

        store = FileLeaderboardStore(path)
        records = await store.list_top(10)
        assert [(r.player_name, r.coins, r.xp) for r in records] == [("A", 3, 4), ("B", 0, 0)]

        await store.create(score_input("C", 30))
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert [item["playerName"] for item in saved["scores"]] == ["A", "B", "C"]

    @pytest.mark.asyncio
    async def test_write_failure_raises_and_keeps_memory(self, tmp_path):
        store = FileLeaderboardStore(tmp_path / "missing-dir" / "scores-data.json")
        with pytest.raises(PersistenceError):
            await store.create(score_input("a", 1))
        assert await store.count() == 0
        assert store.next_id == 1


@pytest.mark.asyncio
async def test_database_without_table_raises_persistence_error(tmp_path):
    store = DatabaseLeaderboardStore(create_sqlite_engine(tmp_path / "empty.sqlite3"))
    with pytest.raises(PersistenceError):
        await store.create(score_input("a", 1))
    await store.close()


def test_factory_picks_backend_from_argument(tmp_path):
    assert isinstance(create_leaderboard_store("memory"), MemoryLeaderboardStore)
    assert isinstance(
        create_leaderboard_store("file", scores_file=tmp_path / "s.json"),
        FileLeaderboardStore,
    )
    assert isinstance(
        create_leaderboard_store("database", sqlite_file=tmp_path / "s.sqlite3"),
        DatabaseLeaderboardStore,
    )
    with pytest.raises(ValueError):
        create_leaderboard_store("redis")
