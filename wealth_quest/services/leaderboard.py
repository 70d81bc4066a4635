"""Leaderboard storage for finished games.

- Routers and sessions only talk to the ``LeaderboardStore`` contract.
- Each backend owns its own locking/transaction boundaries.
- The backend is picked by an explicit argument to ``create_leaderboard_store``.
"""

import asyncio
import json
import logging
import os
import pathlib
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from wealth_quest.create_postgres_engine import create_postgres_engine
from wealth_quest.create_sqlite_engine import create_sqlite_engine
from wealth_quest.crud import CreateData, CreateTable, ReadData
from wealth_quest.db import make_session_factory
from wealth_quest.errors import PersistenceError
from wealth_quest.models.dc_models import ScoreInputModel
from wealth_quest.models.schema_models import ScoreRecordSchema

DEMO_SCORES = (
    ScoreInputModel(player_name="MoneyMaster", score=450, tier="adults", passive_income=250),
    ScoreInputModel(player_name="SaverKid", score=320, tier="kids", passive_income=180),
    ScoreInputModel(player_name="TeenTycoon", score=380, tier="teens", passive_income=210),
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _rank(records: List[ScoreRecordSchema], limit: int) -> List[ScoreRecordSchema]:
    # sorted() is stable, so equal scores keep insertion order.
    return sorted(records, key=lambda record: -record.score)[:limit]


def _new_record(record_id: int, score: ScoreInputModel) -> ScoreRecordSchema:
    return ScoreRecordSchema(
        id=record_id,
        created_at=_utcnow(),
        **score.model_dump(),
    )


class LeaderboardStore(ABC):
    """Persists finished-game scores and lists the best ones."""

    async def init(self) -> None:
        """Prepare the backing storage. Safe to call more than once."""

    async def close(self) -> None:
        """Release the backing storage."""

    @abstractmethod
    async def list_top(self, limit: int) -> List[ScoreRecordSchema]:
        """Return at most ``limit`` records by descending score, oldest first on ties."""

    @abstractmethod
    async def create(self, score: ScoreInputModel) -> ScoreRecordSchema:
        """Store a score and return it with its assigned id and creation time.

        Raises:
            PersistenceError: The record could not be stored.
        """

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored records."""


class MemoryLeaderboardStore(LeaderboardStore):
    def __init__(self):
        self.scores: List[ScoreRecordSchema] = []
        self.next_id = 1
        self.lock = asyncio.Lock()  # guards next_id

    async def list_top(self, limit: int) -> List[ScoreRecordSchema]:
        return _rank(self.scores, limit)

    async def create(self, score: ScoreInputModel) -> ScoreRecordSchema:
        async with self.lock:
            record = _new_record(self.next_id, score)
            self.next_id += 1
            self.scores.append(record)
        return record

    async def count(self) -> int:
        return len(self.scores)


class FileLeaderboardStore(LeaderboardStore):
    """Keeps every score in a single JSON document rewritten on each create.

    Layout: ``{"scores": [...], "nextId": int, "lastUpdated": ISO-8601}``.
    A missing or unreadable file starts an empty leaderboard.
    """

    def __init__(self, file_path: str | pathlib.Path):
        self.file_path = pathlib.Path(file_path)
        self.scores: List[ScoreRecordSchema] = []
        self.next_id = 1
        self.lock = asyncio.Lock()  # serializes id assignment and file writes
        self._load_from_file()

    def _load_from_file(self) -> None:
        if not self.file_path.exists():
            logging.info(f"No existing score file at {self.file_path}, starting fresh")
            return
        try:
            data = json.loads(self.file_path.read_text(encoding="utf-8"))
            now = _utcnow().isoformat()
            scores = [
                ScoreRecordSchema.model_validate({"createdAt": now, **item})
                for item in data.get("scores", [])
            ]
        except (OSError, ValueError, AttributeError, TypeError, ValidationError) as e:
            logging.error(f"Failed to load scores from {self.file_path}, starting empty: {e}")
            return

        highest_id = max((record.id for record in scores), default=0)
        next_id = data.get("nextId")
        self.scores = scores
        self.next_id = max(next_id if isinstance(next_id, int) else 0, highest_id + 1)
        logging.info(f"Loaded {len(self.scores)} scores from {self.file_path}")

    def _write_file(self, scores: List[ScoreRecordSchema], next_id: int) -> None:
        document = {
            "scores": [record.model_dump(mode="json", by_alias=True) for record in scores],
            "nextId": next_id,
            "lastUpdated": _utcnow().isoformat(),
        }
        tmp_path = self.file_path.with_name(self.file_path.name + ".tmp")
        tmp_path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp_path, self.file_path)

    async def list_top(self, limit: int) -> List[ScoreRecordSchema]:
        return _rank(self.scores, limit)

    async def create(self, score: ScoreInputModel) -> ScoreRecordSchema:
        async with self.lock:
            record = _new_record(self.next_id, score)
            scores = self.scores + [record]
            loop = asyncio.get_running_loop()
            try:
                await loop.run_in_executor(None, self._write_file, scores, self.next_id + 1)
            except OSError as e:
                logging.error(f"Failed to save scores to {self.file_path}: {e}")
                raise PersistenceError(f"Could not write {self.file_path}") from e
            self.scores = scores
            self.next_id += 1
        logging.info(f"Saved {len(self.scores)} scores to {self.file_path}")
        return record

    async def count(self) -> int:
        return len(self.scores)


class DatabaseLeaderboardStore(LeaderboardStore):
    """Stores scores in the ``scores`` table through async SQLAlchemy."""

    def __init__(self, engine: AsyncEngine, session_factory: async_sessionmaker[AsyncSession] | None = None):
        self.engine = engine
        self.Session = session_factory or make_session_factory(engine)

    async def init(self) -> None:
        await CreateTable.create_table(self.engine)

    async def close(self) -> None:
        await self.engine.dispose()

    async def list_top(self, limit: int) -> List[ScoreRecordSchema]:
        async with self.Session() as session:
            return await ReadData.read_top_scores(limit, session)

    async def create(self, score: ScoreInputModel) -> ScoreRecordSchema:
        async with self.Session() as session:
            return await CreateData.create_score_data(score, session)

    async def count(self) -> int:
        async with self.Session() as session:
            return await ReadData.count_scores(session)


def create_leaderboard_store(
    backend: str,
    *,
    scores_file: str | pathlib.Path | None = None,
    database_url: str | None = None,
    sqlite_file: str | pathlib.Path | None = None,
) -> LeaderboardStore:
    """Build the store for the requested backend.

    Args:
        backend (str): "memory", "file" or "database".
        scores_file (str | Path, optional): JSON document for the file backend.
        database_url (str, optional): ``postgresql+asyncpg://`` URL for the database backend.
        sqlite_file (str | Path, optional): SQLite file used when no database URL is given.

    Returns:
        LeaderboardStore: The unopened store; call ``init()`` before use.
    """
    if backend == "memory":
        logging.info("Using in-memory leaderboard")
        return MemoryLeaderboardStore()
    if backend == "file":
        if scores_file is None:
            raise ValueError("scores_file is required for the file backend")
        logging.info(f"Using JSON file leaderboard at {scores_file}")
        return FileLeaderboardStore(scores_file)
    if backend == "database":
        if database_url is not None:
            logging.info("Using PostgreSQL leaderboard")
            return DatabaseLeaderboardStore(create_postgres_engine(database_url))
        if sqlite_file is None:
            raise ValueError("database_url or sqlite_file is required for the database backend")
        logging.info(f"Using SQLite leaderboard at {sqlite_file}")
        return DatabaseLeaderboardStore(create_sqlite_engine(sqlite_file))
    raise ValueError(f"Unknown storage backend: {backend}")


async def seed_demo_scores(store: LeaderboardStore) -> int:
    """Insert the demonstration scores when the leaderboard is empty.

    Returns:
        int: Number of records inserted.
    """
    if await store.count() > 0:
        return 0
    for score in DEMO_SCORES:
        await store.create(score)
    logging.info(f"Seeded {len(DEMO_SCORES)} demo scores")
    return len(DEMO_SCORES)
