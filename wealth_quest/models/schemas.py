from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.schema import Column
from sqlalchemy.types import DateTime, Integer, String


class Base(DeclarativeBase):
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Score(Base):
    __tablename__ = "scores"
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    player_name = Column(String, nullable=False)
    score = Column(Integer, nullable=False, index=True)
    tier = Column(String, nullable=False)
    passive_income = Column(Integer, default=0)
    streak = Column(Integer, default=0)
    best_streak = Column(Integer, default=0)
    coins = Column(Integer, default=0)
    xp = Column(Integer, default=0)
    created_at = Column(DateTime(timezone=True), default=_utcnow)
