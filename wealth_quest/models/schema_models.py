from datetime import datetime

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel


class ScoreRecordSchema(BaseModel):
    """A stored leaderboard entry, serialized with camelCase keys."""

    id: int
    player_name: str
    score: int
    tier: str
    passive_income: int = 0
    streak: int = 0
    best_streak: int = 0
    coins: int = 0
    xp: int = 0
    created_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("passive_income", "streak", "best_streak", "coins", "xp", mode="before")
    @classmethod
    def missing_counter_is_zero(cls, value):
        return 0 if value is None else value
