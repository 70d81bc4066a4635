from pydantic import BaseModel, StrictInt, field_validator
from pydantic.alias_generators import to_camel


class ScoreInputModel(BaseModel):
    """Body of ``POST /scores``. Optional counters default to 0.

    Numeric fields are strict: strings and booleans are rejected, not coerced.
    """

    player_name: str
    score: StrictInt
    tier: str
    passive_income: StrictInt = 0
    streak: StrictInt = 0
    best_streak: StrictInt = 0
    coins: StrictInt = 0
    xp: StrictInt = 0

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("player_name")
    @classmethod
    def player_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("playerName must not be empty")
        return value

    @field_validator("passive_income", "streak", "best_streak", "coins", "xp", mode="before")
    @classmethod
    def missing_counter_is_zero(cls, value):
        return 0 if value is None else value
