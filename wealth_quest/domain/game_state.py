from dataclasses import dataclass, field
from enum import Enum

from wealth_quest.domain.board import TileType, Tier
from wealth_quest.domain.decisions import Decision
from wealth_quest.domain.game_rules import START_CASH
from wealth_quest.domain.questions import Question

WELCOME_LOG = "Welcome to Wealth Quest! Select your difficulty to begin."


class GameStatus(str, Enum):
    setup = "setup"
    playing = "playing"
    paused = "paused"
    won = "won"


@dataclass(frozen=True)
class PendingPrompt:
    """The question or decision shown for the current roll.

    Exactly one of ``question`` and ``decision`` is set.
    """

    tile_type: TileType
    question: Question | None = None
    decision: Decision | None = None

    @property
    def option_count(self) -> int:
        if self.decision is not None:
            return len(self.decision.choices)
        return len(self.question.answers)


@dataclass(frozen=True)
class GameState:
    status: GameStatus = GameStatus.setup
    tier: Tier = Tier.teens
    position: int = 1
    cash: int = START_CASH
    passive_income: int = 0
    score: int = 0
    streak: int = 0
    best_streak: int = 0
    coins: int = 0
    xp: int = 0
    last_roll: int | None = None
    turn_moved: bool = False
    turn_resolved: bool = False
    pending: PendingPrompt | None = None
    logs: tuple[str, ...] = field(default_factory=lambda: (WELCOME_LOG,))


def initial_state() -> GameState:
    """Return the state shown on the setup screen before any game starts."""
    return GameState()


def new_game_state(tier: Tier) -> GameState:
    """Return a freshly started game for the given tier."""
    tier = Tier(tier)
    return GameState(
        status=GameStatus.playing,
        tier=tier,
        logs=(f"Started new game ({tier.value}). Start Cash: ${START_CASH}.",),
    )
