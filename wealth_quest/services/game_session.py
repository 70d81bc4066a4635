"""Session controller that owns one game and reports it to the leaderboard."""

import logging

import numpy as np
from pydantic import ValidationError

from wealth_quest.converter import DataConverter
from wealth_quest.domain.board import Tier
from wealth_quest.domain.game_state import GameState, GameStatus, initial_state
from wealth_quest.domain.reducer import (
    Command,
    EndTurn,
    FinishGame,
    HandleAnswer,
    PauseGame,
    QuitGame,
    ResolveTile,
    ResumeGame,
    RollAndMove,
    StartGame,
    Effect,
    reduce,
)
from wealth_quest.errors import IllegalTransitionError, ScoreValidationError
from wealth_quest.models.schema_models import ScoreRecordSchema
from wealth_quest.services.leaderboard import LeaderboardStore

data_converter = DataConverter()


class GameSession:
    def __init__(self, store: LeaderboardStore, rng: np.random.Generator | None = None):
        self.store = store
        self.rng = rng if rng is not None else np.random.default_rng()
        self.state: GameState = initial_state()
        self.last_effects: tuple[Effect, ...] = ()

    def dispatch(self, command: Command) -> tuple[Effect, ...]:
        """Apply a command to the owned state and return its effects."""
        self.state, self.last_effects = reduce(self.state, command, self.rng)
        return self.last_effects

    def start_game(self, tier: Tier) -> tuple[Effect, ...]:
        logging.info(f"Starting game ({Tier(tier).value})")
        return self.dispatch(StartGame(tier=tier))

    def roll_and_move(self, roll: int | None = None) -> tuple[Effect, ...]:
        return self.dispatch(RollAndMove(roll=roll))

    def resolve_tile(self, question_index: int | None = None) -> tuple[Effect, ...]:
        return self.dispatch(ResolveTile(question_index=question_index))

    def handle_answer(self, choice_index: int) -> tuple[Effect, ...]:
        return self.dispatch(HandleAnswer(choice_index=choice_index))

    def end_turn(self) -> tuple[Effect, ...]:
        return self.dispatch(EndTurn())

    def pause_game(self) -> tuple[Effect, ...]:
        return self.dispatch(PauseGame())

    def resume_game(self) -> tuple[Effect, ...]:
        return self.dispatch(ResumeGame())

    def quit_game(self) -> tuple[Effect, ...]:
        return self.dispatch(QuitGame())

    def skip_score(self) -> tuple[Effect, ...]:
        return self.dispatch(FinishGame())

    async def submit_score(self, player_name: str) -> ScoreRecordSchema:
        """Store the finished game on the leaderboard and return to setup.

        Args:
            player_name (str): Name entered on the win screen

        Raises:
            IllegalTransitionError: The game is not won
            ScoreValidationError: The name is blank
            PersistenceError: The store failed; the game stays won so the player can retry

        Returns:
            ScoreRecordSchema: The stored record
        """
        if self.state.status != GameStatus.won:
            raise IllegalTransitionError(f"Cannot submit a score while {self.state.status.value}")
        try:
            score = data_converter.convert_gamestate_to_scoreinput(self.state, player_name)
        except ValidationError as e:
            raise ScoreValidationError("Name required") from e

        record = await self.store.create(score)
        logging.info(f"Saved score {record.score} for {record.player_name} (id={record.id})")
        self.dispatch(FinishGame())
        return record
