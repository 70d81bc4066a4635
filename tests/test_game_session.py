from dataclasses import replace

import numpy as np
import pytest

from wealth_quest.domain.board import Tier
from wealth_quest.domain.game_state import GameStatus
from wealth_quest.domain.reducer import DiceRolled, IllegalTransition, ShowQuestion, TriggerWin
from wealth_quest.errors import IllegalTransitionError, PersistenceError, ScoreValidationError
from wealth_quest.services.game_session import GameSession
from wealth_quest.services.leaderboard import MemoryLeaderboardStore


class FailingStore(MemoryLeaderboardStore):
    async def create(self, score):
        raise PersistenceError("database unavailable")


def won_session(store):
    session = GameSession(store, rng=np.random.default_rng(3))
    session.start_game(Tier.adults)
    session.state = replace(session.state, position=4, passive_income=180, streak=2, best_streak=5, coins=30, xp=40)
    session.roll_and_move(roll=1)
    session.resolve_tile(question_index=0)
    effects = session.handle_answer(0)
    assert any(isinstance(effect, TriggerWin) for effect in effects)
    return session


def test_session_plays_a_turn():
    session = GameSession(MemoryLeaderboardStore(), rng=np.random.default_rng(11))
    assert session.state.status == GameStatus.setup
    session.start_game(Tier.kids)

    effects = session.roll_and_move(roll=1)
    assert effects == (DiceRolled(roll=1, position=2),)
    effects = session.resolve_tile()
    assert isinstance(effects[0], ShowQuestion)
    session.handle_answer(effects[0].question.correct_index)
    assert session.state.streak == 1
    session.end_turn()
    assert not session.state.turn_moved

    assert isinstance(session.end_turn()[0], IllegalTransition)
    assert session.last_effects[0].reason


def test_pause_resume_and_quit():
    session = GameSession(MemoryLeaderboardStore())
    session.start_game(Tier.teens)
    session.pause_game()
    assert session.state.status == GameStatus.paused
    assert isinstance(session.roll_and_move()[0], IllegalTransition)
    session.resume_game()
    assert session.state.status == GameStatus.playing
    session.quit_game()
    assert session.state.status == GameStatus.setup


@pytest.mark.asyncio
async def test_submit_score_stores_record_and_returns_to_setup():
    store = MemoryLeaderboardStore()
    session = won_session(store)
    record = await session.submit_score("Ada")

    assert record.player_name == "Ada"
    assert record.tier == "adults"
    assert record.passive_income == 230
    assert (record.streak, record.best_streak, record.coins, record.xp) == (3, 5, 30 + 8, 50)
    assert session.state.status == GameStatus.setup
    assert await store.count() == 1


@pytest.mark.asyncio
async def test_blank_name_is_rejected():
    session = won_session(MemoryLeaderboardStore())
    with pytest.raises(ScoreValidationError):
        await session.submit_score("  ")
    assert session.state.status == GameStatus.won


@pytest.mark.asyncio
async def test_failed_submission_keeps_game_state():
    session = won_session(FailingStore())
    before = session.state
    with pytest.raises(PersistenceError):
        await session.submit_score("Ada")
    assert session.state is before
    assert session.state.status == GameStatus.won


@pytest.mark.asyncio
async def test_submit_requires_won_game():
    session = GameSession(MemoryLeaderboardStore())
    session.start_game(Tier.kids)
    with pytest.raises(IllegalTransitionError):
        await session.submit_score("Ada")


def test_skip_score_returns_to_setup():
    session = won_session(MemoryLeaderboardStore())
    session.skip_score()
    assert session.state.status == GameStatus.setup
