"""Turn-resolution reducer.

``reduce(state, command, rng)`` returns the next state and the effects the
presentation layer should play (modals, win sequence). It never mutates the
input state. Commands that the current status or turn flags forbid are
answered with the unchanged state and a single ``IllegalTransition`` effect.
"""

import logging
from dataclasses import dataclass, replace

import numpy as np

from wealth_quest.domain import game_rules
from wealth_quest.domain.board import BOARD_SIZE, TileType, Tier, get_tile
from wealth_quest.domain.decisions import Decision, format_result_line, get_decision
from wealth_quest.domain.game_state import (
    GameState,
    GameStatus,
    PendingPrompt,
    new_game_state,
)
from wealth_quest.domain.questions import Question, get_question_bank

# ==============================================================================
# ==== Commands ================================================================
# ==============================================================================


@dataclass(frozen=True)
class StartGame:
    tier: Tier


@dataclass(frozen=True)
class RollAndMove:
    roll: int | None = None  # drawn from the generator when None


@dataclass(frozen=True)
class ResolveTile:
    question_index: int | None = None  # drawn from the generator when None


@dataclass(frozen=True)
class HandleAnswer:
    choice_index: int


@dataclass(frozen=True)
class EndTurn:
    pass


@dataclass(frozen=True)
class PauseGame:
    pass


@dataclass(frozen=True)
class ResumeGame:
    pass


@dataclass(frozen=True)
class QuitGame:
    pass


@dataclass(frozen=True)
class FinishGame:
    """Leave the win screen, after the score was submitted or skipped."""


Command = (
    StartGame
    | RollAndMove
    | ResolveTile
    | HandleAnswer
    | EndTurn
    | PauseGame
    | ResumeGame
    | QuitGame
    | FinishGame
)

# ==============================================================================
# ==== Effects =================================================================
# ==============================================================================


@dataclass(frozen=True)
class IllegalTransition:
    command: Command
    reason: str


@dataclass(frozen=True)
class DiceRolled:
    roll: int
    position: int


@dataclass(frozen=True)
class ShowPayday:
    title: str
    description: str
    bonus: int


@dataclass(frozen=True)
class ShowDecision:
    title: str
    decision: Decision


@dataclass(frozen=True)
class ShowQuestion:
    tile_type: TileType
    title: str
    description: str
    question: Question


@dataclass(frozen=True)
class ShowResult:
    success: bool
    message: str
    explanation: str
    cash_delta: int
    passive_delta: int
    score_delta: int
    result_line: str | None = None


@dataclass(frozen=True)
class TriggerWin:
    passive_income: int
    score: int


@dataclass(frozen=True)
class TurnEnded:
    pass


Effect = (
    IllegalTransition
    | DiceRolled
    | ShowPayday
    | ShowDecision
    | ShowQuestion
    | ShowResult
    | TriggerWin
    | TurnEnded
)

Transition = tuple[GameState, tuple[Effect, ...]]

QUESTION_MODALS = {
    TileType.trivia: ("Trivia Challenge", "Answer correctly to earn cash."),
    TileType.invest: ("Investment Opportunity", "Correct answer unlocks passive income!"),
    TileType.risk: ("Risk Management", "Correct answer minimizes loss."),
}


def _reject(state: GameState, command: Command, reason: str) -> Transition:
    logging.debug(f"Rejected {type(command).__name__}: {reason}")
    return state, (IllegalTransition(command=command, reason=reason),)


def _log(state: GameState, *lines: str) -> tuple[str, ...]:
    return state.logs + lines


def _draw_roll(rng: np.random.Generator) -> int:
    return int(rng.integers(1, game_rules.DICE_SIDES + 1))


# ==============================================================================
# ==== Transitions =============================================================
# ==============================================================================


def start_game(state: GameState, command: StartGame) -> Transition:
    return new_game_state(command.tier), ()


def roll_and_move(state: GameState, command: RollAndMove, rng: np.random.Generator) -> Transition:
    """Roll the die, collect passive income and move along the ring.

    Args:
        state (GameState): Current state, must be playing with no move this turn.
        command (RollAndMove): Carries a fixed roll, or None to draw one.
        rng (np.random.Generator): Source of the roll.

    Returns:
        Transition: Moved state and a DiceRolled effect.
    """
    if state.status != GameStatus.playing:
        return _reject(state, command, f"game is {state.status.value}")
    if state.turn_moved:
        return _reject(state, command, "already moved this turn")

    roll = command.roll if command.roll is not None else _draw_roll(rng)
    if not 1 <= roll <= game_rules.DICE_SIDES:
        return _reject(state, command, f"roll {roll} is outside 1..{game_rules.DICE_SIDES}")

    lines = [f"🎲 Rolled {roll}."]
    income = state.passive_income
    cash = state.cash + income
    score = state.score
    if income > 0:
        lines.append(f"💸 Passive Income collected: +${income}")
        score += game_rules.passive_income_score(income)

    position, passed_start = game_rules.wrap_position(state.position + roll, BOARD_SIZE)
    if passed_start:
        cash += game_rules.PAYDAY_CASH
        score += game_rules.PAYDAY_SCORE
        lines.append(f"✅ Passed Start: Payday +${game_rules.PAYDAY_CASH}!")

    tile = get_tile(position)
    lines.append(f"📍 Moved to tile #{position}: {tile.label}")

    next_state = replace(
        state,
        last_roll=roll,
        position=position,
        cash=cash,
        score=game_rules.clamp_score(score),
        turn_moved=True,
        turn_resolved=False,
        pending=None,
        logs=_log(state, *lines),
    )
    return next_state, (DiceRolled(roll=roll, position=position),)


def resolve_tile(state: GameState, command: ResolveTile, rng: np.random.Generator) -> Transition:
    """Trigger the interaction of the tile the player stands on.

    Start tiles pay out immediately. Other tiles only record the pending
    prompt; the state changes when the answer arrives.
    """
    if state.status != GameStatus.playing:
        return _reject(state, command, f"game is {state.status.value}")
    if not state.turn_moved:
        return _reject(state, command, "roll before resolving a tile")
    if state.turn_resolved:
        return _reject(state, command, "tile already resolved this turn")
    if state.pending is not None:
        return _reject(state, command, "a prompt is already open")

    tile = get_tile(state.position)

    if tile.type == TileType.start:
        bonus = game_rules.START_TILE_BONUS_CASH
        next_state = replace(
            state,
            cash=state.cash + bonus,
            score=game_rules.clamp_score(state.score + game_rules.START_TILE_BONUS_SCORE),
            turn_resolved=True,
            logs=_log(state, f"💰 Landed on Start! Bonus +${bonus}"),
        )
        effect = ShowPayday(
            title="Payday!",
            description=f"You landed on Start. You earned ${bonus} for showing up.",
            bonus=bonus,
        )
        return next_state, (effect,)

    if tile.type == TileType.decision:
        decision = get_decision(tile.id, state.tier)
        pending = PendingPrompt(tile_type=tile.type, decision=decision)
        return replace(state, pending=pending), (ShowDecision(title="Make a Choice", decision=decision),)

    bank = get_question_bank(state.tier)
    index = command.question_index
    if index is None:
        index = int(rng.integers(len(bank)))
    if not 0 <= index < len(bank):
        return _reject(state, command, f"question {index} is out of range")
    question = bank[index]
    title, description = QUESTION_MODALS[tile.type]
    pending = PendingPrompt(tile_type=tile.type, question=question)
    effect = ShowQuestion(tile_type=tile.type, title=title, description=description, question=question)
    return replace(state, pending=pending), (effect,)


def handle_answer(state: GameState, command: HandleAnswer) -> Transition:
    """Apply the consequence of the chosen answer or decision option.

    Decisions apply their deltas as authored and leave the streak alone.
    Questions update the streak, scale the cash reward by the streak
    multiplier and grant coins and XP when correct.
    """
    if state.status != GameStatus.playing:
        return _reject(state, command, f"game is {state.status.value}")
    if state.pending is None or state.turn_resolved:
        return _reject(state, command, "no open prompt")
    if not 0 <= command.choice_index < state.pending.option_count:
        return _reject(state, command, f"choice {command.choice_index} is out of range")

    pending = state.pending
    streak = state.streak
    best_streak = state.best_streak
    coins = state.coins
    xp = state.xp
    result_line = None

    if pending.decision is not None:
        choice = pending.decision.choices[command.choice_index]
        cash_delta = choice.cash_delta
        passive_delta = choice.passive_delta
        score_delta = choice.score_delta
        explanation = choice.explanation
        success = cash_delta + passive_delta >= 0 or score_delta > 0

        message = f"{choice.label} selected. "
        if cash_delta != 0:
            message += f"Cash: {cash_delta:+d}. "
        if passive_delta != 0:
            message += f"Passive: {passive_delta:+d}. "
        message = message.rstrip()
        result_line = format_result_line(choice, state.cash + cash_delta)
    else:
        question = pending.question
        is_correct = command.choice_index == question.correct_index
        explanation = question.explanation
        success = is_correct

        streak = streak + 1 if is_correct else 0
        best_streak = max(best_streak, streak)

        cash_delta = game_rules.apply_streak_multiplier(
            game_rules.question_cash(pending.tile_type, is_correct), streak
        )
        passive_delta = game_rules.question_passive(pending.tile_type, state.tier, is_correct)
        if is_correct:
            score_delta = game_rules.CORRECT_SCORE
            coins += game_rules.coin_reward(streak)
            xp += game_rules.XP_PER_CORRECT
        else:
            score_delta = game_rules.INCORRECT_SCORE
        message = _question_message(pending.tile_type, is_correct)

    next_state = replace(
        state,
        cash=state.cash + cash_delta,
        passive_income=state.passive_income + passive_delta,
        score=game_rules.clamp_score(state.score + score_delta),
        streak=streak,
        best_streak=best_streak,
        coins=coins,
        xp=xp,
        turn_resolved=True,
        pending=None,
        logs=_log(state, message),
    )
    effects: list[Effect] = [
        ShowResult(
            success=success,
            message=message,
            explanation=explanation,
            cash_delta=cash_delta,
            passive_delta=passive_delta,
            score_delta=score_delta,
            result_line=result_line,
        )
    ]

    if next_state.passive_income >= game_rules.GOAL_PASSIVE:
        next_state = replace(
            next_state,
            status=GameStatus.won,
            logs=_log(next_state, "🏆 Passive income goal reached!"),
        )
        effects.append(TriggerWin(passive_income=next_state.passive_income, score=next_state.score))

    return next_state, tuple(effects)


def _question_message(tile_type: TileType, is_correct: bool) -> str:
    if is_correct:
        if tile_type == TileType.invest:
            return "Correct! You secured the investment."
        if tile_type == TileType.risk:
            return "Correct! You managed the risk well."
        return "Correct! Knowledge pays off."
    if tile_type == TileType.risk:
        return "Incorrect. The risk event hit hard."
    return "Incorrect. Missed opportunity."


def end_turn(state: GameState, command: EndTurn) -> Transition:
    if state.status != GameStatus.playing:
        return _reject(state, command, f"game is {state.status.value}")
    if not state.turn_resolved:
        return _reject(state, command, "resolve the tile before ending the turn")

    next_state = replace(
        state,
        last_roll=None,
        turn_moved=False,
        turn_resolved=False,
        logs=_log(state, "--- Turn Ended ---"),
    )
    return next_state, (TurnEnded(),)


def pause_game(state: GameState, command: PauseGame) -> Transition:
    if state.status != GameStatus.playing:
        return _reject(state, command, f"cannot pause while {state.status.value}")
    return replace(state, status=GameStatus.paused), ()


def resume_game(state: GameState, command: ResumeGame) -> Transition:
    if state.status != GameStatus.paused:
        return _reject(state, command, f"cannot resume while {state.status.value}")
    return replace(state, status=GameStatus.playing), ()


def quit_game(state: GameState, command: QuitGame) -> Transition:
    return replace(state, status=GameStatus.setup, pending=None), ()


def finish_game(state: GameState, command: FinishGame) -> Transition:
    if state.status != GameStatus.won:
        return _reject(state, command, f"game is {state.status.value}, not won")
    return replace(state, status=GameStatus.setup), ()


def reduce(state: GameState, command: Command, rng: np.random.Generator | None = None) -> Transition:
    """Apply one command to the game state.

    Args:
        state (GameState): Current state; left untouched.
        command (Command): The player action.
        rng (np.random.Generator, optional): Source for dice rolls and question
            draws. A fresh generator is used when omitted.

    Returns:
        Transition: The next state and the effects to present.
    """
    if rng is None:
        rng = np.random.default_rng()

    if isinstance(command, StartGame):
        return start_game(state, command)
    if isinstance(command, RollAndMove):
        return roll_and_move(state, command, rng)
    if isinstance(command, ResolveTile):
        return resolve_tile(state, command, rng)
    if isinstance(command, HandleAnswer):
        return handle_answer(state, command)
    if isinstance(command, EndTurn):
        return end_turn(state, command)
    if isinstance(command, PauseGame):
        return pause_game(state, command)
    if isinstance(command, ResumeGame):
        return resume_game(state, command)
    if isinstance(command, QuitGame):
        return quit_game(state, command)
    if isinstance(command, FinishGame):
        return finish_game(state, command)
    raise TypeError(f"Unknown command: {command!r}")
