"""Reward and penalty rules that are independent from HTTP and storage.

This module is organized by *concept* (rules), not by tile type.

Rule of thumb:
- OK: constants, arithmetic, tier lookups.
- Not OK: touching the game state, storage, FastAPI, random draws.
"""

import math

from wealth_quest.domain.board import TileType, Tier

START_CASH = 500
GOAL_PASSIVE = 200

DICE_SIDES = 3

# ==============================================================================
# ==== Movement ================================================================
# ==============================================================================

PAYDAY_CASH = 200
PAYDAY_SCORE = 10

START_TILE_BONUS_CASH = 150
START_TILE_BONUS_SCORE = 8

# ==============================================================================
# ==== Questions ===============================================================
# ==============================================================================

CORRECT_SCORE = 15
INCORRECT_SCORE = -8

CORRECT_CASH = {
    TileType.invest: 90,
    TileType.risk: 70,
    TileType.trivia: 120,
}
INCORRECT_CASH = -80
INCORRECT_RISK_CASH = -140

INVEST_PASSIVE_REWARD = {
    Tier.kids: 20,
    Tier.teens: 35,
    Tier.adults: 50,
}

STREAK_STEP = 0.10
STREAK_BONUS_CAP = 1.0

COIN_BASE = 5
COIN_STREAK_CAP = 20
XP_PER_CORRECT = 10


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going towards +infinity."""
    return int(math.floor(value + 0.5))


def passive_income_score(passive_income: int) -> int:
    """Return the score earned when passive income is collected on a roll."""
    if passive_income <= 0:
        return 0
    return math.ceil(passive_income / 10)


def streak_multiplier(streak: int) -> float:
    """Return the cash multiplier for the given (already updated) streak.

    The multiplier grows by 0.10 per streak step and is capped at 2.0.
    """
    return 1 + min(STREAK_BONUS_CAP, streak * STREAK_STEP)


def apply_streak_multiplier(base_cash: int, streak: int) -> int:
    """Scale a question's cash reward by the streak multiplier."""
    return round_half_up(base_cash * streak_multiplier(streak))


def question_cash(tile_type: TileType, is_correct: bool) -> int:
    """Return the base (unmultiplied) cash delta for a question outcome."""
    if is_correct:
        return CORRECT_CASH[tile_type]
    if tile_type == TileType.risk:
        return INCORRECT_RISK_CASH
    return INCORRECT_CASH


def question_passive(tile_type: TileType, tier: Tier, is_correct: bool) -> int:
    """Return the passive income unlocked by a question outcome."""
    if is_correct and tile_type == TileType.invest:
        return INVEST_PASSIVE_REWARD[tier]
    return 0


def coin_reward(streak: int) -> int:
    """Return the coins granted for a correct answer at the given streak."""
    return COIN_BASE + min(COIN_STREAK_CAP, streak)


def clamp_score(score: int) -> int:
    return max(0, score)


def wrap_position(position: int, board_size: int) -> tuple[int, bool]:
    """Wrap a raw position onto the 1-indexed board ring.

    Args:
        position: position + roll, may exceed the board size.
        board_size: number of tiles on the ring.

    Returns:
        tuple[int, bool]: The wrapped position and whether Start was passed.
    """
    if position > board_size:
        return position - board_size, True
    return position, False
