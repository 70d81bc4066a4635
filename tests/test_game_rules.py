import pytest

from wealth_quest.domain import game_rules
from wealth_quest.domain.board import TileType, Tier


@pytest.mark.parametrize(
    "streak, expected",
    [(0, 1.0), (1, 1.1), (3, 1.3), (10, 2.0), (25, 2.0)],
)
def test_streak_multiplier_caps_at_two(streak, expected):
    assert game_rules.streak_multiplier(streak) == pytest.approx(expected)


def test_apply_streak_multiplier_rounds_trivia_rewards():
    assert [game_rules.apply_streak_multiplier(120, s) for s in (1, 2, 3)] == [132, 144, 156]
    assert game_rules.apply_streak_multiplier(120, 12) == 240


def test_round_half_up():
    assert game_rules.round_half_up(2.5) == 3
    assert game_rules.round_half_up(-2.5) == -2
    assert game_rules.round_half_up(132.00000000000003) == 132


@pytest.mark.parametrize("income, expected", [(0, 0), (-10, 0), (20, 2), (35, 4), (200, 20)])
def test_passive_income_score(income, expected):
    assert game_rules.passive_income_score(income) == expected


def test_question_cash_by_tile_type():
    assert game_rules.question_cash(TileType.trivia, True) == 120
    assert game_rules.question_cash(TileType.invest, True) == 90
    assert game_rules.question_cash(TileType.risk, True) == 70
    assert game_rules.question_cash(TileType.trivia, False) == -80
    assert game_rules.question_cash(TileType.invest, False) == -80
    assert game_rules.question_cash(TileType.risk, False) == -140


def test_invest_passive_depends_on_tier():
    assert game_rules.question_passive(TileType.invest, Tier.kids, True) == 20
    assert game_rules.question_passive(TileType.invest, Tier.teens, True) == 35
    assert game_rules.question_passive(TileType.invest, Tier.adults, True) == 50
    assert game_rules.question_passive(TileType.invest, Tier.adults, False) == 0
    assert game_rules.question_passive(TileType.trivia, Tier.adults, True) == 0


def test_coin_reward_caps_streak_bonus():
    assert game_rules.coin_reward(1) == 6
    assert game_rules.coin_reward(20) == 25
    assert game_rules.coin_reward(40) == 25


def test_wrap_position():
    assert game_rules.wrap_position(14, 12) == (2, True)
    assert game_rules.wrap_position(12, 12) == (12, False)
    assert game_rules.wrap_position(13, 12) == (1, True)
