"""Decision menus shown on decision tiles.

Result lines are stored as ``str.format`` templates. The only placeholders are
``{cash}``, ``{cash_delta}``, ``{passive_delta}`` (rendered as money) and
``{score_delta}``.
"""

from dataclasses import dataclass

from wealth_quest.domain.board import Tier


@dataclass(frozen=True)
class DecisionChoice:
    label: str
    cash_delta: int
    passive_delta: int
    score_delta: int
    explanation: str
    result_template: str


@dataclass(frozen=True)
class Decision:
    prompt: str
    choices: tuple[DecisionChoice, DecisionChoice, DecisionChoice]


def money(amount: int) -> str:
    """Format an amount as dollars without sign, e.g. ``$1,250``."""
    return f"${abs(amount):,}"


def format_result_line(choice: DecisionChoice, cash: int) -> str:
    """Render the result line of a choice.

    Args:
        choice (DecisionChoice): The chosen option.
        cash (int): Player cash after the choice was applied.

    Returns:
        str: The rendered line.
    """
    return choice.result_template.format(
        cash=money(cash),
        cash_delta=money(choice.cash_delta),
        passive_delta=money(choice.passive_delta),
        score_delta=choice.score_delta,
    )


def _by_tier(tier: Tier, kids: int, teens: int, adults: int) -> int:
    return {Tier.kids: kids, Tier.teens: teens, Tier.adults: adults}[tier]


def _start_business(tier: Tier) -> Decision:
    return Decision(
        prompt="Starting a small business: what’s your move?",
        choices=(
            DecisionChoice(
                label="Start a simple service (low cost) - pay $120, learn customers",
                cash_delta=-120,
                passive_delta=_by_tier(tier, 10, 20, 20),
                score_delta=12,
                explanation="Low-cost businesses teach sales and can become repeat income.",
                result_template="✅ You started small. Cash {cash}. Passive +{passive_delta}.",
            ),
            DecisionChoice(
                label="Buy expensive gear with no plan - pay $220",
                cash_delta=-220,
                passive_delta=0,
                score_delta=-6,
                explanation="Spending before validating demand can drain cash fast.",
                result_template="❌ Costly lesson. Cash {cash}. Validate demand first.",
            ),
            DecisionChoice(
                label="Do market research first (free) - gain strategy points",
                cash_delta=0,
                passive_delta=0,
                score_delta=8,
                explanation="Research reduces risk and improves future decisions.",
                result_template="✅ Smart move. You learned your market. Score +{score_delta}.",
            ),
        ),
    )


def _bank_loan(tier: Tier) -> Decision:
    return Decision(
        prompt="Banking: You need capital. What do you choose?",
        choices=(
            DecisionChoice(
                label="Apply for a small business loan (pay $60 fees, +$140 passive later)",
                cash_delta=-60,
                passive_delta=_by_tier(tier, 10, 25, 35),
                score_delta=10,
                explanation="Debt can help if it funds revenue that exceeds the cost of borrowing.",
                result_template="✅ You used credit wisely. Passive income increased.",
            ),
            DecisionChoice(
                label="Open a line of credit and spend it on wants (-$150)",
                cash_delta=-150,
                passive_delta=0,
                score_delta=-10,
                explanation="Using credit for non-productive spending creates stress and interest costs.",
                result_template="❌ Debt without returns hurts.",
            ),
            DecisionChoice(
                label="Bootstrap: save first (free) + small bonus",
                cash_delta=40,
                passive_delta=0,
                score_delta=6,
                explanation="Saving builds a buffer and reduces reliance on debt.",
                result_template="✅ You boosted your savings discipline. +{cash_delta} cash.",
            ),
        ),
    )


def _goal_setting(tier: Tier) -> Decision:
    return Decision(
        prompt="Goal Setting: Pick a wealth plan for the next 3 turns.",
        choices=(
            DecisionChoice(
                label="Auto-save + invest (pay $80 now, +$40 passive)",
                cash_delta=-80,
                passive_delta=_by_tier(tier, 15, 30, 40),
                score_delta=12,
                explanation="Automating good behavior is a powerful wealth habit.",
                result_template="✅ Automation activated. Passive income rose.",
            ),
            DecisionChoice(
                label="No plan (do nothing)",
                cash_delta=0,
                passive_delta=0,
                score_delta=-2,
                explanation="Without goals, money drifts into spending.",
                result_template="⚠️ No plan. Try setting a clear target next time.",
            ),
            DecisionChoice(
                label="Increase income: side hustle sprint (+$120 cash, -$10 passive)",
                cash_delta=120,
                passive_delta=-10,
                score_delta=6,
                explanation="Active income is great, but passive is what wins long term.",
                result_template="✅ Great hustle. Consider rebuilding passive income next.",
            ),
        ),
    )


DEFAULT_DECISION = Decision(
    prompt="Decision: Choose a smart money move.",
    choices=(
        DecisionChoice(
            label="Save 10% ( +$30 cash buffer )",
            cash_delta=30,
            passive_delta=0,
            score_delta=5,
            explanation="Small buffers prevent big problems.",
            result_template="✅ Buffer built.",
        ),
        DecisionChoice(
            label="Invest for the long term ( -$50 cash, +$20 passive )",
            cash_delta=-50,
            passive_delta=20,
            score_delta=10,
            explanation="Investing grows wealth over time.",
            result_template="✅ Long-term investing increased passive income.",
        ),
        DecisionChoice(
            label="Impulse spend ( -$70 )",
            cash_delta=-70,
            passive_delta=0,
            score_delta=-6,
            explanation="Impulse spending delays goals.",
            result_template="❌ Ouch. Try a spending plan.",
        ),
    ),
)

_DECISION_BUILDERS = {
    3: _start_business,
    6: _bank_loan,
    12: _goal_setting,
}


def get_decision(tile_id: int, tier: Tier) -> Decision:
    """Return the decision shown on a tile for the given tier.

    Tiles without an authored menu get the generic default decision.

    Raises:
        KeyError: The tier is unknown.
    """
    try:
        tier = Tier(tier)
    except ValueError:
        raise KeyError(f"Unknown tier: {tier}") from None

    builder = _DECISION_BUILDERS.get(tile_id)
    if builder is None:
        return DEFAULT_DECISION
    return builder(tier)
