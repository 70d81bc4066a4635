"""Question banks per tier."""

from dataclasses import dataclass

from wealth_quest.domain.board import Tier


@dataclass(frozen=True)
class Question:
    topic: str
    prompt: str
    answers: tuple[str, ...]
    correct_index: int
    explanation: str


def _q(topic: str, prompt: str, answers: list[str], correct_index: int, explanation: str) -> Question:
    return Question(topic, prompt, tuple(answers), correct_index, explanation)


QUESTIONS: dict[Tier, tuple[Question, ...]] = {
    Tier.kids: (
        _q("saving", "What does it mean to save money?", ["Spend it now", "Keep it for later", "Throw it away"], 1, "Saving means holding money for future needs or goals."),
        _q("budget", "A budget is a plan for your…", ["Games", "Money", "Shoes"], 1, "A budget helps you decide how to use money."),
        _q("banking", "Where can people keep money safe?", ["A bank", "A pizza box", "A sidewalk"], 0, "Banks are made for storing money safely."),
        _q("needswants", "Food is a…", ["Need", "Want", "Toy"], 0, "Needs are required to live."),
        _q("needswants", "A new video game is usually a…", ["Need", "Want", "Rule"], 1, "Wants are fun but not required."),
        _q("income", "Money you earn from work is called…", ["Income", "Dust", "Candy"], 0, "Income is money you receive for working."),
        _q("business", "A business makes money by…", ["Helping people", "Breaking things", "Hiding"], 0, "Businesses solve problems for customers."),
        _q("goals", "A good money goal should be…", ["Clear", "Secret", "Impossible"], 0, "Clear goals are easier to plan for."),
        _q("interest", "Interest is…", ["Extra money added", "A snack", "A jacket"], 0, "Interest can be earned on savings."),
        _q("hysa", "A high-yield savings account usually gives…", ["More interest", "Less interest", "No interest"], 0, "HYSA often pays higher interest than regular savings."),
        _q("spending", "Tracking spending means you…", ["Forget purchases", "Write down what you buy", "Buy more"], 1, "Tracking shows where your money goes."),
        _q("taxes", "Taxes are money paid to…", ["Government", "Cartoons", "Pets"], 0, "Taxes help pay for public services."),
        _q("stocks", "Buying a stock means you own a…", ["Piece of a company", "Piece of candy", "Piece of paper only"], 0, "A stock can represent ownership in a company."),
        _q("diversify", "Diversifying means…", ["All money in one thing", "Spreading money across choices", "Never saving"], 1, "Spreading out can reduce risk."),
        _q("crypto", "Crypto is a type of…", ["Digital money", "Homework", "Food"], 0, "Crypto is a digital asset people can buy/sell."),
        _q("scams", "A scam is when someone tries to…", ["Help you", "Trick you for money", "Teach you"], 1, "Scammers try to steal money or information."),
        _q("credit", "Credit means…", ["Borrow now, pay later", "Free money forever", "No money"], 0, "Credit lets you borrow and repay later."),
        _q("debt", "Debt is money you…", ["Owe", "Found", "Threw away"], 0, "Debt must be paid back."),
        _q("insurance", "Insurance helps you…", ["Protect from big costs", "Get candy", "Win games"], 0, "Insurance reduces financial risk."),
        _q("realestate", "Real estate usually means…", ["Houses/land", "Shoes", "Phones"], 0, "Real estate is property like land and homes."),
        _q("rent", "Rent is money you pay to…", ["Live in a place you don’t own", "Buy a toy", "Get a snack"], 0, "Rent is paid to use a home or apartment."),
        _q("mortgage", "A mortgage is a loan for a…", ["House", "Bicycle", "Backpack"], 0, "A mortgage helps buy a home."),
        _q("foreclosure", "Foreclosure can happen if you…", ["Pay on time", "Don’t pay the mortgage", "Paint the house"], 1, "Missing payments can cause foreclosure."),
        _q("goalsetting", "The first step to reaching a goal is to…", ["Write it down", "Forget it", "Hide it"], 0, "Writing goals makes them real."),
        _q("entrepreneurship", "An entrepreneur is someone who…", ["Starts a business", "Only plays games", "Never works"], 0, "Entrepreneurs build businesses."),
        _q("profit", "Profit is money left after…", ["Expenses", "Sleep", "Homework"], 0, "Profit = money in minus money out."),
        _q("expenses", "An expense is…", ["Money you spend", "Money you earn", "A coupon"], 0, "Expenses are costs you pay."),
        _q("cashflow", "Cash flow is about money…", ["Coming in and going out", "Staying hidden", "Turning into candy"], 0, "Cash flow tracks income and expenses."),
        _q("emergencyfund", "An emergency fund is for…", ["Surprises", "More toys always", "Nothing"], 0, "It helps during unexpected events."),
        _q("banking", "A checking account is used for…", ["Everyday spending", "Hiding money", "Buying houses"], 0, "Checking is for daily transactions."),
    ),
    Tier.teens: (
        _q("budget", "A budget mainly helps you…", ["Control spending", "Increase taxes", "Avoid saving"], 0, "A budget is a plan for income and expenses."),
        _q("hysa", "HYSA is best for money you want…", ["Safe + earning interest", "Locked for 30 years", "To gamble"], 0, "HYSA is for safer cash with interest."),
        _q("credit", "A credit score mostly measures your…", ["Payment history & debt behavior", "Height", "Job title"], 0, "Scores reflect how you handle borrowing."),
        _q("debt", "Interest on debt means you…", ["Pay extra", "Pay less", "Pay nothing"], 0, "Interest is the cost of borrowing."),
        _q("stocks", "Stocks usually grow by…", ["Company performance", "Magic", "Luck only"], 0, "Stocks depend on business results and markets."),
        _q("etf", "ETFs can help because they are…", ["Diversified", "Always risk-free", "Only crypto"], 0, "ETFs often hold many investments."),
        _q("mutualfunds", "Mutual funds are typically…", ["Professionally managed pools", "Lottery tickets", "Bank loans"], 0, "They pool money into a portfolio."),
        _q("crypto", "Crypto volatility means prices can…", ["Swing quickly", "Never change", "Only go up"], 0, "Volatility = fast price movement."),
        _q("risk", "Higher reward investments usually have…", ["Higher risk", "No risk", "Guaranteed results"], 0, "Risk and reward often rise together."),
        _q("banking", "A checking account is used for…", ["Bills & daily spending", "Long-term investing", "Buying options"], 0, "Checking supports transactions."),
    ),
    Tier.adults: (
        _q("estateplanning", "A trust can help reduce…", ["Probate delays", "Your income instantly", "All taxes always"], 0, "Trusts often streamline inheritance and control distribution."),
        _q("taxliens", "Tax lien investing often earns returns through…", ["Interest/penalties paid by owner", "Rent from tenants", "Stock dividends"], 0, "Lien investors may earn interest when taxes are repaid."),
        _q("taxdeeds", "A tax deed typically means the investor…", ["Buys the property at tax sale", "Buys an ETF", "Gets a bank loan"], 0, "Deeds can transfer ownership after tax sale rules."),
        _q("heloc", "A HELOC is a…", ["Revolving credit line on home equity", "Fixed-rate student loan", "Checking account"], 0, "HELOCs borrow against equity, often variable rate."),
        _q("refinance", "Refinancing can lower payments if…", ["Rate/term improves after costs", "You skip underwriting always", "It’s free"], 0, "Costs matter; compare breakeven time."),
        _q("options", "A call option gives the right to…", ["Buy at a strike price", "Sell at any price", "Borrow from a bank"], 0, "Calls = right to buy; puts = right to sell."),
        _q("options", "A put option gives the right to…", ["Sell at a strike price", "Buy at any price", "Earn fixed interest"], 0, "Puts are often used for hedging downside."),
        _q("insurance", "Term life insurance is generally for…", ["Income replacement during key years", "Guaranteed investment growth", "Avoiding all taxes"], 0, "Term is protection-focused, not an investment."),
        _q("business", "Healthy business cash flow means…", ["Income exceeds expenses reliably", "You have many logos", "You avoid budgeting"], 0, "Cash flow is oxygen for business survival."),
        _q("investing", "Diversification reduces…", ["Concentration risk", "All risk", "All taxes"], 0, "It helps reduce single-asset blowups."),
    ),
}


def get_question_bank(tier: Tier) -> tuple[Question, ...]:
    """Return the question bank of the given tier.

    Raises:
        KeyError: The tier has no bank.
    """
    try:
        return QUESTIONS[Tier(tier)]
    except ValueError:
        raise KeyError(f"Unknown tier: {tier}") from None
