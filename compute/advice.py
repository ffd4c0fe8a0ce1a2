from enum import Enum
from typing import List, Optional
from dataclasses import dataclass

from schemas import CategoryRecord, TransactionRecord
from compute.aggregation import (
    compute_totals,
    compute_savings_rate,
    compute_spend_by_category,
)

STRONG_SAVINGS_RATE = 0.3
HEALTHY_SAVINGS_RATE = 0.1


class AdviceKind(str, Enum):
    SUCCESS = "success"
    TIP = "tip"
    WARNING = "warning"


@dataclass(frozen=True)
class Advice:
    kind: AdviceKind
    title: str
    message: str


def top_spending_category(
    transactions: List[TransactionRecord], categories: List[CategoryRecord]
) -> Optional[CategoryRecord]:
    """Category with the largest expense total; ties keep category order."""
    if not categories:
        return None
    spend = compute_spend_by_category(transactions)
    return max(categories, key=lambda c: spend.get(c.category_id, 0))


def generate_advice(
    transactions: List[TransactionRecord], categories: List[CategoryRecord]
) -> Advice:
    """
    Pick a short piece of saving advice from the savings rate.

    Args:
        transactions: Transactions for the period
        categories: User categories

    Returns:
        Advice with kind, title and message
    """
    totals = compute_totals(transactions)
    if totals.total_income > 0:
        savings_rate = totals.net_savings / totals.total_income
    else:
        savings_rate = 0.0

    savings_percent = compute_savings_rate(totals.total_income, totals.total_expense)
    top = top_spending_category(transactions, categories)

    if savings_rate >= STRONG_SAVINGS_RATE:
        return Advice(
            kind=AdviceKind.SUCCESS,
            title="Great work!",
            message=(
                f"A savings rate of {savings_percent}% is on pace "
                "for your goal. Keep it up!"
            ),
        )
    if savings_rate >= HEALTHY_SAVINGS_RATE:
        return Advice(
            kind=AdviceKind.TIP,
            title="On track",
            message=(
                f"Reviewing your spending on {top.name} could grow your savings further."
                if top
                else "Analyzing your spending pattern..."
            ),
        )
    if savings_rate >= 0:
        return Advice(
            kind=AdviceKind.WARNING,
            title="Needs attention",
            message=(
                f"{top.name} takes up most of your spending. Consider setting a budget."
                if top
                else "Keep an eye on the balance between income and spending."
            ),
        )
    return Advice(
        kind=AdviceKind.WARNING,
        title="Deficit warning",
        message="Spending exceeds income. Reviewing fixed costs is recommended.",
    )
