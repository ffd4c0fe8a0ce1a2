import math
from enum import Enum
from typing import Optional
from dataclasses import dataclass

from compute.rounding import ratio_percent


class SavingsBand(str, Enum):
    ACHIEVED = "achieved"
    ON_TRACK = "on_track"
    BEHIND = "behind"
    AT_RISK = "at_risk"


@dataclass(frozen=True)
class SavingsGoalProgress:
    ratio: float
    percent: int
    achieved: bool
    band: SavingsBand
    estimated_months: Optional[int]


def savings_band(ratio: float) -> SavingsBand:
    if ratio >= 1:
        return SavingsBand.ACHIEVED
    if ratio >= 0.7:
        return SavingsBand.ON_TRACK
    if ratio >= 0.4:
        return SavingsBand.BEHIND
    return SavingsBand.AT_RISK


def estimate_months_to_goal(
    current_savings: int, target_amount: int, monthly_income: int, monthly_expense: int
) -> Optional[int]:
    """
    Months of saving at the current pace needed to reach the target.

    Returns None when nothing is being saved each month, 0 when the target
    is already reached.
    """
    monthly_savings = monthly_income - monthly_expense
    if monthly_savings <= 0:
        return None
    remaining = target_amount - current_savings
    if remaining <= 0:
        return 0
    return math.ceil(remaining / monthly_savings)


def compute_savings_goal(
    current_savings: int, target_amount: int, monthly_income: int, monthly_expense: int
) -> SavingsGoalProgress:
    """
    Compute progress towards a savings target.

    Args:
        current_savings: Amount saved so far
        target_amount: Savings goal
        monthly_income: Income per month
        monthly_expense: Expense per month

    Returns:
        SavingsGoalProgress with the ratio capped at 1.0
    """
    if target_amount > 0:
        ratio = max(0.0, min(current_savings / target_amount, 1.0))
        percent = max(0, min(ratio_percent(current_savings, target_amount), 100))
    else:
        ratio = 0.0
        percent = 0

    return SavingsGoalProgress(
        ratio=ratio,
        percent=percent,
        achieved=ratio >= 1,
        band=savings_band(ratio),
        estimated_months=estimate_months_to_goal(
            current_savings, target_amount, monthly_income, monthly_expense
        ),
    )
