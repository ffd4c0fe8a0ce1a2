import logging
import re
from typing import Dict, List, Optional

from schemas import (
    BudgetPlan,
    BudgetRecommendation,
    CategoryRecord,
    Classification,
)
from compute.allocation_table import AllocationTable, get_allocation_table
from compute.rounding import Number, percent_of, round_to_int

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"[^0-9]")


def calculate_plan(
    monthly_income: Number, table: Optional[AllocationTable] = None
) -> BudgetPlan:
    """
    Calculate the recommended budget plan for a monthly income.

    Every allocation entry yields one recommendation, in table order, with
    amount = round(monthly_income * percentage / 100), ties away from zero.
    Negative income is not rejected; it produces negative amounts. Fractional
    income is accepted; the plan records it rounded to whole units.

    Args:
        monthly_income: Monthly income in currency units
        table: Allocation table to use (defaults to the 50/30/20 table)

    Returns:
        BudgetPlan with recommendations and per-classification totals
    """
    table = table or get_allocation_table()

    recommendations: List[BudgetRecommendation] = []
    totals: Dict[Classification, int] = {c: 0 for c in Classification}

    for entry in table:
        amount = percent_of(monthly_income, entry.percentage)
        totals[entry.classification] += amount
        recommendations.append(
            BudgetRecommendation(
                category_name=entry.category_name,
                classification=entry.classification,
                percentage=entry.percentage,
                amount=amount,
            )
        )

    logger.debug(
        "Calculated plan for income %s: fixed=%d variable=%d savings=%d",
        monthly_income,
        totals[Classification.FIXED],
        totals[Classification.VARIABLE],
        totals[Classification.SAVINGS],
    )

    return BudgetPlan(
        monthly_income=round_to_int(monthly_income),
        fixed_total=totals[Classification.FIXED],
        variable_total=totals[Classification.VARIABLE],
        savings_target=totals[Classification.SAVINGS],
        recommendations=recommendations,
    )


def get_recommended_budget(
    category_name: str, monthly_income: Number, table: Optional[AllocationTable] = None
) -> Optional[int]:
    """
    Recommended amount for one category, or None if it has no allocation.

    Args:
        category_name: Category display name
        monthly_income: Monthly income in currency units
        table: Allocation table to use (defaults to the 50/30/20 table)

    Returns:
        Rounded amount, or None for categories outside the table
    """
    entry = (table or get_allocation_table()).lookup(category_name)
    if entry is None:
        return None
    return percent_of(monthly_income, entry.percentage)


def plan_targets(plan: BudgetPlan) -> Dict[str, int]:
    """Per-category targets from a plan, leaving out the savings pseudo-category."""
    return {
        rec.category_name: rec.amount
        for rec in plan.recommendations
        if rec.classification != Classification.SAVINGS
    }


def apply_plan_to_categories(
    targets: Dict[str, int], categories: List[CategoryRecord]
) -> List[CategoryRecord]:
    """
    Copy categories with their target amounts replaced from a target map.

    Categories whose name has no target are returned unchanged.
    """
    updated = []
    for category in categories:
        if category.name in targets:
            updated.append(
                category.model_copy(update={"target_amount": targets[category.name]})
            )
        else:
            updated.append(category)
    return updated


def parse_amount_input(text: str) -> Optional[int]:
    """
    Parse a user-typed amount such as "300,000円" into currency units.

    Every non-digit character is dropped; returns None when nothing is left.
    """
    digits = _NON_DIGITS.sub("", text)
    if not digits:
        return None
    return int(digits)
