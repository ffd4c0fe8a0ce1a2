from typing import Dict, List
from dataclasses import dataclass
from schemas import (
    BudgetSummary,
    CategoryProgress,
    CategoryRecord,
    CategorySpend,
    CategoryType,
    TransactionRecord,
    TransactionType,
)
from compute.progress import calculate_progress, progress_status, progress_bar_width
from compute.rounding import ratio_percent, round_half_away, to_decimal


@dataclass(frozen=True)
class TotalsResult:
    total_income: int
    total_expense: int
    net_savings: int


def compute_totals(transactions: List[TransactionRecord]) -> TotalsResult:
    """
    Compute total income and expenses from transactions.

    Args:
        transactions: List of transaction records

    Returns:
        TotalsResult with total_income, total_expense, net_savings
    """
    total_income = 0
    total_expense = 0

    for txn in transactions:
        if txn.type == TransactionType.INCOME:
            total_income += txn.amount
        else:
            total_expense += txn.amount

    return TotalsResult(
        total_income=total_income,
        total_expense=total_expense,
        net_savings=total_income - total_expense,
    )


def compute_spend_by_category(transactions: List[TransactionRecord]) -> Dict[str, int]:
    """Expense totals keyed by category id; uncategorized expenses are skipped."""
    spend: Dict[str, int] = {}
    for txn in transactions:
        if txn.type != TransactionType.EXPENSE or txn.category_id is None:
            continue
        spend[txn.category_id] = spend.get(txn.category_id, 0) + txn.amount
    return spend


def compute_category_spend(
    transactions: List[TransactionRecord], category_id: str
) -> int:
    """Total expense filed under one category."""
    return sum(
        t.amount
        for t in transactions
        if t.type == TransactionType.EXPENSE and t.category_id == category_id
    )


def compute_category_breakdown(
    transactions: List[TransactionRecord], categories: List[CategoryRecord]
) -> List[CategorySpend]:
    """
    Compute spending breakdown by category.

    Categories without any spending are left out. Order follows the
    category list.

    Args:
        transactions: List of transaction records
        categories: User categories

    Returns:
        CategorySpend entries with share of total expense in percent
    """
    spend = compute_spend_by_category(transactions)
    total_expense = compute_totals(transactions).total_expense

    breakdown = []
    for cat in categories:
        spent = spend.get(cat.category_id, 0)
        if spent <= 0:
            continue
        share = (
            float(round_half_away(to_decimal(spent) * 100 / total_expense, 1))
            if total_expense > 0
            else 0.0
        )
        breakdown.append(
            CategorySpend(
                category_id=cat.category_id,
                name=cat.name,
                color=cat.color,
                spent=spent,
                share=share,
            )
        )

    return breakdown


def compute_savings_rate(total_income: int, total_expense: int) -> int:
    """
    Compute savings rate as percentage.

    Args:
        total_income: Total income
        total_expense: Total expenses

    Returns:
        Savings rate as a rounded percentage, 0 when there is no income
    """
    if total_income <= 0:
        return 0

    return ratio_percent(total_income - total_expense, total_income)


def compute_budget_summary(
    transactions: List[TransactionRecord],
    categories: List[CategoryRecord],
    target_income: int,
) -> BudgetSummary:
    """
    Summarize spending against the target income.

    Fixed costs are what was spent in fixed categories; whatever the target
    income leaves after them is disposable, and variable spending is taken
    out of that.
    """
    spend = compute_spend_by_category(transactions)
    totals = compute_totals(transactions)

    fixed_costs = sum(
        spend.get(c.category_id, 0) for c in categories if c.type == CategoryType.FIXED
    )
    variable_spent = sum(
        spend.get(c.category_id, 0)
        for c in categories
        if c.type == CategoryType.VARIABLE
    )
    disposable_income = target_income - fixed_costs

    return BudgetSummary(
        total_income=max(totals.total_income, target_income),
        fixed_costs=fixed_costs,
        disposable_income=disposable_income,
        variable_spent=variable_spent,
        remaining=disposable_income - variable_spent,
    )


def compute_category_progress(
    transactions: List[TransactionRecord], categories: List[CategoryRecord]
) -> List[CategoryProgress]:
    """
    Progress of each category against its target amount.

    Categories without a positive target get progress and status of None.
    """
    spend = compute_spend_by_category(transactions)

    results = []
    for cat in categories:
        spent = spend.get(cat.category_id, 0)
        target = cat.target_amount or 0

        if target > 0:
            progress = calculate_progress(spent, target)
            results.append(
                CategoryProgress(
                    category_id=cat.category_id,
                    name=cat.name,
                    spent=spent,
                    target=target,
                    progress=progress,
                    status=progress_status(progress),
                    bar_width=progress_bar_width(progress),
                )
            )
        else:
            results.append(
                CategoryProgress(
                    category_id=cat.category_id,
                    name=cat.name,
                    spent=spent,
                    target=target,
                )
            )

    return results
