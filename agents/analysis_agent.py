from typing import Dict, Any, List, Optional
from dataclasses import asdict
from schemas import (
    AnalyticsReport,
    CategoryRecord,
    TransactionRecord,
    categories_from_rows,
    transactions_from_rows,
)
from compute.aggregation import (
    compute_totals,
    compute_category_breakdown,
    compute_savings_rate,
    compute_budget_summary,
    compute_category_progress,
)
from compute.advice import generate_advice
from compute.budget_allocator import calculate_plan
from settings import get_settings


class AnalysisAgent:
    """Agent responsible for analyzing transactions."""

    def __init__(self):
        self.name = "analysis_agent"

    def analyze(
        self,
        transactions: List[TransactionRecord],
        categories: List[CategoryRecord],
        target_income: Optional[int] = None,
    ) -> AnalyticsReport:
        """
        Perform analysis on transactions against the user's categories.

        Args:
            transactions: Transactions for the period
            categories: User categories with optional targets
            target_income: Target monthly income (defaults to configuration)

        Returns:
            AnalyticsReport with totals, breakdown, progress and plan
        """
        if target_income is None:
            target_income = get_settings().default_target_income

        totals = compute_totals(transactions)

        return AnalyticsReport(
            total_income=totals.total_income,
            total_expense=totals.total_expense,
            savings_rate=compute_savings_rate(
                totals.total_income, totals.total_expense
            ),
            category_breakdown=compute_category_breakdown(transactions, categories),
            category_progress=compute_category_progress(transactions, categories),
            summary=compute_budget_summary(transactions, categories, target_income),
            plan=calculate_plan(target_income) if target_income > 0 else None,
        )

    def execute(self, session_id: str, input_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute the analysis agent.

        Args:
            session_id: Session identifier
            input_data: Input data containing transactions, categories and
                target_income

        Returns:
            Analysis results with advice
        """
        transactions = transactions_from_rows(input_data.get("transactions", []))
        categories = categories_from_rows(input_data.get("categories", []))

        report = self.analyze(
            transactions, categories, input_data.get("target_income")
        )
        advice = generate_advice(transactions, categories)

        result = report.model_dump(mode="json")
        result["advice"] = asdict(advice)
        result["advice"]["kind"] = advice.kind.value
        return result
