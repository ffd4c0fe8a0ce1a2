import os
import unittest
from contextlib import contextmanager
from decimal import Decimal
from unittest import mock
from agents.analysis_agent import AnalysisAgent
from agents.budgeting_agent import BudgetingAgent
from agents.reporting_agent import ReportingAgent
from schemas import categories_from_rows, transactions_from_rows
from settings import reset_settings


@contextmanager
def default_income(value):
    with mock.patch.dict(os.environ, {"BUDGET_DEFAULT_TARGET_INCOME": value}):
        reset_settings()
        try:
            yield
        finally:
            reset_settings()


CATEGORIES = [
    {"category_id": "c1", "name": "家賃", "type": "fixed", "target_amount": 90000},
    {"category_id": "c2", "name": "食費", "type": "variable", "target_amount": 40000},
    {"category_id": "c3", "name": "娯楽", "type": "variable"},
]

TRANSACTIONS = [
    {"transaction_id": "t1", "amount": 300000, "date": "2024-01-25", "type": "income"},
    {"transaction_id": "t2", "category_id": "c1", "amount": 90000, "date": "2024-01-27", "type": "expense"},
    {"transaction_id": "t3", "category_id": "c2", "amount": 30000, "date": "2024-02-01", "type": "expense"},
]


class TestBudgetingAgent(unittest.TestCase):
    """Tests for the budgeting agent."""

    def setUp(self):
        self.agent = BudgetingAgent()

    def test_create_plan(self):
        result = self.agent.create_plan(300000)

        self.assertEqual(result["fixed_total"], 150000)
        self.assertEqual(result["variable_total"], 90000)
        self.assertEqual(result["savings_target"], 60000)
        self.assertEqual(len(result["recommendations"]), 10)
        self.assertEqual(result["recommendations"][0]["classification"], "fixed")
        self.assertNotIn("貯蓄", result["targets"])

    def test_execute_parses_typed_income(self):
        result = self.agent.execute("s1", {"monthly_income": "300,000円"})

        self.assertEqual(result["monthly_income"], 300000)
        self.assertEqual(result["targets"]["食費"], 45000)

    def test_execute_accepts_float_and_decimal_income(self):
        """Test JSON floats and Decimals are rounded, not replaced by the default."""
        with default_income("100000"):
            from_float = self.agent.execute("s1", {"monthly_income": 300000.0})
            from_decimal = self.agent.execute(
                "s1", {"monthly_income": Decimal("299999.6")}
            )

        self.assertEqual(from_float["monthly_income"], 300000)
        self.assertEqual(from_float["savings_target"], 60000)
        self.assertEqual(from_decimal["monthly_income"], 300000)

    def test_execute_without_income_uses_default(self):
        """Test missing or unparsable income falls back to the default target."""
        with default_income("300000"):
            for input_data in (
                {},
                {"monthly_income": "none"},
                {"monthly_income": True},
                {"monthly_income": float("nan")},
            ):
                result = self.agent.execute("s1", input_data)

                self.assertEqual(result["monthly_income"], 300000)
                self.assertEqual(result["fixed_total"], 150000)
                self.assertEqual(result["variable_total"], 90000)
                self.assertEqual(result["savings_target"], 60000)


class TestAnalysisAgent(unittest.TestCase):
    """Tests for the analysis agent."""

    def test_execute(self):
        result = AnalysisAgent().execute(
            "s1",
            {
                "transactions": TRANSACTIONS,
                "categories": CATEGORIES,
                "target_income": 300000,
            },
        )

        self.assertEqual(result["total_income"], 300000)
        self.assertEqual(result["total_expense"], 120000)
        self.assertEqual(result["savings_rate"], 60)
        self.assertEqual(result["summary"]["remaining"], 180000)
        self.assertEqual(result["plan"]["savings_target"], 60000)
        self.assertEqual(result["category_progress"][1]["status"], "warning")
        self.assertEqual(result["advice"]["kind"], "success")

    def test_analyze_defaults_to_configured_target_income(self):
        """Test omitting the target income plans for the default 300,000."""
        with default_income("300000"):
            report = AnalysisAgent().analyze([], [])

        self.assertIsNotNone(report.plan)
        self.assertEqual(report.plan.monthly_income, 300000)
        self.assertEqual(report.summary.disposable_income, 300000)
        self.assertEqual(report.summary.total_income, 300000)

    def test_analyze_with_zero_target_income(self):
        report = AnalysisAgent().analyze(
            transactions_from_rows(TRANSACTIONS), categories_from_rows(CATEGORIES), 0
        )

        self.assertIsNone(report.plan)
        self.assertEqual(report.summary.total_income, 300000)


class TestReportingAgent(unittest.TestCase):
    """Tests for the text report."""

    def test_report_text(self):
        report = AnalysisAgent().analyze(
            transactions_from_rows(TRANSACTIONS),
            categories_from_rows(CATEGORIES),
            300000,
        )

        text = ReportingAgent().format_report_text(report)

        self.assertIn("BUDGET REPORT", text)
        self.assertIn("300,000", text)
        self.assertIn("Savings Rate:    60%", text)
        self.assertIn("[danger]", text)
        self.assertIn("[warning]", text)
        self.assertIn("Recommended Plan", text)


if __name__ == "__main__":
    unittest.main()
