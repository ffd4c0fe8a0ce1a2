"""
Budget Engine Example
=====================

Runs the plan calculator and analytics over a month of sample data.
"""

import logging

from agents.analysis_agent import AnalysisAgent
from agents.budgeting_agent import BudgetingAgent
from agents.reporting_agent import ReportingAgent
from schemas import (
    categories_from_rows,
    serialize_payload,
    transactions_from_rows,
)

SAMPLE_CATEGORIES = [
    {"category_id": "c1", "name": "家賃", "type": "fixed", "target_amount": 90000},
    {"category_id": "c2", "name": "光熱費", "type": "fixed", "target_amount": 15000},
    {"category_id": "c3", "name": "食費", "type": "variable", "target_amount": 45000},
    {"category_id": "c4", "name": "娯楽", "type": "variable", "target_amount": 15000},
    {"category_id": "c5", "name": "買い物", "type": "variable"},
]

SAMPLE_TRANSACTIONS = [
    {"transaction_id": "t1", "amount": 300000, "date": "2024-01-25", "type": "income", "description": "Salary"},
    {"transaction_id": "t2", "category_id": "c1", "amount": 90000, "date": "2024-01-27", "type": "expense", "description": "Rent"},
    {"transaction_id": "t3", "category_id": "c2", "amount": 12000, "date": "2024-01-28", "type": "expense", "description": "Electricity"},
    {"transaction_id": "t4", "category_id": "c3", "amount": 33000, "date": "2024-02-03", "type": "expense", "description": "Groceries"},
    {"transaction_id": "t5", "category_id": "c4", "amount": 18000, "date": "2024-02-10", "type": "expense", "description": "Concert"},
    {"transaction_id": "t6", "category_id": "c5", "amount": 8000, "date": "2024-02-12", "type": "expense", "description": "Shoes"},
]


def main():
    """Run the budget engine with sample data."""
    logging.basicConfig(level=logging.INFO)

    print("============================================================")
    print("BUDGET PLAN")
    print("============================================================")

    plan = BudgetingAgent().execute("demo-session-001", {"monthly_income": "300,000"})
    print(serialize_payload(plan["display"]))
    print(serialize_payload(plan["targets"]))

    analysis = AnalysisAgent()
    result = analysis.execute(
        "demo-session-001",
        {
            "transactions": SAMPLE_TRANSACTIONS,
            "categories": SAMPLE_CATEGORIES,
            "target_income": 300000,
        },
    )
    print(f"\nAdvice: {result['advice']['title']} - {result['advice']['message']}")

    report = analysis.analyze(
        transactions_from_rows(SAMPLE_TRANSACTIONS),
        categories_from_rows(SAMPLE_CATEGORIES),
        300000,
    )
    print(ReportingAgent().execute("demo-session-001", {"report": report})["report_text"])


if __name__ == "__main__":
    main()
