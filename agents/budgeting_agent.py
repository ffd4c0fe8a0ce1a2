import math
from decimal import Decimal
from typing import Dict, Any, Optional
from compute.budget_allocator import (
    calculate_plan,
    parse_amount_input,
    plan_targets,
)
from compute.currency import format_currency
from compute.rounding import round_to_int
from settings import get_settings


class BudgetingAgent:
    """Agent responsible for creating budget plans."""

    def __init__(self):
        self.name = "budgeting_agent"

    def create_plan(self, monthly_income: int) -> Dict[str, Any]:
        """
        Create a 50/30/20 budget plan for a monthly income.

        Args:
            monthly_income: Monthly income in currency units

        Returns:
            Plan with per-category recommendations and category targets
        """
        plan = calculate_plan(monthly_income)

        return {
            "monthly_income": plan.monthly_income,
            "fixed_total": plan.fixed_total,
            "variable_total": plan.variable_total,
            "savings_target": plan.savings_target,
            "recommendations": [r.model_dump(mode="json") for r in plan.recommendations],
            "targets": plan_targets(plan),
            "display": {
                "fixed_total": format_currency(plan.fixed_total),
                "variable_total": format_currency(plan.variable_total),
                "savings_target": format_currency(plan.savings_target),
            },
        }

    def execute(self, session_id: str, input_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute the budgeting agent.

        Args:
            session_id: Session identifier
            input_data: Input data with monthly_income as a number or typed text;
                missing or unparsable income falls back to the configured
                default target income

        Returns:
            Budget plan
        """
        raw_income = input_data.get("monthly_income")

        monthly_income: Optional[int] = None
        if isinstance(raw_income, str):
            monthly_income = parse_amount_input(raw_income)
        elif isinstance(raw_income, (int, float, Decimal)) and not isinstance(
            raw_income, bool
        ):
            if math.isfinite(raw_income):
                monthly_income = round_to_int(raw_income)

        if monthly_income is None:
            monthly_income = get_settings().default_target_income

        return self.create_plan(monthly_income)
