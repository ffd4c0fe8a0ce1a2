from typing import Dict, Any
from schemas import AnalyticsReport
from compute.currency import format_currency


class ReportingAgent:
    """Agent responsible for rendering analytics reports as text."""

    def __init__(self):
        self.name = "reporting_agent"

    def format_report_text(self, report: AnalyticsReport) -> str:
        """
        Format report as human-readable text.

        Args:
            report: AnalyticsReport object

        Returns:
            Formatted report string
        """
        lines = [
            "=" * 50,
            "BUDGET REPORT",
            "=" * 50,
            "",
            f"Total Income:    {format_currency(report.total_income)}",
            f"Total Expenses:  {format_currency(report.total_expense)}",
            f"Net Savings:     {format_currency(report.total_income - report.total_expense)}",
            f"Savings Rate:    {report.savings_rate}%",
        ]

        if report.summary:
            summary = report.summary
            lines.extend(
                [
                    "",
                    "Budget Summary:",
                    "-" * 30,
                    f"  Fixed Costs:       {format_currency(summary.fixed_costs)}",
                    f"  Disposable Income: {format_currency(summary.disposable_income)}",
                    f"  Variable Spent:    {format_currency(summary.variable_spent)}",
                    f"  Remaining:         {format_currency(summary.remaining)}",
                ]
            )

        if report.category_breakdown:
            lines.extend(["", "Category Breakdown:", "-" * 30])
            for item in report.category_breakdown:
                lines.append(
                    f"  {item.name:12s} {format_currency(item.spent):>12s} ({item.share:>5.1f}%)"
                )

        tracked = [p for p in report.category_progress if p.progress is not None]
        if tracked:
            lines.extend(["", "Category Progress:", "-" * 30])
            for p in tracked:
                lines.append(
                    f"  {p.name:12s} {format_currency(p.spent):>12s} / "
                    f"{format_currency(p.target):>12s} {p.progress:>4d}% [{p.status.value}]"
                )

        if report.plan:
            plan = report.plan
            lines.extend(
                [
                    "",
                    f"Recommended Plan ({format_currency(plan.monthly_income)}/month):",
                    "-" * 30,
                ]
            )
            for rec in plan.recommendations:
                lines.append(
                    f"  {rec.category_name:12s} {rec.percentage:>3d}% "
                    f"{format_currency(rec.amount):>12s}"
                )
            lines.append(f"  Fixed:    {format_currency(plan.fixed_total)}")
            lines.append(f"  Variable: {format_currency(plan.variable_total)}")
            lines.append(f"  Savings:  {format_currency(plan.savings_target)}")

        lines.append("")
        lines.append("=" * 50)

        return "\n".join(lines)

    def execute(self, session_id: str, input_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute the reporting agent.

        Args:
            session_id: Session identifier
            input_data: Input data containing the analytics report

        Returns:
            Report text alongside the report
        """
        report = input_data["report"]
        return {
            "report": report.model_dump(mode="json"),
            "report_text": self.format_report_text(report),
        }
