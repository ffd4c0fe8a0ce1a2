from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict
import json


class Classification(str, Enum):
    FIXED = "fixed"
    VARIABLE = "variable"
    SAVINGS = "savings"


class CategoryType(str, Enum):
    FIXED = "fixed"
    VARIABLE = "variable"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class ProgressStatus(str, Enum):
    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"


class AllocationEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    category_name: str = Field(..., description="Category display name")
    classification: Classification = Field(
        ..., description="fixed, variable or savings"
    )
    percentage: int = Field(..., description="Share of monthly income (0-100)")

    @field_validator("category_name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Category name must not be blank")
        return v

    @field_validator("percentage")
    @classmethod
    def percentage_must_be_valid(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError("Percentage must be between 0 and 100")
        return v


class BudgetRecommendation(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    category_name: str = Field(..., description="Category display name")
    classification: Classification = Field(
        ..., description="Classification copied from the allocation entry"
    )
    percentage: int = Field(..., description="Share of monthly income (0-100)")
    amount: int = Field(..., description="Recommended amount in currency units")


class BudgetPlan(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    monthly_income: int = Field(..., description="Monthly income the plan is for")
    fixed_total: int = Field(..., description="Sum of fixed recommendations")
    variable_total: int = Field(..., description="Sum of variable recommendations")
    savings_target: int = Field(..., description="Sum of savings recommendations")
    recommendations: List[BudgetRecommendation] = Field(
        ..., description="Recommendations in allocation table order"
    )


class TransactionRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    transaction_id: str = Field(..., description="Unique transaction identifier")
    category_id: Optional[str] = Field(
        default=None, description="Category the transaction is filed under"
    )
    amount: int = Field(..., description="Amount in currency units (magnitude)")
    date: str = Field(..., description="Transaction date in ISO format")
    description: str = Field(default="", description="Transaction description")
    type: TransactionType = Field(..., description="income or expense")

    @field_validator("amount")
    @classmethod
    def amount_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Amount must be non-negative; use type for direction")
        return v


class CategoryRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    category_id: str = Field(..., description="Unique category identifier")
    name: str = Field(..., description="Category display name")
    type: CategoryType = Field(..., description="fixed or variable")
    target_amount: Optional[int] = Field(
        default=None, description="Monthly target in currency units"
    )
    target_percentage: Optional[int] = Field(
        default=None, description="Monthly target as share of income"
    )
    color: str = Field(default="#6b7280", description="Display colour")


class CategorySpend(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    category_id: str
    name: str
    color: str
    spent: int
    share: float = Field(..., description="Percent of total expense")


class CategoryProgress(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    category_id: str
    name: str
    spent: int
    target: int
    progress: Optional[int] = Field(
        default=None, description="Percent of target, uncapped"
    )
    status: Optional[ProgressStatus] = None
    bar_width: int = Field(default=0, description="Progress capped at 100")


class BudgetSummary(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    total_income: int = Field(..., description="max(actual income, target income)")
    fixed_costs: int = Field(..., description="Spent in fixed categories")
    disposable_income: int = Field(..., description="Target income minus fixed costs")
    variable_spent: int = Field(..., description="Spent in variable categories")
    remaining: int = Field(..., description="Disposable income minus variable spend")


class AnalyticsReport(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    total_income: int = Field(..., description="Total income")
    total_expense: int = Field(..., description="Total expenses")
    savings_rate: int = Field(..., description="Savings rate as percentage")
    category_breakdown: List[CategorySpend] = Field(
        default_factory=list, description="Spending per category"
    )
    category_progress: List[CategoryProgress] = Field(
        default_factory=list, description="Progress against category targets"
    )
    summary: Optional[BudgetSummary] = Field(
        default=None, description="Budget summary against the target income"
    )
    plan: Optional[BudgetPlan] = Field(
        default=None, description="Recommended plan for the target income"
    )


def serialize_payload(data: dict) -> str:
    """Serialize payload to JSON string."""
    return json.dumps(data, sort_keys=True, ensure_ascii=False)


def transactions_from_rows(rows: List[dict]) -> List[TransactionRecord]:
    """Build transaction records from plain dicts as stored by the backend."""
    return [
        TransactionRecord(
            transaction_id=row["transaction_id"],
            category_id=row.get("category_id"),
            amount=row["amount"],
            date=row["date"],
            description=row.get("description", ""),
            type=TransactionType(row["type"]),
        )
        for row in rows
    ]


def categories_from_rows(rows: List[dict]) -> List[CategoryRecord]:
    """Build category records from plain dicts as stored by the backend."""
    return [
        CategoryRecord(
            category_id=row["category_id"],
            name=row["name"],
            type=CategoryType(row["type"]),
            target_amount=row.get("target_amount"),
            target_percentage=row.get("target_percentage"),
            color=row.get("color", "#6b7280"),
        )
        for row in rows
    ]
