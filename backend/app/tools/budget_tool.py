from __future__ import annotations

from typing import Dict, Iterable, List

from app.models.domain import BudgetStatus, BudgetSummary, ExpenseCategory, ExpenseRecord

WARNING_THRESHOLD = 80.0
OVER_BUDGET_THRESHOLD = 100.0


def classify_budget_status(percent_used: float) -> BudgetStatus:
    if percent_used >= OVER_BUDGET_THRESHOLD:
        return BudgetStatus.over_budget
    if percent_used >= WARNING_THRESHOLD:
        return BudgetStatus.warning
    return BudgetStatus.on_track


def compute_budget_summary(
    total_budget: float, expenses: Iterable[ExpenseRecord]
) -> BudgetSummary:
    """
    Totals for a trip's expenses against its budget.

    ``remaining`` goes negative once spending passes the budget, and a zero
    budget reports 0 percent used. ``by_category`` only holds categories that
    have at least one expense.
    """
    total_spent = 0.0
    by_category: Dict[str, float] = {}
    for expense in expenses:
        key = ExpenseCategory(expense.category).value
        by_category[key] = by_category.get(key, 0.0) + expense.amount
        total_spent += expense.amount

    percent_used = (total_spent / total_budget) * 100 if total_budget > 0 else 0.0
    return BudgetSummary(
        total_budget=total_budget,
        total_spent=total_spent,
        remaining=total_budget - total_spent,
        percent_used=percent_used,
        by_category=by_category,
        status=classify_budget_status(percent_used),
    )


def spending_shares(summary: BudgetSummary) -> List[dict]:
    """One row per expense category with the amount spent and its share of all spending."""
    rows = []
    for category in ExpenseCategory:
        spent = summary.by_category.get(category.value, 0.0)
        share = (spent / summary.total_spent) * 100 if summary.total_spent > 0 else 0.0
        rows.append({"category": category, "spent": spent, "share": share})
    return rows
