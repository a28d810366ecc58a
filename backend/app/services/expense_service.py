import logging
from uuid import uuid4

from fastapi import HTTPException

from app.models.domain import ExpenseRecord, Trip
from app.models.schemas import (
    BudgetSummarySchema,
    ExpenseCreate,
    ExpenseListResponse,
    ExpenseSchema,
)
from app.storage.repository import InMemoryRepository
from app.tools.budget_tool import compute_budget_summary, spending_shares

logger = logging.getLogger(__name__)


class ExpenseService:
    def __init__(self, repository: InMemoryRepository):
        self.repository = repository

    def _trip(self, trip_id: str, user_id: str) -> Trip:
        trip = self.repository.get_trip(trip_id, user_id)
        if not trip:
            raise HTTPException(status_code=404, detail="Trip not found")
        return trip

    def add_expense(
        self, trip_id: str, user_id: str, payload: ExpenseCreate
    ) -> ExpenseSchema:
        self._trip(trip_id, user_id)
        expense = ExpenseRecord(
            expense_id=str(uuid4()),
            trip_id=trip_id,
            category=payload.category,
            amount=payload.amount,
            expense_date=payload.expense_date,
            description=payload.description,
        )
        self.repository.save_expense(expense)
        logger.info(
            "Recorded %s expense of %.2f for trip %s",
            expense.category.value,
            expense.amount,
            trip_id,
        )
        return ExpenseSchema.from_domain(expense)

    def list_expenses(self, trip_id: str, user_id: str) -> ExpenseListResponse:
        self._trip(trip_id, user_id)
        expenses = sorted(
            self.repository.list_expenses_for_trip(trip_id),
            key=lambda e: e.expense_date,
            reverse=True,
        )
        return ExpenseListResponse(expenses=[ExpenseSchema.from_domain(e) for e in expenses])

    def budget_summary(self, trip_id: str, user_id: str) -> BudgetSummarySchema:
        trip = self._trip(trip_id, user_id)
        summary = compute_budget_summary(
            trip.context.budget, self.repository.list_expenses_for_trip(trip_id)
        )
        return BudgetSummarySchema.from_domain(
            summary, trip_id=trip_id, categories=spending_shares(summary)
        )
