from fastapi import APIRouter, Depends, status

from app.api import get_repository, get_user_id
from app.models.schemas import (
    BudgetSummarySchema,
    ExpenseCreate,
    ExpenseListResponse,
    ExpenseSchema,
)
from app.services.expense_service import ExpenseService
from app.storage.repository import InMemoryRepository

router = APIRouter()


def get_expense_service(
    repository: InMemoryRepository = Depends(get_repository),
) -> ExpenseService:
    return ExpenseService(repository=repository)


@router.post(
    "/{trip_id}/expenses",
    response_model=ExpenseSchema,
    status_code=status.HTTP_201_CREATED,
)
def add_expense(
    trip_id: str,
    payload: ExpenseCreate,
    user_id: str = Depends(get_user_id),
    service: ExpenseService = Depends(get_expense_service),
) -> ExpenseSchema:
    return service.add_expense(trip_id=trip_id, user_id=user_id, payload=payload)


@router.get("/{trip_id}/expenses", response_model=ExpenseListResponse)
def list_expenses(
    trip_id: str,
    user_id: str = Depends(get_user_id),
    service: ExpenseService = Depends(get_expense_service),
) -> ExpenseListResponse:
    return service.list_expenses(trip_id, user_id)


@router.get("/{trip_id}/budget", response_model=BudgetSummarySchema)
def get_budget_summary(
    trip_id: str,
    user_id: str = Depends(get_user_id),
    service: ExpenseService = Depends(get_expense_service),
) -> BudgetSummarySchema:
    return service.budget_summary(trip_id, user_id)
