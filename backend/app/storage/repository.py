from __future__ import annotations

from typing import Dict, List, Optional

from app.models.domain import ExpenseRecord, Trip, UserProfile


class InMemoryRepository:
    def __init__(self) -> None:
        self.trips: Dict[str, Trip] = {}
        self.expenses: Dict[str, ExpenseRecord] = {}
        self.profiles: Dict[str, UserProfile] = {}

    def save_trip(self, trip: Trip) -> Trip:
        self.trips[trip.trip_id] = trip
        return trip

    def get_trip(self, trip_id: str, user_id: Optional[str] = None) -> Optional[Trip]:
        trip = self.trips.get(trip_id)
        if trip is None or (user_id is not None and trip.user_id != user_id):
            return None
        return trip

    def list_trips(self, user_id: Optional[str] = None) -> List[Trip]:
        trips = [t for t in self.trips.values() if user_id is None or t.user_id == user_id]
        return sorted(trips, key=lambda t: t.created_at, reverse=True)

    def delete_trip(self, trip_id: str) -> bool:
        if self.trips.pop(trip_id, None) is None:
            return False
        for expense_id in [e.expense_id for e in self.expenses.values() if e.trip_id == trip_id]:
            del self.expenses[expense_id]
        return True

    def save_expense(self, expense: ExpenseRecord) -> ExpenseRecord:
        self.expenses[expense.expense_id] = expense
        return expense

    def list_expenses_for_trip(self, trip_id: str) -> List[ExpenseRecord]:
        return [e for e in self.expenses.values() if e.trip_id == trip_id]

    def save_profile(self, profile: UserProfile) -> UserProfile:
        self.profiles[profile.user_id] = profile
        return profile

    def get_profile(self, user_id: str) -> Optional[UserProfile]:
        return self.profiles.get(user_id)
