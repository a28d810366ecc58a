import re
from datetime import date
from typing import Tuple

from fastapi import HTTPException

from app.models.domain import Trip
from app.models.schemas import (
    BudgetBreakdownResponse,
    BudgetCategoryAmountSchema,
    DayPlanSchema,
    SeasonalRecommendationSchema,
    TimelineResponse,
    TripOverviewSchema,
)
from app.storage.repository import InMemoryRepository
from app.tools.budget_breakdown import extract_budget_breakdown, percent_of_budget
from app.tools.itinerary_parser import parse_itinerary_text
from app.tools.seasonal_tool import derive_seasonal_recommendation

EXPORT_SEPARATOR = "=" * 50


def _long_date(value: date) -> str:
    return f"{value:%A, %B} {value.day}, {value.year}"


def export_filename(destination: str) -> str:
    slug = re.sub(r"\s+", "-", destination.strip().lower())
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    return f"{slug or 'trip'}-itinerary.txt"


def render_export(trip: Trip) -> str:
    """Plain-text download: a short trip header followed by the itinerary as stored."""
    ctx = trip.context
    people = "person" if ctx.group_size == 1 else "people"
    activities = ", ".join(ctx.preferences.activities) or "Not specified"
    header = [
        "TravelAI Itinerary",
        f"Destination: {ctx.destination}",
        f"Travel Dates: {_long_date(ctx.start_date)} - {_long_date(ctx.end_date)}",
        f"Group Size: {ctx.group_size} {people}",
        f"Total Budget: ${ctx.budget:,.0f}",
        f"Selected Activities: {activities}",
        EXPORT_SEPARATOR,
    ]
    return "\n".join(header) + "\n\n" + trip.content


class ItineraryService:
    """Read-only views over a stored trip, derived from its raw itinerary text."""

    def __init__(self, repository: InMemoryRepository):
        self.repository = repository

    def _trip(self, trip_id: str, user_id: str) -> Trip:
        trip = self.repository.get_trip(trip_id, user_id)
        if not trip:
            raise HTTPException(status_code=404, detail="Trip not found")
        return trip

    def timeline(self, trip_id: str, user_id: str) -> TimelineResponse:
        trip = self._trip(trip_id, user_id)
        days = parse_itinerary_text(trip.content, trip.context.start_date)
        return TimelineResponse(
            trip_id=trip_id,
            days=[DayPlanSchema.from_domain(d) for d in days],
            fallback_text=None if days else trip.content,
        )

    def budget_breakdown(self, trip_id: str, user_id: str) -> BudgetBreakdownResponse:
        trip = self._trip(trip_id, user_id)
        budget = trip.context.budget
        entries = extract_budget_breakdown(trip.content)
        return BudgetBreakdownResponse(
            trip_id=trip_id,
            total_budget=budget,
            entries=[
                BudgetCategoryAmountSchema.from_domain(e, percent_of_budget(e.amount, budget))
                for e in entries
            ],
            fallback_text=None if entries else trip.content,
        )

    def seasonal(self, trip_id: str, user_id: str) -> SeasonalRecommendationSchema:
        trip = self._trip(trip_id, user_id)
        recommendation = derive_seasonal_recommendation(
            trip.context.destination, trip.context.start_date
        )
        return SeasonalRecommendationSchema.from_domain(
            recommendation, destination=trip.context.destination
        )

    def overview(self, trip_id: str, user_id: str) -> TripOverviewSchema:
        trip = self._trip(trip_id, user_id)
        ctx = trip.context
        days = parse_itinerary_text(trip.content, ctx.start_date)
        return TripOverviewSchema(
            trip_id=trip_id,
            destination=ctx.destination,
            day_count=len(days),
            activity_count=sum(len(d.activities) for d in days),
            duration_days=ctx.duration_days,
            budget_per_person=round(ctx.budget_per_person),
            budget_per_person_per_day=round(ctx.budget_per_person / ctx.duration_days),
        )

    def export(self, trip_id: str, user_id: str) -> Tuple[str, str]:
        trip = self._trip(trip_id, user_id)
        return export_filename(trip.context.destination), render_export(trip)
