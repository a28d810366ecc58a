import logging
from datetime import timedelta
from typing import List, Tuple

from app.llm.client import ItineraryBackend, LLMClient
from app.models.domain import BudgetCategory, TripContext

logger = logging.getLogger(__name__)

# (time, description, cost per person)
ACTIVITY_POOL: List[Tuple[Tuple[str, str, int], ...]] = [
    (
        ("9:00 AM", "Guided walking tour of {destination} old town", 25),
        ("1:00 PM", "Lunch at a local food market", 20),
        ("7:00 PM", "Dinner at a neighbourhood restaurant", 45),
    ),
    (
        ("8:30 AM", "Breakfast and visit to the main museum", 30),
        ("2:00 PM", "Afternoon at the botanical gardens", 15),
        ("Evening", "Sunset viewpoint and street food", 20),
    ),
    (
        ("10:00 AM", "Day trip to the countryside around {destination}", 60),
        ("3:30 PM", "Cooking class with local specialties", 55),
        ("8:00 PM", "Live music in the old quarter", 30),
    ),
]

BUDGET_SPLIT = (
    (BudgetCategory.accommodation, 0.40),
    (BudgetCategory.activities, 0.25),
    (BudgetCategory.food, 0.20),
    (BudgetCategory.transportation, 0.10),
    (BudgetCategory.miscellaneous, 0.05),
)


class MockItineraryBackend(ItineraryBackend):
    """
    A deterministic backend that simulates LLM output. It writes one "Day N"
    block per calendar day of the trip, three timed activities per day, and a
    budget breakdown that splits the trip budget across the fixed categories.
    """

    def generate_itinerary(self, context: TripContext) -> str:
        day_count = (context.end_date - context.start_date).days + 1
        lines = [f"{day_count}-Day Itinerary for {context.destination}", ""]

        for i in range(day_count):
            current_date = context.start_date + timedelta(days=i)
            lines.append(f"Day {i + 1} - {current_date:%A}, {current_date:%b} {current_date.day}")
            for time, description, cost in ACTIVITY_POOL[i % len(ACTIVITY_POOL)]:
                text = description.format(destination=context.destination)
                lines.append(f"{time} {text} ${cost * context.group_size}")
            lines.append("")

        lines.append("Budget Breakdown:")
        for category, share in BUDGET_SPLIT:
            lines.append(f"- {category.value}: ${context.budget * share:,.0f}")
        lines.append(f"- Total: ${context.budget:,.0f}")
        lines.append("")
        lines.append("Seasonal Considerations:")
        lines.append(
            f"Check the local forecast for {context.destination} a few days before departure."
        )
        return "\n".join(lines)


class ItineraryGenerator:
    def __init__(self, backend: ItineraryBackend):
        self.client = LLMClient(backend=backend)

    def generate(self, context: TripContext) -> str:
        try:
            return self.client.generate(context)
        except Exception as exc:  # noqa: BLE001
            logger.error("Itinerary generation failed: %s", exc)
            raise
