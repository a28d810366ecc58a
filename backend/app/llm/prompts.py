from typing import Optional

from app.models.domain import TripContext, UserProfile
from app.tools.preferences_tool import PreferencesTool

PLANNER_SYSTEM_PROMPT = (
    "You are an experienced travel planner. Write practical, day-by-day "
    "itineraries in plain text. Start each day with a line 'Day N', start each "
    "activity line with a time such as '9:00 AM' or with Morning, Afternoon or "
    "Evening, and write costs as $amount."
)

SEASONAL_CONTEXT = """
IMPORTANT SEASONAL CONTEXT for {destination} in {month_name}:
- Analyze the specific weather patterns, temperature ranges, and precipitation for this destination and time of year
- Consider local seasonal events, festivals, and cultural celebrations happening during this period
- Account for tourist season patterns (peak/off-peak) and how they affect pricing and crowds
- Identify seasonal activities that are particularly good or should be avoided during this time
- Consider daylight hours and how they affect daily scheduling
- Factor in any seasonal closures of attractions or changes in operating hours
- Include region-specific seasonal considerations (monsoons, hurricane seasons, winter conditions, etc.)
"""

ITINERARY_PROMPT = """Create a detailed {duration}-day travel itinerary for {destination}.

Trip Details:
- Destination: {destination}
- Dates: {start_date} to {end_date} ({duration} days)
- Budget: ${budget} USD total
- Group Size: {group_size} people
- Budget per person per day: ${per_person_per_day}

User Preferences:
- Favorite Activities: {activities}
- Travel Style: {travel_style}
- Accommodation Type: {accommodation}
- Languages: {languages}
- Special Requirements: {special_requirements}
{seasonal_context}
Please create a comprehensive itinerary that includes:

1. Daily Schedule (Day 1, Day 2, etc.):
   - Morning activities with specific times
   - Afternoon activities with specific times
   - Evening activities with specific times
   - Estimated costs for each activity

2. Accommodation Recommendations:
   - Specific hotel/lodging suggestions within budget
   - Nightly rates and total accommodation cost

3. Transportation:
   - How to get around the city/region
   - Estimated transportation costs

4. Food & Dining:
   - Restaurant recommendations for each meal
   - Local specialties to try
   - Estimated food costs per day

5. Budget Breakdown:
   - Accommodation: $X
   - Activities: $X
   - Food: $X
   - Transportation: $X
   - Miscellaneous: $X
   - Total: ${budget}

6. Detailed Seasonal Considerations:
   - Specific weather expectations for {start_date} to {end_date}
   - Detailed packing recommendations based on local climate
   - Seasonal activities and events happening during your visit
   - Best times of day for outdoor activities considering weather
   - Any seasonal closures or limited hours for attractions
   - Local seasonal specialties (food, festivals, natural phenomena)

7. Safety & Practical Tips:
   - Important local customs
   - Safety considerations
   - Emergency contacts
   - Currency and payment methods
   - Seasonal health considerations (sun protection, hydration, etc.)

Format the response as a well-structured itinerary that's easy to read and follow. Include specific venue names and realistic time estimates."""


def _amount(value: float) -> str:
    return f"{int(value)}" if value == int(value) else f"{value:.2f}"


def build_itinerary_prompt(context: TripContext, profile: Optional[UserProfile] = None) -> str:
    """
    Render the itinerary request for a trip.

    Each preference comes from the trip request, then the saved profile, then a
    fixed default.
    """
    prefs = PreferencesTool().merge_with_profile(context.preferences, profile)
    per_person_per_day = round(context.budget_per_person / context.duration_days)
    return ITINERARY_PROMPT.format(
        destination=context.destination,
        start_date=context.start_date.isoformat(),
        end_date=context.end_date.isoformat(),
        duration=context.duration_days,
        budget=_amount(context.budget),
        group_size=context.group_size,
        per_person_per_day=per_person_per_day,
        activities=", ".join(prefs.activities) or "General sightseeing",
        travel_style=prefs.travel_style or "Balanced",
        accommodation=prefs.accommodation or "Mid-range hotels",
        special_requirements=prefs.special_requirements or "None",
        languages=", ".join(prefs.languages) or "English",
        seasonal_context=SEASONAL_CONTEXT.format(
            destination=context.destination,
            month_name=f"{context.start_date:%B}",
        ),
    )
