from __future__ import annotations

from dataclasses import replace
from typing import Optional

from app.models.domain import TravelPreferences, TripContext, UserProfile


class PreferencesTool:
    """Fill gaps in a trip request from the user's saved profile."""

    def merge_with_profile(
        self, incoming: TravelPreferences, profile: Optional[UserProfile]
    ) -> TravelPreferences:
        if profile is None:
            return incoming
        return TravelPreferences(
            activities=list(incoming.activities or profile.favorite_activities),
            travel_style=incoming.travel_style or profile.travel_style,
            accommodation=incoming.accommodation or profile.accommodation_preference,
            special_requirements=incoming.special_requirements or profile.special_requirements,
            languages=list(incoming.languages or profile.languages),
        )

    def apply(self, context: TripContext, profile: Optional[UserProfile]) -> TripContext:
        return replace(
            context, preferences=self.merge_with_profile(context.preferences, profile)
        )
