import logging
from datetime import datetime, timezone

from app.models.domain import UserProfile
from app.models.schemas import UserProfileSchema, UserProfileUpdate
from app.storage.repository import InMemoryRepository

logger = logging.getLogger(__name__)


class PreferencesService:
    def __init__(self, repository: InMemoryRepository):
        self.repository = repository

    def get_profile(self, user_id: str) -> UserProfileSchema:
        profile = self.repository.get_profile(user_id) or UserProfile(user_id=user_id)
        return UserProfileSchema.from_domain(profile)

    def save_profile(self, user_id: str, payload: UserProfileUpdate) -> UserProfileSchema:
        profile = UserProfile(
            user_id=user_id,
            favorite_activities=list(payload.favorite_activities),
            travel_style=payload.travel_style,
            accommodation_preference=payload.accommodation_preference,
            special_requirements=payload.special_requirements,
            languages=list(payload.languages),
            preferred_destinations=list(payload.preferred_destinations),
            updated_at=datetime.now(timezone.utc),
        )
        self.repository.save_profile(profile)
        logger.info("Saved travel preferences for user %s", user_id)
        return UserProfileSchema.from_domain(profile)
