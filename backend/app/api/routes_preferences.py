from fastapi import APIRouter, Depends

from app.api import get_repository, get_user_id
from app.models.schemas import UserProfileSchema, UserProfileUpdate
from app.services.preferences_service import PreferencesService
from app.storage.repository import InMemoryRepository

router = APIRouter()


def get_preferences_service(
    repository: InMemoryRepository = Depends(get_repository),
) -> PreferencesService:
    return PreferencesService(repository=repository)


@router.get("/preferences", response_model=UserProfileSchema)
def get_preferences(
    user_id: str = Depends(get_user_id),
    service: PreferencesService = Depends(get_preferences_service),
) -> UserProfileSchema:
    return service.get_profile(user_id)


@router.put("/preferences", response_model=UserProfileSchema)
def save_preferences(
    payload: UserProfileUpdate,
    user_id: str = Depends(get_user_id),
    service: PreferencesService = Depends(get_preferences_service),
) -> UserProfileSchema:
    return service.save_profile(user_id=user_id, payload=payload)
