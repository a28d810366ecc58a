import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from fastapi import HTTPException

from app.core.config import settings
from app.llm.backends.ollama_backend import OllamaItineraryBackend
from app.llm.planner import ItineraryGenerator, MockItineraryBackend
from app.models.domain import Trip, TripContext
from app.models.schemas import TripImportRequest, TripRequest, TripSchema
from app.storage.repository import InMemoryRepository
from app.tools.preferences_tool import PreferencesTool

logger = logging.getLogger(__name__)


class PlanningService:
    def __init__(self, repository: InMemoryRepository):
        self.repository = repository
        primary_backend = (
            OllamaItineraryBackend()
            if settings.llm_provider.lower() == "ollama"
            else MockItineraryBackend()
        )
        self.generator = ItineraryGenerator(backend=primary_backend)
        self.fallback_generator: Optional[ItineraryGenerator] = (
            ItineraryGenerator(backend=MockItineraryBackend())
            if not isinstance(primary_backend, MockItineraryBackend)
            else None
        )

    def _generate(self, context: TripContext) -> str:
        try:
            return self.generator.generate(context)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Primary itinerary backend failed, fallback to mock: %s", exc)
            if self.fallback_generator:
                return self.fallback_generator.generate(context)
            raise

    def _store(self, user_id: str, context: TripContext, content: str) -> Trip:
        trip = Trip(
            trip_id=str(uuid4()),
            user_id=user_id,
            context=context,
            content=content,
            created_at=datetime.now(timezone.utc),
        )
        self.repository.save_trip(trip)
        logger.info(
            "Stored trip %s for user %s to %s", trip.trip_id, user_id, context.destination
        )
        return trip

    def create_trip(self, user_id: str, request: TripRequest) -> TripSchema:
        context = PreferencesTool().apply(
            request.to_context(), self.repository.get_profile(user_id)
        )
        content = self._generate(context)
        return TripSchema.from_domain(self._store(user_id, context, content))

    def import_trip(self, user_id: str, request: TripImportRequest) -> TripSchema:
        return TripSchema.from_domain(
            self._store(user_id, request.to_context(), request.content)
        )

    def get_trip(self, trip_id: str, user_id: str) -> Trip:
        trip = self.repository.get_trip(trip_id, user_id)
        if not trip:
            raise HTTPException(status_code=404, detail="Trip not found")
        return trip

    def list_trips(self, user_id: str) -> List[TripSchema]:
        return [TripSchema.from_domain(t) for t in self.repository.list_trips(user_id)]

    def delete_trip(self, trip_id: str, user_id: str) -> None:
        self.get_trip(trip_id, user_id)
        self.repository.delete_trip(trip_id)
        logger.info("Deleted trip %s", trip_id)
