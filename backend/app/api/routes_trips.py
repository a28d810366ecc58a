from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse

from app.api import get_repository, get_user_id
from app.models.schemas import (
    BudgetBreakdownResponse,
    SeasonalRecommendationSchema,
    TimelineResponse,
    TripImportRequest,
    TripListResponse,
    TripOverviewSchema,
    TripRequest,
    TripSchema,
)
from app.services.itinerary_service import ItineraryService
from app.services.planning_service import PlanningService
from app.storage.repository import InMemoryRepository

router = APIRouter()


def get_planning_service(
    repository: InMemoryRepository = Depends(get_repository),
) -> PlanningService:
    return PlanningService(repository=repository)


def get_itinerary_service(
    repository: InMemoryRepository = Depends(get_repository),
) -> ItineraryService:
    return ItineraryService(repository=repository)


@router.post("/", response_model=TripSchema, status_code=status.HTTP_201_CREATED)
def create_trip(
    request: TripRequest,
    user_id: str = Depends(get_user_id),
    service: PlanningService = Depends(get_planning_service),
) -> TripSchema:
    return service.create_trip(user_id=user_id, request=request)


@router.post("/import", response_model=TripSchema, status_code=status.HTTP_201_CREATED)
def import_trip(
    request: TripImportRequest,
    user_id: str = Depends(get_user_id),
    service: PlanningService = Depends(get_planning_service),
) -> TripSchema:
    return service.import_trip(user_id=user_id, request=request)


@router.get("/", response_model=TripListResponse)
def list_trips(
    user_id: str = Depends(get_user_id),
    service: PlanningService = Depends(get_planning_service),
) -> TripListResponse:
    return TripListResponse(trips=service.list_trips(user_id))


@router.get("/{trip_id}", response_model=TripSchema)
def get_trip(
    trip_id: str,
    user_id: str = Depends(get_user_id),
    service: PlanningService = Depends(get_planning_service),
) -> TripSchema:
    return TripSchema.from_domain(service.get_trip(trip_id, user_id))


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_trip(
    trip_id: str,
    user_id: str = Depends(get_user_id),
    service: PlanningService = Depends(get_planning_service),
) -> Response:
    service.delete_trip(trip_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{trip_id}/timeline", response_model=TimelineResponse)
def get_timeline(
    trip_id: str,
    user_id: str = Depends(get_user_id),
    service: ItineraryService = Depends(get_itinerary_service),
) -> TimelineResponse:
    return service.timeline(trip_id, user_id)


@router.get("/{trip_id}/budget-breakdown", response_model=BudgetBreakdownResponse)
def get_budget_breakdown(
    trip_id: str,
    user_id: str = Depends(get_user_id),
    service: ItineraryService = Depends(get_itinerary_service),
) -> BudgetBreakdownResponse:
    return service.budget_breakdown(trip_id, user_id)


@router.get("/{trip_id}/seasonal", response_model=SeasonalRecommendationSchema)
def get_seasonal(
    trip_id: str,
    user_id: str = Depends(get_user_id),
    service: ItineraryService = Depends(get_itinerary_service),
) -> SeasonalRecommendationSchema:
    return service.seasonal(trip_id, user_id)


@router.get("/{trip_id}/overview", response_model=TripOverviewSchema)
def get_overview(
    trip_id: str,
    user_id: str = Depends(get_user_id),
    service: ItineraryService = Depends(get_itinerary_service),
) -> TripOverviewSchema:
    return service.overview(trip_id, user_id)


@router.get("/{trip_id}/export", response_class=PlainTextResponse)
def export_trip(
    trip_id: str,
    user_id: str = Depends(get_user_id),
    service: ItineraryService = Depends(get_itinerary_service),
) -> PlainTextResponse:
    filename, body = service.export(trip_id, user_id)
    return PlainTextResponse(
        body, headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )
