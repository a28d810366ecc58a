from fastapi import APIRouter
from starlette.requests import Request

router = APIRouter()


@router.get("/health")
def healthcheck(request: Request) -> dict:
    settings = request.app.state.settings
    return {"status": "ok", "app": settings.app_name, "environment": settings.environment}
