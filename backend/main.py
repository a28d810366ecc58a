from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import routes_expenses, routes_health, routes_preferences, routes_trips
from app.core.config import settings
from app.core.logging import configure_logging
from app.storage.repository import InMemoryRepository


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.app_name, version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(routes_trips.router, prefix="/trips", tags=["trips"])
    app.include_router(routes_expenses.router, prefix="/trips", tags=["expenses"])
    app.include_router(
        routes_preferences.router, prefix="/users/me", tags=["preferences"]
    )

    # Shared by every request through app.api dependencies
    app.state.repository = InMemoryRepository()
    app.state.settings = settings
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
