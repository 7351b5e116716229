"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from kosman.api.routes import bills, health, properties, readings, rooms, tenants
from kosman.api.routes import settings as settings_routes
from kosman.core.config import settings
from kosman.core.database import SessionLocal, engine, init_db
from kosman.core.exceptions import RoomNotFoundError
from kosman.core.logging import configure_logging
from kosman.services.kos_store import KosStore
from kosman.services.storage import SqlKeyValueStore


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the store once for the life of the process."""
    configure_logging(settings.LOG_LEVEL)
    init_db()
    app.state.store = KosStore(SqlKeyValueStore(SessionLocal), settings)
    yield
    engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Boarding-house properties, rooms, tenants, meter readings and bills",
    lifespan=lifespan,
)


@app.exception_handler(RoomNotFoundError)
async def room_not_found_handler(request: Request, exc: RoomNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Room not found", "room_id": exc.room_id},
    )


# Include API routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(settings_routes.router, prefix="/api")
app.include_router(properties.router, prefix="/api")
app.include_router(rooms.router, prefix="/api")
app.include_router(tenants.router, prefix="/api")
app.include_router(readings.router, prefix="/api")
app.include_router(bills.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "kosman.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
