"""Main FastAPI application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import Response

from api.errors import register_error_handlers
from api.goal_routes import router as goal_router
from api.schedule_routes import router as schedule_router
from api.user_routes import router as user_router
from config.settings import settings
from models.database import close_mongo_connection, init_mongo
from utils.logger import setup_logger

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    logger.info("Starting application...")
    await init_mongo()  # Connect to MongoDB and create indexes
    logger.info("Application started successfully")

    yield

    logger.info("Shutting down application...")
    await close_mongo_connection()
    logger.info("Application shut down")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Goals, daily schedules and profiles for the LifeSync app",
    lifespan=lifespan,
)

register_error_handlers(app)


def cors_headers() -> dict:
    """Headers attached to every response."""
    return {
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": ",".join(settings.cors_allow_methods),
        "Access-Control-Allow-Headers": ", ".join(settings.cors_allow_headers),
    }


@app.middleware("http")
async def cors_middleware(request: Request, call_next):
    """Answer every preflight with an empty 200 before routing or auth; tag all other responses."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=cors_headers())

    response = await call_next(request)
    response.headers.update(cors_headers())
    return response


app.include_router(goal_router)
app.include_router(schedule_router)
app.include_router(user_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "LifeSync API",
        "version": settings.app_version,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.app_name
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
