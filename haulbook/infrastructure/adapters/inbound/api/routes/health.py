"""Health check endpoint."""

from fastapi import APIRouter, Request

from haulbook.infrastructure.adapters.inbound.api.schemas import HealthResponse

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report application version and database connectivity."""
    settings = request.app.state.settings
    db_healthy = await request.app.state.db_config.health_check()
    return HealthResponse(
        status="healthy" if db_healthy else "degraded",
        app=settings.app_name,
        version=settings.version,
        environment=settings.environment,
        database="ok" if db_healthy else "ko",
    )
