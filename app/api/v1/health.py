"""Health check endpoint."""

import logging

from fastapi import APIRouter

from app.api.v1.deps import DbSession
from app.core.config import settings
from app.core.database import check_db_connected
from app.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: DbSession) -> HealthResponse:
    """Always 200 so load balancers can tell a live process from a dead database."""
    if check_db_connected(db):
        return HealthResponse(environment=settings.APP_ENV, database="connected")
    logger.warning("Health check: database unreachable")
    return HealthResponse(status="degraded", environment=settings.APP_ENV, database="disconnected")
