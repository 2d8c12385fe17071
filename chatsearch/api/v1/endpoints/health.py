"""Health check endpoints for liveness and readiness."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from chatsearch.infrastructure.persistence.database import ping_database
from chatsearch.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check() -> ReadinessResponse | JSONResponse:
    """Return 200 if the database answers SELECT 1; 503 otherwise."""
    try:
        await ping_database()
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Readiness check failed: %s", type(e).__name__)
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(
                message="Database unreachable",
            ).model_dump(),
        )
    return ReadinessResponse()
