"""
Health Check API Routes

Reports whether the relational store answers a trivial query.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from people_api.api.deps import ReadOnlySessionDep
from people_api.core.observability import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("/health", summary="Database health")
async def get_health_status(session: ReadOnlySessionDep) -> JSONResponse:
    try:
        session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Health check failed", error=str(e), error_type=type(e).__name__)
        return JSONResponse(
            status_code=503, content={"status": "unhealthy", "error": str(e)}
        )

    return JSONResponse(status_code=200, content={"status": "healthy"})
