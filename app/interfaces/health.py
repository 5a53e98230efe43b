"""
Health check router.

Reports application status, version and whether the users database
answers a trivial query. Always returns 200 so liveness checks pass
while the database is down; readiness is read from ``database``.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.interfaces.users.dependencies import get_db_engine
from app.interfaces.users.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def _database_status(engine: Engine) -> str:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Health check: database unavailable (%s)", type(exc).__name__)
        return "unavailable"
    return "ok"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application status, version and database reachability.",
)
def health_check(engine: Engine = Depends(get_db_engine)) -> HealthResponse:
    """Return current application health status."""
    database = _database_status(engine)
    return HealthResponse(
        status="ok" if database == "ok" else "degraded",
        version=settings.version,
        database=database,
    )
