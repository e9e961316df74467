"""
Health check endpoints.

/health only proves the process is up; /health/detailed also checks the
database and returns 503 when it is unreachable.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Use this for simple uptime monitoring and load balancer health checks.
    """
    return {
        "status": "healthy",
        "timestamp": _now()
    }


@router.get("/health/detailed", status_code=status.HTTP_200_OK)
def detailed_health_check(response: Response, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Detailed health check with database connectivity and row counts.
    """
    health_status: Dict[str, Any] = {
        "status": "healthy",
        "timestamp": _now(),
        "checks": {}
    }

    try:
        companies = db.execute(text("SELECT count(*) FROM companies")).scalar() or 0
        jobs = db.execute(text("SELECT count(*) FROM jobs")).scalar() or 0
        health_status["checks"]["database"] = {
            "status": "healthy",
            "companies": companies,
            "jobs": jobs,
        }
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": f"Database error: {e.__class__.__name__}"
        }
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return health_status
