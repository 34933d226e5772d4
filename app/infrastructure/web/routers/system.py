"""
System router.
Liveness and database connectivity checks for monitoring.
"""

from typing import Annotated, Any, Dict
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.config import settings
from app.infrastructure.db.database import get_db, check_database_connection


router = APIRouter()


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "environment": settings.environment,
        "version": settings.api_version
    }


@router.get("/status")
async def status_check(session: Annotated[Session, Depends(get_db)]) -> JSONResponse:
    """Health check that also verifies the database answers."""
    database_ok = check_database_connection(session)

    return JSONResponse(
        status_code=status.HTTP_200_OK if database_ok else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "healthy" if database_ok else "unhealthy",
            "database": "connected" if database_ok else "unavailable",
            "environment": settings.environment,
            "version": settings.api_version
        }
    )
