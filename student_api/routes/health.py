"""
Liveness routes for the Student Registry backend.

Both endpoints are public and never touch the database. /test is the path
the browser frontend probes to decide whether the API is online.
"""

from fastapi import APIRouter, status

from student_api.schemas.health import HealthResponse
from student_api.utils.logging import get_logger

logger = get_logger(__name__)

# Mounted at root level in main.py
router = APIRouter(tags=["system"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check endpoint",
)
def health_check() -> HealthResponse:
    """Return a static ok status."""
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")


@router.get(
    "/test",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Frontend connectivity probe",
)
def connectivity_probe() -> HealthResponse:
    logger.debug("Connectivity probe called")

    return HealthResponse(status="ok")
