"""API router factory with core endpoints."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from academic_records.utils.db import verify_db_connection

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Create router with the entity endpoints and health checks.

    All routes are mounted under the /api prefix.

    Returns:
        APIRouter with entity and health endpoints.
    """
    from academic_records.api.degree_programs import router as degree_programs_router
    from academic_records.api.plan_subjects import router as plan_subjects_router
    from academic_records.api.program_plans import router as program_plans_router
    from academic_records.api.students import router as students_router
    from academic_records.api.subjects import router as subjects_router
    from academic_records.api.teachers import router as teachers_router

    router = APIRouter(prefix=API_PREFIX)

    @router.get("/health", tags=["Health"], status_code=status.HTTP_200_OK)
    async def health_check() -> dict:
        """Health check endpoint - basic application health.

        Returns:
            Health status response.
        """
        return {"status": "healthy", "service": "academic-records"}

    @router.get(
        "/health/db",
        tags=["Health"],
        status_code=status.HTTP_200_OK,
        response_model=None,
    )
    async def health_check_db() -> JSONResponse:
        """Deep health check - includes database connectivity check.

        Returns:
            Health status with database connectivity information.
        """
        try:
            await verify_db_connection()
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "database": "disconnected"},
            )
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"status": "healthy", "database": "connected"},
        )

    router.include_router(students_router)
    router.include_router(teachers_router)
    router.include_router(degree_programs_router)
    router.include_router(program_plans_router)
    router.include_router(plan_subjects_router)
    router.include_router(subjects_router)

    return router
