"""
Health check routes.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from oilsync.config import Settings
from oilsync.database import check_connection
from oilsync.dependencies import get_app_settings
from oilsync.utils.time import utcnow

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Health check endpoint."""
    return {
        "success": True,
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment,
        "timestamp": utcnow().isoformat() + "Z",
    }


@router.get("/detailed")
async def detailed_health_check(request: Request, settings: Settings = Depends(get_app_settings)):
    """
    Database, email and SMS status.

    Unhealthy (503) when the database is down; degraded when a notifier is
    unconfigured in production.
    """
    database = await check_connection(request.app.state.engine)
    checks = {
        "database": {
            "status": "healthy" if database["success"] else "unhealthy",
            "backend": database["backend"],
            "responseTimeMs": database["response_time_ms"],
            "error": database.get("error"),
        },
        "email": {"status": "configured" if settings.email_configured else "dev_mode"},
        "sms": {"status": "configured" if settings.sms_configured else "dev_mode"},
    }

    overall = "healthy"
    if not database["success"]:
        overall = "unhealthy"
    elif settings.is_production and not (settings.email_configured and settings.sms_configured):
        overall = "degraded"

    return JSONResponse(
        status_code=503 if overall == "unhealthy" else 200,
        content={
            "success": overall != "unhealthy",
            "status": overall,
            "version": settings.app_version,
            "environment": settings.environment,
            "timestamp": utcnow().isoformat() + "Z",
            "checks": checks,
        },
    )
