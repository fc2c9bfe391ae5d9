"""
Health check route.
"""
from fastapi import APIRouter, Depends

from send_reminder.core.config import Settings, get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    """
    Service health check.
    Reports whether the backend is configured, never the values themselves.
    """
    return {
        "status": "healthy",
        "module": "send-reminder",
        "version": settings.APP_VERSION,
        "configured": settings.is_configured,
    }
