import uvicorn
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from send_reminder.api import health, reminders
from send_reminder.core.config import Settings, get_settings
from send_reminder.core.logging import setup_logging, get_logger

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(debug=settings.DEBUG)

    app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)
    app.dependency_overrides[get_settings] = lambda: settings

    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_methods=["POST"],
            allow_headers=["Authorization", "Content-Type", "apikey", "x-client-info"],
        )

    app.include_router(reminders.router)
    app.include_router(health.router)

    if not settings.is_configured:
        logger.warning(settings.missing_config_message())

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
