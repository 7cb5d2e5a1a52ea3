import logging
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clinixa_notifications.application.use_cases.notifications import NotificationCenter
from clinixa_notifications.config import get_settings
from clinixa_notifications.infrastructure.notifications import HttpNotificationGateway
from clinixa_notifications.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the notification poller on startup and tear it down exactly once."""

    settings = get_settings()
    async with HttpNotificationGateway.from_settings(settings) as gateway:
        center = NotificationCenter.from_settings(gateway, settings)
        app.state.notification_center = center
        async with anyio.create_task_group() as task_group:
            await task_group.start(center.run)
            logger.info(
                "Polling %s every %ss",
                settings.notifications_api_url,
                settings.notification_poll_interval_seconds,
            )
            try:
                yield
            finally:
                center.stop()
                task_group.cancel_scope.cancel()
        app.state.notification_center = None


def configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application serving the staff inbox."""

    app = FastAPI(lifespan=lifespan)

    # Staff portal dev server.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


configure_logging()
app = create_app()
