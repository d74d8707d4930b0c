from contextlib import asynccontextmanager

from fastapi import FastAPI

from alignment_alerts.config import get_settings
from alignment_alerts.infrastructure.database import engine, initialize_database
from alignment_alerts.interfaces.api.routes import register_routes
from alignment_alerts.interfaces.jobs import start_alignment_notification_scheduler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables, start the queue jobs and release resources on shutdown."""

    initialize_database()
    stop_jobs = None
    if get_settings().scheduler_enabled:
        stop_jobs = start_alignment_notification_scheduler()
    yield
    if stop_jobs is not None:
        stop_jobs()
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="Alignment Alerts", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
