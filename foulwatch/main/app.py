"""
Main Application - Main Layer

FastAPI application factory. Logging is configured from the environment
first, then again from the loaded settings; the container is built before
the routers are mounted so their ``Provide`` markers resolve.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from foulwatch.main.config import AppSettings, get_settings
from foulwatch.main.container import app_lifespan, init_container
from foulwatch.presentation.controllers import dashboard_router, system_router
from foulwatch.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

configure_logging()
update_logging_from_settings(get_settings())

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.startup", started_at=app.state.started_at.isoformat())

    # an invalid plant configuration raises here and the server never binds
    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("app.shutdown")


def _add_middleware(app: FastAPI, settings: AppSettings) -> None:
    origins = settings.ge.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )


def create_app() -> FastAPI:
    settings = get_settings()
    init_container(settings)

    app = FastAPI(
        title=settings.ge.title,
        description=settings.ge.description,
        version=settings.ge.version,
        debug=settings.ge.debug,
        lifespan=lifespan,
    )
    _add_middleware(app, settings)

    app.include_router(dashboard_router)
    app.include_router(system_router)

    logger.debug(
        "app.created",
        environment=settings.environment.value,
        influxdb_bucket=settings.influxdb.bucket,
    )
    return app


app = create_app()
