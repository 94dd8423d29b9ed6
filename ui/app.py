"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config
from core.health import (
    HealthChecker,
    check_codec,
    check_event_loop,
    create_random_source_check,
)
from internal.logging import get_logger, LogLevel, StructuredLogger
from utils.crash import create_async_handler
from ui.routes import health, ksuid

VERSION = "1.0.0"


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    # Configure structured logging
    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    logger_instance = get_logger()

    health_checker = HealthChecker()
    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("random_source", create_random_source_check(), critical=True)
    health_checker.register("codec", check_codec, critical=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version=VERSION)
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))

        report = await health_checker.check()
        logger_instance.info("Application started", health=report.status.value)

        yield

        logger_instance.info("Application shutdown complete")

    app = FastAPI(
        title="KSUID Service",
        version=VERSION,
        description="K-sortable unique identifier generation and parsing",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.health_checker = health_checker

    # Initialize route modules with dependencies
    ksuid.init(config.generator)
    health.init(health_checker)

    app.include_router(ksuid.router)
    app.include_router(health.router)

    return app
