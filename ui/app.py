"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config
from core.health import (
    HealthChecker,
    check_event_loop,
    create_clock_check,
    create_entropy_check,
    create_logger_check,
)
from internal.logging import AsyncFileLogger, LogLevel, StructuredLogger, get_logger
from ui import auth
from ui.routes import health, ids, photos
from utils.crash import create_async_handler

VERSION = "1.0.0"


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    # Configure structured logging
    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    logger_instance = get_logger().bind(component="api")

    file_logger = AsyncFileLogger(file_path=config.logging.file)
    health_checker = HealthChecker()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version=VERSION)
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))

        await file_logger.start()
        logger_instance.info("Application started successfully", audit_log=config.logging.file)

        yield

        logger_instance.info("Application shutting down")
        await file_logger.stop()
        logger_instance.info("Application shutdown complete", **file_logger.get_stats())

    app = FastAPI(
        title="photokeys",
        version=VERSION,
        description="photo identifiers and titles",
        lifespan=lifespan,
    )

    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("entropy", create_entropy_check(), critical=True)
    health_checker.register("clock", create_clock_check(), critical=True)
    health_checker.register("audit_log", create_logger_check(file_logger), critical=False)

    # Initialize route modules with dependencies
    auth.configure(config.api.username, config.api.password)
    health.init(health_checker, file_logger)
    ids.init(config.api, file_logger)
    photos.init(file_logger)

    app.include_router(health.router)
    app.include_router(ids.router)
    app.include_router(photos.router)

    return app
