import sys
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import FastAPI
from loguru import logger

from framework.config import settings
from framework.database.manager import DatabaseManager
from framework.exceptions.handler import register_exception_handlers
from framework.logging.logger import LogConfig
from framework.middleware.logging_md import LoggingMiddleware
from framework.query import register_query_factory
from apps.system.api.router import router as system_router

APP_IMPORT_PATH = "main:app"


@asynccontextmanager
async def lifespan(app: FastAPI):
    manager = DatabaseManager.get_instance()
    try:
        await manager.sql.connect()
        logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} started ({settings.APP_ENV})")
        yield
    finally:
        await manager.sql.disconnect()
        logger.info(f"{settings.APP_NAME} stopped")


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# Initialize logging configuration
LogConfig.setup_logging()

register_exception_handlers(app)

app.add_middleware(LoggingMiddleware)

app.include_router(
    system_router,
    prefix=settings.API_V1_PREFIX,
    tags=["System"]
)

# Off unless QUERY_FACTORY_ENABLED is set
register_query_factory(app)


def main(argv: Optional[List[str]] = None):
    """Hand the process over to the uvicorn CLI; blocks until shutdown.

    argv is forwarded untouched after the configured host/port, so any
    --host/--port given on the command line wins. Returns None after a clean
    shutdown; usage errors and failed startups still exit non-zero.
    """
    if argv is None:
        argv = sys.argv[1:]
    args = [APP_IMPORT_PATH, "--host", settings.HOST, "--port", str(settings.PORT), *argv]
    try:
        uvicorn.main.main(args=args, prog_name="querydsl-study")
    except SystemExit as exc:
        if exc.code not in (0, None):
            raise


if __name__ == "__main__":
    main()
