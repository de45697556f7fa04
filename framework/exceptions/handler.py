from typing import Any
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from framework.config import settings
from framework.logging.logger import get_logger
from framework.response import ResponseModel

logger = get_logger("exception_handler")


class BusinessException(Exception):
    """Base class for business exceptions."""

    def __init__(self, message: str, status_code: int = 200, code: int = 400, detail: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.detail = detail


class QueryFactoryDisabled(BusinessException):
    """Raised when the query helper is requested while its registration is switched off."""

    def __init__(self):
        super().__init__(
            "Query factory is disabled (set QUERY_FACTORY_ENABLED=true)",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            code=503,
        )


def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    trace_id = getattr(request.state, "trace_id", "unknown")

    if isinstance(exc, BusinessException):
        logger.warning(f"Trace[{trace_id}] - BusinessError: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=ResponseModel.fail(code=exc.code, message=exc.message, data=exc.detail),
        )

    if isinstance(exc, RequestValidationError):
        logger.error(f"Trace[{trace_id}] - ValidationError: {exc.errors()}")
        return JSONResponse(
            status_code=422,
            content=ResponseModel.fail(
                code=422,
                message="Invalid request parameters",
                data=jsonable_encoder(exc.errors()),
            ),
        )

    if isinstance(exc, SQLAlchemyError):
        logger.critical(f"Trace[{trace_id}] - DatabaseError: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ResponseModel.fail(code=500, message="Service temporarily unavailable"),
        )

    logger.opt(exception=True).error(f"Trace[{trace_id}] - UncaughtException: {exc}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ResponseModel.fail(
            code=500,
            message="System busy, please try again later",
            data={"trace_id": trace_id} if settings.DEBUG else None,
        ),
    )


def register_exception_handlers(app):
    """Route business, validation, database and uncaught errors to the JSON envelope."""
    app.add_exception_handler(BusinessException, global_exception_handler)
    app.add_exception_handler(RequestValidationError, global_exception_handler)
    app.add_exception_handler(SQLAlchemyError, global_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
