import asyncio
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please provide task/status"


class MissingTaskFieldsError(ValueError):
    """A task was submitted without its description or status."""

    def __init__(self, message: str = MISSING_FIELDS_MESSAGE):
        super().__init__(message)
        self.message = message


class DatabaseUnavailableError(RuntimeError):
    """No database engine could be built, so no session can be handed out."""


async def missing_fields_handler(request: Request, exc: MissingTaskFieldsError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": True, "message": exc.message})


async def database_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": True, "message": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MissingTaskFieldsError, missing_fields_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(DatabaseUnavailableError, database_error_handler)
    # Driver connection failures (refused, timed out) surface unwrapped
    app.add_exception_handler(OSError, database_error_handler)
    app.add_exception_handler(asyncio.TimeoutError, database_error_handler)
