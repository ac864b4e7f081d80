"""
Error taxonomy and the single place where failures become HTTP responses.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import DBAPIError

logger = logging.getLogger(__name__)


class BookingAPIError(Exception):
    """Base class for failures that carry their own status code."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(BookingAPIError):
    # Treated as caller input error, not 401
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid API token"


class InvalidServerState(BookingAPIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Invalid user data in db"


class InvalidInput(BookingAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input data"


class NotFound(BookingAPIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Item not found"


class StorageConstraintViolation(BookingAPIError):
    """The store rejected a write: overlap, ordering, future start, foreign key."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def storage_error_message(exc: DBAPIError) -> str:
    """
    Extract the driver's own message from a wrapped DBAPI error.

    The asyncpg adapter chains the native exception as ``__cause__`` of
    ``exc.orig``; its text is the server message, e.g.
    ``conflicting key value violates exclusion constraint "bookings_overlap"``.
    """
    orig = getattr(exc, "orig", None)
    if orig is None:
        return str(exc)
    native = orig.__cause__ or orig
    return str(native)


async def booking_api_error_handler(request: Request, exc: BookingAPIError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"{request.method} {request.url.path} rejected (400): {exc.errors()}")
    return PlainTextResponse(InvalidInput.default_message, status_code=status.HTTP_400_BAD_REQUEST)


async def storage_error_handler(request: Request, exc: DBAPIError):
    logger.error(f"{request.method} {request.url.path} storage failure: {exc}")
    return PlainTextResponse(
        "Storage unavailable",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"{request.method} {request.url.path} unexpected failure: {exc}")
    return PlainTextResponse(
        "Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(BookingAPIError, booking_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(DBAPIError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
