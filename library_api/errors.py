"""
Error taxonomy for the catalog and the handlers that render it.

Every failure the catalog can report is a ``CatalogError`` subclass
carrying an HTTP status code and a human readable message. Routes do
not catch these; ``register_exception_handlers`` installs one handler
on the application that turns them into ``{"message": ...}`` payloads.
Body parse failures raised by FastAPI are folded into
``MalformedInput`` so that a bad create/update body is answered with
a 400 instead of FastAPI's default 422 validation report.
"""

import logging
from typing import Optional, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Bad request."

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class BookNotFound(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Book not found."


class MissingParameter(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Missing id query parameter."


class BookUnavailable(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Book not available."


class MalformedInput(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid book payload."


class NoSearchResults(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "No books found."


def register_exception_handlers(
    app: FastAPI, response_class: Type[JSONResponse] = JSONResponse
) -> None:
    """Attach the catalog error handlers to ``app``.

    ``response_class`` should be the application's default response
    class so that error payloads are rendered the same way (indented
    or compact) as successful ones.
    """

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        logger.info(
            "%s %s rejected: %s (%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.status_code,
        )
        return response_class(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "%s %s malformed request: %s",
            request.method,
            request.url.path,
            exc.errors(),
        )
        error = MalformedInput()
        return response_class(status_code=error.status_code, content={"message": error.message})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return response_class(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error."},
        )
