import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger("good-hamburger")

GENERIC_ERROR_MESSAGE = "Internal server error."


class OrderError(Exception):
    """Base class for errors raised by the order workflow."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(OrderError):
    """The request is malformed and must be corrected by the caller."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(OrderError):
    """A referenced sandwich, extra or order does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreError(OrderError):
    """The backing store failed; never handled by the workflow."""


def _error_body(message: str) -> dict:
    return {"success": False, "error": message}


async def _order_error_handler(request: Request, exc: OrderError) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.exception(
            "Store failure on %s %s: %s", request.method, request.url.path, exc.message,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=exc.status_code, content=_error_body(GENERIC_ERROR_MESSAGE)
        )
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


# Starlette re-raises after this handler, so the server logs the traceback.
async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(GENERIC_ERROR_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OrderError, _order_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
