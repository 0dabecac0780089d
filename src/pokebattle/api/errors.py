"""Translation of unexpected failures into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "An error occurred. Please view logs for more details"


def error_message(error: object) -> str:
    """Return a readable message for any raised value. Never raises."""

    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    try:
        return str(error)
    except Exception:
        return "Unknown error"


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": error_message(exc) or FALLBACK_MESSAGE},
    )
