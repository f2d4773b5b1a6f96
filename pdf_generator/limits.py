"""
Request body size limit.

Bodies that declare a Content-Length above the limit are rejected before
anything is read. Bodies without a declared length (chunked transfer) are
counted as they are received and rejected once the running total passes
the limit.
"""

import logging
from typing import Callable

from fastapi import HTTPException
from fastapi.responses import JSONResponse

from .models import ErrorResponse

logger = logging.getLogger(__name__)


class RequestBodyTooLarge(HTTPException):
    """Raised from the receive channel when a streamed body passes the limit."""

    def __init__(self, limit: int):
        super().__init__(status_code=413, detail=f"Request body exceeds {limit} bytes")
        self.limit = limit


def body_too_large_response() -> JSONResponse:
    return JSONResponse(
        status_code=413,
        content=ErrorResponse(error="Request body too large").model_dump(exclude_none=True)
    )


class BodySizeLimitMiddleware:
    """
    ASGI middleware enforcing a maximum request body size.

    Args:
        app: Wrapped ASGI application
        get_limit: Returns the current limit in bytes (read per request)
    """

    def __init__(self, app, get_limit: Callable[[], int]):
        self.app = app
        self.get_limit = get_limit

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        limit = self.get_limit()
        declared = dict(scope.get("headers") or []).get(b"content-length", b"")
        if declared.isdigit() and int(declared) > limit:
            logger.warning(f"Rejecting {int(declared)} byte body (limit {limit})")
            await body_too_large_response()(scope, receive, send)
            return

        received = 0

        async def limited_receive():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > limit:
                    logger.warning(f"Rejecting streamed body after {received} bytes (limit {limit})")
                    raise RequestBodyTooLarge(limit)
            return message

        await self.app(scope, limited_receive, send)
