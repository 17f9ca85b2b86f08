"""Middleware for the Gateway Service."""

from __future__ import annotations

from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from clockrelay_service_libs.logging_utils import bind_request_context

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Mint a request identifier for every inbound request.

    Caller-supplied identifiers are ignored: the Gateway is always the first
    hop, so the id it mints here is the one forwarded downstream, logged on
    every line and echoed in the X-Request-ID response header.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = str(uuid4())
        request.state.request_id = request_id
        bind_request_context(request_id)

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def get_request_id(request: Request) -> str:
    """Return the identifier minted for this request by RequestIdMiddleware."""
    return str(request.state.request_id)
