"""One log line per request with its id, timing and caller.

The caller is the email in the bearer token when it decodes; access
decisions stay with the route guards. Bodies are never logged.
"""
from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Dict

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from bistro.services.auth_service import parse_bearer_header


REQUEST_ID_HEADER = "X-Request-ID"

logger = logging.getLogger("bistro.request")


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        started = time.monotonic()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        context: Dict[str, Any] = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else None,
            "user_email": parse_bearer_header(request.headers.get("Authorization")).email,
        }

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s raised", request.method, request.url.path,
                extra={**context, "duration_ms": _elapsed_ms(started)},
            )
            raise

        context.update(status=response.status_code, duration_ms=_elapsed_ms(started))
        logger.log(
            _level_for(response.status_code),
            "%s %s -> %d", request.method, request.url.path, response.status_code,
            extra=context,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
