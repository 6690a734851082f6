"""
API request logging.

Emits one line per API request:

    POST /api/contact 201 in 3ms :: {"success":true,...}

Lines longer than the configured width are cut and end with an ellipsis.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import FastAPI, Request, Response

from src.rules.models import HttpRules

logger = logging.getLogger(__name__)

ELLIPSIS = "…"


def format_request_line(
    method: str,
    path: str,
    status_code: int,
    duration_ms: int,
    body: Any = None,
    max_chars: int = 80,
) -> str:
    """Build the log line for one request, truncated to max_chars."""
    line = f"{method} {path} {status_code} in {duration_ms}ms"
    if body is not None:
        line += f" :: {json.dumps(body, separators=(',', ':'), default=str)}"
    if len(line) > max_chars:
        line = line[: max_chars - 1] + ELLIPSIS
    return line


def install_request_logging(
    app: FastAPI,
    http_rules: Callable[[], HttpRules] = HttpRules,
) -> None:
    """
    Register the request logging middleware on app.

    http_rules is called per request, so the rules file is read on first
    use and not when the app is built.
    """

    @app.middleware("http")
    async def log_api_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        rules = http_rules()
        path = request.url.path
        if not path.startswith(rules.api_prefix):
            return await call_next(request)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors are answered by the outer server error handler
            duration_ms = int((time.perf_counter() - start) * 1000)
            logger.info(
                format_request_line(
                    request.method,
                    path,
                    500,
                    duration_ms,
                    max_chars=rules.log_line_max_chars,
                )
            )
            raise

        duration_ms = int((time.perf_counter() - start) * 1000)
        body = getattr(request.state, "response_json", None)
        logger.info(
            format_request_line(
                request.method,
                path,
                response.status_code,
                duration_ms,
                body,
                rules.log_line_max_chars,
            )
        )
        return response
