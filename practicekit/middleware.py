"""Middleware for the API router: JSON content checking and request logging."""

from __future__ import annotations

import logging
import time

from practicekit.api import Handler, Request, Response, bad_request

_log = logging.getLogger(__name__)


def content_is_json(handler: Handler) -> Handler:
    """Reject requests that declare a Content-Type other than application/json."""

    def wrapped(request: Request, response: Response) -> None:
        content_type = request.headers.get("Content-Type") or ""
        if content_type and content_type != "application/json":
            bad_request(response)
            return
        handler(request, response)

    return wrapped


def logger(handler: Handler) -> Handler:
    """Log the method, path and duration of every request."""

    def wrapped(request: Request, response: Response) -> None:
        start = time.perf_counter()
        handler(request, response)
        elapsed = time.perf_counter() - start
        _log.info("%s %s %.3fms", request.method, request.path, elapsed * 1000)

    return wrapped