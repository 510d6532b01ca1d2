"""A stand-alone rating service backed by memory."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from wsgiref import simple_server

from practicekit.api import Request, Response, wsgi_app
from practicekit.movies.controllers import RatingController
from practicekit.movies.handlers import RatingHandler
from practicekit.movies.repository import RatingRepository

_log = logging.getLogger(__name__)

DEFAULT_PORT = 8082


def create_app() -> Callable[..., list[bytes]]:
    """Return a WSGI application serving ``/rating`` from a fresh in-memory store."""
    handler = RatingHandler(RatingController(RatingRepository()))

    def dispatch(request: Request, response: Response) -> None:
        if request.path == "/rating":
            handler.handle(request, response)
            return
        response.headers["Content-Type"] = "text/plain; charset=utf-8"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.write_header(404)
        response.write("404 page not found\n")

    return wsgi_app(dispatch)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the rating service until interrupted."""
    parser = argparse.ArgumentParser(description="Rating service")
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="API handler port")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    _log.info("Starting the rating service")
    with simple_server.make_server(args.host, args.port, create_app()) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0