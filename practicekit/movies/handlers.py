"""HTTP handlers for the metadata, movie and rating services."""

from __future__ import annotations

import json
import logging
import math
from http import HTTPStatus
from typing import Any

from practicekit.api import Request, Response
from practicekit.movies.controllers import (
    MetadataController,
    MetadataNotFoundError,
    MovieController,
    MovieNotFoundError,
    RatingController,
    RatingsNotFoundError,
)
from practicekit.movies.models import Rating

_log = logging.getLogger(__name__)

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _normalize(obj: Any) -> Any:
    # Whole floats are written without a fractional part, as in compact JSON numbers.
    if isinstance(obj, float) and math.isfinite(obj) and obj.is_integer() and abs(obj) < 1e21:
        return int(obj)
    if isinstance(obj, dict):
        return {key: _normalize(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_normalize(value) for value in obj]
    return obj


def _encode(obj: Any) -> bytes:
    """Encode ``obj`` as one line of compact JSON."""
    text = json.dumps(
        _normalize(obj), ensure_ascii=False, separators=(",", ":"), allow_nan=False
    )
    for char, escape in _JSON_ESCAPES.items():
        text = text.replace(char, escape)
    return (text + "\n").encode("utf-8")


def _write_json(response: Response, obj: Any) -> None:
    try:
        body = _encode(obj)
    except (TypeError, ValueError) as exc:
        _log.error("Response encode error: %s", exc)
        response.write_header(HTTPStatus.INTERNAL_SERVER_ERROR)
        return
    response.write(body)


class MetadataHandler:
    """Serves movie metadata."""

    def __init__(self, ctrl: MetadataController) -> None:
        self.ctrl = ctrl

    def get_metadata(self, request: Request, response: Response) -> None:
        """Handle GET /metadata?id=..."""
        movie_id = request.form_value("id")
        if not movie_id:
            response.write_header(HTTPStatus.BAD_REQUEST)
            return
        try:
            metadata = self.ctrl.get(movie_id)
        except MetadataNotFoundError:
            response.write_header(HTTPStatus.NOT_FOUND)
            return
        except Exception as exc:
            _log.error("Repository get error: %s", exc)
            response.write_header(HTTPStatus.INTERNAL_SERVER_ERROR)
            return
        _write_json(response, metadata.to_dict())


class MovieHandler:
    """Serves movie details."""

    def __init__(self, ctrl: MovieController) -> None:
        self.ctrl = ctrl

    def get_movie_details(self, request: Request, response: Response) -> None:
        """Handle GET /movie?id=..."""
        movie_id = request.form_value("id")
        try:
            details = self.ctrl.get(movie_id)
        except MovieNotFoundError:
            response.write_header(HTTPStatus.NOT_FOUND)
            return
        except Exception as exc:
            _log.error("Get error: %s", exc)
            response.write_header(HTTPStatus.INTERNAL_SERVER_ERROR)
            return
        _write_json(response, details.to_dict())


def _parse_value(text: str) -> int | None:
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or text != text.strip():
        return None
    return int(value)


class RatingHandler:
    """Serves and stores ratings."""

    def __init__(self, ctrl: RatingController) -> None:
        self.ctrl = ctrl

    def handle(self, request: Request, response: Response) -> None:
        """Handle GET and PUT /rating?id=...&type=..."""
        record_id = request.form_value("id")
        if not record_id:
            response.write_header(HTTPStatus.BAD_REQUEST)
            return
        record_type = request.form_value("type")
        if not record_type:
            response.write_header(HTTPStatus.BAD_REQUEST)
            return

        if request.method == "GET":
            try:
                value = self.ctrl.get_aggregated_rating(record_id, record_type)
            except RatingsNotFoundError:
                response.write_header(HTTPStatus.NOT_FOUND)
                return
            except Exception as exc:
                _log.error("Rating lookup error: %s", exc)
                value = 0.0
            _write_json(response, value)
        elif request.method == "PUT":
            user_id = request.form_value("userId")
            value = _parse_value(request.form_value("value"))
            if value is None:
                response.write_header(HTTPStatus.BAD_REQUEST)
                return
            try:
                self.ctrl.put_rating(
                    record_id, record_type, Rating(user_id=user_id, value=value)
                )
            except Exception as exc:
                _log.error("Repository put error: %s", exc)
                response.write_header(HTTPStatus.INTERNAL_SERVER_ERROR)
        else:
            response.write_header(HTTPStatus.BAD_REQUEST)