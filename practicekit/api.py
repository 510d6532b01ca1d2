"""A small HTTP toolkit: requests, responses, problem replies, JSON output and a router."""

from __future__ import annotations

import dataclasses
import json
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from http import HTTPStatus
from itertools import islice
from typing import Any
from urllib.parse import parse_qs, quote
from wsgiref.headers import Headers

Handler = Callable[["Request", "Response"], None]
Middleware = Callable[[Handler], Handler]

_FORM_METHODS = frozenset({"POST", "PUT", "PATCH"})
_FORM_TYPE = "application/x-www-form-urlencoded"
_PROBLEM_TYPE = "application/problem+json; charset=utf-8"
_JSON_TYPE = "application/json; charset=utf-8"
_TEXT_TYPE = "text/plain; charset=utf-8"

_VALUES = re.compile(
    r"([0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}|[0-9]+)"
)
_IDS = re.compile(r"\{[A-Za-z-]+\}")
_DEFAULT_IDS_NUM = 2

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _new_headers() -> Headers:
    return Headers([])


@dataclass
class Request:
    """An incoming HTTP request."""

    method: str = "GET"
    path: str = "/"
    query_string: str = ""
    headers: Headers = field(default_factory=_new_headers)
    body: bytes = b""
    host: str = ""
    request_uri: str = ""
    _form: dict[str, list[str]] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not self.request_uri:
            query = f"?{self.query_string}" if self.query_string else ""
            self.request_uri = quote(self.path) + query

    @classmethod
    def from_environ(cls, environ: Mapping[str, Any]) -> Request:
        """Build a request from a WSGI environment."""
        headers = _new_headers()
        for key, value in environ.items():
            if key.startswith("HTTP_"):
                headers.add_header(key[5:].replace("_", "-").title(), value)
        for key in ("CONTENT_TYPE", "CONTENT_LENGTH"):
            if environ.get(key):
                headers.add_header(key.replace("_", "-").title(), environ[key])

        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0
        stream = environ.get("wsgi.input")
        body = stream.read(length) if stream is not None and length > 0 else b""

        path = _wsgi_text(environ.get("PATH_INFO", "")) or "/"
        script = _wsgi_text(environ.get("SCRIPT_NAME", ""))
        query = environ.get("QUERY_STRING", "")

        host = environ.get("HTTP_HOST")
        if not host:
            host = environ.get("SERVER_NAME", "")
            port = environ.get("SERVER_PORT")
            if port:
                host = f"{host}:{port}"

        request_uri = environ.get("REQUEST_URI") or environ.get("RAW_URI")
        if not request_uri:
            request_uri = quote(script + path) + (f"?{query}" if query else "")

        return cls(
            method=environ.get("REQUEST_METHOD", "GET").upper(),
            path=path,
            query_string=query,
            headers=headers,
            body=body,
            host=host,
            request_uri=request_uri,
        )

    def _parsed_form(self) -> dict[str, list[str]]:
        if self._form is None:
            form: dict[str, list[str]] = {}
            content_type = (self.headers.get("Content-Type") or "").split(";")[0]
            if self.method in _FORM_METHODS and content_type.strip().lower() == _FORM_TYPE:
                text = self.body.decode("utf-8", "replace")
                for key, values in parse_qs(text, keep_blank_values=True).items():
                    form.setdefault(key, []).extend(values)
            for key, values in parse_qs(self.query_string, keep_blank_values=True).items():
                form.setdefault(key, []).extend(values)
            self._form = form
        return self._form

    def form_value(self, key: str) -> str:
        """Return the first form or query value for ``key``, or '' if there is none."""
        values = self._parsed_form().get(key)
        return values[0] if values else ""


def _wsgi_text(value: str) -> str:
    try:
        return value.encode("latin-1").decode("utf-8")
    except (UnicodeEncodeError, UnicodeDecodeError):
        return value


@dataclass
class Response:
    """An outgoing HTTP response being built by a handler."""

    status: int = 200
    headers: Headers = field(default_factory=_new_headers)
    body: bytearray = field(default_factory=bytearray)
    _header_written: bool = field(default=False, init=False, repr=False, compare=False)

    def write_header(self, status: int) -> None:
        """Set the status code; only the first call, before any write, takes effect."""
        if self._header_written:
            return
        self.status = int(status)
        self._header_written = True

    def write(self, data: bytes | str) -> int:
        """Append ``data`` to the body, fixing the status at 200 if none was set."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.write_header(HTTPStatus.OK)
        self.body.extend(data)
        return len(data)


@dataclass(frozen=True)
class ApiError:
    """A problem description sent as a JSON body."""

    title: str
    status: int


def _to_jsonable(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.metadata.get("json", f.name): _to_jsonable(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
            if not f.name.startswith("_")
        }
    if isinstance(obj, Mapping):
        return {
            key: _to_jsonable(value)
            for key, value in sorted(obj.items(), key=lambda item: str(item[0]))
        }
    if isinstance(obj, (list, tuple)):
        return [_to_jsonable(value) for value in obj]
    return obj


def _marshal(obj: Any) -> bytes:
    text = json.dumps(
        _to_jsonable(obj), ensure_ascii=False, separators=(",", ":"), allow_nan=False
    )
    for char, escape in _JSON_ESCAPES.items():
        text = text.replace(char, escape)
    return text.encode("utf-8")


def _write_error(response: Response, body: bytes, status: int) -> None:
    response.headers["Content-Type"] = _PROBLEM_TYPE
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.write_header(status)
    response.write(body)


def _http_error(response: Response, message: str, status: int) -> None:
    response.headers["Content-Type"] = _TEXT_TYPE
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.write_header(status)
    response.write(message + "\n")


def not_found(response: Response) -> None:
    """Reply 404 with a problem body."""
    status = HTTPStatus.NOT_FOUND.value
    _write_error(response, f'{{"title":"not found","status":{status}}}'.encode(), status)


def not_allowed(response: Response, allowed: Iterable[str]) -> None:
    """Reply 405 with a problem body listing the allowed methods."""
    status = HTTPStatus.METHOD_NOT_ALLOWED.value
    listed = "[" + " ".join(allowed) + "]"
    body = f'{{"title":"method not allowed","status":{status}, "allowed":{listed}}}'
    _write_error(response, body.encode(), status)


def internal_error(response: Response) -> None:
    """Reply with an internal-server-error problem body.

    The body reports 500 while the status line carries 405.
    """
    body = f'{{"title":"internal server error","status":{HTTPStatus.INTERNAL_SERVER_ERROR.value}}}'
    _write_error(response, body.encode(), HTTPStatus.METHOD_NOT_ALLOWED.value)


def bad_request(response: Response) -> None:
    """Reply 400 with a problem body."""
    status = HTTPStatus.BAD_REQUEST.value
    _write_error(response, f'{{"title":"bad request","status":{status}}}'.encode(), status)


def as_json_error(response: Response, error: ApiError) -> None:
    """Reply with ``error`` as a problem body and its status."""
    try:
        body = _marshal(error)
    except (TypeError, ValueError):
        internal_error(response)
        return
    _write_error(response, body, error.status)


def as_json(response: Response, obj: Any) -> None:
    """Reply with ``obj`` encoded as compact JSON."""
    try:
        body = _marshal(obj)
    except (TypeError, ValueError):
        internal_error(response)
        return
    response.headers["Content-Type"] = _JSON_TYPE
    response.write(body)


def _status_line(status: int) -> str:
    try:
        phrase = HTTPStatus(status).phrase
    except ValueError:
        phrase = ""
    return f"{status} {phrase}".rstrip()


def wsgi_app(handler: Handler) -> Callable[..., list[bytes]]:
    """Wrap a ``handler(request, response)`` callable as a WSGI application."""

    def app(environ: Mapping[str, Any], start_response: Callable[..., Any]) -> list[bytes]:
        request = Request.from_environ(environ)
        response = Response()
        handler(request, response)
        body = bytes(response.body)
        if body and response.headers.get("Content-Type") is None:
            response.headers["Content-Type"] = _TEXT_TYPE
        response.headers["Content-Length"] = str(len(body))
        start_response(_status_line(response.status), response.headers.items())
        return [body]

    return app


@dataclass
class _Route:
    handler: Handler
    id_names: list[str]


def _default_not_found(request: Request, response: Response) -> None:
    not_found(response)


def _method_not_allowed(response: Response, methods: Iterable[str]) -> None:
    del response.headers["Allow"]
    for method in methods:
        response.headers.add_header("Allow", method)
    status = HTTPStatus.METHOD_NOT_ALLOWED.value
    _http_error(response, f"{status} method not allowed", status)


class Router:
    """Routes requests by path and method; numbers and UUIDs in a path fill ``{name}`` parts."""

    def __init__(self) -> None:
        self._routes: dict[str, dict[str, _Route]] = {}
        self.not_found: Handler = _default_not_found
        self.ids_num = _DEFAULT_IDS_NUM

    def _register(self, pattern: str, handler: Handler, method: str) -> None:
        ids = [m.group(0) for m in islice(_IDS.finditer(pattern), self.ids_num)]
        key = _IDS.sub("{id}", pattern)
        names = [name[1:-1] for name in ids]
        self._routes.setdefault(key, {})[method] = _Route(handler, names)

    def get(self, pattern: str, handler: Handler) -> None:
        self._register(pattern, handler, "GET")

    def post(self, pattern: str, handler: Handler) -> None:
        self._register(pattern, handler, "POST")

    def put(self, pattern: str, handler: Handler) -> None:
        self._register(pattern, handler, "PUT")

    def delete(self, pattern: str, handler: Handler) -> None:
        self._register(pattern, handler, "DELETE")

    def serve(self, request: Request, response: Response) -> None:
        """Dispatch ``request`` to its handler, or reply 405 or not found."""
        methods = self._routes.get(request.path)
        if methods is not None:
            route = methods.get(request.method)
            if route is None:
                _method_not_allowed(response, methods)
                return
            route.handler(request, response)
            return

        methods = self._routes.get(_VALUES.sub("{id}", request.path))
        if methods is not None:
            route = methods.get(request.method)
            if route is None:
                _method_not_allowed(response, methods)
                return
            values = [m.group(0) for m in islice(_VALUES.finditer(request.path), self.ids_num)]
            form = request._parsed_form()
            for name, value in zip(route.id_names, values):
                form.setdefault(name, []).append(value)
            route.handler(request, response)
            return

        self.not_found(request, response)


class Api:
    """A router wrapped in a stack of middleware, usable as a WSGI application."""

    def __init__(self) -> None:
        self.router = Router()
        self._stack: Handler | None = None

    def use(self, middleware: Middleware) -> None:
        """Wrap everything registered so far in ``middleware``; the last one added runs first."""
        self._stack = middleware(self._stack or self.router.serve)

    def set_not_found(self, handler: Handler) -> None:
        """Replace the handler used when no route matches."""
        self.router.not_found = handler

    def set_id_number(self, value: int) -> None:
        """Set how many ``{name}`` parts of a path are filled from its values (default 2)."""
        if value < 0:
            raise ValueError(f"id number must not be negative, got {value}")
        self.router.ids_num = value

    def get(self, pattern: str, handler: Handler) -> None:
        self.router.get(pattern, handler)

    def post(self, pattern: str, handler: Handler) -> None:
        self.router.post(pattern, handler)

    def put(self, pattern: str, handler: Handler) -> None:
        self.router.put(pattern, handler)

    def delete(self, pattern: str, handler: Handler) -> None:
        self.router.delete(pattern, handler)

    def serve(self, request: Request, response: Response) -> None:
        """Run ``request`` through the middleware stack and the router."""
        (self._stack or self.router.serve)(request, response)

    def __call__(self, environ: Mapping[str, Any], start_response: Callable[..., Any]) -> list[bytes]:
        return wsgi_app(self.serve)(environ, start_response)