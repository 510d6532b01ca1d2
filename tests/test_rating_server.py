import io
import json
from unittest.mock import patch
from wsgiref.util import setup_testing_defaults

from practicekit.movies.rating_server import create_app, main


def _request(app, method, path, query=""):
    environ = {}
    setup_testing_defaults(environ)
    environ.update(
        REQUEST_METHOD=method,
        PATH_INFO=path,
        QUERY_STRING=query,
        CONTENT_LENGTH="0",
    )
    environ["wsgi.input"] = io.BytesIO(b"")
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(app(environ, start_response))
    return captured["status"], body


def test_unknown_path_is_not_found():
    status, body = _request(create_app(), "GET", "/other")
    assert status.startswith("404")
    assert body == b"404 page not found\n"


def test_missing_id_is_bad_request():
    status, _ = _request(create_app(), "GET", "/rating", "type=movie")
    assert status.startswith("400")


def test_put_then_get_round_trip():
    app = create_app()
    status, _ = _request(app, "PUT", "/rating", "id=9&type=movie&userId=u1&value=5")
    assert status.startswith("200")
    status, body = _request(app, "GET", "/rating", "id=9&type=movie")
    assert status.startswith("200")
    assert json.loads(body) == 5.0


def test_apps_do_not_share_ratings():
    first = create_app()
    _request(first, "PUT", "/rating", "id=9&type=movie&userId=u1&value=5")
    status, _ = _request(create_app(), "GET", "/rating", "id=9&type=movie")
    assert status.startswith("404")


def test_main_serves_on_requested_port():
    with patch("wsgiref.simple_server.make_server") as make_server:
        result = main(["--port", "9999"])
    assert result == 0
    assert make_server.call_args[0][:2] == ("", 9999)
    server = make_server.return_value.__enter__.return_value
    assert server.serve_forever.call_count == 1


def test_main_default_port():
    with patch("wsgiref.simple_server.make_server") as make_server:
        result = main([])
    assert result == 0
    assert make_server.call_args[0][1] == 8082