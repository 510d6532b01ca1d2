from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import responses
from responses import matchers

from practicekit.movies.controllers import GatewayNotFoundError
from practicekit.movies.discovery import MemoryRegistry, ServiceNotFoundError
from practicekit.movies.gateways import MetadataGateway, RatingGateway
from practicekit.movies.models import Metadata, Rating

METADATA_URL = "http://localhost:8081/metadata"
RATING_URL = "http://localhost:8082/rating"


@pytest.fixture
def registry():
    reg = MemoryRegistry()
    reg.register("metadata-1", "metadata", "localhost:8081")
    reg.register("rating-1", "rating", "localhost:8082")
    return reg


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_metadata_get(registry, mocked):
    meta = Metadata(id="1", title="T", description="D", director="X")
    mocked.add(
        responses.GET,
        METADATA_URL,
        json=meta.to_dict(),
        match=[matchers.query_param_matcher({"id": "1"})],
    )
    assert MetadataGateway(registry).get("1") == meta


def test_metadata_not_found(registry, mocked):
    mocked.add(responses.GET, METADATA_URL, status=404)
    with pytest.raises(GatewayNotFoundError):
        MetadataGateway(registry).get("1")


def test_metadata_server_error(registry, mocked):
    mocked.add(responses.GET, METADATA_URL, status=500)
    with pytest.raises(requests.HTTPError):
        MetadataGateway(registry).get("1")


def test_metadata_bad_body(registry, mocked):
    mocked.add(responses.GET, METADATA_URL, json=[1, 2])
    with pytest.raises(ValueError):
        MetadataGateway(registry).get("1")


def test_metadata_without_instances():
    with pytest.raises(ServiceNotFoundError):
        MetadataGateway(MemoryRegistry()).get("1")


def test_rating_get(registry, mocked):
    mocked.add(
        responses.GET,
        RATING_URL,
        json=4.5,
        match=[matchers.query_param_matcher({"id": "7", "type": "movie"})],
    )
    assert RatingGateway(registry).get_aggregated_rating("7", "movie") == 4.5


def test_rating_get_not_found(registry, mocked):
    mocked.add(responses.GET, RATING_URL, status=404)
    with pytest.raises(GatewayNotFoundError):
        RatingGateway(registry).get_aggregated_rating("7", "movie")


def test_rating_get_non_number(registry, mocked):
    mocked.add(responses.GET, RATING_URL, json="high")
    with pytest.raises(ValueError):
        RatingGateway(registry).get_aggregated_rating("7", "movie")


def test_rating_put_sends_query(registry, mocked):
    mocked.add(responses.PUT, RATING_URL, status=200)
    result = RatingGateway(registry).put_rating("7", "movie", Rating(user_id="u1", value=5))
    assert result is None
    assert len(mocked.calls) == 1
    request = mocked.calls[0].request
    assert request.method == "PUT"
    assert parse_qs(urlsplit(request.url).query) == {
        "id": ["7"],
        "type": ["movie"],
        "userId": ["u1"],
        "value": ["5"],
    }


def test_rating_put_error(registry, mocked):
    mocked.add(responses.PUT, RATING_URL, status=503)
    with pytest.raises(requests.HTTPError):
        RatingGateway(registry).put_rating("7", "movie", Rating(user_id="u1", value=5))