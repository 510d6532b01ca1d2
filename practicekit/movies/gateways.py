"""HTTP clients that reach the metadata and rating services through a registry."""

from __future__ import annotations

import logging
import random
from typing import Any

import requests

from practicekit.movies.controllers import GatewayNotFoundError
from practicekit.movies.discovery import Registry
from practicekit.movies.models import Metadata, Rating

_log = logging.getLogger(__name__)


def _check(response: requests.Response) -> None:
    if response.status_code == 404:
        raise GatewayNotFoundError()
    if response.status_code // 100 != 2:
        raise requests.HTTPError(
            f"non-2xx response: {response.status_code}", response=response
        )


class _Gateway:
    def __init__(
        self,
        registry: Registry,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.registry = registry
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, service: str, path: str) -> str:
        addresses = self.registry.service_addresses(service)
        return f"http://{random.choice(addresses)}{path}"


class MetadataGateway(_Gateway):
    """Fetches movie metadata from the metadata service."""

    def get(self, movie_id: str) -> Metadata:
        """Return the metadata of ``movie_id``."""
        url = self._url("metadata", "/metadata")
        _log.info("Calling metadata service. Request: GET %s", url)
        response = self.session.get(url, params=[("id", movie_id)], timeout=self.timeout)
        with response:
            _check(response)
            data: Any = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"expected a metadata object, got {data!r}")
        return Metadata.from_dict(data)


class RatingGateway(_Gateway):
    """Reads and writes ratings through the rating service."""

    def get_aggregated_rating(self, record_id: str, record_type: str) -> float:
        """Return the mean rating of a record."""
        url = self._url("rating", "/rating")
        _log.info("Calling rating service. Request: GET %s", url)
        response = self.session.get(
            url, params=[("id", record_id), ("type", record_type)], timeout=self.timeout
        )
        with response:
            _check(response)
            data: Any = response.json()
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            raise ValueError(f"expected a number, got {data!r}")
        return float(data)

    def put_rating(self, record_id: str, record_type: str, rating: Rating) -> None:
        """Store a rating of a record."""
        url = self._url("rating", "/rating")
        _log.info("Calling rating service. Request: PUT %s", url)
        params = [
            ("id", record_id),
            ("type", record_type),
            ("userId", rating.user_id),
            ("value", str(rating.value)),
        ]
        response = self.session.put(url, params=params, timeout=self.timeout)
        with response:
            if response.status_code // 100 != 2:
                raise requests.HTTPError(
                    f"non-2xx response: {response.status_code}", response=response
                )