"""Hypermedia links attached to API resources."""

from __future__ import annotations

from dataclasses import dataclass, field

from practicekit.api import Request


@dataclass(frozen=True)
class Link:
    rel: str = field(metadata={"json": "rel"})
    action: str = field(metadata={"json": "action"})
    uri: str = field(metadata={"json": "uri"})


@dataclass
class Hateoas:
    """A list of links; resources inherit from it to carry their links."""

    links: list[Link] = field(default_factory=list, metadata={"json": "links"})

    def _add(self, action: str, uri: str) -> None:
        self.links.append(Link("self", action, uri))

    def self_get(self, request: Request) -> None:
        """Link to the requested URI with GET."""
        self._add("GET", request.host + request.request_uri)

    def self_put(self, request: Request) -> None:
        """Link to the requested URI with PUT."""
        self._add("PUT", request.host + request.request_uri)

    def self_delete(self, request: Request) -> None:
        """Link to the requested URI with DELETE."""
        self._add("DELETE", request.host + request.request_uri)

    def list_self_get(self, request: Request, item_id: str) -> None:
        """Link to one item of the requested list with GET."""
        self._add("GET", f"{request.host}{request.request_uri}/{item_id}")

    def list_self_put(self, request: Request, item_id: str) -> None:
        """Link to one item of the requested list with PUT."""
        self._add("PUT", f"{request.host}{request.request_uri}/{item_id}")

    def list_self_delete(self, request: Request, item_id: str) -> None:
        """Link to one item of the requested list with DELETE."""
        self._add("DELETE", f"{request.host}{request.request_uri}/{item_id}")

    def list_self_post(self, request: Request) -> None:
        """Link to the requested list, recorded with the DELETE action."""
        self._add("DELETE", request.host + request.request_uri)