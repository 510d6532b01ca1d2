"""Data carried between the movie, metadata and rating services."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

RECORD_TYPE_MOVIE = "movie"


@dataclass
class Metadata:
    """Descriptive data about a movie."""

    id: str = ""
    title: str = ""
    description: str = ""
    director: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the JSON form of the metadata."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "director": self.director,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Metadata:
        """Build metadata from its JSON form; missing fields are empty, unknown ones ignored."""
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title", "")),
            description=str(data.get("description", "")),
            director=str(data.get("director", "")),
        )


@dataclass
class MovieDetails:
    """Movie metadata together with its aggregated rating, if there is one."""

    metadata: Metadata = field(default_factory=Metadata)
    rating: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; the rating is left out when there is none."""
        result: dict[str, Any] = {}
        if self.rating is not None:
            result["rating"] = self.rating
        result["metadata"] = self.metadata.to_dict()
        return result


@dataclass
class Rating:
    """One user's rating of a record."""

    record_id: str = ""
    record_type: str = ""
    user_id: str = ""
    value: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of the rating."""
        return {
            "recordId": self.record_id,
            "recordType": self.record_type,
            "userId": self.user_id,
            "value": self.value,
        }