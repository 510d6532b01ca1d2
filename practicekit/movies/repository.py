"""In-memory stores for movie metadata and ratings."""

from __future__ import annotations

import threading

from practicekit.movies.models import Metadata, Rating


class RecordNotFoundError(LookupError):
    """Raised when a requested record is not stored."""

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class MetadataRepository:
    """Movie metadata keyed by movie id."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[str, Metadata] = {}

    def get(self, movie_id: str) -> Metadata:
        """Return the metadata for ``movie_id``."""
        with self._lock:
            try:
                return self._data[movie_id]
            except KeyError:
                raise RecordNotFoundError() from None

    def put(self, movie_id: str, metadata: Metadata) -> None:
        """Store ``metadata`` under ``movie_id``, replacing what was there."""
        with self._lock:
            self._data[movie_id] = metadata


class RatingRepository:
    """Ratings grouped by record type and record id."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: dict[str, dict[str, list[Rating]]] = {}

    def get(self, record_id: str, record_type: str) -> list[Rating]:
        """Return every rating of a record; a record with none is not found."""
        with self._lock:
            ratings = self._data.get(record_type, {}).get(record_id)
            if not ratings:
                raise RecordNotFoundError()
            return list(ratings)

    def put(self, record_id: str, record_type: str, rating: Rating) -> None:
        """Add ``rating`` to a record."""
        with self._lock:
            self._data.setdefault(record_type, {}).setdefault(record_id, []).append(rating)