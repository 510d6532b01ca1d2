"""Service logic for metadata, ratings and the movie details that combine them."""

from __future__ import annotations

from typing import Protocol

from practicekit.movies.models import RECORD_TYPE_MOVIE, Metadata, MovieDetails, Rating
from practicekit.movies.repository import RecordNotFoundError


class GatewayNotFoundError(LookupError):
    """Raised by a gateway when the remote service has no such record."""

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class MetadataNotFoundError(LookupError):
    """Raised when movie metadata is not found."""

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class RatingsNotFoundError(LookupError):
    """Raised when a record has no ratings."""

    def __init__(self, message: str = "ratings not found for this record") -> None:
        super().__init__(message)


class MovieNotFoundError(LookupError):
    """Raised when the metadata of a movie is not found."""

    def __init__(self, message: str = "movie metadata not found") -> None:
        super().__init__(message)


class _MetadataSource(Protocol):
    def get(self, movie_id: str) -> Metadata: ...


class _RatingStore(Protocol):
    def get(self, record_id: str, record_type: str) -> list[Rating]: ...

    def put(self, record_id: str, record_type: str, rating: Rating) -> None: ...


class _RatingSource(Protocol):
    def get_aggregated_rating(self, record_id: str, record_type: str) -> float: ...

    def put_rating(self, record_id: str, record_type: str, rating: Rating) -> None: ...


class MetadataController:
    """Looks up movie metadata in a repository."""

    def __init__(self, repo: _MetadataSource) -> None:
        self.repo = repo

    def get(self, movie_id: str) -> Metadata:
        """Return the metadata of ``movie_id``."""
        try:
            return self.repo.get(movie_id)
        except RecordNotFoundError as exc:
            raise MetadataNotFoundError() from exc


class RatingController:
    """Stores ratings and averages them."""

    def __init__(self, repo: _RatingStore) -> None:
        self.repo = repo

    def get_aggregated_rating(self, record_id: str, record_type: str) -> float:
        """Return the mean rating of a record."""
        try:
            ratings = self.repo.get(record_id, record_type)
        except RecordNotFoundError as exc:
            raise RatingsNotFoundError() from exc
        return sum(float(r.value) for r in ratings) / len(ratings)

    def put_rating(self, record_id: str, record_type: str, rating: Rating) -> None:
        """Store a rating of a record."""
        self.repo.put(record_id, record_type, rating)


class MovieController:
    """Combines metadata and ratings fetched through gateways."""

    def __init__(self, rating_gateway: _RatingSource, metadata_gateway: _MetadataSource) -> None:
        self.rating_gateway = rating_gateway
        self.metadata_gateway = metadata_gateway

    def get(self, movie_id: str) -> MovieDetails:
        """Return the details of ``movie_id``.

        A not-found answer from the rating gateway is raised; any other
        failure to fetch the rating leaves the rating empty.
        """
        try:
            metadata = self.metadata_gateway.get(movie_id)
        except GatewayNotFoundError as exc:
            raise MovieNotFoundError() from exc
        details = MovieDetails(metadata=metadata)
        try:
            details.rating = self.rating_gateway.get_aggregated_rating(
                movie_id, RECORD_TYPE_MOVIE
            )
        except GatewayNotFoundError:
            raise
        except Exception:
            details.rating = None
        return details