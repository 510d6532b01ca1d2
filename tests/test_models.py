import json

from practicekit.movies.models import (
    RECORD_TYPE_MOVIE,
    Metadata,
    MovieDetails,
    Rating,
)


def test_metadata_round_trip():
    meta = Metadata(id="1", title="Heat", description="Crime", director="Mann")
    assert Metadata.from_dict(meta.to_dict()) == meta


def test_metadata_json_keys():
    meta = Metadata(id="1", title="Heat")
    assert list(meta.to_dict()) == ["id", "title", "description", "director"]


def test_metadata_from_dict_missing_and_unknown_fields():
    meta = Metadata.from_dict({"title": "Heat", "extra": 5})
    assert meta == Metadata(title="Heat")


def test_movie_details_omits_missing_rating():
    details = MovieDetails(metadata=Metadata(id="7"))
    assert details.to_dict() == {"metadata": Metadata(id="7").to_dict()}


def test_movie_details_includes_rating_first():
    details = MovieDetails(metadata=Metadata(id="7"), rating=4.5)
    data = details.to_dict()
    assert list(data) == ["rating", "metadata"]
    assert data["rating"] == 4.5


def test_movie_details_is_json_serialisable():
    details = MovieDetails(metadata=Metadata(id="7", title="Heat"), rating=3.0)
    decoded = json.loads(json.dumps(details.to_dict()))
    assert Metadata.from_dict(decoded["metadata"]) == details.metadata


def test_rating_json_keys():
    rating = Rating(record_id="1", record_type=RECORD_TYPE_MOVIE, user_id="u", value=5)
    assert rating.to_dict() == {
        "recordId": "1",
        "recordType": "movie",
        "userId": "u",
        "value": 5,
    }