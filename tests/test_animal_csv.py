import json

import pytest

from practicekit.animal_csv import Animal, get_all_animals, get_animal
from practicekit.api import Response, as_json


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "animal.csv"
    path.write_text("Id;Name;Icon\n1;Dog;\U0001F436\n2;Cat;\U0001F431", encoding="utf-8")
    return path


def test_get_all_animals(csv_file):
    assert get_all_animals(csv_file) == [
        Animal(1, "Dog", "\U0001F436"),
        Animal(2, "Cat", "\U0001F431"),
    ]


def test_header_only_file_is_empty(tmp_path):
    path = tmp_path / "animal.csv"
    path.write_text("Id;Name;Icon", encoding="utf-8")
    assert get_all_animals(path) == []


def test_trailing_newline_is_an_error(tmp_path):
    path = tmp_path / "animal.csv"
    path.write_text("Id;Name;Icon\n1;Dog;d\n", encoding="utf-8")
    with pytest.raises(ValueError):
        get_all_animals(path)


def test_bad_id_is_an_error(tmp_path):
    path = tmp_path / "animal.csv"
    path.write_text("Id;Name;Icon\none;Dog;d", encoding="utf-8")
    with pytest.raises(ValueError):
        get_all_animals(path)


def test_short_line_is_an_error(tmp_path):
    path = tmp_path / "animal.csv"
    path.write_text("Id;Name;Icon\n1;Dog", encoding="utf-8")
    with pytest.raises(ValueError):
        get_all_animals(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_all_animals(tmp_path / "none.csv")


def test_get_animal_by_id(csv_file):
    assert get_animal(2, csv_file) == Animal(2, "Cat", "\U0001F431")


def test_get_animal_unknown_or_non_positive(csv_file):
    assert get_animal(9, csv_file) is None
    assert get_animal(0, csv_file) is None
    assert get_animal(-1, csv_file) is None


def test_json_field_names(csv_file):
    response = Response()
    as_json(response, get_all_animals(csv_file))
    decoded = json.loads(response.body)
    assert list(decoded[0]) == ["Id", "Name", "Icon"]
    assert decoded[1]["Name"] == "Cat"