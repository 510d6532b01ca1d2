"""Animals stored in a semicolon-separated file with a header line."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_PATH = Path("data") / "animal.csv"
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Animal:
    id: int = field(metadata={"json": "Id"})
    name: str = field(metadata={"json": "Name"})
    icon: str = field(metadata={"json": "Icon"})


def _parse_id(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid animal id {text!r}")
    return int(text)


def get_all_animals(path: str | Path = DEFAULT_PATH) -> list[Animal]:
    """Read every animal; each line after the header is ``id;name;icon``.

    Every line after the header must be a record, so a trailing empty line
    is an error.
    """
    lines = Path(path).read_text(encoding="utf-8").split("\n")[1:]
    animals = []
    for line in lines:
        columns = line.split(";")
        animal_id = _parse_id(columns[0])
        if len(columns) < 3:
            raise ValueError(f"expected id;name;icon, got {line!r}")
        animals.append(Animal(animal_id, columns[1], columns[2]))
    return animals


def get_animal(animal_id: int, path: str | Path = DEFAULT_PATH) -> Animal | None:
    """Return the animal with ``animal_id``, or None; ids below 1 never match."""
    if animal_id <= 0:
        return None
    return next((a for a in get_all_animals(path) if a.id == animal_id), None)