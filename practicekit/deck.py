"""A deck of forty playing cards, with dealing, shuffling and file storage."""

from __future__ import annotations

import random
import struct
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

SHAPES = ("Spades", "Diamonds", "Hearts", "Clubs")
_SHUFFLE_RUNS = 3
_MAGIC = b"DECK"
_HEADER = struct.Struct(">4sI")
_CARD = struct.Struct(">qI")


@dataclass(frozen=True, order=True)
class Card:
    num: int
    name: str


class Deck(list):
    """An ordered list of cards."""

    def deal(self, size: int) -> Deck:
        """Remove the first ``size`` cards from the deck and return them."""
        if size < 0:
            raise ValueError(f"hand size must not be negative, got {size}")
        if size > len(self):
            raise ValueError(
                f"the Deck has a size of {len(self)} and don't support a hand size of {size}"
            )
        hand = Deck(self[:size])
        del self[:size]
        return hand

    def __str__(self) -> str:
        return "".join(f"{card.num} of {card.name}\n" for card in self)

    def save_to_file(self, file_name: str | Path) -> None:
        """Write the deck as text, one card per line."""
        Path(file_name).write_text(str(self), encoding="utf-8")

    def save_to_bin_file(self, file_name: str | Path) -> None:
        """Write the deck in a compact binary form."""
        chunks = [_HEADER.pack(_MAGIC, len(self))]
        for card in self:
            name = card.name.encode("utf-8")
            chunks.append(_CARD.pack(card.num, len(name)))
            chunks.append(name)
        Path(file_name).write_bytes(b"".join(chunks))


def init_deck() -> Deck:
    """Return a fresh deck: numbers 1 to 10 in each of the four shapes."""
    return Deck(Card(num, shape) for num in range(1, 11) for shape in SHAPES)


def _split(cards: Sequence[Card], runs: int, rng: random.Random) -> Iterator[Card]:
    if runs > 0 and cards:
        flag = rng.randrange(len(cards))
        yield from _split(cards[flag:], runs - 1, rng)
        yield from _split(cards[:flag], runs - 1, rng)
    else:
        yield from cards


def shuffle(deck: Sequence[Card], rng: random.Random | None = None) -> Deck:
    """Return a new deck made by cutting ``deck`` recursively at random points."""
    return Deck(_split(list(deck), _SHUFFLE_RUNS, rng or random.Random()))


def _parse_number(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def read_from_file(file_name: str | Path) -> Deck:
    """Read a deck written by :meth:`Deck.save_to_file`."""
    lines = Path(file_name).read_text(encoding="utf-8").split("\n")
    deck = Deck()
    # The text ends with a newline, so the last piece is always empty.
    for line in lines[:-1]:
        if line[1] != " ":
            deck.append(Card(_parse_number(line[:2]), line[6:]))
        else:
            deck.append(Card(_parse_number(line[0]), line[5:]))
    return deck


def _take(data: bytes, offset: int, size: int) -> bytes:
    chunk = data[offset : offset + size]
    if len(chunk) != size:
        raise ValueError("truncated deck file")
    return chunk


def read_from_bin_file(file_name: str | Path) -> Deck:
    """Read a deck written by :meth:`Deck.save_to_bin_file`."""
    data = Path(file_name).read_bytes()
    magic, count = _HEADER.unpack(_take(data, 0, _HEADER.size))
    if magic != _MAGIC:
        raise ValueError("not a deck file")
    offset = _HEADER.size
    deck = Deck()
    for _ in range(count):
        num, length = _CARD.unpack(_take(data, offset, _CARD.size))
        offset += _CARD.size
        name = _take(data, offset, length).decode("utf-8")
        offset += length
        deck.append(Card(num, name))
    return deck