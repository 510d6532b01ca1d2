"""A money amount split into whole units and cents, and a person holding one."""

from __future__ import annotations

from dataclasses import dataclass, field

_U8_MASK = 0xFF
_U64_MASK = (1 << 64) - 1


def _check(large: int, small: int) -> None:
    if not 0 <= large <= _U64_MASK:
        raise ValueError(f"large must fit in 64 unsigned bits, got {large}")
    if not 0 <= small <= _U8_MASK:
        raise ValueError(f"small must fit in 8 unsigned bits, got {small}")


@dataclass
class Money:
    """An amount of ``large`` whole units and ``small`` cents.

    ``small`` is held in eight unsigned bits and ``large`` in sixty-four,
    with the wrap-around that implies.
    """

    large: int = 0
    small: int = 0

    def __post_init__(self) -> None:
        _check(self.large, self.small)

    def add(self, large: int, small: int) -> None:
        """Add an amount, carrying cents above 100 into whole units."""
        _check(large, small)
        cents = (self.small + small) & _U8_MASK
        if cents > 100:
            self.large = (self.large + cents // 100) & _U64_MASK
            self.small = cents % 100
        else:
            self.small = cents
        self.large = (self.large + large) & _U64_MASK

    def remove(self, large: int, small: int) -> None:
        """Subtract an amount; an amount larger than the balance empties it."""
        _check(large, small)
        removed = (large * 100 + small) & _U64_MASK
        held = (self.large * 100 + self.small) & _U64_MASK
        if held < removed:
            self.large = 0
            self.small = 0
        else:
            held -= removed
            self.large = held // 100
            self.small = held % 100

    def __str__(self) -> str:
        return f"{self.large},{self.small}"


@dataclass
class Person:
    """A named person with some money."""

    name: str
    last_name: str
    money: Money = field(default_factory=Money)

    def __str__(self) -> str:
        return f"{self.name} {self.last_name} - {self.money}"