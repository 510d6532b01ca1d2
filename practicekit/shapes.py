"""Shapes with an area, and animals that can be fed and walked."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Shape(ABC):
    """Anything with an area."""

    @abstractmethod
    def area(self) -> float:
        """Return the area of the shape."""


@dataclass(frozen=True)
class Triangle(Shape):
    height: float
    base: float

    def area(self) -> float:
        return 0.5 * self.base * self.height


@dataclass(frozen=True)
class Square(Shape):
    side: float

    def area(self) -> float:
        return self.side * self.side


class Dog(str):
    """A dog, named by its string value."""

    def feed(self, food: str) -> str:
        """Describe the dog eating ``food``."""
        return f"The {self} eats {food}"


class Cat(str):
    """A cat, named by its string value."""

    def feed(self, food: str) -> str:
        """Describe the cat eating ``food``."""
        return f"The {self} eats {food}"


def walk(animal: object) -> str:
    """Describe ``animal`` walking."""
    return f"The {animal} is walking"