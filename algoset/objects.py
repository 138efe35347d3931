"""Small object-oriented examples: animals, students and coloured shapes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Animal:
    """An animal that makes a generic sound."""

    def make_sound(self) -> str:
        """Return the sound this animal makes."""
        return "Some sound"


class Dog(Animal):
    """A dog, which barks."""

    def make_sound(self) -> str:
        """Return the dog's bark."""
        return "Woof"


@dataclass
class Student:
    """A student with an age and a registration number."""

    age: int = 0
    register_no: str = ""

    def describe(self) -> str:
        """Return the age and registration number separated by a space."""
        return f"{self.age} {self.register_no}"


class Shape(ABC):
    """A shape with a colour that knows how to describe itself."""

    def __init__(self, color: str = "") -> None:
        self.color = color

    @abstractmethod
    def draw(self) -> str:
        """Return a description of the shape and its colour."""


class Square(Shape):
    """A coloured square."""

    def draw(self) -> str:
        """Return a description of the square and its colour."""
        return f"square color is this : {self.color}"


class Circle(Shape):
    """A coloured circle."""

    def draw(self) -> str:
        """Return a description of the circle and its colour."""
        return f"circle color is this : {self.color}"


def halve(value: int) -> int:
    """Return value divided by two, truncated toward zero."""
    return -(-value // 2) if value < 0 else value // 2