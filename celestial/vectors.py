"""Small mutable 2D and 3D vectors with component-wise arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
import operator


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class Vector2:
    """A 2D vector; binary operators return new vectors, augmented ones mutate."""

    x: float = 0.0
    y: float = 0.0

    def _combine(self, other: object, op: Callable) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(op(self.x, other.x), op(self.y, other.y))

    def _apply(self, other: object, op: Callable) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        self.x = op(self.x, other.x)
        self.y = op(self.y, other.y)
        return self

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __iadd__(self, other):
        return self._apply(other, operator.add)

    def __isub__(self, other):
        return self._apply(other, operator.sub)

    def __imul__(self, other):
        return self._apply(other, operator.mul)

    def __itruediv__(self, other):
        return self._apply(other, operator.truediv)

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)})"


@dataclass
class Vector3:
    """A 3D vector; binary operators return new vectors, augmented ones mutate."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def _combine(self, other: object, op: Callable) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))

    def _apply(self, other: object, op: Callable) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x = op(self.x, other.x)
        self.y = op(self.y, other.y)
        self.z = op(self.z, other.z)
        return self

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __iadd__(self, other):
        return self._apply(other, operator.add)

    def __isub__(self, other):
        return self._apply(other, operator.sub)

    def __imul__(self, other):
        return self._apply(other, operator.mul)

    def __itruediv__(self, other):
        return self._apply(other, operator.truediv)

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"