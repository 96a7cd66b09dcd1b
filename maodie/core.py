"""Shared geometry, a tiny signal type and the playfield constants."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List

MAP_WIDTH = 256
MAP_HEIGHT = 256
MAX_GAMETIME = 60.0


@dataclass(frozen=True)
class Vec2:
    """An immutable 2-D point or vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vec2":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Vec2":
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vec2":
        """Unit vector in the same direction; the zero vector is returned unchanged."""
        length = self.length()
        if length > 0:
            return self / length
        return self

    def is_null(self) -> bool:
        """True when both components are zero."""
        return self.x == 0 and self.y == 0


class Signal:
    """A list of callbacks invoked in connection order."""

    def __init__(self) -> None:
        self._handlers: List[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> None:
        self._handlers.append(handler)

    def emit(self, *args: Any) -> None:
        for handler in list(self._handlers):
            handler(*args)