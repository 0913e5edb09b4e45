"""The six faces of a 3x3x3 cube."""

from __future__ import annotations

import enum
import functools


@functools.total_ordering
class Face(enum.Enum):
    """A face of the cube, ordered U, L, F, R, B, D."""

    U = 0
    L = 1
    F = 2
    R = 3
    B = 4
    D = 5

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Face):
            return NotImplemented
        return self.value < other.value