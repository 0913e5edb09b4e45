"""Quarter turns of the cube's faces."""

from __future__ import annotations

import enum

from cubealgo.face import Face

_OPPOSITES = {
    Face.U: Face.D,
    Face.D: Face.U,
    Face.L: Face.R,
    Face.R: Face.L,
    Face.F: Face.B,
    Face.B: Face.F,
}


class Rotation(enum.Enum):
    """A clockwise or counter-clockwise (prime) quarter turn of one face."""

    U = "U"
    Up = "U'"
    L = "L"
    Lp = "L'"
    F = "F"
    Fp = "F'"
    R = "R"
    Rp = "R'"
    B = "B"
    Bp = "B'"
    D = "D"
    Dp = "D'"

    def __str__(self) -> str:
        return self.value

    @property
    def _ordinal(self) -> int:
        return _ORDER[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rotation):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rotation):
            return NotImplemented
        return self._ordinal <= other._ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rotation):
            return NotImplemented
        return self._ordinal > other._ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rotation):
            return NotImplemented
        return self._ordinal >= other._ordinal

    def reverse(self) -> Rotation:
        """The turn that undoes this one."""
        if self.is_prime():
            return Rotation(self.value[:-1])
        return Rotation(self.value + "'")

    def face(self) -> Face:
        """The face this rotation turns."""
        return Face[self.value[0]]

    def opposite_face(self) -> Face:
        """The face across the cube from the turned face."""
        return _OPPOSITES[self.face()]

    def is_prime(self) -> bool:
        """Whether this is a counter-clockwise turn."""
        return self.value.endswith("'")


_ORDER = {rotation: index for index, rotation in enumerate(Rotation)}