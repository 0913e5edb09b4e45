"""A 3x3x3 cube state packed into a single integer."""

from __future__ import annotations

from dataclasses import dataclass

from cubealgo.moves import CELL_BITS, CELL_MASK, apply_rotation
from cubealgo.rotation import Rotation

# Position in the 54-character string -> packed cell index (0 marks a centre).
_DISPLAY_TO_CELL = (
    2, 7, 3, 6, 0, 8, 1, 5, 4,
    10, 15, 11, 14, 0, 16, 9, 13, 12,
    18, 23, 19, 22, 0, 24, 17, 21, 20,
    26, 31, 27, 30, 0, 32, 25, 29, 28,
    34, 39, 35, 38, 0, 40, 33, 37, 36,
    42, 47, 43, 46, 0, 48, 41, 45, 44,
)

_COLOUR_CODES = {"N": 0b000, "W": 0b001, "O": 0b010, "G": 0b011, "R": 0b100, "B": 0b101, "Y": 0b110}
_CODE_COLOURS = {code: colour for colour, code in _COLOUR_CODES.items()}

_PADDING = " " * 6


class CubeStateError(ValueError):
    """A cube description could not be parsed."""


class InvalidLengthError(CubeStateError):
    """The cube description does not have 54 characters."""

    def __init__(self) -> None:
        super().__init__("Invalid string length")


class InvalidCharacterError(CubeStateError):
    """The cube description holds a character that is not a colour."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid character: {char}")
        self.char = char


@dataclass(frozen=True)
class CubeState:
    """An immutable cube state; equal states compare and hash equal."""

    state: int = 0

    @classmethod
    def from_string(cls, text: str) -> CubeState:
        """Parse a 54-character colour string (centres are ignored)."""
        if len(text) != len(_DISPLAY_TO_CELL):
            raise InvalidLengthError()
        state = 0
        for cell, colour in zip(_DISPLAY_TO_CELL, text):
            if cell == 0:
                continue
            code = _COLOUR_CODES.get(colour)
            if code is None:
                raise InvalidCharacterError(colour)
            state |= code << (CELL_BITS * cell)
        return cls(state)

    def _cell(self, index: int) -> int:
        return (self.state >> (CELL_BITS * index)) & CELL_MASK

    def _cell_char(self, index: int) -> str:
        try:
            return _CODE_COLOURS[self._cell(index)]
        except KeyError:
            raise ValueError("Invalid state") from None

    def _row(self, start: int, row: int) -> str:
        c = self._cell_char
        if row == 0:
            return f"{c(start)} {c(start + 4)} {c(start + 3)}"
        if row == 1:
            return f"{c(start)}   {c(start + 2)}"
        if row == 2:
            return f"{c(start)} {c(start + 5)} {c(start + 1)}"
        raise ValueError("Invalid slice index")

    def unwrapped(self) -> str:
        """Render the cube as an unfolded net, one text line per sticker row."""
        lines = [_PADDING + self._row(start, row) for start, row in ((1, 0), (6, 1), (2, 2))]
        for starts, row in (((9, 17, 25, 33), 0), ((14, 22, 30, 38), 1), ((10, 18, 26, 34), 2)):
            lines.append(" ".join(self._row(start, row) for start in starts))
        lines.extend(_PADDING + self._row(start, row) for start, row in ((41, 0), (46, 1), (42, 2)))
        return "".join(line + "\n" for line in lines)

    def rotate(self, rotation: Rotation) -> CubeState:
        """Return the state after the given quarter turn."""
        return CubeState(apply_rotation(self.state, rotation))

    def __str__(self) -> str:
        return self.unwrapped()