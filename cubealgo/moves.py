"""Face turns applied to a bit-packed cube state.

The state is an integer holding 50 cells of 3 bits each; cell 0 and cell 49
are padding, cells 1-48 hold the stickers of the six faces (centres are
implicit). Each face owns eight consecutive cells, so a face turn is a shift
by one cell with wrap-around, and the ring of adjacent stickers is moved with
precomputed masks.
"""

from __future__ import annotations

from dataclasses import dataclass

from cubealgo.rotation import Rotation

CELL_BITS = 3
CELL_MASK = 0b111


def _mask(cells: int) -> int:
    return CELL_MASK * cells


UP_MASK = _mask(0x1249248)
UP_OVERFLOW_MASK_REV = _mask(0x8008000)
UP_OVERFLOW_MASK = _mask(0x1001)
UP_SIDE_MASK = _mask(0x9008009008009008009008000000)
UP_SIDE_OVERFLOW_MASK = _mask(0x9008)
UP_SIDE_OVERFLOW_MASK_REV = _mask(0x9008000000000000000000000000000000)

LEFT_MASK = _mask(0x1249248000000)
LEFT_OVERFLOW_MASK_REV = _mask(0x8008000000000)
LEFT_OVERFLOW_MASK = _mask(0x1001000000)
LEFT_SIDE_MASK_0 = _mask(0x40048)
LEFT_SIDE_MASK_1 = _mask(0x40048000000000000)
LEFT_SIDE_MASK_2 = _mask(0x40048000000000000000000000000000000)
LEFT_SIDE_MASK_3 = _mask(0x1001200000000000000000000000000)

FRONT_MASK = _mask(0x1249248000000000000)
FRONT_OVERFLOW_MASK_REV = _mask(0x8008000000000000000)
FRONT_OVERFLOW_MASK = _mask(0x1001000000000000)
FRONT_SIDE_MASK_0 = _mask(0x200240)
FRONT_SIDE_MASK_1 = _mask(0x40048000000000000000000)
FRONT_SIDE_MASK_1A = _mask(0x40040000000000000000000)
FRONT_SIDE_MASK_1B = _mask(0x8000000000000000000)
FRONT_SIDE_MASK_2A = _mask(0x8008000000000000000000000000000000)
FRONT_SIDE_MASK_2B = _mask(0x1000000000000000000000000000000000)
FRONT_SIDE_MASK_3 = _mask(0x1001200000000)
FRONT_SIDE_MASK_3A = _mask(0x1001000000000)
FRONT_SIDE_MASK_3B = _mask(0x200000000)

RIGHT_MASK = _mask(0x1249248000000000000000000)
RIGHT_OVERFLOW_MASK_REV = _mask(0x8008000000000000000000000)
RIGHT_OVERFLOW_MASK = _mask(0x1001000000000000000000)
RIGHT_SIDE_MASK_0 = _mask(0x1001200)
RIGHT_SIDE_MASK_1 = _mask(0x40048000000000000000000000000)
RIGHT_SIDE_MASK_2 = _mask(0x1001200000000000000000000000000000000)
RIGHT_SIDE_MASK_3 = _mask(0x1001200000000000000)

BACK_MASK = _mask(0x1249248000000000000000000000000)
BACK_OVERFLOW_MASK_REV = _mask(0x8008000000000000000000000000000)
BACK_OVERFLOW_MASK = _mask(0x1001000000000000000000000000)
BACK_SIDE_MASK_0A = _mask(0x8008)
BACK_SIDE_MASK_0B = _mask(0x1000)
BACK_SIDE_MASK_1 = _mask(0x40048000000)
BACK_SIDE_MASK_1A = _mask(0x40040000000)
BACK_SIDE_MASK_1B = _mask(0x8000000)
BACK_SIDE_MASK_2 = _mask(0x200240000000000000000000000000000000)
BACK_SIDE_MASK_3 = _mask(0x1001200000000000000000000)
BACK_SIDE_MASK_3A = _mask(0x1001000000000000000000000)
BACK_SIDE_MASK_3B = _mask(0x200000000000000000000)

DOWN_MASK = _mask(0x1249248000000000000000000000000000000)
DOWN_OVERFLOW_MASK_REV = _mask(0x8008000000000000000000000000000000000)
DOWN_OVERFLOW_MASK = _mask(0x1001000000000000000000000000000000)
DOWN_SIDE_MASK = _mask(0x200240200240200240200240000000)
DOWN_SIDE_OVERFLOW_MASK = _mask(0x200240000000000000000000000000000000)
DOWN_SIDE_OVERFLOW_MASK_REV = _mask(0x200240)


@dataclass(frozen=True)
class _Cycle:
    """Cells under `mask` shift by `step` cells, spilling cells wrap by `wrap`."""

    mask: int
    overflow: int
    step: int
    wrap: int
    downward: bool

    def apply(self, state: int) -> int:
        cells = state & self.mask
        state ^= cells
        if self.downward:
            cells >>= CELL_BITS * self.step
        else:
            cells <<= CELL_BITS * self.step
        spill = cells & self.overflow
        cells ^= spill
        if self.downward:
            spill <<= CELL_BITS * self.wrap
        else:
            spill >>= CELL_BITS * self.wrap
        return state ^ cells ^ spill


@dataclass(frozen=True)
class _Pieces:
    """Groups of cells, each moved by a signed number of cells (positive is up)."""

    moves: tuple[tuple[int, int], ...]

    def apply(self, state: int) -> int:
        moved = [_shift(state & mask, cells) for mask, cells in self.moves]
        covered = 0
        for mask, _ in self.moves:
            covered |= mask
        state ^= state & covered
        for part in moved:
            state ^= part
        return state


def _shift(value: int, cells: int) -> int:
    if cells >= 0:
        return value << (CELL_BITS * cells)
    return value >> (CELL_BITS * -cells)


def _face(mask: int, overflow: int, downward: bool) -> _Cycle:
    return _Cycle(mask, overflow, step=1, wrap=4, downward=downward)


def _ring(mask: int, overflow: int, downward: bool) -> _Cycle:
    return _Cycle(mask, overflow, step=8, wrap=32, downward=downward)


_STEPS: dict[Rotation, tuple[_Cycle | _Pieces, ...]] = {
    Rotation.U: (
        _face(UP_MASK, UP_OVERFLOW_MASK, True),
        _ring(UP_SIDE_MASK, UP_SIDE_OVERFLOW_MASK, True),
    ),
    Rotation.Up: (
        _face(UP_MASK, UP_OVERFLOW_MASK_REV, False),
        _ring(UP_SIDE_MASK, UP_SIDE_OVERFLOW_MASK_REV, False),
    ),
    Rotation.L: (
        _face(LEFT_MASK, LEFT_OVERFLOW_MASK, True),
        _Pieces(
            (
                (LEFT_SIDE_MASK_0, 16),
                (LEFT_SIDE_MASK_1, 24),
                (LEFT_SIDE_MASK_2, -6),
                (LEFT_SIDE_MASK_3, -34),
            )
        ),
    ),
    Rotation.Lp: (
        _face(LEFT_MASK, LEFT_OVERFLOW_MASK_REV, False),
        _Pieces(
            (
                (LEFT_SIDE_MASK_0, 34),
                (LEFT_SIDE_MASK_1, -16),
                (LEFT_SIDE_MASK_2, -24),
                (LEFT_SIDE_MASK_3, 6),
            )
        ),
    ),
    Rotation.F: (
        _face(FRONT_MASK, FRONT_OVERFLOW_MASK, True),
        _Pieces(
            (
                (FRONT_SIDE_MASK_0, 23),
                (FRONT_SIDE_MASK_1A, 15),
                (FRONT_SIDE_MASK_1B, 19),
                (FRONT_SIDE_MASK_2A, -29),
                (FRONT_SIDE_MASK_2B, -33),
                (FRONT_SIDE_MASK_3, -9),
            )
        ),
    ),
    Rotation.Fp: (
        _face(FRONT_MASK, FRONT_OVERFLOW_MASK_REV, False),
        _Pieces(
            (
                (FRONT_SIDE_MASK_0, 9),
                (FRONT_SIDE_MASK_1, -23),
                (FRONT_SIDE_MASK_2A, -15),
                (FRONT_SIDE_MASK_2B, -19),
                (FRONT_SIDE_MASK_3A, 29),
                (FRONT_SIDE_MASK_3B, 33),
            )
        ),
    ),
    Rotation.R: (
        _face(RIGHT_MASK, RIGHT_OVERFLOW_MASK, True),
        _Pieces(
            (
                (RIGHT_SIDE_MASK_0, 30),
                (RIGHT_SIDE_MASK_1, 10),
                (RIGHT_SIDE_MASK_2, -24),
                (RIGHT_SIDE_MASK_3, -16),
            )
        ),
    ),
    Rotation.Rp: (
        _face(RIGHT_MASK, RIGHT_OVERFLOW_MASK_REV, False),
        _Pieces(
            (
                (RIGHT_SIDE_MASK_0, 16),
                (RIGHT_SIDE_MASK_1, -30),
                (RIGHT_SIDE_MASK_2, -10),
                (RIGHT_SIDE_MASK_3, 24),
            )
        ),
    ),
    Rotation.B: (
        _face(BACK_MASK, BACK_OVERFLOW_MASK, True),
        _Pieces(
            (
                (BACK_SIDE_MASK_0A, 9),
                (BACK_SIDE_MASK_0B, 5),
                (BACK_SIDE_MASK_1, 33),
                (BACK_SIDE_MASK_2, -15),
                (BACK_SIDE_MASK_3A, -27),
                (BACK_SIDE_MASK_3B, -23),
            )
        ),
    ),
    Rotation.Bp: (
        _face(BACK_MASK, BACK_OVERFLOW_MASK_REV, False),
        _Pieces(
            (
                (BACK_SIDE_MASK_0A, 27),
                (BACK_SIDE_MASK_0B, 23),
                (BACK_SIDE_MASK_1A, -9),
                (BACK_SIDE_MASK_1B, -5),
                (BACK_SIDE_MASK_2, -33),
                (BACK_SIDE_MASK_3, 15),
            )
        ),
    ),
    Rotation.D: (
        _face(DOWN_MASK, DOWN_OVERFLOW_MASK, True),
        _ring(DOWN_SIDE_MASK, DOWN_SIDE_OVERFLOW_MASK, False),
    ),
    Rotation.Dp: (
        _face(DOWN_MASK, DOWN_OVERFLOW_MASK_REV, False),
        _ring(DOWN_SIDE_MASK, DOWN_SIDE_OVERFLOW_MASK_REV, True),
    ),
}


def apply_rotation(state: int, rotation: Rotation) -> int:
    """Return the packed state after turning one face a quarter turn."""
    for step in _STEPS[rotation]:
        state = step.apply(state)
    return state