"""Checks for move sequences that waste turns."""

from __future__ import annotations

from collections.abc import Sequence

from cubealgo.cube import CubeState
from cubealgo.rotation import Rotation

Solution = list[Rotation]


def has_useless_moves(initial_state: CubeState, solution: Sequence[Rotation]) -> bool:
    """Whether the sequence revisits a state or contains a redundant turn."""
    if len(solution) <= 1:
        return False

    path = [initial_state]
    for rot in solution:
        new_state = path[-1].rotate(rot)
        if new_state in path:
            return True
        path.append(new_state)

    return any(is_rot_useless(solution[:idx], rot) for idx, rot in enumerate(solution))


def is_rot_useless(solution: Sequence[Rotation], rot: Rotation) -> bool:
    """Whether appending `rot` to `solution` makes a redundant run on one axis."""
    if not solution:
        return False

    face = rot.face()
    fnet = -1 if rot.is_prime() else 1
    ftot = 1
    onet = 0
    otot = 0

    for previous in reversed(solution):
        if previous.face() != face and previous.opposite_face() != face:
            break
        step = -1 if previous.is_prime() else 1
        if previous.face() == face:
            ftot += 1
            fnet += step
        else:
            otot += 1
            onet += step

    return (abs(fnet) != ftot or ftot > 2) or (abs(onet) != otot or otot > 2)