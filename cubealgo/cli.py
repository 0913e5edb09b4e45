"""Command line generator of cube algorithms."""

from __future__ import annotations

import argparse
import sys
import time

from cubealgo.cube import CubeState, CubeStateError
from cubealgo.solution import Solution
from cubealgo.solver import solve

_DESCRIPTION = """\
Simple algorithm generator for a 3x3x3 Rubik's Cube

Format of states passed in arguments is a 54 character long string composed of:
characters: Y (yellow), B (blue), G (green), R (red), W (white), O (orange)
arranged from left to right, bottom to top, in the order of faces:
white -> orange -> green -> red -> blue -> yellow
example: WWWWWWWWWOOOOOOOOOGGGGGGGGGRRRRRRRRRBBBBBBBBBYYYYYYYYY (solved cube)
         WWWWWWWWWOOOOOOGGGGGGGGGRRRRRRRRRBBBBBBBBBOOOYYYYYYYYY (after U move)
         WWWWWWWWWOOOOOOOOOGGGGGGGRRRRRRRRBGGBBBBBBRBBYYYYYYYYY (after J-Perm)
"""


def _byte(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError(f"{value} is not in 0..=255")
    return value


def generate(
    initial_state: CubeState,
    desired_state: CubeState,
    min_moves: int,
    max_moves: int,
    threshold: int,
) -> list[Solution]:
    """Search move counts from min to max, stopping `threshold` counts after a first hit.

    Returns the distinct solutions in sorted order.
    """
    solutions: set[tuple] = set()
    since_found = 0
    for move_count in range(min_moves, max_moves + 1):
        solutions.update(
            tuple(sol) for sol in solve(initial_state, desired_state, move_count, True)
        )
        if since_found > 0 or solutions:
            since_found += 1
        if since_found >= threshold:
            break
    return [list(sol) for sol in sorted(solutions)]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cubealgo",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-i",
        "--initial-state",
        required=True,
        help="Initial Cube state, right->left bottom->top green on front white on top",
    )
    parser.add_argument("-d", "--desired-state", required=True, help="Desired Cube state")
    parser.add_argument(
        "--min-moves", type=_byte, required=True, help="Min moves for algorithms to be generated"
    )
    parser.add_argument(
        "--max-moves", type=_byte, required=True, help="Max moves for algorithms to be generated"
    )
    parser.add_argument(
        "-t",
        "--threshold",
        type=_byte,
        required=True,
        help="Max difference between shortest algorithm and the longest",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the generator and print every solution found."""
    parser = _parser()
    args = parser.parse_args(argv)

    try:
        initial_state = CubeState.from_string(args.initial_state)
        desired_state = CubeState.from_string(args.desired_state)
    except CubeStateError as exc:
        parser.error(str(exc))

    started = time.perf_counter()
    solutions = generate(
        initial_state, desired_state, args.min_moves, args.max_moves, args.threshold
    )
    elapsed = time.perf_counter() - started

    out = sys.stdout
    for idx, sol in enumerate(solutions):
        out.write(f"Solution {idx}: " + "".join(f"{rot} " for rot in sol) + "\n")
    out.write("\nDone.\n")
    out.write(f"Elapsed Time: {elapsed:.3f}s\n")
    out.write(f"Solutions Found: {len(solutions)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())