"""Meet-in-the-middle search for move sequences between two cube states."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from cubealgo.cube import CubeState
from cubealgo.rotation import Rotation
from cubealgo.solution import Solution, has_useless_moves, is_rot_useless


def _first_pass(
    move_count: int,
    middle_states: set[CubeState],
    state: CubeState,
    prev_states: list[CubeState],
    path: list[Rotation],
) -> None:
    """Collect every state reachable in half the moves from the start."""
    if len(path) == move_count // 2:
        middle_states.add(state)
        return

    for rot in Rotation:
        new_state = state.rotate(rot)
        if new_state in prev_states or is_rot_useless(path, rot):
            continue
        path.append(rot)
        prev_states.append(new_state)
        _first_pass(move_count, middle_states, new_state, prev_states, path)
        prev_states.pop()
        path.pop()


def _second_pass(
    move_count: int,
    middle_states: set[CubeState],
    found_solutions: list[Solution],
    initial_state: CubeState,
    state: CubeState,
    prev_states: list[CubeState],
    path: list[Rotation],
) -> None:
    """Walk back from the goal and join up with the collected middle states.

    Each meeting point is solved again with half the move count, so the
    paths to the middle states never have to be stored.
    """
    if len(path) == (move_count + 1) // 2:
        if state not in middle_states:
            return
        right = [rot.reverse() for rot in reversed(path)]
        for left in solve(initial_state, state, move_count // 2, False):
            joined = left + right
            if not has_useless_moves(initial_state, joined):
                found_solutions.append(joined)
        return

    for rot in Rotation:
        new_state = state.rotate(rot)
        if new_state in prev_states or is_rot_useless(path, rot):
            continue
        prev_states.append(new_state)
        path.append(rot)
        _second_pass(
            move_count,
            middle_states,
            found_solutions,
            initial_state,
            new_state,
            prev_states,
            path,
        )
        path.pop()
        prev_states.pop()


def _first_pass_from(move_count: int, initial_state: CubeState, rot: Rotation) -> set[CubeState]:
    state = initial_state.rotate(rot)
    middle_states: set[CubeState] = set()
    _first_pass(move_count, middle_states, state, [initial_state, state], [rot])
    return middle_states


def _second_pass_from(
    move_count: int,
    middle_states: set[CubeState],
    initial_state: CubeState,
    desired_state: CubeState,
    rot: Rotation,
) -> list[Solution]:
    state = desired_state.rotate(rot)
    found: list[Solution] = []
    _second_pass(
        move_count,
        middle_states,
        found,
        initial_state,
        state,
        [desired_state, state],
        [rot],
    )
    return found


def solve(
    initial_state: CubeState,
    desired_state: CubeState,
    move_count: int,
    multi_threaded: bool,
) -> list[Solution]:
    """Find every sequence of exactly `move_count` turns from one state to another."""
    if move_count < 0:
        raise ValueError("move_count must not be negative")

    if move_count == 0:
        return [[]] if initial_state == desired_state else []

    if move_count == 1:
        return [[rot] for rot in Rotation if initial_state.rotate(rot) == desired_state]

    if not multi_threaded:
        middle_states: set[CubeState] = set()
        found_solutions: list[Solution] = []
        _first_pass(move_count, middle_states, initial_state, [initial_state], [])
        _second_pass(
            move_count,
            middle_states,
            found_solutions,
            initial_state,
            desired_state,
            [desired_state],
            [],
        )
        return found_solutions

    rotations = list(Rotation)
    with ThreadPoolExecutor(max_workers=len(rotations)) as pool:
        middle_states = set()
        for generated in pool.map(
            lambda rot: _first_pass_from(move_count, initial_state, rot), rotations
        ):
            middle_states |= generated

        found_solutions = []
        for generated in pool.map(
            lambda rot: _second_pass_from(
                move_count, middle_states, initial_state, desired_state, rot
            ),
            rotations,
        ):
            found_solutions.extend(generated)

    return found_solutions