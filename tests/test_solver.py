import pytest

from cubealgo.cube import CubeState
from cubealgo.rotation import Rotation
from cubealgo.solution import has_useless_moves
from cubealgo.solver import solve

SOLVED = "WWWWWWWWWOOOOOOOOOGGGGGGGGGRRRRRRRRRBBBBBBBBBYYYYYYYYY"
CCC = "RWGRWWRRRYOBOOBBBBWWWWGGWGRGGGRRGWRGYBOYBBYYYBYOYYOOOO"


@pytest.fixture
def solved():
    return CubeState.from_string(SOLVED)


def _apply(state, moves):
    for rot in moves:
        state = state.rotate(rot)
    return state


def test_zero_moves_same_state(solved):
    assert solve(solved, solved, 0, False) == [[]]


def test_zero_moves_different_state(solved):
    assert solve(solved, solved.rotate(Rotation.U), 0, False) == []


def test_one_move(solved):
    assert solve(solved, solved.rotate(Rotation.R), 1, False) == [[Rotation.R]]


def test_one_move_from_scrambled_state():
    ccc = CubeState.from_string(CCC)
    assert solve(ccc, ccc.rotate(Rotation.Fp), 1, True) == [[Rotation.Fp]]


def test_negative_move_count_rejected(solved):
    with pytest.raises(ValueError):
        solve(solved, solved, -1, False)


def test_two_moves_commuting_faces(solved):
    desired = _apply(solved, [Rotation.U, Rotation.D])
    found = {tuple(s) for s in solve(solved, desired, 2, False)}
    assert (Rotation.U, Rotation.D) in found
    assert (Rotation.D, Rotation.U) in found


@pytest.mark.parametrize("move_count", [2, 3, 4])
def test_solutions_reach_target(solved, move_count):
    moves = [Rotation.R, Rotation.U, Rotation.Rp, Rotation.Up][:move_count]
    desired = _apply(solved, moves)
    found = solve(solved, desired, move_count, False)
    assert moves in found
    for sol in found:
        assert len(sol) == move_count
        assert _apply(solved, sol) == desired
        assert not has_useless_moves(solved, sol)


@pytest.mark.parametrize("move_count", [2, 3, 4])
def test_threaded_matches_single(solved, move_count):
    moves = [Rotation.F, Rotation.L, Rotation.Bp, Rotation.D][:move_count]
    desired = _apply(solved, moves)
    single = sorted(tuple(s) for s in solve(solved, desired, move_count, False))
    threaded = sorted(tuple(s) for s in solve(solved, desired, move_count, True))
    assert single == threaded
    assert tuple(moves) in single


def test_unreachable_in_given_moves(solved):
    desired = solved.rotate(Rotation.U)
    assert solve(solved, desired, 2, False) == []