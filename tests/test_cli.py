import re

import pytest

from cubealgo.cli import generate, main
from cubealgo.cube import CubeState
from cubealgo.rotation import Rotation

SOLVED = "WWWWWWWWWOOOOOOOOOGGGGGGGGGRRRRRRRRRBBBBBBBBBYYYYYYYYY"


@pytest.fixture
def solved():
    return CubeState.from_string(SOLVED)


def _apply(state, moves):
    for rot in moves:
        state = state.rotate(rot)
    return state


def test_generate_single_move(solved):
    desired = solved.rotate(Rotation.U)
    assert generate(solved, desired, 1, 1, 1) == [[Rotation.U]]


def test_generate_sorted_and_stops_after_threshold(solved):
    desired = _apply(solved, [Rotation.U, Rotation.D])
    result = generate(solved, desired, 1, 4, 1)
    assert result == sorted(result)
    assert all(len(sol) == 2 for sol in result)
    assert {tuple(sol) for sol in result} >= {
        (Rotation.U, Rotation.D),
        (Rotation.D, Rotation.U),
    }
    assert all(_apply(solved, sol) == desired for sol in result)


def test_generate_threshold_zero_stops_at_first_count(solved):
    desired = _apply(solved, [Rotation.U, Rotation.D])
    assert generate(solved, desired, 1, 3, 0) == []


def test_generate_empty_range(solved):
    assert generate(solved, solved.rotate(Rotation.R), 3, 2, 1) == []


def test_main_prints_solutions(capsys):
    desired = str(CubeState.from_string(SOLVED).rotate(Rotation.U))
    u_state = "WWWWWWWWWOOOOOOGGGGGGGGGRRRRRRRRRBBBBBBBBBOOOYYYYYYYYY"
    assert CubeState.from_string(u_state).unwrapped() == desired
    code = main(
        [
            "-i", SOLVED,
            "-d", u_state,
            "--min-moves", "1",
            "--max-moves", "1",
            "-t", "1",
        ]
    )
    out = capsys.readouterr().out
    assert code == 0
    lines = out.splitlines()
    assert lines[0] == "Solution 0: U "
    assert "Done." in lines
    assert re.search(r"^Elapsed Time: \d+\.\d{3}s$", out, re.MULTILINE)
    assert lines[-1] == "Solutions Found: 1"


def test_main_rejects_bad_state():
    with pytest.raises(SystemExit) as info:
        main(["-i", "WWW", "-d", SOLVED, "--min-moves", "1", "--max-moves", "1", "-t", "1"])
    assert info.value.code == 2


def test_main_rejects_out_of_range_moves():
    with pytest.raises(SystemExit) as info:
        main(["-i", SOLVED, "-d", SOLVED, "--min-moves", "1", "--max-moves", "300", "-t", "1"])
    assert info.value.code == 2


def test_main_requires_threshold():
    with pytest.raises(SystemExit) as info:
        main(["-i", SOLVED, "-d", SOLVED, "--min-moves", "0", "--max-moves", "1"])
    assert info.value.code == 2