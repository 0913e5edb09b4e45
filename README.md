# cubealgo

Generate move sequences ("algorithms") that take a 3x3x3 Rubik's Cube from
one state to another. The search is a bidirectional meet-in-the-middle over
the twelve quarter turns U, U', L, L', F, F', R, R', B, B', D, D'. It skips
sequences that revisit a cube state or that hold redundant turns, such as a
turn followed by its inverse or three turns of the same face in a row.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Cube states

A state is a string of 54 characters, one per sticker, with faces in this
order: white, orange, green, red, blue, yellow. Green is on the front and
white is on top. The colour letters are `W`, `O`, `G`, `R`, `B` and `Y`;
`N` marks a sticker whose colour does not matter. The centre sticker of
each face (the fifth character of each group of nine) is read but ignored.

```
WWWWWWWWWOOOOOOOOOGGGGGGGGGRRRRRRRRRBBBBBBBBBYYYYYYYYY   solved cube
WWWWWWWWWOOOOOOGGGGGGGGGRRRRRRRRRBBBBBBBBBOOOYYYYYYYYY   after U
WWWWWWWWWOOOOOOOOOGGGGGGGRRRRRRRRBGGBBBBBBRBBYYYYYYYYY   after a J-perm
```

## Command line

```
cubealgo \
    --initial-state WWWWWWWWWOOOOOOGGGGGGGGGRRRRRRRRRBBBBBBBBBOOOYYYYYYYYY \
    --desired-state WWWWWWWWWOOOOOOOOOGGGGGGGGGRRRRRRRRRBBBBBBBBBYYYYYYYYY \
    --min-moves 1 --max-moves 4 --threshold 1
```

Options (all required):

- `-i`, `--initial-state`: the state to start from.
- `-d`, `--desired-state`: the state to reach.
- `--min-moves`, `--max-moves`: the range of move counts to search, each a
  whole number from 0 to 255.
- `-t`, `--threshold`: a whole number from 0 to 255 that bounds how far the
  search goes past the first move count that produced solutions.

Move counts from `--min-moves` to `--max-moves` are searched in turn. Once a
move count yields solutions, that count and each one after it are tallied,
and the search stops when the tally reaches `--threshold`. A threshold of 0
or 1 therefore stops right after the first move count searched that has
solutions (with 0 it stops after the very first move count, found or not).

The distinct solutions are printed in sorted order as
`Solution <n>: <moves>`, followed by `Done.`, the elapsed time and the number
of solutions found. A malformed state string is reported as a usage error.

## Library

```python
from cubealgo.cube import CubeState
from cubealgo.rotation import Rotation
from cubealgo.solver import solve

solved = CubeState.from_string(
    "WWWWWWWWWOOOOOOOOOGGGGGGGGGRRRRRRRRRBBBBBBBBBYYYYYYYYY"
)
scrambled = solved.rotate(Rotation.R).rotate(Rotation.U)
print(scrambled)  # unfolded net of the cube

for moves in solve(scrambled, solved, 2, False):
    print(" ".join(str(rot) for rot in moves))  # U' R'
```

- `cubealgo.cube.CubeState` is an immutable, hashable cube state.
  `CubeState.from_string` parses a state string, `rotate` returns the state
  after one quarter turn, and `unwrapped()` (also `str()`) renders the cube
  as an unfolded net.
- `cubealgo.rotation.Rotation` is the enum of the twelve quarter turns, with
  `reverse()`, `face()`, `opposite_face()` and `is_prime()`; `str()` gives
  the usual notation such as `U'`. `cubealgo.face.Face` is the enum of the
  six faces.
- `cubealgo.solver.solve(initial_state, desired_state, move_count,
  multi_threaded)` returns every sequence of exactly `move_count` turns
  between the two states, as lists of `Rotation`. With `multi_threaded`
  true the search is spread over a thread pool. A negative move count
  raises `ValueError`.
- `cubealgo.cli.generate` runs the same search as the command and returns
  the distinct solutions in sorted order without printing them.
- `cubealgo.solution.has_useless_moves` and
  `cubealgo.solution.is_rot_useless` check whether a move sequence has
  redundant moves in it.
- `cubealgo.moves.apply_rotation` turns a face on the raw packed integer
  state.

A string of the wrong length raises `InvalidLengthError`, and an unknown
colour letter raises `InvalidCharacterError`. Both are subclasses of
`CubeStateError`, itself a `ValueError`.

## Limits

Only quarter turns of the six outer faces are searched: there are no half
turns, slice moves or whole-cube rotations, so a half turn appears as two
quarter turns. The search is exhaustive for each move count, and its cost
grows quickly with the number of moves.