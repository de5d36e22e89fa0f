# rubik

A Rubik's Cube toolkit. The cube state is packed into two integers: one holds
the edge positions and orientations, the other the corner positions and
orientations. The package parses move sequences in standard notation, applies
them, draws the cube as a coloured net in the terminal, and builds the
orientation and slice pruning tables used by the first phase of a two-phase
solver.

## Installation

```
pip install .
```

With the test extra, to run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
rubik "R U R' U' F2 D"
```

The command takes exactly one argument, the whole scramble, with moves
separated by spaces. It applies the moves to a solved cube and prints the net
with ANSI colours. A move is a face letter (`U`, `D`, `F`, `B`, `L`, `R`) with
an optional suffix: `'` turns the face counter-clockwise and `2` turns it half a
turn. A wrong number of arguments prints a usage line; an empty sequence, a
sequence of spaces only, or an unknown token prints an error. In each of these
cases the exit status is 1.

## Library use

```python
from rubik.cube import CubeState
from rubik.parser import Parser
from rubik.spins import SpinManager
from rubik.display import CubeRenderer

moves = Parser().parse("R U R' U'")

state = CubeState()
SpinManager().apply_sequence(state, moves)
print(state.is_solved())          # False
print(state.corner_permutation())

CubeRenderer(state).print()
```

### Modules

- `rubik.moves`: the `Spin` enum of the 18 face turns, with `notation()`
  (`U`, `U2`, `U'`) and `inverse()`; the `Corner`, `Edge` and `Color` enums; and
  `spin_to_str()`, which raises `ValueError` for an unknown spin.
- `rubik.cube`: `CubeState` with `corner_permutation()`,
  `corner_orientations()`, `edge_permutation()`, `edge_orientations()`,
  `is_solved()` and `copy()`, plus the bit-level helpers (`get_piece`,
  `set_piece`, `get_corner_orientation`, `set_corner_orientation`,
  `get_edge_orientation`, `set_edge_orientation`, `flip_edge_orientation`) and
  the quarter-turn and half-turn cycles `cycle4` and `cycle2`.
- `rubik.spins`: `SpinDefinition`, the table of all 18 turns, and
  `SpinManager` with `apply_move()` and `apply_sequence()`.
- `rubik.parser`: `Parser` (`parse()`, `results`, `clear_results()`,
  `set_results()`, `generate_random()`) and `parse_token()`. Bad input raises
  `ParseError`, a subclass of `ValueError`.
- `rubik.display`: `CornerPiece`, `EdgePiece` and `CubeRenderer`, whose
  `render_state()` and `render()` return the raw piece numbers and the coloured
  net as strings, and whose `print_state()` and `print()` write them out.
- `rubik.verify`: `generate_random_spins()`, `invert_sequence()` and
  `check_shuffle_reverse(count)`, which scrambles a cube with `count` random
  turns, undoes them, prints every intermediate state and returns whether the
  cube ended solved.
- `rubik.controller`: `RubikController` and the `main()` command entry point.
  With `shuffle_mode=False`, `parse()` ignores its text and draws five random
  turns instead.
- `rubik.pruning`: `PruningTable`, built by breadth-first search from the
  solved cube (`PruningTable.corner_orientation()`, `edge_orientation()`,
  `edge_slice()` or `generate()` with any coordinate), indexable, with
  `max_depth()`, `write()` and `read()` for raw byte files; plus `n_choose_r()`
  and the encoders and decoders for corner orientation, edge orientation and
  the UD-slice.

## What it does not do

There is no solver that searches for a solution. `RubikController.solve()`
only undoes the turns the controller has applied itself, by applying their
inverses in reverse order. The pruning tables are built and stored, but
nothing in the package searches with them.