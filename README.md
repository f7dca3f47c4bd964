# rushsolve

A solver for Rush Hour sliding-block puzzles. It reads a board from a text
file, asks which search algorithm to use, and prints every move of the
solution together with the board after each move.

Three algorithms are available:

1. UCS: uniform-cost search. A slide of `n` cells by a piece that could slide
   at most `m` cells costs `1 + m - n`, so longer slides are cheaper.
2. GBFS: greedy best-first search, ordered only by the number of distinct
   pieces standing between the primary piece and the exit.
3. A*: the cost so far plus that same blocking count.

## Installation

```
pip install .
```

## Usage

```
rushsolve path/to/puzzle.txt
```

The program loads the file, shows a menu and reads the algorithm number
(1, 2 or 3) from standard input, asking again until it gets a valid one. It
then prints the initial board, each move (for example `Move 3: A-left`) with
the board after it, the number of nodes visited and the execution time in
milliseconds. On the terminal the primary piece is shown in red, the piece
just moved in yellow and the exit in green. The last move drives the primary
piece out through the exit, so it no longer appears on the final board. If no
solution exists, `No solution found :(` is printed instead.

Everything shown after loading, together with the chosen option, is also
written without colours to `test/solutions/<config file name>` under the
current directory; the directory is created if needed.

The algorithm can only be chosen at the prompt; there is no command-line
option for it.

## Configuration file format

```
6 6
11
AAB..F
..BCDF
GPPCDFK
GH.III
GHJ...
LLJMM.
```

- Line 1: number of rows and columns.
- Line 2: number of pieces, not counting the primary piece.
- Then the board: `.` is an empty cell, `P` is the primary piece, other
  capital letters are the remaining pieces, and `K` marks the exit. The exit
  sits just outside the grid: at the end of a row for a right exit, at the
  start of a row for a left exit, or on its own line above or below the grid
  for a top or bottom exit. Blank lines are ignored.

The file is rejected with an error message if it cannot be opened, the
dimensions are invalid or do not match the board, there is no exit, a piece
covers only one cell, the piece count is wrong, there is no primary piece, or
the primary piece does not line up with the exit.

## Library use

```python
from rushsolve.parser import parse_config
from rushsolve.search import AStar
from rushsolve.output import render_board

initial = parse_config("puzzle.txt")
search = AStar()
moves = search.solve(initial)   # list of Move(vehicle_id, steps)
print(search.nodes_visited)
print(render_board(initial))
```

- `rushsolve.parser`: `parse_config(path)` and `parse_config_text(text)`
  return a `BoardState`; invalid input raises `ConfigError`.
- `rushsolve.board`: `Orientation`, `BoardConfig`, `Vehicle` and the
  immutable, hashable `BoardState` (`grid()`, `is_goal()`,
  `with_vehicle()`, `without_vehicle()`).
- `rushsolve.search`: `UCS`, `GBFS` and `AStar`; `solve` returns the list of
  moves, empty when the puzzle has no solution. Negative steps move a piece
  left or up.
- `rushsolve.heuristic`: `next_cost(max_move, move)` and
  `blocking_heuristic(state)`.
- `rushsolve.output`: `render_board(state, moved_id, color)`,
  `move_direction(vehicles, vehicle_id, move)`, `solution_path(config_path)`
  and `SolutionWriter`.
- `rushsolve.cli`: `replay(initial, solution)` gives each move, its direction
  and the board after it; `main(argv)` runs the command.

## Running the tests

```
pip install .[test]
pytest
```