# slidetile

An A* solver for the 3x3 sliding tile puzzle (the "8-puzzle").

A board is written as a nine-character string read row by row, using the
digits `1`–`8` for the tiles and `0` for the blank. For example, `123456780`
is the board

```
1 2 3
4 5 6
7 8 _
```

A solution is a string of moves made by the blank square: `U` (up), `D`
(down), `L` (left) and `R` (right).

## Installation

```
pip install .
```

## Command line

```
slidetile [START] [END]
```

The two boards can be given as arguments. Any board not given is asked for
at a prompt and read from standard input:

```
$ slidetile
please give the initial configuration of the board
123456708

please give the desired configuration
123456780
Number of moves: 1. Path to get there: R
```

```
$ slidetile 123456708 123456780
Number of moves: 1. Path to get there: R
```

If the desired board cannot be reached from the initial one, or a tile of
the desired board is missing from a board being searched, the command prints
an error prefixed with `slidetile:` to standard error and exits with
status 1. Otherwise it exits with status 0.

## Library

```python
from slidetile.solver import SlidingSolver, solve

tile = solve("123456708", "123456780")
print(tile.moves, tile.path)        # 1 R

solver = SlidingSolver("120453786", "123456780")
print(solver.solution().path)
```

`solve(start, end)` and `SlidingSolver(start, end).solution()` return the
`BoardTile` for the reached goal, carrying the number of moves (`moves`) and
the path of moves (`path`) that led to it. The search runs when the
`SlidingSolver` is constructed. When every board reachable from the start
has been searched without meeting the goal, `slidetile.solver.NoSolutionError`
(a subclass of `ValueError`) is raised.

`slidetile.board.BoardTile` represents one board position. It holds
`config`, `moves` and `path`, and two tiles are equal when their `config`
strings are equal. Its `next_configs()` method returns the boards one move
away, in the order up, left, right, down; a board with no blank among its
nine cells has none. `manhattan_distance(goal)` accepts a `BoardTile` or a
string and returns the sum of the tiles' Manhattan distances from their
places in `goal`, raising `ValueError` if a tile of `goal` is not on the
board.

## How the search ranks boards

Open boards are ranked by the number of moves made so far plus their
Manhattan distance from the standard solved board `123456780`, whatever the
desired board is. Boards reached at equal rank are taken in the order they
were found. For goals other than `123456780` this ranking is only a guide,
so the path found is not guaranteed to be the shortest one.

## Running the tests

```
pip install .[test]
pytest
```