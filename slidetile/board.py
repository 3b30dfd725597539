"""Positions of the 3x3 sliding-tile puzzle."""

from __future__ import annotations

from dataclasses import dataclass

BLANK = "0"
SIDE = 3
CELLS = SIDE * SIDE

# Directions the blank can travel, in the order successors are produced.
_DIRECTIONS = (("U", -SIDE), ("L", -1), ("R", 1), ("D", SIDE))


@dataclass(frozen=True, eq=False)
class BoardTile:
    """A board layout with the number of moves and the path that led to it.

    The layout is a string of nine characters read row by row, with ``"0"``
    marking the blank. Two tiles are equal when their layouts are equal,
    whatever route reached them.
    """

    config: str = "000000000"
    moves: int = 0
    path: str = ""

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoardTile):
            return self.config == other.config
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.config)

    def _can_move(self, blank: int, direction: str) -> bool:
        row, col = divmod(blank, SIDE)
        if direction == "U":
            return row > 0
        if direction == "D":
            return row < SIDE - 1
        if direction == "L":
            return col > 0
        return col < SIDE - 1

    def next_configs(self) -> list[BoardTile]:
        """Return the boards one slide away, in the order up, left, right, down.

        A board without a blank among its first nine cells has no successors.
        """
        blank = self.config.find(BLANK)
        if not 0 <= blank < CELLS:
            return []
        successors = []
        for direction, offset in _DIRECTIONS:
            if not self._can_move(blank, direction):
                continue
            target = blank + offset
            cells = list(self.config)
            cells[blank], cells[target] = cells[target], BLANK
            successors.append(
                BoardTile("".join(cells), self.moves + 1, self.path + direction)
            )
        return successors

    def manhattan_distance(self, goal: BoardTile | str) -> int:
        """Sum over every non-blank tile of its grid distance to its place in ``goal``."""
        goal_config = goal.config if isinstance(goal, BoardTile) else str(goal)
        distance = 0
        for index, tile in enumerate(goal_config[:CELLS]):
            if tile == BLANK:
                continue
            position = self.config.find(tile)
            if position < 0:
                raise ValueError(
                    f"tile {tile!r} of the goal is missing from board {self.config!r}"
                )
            distance += abs(index % SIDE - position % SIDE)
            distance += abs(index // SIDE - position // SIDE)
        return distance