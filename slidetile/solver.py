"""A* search over sliding-tile boards."""

from __future__ import annotations

import heapq
import itertools

from .board import BoardTile

# The heuristic always measures against this layout, whatever the goal.
IDEAL = BoardTile("123456780")


class NoSolutionError(ValueError):
    """Raised when the search runs out of boards without reaching the goal."""


def _priority(tile: BoardTile) -> int:
    return tile.moves + tile.manhattan_distance(IDEAL)


class SlidingSolver:
    """Searches from a start layout to an end layout when constructed."""

    def __init__(self, start_config: str, end_config: str) -> None:
        self._goal = BoardTile(end_config)
        self._solution = self._search(BoardTile(start_config))

    def solution(self) -> BoardTile:
        """Return the goal board reached, carrying its move count and path."""
        return self._solution

    def _search(self, current: BoardTile) -> BoardTile:
        visited: set[str] = set()
        queue: list[tuple[int, int, BoardTile]] = []
        order = itertools.count()
        while current != self._goal:
            for child in current.next_configs():
                if child.config not in visited:
                    heapq.heappush(queue, (_priority(child), next(order), child))
            visited.add(current.config)
            if not queue:
                raise NoSolutionError(
                    f"no sequence of slides leads to {self._goal.config!r}"
                )
            _, _, current = heapq.heappop(queue)
        return current


def solve(start_config: str, end_config: str) -> BoardTile:
    """Return the board reached when solving from ``start_config`` to ``end_config``."""
    return SlidingSolver(start_config, end_config).solution()