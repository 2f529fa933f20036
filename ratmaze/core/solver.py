"""
Backtracking Maze Solver

Moves the rat towards the cheese by depth-first search with an explicit
history stack:

- The rat leaves a breadcrumb (PATH) on every cell it steps off.
- A cell with no enterable neighbour is marked TRIED and never entered again.
- The rat backs up to the most recently visited cell on a dead end.
- The listener is notified after every cell change.

Neighbours are always tried in the order up, down, left, right.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from .maze import Cell, Location, Maze, MazeListener

logger = logging.getLogger(__name__)


class SolveCancelled(Exception):
    """Raised when a solve is stopped by its should_stop callback."""

    pass


class Direction(Enum):
    """Movement directions on the grid."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (d_row, d_column) for this direction."""
        deltas = {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }
        return deltas[self]


# Order in which neighbours are tried at every step
SEARCH_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class BacktrackingSolver:
    """
    Depth-first maze solver with explicit backtracking.

    Example usage:
        solver = BacktrackingSolver()
        solved = solver.solve(maze, lambda m: print(m, end="\\n\\n"))
        print(solver.steps, solver.last_path)
    """

    def __init__(self, search_order: tuple[Direction, ...] = SEARCH_ORDER):
        self.search_order = search_order
        self.steps: int = 0
        self.last_path: list[tuple[int, int]] = []

    def _notify(self, maze: Maze, listener: MazeListener) -> None:
        self.steps += 1
        listener(maze)

    def _next_move(self, current: Location) -> Optional[Location]:
        for direction in self.search_order:
            candidate = current.neighbor(direction)
            if candidate.can_be_moved_to():
                return candidate
        return None

    def solve(
        self,
        maze: Maze,
        listener: MazeListener,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> bool:
        """
        Move the rat from its start to the cheese, filling in cells as it goes.

        Args:
            maze: Maze to solve. It is mutated in place.
            listener: Called with the maze after every cell change.
            should_stop: Optional check run once per step; when it returns
                True the solve is abandoned with SolveCancelled.

        Returns:
            True if the rat reached the cheese, False if no route exists.

        Raises:
            ValueError: If listener is missing or not callable.
            SolveCancelled: If should_stop asked to stop.
        """
        if listener is None:
            raise ValueError("Listener cannot be None")
        if not callable(listener):
            raise ValueError(f"Listener must be callable, got {type(listener).__name__}")

        self.steps = 0
        self.last_path = []
        goal = maze.initial_cheese_position
        history: list[Location] = []
        current = maze.initial_rat_position

        logger.debug(
            f"Solving {maze.width}x{maze.height} maze from "
            f"({current.row}, {current.column}) to ({goal.row}, {goal.column})"
        )

        while True:
            if should_stop is not None and should_stop():
                logger.info(f"Solve cancelled after {self.steps} steps")
                raise SolveCancelled(f"Solve cancelled after {self.steps} steps")

            current.place(Cell.RAT)
            self._notify(maze, listener)

            if current.is_at(goal):
                self.last_path = [(loc.row, loc.column) for loc in history]
                self.last_path.append((current.row, current.column))
                logger.info(
                    f"Reached cheese in {self.steps} steps, "
                    f"route length {len(self.last_path)}"
                )
                return True

            next_location = self._next_move(current)
            if next_location is not None:
                history.append(current)
                current.place(Cell.PATH)
                self._notify(maze, listener)
                current = next_location
            else:
                current.place(Cell.TRIED)
                self._notify(maze, listener)
                if not history:
                    logger.info(f"No route to cheese after {self.steps} steps")
                    return False
                current = history.pop()


def solve(
    maze: Maze,
    listener: MazeListener,
    should_stop: Optional[Callable[[], bool]] = None,
) -> bool:
    """Solve a maze with a fresh BacktrackingSolver."""
    return BacktrackingSolver().solve(maze, listener, should_stop=should_stop)
