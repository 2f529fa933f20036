# Core module
from .maze import (
    Cell,
    Location,
    Maze,
    MazeError,
    MazeListener,
    MazeParseError,
    MazeValidationError,
)
from .solver import BacktrackingSolver, Direction, SEARCH_ORDER, SolveCancelled, solve
from .maze_parser import (
    parse_maze_text,
    load_maze_file,
    load_all_mazes,
    validate_maze_text,
)

__all__ = [
    "Cell",
    "Location",
    "Maze",
    "MazeError",
    "MazeListener",
    "MazeParseError",
    "MazeValidationError",
    "BacktrackingSolver",
    "Direction",
    "SEARCH_ORDER",
    "SolveCancelled",
    "solve",
    "parse_maze_text",
    "load_maze_file",
    "load_all_mazes",
    "validate_maze_text",
]
