"""
Maze Parser for Rat Maze.

Loads and validates maze descriptions from text and from the filesystem.

Maze Format:
    r = Rat (start position)
    c = Cheese (goal)
    w = Wall (impassable)
    o = Open space
"""

import logging
from pathlib import Path
from typing import Optional

from .maze import Maze, MazeError, MazeParseError

logger = logging.getLogger(__name__)


def parse_maze_text(maze_text: str) -> Maze:
    """
    Parse maze text into a Maze.

    Leading and trailing whitespace on each line is ignored, as are blank
    lines, so indented triple-quoted strings parse as expected.

    Args:
        maze_text: Multi-line string representing the maze grid.

    Returns:
        A validated Maze.

    Raises:
        MazeParseError: If the maze text is empty.
        MazeValidationError: If the maze is invalid.
    """
    if not maze_text or not maze_text.strip():
        raise MazeParseError("Maze text is empty")

    lines = [line.strip() for line in maze_text.splitlines()]
    return Maze([line for line in lines if line])


def load_maze_file(file_path: Path | str) -> Maze:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.

    Returns:
        A validated Maze.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        MazeParseError: If the file cannot be read or parsed.
        MazeValidationError: If the maze is invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeParseError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeParseError(f"Failed to read maze file: {e}") from e

    return parse_maze_text(maze_text)


def load_all_mazes(mazes_dir: Path | str) -> dict[str, Maze]:
    """
    Load all maze files from a directory, keyed by file stem.

    Files that fail to parse are logged and skipped.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
        MazeParseError: If the path is not a directory.
    """
    mazes_dir = Path(mazes_dir)

    if not mazes_dir.exists():
        raise FileNotFoundError(f"Mazes directory not found: {mazes_dir}")

    if not mazes_dir.is_dir():
        raise MazeParseError(f"Path is not a directory: {mazes_dir}")

    mazes = {}
    for maze_file in sorted(mazes_dir.glob("*.txt")):
        try:
            mazes[maze_file.stem] = load_maze_file(maze_file)
        except MazeError as e:
            logger.warning(f"Failed to load {maze_file}: {e}")

    return mazes


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text)
        return True, None
    except MazeError as e:
        return False, str(e)
