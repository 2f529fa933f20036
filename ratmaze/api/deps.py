"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from ratmaze.config import Settings, get_settings
from ratmaze.core.maze import Maze
from ratmaze.core.maze_parser import load_all_mazes


def get_maze_library(
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict[str, Maze]:
    """Load the sample mazes shipped in the configured mazes directory."""
    if not settings.mazes_dir.is_dir():
        return {}
    return load_all_mazes(settings.mazes_dir)


# Type aliases for cleaner route signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
MazeLibrary = Annotated[dict[str, Maze], Depends(get_maze_library)]
