"""Maze routes for listing, validating and solving mazes."""

import logging

from fastapi import APIRouter, HTTPException, status

from ratmaze.api.deps import AppSettings, MazeLibrary
from ratmaze.core.maze import Maze, MazeError, Location
from ratmaze.core.maze_parser import parse_maze_text, validate_maze_text
from ratmaze.core.solver import BacktrackingSolver
from ratmaze.schemas.maze import (
    MazeDetail,
    MazeListItem,
    MazeListResponse,
    MazePosition,
    MazeValidateRequest,
    MazeValidateResponse,
    SolveRequest,
    SolveResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/maze", tags=["Mazes"])


def _position(location: Location) -> MazePosition:
    return MazePosition(row=location.row, column=location.column)


@router.get(
    "",
    response_model=MazeListResponse,
)
async def list_mazes(library: MazeLibrary) -> MazeListResponse:
    """List the sample mazes, ordered by name.

    Grid data is not included - use GET /v1/maze/{name} for full details.
    """
    maze_items = [
        MazeListItem(name=name, width=maze.width, height=maze.height)
        for name, maze in library.items()
    ]

    return MazeListResponse(
        mazes=maze_items,
        total=len(maze_items),
    )


@router.get(
    "/{name}",
    response_model=MazeDetail,
)
async def get_maze(name: str, library: MazeLibrary) -> MazeDetail:
    """Get detailed information about a sample maze."""
    maze = library.get(name)

    if maze is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Maze not found: {name}",
        )

    return MazeDetail(
        name=name,
        width=maze.width,
        height=maze.height,
        grid_data=maze.describe(),
        rendered=maze.render(),
        start=_position(maze.initial_rat_position),
        goal=_position(maze.initial_cheese_position),
    )


@router.post(
    "/validate",
    response_model=MazeValidateResponse,
)
async def validate_maze(request: MazeValidateRequest) -> MazeValidateResponse:
    """Check a maze description without solving it."""
    valid, error = validate_maze_text(request.grid_data)
    return MazeValidateResponse(valid=valid, error=error)


@router.post(
    "/solve",
    response_model=SolveResponse,
)
async def solve_maze(request: SolveRequest, settings: AppSettings) -> SolveResponse:
    """Solve a maze by backtracking search.

    When include_frames is set, the rendered grid after every change is
    returned, up to the configured frame limit.
    """
    try:
        maze = parse_maze_text(request.grid_data)
    except MazeError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    if maze.width * maze.height > settings.max_maze_cells:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=(
                f"Maze has {maze.width * maze.height} cells, "
                f"limit is {settings.max_maze_cells}"
            ),
        )

    frames: list[str] = []
    truncated = False

    def record_frame(changed: Maze) -> None:
        nonlocal truncated
        if not request.include_frames:
            return
        if len(frames) < settings.max_frames:
            frames.append(changed.render())
        else:
            truncated = True

    solver = BacktrackingSolver()
    solved = solver.solve(maze, record_frame)
    logger.info(
        f"Solved {maze.width}x{maze.height} maze: solved={solved} steps={solver.steps}"
    )

    return SolveResponse(
        solved=solved,
        steps=solver.steps,
        width=maze.width,
        height=maze.height,
        start=_position(maze.initial_rat_position),
        goal=_position(maze.initial_cheese_position),
        path=[MazePosition(row=row, column=column) for row, column in solver.last_path],
        final_grid=maze.render(),
        frames=frames,
        frames_truncated=truncated,
    )
