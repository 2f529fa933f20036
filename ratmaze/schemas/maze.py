"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    row: int
    column: int


class MazeBase(BaseModel):
    """Base maze schema with common fields."""

    name: str
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)


class MazeListItem(MazeBase):
    """Schema for maze list item (without grid data)."""

    pass


class MazeDetail(MazeBase):
    """Schema for detailed maze response with grid data."""

    grid_data: str
    rendered: str
    start: MazePosition
    goal: MazePosition


class MazeListResponse(BaseModel):
    """Schema for maze list response."""

    mazes: list[MazeListItem]
    total: int


class MazeValidateRequest(BaseModel):
    """Schema for validating a maze description."""

    grid_data: str = Field(..., min_length=1)


class MazeValidateResponse(BaseModel):
    """Schema for maze validation result."""

    valid: bool
    error: Optional[str] = None


class SolveRequest(BaseModel):
    """Schema for solving a maze description."""

    grid_data: str = Field(..., min_length=1)
    include_frames: bool = False


class SolveResponse(BaseModel):
    """Schema for the outcome of a solve."""

    solved: bool
    steps: int
    width: int
    height: int
    start: MazePosition
    goal: MazePosition
    path: list[MazePosition]
    final_grid: str
    frames: list[str] = Field(default_factory=list)
    frames_truncated: bool = False
