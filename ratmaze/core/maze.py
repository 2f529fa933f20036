"""
Rat Maze Grid Model

A maze is a fixed-size rectangular grid of cells holding exactly one rat
and exactly one piece of cheese. The grid is passive state: solvers read
it through Location handles and mutate it with place().

Maze Format:
    r = Rat (start position, exactly one)
    c = Cheese (goal, exactly one)
    w = Wall (impassable)
    o = Open space
"""

from enum import Enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Optional


class MazeError(Exception):
    """Base exception for invalid maze descriptions."""

    pass


class MazeParseError(MazeError):
    """Exception raised when maze text cannot be split into rows."""

    pass


class MazeValidationError(MazeError):
    """Exception raised when maze rows break the grid rules."""

    pass


class Cell(Enum):
    """State of a single maze cell, valued by its display glyph."""
    CHEESE = "c"
    OPEN = " "
    PATH = "."
    RAT = "r"
    TRIED = "x"
    WALL = "█"

    @property
    def glyph(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, char: str) -> "Cell":
        """Convert a description character to a Cell."""
        mapping = {
            "o": cls.OPEN,
            "w": cls.WALL,
            "r": cls.RAT,
            "c": cls.CHEESE,
        }
        try:
            return mapping[char]
        except KeyError:
            raise MazeValidationError(
                f"Illegal character '{char}' in maze description. "
                f"Valid characters: {', '.join(sorted(mapping))}"
            ) from None

    def __str__(self) -> str:
        return self.value


# Description characters for cells that can appear in a maze file
DESCRIPTION_CHARS = {
    Cell.OPEN: "o",
    Cell.WALL: "w",
    Cell.RAT: "r",
    Cell.CHEESE: "c",
}


@dataclass(frozen=True)
class Location:
    """
    A (row, column) coordinate bound to the maze it belongs to.

    Locations are cheap value objects: two locations are equal when their
    coordinates are equal, whatever the maze contents are at the time.
    """
    maze: "Maze" = field(compare=False, repr=False)
    row: int
    column: int

    def is_in_maze(self) -> bool:
        return 0 <= self.row < self.maze.height and 0 <= self.column < self.maze.width

    def can_be_moved_to(self) -> bool:
        """True if the rat may step here (open space or the cheese)."""
        return self.is_in_maze() and self.contents() in (Cell.OPEN, Cell.CHEESE)

    def has_cheese(self) -> bool:
        return self.is_in_maze() and self.contents() == Cell.CHEESE

    def is_at(self, other: "Location") -> bool:
        return self.row == other.row and self.column == other.column

    def above(self) -> "Location":
        return Location(self.maze, self.row - 1, self.column)

    def below(self) -> "Location":
        return Location(self.maze, self.row + 1, self.column)

    def to_the_left(self) -> "Location":
        return Location(self.maze, self.row, self.column - 1)

    def to_the_right(self) -> "Location":
        return Location(self.maze, self.row, self.column + 1)

    def neighbor(self, direction) -> "Location":
        """Return the adjacent location in a Direction (anything with a delta)."""
        d_row, d_column = direction.delta
        return Location(self.maze, self.row + d_row, self.column + d_column)

    def neighbors(self) -> dict[str, "Location"]:
        return {
            "up": self.above(),
            "down": self.below(),
            "left": self.to_the_left(),
            "right": self.to_the_right(),
        }

    def place(self, cell: Cell) -> None:
        self.maze.place(self.row, self.column, cell)

    def contents(self) -> Cell:
        return self.maze.at(self.row, self.column)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"row": self.row, "column": self.column}


MazeListener = Callable[["Maze"], None]


class Maze:
    """
    Rectangular grid of cells with one rat and one cheese.

    The rat and cheese coordinates are recorded once at construction and
    never change, even after a solver overwrites those cells.

    Example usage:
        maze = Maze.from_string('''
            rooww
            wowow
            ooooc
        ''')
        print(maze.width, maze.height)   # 5 3
        print(maze)
    """

    def __init__(self, lines: Iterable[str]):
        """
        Build a maze from its description rows.

        Args:
            lines: One string per row made of 'o', 'w', 'r' and 'c'.

        Raises:
            MazeParseError: If there are no rows.
            MazeValidationError: If the rows are empty, non-rectangular,
                contain illegal characters, or do not hold exactly one
                rat and one cheese.
        """
        lines = list(lines)
        if not lines:
            raise MazeParseError("Maze has no rows")

        width = len(lines[0])
        if width == 0:
            raise MazeValidationError("Maze has no columns")

        cells: list[list[Cell]] = []
        rat: Optional[tuple[int, int]] = None
        cheese: Optional[tuple[int, int]] = None

        for row, line in enumerate(lines):
            if len(line) != width:
                raise MazeValidationError(
                    f"Non-rectangular maze: row {row} has length {len(line)}, "
                    f"expected {width}"
                )

            cell_row = []
            for column, char in enumerate(line):
                try:
                    cell = Cell.from_char(char)
                except MazeValidationError:
                    raise MazeValidationError(
                        f"Illegal character '{char}' at row {row}, column {column}"
                    ) from None

                if cell == Cell.RAT:
                    if rat is not None:
                        raise MazeValidationError(
                            f"Maze can only have one rat: "
                            f"first at {rat}, second at ({row}, {column})"
                        )
                    rat = (row, column)
                elif cell == Cell.CHEESE:
                    if cheese is not None:
                        raise MazeValidationError(
                            f"Maze can only have one cheese: "
                            f"first at {cheese}, second at ({row}, {column})"
                        )
                    cheese = (row, column)

                cell_row.append(cell)
            cells.append(cell_row)

        if rat is None:
            raise MazeValidationError("Maze has no rat")
        if cheese is None:
            raise MazeValidationError("Maze has no cheese")

        self._cells = cells
        self._height = len(cells)
        self._width = width
        self.initial_rat_position = Location(self, *rat)
        self.initial_cheese_position = Location(self, *cheese)

    @classmethod
    def from_string(cls, description: str) -> "Maze":
        """Build a maze from whitespace-separated rows."""
        return cls(description.split())

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Maze":
        return cls(lines)

    @classmethod
    def from_file(cls, file_path: Path | str) -> "Maze":
        """Build a maze from a file holding one row per line."""
        text = Path(file_path).read_text(encoding="utf-8")
        return cls(text.splitlines())

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, row: int, column: int) -> None:
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(
                f"Location ({row}, {column}) is outside the "
                f"{self._height}x{self._width} maze"
            )

    def at(self, row: int, column: int) -> Cell:
        """Get the cell at a coordinate. Raises IndexError out of bounds."""
        self._check_bounds(row, column)
        return self._cells[row][column]

    def place(self, row: int, column: int, cell: Cell) -> None:
        """Overwrite the cell at a coordinate. Raises IndexError out of bounds."""
        self._check_bounds(row, column)
        self._cells[row][column] = cell

    def location(self, row: int, column: int) -> Location:
        return Location(self, row, column)

    def is_in_bounds(self, location: Location) -> bool:
        return location.is_in_maze()

    def can_enter(self, location: Location) -> bool:
        return location.can_be_moved_to()

    def holds_goal(self, location: Location) -> bool:
        """True if the location is the cheese's original square."""
        return location.is_in_maze() and location.is_at(self.initial_cheese_position)

    def neighbors(self, location: Location) -> dict[str, Location]:
        return location.neighbors()

    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        """Read-only snapshot of the current grid."""
        return tuple(tuple(row) for row in self._cells)

    def count(self, cell: Cell) -> int:
        return sum(row.count(cell) for row in self._cells)

    def render(self) -> str:
        """Render the grid with one glyph per cell, one row per line."""
        return "\n".join("".join(cell.glyph for cell in row) for row in self._cells)

    def describe(self) -> str:
        """
        Render the grid in description characters.

        Breadcrumbs and dead ends have no description character and are
        written as open space, so the result always parses back into a maze
        as long as the rat and cheese markers are still on the grid.
        """
        return "\n".join(
            "".join(DESCRIPTION_CHARS.get(cell, "o") for cell in row)
            for row in self._cells
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Maze(width={self._width}, height={self._height})"
