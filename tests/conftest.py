"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from ratmaze.main import app
from ratmaze.config import Settings, get_settings


# Sample mazes for testing
CORRIDOR_MAZE = "roc"

WALLED_MAZE = "rwc"

SIMPLE_MAZE = """wwwww
wrooo
wowow
wooco
wwwww"""


class MazeRecorder:
    """Listener that keeps a snapshot of the grid after every change."""

    def __init__(self):
        self.snapshots = []
        self.frames = []

    def __call__(self, maze) -> None:
        self.snapshots.append(maze.rows())
        self.frames.append(maze.render())

    @property
    def calls(self) -> int:
        return len(self.snapshots)


@pytest.fixture
def recorder() -> MazeRecorder:
    """Fresh recording listener."""
    return MazeRecorder()


@pytest.fixture
def mazes_dir(tmp_path: Path) -> Path:
    """Directory with two valid mazes and one broken one."""
    (tmp_path / "corridor.txt").write_text(CORRIDOR_MAZE + "\n", encoding="utf-8")
    (tmp_path / "simple.txt").write_text(SIMPLE_MAZE + "\n", encoding="utf-8")
    (tmp_path / "broken.txt").write_text("rwr\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def test_settings(mazes_dir: Path) -> Settings:
    """Settings pointing at the temporary mazes directory."""
    return Settings(mazes_dir=mazes_dir, max_frames=500, max_maze_cells=10_000)


@pytest_asyncio.fixture(scope="function")
async def client(test_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    app.dependency_overrides[get_settings] = lambda: test_settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
