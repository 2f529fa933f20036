"""Tests for maze listing, validation and solving endpoints."""

import pytest
from httpx import AsyncClient

from ratmaze.main import app
from ratmaze.config import Settings, get_settings


SIMPLE_MAZE = """wwwww
wrooo
wowow
wooco
wwwww"""


class TestMazeList:
    """Tests for the sample maze endpoints."""

    @pytest.mark.asyncio
    async def test_list_mazes_skips_invalid_files(self, client: AsyncClient):
        response = await client.get("/v1/maze")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [m["name"] for m in data["mazes"]] == ["corridor", "simple"]

    @pytest.mark.asyncio
    async def test_get_maze(self, client: AsyncClient):
        response = await client.get("/v1/maze/simple")
        assert response.status_code == 200
        data = response.json()
        assert data["width"] == 5
        assert data["height"] == 5
        assert data["grid_data"] == SIMPLE_MAZE
        assert data["start"] == {"row": 1, "column": 1}
        assert data["goal"] == {"row": 3, "column": 3}
        assert data["rendered"].splitlines()[1] == "█r   "

    @pytest.mark.asyncio
    async def test_get_unknown_maze(self, client: AsyncClient):
        response = await client.get("/v1/maze/missing")
        assert response.status_code == 404
        assert "Maze not found" in response.json()["detail"]


class TestValidateEndpoint:
    """Tests for POST /v1/maze/validate."""

    @pytest.mark.asyncio
    async def test_valid_maze(self, client: AsyncClient):
        response = await client.post("/v1/maze/validate", json={"grid_data": SIMPLE_MAZE})
        assert response.status_code == 200
        assert response.json() == {"valid": True, "error": None}

    @pytest.mark.asyncio
    async def test_invalid_maze(self, client: AsyncClient):
        response = await client.post("/v1/maze/validate", json={"grid_data": "rwr"})
        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is False
        assert "only have one rat" in data["error"]

    @pytest.mark.asyncio
    async def test_empty_grid_rejected(self, client: AsyncClient):
        response = await client.post("/v1/maze/validate", json={"grid_data": ""})
        assert response.status_code == 422


class TestSolveEndpoint:
    """Tests for POST /v1/maze/solve."""

    @pytest.mark.asyncio
    async def test_solve_corridor_with_frames(self, client: AsyncClient):
        response = await client.post(
            "/v1/maze/solve",
            json={"grid_data": "roc", "include_frames": True},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["solved"] is True
        assert data["steps"] == 5
        assert data["final_grid"] == "..r"
        assert data["frames"] == ["r c", ". c", ".rc", "..c", "..r"]
        assert data["frames_truncated"] is False
        assert data["path"] == [
            {"row": 0, "column": 0},
            {"row": 0, "column": 1},
            {"row": 0, "column": 2},
        ]

    @pytest.mark.asyncio
    async def test_solve_without_frames(self, client: AsyncClient):
        response = await client.post("/v1/maze/solve", json={"grid_data": SIMPLE_MAZE})
        assert response.status_code == 200
        data = response.json()
        assert data["solved"] is True
        assert data["frames"] == []
        assert data["path"][0] == data["start"] == {"row": 1, "column": 1}
        assert data["path"][-1] == data["goal"] == {"row": 3, "column": 3}

    @pytest.mark.asyncio
    async def test_solve_unsolvable(self, client: AsyncClient):
        response = await client.post("/v1/maze/solve", json={"grid_data": "rwc"})
        assert response.status_code == 200
        data = response.json()
        assert data["solved"] is False
        assert data["steps"] == 2
        assert data["path"] == []
        assert data["final_grid"] == "x█c"

    @pytest.mark.asyncio
    async def test_solve_invalid_maze(self, client: AsyncClient):
        response = await client.post("/v1/maze/solve", json={"grid_data": "row\nro"})
        assert response.status_code == 422
        assert "Non-rectangular" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_frames_are_capped(self, client: AsyncClient, mazes_dir):
        app.dependency_overrides[get_settings] = lambda: Settings(
            mazes_dir=mazes_dir, max_frames=2
        )
        response = await client.post(
            "/v1/maze/solve",
            json={"grid_data": "roc", "include_frames": True},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["frames"] == ["r c", ". c"]
        assert data["frames_truncated"] is True
        assert data["steps"] == 5

    @pytest.mark.asyncio
    async def test_too_large_maze_rejected(self, client: AsyncClient, mazes_dir):
        app.dependency_overrides[get_settings] = lambda: Settings(
            mazes_dir=mazes_dir, max_maze_cells=2
        )
        response = await client.post("/v1/maze/solve", json={"grid_data": "roc"})
        assert response.status_code == 413
        assert "limit is 2" in response.json()["detail"]
