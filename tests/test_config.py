"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from ratmaze.config import Settings


class TestSettings:
    """Tests for settings validation."""

    def test_defaults(self):
        settings = Settings()
        assert settings.max_maze_cells > 0
        assert settings.max_frames >= 0
        assert settings.mazes_dir.name == "mazes"

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(log_level="chatty")

    def test_max_maze_cells_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(max_maze_cells=0)

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MAX_FRAMES", "7")
        assert Settings().max_frames == 7

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
        assert Settings(debug=True).cors_origins_list == ["*"]
