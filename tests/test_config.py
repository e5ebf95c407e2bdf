"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from indigo.config import Settings


class TestSettings:
    """Test settings defaults and overrides."""

    def test_defaults(self, monkeypatch):
        """Unset variables fall back to defaults."""
        for name in ("SEED", "LOG_LEVEL", "MAX_PROMPT_ATTEMPTS", "PLAYER_NAME", "COMPUTER_NAME"):
            monkeypatch.delenv(f"INDIGO_{name}", raising=False)
        config = Settings(_env_file=None)

        assert config.seed is None
        assert config.log_level == "WARNING"
        assert config.max_prompt_attempts is None
        assert config.player_name == "Player"
        assert config.computer_name == "Computer"

    def test_environment_overrides(self, monkeypatch):
        """INDIGO_ variables override defaults."""
        monkeypatch.setenv("INDIGO_SEED", "99")
        monkeypatch.setenv("INDIGO_MAX_PROMPT_ATTEMPTS", "3")
        monkeypatch.setenv("INDIGO_COMPUTER_NAME", "Robot")
        config = Settings(_env_file=None)

        assert config.seed == 99
        assert config.max_prompt_attempts == 3
        assert config.computer_name == "Robot"

    def test_attempt_limit_must_be_positive(self):
        """A zero attempt limit is rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_prompt_attempts=0)

    def test_log_level_any_case(self):
        """Level names are accepted in lower case."""
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch):
        """An unknown level fails validation instead of reaching logging."""
        monkeypatch.setenv("INDIGO_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
