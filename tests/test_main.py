"""Tests for the console entry point."""

import logging

import pytest

from indigo import main as main_module
from indigo.config import Settings


@pytest.fixture
def config(monkeypatch):
    """Install test settings in place of the environment-loaded ones."""

    def _install(**overrides):
        settings = Settings(_env_file=None, seed=1, **overrides)
        monkeypatch.setattr(main_module, "settings", settings)
        return settings

    return _install


@pytest.fixture(autouse=True)
def restore_log_level():
    """Undo the level main() sets on the indigo loggers."""
    logger = logging.getLogger("indigo")
    level = logger.level
    yield
    logger.setLevel(level)


def _answers(monkeypatch, answers):
    """Feed console input from a list; running out behaves like a closed stdin."""
    remaining = iter(answers)

    def _input(*_args):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", _input)


class TestMain:
    """Test exit codes and output of main()."""

    def test_exit_command(self, config, monkeypatch, capsys):
        """Typing exit ends cleanly."""
        config()
        _answers(monkeypatch, ["exit"])

        assert main_module.main() == 0
        assert capsys.readouterr().out == "Indigo Card Game\nPlay first?\nGame Over\n"

    def test_closed_input_exits_cleanly(self, config, monkeypatch, capsys):
        """End of input leaves the match with status 0."""
        config()
        _answers(monkeypatch, [])

        assert main_module.main() == 0
        assert capsys.readouterr().out.endswith("Game Over\n")

    def test_prompt_limit_exits_with_error(self, config, monkeypatch, capsys):
        """Running out of prompt attempts gives status 1."""
        config(max_prompt_attempts=2)
        _answers(monkeypatch, ["maybe", "perhaps", "yes"])

        assert main_module.main() == 1
        output = capsys.readouterr().out
        assert output.count("Play first?") == 2
        assert output.endswith("Game Over\n")

    def test_log_level_applied(self, config, monkeypatch):
        """The configured level is set on the indigo loggers."""
        config(log_level="debug")
        _answers(monkeypatch, ["exit"])

        main_module.main()
        assert logging.getLogger("indigo").level == logging.DEBUG
