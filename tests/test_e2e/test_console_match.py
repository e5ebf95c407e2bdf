"""End-to-end tests: whole matches through the console front end."""

import io
import random
from itertools import chain, repeat

import pytest
from rich.console import Console

from indigo.cli.console_game import ConsoleGame
from indigo.cli.input_handler import InputHandler
from indigo.config import Settings
from indigo.main import build_game
from indigo.models.enums import Participant
from indigo.services.match_engine import MatchEngine


@pytest.fixture
def buffer():
    """Captured console output."""
    return io.StringIO()


@pytest.fixture
def console(buffer):
    """Plain-text console writing to the buffer."""
    return Console(
        file=buffer, markup=False, highlight=False, emoji=False, soft_wrap=True, width=200
    )


def _game(console, answers, seed=7):
    read = iter(answers).__next__
    engine = MatchEngine(rng=random.Random(seed))
    return ConsoleGame(engine, console, InputHandler(console, read=read))


class TestConsoleMatch:
    """Test full console sessions."""

    def test_exit_before_start(self, console, buffer):
        """exit at the first prompt ends immediately."""
        game = _game(console, ["exit"])
        assert game.run() is None
        assert buffer.getvalue() == "Indigo Card Game\nPlay first?\nGame Over\n"

    def test_bad_answers_reprompt(self, console, buffer):
        """Invalid answers repeat the prompt."""
        game = _game(console, ["sure", "yes", "9", "x", "exit"])
        assert game.run() is None

        output = buffer.getvalue()
        assert output.count("Play first?") == 2
        assert output.count("Choose a card to play (1-6):") == 3

    def test_exit_mid_match(self, console, buffer):
        """exit during the match stops without a final score."""
        game = _game(console, ["yes", "exit"])
        assert game.run() is None

        lines = buffer.getvalue().splitlines()
        assert lines[0] == "Indigo Card Game"
        assert lines[2].startswith("Initial cards on the table: ")
        assert lines[3] == ""
        assert lines[4].startswith("4 cards on the table, and the top card is ")
        assert lines[5].startswith("Cards in hand: 1)")
        assert lines[-1] == "Game Over"
        assert not any(line.startswith("Score:") for line in lines)

    def test_computer_moves_first(self, console, buffer):
        """Answering no lets the computer open."""
        game = _game(console, ["no", "exit"])
        game.run()

        lines = buffer.getvalue().splitlines()
        assert lines[6].startswith("Computer plays ")

    @pytest.mark.parametrize("first", ["yes", "no"])
    def test_full_match(self, console, buffer, first):
        """Playing card 1 every turn finishes the match with a final report."""
        game = _game(console, chain([first], repeat("1")))
        board = game.run()

        assert board is not None
        assert board.final
        assert sum(board.cards.values()) == 52

        lines = buffer.getvalue().splitlines()
        assert lines[-1] == "Game Over"
        assert lines[-2] == (
            f"Cards: Player {board.cards[Participant.HUMAN]} - "
            f"Computer {board.cards[Participant.COMPUTER]}"
        )
        assert lines[-3] == (
            f"Score: Player {board.points[Participant.HUMAN]} - "
            f"Computer {board.points[Participant.COMPUTER]}"
        )
        assert lines[-5] == ""
        assert sum(line.startswith("Computer plays ") for line in lines) == 24

    def test_capture_announcements(self, console, buffer):
        """Every capture is followed by the running score."""
        game = _game(console, chain(["yes"], repeat("1")))
        game.run()

        lines = buffer.getvalue().splitlines()
        captures = [i for i, line in enumerate(lines) if line.endswith(" wins cards")]
        assert captures
        for i in captures:
            assert lines[i + 1].startswith("Score: Player ")
            assert lines[i + 2].startswith("Cards: Player ")


class TestBuildGame:
    """Test wiring from settings."""

    def test_names_from_settings(self, console, buffer):
        """Display names come from configuration."""
        config = Settings(seed=3, player_name="Ana", computer_name="Bot")
        game = build_game(config, console)
        game.input.read = iter(["no", "exit"]).__next__
        game.run()

        assert "Bot plays " in buffer.getvalue()

    def test_seed_makes_matches_reproducible(self, console, buffer):
        """The same seed deals the same cards."""
        outputs = []
        for _ in range(2):
            out = io.StringIO()
            con = Console(file=out, markup=False, highlight=False, emoji=False, width=200)
            game = build_game(Settings(seed=11), con)
            game.input.read = iter(["yes", "exit"]).__next__
            game.run()
            outputs.append(out.getvalue())
        assert outputs[0] == outputs[1]
