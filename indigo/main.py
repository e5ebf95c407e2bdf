"""Console entry point."""

import logging
import random
import sys

from rich.console import Console

from indigo.cli.console_game import ConsoleGame
from indigo.cli.input_handler import InputHandler
from indigo.config import Settings, settings
from indigo.exceptions import InvalidInputError
from indigo.models.enums import Participant
from indigo.services.match_engine import MatchEngine

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send indigo logs to stderr so they never mix with the game text."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("indigo").setLevel(level.upper())


def build_game(config: Settings, console: Console) -> ConsoleGame:
    """Wire the engine, input handler and console together."""
    engine = MatchEngine(rng=random.Random(config.seed))
    input_handler = InputHandler(console, max_attempts=config.max_prompt_attempts)
    names = {
        Participant.HUMAN: config.player_name,
        Participant.COMPUTER: config.computer_name,
    }
    return ConsoleGame(engine, console, input_handler, names)


def main() -> int:
    """Run one interactive match."""
    configure_logging(settings.log_level)
    console = Console(markup=False, highlight=False, emoji=False, soft_wrap=True)
    game = build_game(settings, console)
    try:
        game.run()
    except EOFError:
        logger.info("Input closed, leaving the match")
    except InvalidInputError as e:
        logger.error("Giving up on input: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
