"""Console input parsing and re-prompting."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from rich.console import Console

from indigo.cli.render import PLAY_FIRST_PROMPT, render_card_prompt
from indigo.exceptions import InvalidIndexError, InvalidInputError

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"

T = TypeVar("T")


class FirstTurnChoice(str, Enum):
    """Answers to the "Play first?" prompt."""

    YES = "yes"
    NO = "no"
    EXIT = "exit"


@dataclass(frozen=True)
class CardChoice:
    """A validated answer to the card prompt.

    Attributes:
        index: 1-based card index, or None when the player asked to exit

    """

    index: int | None = None

    @property
    def is_exit(self) -> bool:
        """Check if the player asked to leave the match."""
        return self.index is None


def parse_first_turn(text: str) -> FirstTurnChoice:
    """Parse the answer to "Play first?"; only exact answers are accepted."""
    try:
        return FirstTurnChoice(text)
    except ValueError as e:
        msg = f"Expected yes, no or exit, got {text!r}"
        raise InvalidInputError(msg) from e


def parse_card_choice(text: str, hand_size: int) -> CardChoice:
    """Parse the answer to the card prompt.

    Raises:
        InvalidInputError: If text is neither a number nor "exit"
        InvalidIndexError: If the number is outside 1..hand_size

    """
    if text == EXIT_COMMAND:
        return CardChoice()
    if not re.fullmatch(r"[1-9][0-9]*|0", text):
        msg = f"Expected a card number or exit, got {text!r}"
        raise InvalidInputError(msg)

    index = int(text)
    if not 1 <= index <= hand_size:
        raise InvalidIndexError(index, hand_size)
    return CardChoice(index)


class InputHandler:
    """Reads and validates console answers.

    Each prompt is printed again after an invalid answer until a valid one
    arrives or max_attempts answers have been rejected.
    """

    def __init__(
        self,
        console: Console,
        read: Callable[[], str] | None = None,
        max_attempts: int | None = None,
    ) -> None:
        """Initialize the handler.

        Args:
            console: Console prompts are printed to
            read: Source of answer lines (console.input by default)
            max_attempts: Give up after this many answers; None never gives up

        """
        self.console = console
        self.read = read or console.input
        self.max_attempts = max_attempts

    def ask(self, prompt: str, parse: Callable[[str], T]) -> T:
        """Print prompt and read answers until parse accepts one.

        Raises:
            InvalidInputError: If max_attempts answers were all rejected

        """
        attempts = 0
        while self.max_attempts is None or attempts < self.max_attempts:
            attempts += 1
            self.console.print(prompt)
            answer = self.read()
            try:
                return parse(answer)
            except (InvalidInputError, InvalidIndexError) as e:
                logger.debug("Rejected answer %r: %s", answer, e)

        msg = f"No valid answer after {attempts} attempts"
        raise InvalidInputError(msg)

    def ask_first_turn(self) -> FirstTurnChoice:
        """Ask whether the human wants to play first."""
        return self.ask(PLAY_FIRST_PROMPT, parse_first_turn)

    def ask_card(self, hand_size: int) -> CardChoice:
        """Ask which card the human wants to play."""
        return self.ask(
            render_card_prompt(hand_size),
            lambda answer: parse_card_choice(answer, hand_size),
        )
