"""Base class for all bot strategies."""

import random
from abc import ABC, abstractmethod

from indigo.models.card import Card


class BaseBot(ABC):
    """Abstract base class for bot strategies.

    A bot is a decision function: it looks at its hand and the table and
    returns the 1-based index of the card to play. Nothing is remembered
    between calls.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize the bot.

        Args:
            rng: Random source for tie-breaking choices

        """
        self.rng = rng or random.Random()

    @abstractmethod
    def pick_card(self, hand: list[Card], top_card: Card | None) -> int:
        """Pick a card to play.

        Args:
            hand: Bot's remaining cards
            top_card: Top card of the table, or None for an empty table

        Returns:
            1-based index into hand

        """

    def __str__(self) -> str:
        """Return string representation."""
        return self.__class__.__name__
