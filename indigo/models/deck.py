"""Deck model for shuffling and dealing cards."""

import random

from indigo.exceptions import InsufficientCardsError
from indigo.models.card import Card, build_deck


class Deck:
    """
    Represents the Indigo draw pile.

    A full deck holds the 52 standard cards, one of each (rank, suit) pair.
    Cards are dealt from the front, so the order after shuffling is the
    draw order.
    """

    def __init__(self, cards: list[Card] | None = None) -> None:
        """Initialize a deck, empty unless cards are given."""
        self.cards: list[Card] = list(cards) if cards else []

    def fill(self) -> None:
        """Fill the deck with all 52 cards in canonical order."""
        self.cards = build_deck()

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Put the cards currently in the deck in random order."""
        (rng or random).shuffle(self.cards)

    def deal(self, count: int) -> list[Card]:
        """
        Remove and return the first cards of the deck.

        Args:
            count: Number of cards to deal

        Returns:
            The dealt cards, in draw order

        Raises:
            InsufficientCardsError: If fewer than count cards remain
        """
        if count > len(self.cards):
            raise InsufficientCardsError(count, len(self.cards))

        dealt = self.cards[:count]
        del self.cards[:count]
        return dealt

    def is_empty(self) -> bool:
        """Check if every card has been dealt."""
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)
