"""Exception hierarchy for the match engine and console shell."""


class IndigoError(Exception):
    """Base class for all Indigo errors."""


class InvalidInputError(IndigoError, ValueError):
    """A prompt response could not be parsed."""


class InvalidIndexError(IndigoError, IndexError):
    """A hand index is outside the current 1-based bounds."""

    def __init__(self, index: int, hand_size: int) -> None:
        self.index = index
        self.hand_size = hand_size
        super().__init__(f"Card index {index} is out of range (1-{hand_size})")


class InsufficientCardsError(IndigoError, RuntimeError):
    """More cards were requested than the deck holds.

    Replenishment only deals from a non-empty deck and 48 cards split evenly
    into hands of six, so this signals a broken match state.
    """

    def __init__(self, requested: int, remaining: int) -> None:
        self.requested = requested
        self.remaining = remaining
        super().__init__(f"Cannot deal {requested} cards, only {remaining} left in the deck")


class MatchOverError(IndigoError, RuntimeError):
    """A turn was requested that the match state does not allow."""
