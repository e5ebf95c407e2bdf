"""Enums for cards, participants and match progress."""

from enum import Enum


class Suit(str, Enum):
    """Card suits in canonical deck order."""

    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"
    CLUBS = "♣"


class Rank(str, Enum):
    """Card ranks in canonical deck order."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"


class Participant(str, Enum):
    """The two sides of a match."""

    HUMAN = "human"
    COMPUTER = "computer"

    @property
    def opponent(self) -> "Participant":
        """Return the other participant."""
        return Participant.COMPUTER if self is Participant.HUMAN else Participant.HUMAN


class TurnPhase(str, Enum):
    """Progress of the play currently being resolved."""

    IDLE = "IDLE"
    PLAY_REQUESTED = "PLAY_REQUESTED"
    RESOLVED = "RESOLVED"
    REPLENISHED = "REPLENISHED"
    UNREPLENISHED = "UNREPLENISHED"
    TURN_COMPLETE = "TURN_COMPLETE"


class MatchStatus(str, Enum):
    """Match lifecycle states."""

    IN_PROGRESS = "IN_PROGRESS"
    ENDED = "ENDED"
    ABANDONED = "ABANDONED"
