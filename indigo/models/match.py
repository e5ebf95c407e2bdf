"""Match model holding the complete state of one game of Indigo."""

from dataclasses import dataclass, field
from typing import Any

from indigo.models.card import Card
from indigo.models.deck import Deck
from indigo.models.enums import MatchStatus, Participant, TurnPhase
from indigo.models.hand import Hand
from indigo.models.match_event import MatchEvent, MatchEventType
from indigo.models.table import TablePile


def _empty_hands() -> dict[Participant, Hand]:
    return {participant: Hand(participant) for participant in Participant}


@dataclass
class MatchState:
    """Represents a single Indigo match.

    Every card of the deck is always in exactly one place: the deck, one of
    the two hands, the table, or one of the two ledgers.

    Attributes:
        first_player: Participant who played the first card
        active: Participant whose turn it is
        deck: Undealt cards
        hands: Hand per participant
        table: Face-up pile and capture ledgers
        last_capturer: Who captured most recently (None until the first capture)
        status: Match lifecycle state
        phase: Progress of the current play
        turn_number: Number of cards played so far
        events: Everything that happened, in order

    """

    first_player: Participant
    active: Participant
    deck: Deck = field(default_factory=Deck)
    hands: dict[Participant, Hand] = field(default_factory=_empty_hands)
    table: TablePile = field(default_factory=TablePile)
    last_capturer: Participant | None = None
    status: MatchStatus = MatchStatus.IN_PROGRESS
    phase: TurnPhase = TurnPhase.IDLE
    turn_number: int = 0
    events: list[MatchEvent] = field(default_factory=list)

    def hand(self, participant: Participant) -> Hand:
        """Get a participant's hand."""
        return self.hands[participant]

    def ledger(self, participant: Participant) -> list[Card]:
        """Get a participant's captured cards."""
        return self.table.ledger(participant)

    def is_complete(self) -> bool:
        """Check if both hands are empty."""
        return all(hand.is_empty() for hand in self.hands.values())

    def is_over(self) -> bool:
        """Check if no more turns will be played."""
        return self.status is not MatchStatus.IN_PROGRESS

    def all_cards(self) -> list[Card]:
        """Every card in the match, wherever it currently is."""
        cards = list(self.deck.cards) + list(self.table.cards)
        for participant in Participant:
            cards += self.hands[participant].cards
            cards += self.table.ledger(participant)
        return cards

    def record(
        self,
        event_type: MatchEventType,
        participant: Participant | None = None,
        **data: Any,
    ) -> MatchEvent:
        """Append an event to the match history."""
        event = MatchEvent(
            event_type=event_type,
            turn_number=self.turn_number,
            participant=participant,
            data=data,
        )
        self.events.append(event)
        return event

    def __str__(self) -> str:
        """Return string representation."""
        return (
            f"Match: turn {self.turn_number}, {len(self.deck)} in deck, "
            f"{len(self.table)} on table, State: {self.status.value}"
        )
