"""Table pile model and capture resolution."""

from dataclasses import dataclass, field

from indigo.models.card import Card
from indigo.models.enums import Participant


def _empty_ledgers() -> dict[Participant, list[Card]]:
    return {participant: [] for participant in Participant}


@dataclass
class TablePile:
    """The shared face-up pile and the cards each participant has won.

    A played card captures the pile when it shares the suit or the rank of
    the current top card. The whole pile, the played card included, then
    moves to the player's ledger and the table is left empty.

    Attributes:
        cards: Face-up cards, oldest first
        ledgers: Captured cards per participant

    """

    cards: list[Card] = field(default_factory=list)
    ledgers: dict[Participant, list[Card]] = field(default_factory=_empty_ledgers)

    @property
    def top_card(self) -> Card | None:
        """Most recently played card, or None for an empty table."""
        return self.cards[-1] if self.cards else None

    def draw(self, cards: list[Card]) -> None:
        """Lay dealt cards face up on the table."""
        self.cards.extend(cards)

    def resolve(self, participant: Participant, card: Card) -> list[Card]:
        """Put a played card on the table and apply the capture rule.

        Args:
            participant: Who played the card
            card: The card taken from their hand

        Returns:
            Cards moved into the participant's ledger; empty if no capture.

        """
        captures = card.matches(self.top_card)
        self.cards.append(card)
        if not captures:
            return []
        return self.pass_to(participant)

    def pass_to(self, participant: Participant) -> list[Card]:
        """Move every card on the table into a participant's ledger."""
        moved = self.cards
        self.ledgers[participant].extend(moved)
        self.cards = []
        return moved

    def ledger(self, participant: Participant) -> list[Card]:
        """Cards a participant has captured so far."""
        return self.ledgers[participant]

    def __len__(self) -> int:
        return len(self.cards)
