"""Hand model."""

from dataclasses import dataclass, field

from indigo.exceptions import InvalidIndexError
from indigo.models.card import Card
from indigo.models.enums import Participant


@dataclass
class Hand:
    """Cards held by one participant.

    The owner tag decides who controls the hand; human and computer hands
    behave identically otherwise.

    Attributes:
        owner: Participant holding these cards
        cards: Current cards in play order

    """

    owner: Participant
    cards: list[Card] = field(default_factory=list)

    def draw(self, cards: list[Card]) -> None:
        """Add dealt cards to the end of the hand."""
        self.cards.extend(cards)

    def play(self, index: int) -> Card:
        """Remove and return the card at a 1-based index."""
        if not 1 <= index <= len(self.cards):
            raise InvalidIndexError(index, len(self.cards))
        return self.cards.pop(index - 1)

    def index_of(self, card: Card) -> int:
        """Return the 1-based index of a card in the hand."""
        return self.cards.index(card) + 1

    def is_empty(self) -> bool:
        """Check if the hand has no cards left."""
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)
