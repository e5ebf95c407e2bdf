"""Card model and the fixed 52-card universe."""

from dataclasses import dataclass

from indigo.models.enums import Rank, Suit

POINT_RANKS = frozenset({Rank.ACE, Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING})


@dataclass(frozen=True)
class Card:
    """A playing card.

    Attributes:
        rank: Card rank (A, 2-10, J, Q, K)
        suit: Card suit

    """

    rank: Rank
    suit: Suit

    @property
    def point(self) -> int:
        """Points this card is worth when captured."""
        return 1 if self.rank in POINT_RANKS else 0

    def matches(self, top_card: "Card | None") -> bool:
        """Check if playing this card on top_card captures the pile.

        An empty pile (None) is never matched.
        """
        if top_card is None:
            return False
        return self.suit == top_card.suit or self.rank == top_card.rank

    def __str__(self) -> str:
        """Return string representation of card, e.g. 10♦."""
        return f"{self.rank.value}{self.suit.value}"


def build_deck() -> list[Card]:
    """Return all 52 cards, suit-major and rank-minor."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def parse_card(text: str) -> Card:
    """Parse the string form of a card, e.g. "10♦" or "Q♥"."""
    text = text.strip()
    if len(text) < 2:
        msg = f"Not a card: {text!r}"
        raise ValueError(msg)
    return Card(Rank(text[:-1]), Suit(text[-1]))


def format_cards(cards: list[Card]) -> str:
    """Join cards with spaces."""
    return " ".join(str(card) for card in cards)


def parse_cards(text: str) -> list[Card]:
    """Parse space-separated cards, e.g. "7♦ K♣ 3♠"."""
    return [parse_card(token) for token in text.split()]
