"""Game domain models."""

from indigo.models.card import Card, build_deck, parse_card, parse_cards
from indigo.models.deck import Deck
from indigo.models.enums import MatchStatus, Participant, Rank, Suit, TurnPhase
from indigo.models.hand import Hand
from indigo.models.match import MatchState
from indigo.models.match_event import MatchEvent, MatchEventType
from indigo.models.score import ScoreBoard, calculate_scores
from indigo.models.table import TablePile

__all__ = [
    "Card",
    "Deck",
    "Hand",
    "MatchEvent",
    "MatchEventType",
    "MatchState",
    "MatchStatus",
    "Participant",
    "Rank",
    "ScoreBoard",
    "Suit",
    "TablePile",
    "TurnPhase",
    "build_deck",
    "calculate_scores",
    "parse_card",
    "parse_cards",
]
