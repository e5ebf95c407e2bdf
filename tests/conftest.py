"""Shared fixtures for Indigo tests."""

import random

import pytest

from indigo.bots.base_bot import BaseBot
from indigo.models.card import Card, parse_cards
from indigo.models.deck import Deck
from indigo.models.enums import Participant
from indigo.models.match import MatchState
from indigo.services.match_engine import MatchEngine


class FirstCardBot(BaseBot):
    """Always plays the first card in hand, for predictable tests."""

    def pick_card(self, hand: list[Card], top_card: Card | None) -> int:
        return 1


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def engine(rng):
    """Engine with the real heuristic opponent."""
    return MatchEngine(rng=rng)


@pytest.fixture
def scripted_engine(rng):
    """Engine whose computer always plays its first card."""
    return MatchEngine(computer=FirstCardBot(rng), rng=rng)


@pytest.fixture
def make_state():
    """Build a match state with hand-picked cards.

    Cards are given as space-separated strings, e.g. "7♦ K♣".
    """

    def _make(
        human: str = "",
        computer: str = "",
        table: str = "",
        deck: str = "",
        first: Participant = Participant.HUMAN,
    ) -> MatchState:
        state = MatchState(first_player=first, active=first, deck=Deck(parse_cards(deck)))
        state.hand(Participant.HUMAN).draw(parse_cards(human))
        state.hand(Participant.COMPUTER).draw(parse_cards(computer))
        state.table.draw(parse_cards(table))
        return state

    return _make
