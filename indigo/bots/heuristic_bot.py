"""Heuristic bot used as the computer opponent."""

import random
from collections import Counter
from collections.abc import Callable

from indigo.bots.base_bot import BaseBot
from indigo.constants import MIN_SUIT_CANDIDATES
from indigo.models.card import Card


def capture_candidates(hand: list[Card], top_card: Card | None) -> list[Card]:
    """Cards in hand that would capture the table.

    Suit matches come first. With fewer than two of them, rank matches are
    added as well.
    """
    if top_card is None:
        return []

    candidates = [card for card in hand if card.suit == top_card.suit]
    if len(candidates) < MIN_SUIT_CANDIDATES:
        candidates += [
            card for card in hand if card.rank == top_card.rank and card not in candidates
        ]
    return candidates


def _grouped(hand: list[Card], key: Callable[[Card], str]) -> list[Card]:
    """Cards that share the key with at least one other card in hand."""
    counts = Counter(key(card) for card in hand)
    return [card for card in hand if counts[key(card)] > 1]


def similar_cards(hand: list[Card]) -> list[Card]:
    """Cards to shed when no capture is possible.

    Prefers cards whose suit repeats in hand, then cards whose rank repeats,
    then falls back to the whole hand.
    """
    return _grouped(hand, lambda card: card.suit.value) or _grouped(
        hand, lambda card: card.rank.value
    ) or list(hand)


def choose_card(hand: list[Card], top_card: Card | None, rng: random.Random) -> int:
    """Choose which card the computer plays.

    Args:
        hand: Computer's cards
        top_card: Top card of the table, or None for an empty table
        rng: Random source for picking among equally good cards

    Returns:
        1-based index into hand

    """
    if not hand:
        msg = "No cards to play"
        raise ValueError(msg)

    choices = capture_candidates(hand, top_card) or similar_cards(hand)
    return hand.index(rng.choice(choices)) + 1


class HeuristicBot(BaseBot):
    """Bot that captures whenever it can and otherwise breaks up pairs.

    Playing Strategy:
    - If a card shares the top card's suit (or rank, when suit matches are
      scarce), play one of those at random
    - Otherwise shed a card from a same-suit group, then a same-rank group,
      then anything
    """

    def pick_card(self, hand: list[Card], top_card: Card | None) -> int:
        """Pick a card using the capture-first heuristic."""
        return choose_card(hand, top_card, self.rng)
