"""Random bot that plays any card from its hand."""

from indigo.bots.base_bot import BaseBot
from indigo.models.card import Card


class RandomBot(BaseBot):
    """Bot that picks a card uniformly at random.

    This serves as a baseline for evaluating the heuristic and stands in
    for the human in simulated matches.
    """

    def pick_card(self, hand: list[Card], _top_card: Card | None) -> int:
        """Pick a random card.

        Args:
            hand: Bot's remaining cards
            _top_card: Top card of the table (ignored)

        Returns:
            Random 1-based index into hand

        """
        if not hand:
            msg = "No cards to play"
            raise ValueError(msg)
        return self.rng.randint(1, len(hand))  # noqa: S311
