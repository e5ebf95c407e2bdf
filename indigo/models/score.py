"""Scoring of captured cards."""

from dataclasses import dataclass

from indigo.constants import MOST_CARDS_BONUS
from indigo.models.card import Card
from indigo.models.enums import Participant


@dataclass(frozen=True)
class ScoreBoard:
    """Points and captured-card counts for both participants.

    Attributes:
        points: Score per participant
        cards: Number of captured cards per participant
        final: Whether the most-cards bonus has been applied

    """

    points: dict[Participant, int]
    cards: dict[Participant, int]
    final: bool = False

    def leader(self) -> Participant | None:
        """Participant with the higher score, or None on a tie."""
        human = self.points[Participant.HUMAN]
        computer = self.points[Participant.COMPUTER]
        if human == computer:
            return None
        return Participant.HUMAN if human > computer else Participant.COMPUTER


def calculate_scores(
    ledgers: dict[Participant, list[Card]], *, with_bonus: bool = False
) -> ScoreBoard:
    """Calculate scores from the capture ledgers.

    Scoring rules:
    - Each captured A, 10, J, Q and K is worth 1 point
    - With the bonus: +3 to whoever holds strictly more cards; a tie awards
      nobody

    Args:
        ledgers: Captured cards per participant
        with_bonus: Apply the most-cards bonus (end of match only)

    Returns:
        The resulting score board

    """
    cards = {participant: len(ledgers[participant]) for participant in Participant}
    points: dict[Participant, int] = {}

    for participant in Participant:
        points[participant] = sum(card.point for card in ledgers[participant])
        if with_bonus and cards[participant] > cards[participant.opponent]:
            points[participant] += MOST_CARDS_BONUS

    return ScoreBoard(points=points, cards=cards, final=with_bonus)
