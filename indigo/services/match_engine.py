"""Match engine: dealing, turn order, capture resolution and scoring."""

import logging
import random
from dataclasses import dataclass, field

from indigo.bots.base_bot import BaseBot
from indigo.bots.heuristic_bot import HeuristicBot
from indigo.constants import STARTING_HAND, STARTING_TABLE
from indigo.exceptions import InvalidIndexError, MatchOverError
from indigo.models.card import Card
from indigo.models.deck import Deck
from indigo.models.enums import MatchStatus, Participant, TurnPhase
from indigo.models.match import MatchState
from indigo.models.match_event import MatchEventType
from indigo.models.score import ScoreBoard, calculate_scores

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    """Outcome of a single play.

    Attributes:
        participant: Who played
        card: The card played
        captured: Cards won by this play (empty when nothing was captured)
        replenished: Whether the player was dealt a fresh hand afterwards
        scores: Running scores, set only after a capture
        remainder: Cards left on the table when this play ended the match
        final_scores: Final scores, set only when this play ended the match

    """

    participant: Participant
    card: Card
    captured: list[Card] = field(default_factory=list)
    replenished: bool = False
    scores: ScoreBoard | None = None
    remainder: list[Card] = field(default_factory=list)
    final_scores: ScoreBoard | None = None

    @property
    def is_capture(self) -> bool:
        """Check if the play won the table."""
        return bool(self.captured)


class MatchEngine:
    """Runs Indigo matches between a human and the computer.

    The engine owns no match state itself. Each operation takes the
    MatchState created by start_match and mutates it in place.
    """

    def __init__(self, computer: BaseBot | None = None, rng: random.Random | None = None) -> None:
        """Initialize the engine.

        Args:
            computer: Strategy for the computer's plays (HeuristicBot by default)
            rng: Random source for shuffling and the default computer strategy

        """
        self.rng = rng or random.Random()
        self.computer = computer or HeuristicBot(self.rng)

    def start_match(self, human_first: bool) -> MatchState:
        """Shuffle a fresh deck and deal the table and both hands.

        Args:
            human_first: Whether the human plays the first card

        Returns:
            The new match state

        """
        first = Participant.HUMAN if human_first else Participant.COMPUTER
        state = MatchState(first_player=first, active=first)

        state.deck = Deck()
        state.deck.fill()
        state.deck.shuffle(self.rng)
        state.table.draw(state.deck.deal(STARTING_TABLE))
        state.hand(Participant.HUMAN).draw(state.deck.deal(STARTING_HAND))
        state.hand(Participant.COMPUTER).draw(state.deck.deal(STARTING_HAND))

        state.record(
            MatchEventType.MATCH_STARTED,
            first,
            table=[str(card) for card in state.table.cards],
        )
        logger.info("Match started, %s plays first", first.value)
        return state

    def choose_computer_card(self, state: MatchState) -> int:
        """Ask the computer strategy for the 1-based index of its next card."""
        hand = state.hand(Participant.COMPUTER)
        return self.computer.pick_card(list(hand.cards), state.table.top_card)

    def play_computer_turn(self, state: MatchState) -> TurnResult:
        """Let the computer choose a card and play it."""
        return self.play_turn(state, Participant.COMPUTER, self.choose_computer_card(state))

    def play_turn(self, state: MatchState, participant: Participant, index: int) -> TurnResult:
        """Play one card and resolve it.

        Args:
            state: Current match
            participant: Who is playing; must be the active participant
            index: 1-based position of the card in their hand

        Returns:
            What happened during the play

        Raises:
            MatchOverError: If the match is over or it is not participant's turn
            InvalidIndexError: If index is out of range; the hand is unchanged

        """
        if state.is_over():
            msg = f"Match is {state.status.value}, no more cards can be played"
            raise MatchOverError(msg)
        if participant is not state.active:
            msg = f"It is {state.active.value}'s turn, not {participant.value}'s"
            raise MatchOverError(msg)

        hand = state.hand(participant)
        state.phase = TurnPhase.PLAY_REQUESTED
        try:
            card = hand.play(index)
        except InvalidIndexError:
            state.phase = TurnPhase.IDLE
            raise

        state.turn_number += 1
        state.record(MatchEventType.CARD_PLAYED, participant, card=str(card))
        logger.debug("Turn %d: %s plays %s", state.turn_number, participant.value, card)

        captured = state.table.resolve(participant, card)
        state.phase = TurnPhase.RESOLVED
        result = TurnResult(participant=participant, card=card, captured=captured)

        if captured:
            state.last_capturer = participant
            result.scores = self.scores(state)
            state.record(
                MatchEventType.CARDS_WON,
                participant,
                cards=[str(c) for c in captured],
            )
            logger.info(
                "%s captures %d cards with %s", participant.value, len(captured), card
            )

        result.replenished = self.replenish(state, participant)
        state.phase = TurnPhase.REPLENISHED if result.replenished else TurnPhase.UNREPLENISHED

        if state.is_complete():
            result.remainder = list(state.table.cards)
            result.final_scores = self.finish_match(state)
        else:
            state.active = self.next_player(state, participant)
        state.phase = TurnPhase.TURN_COMPLETE
        return result

    def replenish(self, state: MatchState, participant: Participant) -> bool:
        """Deal a fresh hand if the participant just ran out and cards remain."""
        hand = state.hand(participant)
        if not hand.is_empty() or state.deck.is_empty():
            return False

        hand.draw(state.deck.deal(STARTING_HAND))
        state.record(MatchEventType.HAND_REPLENISHED, participant, deck_size=len(state.deck))
        logger.debug("Dealt %s a new hand, %d cards left in deck", participant.value, len(state.deck))
        return True

    def next_player(self, state: MatchState, participant: Participant) -> Participant:
        """Who plays after participant.

        The turn passes to the opponent unless the opponent is out of cards
        for good.
        """
        opponent = participant.opponent
        if state.hand(opponent).is_empty():
            return participant
        return opponent

    def finish_match(self, state: MatchState) -> ScoreBoard:
        """Award the remaining table and compute final scores.

        The table goes to whoever captured last. If nobody captured during
        the whole match it goes to the participant who played first; this
        follows the usual Indigo rule (see "Decisions on open questions" in
        DESIGN.md).
        """
        receiver = state.last_capturer or state.first_player
        remainder = state.table.pass_to(receiver)
        state.record(
            MatchEventType.REMAINDER_AWARDED,
            receiver,
            cards=[str(card) for card in remainder],
        )

        state.status = MatchStatus.ENDED
        final = self.scores(state, final=True)
        state.record(
            MatchEventType.MATCH_ENDED,
            final.leader(),
            points={p.value: v for p, v in final.points.items()},
            cards={p.value: v for p, v in final.cards.items()},
        )
        logger.info(
            "Match ended: human %d (%d cards), computer %d (%d cards)",
            final.points[Participant.HUMAN],
            final.cards[Participant.HUMAN],
            final.points[Participant.COMPUTER],
            final.cards[Participant.COMPUTER],
        )
        return final

    def abandon(self, state: MatchState) -> None:
        """Stop the match without scoring."""
        state.status = MatchStatus.ABANDONED
        state.record(MatchEventType.MATCH_ABANDONED, state.active)
        logger.info("Match abandoned on turn %d", state.turn_number)

    def scores(self, state: MatchState, *, final: bool = False) -> ScoreBoard:
        """Current scores; the most-cards bonus only applies when final."""
        return calculate_scores(state.table.ledgers, with_bonus=final)
