"""Unattended matches with a bot standing in for the human."""

import logging

from indigo.bots.base_bot import BaseBot
from indigo.models.enums import Participant
from indigo.models.match import MatchState
from indigo.services.match_engine import MatchEngine

logger = logging.getLogger(__name__)


def play_match(engine: MatchEngine, human: BaseBot, *, human_first: bool = True) -> MatchState:
    """Play a complete match, letting a bot make the human's choices.

    Args:
        engine: Engine running the match (and the computer's strategy)
        human: Bot choosing cards for the human side
        human_first: Whether the human side plays first

    Returns:
        The finished match state

    """
    state = engine.start_match(human_first=human_first)
    while not state.is_over():
        if state.active is Participant.HUMAN:
            hand = state.hand(Participant.HUMAN)
            index = human.pick_card(list(hand.cards), state.table.top_card)
            engine.play_turn(state, Participant.HUMAN, index)
        else:
            engine.play_computer_turn(state)

    logger.debug("Simulated match finished after %d turns", state.turn_number)
    return state
