"""Console front end: one human against the computer."""

import logging

from rich.console import Console

from indigo.cli import render
from indigo.cli.input_handler import FirstTurnChoice, InputHandler
from indigo.models.enums import Participant
from indigo.models.match import MatchState
from indigo.models.score import ScoreBoard
from indigo.services.match_engine import MatchEngine, TurnResult

logger = logging.getLogger(__name__)


class ConsoleGame:
    """Drives a match from the console.

    Prompts the human, lets the engine play for the computer and prints what
    happens. Typing "exit" at any prompt stops the match without scoring.
    """

    def __init__(
        self,
        engine: MatchEngine,
        console: Console,
        input_handler: InputHandler,
        names: dict[Participant, str] | None = None,
    ) -> None:
        self.engine = engine
        self.console = console
        self.input = input_handler
        self.names = names or {Participant.HUMAN: "Player", Participant.COMPUTER: "Computer"}

    def run(self) -> ScoreBoard | None:
        """Play one match.

        Returns:
            Final scores, or None if the human left before the end

        """
        self.console.print(render.BANNER)
        try:
            return self._play()
        finally:
            self.console.print(render.GAME_OVER)

    def _play(self) -> ScoreBoard | None:
        choice = self.input.ask_first_turn()
        if choice is FirstTurnChoice.EXIT:
            return None

        state = self.engine.start_match(human_first=choice is FirstTurnChoice.YES)
        self.console.print(render.render_initial_table(state.table.cards))

        while not state.is_over():
            self.console.print()
            self.console.print(render.render_table(state.table.cards))

            if state.active is Participant.HUMAN:
                result = self._human_turn(state)
                if result is None:
                    self.engine.abandon(state)
                    return None
            else:
                result = self._computer_turn(state)

            if result.is_capture:
                self._announce_capture(result)
            if result.final_scores is not None:
                self.console.print()
                self.console.print(render.render_table(result.remainder))
                self.console.print(render.render_scores(result.final_scores, self.names))
                return result.final_scores

        return None

    def _human_turn(self, state: MatchState) -> TurnResult | None:
        hand = state.hand(Participant.HUMAN)
        self.console.print(render.render_hand(hand.cards))
        choice = self.input.ask_card(len(hand))
        if choice.is_exit:
            return None
        return self.engine.play_turn(state, Participant.HUMAN, choice.index)

    def _computer_turn(self, state: MatchState) -> TurnResult:
        hand = state.hand(Participant.COMPUTER)
        index = self.engine.choose_computer_card(state)
        self.console.print(
            render.render_computer_turn(
                hand.cards, hand.cards[index - 1], self.names[Participant.COMPUTER]
            )
        )
        return self.engine.play_turn(state, Participant.COMPUTER, index)

    def _announce_capture(self, result: TurnResult) -> None:
        self.console.print(render.render_capture(self.names[result.participant]))
        if result.scores is not None:
            self.console.print(render.render_scores(result.scores, self.names))
