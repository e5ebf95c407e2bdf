"""Pit the computer's heuristic against a random player over many matches.

Usage:
    python -m indigo.simulate --matches 500 --seed 7
"""

import argparse
import random
import sys
from dataclasses import dataclass, field

from rich.console import Console
from rich.table import Table

from indigo.bots import HeuristicBot, RandomBot
from indigo.bots.base_bot import BaseBot
from indigo.models.enums import Participant
from indigo.models.score import calculate_scores
from indigo.services.match_engine import MatchEngine
from indigo.services.simulation import play_match

console = Console()

STRATEGIES: dict[str, type[BaseBot]] = {
    "random": RandomBot,
    "heuristic": HeuristicBot,
}


@dataclass
class SimulationSummary:
    """Totals collected over a batch of matches."""

    matches: int = 0
    wins: dict[Participant, int] = field(default_factory=lambda: dict.fromkeys(Participant, 0))
    points: dict[Participant, int] = field(default_factory=lambda: dict.fromkeys(Participant, 0))
    cards: dict[Participant, int] = field(default_factory=lambda: dict.fromkeys(Participant, 0))
    ties: int = 0


def run_simulation(matches: int, seed: int | None, human_strategy: str) -> SimulationSummary:
    """Play a batch of matches, alternating who plays first."""
    rng = random.Random(seed)
    engine = MatchEngine(rng=rng)
    human = STRATEGIES[human_strategy](rng)
    summary = SimulationSummary()

    for number in range(matches):
        state = play_match(engine, human, human_first=number % 2 == 0)
        board = calculate_scores(state.table.ledgers, with_bonus=True)
        summary.matches += 1
        leader = board.leader()
        if leader is None:
            summary.ties += 1
        else:
            summary.wins[leader] += 1
        for participant in Participant:
            summary.points[participant] += board.points[participant]
            summary.cards[participant] += board.cards[participant]

    return summary


def render_summary(summary: SimulationSummary, human_strategy: str) -> Table:
    """Build a results table."""
    table = Table(title=f"{summary.matches} matches ({summary.ties} ties)")
    table.add_column("Side", style="cyan")
    table.add_column("Strategy")
    table.add_column("Wins", justify="right", style="green")
    table.add_column("Avg points", justify="right")
    table.add_column("Avg cards", justify="right")

    strategies = {Participant.HUMAN: human_strategy, Participant.COMPUTER: "heuristic"}
    for participant in Participant:
        divisor = max(summary.matches, 1)
        table.add_row(
            participant.value,
            strategies[participant],
            str(summary.wins[participant]),
            f"{summary.points[participant] / divisor:.2f}",
            f"{summary.cards[participant] / divisor:.2f}",
        )
    return table


def main(argv: list[str] | None = None) -> int:
    """Run the simulation from the command line."""
    parser = argparse.ArgumentParser(description="Simulate Indigo matches")
    parser.add_argument("--matches", type=int, default=100, help="Number of matches")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument(
        "--human",
        choices=sorted(STRATEGIES),
        default="random",
        help="Strategy playing the human side",
    )
    args = parser.parse_args(argv)

    if args.matches < 1:
        parser.error("--matches must be at least 1")

    summary = run_simulation(args.matches, args.seed, args.human)
    console.print(render_summary(summary, args.human))
    return 0


if __name__ == "__main__":
    sys.exit(main())
