"""Match services."""

from indigo.services.match_engine import MatchEngine, TurnResult
from indigo.services.simulation import play_match

__all__ = ["MatchEngine", "TurnResult", "play_match"]
