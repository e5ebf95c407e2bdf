"""Bot players for Indigo.

Available bots:
- HeuristicBot: The computer opponent; captures when possible
- RandomBot: Plays random cards
"""

from indigo.bots.base_bot import BaseBot
from indigo.bots.heuristic_bot import HeuristicBot, choose_card
from indigo.bots.random_bot import RandomBot

__all__ = ["BaseBot", "HeuristicBot", "RandomBot", "choose_card"]
