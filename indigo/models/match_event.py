"""Match event model.

Records every significant step of a match so the console can announce
captures and tests can inspect the flow.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from indigo.models.enums import Participant


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class MatchEventType(str, Enum):
    """Types of match events that can be recorded."""

    # Match lifecycle
    MATCH_STARTED = "MATCH_STARTED"
    MATCH_ENDED = "MATCH_ENDED"
    MATCH_ABANDONED = "MATCH_ABANDONED"

    # Card play
    CARD_PLAYED = "CARD_PLAYED"
    CARDS_WON = "CARDS_WON"
    HAND_REPLENISHED = "HAND_REPLENISHED"

    # End of match
    REMAINDER_AWARDED = "REMAINDER_AWARDED"


@dataclass
class MatchEvent:
    """Represents a single match event."""

    event_type: MatchEventType
    turn_number: int = 0
    participant: Participant | None = None
    timestamp: datetime = field(default_factory=_utc_now)
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for logging."""
        return {
            "event_type": self.event_type.value,
            "turn_number": self.turn_number,
            "participant": self.participant.value if self.participant else None,
            "timestamp": self.timestamp.isoformat(),
            "data": self.data,
        }
