"""Core types for glass_timer."""

from dataclasses import dataclass
from enum import Enum


class UnitKind(Enum):
    """Unit of time a spoken unit word can name."""

    HOUR = 3_600_000
    MINUTE = 60_000
    SECOND = 1_000

    @property
    def millis(self) -> int:
        """Milliseconds in one of this unit."""
        return self.value


@dataclass(frozen=True, slots=True)
class LiveCard:
    """A card published to the timeline."""

    tag: str
    duration_ms: int
    published_at: int  # Unix timestamp ms


# Duration in milliseconds; zero means no timer was requested
Millis = int
