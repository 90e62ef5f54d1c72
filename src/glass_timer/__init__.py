"""glass_timer - Voice-started countdown timer cards."""

# Adapters (async only)
from glass_timer.adapters import (
    AsyncMemoryTimeline,
    AsyncRedisTimeline,
    AsyncTimelineAdapter,
)

# Countdown display
from glass_timer.display import CountdownDrawer, CountdownFace, countdown_face

# Service API
from glass_timer.service import LIVE_CARD_TAG, MenuAction, StartMode, TimerService
from glass_timer.timer import Timer, TimerListener, epoch_millis, monotonic_millis

# Core types
from glass_timer.types import LiveCard, Millis, UnitKind
from glass_timer.units import (
    DEFAULT_UNIT_TABLE,
    LocalizedUnitTable,
    unit_table_from_resources,
)

# Voice parsing
from glass_timer.voice import first_hypothesis_duration, parse_voice_duration

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_UNIT_TABLE",
    "LIVE_CARD_TAG",
    "AsyncMemoryTimeline",
    "AsyncRedisTimeline",
    "AsyncTimelineAdapter",
    "CountdownDrawer",
    "CountdownFace",
    "LiveCard",
    "LocalizedUnitTable",
    "MenuAction",
    "Millis",
    "StartMode",
    "Timer",
    "TimerListener",
    "TimerService",
    "UnitKind",
    "countdown_face",
    "epoch_millis",
    "first_hypothesis_duration",
    "monotonic_millis",
    "parse_voice_duration",
    "unit_table_from_resources",
]
