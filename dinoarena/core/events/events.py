"""Event-driven arena events.

This module defines all arena events that managers can subscribe to.

Event Design Principles:
- Events are immutable dataclasses with rich object payloads
- All events include the round number (``turn``) they happened in, 0 outside a battle
- Events use proper enums instead of magic strings where a fixed set exists
- Keep event types focused and avoid over-granular events
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
from abc import ABC
from enum import Enum, auto

if TYPE_CHECKING:
    from ..data.data_structures import BattleResult, CombatEntity, CombatStats, RoundEvent
    from ..data.game_enums import LogLevel


class EventType(Enum):
    """Types of arena events that managers can subscribe to."""
    # Arena Events
    FIGHTERS_SELECTED = auto()
    ROSTER_LOADED = auto()

    # Battle Events
    BATTLE_STARTED = auto()
    ROUND_RESOLVED = auto()
    BATTLE_CONCLUDED = auto()

    # Logging Events
    LOG_MESSAGE = auto()
    DEBUG_MESSAGE = auto()
    LOG_SAVE_REQUESTED = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all arena events."""
    turn: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class FightersSelected(GameEvent):
    """Event emitted when two fighters have been picked for the next battle."""
    fighter_a: "CombatEntity"
    fighter_b: "CombatEntity"

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.FIGHTERS_SELECTED)


@dataclass(frozen=True)
class RosterLoaded(GameEvent):
    """Event emitted when a roster of catalog entities has been loaded."""
    source: str
    entity_count: int
    skipped_count: int = 0

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ROSTER_LOADED)


@dataclass(frozen=True)
class BattleStarted(GameEvent):
    """Event emitted once validation passed and round 1 is about to begin."""
    fighter_a: "CombatEntity"
    fighter_b: "CombatEntity"
    stats_a: "CombatStats"
    stats_b: "CombatStats"
    first_attacker: "CombatEntity"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BATTLE_STARTED)


@dataclass(frozen=True)
class RoundResolved(GameEvent):
    """Event emitted after each attack has been applied."""
    round_event: "RoundEvent"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ROUND_RESOLVED)


@dataclass(frozen=True)
class BattleConcluded(GameEvent):
    """Event emitted when a battle ends by knockout or round cap."""
    result: "BattleResult"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BATTLE_CONCLUDED)


# Logging Events
@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event emitted when a log message is created."""
    message: str
    category: str
    level: "LogLevel"
    source: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class DebugMessage(GameEvent):
    """Event emitted for debug-specific messages."""
    message: str
    source: str
    context: Optional[dict] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DEBUG_MESSAGE)


@dataclass(frozen=True)
class LogSaveRequested(GameEvent):
    """Event emitted when the log buffer should be written to disk."""
    file_path: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_SAVE_REQUESTED)
