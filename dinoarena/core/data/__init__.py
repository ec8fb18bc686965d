"""Core data structures and definitions.

This package contains fundamental data types and arena definitions:
- data_structures.py: CombatEntity, CombatStats, RoundEvent, BattleResult
- game_enums.py: Centralized enums for diets, victory margins, battle phases
- game_info.py: Static diet data, rule constants and lookup tables
"""

from .data_structures import (
    CombatEntity,
    CombatStats,
    RoundEvent,
    BattleResult,
    DataConverter,
    ValidationMixin,
    STAT_NAMES,
    round_half_up,
    clamp,
)
from .game_enums import Diet, VictoryMargin, BattlePhase, LogCategory, LogLevel, DIET_NAMES, VICTORY_MARGIN_NAMES
from .game_info import BaseInfo, DietInfo, DietModifiers, DIET_DATA, VICTORY_MESSAGES

__all__ = [
    "CombatEntity",
    "CombatStats",
    "RoundEvent",
    "BattleResult",
    "DataConverter",
    "ValidationMixin",
    "STAT_NAMES",
    "round_half_up",
    "clamp",
    "Diet",
    "VictoryMargin",
    "BattlePhase",
    "LogCategory",
    "LogLevel",
    "DIET_NAMES",
    "VICTORY_MARGIN_NAMES",
    "BaseInfo",
    "DietInfo",
    "DietModifiers",
    "DIET_DATA",
    "VICTORY_MESSAGES",
]
