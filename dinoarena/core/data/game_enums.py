"""Centralized arena enums and constants.

This module contains all core enums that are used across multiple modules,
eliminating duplication and providing a single source of truth.
"""

from enum import Enum, auto
from typing import Optional


class Diet(Enum):
    """Diet classification of a combatant, driving its base modifiers."""
    CARNIVORE = "carnivore"
    HERBIVORE = "herbivore"
    OMNIVORE = "omnivore"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "Diet":
        """Normalize a catalog diet string, falling back to HERBIVORE.

        Accepts any casing plus the adjective forms stored by the catalog
        ("Carnivorous", "herbivorous", ...).
        """
        if isinstance(value, Diet):
            return value
        if not isinstance(value, str):
            return cls.HERBIVORE
        key = value.strip().lower()
        return _DIET_ALIASES.get(key, cls.HERBIVORE)


class VictoryMargin(Enum):
    """Qualitative classification of how one-sided a battle was."""
    NARROW = "narrow"
    DECISIVE = "decisive"
    DOMINANT = "dominant"


class BattlePhase(Enum):
    """Lifecycle of a single battle resolution."""
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    CONCLUDED = auto()


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Initialization, configuration
    BATTLE = auto()     # Combat rounds and outcomes
    CATALOG = auto()    # Roster loading
    DEBUG = auto()
    WARNING = auto()
    ERROR = auto()


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


_DIET_ALIASES = {
    "carnivore": Diet.CARNIVORE,
    "carnivorous": Diet.CARNIVORE,
    "herbivore": Diet.HERBIVORE,
    "herbivorous": Diet.HERBIVORE,
    "omnivore": Diet.OMNIVORE,
    "omnivorous": Diet.OMNIVORE,
}


# Convenience mappings for display
DIET_NAMES = {
    Diet.CARNIVORE: "Carnivore",
    Diet.HERBIVORE: "Herbivore",
    Diet.OMNIVORE: "Omnivore",
}

VICTORY_MARGIN_NAMES = {
    VictoryMargin.NARROW: "Narrow",
    VictoryMargin.DECISIVE: "Decisive",
    VictoryMargin.DOMINANT: "Dominant",
}
