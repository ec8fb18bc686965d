"""Standardized Info classes and rule constants for the arena.

This module provides a consistent pattern for storing static information
about diets and the fixed combat rules, with common interfaces.
"""

from dataclasses import dataclass
from abc import ABC, abstractmethod
from typing import Dict, Any

from .game_enums import Diet, VictoryMargin, DIET_NAMES


# Stat derivation rules
STAT_MIN = 10
STAT_MAX = 100
DEFAULT_LENGTH_METERS = 5.0
DEFAULT_MASS_KG = 500.0
SIZE_SCORE_CAP = 100.0
LENGTH_SCORE_PER_METER = 2.5
MASS_SCORE_DIVISOR = 100.0
CARNIVORE_SPEED_BONUS = 20
INTELLIGENCE_RANGE = (30, 70)

# Combat resolution rules
STARTING_HEALTH = 100
ROUND_CAP = 10
MIN_DAMAGE = 5
DAMAGE_VARIANCE = 10.0
CRITICAL_MULTIPLIER = 1.5
CRITICAL_SPEED_DIVISOR = 200.0
ATTACK_DAMAGE_FACTOR = 0.5
FEROCITY_DAMAGE_FACTOR = 0.3
DEFENSE_MITIGATION_FACTOR = 0.3
CRITICAL_SUFFIX = " (CRITICAL HIT!)"

# Victory margin thresholds on the absolute health difference
DOMINANT_THRESHOLD = 50   # strictly greater
DECISIVE_THRESHOLD = 25   # strictly greater


@dataclass
class BaseInfo(ABC):
    """Base class for all arena info classes."""
    name: str

    @abstractmethod
    def get_display_properties(self) -> Dict[str, Any]:
        """Get properties used for display/rendering."""
        pass

    @abstractmethod
    def get_gameplay_properties(self) -> Dict[str, Any]:
        """Get properties used for combat mechanics."""
        pass


@dataclass
class DietModifiers:
    """Base stat modifiers granted by a diet."""
    attack: int
    defense: int
    ferocity: int


@dataclass
class DietInfo(BaseInfo):
    """Static information about a diet: modifiers and attack flavor text."""
    modifiers: DietModifiers
    phrases: tuple[str, ...]

    def get_display_properties(self) -> Dict[str, Any]:
        """Get display properties for this diet."""
        return {
            "name": self.name,
            "phrases": list(self.phrases),
        }

    def get_gameplay_properties(self) -> Dict[str, Any]:
        """Get gameplay properties for this diet."""
        return {
            "base_attack": self.modifiers.attack,
            "base_defense": self.modifiers.defense,
            "base_ferocity": self.modifiers.ferocity,
        }


# Centralized data for all diets
DIET_DATA: Dict[Diet, DietInfo] = {
    Diet.CARNIVORE: DietInfo(
        DIET_NAMES[Diet.CARNIVORE],
        DietModifiers(attack=30, defense=15, ferocity=35),
        (
            "unleashes a devastating bite",
            "slashes with razor claws",
            "charges ferociously",
            "delivers a crushing blow",
        ),
    ),
    Diet.HERBIVORE: DietInfo(
        DIET_NAMES[Diet.HERBIVORE],
        DietModifiers(attack=10, defense=35, ferocity=5),
        (
            "swings its mighty tail",
            "charges with its head down",
            "stomps the ground",
            "defends with its armored body",
        ),
    ),
    Diet.OMNIVORE: DietInfo(
        DIET_NAMES[Diet.OMNIVORE],
        DietModifiers(attack=20, defense=25, ferocity=15),
        (
            "strikes with surprising force",
            "outmaneuvers and attacks",
            "uses tactical aggression",
            "delivers a calculated blow",
        ),
    ),
}

VICTORY_MESSAGES: Dict[VictoryMargin, str] = {
    VictoryMargin.DOMINANT: "A dominant victory! Not even close.",
    VictoryMargin.DECISIVE: "A decisive win by the champion!",
    VictoryMargin.NARROW: "A nail-biter that could have gone either way!",
}
