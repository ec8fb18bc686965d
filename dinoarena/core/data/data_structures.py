"""Unified data structures and conversion utilities.

This module provides clear definitions and conversion utilities for the different
data representations used throughout the arena architecture.

Data Flow:
1. CombatEntity (catalog) -> CombatStats (stat deriver) -> BattleResult (resolver)
2. BattleResult -> plain dict (UI / serialization)

Every structure here is immutable once created. A rematch produces new
CombatStats and a new BattleResult instead of mutating the old ones.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union
import math

from .game_enums import Diet, VictoryMargin
from .game_info import STAT_MIN, STAT_MAX, VICTORY_MESSAGES


EntityId = Union[int, str]

STAT_NAMES = ("attack", "defense", "speed", "intelligence", "ferocity")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp(value: int, low: int = STAT_MIN, high: int = STAT_MAX) -> int:
    """Clamp an integer into the inclusive range [low, high]."""
    return max(low, min(high, value))


class ValidationMixin:
    """Mixin providing validation utilities for data structures."""

    def out_of_range_fields(self, fields: tuple[str, ...], low: int, high: int) -> list[str]:
        """Return the names of integer fields that are missing or outside [low, high]."""
        bad = []
        for field in fields:
            value = getattr(self, field, None)
            if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
                bad.append(field)
        return bad


@dataclass(frozen=True)
class CombatEntity:
    """A catalog entity entering the arena.

    Owned by the external catalog and read-only here. Missing size fields are
    common in the catalog and are defaulted by the stat deriver, never rejected.
    """
    id: EntityId
    name: str
    diet: Optional[str] = None
    length_meters: Optional[float] = None
    mass_kg: Optional[float] = None
    species: Optional[str] = None
    era: Optional[str] = None

    @property
    def diet_type(self) -> Diet:
        """Normalized diet, falling back to herbivore."""
        return Diet.from_string(self.diet)

    @classmethod
    def from_dict(cls, data: dict[str, Any], default_id: Optional[EntityId] = None) -> "CombatEntity":
        """Create a CombatEntity from a catalog record.

        Accepts the key spellings used by the catalog API and seed data
        (``length``/``lengthMeters``, ``weight``/``weightKg``).
        """
        entity_id = data.get("id", default_id)
        if entity_id is None:
            entity_id = data.get("name", "")
        return cls(
            id=entity_id,
            name=str(data.get("name") or "").strip(),
            diet=data.get("diet"),
            length_meters=_first_number(data, ("length_meters", "lengthMeters", "length")),
            mass_kg=_first_number(data, ("mass_kg", "massKg", "weightKg", "weight")),
            species=data.get("species"),
            era=data.get("era") or data.get("period"),
        )


def _first_number(data: dict[str, Any], keys: tuple[str, ...]) -> Optional[float]:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        try:
            return float(value)
        except (TypeError, ValueError):
            return None
    return None


@dataclass(frozen=True)
class CombatStats(ValidationMixin):
    """Derived combat statistics for one fighter in one battle setup.

    The five stats are integers in [10, 100]. ``power`` is their plain sum and
    is only used for display and ranking, never by the resolver.
    """
    attack: int
    defense: int
    speed: int
    intelligence: int
    ferocity: int
    power: int

    def validate(self) -> None:
        """Raise ValueError if any stat is not an integer within [10, 100]."""
        bad = self.out_of_range_fields(STAT_NAMES, STAT_MIN, STAT_MAX)
        if bad:
            details = ", ".join(f"{name}={getattr(self, name, None)!r}" for name in bad)
            raise ValueError(f"Combat stats must be integers in [{STAT_MIN}, {STAT_MAX}], got {details}")

    def is_valid(self) -> bool:
        return not self.out_of_range_fields(STAT_NAMES, STAT_MIN, STAT_MAX)

    def as_dict(self) -> dict[str, int]:
        return {
            "attack": self.attack,
            "defense": self.defense,
            "speed": self.speed,
            "intelligence": self.intelligence,
            "ferocity": self.ferocity,
            "power": self.power,
        }


@dataclass(frozen=True)
class RoundEvent:
    """One resolved attack in the battle log."""
    round_number: int
    attacker_name: str
    defender_name: str
    damage: int
    is_critical: bool
    narration: str
    defender_health: int  # reported health after the hit, never below 0
    attacker_index: int = 0  # 0 if fighter a attacked, 1 if fighter b

    @property
    def defender_index(self) -> int:
        return 1 - self.attacker_index


@dataclass(frozen=True)
class BattleResult:
    """Outcome of a single battle resolution.

    ``fighters`` and ``final_health`` are both ordered (a, b) as passed to the
    resolver. ``winner`` and ``loser`` are the input entity objects themselves.
    """
    fighters: tuple[CombatEntity, CombatEntity]
    winner: CombatEntity
    loser: CombatEntity
    rounds: tuple[RoundEvent, ...]
    final_health: tuple[int, int]
    victory_margin: VictoryMargin
    winner_stats: CombatStats

    @property
    def rounds_fought(self) -> int:
        return len(self.rounds)

    @property
    def is_knockout(self) -> bool:
        """True if a fighter was knocked out rather than outlasted at the round cap."""
        return 0 in self.final_health

    @property
    def health_difference(self) -> int:
        return abs(self.final_health[0] - self.final_health[1])

    @property
    def victory_message(self) -> str:
        return VICTORY_MESSAGES[self.victory_margin]

    def health_of(self, entity: CombatEntity) -> int:
        """Get the final reported health of one of the two fighters."""
        if entity is self.fighters[0]:
            return self.final_health[0]
        if entity is self.fighters[1]:
            return self.final_health[1]
        raise ValueError(f"{entity.name} did not fight in this battle")


class DataConverter:
    """Utilities for converting arena structures to plain data."""

    @staticmethod
    def dict_to_entity(data: dict[str, Any], default_id: Optional[EntityId] = None) -> CombatEntity:
        return CombatEntity.from_dict(data, default_id)

    @staticmethod
    def stats_to_dict(stats: CombatStats) -> dict[str, int]:
        return stats.as_dict()

    @staticmethod
    def entity_to_dict(entity: CombatEntity) -> dict[str, Any]:
        return {
            "id": entity.id,
            "name": entity.name,
            "diet": entity.diet_type.value,
            "length_meters": entity.length_meters,
            "mass_kg": entity.mass_kg,
            "species": entity.species,
            "era": entity.era,
        }

    @staticmethod
    def round_event_to_dict(event: RoundEvent) -> dict[str, Any]:
        return {
            "round": event.round_number,
            "attacker": event.attacker_name,
            "defender": event.defender_name,
            "damage": event.damage,
            "is_critical": event.is_critical,
            "narration": event.narration,
            "defender_health": event.defender_health,
            "attacker_index": event.attacker_index,
        }

    @staticmethod
    def battle_result_to_dict(result: BattleResult) -> dict[str, Any]:
        """Convert a BattleResult to JSON-safe plain data for a UI to replay.

        Args:
            result: The battle result to convert

        Returns:
            Dictionary with fighters, winner/loser ids, rounds and final health
        """
        first, second = result.fighters
        return {
            "fighters": [DataConverter.entity_to_dict(first), DataConverter.entity_to_dict(second)],
            "winner_id": result.winner.id,
            "loser_id": result.loser.id,
            "rounds": [DataConverter.round_event_to_dict(event) for event in result.rounds],
            "final_health": list(result.final_health),
            "victory_margin": result.victory_margin.value,
            "victory_message": result.victory_message,
            "winner_stats": DataConverter.stats_to_dict(result.winner_stats),
        }
