"""
Stat derivation from catalog attributes.

Maps an entity's diet, body length and body mass into five bounded combat
statistics. Everything except intelligence is a pure function of the inputs;
intelligence is drawn once per derivation from the injected random source.
Missing or odd catalog values are defaulted, never rejected.
"""
from ...core.data.data_structures import CombatEntity, CombatStats, clamp, round_half_up
from ...core.data.game_enums import Diet
from ...core.data.game_info import (
    CARNIVORE_SPEED_BONUS,
    DEFAULT_LENGTH_METERS,
    DEFAULT_MASS_KG,
    DIET_DATA,
    INTELLIGENCE_RANGE,
    LENGTH_SCORE_PER_METER,
    MASS_SCORE_DIVISOR,
    SIZE_SCORE_CAP,
)
from ...core.random_source import RandomSource, uniform


class StatDeriver:
    """Derives CombatStats from CombatEntity attributes."""

    @staticmethod
    def derive(entity: CombatEntity, rng: RandomSource) -> CombatStats:
        """
        Derive fresh combat stats for one battle setup.

        Args:
            entity: The catalog entity
            rng: Random source used for the intelligence draw only

        Returns:
            CombatStats with every stat rounded and clamped to [10, 100]
        """
        diet = entity.diet_type
        modifiers = DIET_DATA[diet].modifiers
        is_carnivore = diet is Diet.CARNIVORE

        length_score = StatDeriver.length_score(entity.length_meters)
        mass_score = StatDeriver.mass_score(entity.mass_kg)

        attack = modifiers.attack + length_score * 0.3 + mass_score * 0.2
        defense = modifiers.defense + mass_score * 0.4
        speed = 100 - mass_score * 0.5 + (CARNIVORE_SPEED_BONUS if is_carnivore else 0)
        intelligence = uniform(rng, *INTELLIGENCE_RANGE)
        ferocity = modifiers.ferocity + (length_score * 0.2 if is_carnivore else 0)

        attack, defense, speed, intelligence, ferocity = (
            clamp(round_half_up(value))
            for value in (attack, defense, speed, intelligence, ferocity)
        )

        return CombatStats(
            attack=attack,
            defense=defense,
            speed=speed,
            intelligence=intelligence,
            ferocity=ferocity,
            power=attack + defense + speed + intelligence + ferocity,
        )

    @staticmethod
    def length_score(length_meters) -> float:
        """Normalize body length to a 0-100 score (40 m and above caps it)."""
        # Zero is treated as unknown, like an absent value
        length = length_meters or DEFAULT_LENGTH_METERS
        return min(SIZE_SCORE_CAP, length * LENGTH_SCORE_PER_METER)

    @staticmethod
    def mass_score(mass_kg) -> float:
        """Normalize body mass to a 0-100 score (10 t and above caps it)."""
        mass = mass_kg or DEFAULT_MASS_KG
        return min(SIZE_SCORE_CAP, mass / MASS_SCORE_DIVISOR)


def derive_stats(entity: CombatEntity, rng: RandomSource) -> CombatStats:
    """Derive combat stats for an entity. See StatDeriver.derive."""
    return StatDeriver.derive(entity, rng)


def derive_matchup_stats(
    entity_a: CombatEntity,
    entity_b: CombatEntity,
    rng: RandomSource,
) -> tuple[CombatStats, CombatStats]:
    """Derive a fresh, unshared stat pair for one battle setup."""
    return StatDeriver.derive(entity_a, rng), StatDeriver.derive(entity_b, rng)
