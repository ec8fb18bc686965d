"""
Battle calculation system for matchup forecasting.

This module provides battle forecast calculations separate from actual combat resolution,
allowing the arena's VS screen to preview damage and critical odds without rolling
any dice or touching a random source.
"""
import math
from dataclasses import dataclass

from ...core.data.data_structures import CombatEntity, CombatStats, round_half_up
from ...core.data.game_info import (
    ATTACK_DAMAGE_FACTOR,
    CRITICAL_MULTIPLIER,
    CRITICAL_SPEED_DIVISOR,
    DAMAGE_VARIANCE,
    DEFENSE_MITIGATION_FACTOR,
    FEROCITY_DAMAGE_FACTOR,
    MIN_DAMAGE,
    STARTING_HEALTH,
)


@dataclass(frozen=True)
class AttackForecast:
    """Predicted numbers for one fighter attacking the other."""
    attacker_name: str
    defender_name: str
    min_damage: int
    max_damage: int
    crit_chance: int        # percent, 0-50
    expected_damage: float  # mean per hit including critical hits
    hits_to_knockout: int   # with expected damage, from full health


@dataclass(frozen=True)
class BattleForecast:
    """Forecast for both directions of a matchup."""
    first_attacker_name: str
    a_attacks: AttackForecast
    b_attacks: AttackForecast


class BattleCalculator:
    """Calculates battle forecasts for matchup previews."""

    @staticmethod
    def calculate_forecast(
        fighter_a: CombatEntity,
        stats_a: CombatStats,
        fighter_b: CombatEntity,
        stats_b: CombatStats,
    ) -> BattleForecast:
        """
        Calculate a complete forecast between two fighters.

        Args:
            fighter_a: First fighter (wins speed ties)
            stats_a: Stats of the first fighter
            fighter_b: Second fighter
            stats_b: Stats of the second fighter

        Returns:
            BattleForecast with per-direction damage ranges and odds
        """
        first = fighter_a if stats_a.speed >= stats_b.speed else fighter_b
        return BattleForecast(
            first_attacker_name=first.name,
            a_attacks=BattleCalculator._forecast_attack(fighter_a, stats_a, fighter_b, stats_b),
            b_attacks=BattleCalculator._forecast_attack(fighter_b, stats_b, fighter_a, stats_a),
        )

    @staticmethod
    def _forecast_attack(attacker: CombatEntity, attacker_stats: CombatStats,
                         defender: CombatEntity, defender_stats: CombatStats) -> AttackForecast:
        min_damage, max_damage = BattleCalculator.calculate_damage_range(attacker_stats, defender_stats)
        expected = BattleCalculator.calculate_expected_damage(attacker_stats, defender_stats)
        return AttackForecast(
            attacker_name=attacker.name,
            defender_name=defender.name,
            min_damage=min_damage,
            max_damage=max_damage,
            crit_chance=BattleCalculator.calculate_crit_chance(attacker_stats),
            expected_damage=expected,
            hits_to_knockout=math.ceil(STARTING_HEALTH / expected),
        )

    @staticmethod
    def calculate_raw_damage(attacker_stats: CombatStats, defender_stats: CombatStats) -> float:
        """Base damage minus mitigation, before variance and the minimum."""
        base_damage = (attacker_stats.attack * ATTACK_DAMAGE_FACTOR
                       + attacker_stats.ferocity * FEROCITY_DAMAGE_FACTOR)
        return base_damage - defender_stats.defense * DEFENSE_MITIGATION_FACTOR

    @staticmethod
    def calculate_damage_range(attacker_stats: CombatStats, defender_stats: CombatStats) -> tuple[int, int]:
        """Min and max non-critical damage per hit.

        Variance is drawn from [0, 10), so the top end is just under raw + 10.
        """
        raw = BattleCalculator.calculate_raw_damage(attacker_stats, defender_stats)
        min_damage = max(MIN_DAMAGE, round_half_up(raw))
        max_damage = max(MIN_DAMAGE, math.ceil(raw + DAMAGE_VARIANCE + 0.5) - 1)
        return min_damage, max_damage

    @staticmethod
    def calculate_crit_chance(attacker_stats: CombatStats) -> int:
        """Critical hit chance percentage (speed / 2, so at most 50)."""
        return round_half_up(attacker_stats.speed / CRITICAL_SPEED_DIVISOR * 100)

    @staticmethod
    def calculate_expected_damage(attacker_stats: CombatStats, defender_stats: CombatStats) -> float:
        """Mean damage per hit, averaging variance and critical hits.

        Averages over the distinct integer outcomes of the variance roll, each
        weighted by the width of the variance interval that produces it.
        """
        raw = BattleCalculator.calculate_raw_damage(attacker_stats, defender_stats)
        crit_probability = attacker_stats.speed / CRITICAL_SPEED_DIVISOR

        total = 0.0
        low = raw
        high = raw + DAMAGE_VARIANCE
        value = math.floor(low + 0.5)
        while value - 0.5 < high:
            # Pre-round values in [value - 0.5, value + 0.5) round to value
            start = max(low, value - 0.5)
            end = min(high, value + 0.5)
            if end > start:
                weight = (end - start) / DAMAGE_VARIANCE
                damage = max(MIN_DAMAGE, value)
                crit_damage = round_half_up(damage * CRITICAL_MULTIPLIER)
                total += weight * ((1 - crit_probability) * damage + crit_probability * crit_damage)
            value += 1
        return total
