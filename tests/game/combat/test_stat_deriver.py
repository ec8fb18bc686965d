"""
Unit tests for stat derivation.

Tests the size normalization, diet modifiers, carnivore bonuses,
rounding, clamping and the single intelligence draw.
"""

import pytest

from dinoarena.game.combat.stat_deriver import StatDeriver, derive_matchup_stats, derive_stats
from tests.test_constants import (
    CARNIVORE_ATTACK,
    CARNIVORE_DEFENSE,
    CARNIVORE_FEROCITY,
    CARNIVORE_SPEED,
    DEFAULT_CARNIVORE_STATS,
    DEFAULT_HERBIVORE_STATS,
    DEFAULT_OMNIVORE_STATS,
    HERBIVORE_ATTACK,
    HERBIVORE_DEFENSE,
    HERBIVORE_FEROCITY,
    HERBIVORE_SPEED,
)
from tests.test_utils import ConstantRandomSource, ScriptedRandomSource, make_entity


def deterministic_part(stats):
    return {
        "attack": stats.attack,
        "defense": stats.defense,
        "speed": stats.speed,
        "ferocity": stats.ferocity,
    }


class TestSizeScores:
    """Test length and mass normalization."""

    @pytest.mark.parametrize("length,expected", [
        (None, 12.5),
        (0, 12.5),
        (2, 5.0),
        (12, 30.0),
        (40, 100.0),
        (80, 100.0),
    ])
    def test_length_score(self, length, expected):
        assert StatDeriver.length_score(length) == expected

    @pytest.mark.parametrize("mass,expected", [
        (None, 5.0),
        (0, 5.0),
        (15, 0.15),
        (7000, 70.0),
        (10000, 100.0),
        (70000, 100.0),
    ])
    def test_mass_score(self, mass, expected):
        assert StatDeriver.mass_score(mass) == pytest.approx(expected)


class TestStatDeriver:
    """Test full stat derivation."""

    def test_large_carnivore(self, carnivore, rng):
        stats = derive_stats(carnivore, rng)
        assert deterministic_part(stats) == {
            "attack": CARNIVORE_ATTACK,
            "defense": CARNIVORE_DEFENSE,
            "speed": CARNIVORE_SPEED,
            "ferocity": CARNIVORE_FEROCITY,
        }

    def test_huge_herbivore(self, herbivore, rng):
        stats = derive_stats(herbivore, rng)
        assert deterministic_part(stats) == {
            "attack": HERBIVORE_ATTACK,
            "defense": HERBIVORE_DEFENSE,
            "speed": HERBIVORE_SPEED,
            "ferocity": HERBIVORE_FEROCITY,
        }

    @pytest.mark.parametrize("diet,expected", [
        ("carnivore", DEFAULT_CARNIVORE_STATS),
        ("herbivore", DEFAULT_HERBIVORE_STATS),
        ("omnivore", DEFAULT_OMNIVORE_STATS),
    ])
    def test_default_sizes(self, diet, expected, rng):
        """Missing length and mass use 5 m and 500 kg."""
        stats = derive_stats(make_entity(diet=diet), rng)
        assert deterministic_part(stats) == expected

    def test_carnivore_speed_clamped(self, rng):
        """The carnivore bonus can push speed past 100 before clamping."""
        stats = derive_stats(make_entity(diet="carnivore", mass_kg=15, length_meters=2), rng)
        assert stats.speed == 100

    def test_unknown_diet_treated_as_herbivore(self, rng):
        unknown = derive_stats(make_entity(diet="piscivore"), ConstantRandomSource(0.5))
        herbivore = derive_stats(make_entity(diet="herbivore"), ConstantRandomSource(0.5))
        assert unknown == herbivore

    def test_diet_case_insensitive(self):
        upper = derive_stats(make_entity(diet="CARNIVOROUS"), ConstantRandomSource(0.5))
        lower = derive_stats(make_entity(diet="carnivore"), ConstantRandomSource(0.5))
        assert upper == lower

    @pytest.mark.parametrize("value,expected", [
        (0.0, 30),
        (0.5, 50),
        (0.999, 70),
    ])
    def test_intelligence_draw(self, value, expected):
        stats = derive_stats(make_entity(), ConstantRandomSource(value))
        assert stats.intelligence == expected

    def test_single_draw_per_derivation(self):
        source = ScriptedRandomSource()
        derive_stats(make_entity(), source)
        assert source.calls == 1

    def test_only_intelligence_varies(self, carnivore, rng):
        results = [derive_stats(carnivore, rng) for _ in range(50)]
        assert len({deterministic_part(stats)["attack"] for stats in results}) == 1
        assert all(30 <= stats.intelligence <= 70 for stats in results)
        assert len({stats.intelligence for stats in results}) > 1

    def test_power_is_sum(self, carnivore, rng):
        stats = derive_stats(carnivore, rng)
        assert stats.power == (stats.attack + stats.defense + stats.speed
                               + stats.intelligence + stats.ferocity)

    def test_all_stats_in_range(self, rng):
        extremes = [
            make_entity(diet="carnivore", length_meters=500, mass_kg=1_000_000),
            make_entity(diet="herbivore", length_meters=0.1, mass_kg=0.5),
            make_entity(diet=None, length_meters=-3, mass_kg=-100),
        ]
        for entity in extremes:
            stats = derive_stats(entity, rng)
            stats.validate()

    def test_matchup_stats_draw_order(self):
        """Fighter a draws first, then fighter b."""
        a = make_entity("a")
        b = make_entity("b")
        stats_a, stats_b = derive_matchup_stats(a, b, ScriptedRandomSource([0.0, 0.999]))
        assert stats_a.intelligence == 30
        assert stats_b.intelligence == 70
