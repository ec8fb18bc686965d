"""Combat system components.

This package contains the core combat logic with clear separation of concerns:
- stat_deriver.py: Catalog attributes to bounded combat stats
- combat_resolver.py: Round-by-round battle execution and outcome classification
- battle_calculator.py: Read-only matchup forecasts
- matchup_simulator.py: Many-battle statistics for a pairing
"""

from .stat_deriver import StatDeriver, derive_stats, derive_matchup_stats
from .combat_resolver import CombatResolver, resolve_battle, classify_victory_margin
from .battle_calculator import BattleCalculator, BattleForecast, AttackForecast
from .matchup_simulator import MatchupSummary, simulate_matchup

__all__ = [
    "StatDeriver",
    "derive_stats",
    "derive_matchup_stats",
    "CombatResolver",
    "resolve_battle",
    "classify_victory_margin",
    "BattleCalculator",
    "BattleForecast",
    "AttackForecast",
    "MatchupSummary",
    "simulate_matchup",
]
