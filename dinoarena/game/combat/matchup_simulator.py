"""
Repeated-battle simulation for matchup statistics.

Runs many independent battles between the same two fighters, deriving fresh
stats for each one exactly as a rematch would, and aggregates the outcomes
with numpy.
"""
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from ...core.data.data_structures import CombatEntity
from ...core.data.game_enums import VictoryMargin
from ...core.random_source import RandomSource
from .combat_resolver import CombatResolver
from .stat_deriver import derive_matchup_stats


_MARGIN_ORDER = (VictoryMargin.NARROW, VictoryMargin.DECISIVE, VictoryMargin.DOMINANT)


@dataclass(frozen=True)
class MatchupSummary:
    """Aggregated outcome of a series of battles between two fighters."""
    fighter_a: CombatEntity
    fighter_b: CombatEntity
    battles: int
    wins: NDArray[np.int64]            # shape (2,), ordered (a, b)
    knockouts: int
    rounds: NDArray[np.int16]          # rounds fought per battle
    margins: dict[VictoryMargin, int]

    @property
    def win_rates(self) -> NDArray[np.float64]:
        return self.wins / self.battles

    @property
    def knockout_rate(self) -> float:
        return self.knockouts / self.battles

    @property
    def mean_rounds(self) -> float:
        return float(np.mean(self.rounds))

    @property
    def favorite(self) -> Optional[CombatEntity]:
        """The fighter with more wins, or None on an even split."""
        if self.wins[0] == self.wins[1]:
            return None
        return self.fighter_a if self.wins[0] > self.wins[1] else self.fighter_b


def simulate_matchup(
    fighter_a: CombatEntity,
    fighter_b: CombatEntity,
    battles: int,
    rng: RandomSource,
    resolver: Optional[CombatResolver] = None,
) -> MatchupSummary:
    """
    Simulate a series of independent battles.

    Args:
        fighter_a: First fighter (keeps the a-side tie-breaks in every battle)
        fighter_b: Second fighter
        battles: Number of battles to run, at least 1
        rng: Random source shared sequentially by all battles in the series
        resolver: Resolver to use; a silent one is created if omitted

    Returns:
        MatchupSummary with wins, knockouts, round counts and margins
    """
    if battles < 1:
        raise ValueError(f"Number of battles must be at least 1, got {battles}")
    resolver = resolver or CombatResolver()

    winner_index = np.zeros(battles, dtype=np.int8)
    knockout = np.zeros(battles, dtype=bool)
    rounds = np.zeros(battles, dtype=np.int16)
    margin_index = np.zeros(battles, dtype=np.int8)

    for i in range(battles):
        stats_a, stats_b = derive_matchup_stats(fighter_a, fighter_b, rng)
        result = resolver.resolve(fighter_a, stats_a, fighter_b, stats_b, rng)
        winner_index[i] = 0 if result.winner is fighter_a else 1
        knockout[i] = result.is_knockout
        rounds[i] = result.rounds_fought
        margin_index[i] = _MARGIN_ORDER.index(result.victory_margin)

    margin_counts = np.bincount(margin_index, minlength=len(_MARGIN_ORDER))
    return MatchupSummary(
        fighter_a=fighter_a,
        fighter_b=fighter_b,
        battles=battles,
        wins=np.bincount(winner_index, minlength=2).astype(np.int64),
        knockouts=int(np.count_nonzero(knockout)),
        rounds=rounds,
        margins={margin: int(count) for margin, count in zip(_MARGIN_ORDER, margin_counts)},
    )
