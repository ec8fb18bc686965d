"""Arena management system.

This module is the in-process surface the arena UI talks to: picking two
fighters, previewing the matchup, starting a battle and asking for a rematch.
It owns the per-setup stats and the latest result, and emits events for the
log manager and any other subscriber.
"""

from typing import TYPE_CHECKING, Optional

from ...core.data.data_structures import BattleResult, CombatEntity, CombatStats, EntityId
from ...core.data.game_enums import LogLevel
from ...core.events import FightersSelected, LogMessage
from ...core.random_source import RandomSource
from ..combat.battle_calculator import BattleCalculator, BattleForecast
from ..combat.combat_resolver import CombatResolver
from ..combat.stat_deriver import derive_matchup_stats

if TYPE_CHECKING:
    from ...core.events.event_manager import EventManager
    from ..catalog.roster_loader import Roster


class ArenaManager:
    """Manages fighter selection and battle lifecycle for one arena session.

    Each session owns its random source and event manager; two sessions never
    share state, so they can run side by side.
    """

    def __init__(self, roster: "Roster", event_manager: "EventManager", rng: RandomSource):
        self.roster = roster
        self.event_manager = event_manager
        self.rng = rng
        self.resolver = CombatResolver(event_manager)

        self._fighters: Optional[tuple[CombatEntity, CombatEntity]] = None
        self._stats: Optional[tuple[CombatStats, CombatStats]] = None
        self._last_result: Optional[BattleResult] = None
        self.battles_fought = 0

    def _emit_log(self, message: str, category: str = "SYSTEM", level: LogLevel = LogLevel.INFO) -> None:
        """Emit a log message event."""
        self.event_manager.publish(
            LogMessage(turn=0, message=message, category=category, level=level, source="ArenaManager"),
            source="ArenaManager",
        )

    @property
    def fighters(self) -> tuple[CombatEntity, CombatEntity]:
        if self._fighters is None:
            raise RuntimeError("No fighters selected")
        return self._fighters

    @property
    def stats(self) -> tuple[CombatStats, CombatStats]:
        if self._stats is None:
            raise RuntimeError("No fighters selected")
        return self._stats

    @property
    def last_result(self) -> Optional[BattleResult]:
        return self._last_result

    @property
    def has_selection(self) -> bool:
        return self._fighters is not None

    def select_fighters(self, id_a: EntityId, id_b: EntityId) -> tuple[CombatEntity, CombatEntity]:
        """Pick two roster entries by id and derive their stats for this setup.

        Raises:
            ValueError: If an id is unknown or both ids are the same
        """
        if id_a == id_b:
            raise ValueError(f"Pick two different fighters, got {id_a!r} twice")
        fighter_a = self.roster.get(id_a)
        fighter_b = self.roster.get(id_b)
        for entity_id, fighter in ((id_a, fighter_a), (id_b, fighter_b)):
            if fighter is None:
                raise ValueError(f"Unknown fighter id {entity_id!r} in roster '{self.roster.name}'")
        return self._set_fighters(fighter_a, fighter_b)

    def select_random(self) -> tuple[CombatEntity, CombatEntity]:
        """Pick a random matchup from the roster."""
        fighter_a, fighter_b = self.roster.random_matchup(self.rng)
        return self._set_fighters(fighter_a, fighter_b)

    def _set_fighters(self, fighter_a: CombatEntity, fighter_b: CombatEntity) -> tuple[CombatEntity, CombatEntity]:
        self._fighters = (fighter_a, fighter_b)
        self._stats = derive_matchup_stats(fighter_a, fighter_b, self.rng)
        self._last_result = None

        self.event_manager.publish(
            FightersSelected(turn=0, fighter_a=fighter_a, fighter_b=fighter_b),
            source="ArenaManager",
        )
        self._emit_log(
            f"Selected {fighter_a.name} (power {self._stats[0].power}) vs "
            f"{fighter_b.name} (power {self._stats[1].power})"
        )
        self.event_manager.process_events()
        return self._fighters

    def preview(self) -> BattleForecast:
        """Forecast the current matchup without rolling anything."""
        fighter_a, fighter_b = self.fighters
        stats_a, stats_b = self.stats
        return BattleCalculator.calculate_forecast(fighter_a, stats_a, fighter_b, stats_b)

    def start_battle(self) -> BattleResult:
        """Resolve a battle with the stats of the current setup.

        Raises:
            RuntimeError: If no fighters are selected
        """
        fighter_a, fighter_b = self.fighters
        stats_a, stats_b = self.stats

        result = self.resolver.resolve(fighter_a, stats_a, fighter_b, stats_b, self.rng)
        self._last_result = result
        self.battles_fought += 1
        self.event_manager.process_events()
        return result

    def rematch(self) -> BattleResult:
        """Set up the same pairing again with fresh stats and fight a new battle.

        The previous BattleResult is left untouched.

        Raises:
            RuntimeError: If no battle has been fought for the current selection
        """
        if self._last_result is None:
            raise RuntimeError("No battle to rematch; start a battle first")
        fighter_a, fighter_b = self.fighters
        self._emit_log(f"Rematch: {fighter_a.name} vs {fighter_b.name}")
        self._set_fighters(fighter_a, fighter_b)
        return self.start_battle()

    def reset(self) -> None:
        """Clear the selection and the last result."""
        self._fighters = None
        self._stats = None
        self._last_result = None
        self._emit_log("Arena reset")
        self.event_manager.process_events()
