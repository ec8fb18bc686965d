import sys
import textwrap
import time
from typing import Callable, Optional, TextIO

from ..core.renderer import Renderer, RendererConfig
from ..core.data.data_structures import BattleResult, CombatEntity, CombatStats, RoundEvent, STAT_NAMES, round_half_up
from ..core.data.game_enums import DIET_NAMES, VICTORY_MARGIN_NAMES
from ..core.data.game_info import STARTING_HEALTH, STAT_MAX


class TextRenderer(Renderer):
    """Plain-text arena renderer writing to a stream (stdout by default)."""

    def __init__(
        self,
        config: Optional[RendererConfig] = None,
        stream: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        super().__init__(config)
        self.stream = stream or sys.stdout
        self._sleep = sleep

        self.symbols = {
            "bar_full": "#",
            "bar_empty": "-",
            "critical": "!",
            "hit": ">",
            "trophy": "*",
        }

    def _write(self, text: str = "") -> None:
        """Write one line, wrapping anything wider than the configured width."""
        if len(text) <= self.config.width:
            self.stream.write(text + "\n")
            return
        for line in textwrap.wrap(text, self.config.width, subsequent_indent="    "):
            self.stream.write(line + "\n")

    def bar(self, value: int, maximum: int) -> str:
        """Fixed-width ASCII bar for a value in [0, maximum]."""
        width = self.config.bar_width
        filled = max(0, min(width, round_half_up(width * value / maximum))) if maximum else 0
        return self.symbols["bar_full"] * filled + self.symbols["bar_empty"] * (width - filled)

    def pause(self, seconds: float) -> None:
        if seconds > 0:
            self._sleep(seconds)

    def render_title(self, fighter_a: CombatEntity, fighter_b: CombatEntity) -> None:
        self._write("=" * self.config.width)
        self._write(f"{self.config.title}: {fighter_a.name} VS {fighter_b.name}")
        self._write("=" * self.config.width)

    def render_fighter(self, fighter: CombatEntity, stats: CombatStats) -> None:
        diet = DIET_NAMES[fighter.diet_type]
        self._write(f"{fighter.name} ({diet}) - power {stats.power}")
        for stat_name in STAT_NAMES:
            value = getattr(stats, stat_name)
            self._write(f"  {stat_name.capitalize():<13}{self.bar(value, STAT_MAX)} {value:>3}")
        self._write()

    def render_round(self, event: RoundEvent, health: tuple[int, int], result: BattleResult) -> None:
        marker = self.symbols["critical"] if event.is_critical else self.symbols["hit"]
        self._write(f"Round {event.round_number:>2} {marker} {event.narration} for {event.damage} damage")
        for fighter, fighter_health in zip(result.fighters, health):
            self._write(f"    {fighter.name:<20}{self.bar(fighter_health, STARTING_HEALTH)} {fighter_health:>3} HP")

    def render_outcome(self, result: BattleResult) -> None:
        trophy = self.symbols["trophy"] * 3
        self._write()
        self._write(f"{trophy} {result.winner.name} WINS! {trophy}")
        self._write(f"{VICTORY_MARGIN_NAMES[result.victory_margin]} victory: {result.victory_message}")
        first, second = result.fighters
        self._write(
            f"Final health: {first.name} {result.final_health[0]} - "
            f"{second.name} {result.final_health[1]} after {result.rounds_fought} rounds"
        )
