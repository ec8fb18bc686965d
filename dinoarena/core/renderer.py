from abc import ABC, abstractmethod
from typing import Optional
from dataclasses import dataclass

from .data.data_structures import BattleResult, CombatEntity, CombatStats, RoundEvent
from .data.game_info import STARTING_HEALTH


@dataclass
class RendererConfig:
    width: int = 80
    bar_width: int = 20
    replay_delay: float = 0.8
    title: str = "Dino Battle Arena"


class Renderer(ABC):
    """Presentation of battle results. Renderers only read BattleResult data."""

    def __init__(self, config: Optional[RendererConfig] = None):
        self.config = config or RendererConfig()

    @abstractmethod
    def render_fighter(self, fighter: CombatEntity, stats: CombatStats) -> None:
        pass

    @abstractmethod
    def render_round(self, event: RoundEvent, health: tuple[int, int], result: BattleResult) -> None:
        pass

    @abstractmethod
    def render_outcome(self, result: BattleResult) -> None:
        pass

    @abstractmethod
    def pause(self, seconds: float) -> None:
        pass

    def replay(self, result: BattleResult, stats: Optional[tuple[CombatStats, CombatStats]] = None) -> None:
        """Play a finished battle back round by round."""
        if stats is not None:
            for fighter, fighter_stats in zip(result.fighters, stats):
                self.render_fighter(fighter, fighter_stats)

        health = [STARTING_HEALTH, STARTING_HEALTH]
        for event in result.rounds:
            self.pause(self.config.replay_delay)
            health[event.defender_index] = event.defender_health
            self.render_round(event, (health[0], health[1]), result)

        self.pause(self.config.replay_delay)
        self.render_outcome(result)
