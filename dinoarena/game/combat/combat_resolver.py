"""
Combat resolution system for arena duels.

This module runs a complete battle between two fighters with pre-derived
stats: alternating attacks starting with the faster fighter, a damage formula
with variance and critical hits, and termination on knockout or round cap.
Resolution is synchronous and keeps all per-battle state local to the call,
so one resolver can serve concurrent battles with independent random sources.
"""
from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

from ...core.data.data_structures import (
    BattleResult,
    CombatEntity,
    CombatStats,
    RoundEvent,
    round_half_up,
)
from ...core.data.game_enums import BattlePhase, LogLevel, VictoryMargin
from ...core.data.game_info import (
    ATTACK_DAMAGE_FACTOR,
    CRITICAL_MULTIPLIER,
    CRITICAL_SPEED_DIVISOR,
    CRITICAL_SUFFIX,
    DAMAGE_VARIANCE,
    DECISIVE_THRESHOLD,
    DEFENSE_MITIGATION_FACTOR,
    DIET_DATA,
    DOMINANT_THRESHOLD,
    FEROCITY_DAMAGE_FACTOR,
    MIN_DAMAGE,
    ROUND_CAP,
    STARTING_HEALTH,
)
from ...core.events import BattleConcluded, BattleStarted, DebugMessage, LogMessage, RoundResolved
from ...core.random_source import RandomSource, pick

if TYPE_CHECKING:
    from ...core.events.event_manager import EventManager


@dataclass
class AttackOutcome:
    """Damage and flavor of a single attack before it is applied."""
    damage: int
    is_critical: bool
    phrase: str


@dataclass
class BattleState:
    """Mutable state of one battle in progress, private to a resolve() call."""
    health: list[int] = field(default_factory=lambda: [STARTING_HEALTH, STARTING_HEALTH])
    rounds: list[RoundEvent] = field(default_factory=list)
    phase: BattlePhase = BattlePhase.NOT_STARTED

    @property
    def round_number(self) -> int:
        return len(self.rounds)

    @property
    def someone_down(self) -> bool:
        return self.health[0] <= 0 or self.health[1] <= 0

    def reported_health(self) -> tuple[int, int]:
        return max(0, self.health[0]), max(0, self.health[1])


def classify_victory_margin(health_difference: int) -> VictoryMargin:
    """Classify a final absolute health difference into a victory margin."""
    difference = abs(health_difference)
    if difference > DOMINANT_THRESHOLD:
        return VictoryMargin.DOMINANT
    if difference > DECISIVE_THRESHOLD:
        return VictoryMargin.DECISIVE
    return VictoryMargin.NARROW


class CombatResolver:
    """Handles complete battle execution between two fighters."""

    def __init__(self, event_manager: Optional["EventManager"] = None):
        self.event_manager = event_manager

    def resolve(
        self,
        fighter_a: CombatEntity,
        stats_a: CombatStats,
        fighter_b: CombatEntity,
        stats_b: CombatStats,
        rng: RandomSource,
    ) -> BattleResult:
        """
        Run a battle to completion.

        Args:
            fighter_a: First fighter, wins speed ties and round-cap health ties
            stats_a: Pre-derived stats of the first fighter
            fighter_b: Second fighter
            stats_b: Pre-derived stats of the second fighter
            rng: Random source for critical rolls, variance and narration

        Returns:
            BattleResult with the full ordered round log

        Raises:
            ValueError: If the fighters or stats are invalid; raised before
                any round is resolved
        """
        self.validate_combatants(fighter_a, stats_a, fighter_b, stats_b)

        fighters = (fighter_a, fighter_b)
        stats = (stats_a, stats_b)
        first = self.first_attacker_index(stats_a, stats_b)

        state = BattleState()
        self._set_phase(state, BattlePhase.IN_PROGRESS, fighter_a, fighter_b)
        self._publish(BattleStarted(
            turn=0,
            fighter_a=fighter_a,
            fighter_b=fighter_b,
            stats_a=stats_a,
            stats_b=stats_b,
            first_attacker=fighters[first],
        ))
        self._emit_log(
            f"{fighter_a.name} vs {fighter_b.name}: {fighters[first].name} strikes first"
        )

        for round_number in range(1, ROUND_CAP + 1):
            if state.someone_down:
                break
            attacker = first if round_number % 2 == 1 else 1 - first
            defender = 1 - attacker

            outcome = self.roll_attack(stats[attacker], stats[defender], fighters[attacker], rng)
            state.health[defender] -= outcome.damage

            narration = f"{fighters[attacker].name} {outcome.phrase}"
            if outcome.is_critical:
                narration += CRITICAL_SUFFIX
            event = RoundEvent(
                round_number=round_number,
                attacker_name=fighters[attacker].name,
                defender_name=fighters[defender].name,
                damage=outcome.damage,
                is_critical=outcome.is_critical,
                narration=narration,
                defender_health=max(0, state.health[defender]),
                attacker_index=attacker,
            )
            state.rounds.append(event)
            self._publish(RoundResolved(turn=round_number, round_event=event))
            self._emit_log(f"Round {round_number}: {narration} ({outcome.damage} damage)")

        self._set_phase(state, BattlePhase.CONCLUDED, fighter_a, fighter_b)
        result = self._build_result(fighters, stats, state)
        self._publish(BattleConcluded(turn=state.round_number, result=result))
        self._emit_log(
            f"{result.winner.name} defeats {result.loser.name} "
            f"({result.victory_margin.value}, {result.final_health[0]}-{result.final_health[1]})"
        )
        return result

    @staticmethod
    def validate_combatants(
        fighter_a: CombatEntity,
        stats_a: CombatStats,
        fighter_b: CombatEntity,
        stats_b: CombatStats,
    ) -> None:
        """Reject invalid battle inputs with ValueError."""
        for fighter in (fighter_a, fighter_b):
            if not isinstance(fighter, CombatEntity):
                raise ValueError(f"Fighter must be a CombatEntity, got {type(fighter).__name__}")
            if not fighter.name or not fighter.name.strip():
                raise ValueError(f"Fighter {fighter.id!r} has no name")
        if fighter_a is fighter_b or fighter_a.id == fighter_b.id:
            raise ValueError(f"A fighter cannot battle itself: {fighter_a.name} ({fighter_a.id!r})")
        for fighter, stats in ((fighter_a, stats_a), (fighter_b, stats_b)):
            if not isinstance(stats, CombatStats):
                raise ValueError(f"Stats for {fighter.name} must be CombatStats, got {type(stats).__name__}")
            try:
                stats.validate()
            except ValueError as e:
                raise ValueError(f"Invalid stats for {fighter.name}: {e}") from e

    @staticmethod
    def first_attacker_index(stats_a: CombatStats, stats_b: CombatStats) -> int:
        """Index of the fighter opening the battle; speed ties go to fighter a."""
        return 0 if stats_a.speed >= stats_b.speed else 1

    @staticmethod
    def roll_attack(
        attacker_stats: CombatStats,
        defender_stats: CombatStats,
        attacker: CombatEntity,
        rng: RandomSource,
    ) -> AttackOutcome:
        """Roll one attack: critical check, variance, then narration phrase."""
        base_damage = (attacker_stats.attack * ATTACK_DAMAGE_FACTOR
                       + attacker_stats.ferocity * FEROCITY_DAMAGE_FACTOR)
        mitigation = defender_stats.defense * DEFENSE_MITIGATION_FACTOR
        is_critical = rng.next() < attacker_stats.speed / CRITICAL_SPEED_DIVISOR
        variance = rng.next() * DAMAGE_VARIANCE

        damage = max(MIN_DAMAGE, round_half_up(base_damage - mitigation + variance))
        if is_critical:
            damage = round_half_up(damage * CRITICAL_MULTIPLIER)

        phrase = pick(rng, DIET_DATA[attacker.diet_type].phrases)
        return AttackOutcome(damage=damage, is_critical=is_critical, phrase=phrase)

    @staticmethod
    def _build_result(
        fighters: tuple[CombatEntity, CombatEntity],
        stats: tuple[CombatStats, CombatStats],
        state: BattleState,
    ) -> BattleResult:
        final_health = state.reported_health()
        # Strictly higher health wins; an exact tie goes to fighter a
        winner = 1 if final_health[1] > final_health[0] else 0
        return BattleResult(
            fighters=fighters,
            winner=fighters[winner],
            loser=fighters[1 - winner],
            rounds=tuple(state.rounds),
            final_health=final_health,
            victory_margin=classify_victory_margin(final_health[0] - final_health[1]),
            winner_stats=stats[winner],
        )

    def _set_phase(self, state: BattleState, phase: BattlePhase,
                   fighter_a: CombatEntity, fighter_b: CombatEntity) -> None:
        previous = state.phase
        state.phase = phase
        self._publish(DebugMessage(
            turn=state.round_number,
            message=f"{fighter_a.name} vs {fighter_b.name}: {previous.name} -> {phase.name}",
            source="CombatResolver",
            context={"round": state.round_number, "health": state.reported_health()},
        ))

    def _publish(self, event) -> None:
        if self.event_manager is not None:
            self.event_manager.publish(event, source="CombatResolver")

    def _emit_log(self, message: str, category: str = "BATTLE", level: LogLevel = LogLevel.INFO) -> None:
        """Emit a log message event."""
        self._publish(LogMessage(
            turn=0,
            message=message,
            category=category,
            level=level,
            source="CombatResolver",
        ))


def resolve_battle(
    fighter_a: CombatEntity,
    stats_a: CombatStats,
    fighter_b: CombatEntity,
    stats_b: CombatStats,
    rng: RandomSource,
    event_manager: Optional["EventManager"] = None,
) -> BattleResult:
    """Resolve one battle. See CombatResolver.resolve."""
    return CombatResolver(event_manager).resolve(fighter_a, stats_a, fighter_b, stats_b, rng)
