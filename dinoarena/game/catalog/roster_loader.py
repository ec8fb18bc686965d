"""
Roster loading from YAML catalog exports.

The catalog service that owns dinosaur records lives outside the engine; a
roster file is the local stand-in for it, using the same field names as the
catalog (``diet``, ``length``/``lengthMeters``, ``weight``/``weightKg``).
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional, TYPE_CHECKING

import yaml

from ...core.data.data_structures import CombatEntity, EntityId
from ...core.data.game_enums import LogLevel
from ...core.events import LogMessage, RosterLoaded
from ...core.random_source import RandomSource

if TYPE_CHECKING:
    from ...core.events.event_manager import EventManager


@dataclass
class Roster:
    """An ordered collection of catalog entities indexed by id."""
    name: str = "Unnamed Roster"
    entities: dict[EntityId, CombatEntity] = field(default_factory=dict)

    @classmethod
    def from_entities(cls, entities: Iterable[CombatEntity], name: str = "Unnamed Roster") -> "Roster":
        roster = cls(name=name)
        for entity in entities:
            roster.add(entity)
        return roster

    def add(self, entity: CombatEntity) -> None:
        if entity.id in self.entities:
            raise ValueError(f"Duplicate roster id {entity.id!r} ({entity.name})")
        self.entities[entity.id] = entity

    def get(self, entity_id: EntityId) -> Optional[CombatEntity]:
        return self.entities.get(entity_id)

    def find_by_name(self, name: str) -> Optional[CombatEntity]:
        """Case-insensitive lookup by display name."""
        wanted = name.strip().lower()
        for entity in self.entities.values():
            if entity.name.lower() == wanted:
                return entity
        return None

    def random_matchup(self, rng: RandomSource) -> tuple[CombatEntity, CombatEntity]:
        """Pick two distinct entities uniformly at random."""
        pool = list(self.entities.values())
        if len(pool) < 2:
            raise ValueError(f"Roster '{self.name}' needs at least two entities for a matchup")
        first = min(int(rng.next() * len(pool)), len(pool) - 1)
        second = min(int(rng.next() * (len(pool) - 1)), len(pool) - 2)
        if second >= first:
            second += 1
        return pool[first], pool[second]

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self):
        return iter(self.entities.values())


class RosterLoader:
    """Handles loading rosters from YAML files."""

    @staticmethod
    def load_from_file(file_path: str, event_manager: Optional["EventManager"] = None) -> Roster:
        """Load a roster from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid YAML or has no entity list
        """
        path_obj = Path(file_path)
        try:
            with open(path_obj, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Roster file not found: {file_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML roster: {e}") from e

        return RosterLoader.parse_roster(data, source=path_obj.name, event_manager=event_manager)

    @staticmethod
    def parse_roster(
        data: Any,
        source: str = "<memory>",
        event_manager: Optional["EventManager"] = None,
    ) -> Roster:
        """Parse roster data from a dictionary (or a bare list of records)."""
        if isinstance(data, list):
            data = {"dinosaurs": data}
        if not isinstance(data, dict):
            raise ValueError(f"Roster {source} must be a mapping or a list of entries")

        records = data.get("dinosaurs", data.get("entities"))
        if not isinstance(records, list):
            raise ValueError(f"Roster {source} has no 'dinosaurs' list")

        roster = Roster(name=data.get("name", "Unnamed Roster"))
        skipped = 0
        for index, record in enumerate(records, start=1):
            name = record.get("name") if isinstance(record, dict) else None
            if not isinstance(name, str) or not name.strip():
                skipped += 1
                RosterLoader._emit_log(
                    event_manager, f"Skipping roster entry #{index} in {source}: missing name",
                    "WARNING", LogLevel.WARNING,
                )
                continue
            roster.add(CombatEntity.from_dict(record, default_id=index))

        RosterLoader._emit_log(event_manager, f"Loaded roster '{roster.name}' from {source} ({len(roster)} entities)")
        if event_manager is not None:
            event_manager.publish(
                RosterLoaded(turn=0, source=source, entity_count=len(roster), skipped_count=skipped),
                source="RosterLoader",
            )
        return roster

    @staticmethod
    def _emit_log(event_manager: Optional["EventManager"], message: str,
                  category: str = "CATALOG", level: LogLevel = LogLevel.INFO) -> None:
        if event_manager is None:
            return
        event_manager.publish(
            LogMessage(turn=0, message=message, category=category, level=level, source="RosterLoader"),
            source="RosterLoader",
        )
