"""Arena configuration loader.

This module loads runtime and presentation settings from a YAML file. Combat
rules are fixed constants in game_info and are never read from configuration.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml


@dataclass
class ArenaConfig:
    """Runtime settings for an arena session."""
    roster_path: str = "assets/rosters/default.yaml"
    replay_delay: float = 0.8      # seconds between replayed rounds
    bar_width: int = 20            # characters in stat and HP bars
    max_log_messages: int = 1000
    debug_logging: bool = False
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ArenaConfig":
        """Build a config from the ``arena`` section, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        config = cls(**{key: value for key, value in data.items() if key in known})
        config.validate()
        return config

    def validate(self) -> None:
        if self.replay_delay < 0:
            raise ValueError(f"replay_delay must be >= 0, got {self.replay_delay}")
        if self.bar_width < 1:
            raise ValueError(f"bar_width must be >= 1, got {self.bar_width}")
        if self.max_log_messages < 1:
            raise ValueError(f"max_log_messages must be >= 1, got {self.max_log_messages}")


class ArenaConfigLoader:
    """Loader for arena configuration files with caching and fallbacks."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or self._find_default_config_path()
        self._cached_config: Optional[ArenaConfig] = None

    def _find_default_config_path(self) -> str:
        """Find assets/config/arena.yaml by walking up from this file."""
        current_dir = Path(__file__).parent
        for _ in range(5):  # Limit search depth
            config_path = current_dir / "assets" / "config" / "arena.yaml"
            if config_path.exists():
                return str(config_path)
            current_dir = current_dir.parent

        # Fallback: assume it's in the project root
        return "assets/config/arena.yaml"

    def load_config(self, force_reload: bool = False) -> ArenaConfig:
        """Load the configuration, using the cache if available.

        A missing file yields the defaults; a malformed one raises ValueError.
        """
        if self._cached_config is not None and not force_reload:
            return self._cached_config

        if not os.path.exists(self.config_path):
            self._cached_config = ArenaConfig()
            return self._cached_config

        try:
            with open(self.config_path, "r", encoding="utf-8") as file:
                config_data = yaml.safe_load(file) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse arena config {self.config_path}: {e}") from e

        if not isinstance(config_data, dict):
            raise ValueError(f"Arena config {self.config_path} must contain a mapping")
        section = config_data.get("arena", config_data)
        if not isinstance(section, dict):
            raise ValueError(f"Arena config {self.config_path} must contain a mapping")

        config = ArenaConfig.from_dict(section)
        config.roster_path = self._resolve_relative(config.roster_path)
        self._cached_config = config
        return self._cached_config

    def _resolve_relative(self, path: str) -> str:
        """Resolve a path relative to the project root the config file lives in."""
        if os.path.isabs(path) or os.path.exists(path):
            return path
        # assets/config/arena.yaml -> project root is two levels above the file
        project_root = Path(self.config_path).resolve().parent.parent.parent
        return str(project_root / path)
