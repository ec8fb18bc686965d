"""Catalog access for the arena.

- roster_loader.py: YAML roster loading and the Roster collection
"""

from .roster_loader import Roster, RosterLoader

__all__ = [
    "Roster",
    "RosterLoader",
]
