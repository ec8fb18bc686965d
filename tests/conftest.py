"""
Basic test fixtures for the arena test suite.

Provides simple fixtures for testing the event-driven battle engine.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from dinoarena.core.data.data_structures import CombatEntity
from dinoarena.core.events.event_manager import EventManager
from dinoarena.core.random_source import NumpyRandomSource
from dinoarena.game.catalog.roster_loader import Roster
from dinoarena.game.managers.log_manager import LogManager


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def log_manager(event_manager):
    """Create a log manager wired to the test event manager."""
    return LogManager(event_manager)


@pytest.fixture
def rng():
    """Seeded production random source."""
    return NumpyRandomSource(42)


@pytest.fixture
def carnivore():
    """A large carnivore (12 m, 7000 kg)."""
    return CombatEntity(id="A", name="Tyrannosaurus", diet="carnivore", length_meters=12.0, mass_kg=7000.0)


@pytest.fixture
def herbivore():
    """A huge herbivore (25 m, 9000 kg)."""
    return CombatEntity(id="B", name="Apatosaurus", diet="herbivore", length_meters=25.0, mass_kg=9000.0)


@pytest.fixture
def omnivore():
    """A small omnivore with default size."""
    return CombatEntity(id="C", name="Oviraptor", diet="omnivore")


@pytest.fixture
def sample_roster(carnivore, herbivore, omnivore):
    """A three-entity roster."""
    return Roster.from_entities([carnivore, herbivore, omnivore], name="Test Roster")
