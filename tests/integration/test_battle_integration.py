"""
Integration tests for complete arena battles.

Runs the full pipeline (roster, stat derivation, resolution, logging,
rendering) and checks the statistical behaviour of real matchups.
"""

import io
import os
from unittest.mock import Mock

import pytest

from dinoarena.core.data.data_structures import DataConverter
from dinoarena.core.events.events import EventType
from dinoarena.core.random_source import NumpyRandomSource
from dinoarena.game.catalog.roster_loader import RosterLoader
from dinoarena.game.combat.matchup_simulator import simulate_matchup
from dinoarena.game.managers.arena_manager import ArenaManager
from dinoarena.renderers.text_renderer import TextRenderer
from tests.conftest import project_root
from tests.test_constants import MATCHUP_BATTLES, MIRROR_BATTLES, MAX_ROUNDS
from tests.test_utils import EventRecorder, make_entity


class TestMatchupStatistics:
    """Statistical behaviour over many seeded battles."""

    def test_carnivore_favored_but_not_invincible(self, carnivore, herbivore):
        """The big carnivore wins most battles, the herbivore still wins some."""
        summary = simulate_matchup(carnivore, herbivore, MATCHUP_BATTLES, NumpyRandomSource(1234))

        assert summary.favorite is carnivore
        assert summary.win_rates[0] > 0.8
        assert summary.wins[1] >= 1
        assert summary.knockout_rate > 0.9

    def test_mirror_match_is_balanced(self):
        """Identical fighters split wins near evenly; fighter a only gains the tie-break."""
        a = make_entity("a", "Left")
        b = make_entity("b", "Right")
        summary = simulate_matchup(a, b, MIRROR_BATTLES, NumpyRandomSource(99))

        assert 0.4 <= summary.win_rates[0] <= 0.67
        assert summary.knockouts == 0
        assert int(summary.rounds.min()) == MAX_ROUNDS


class TestFullArenaSession:
    """End-to-end arena sessions on the shipped roster."""

    @pytest.fixture
    def roster(self, event_manager):
        path = os.path.join(project_root, "assets", "rosters", "default.yaml")
        return RosterLoader.load_from_file(path, event_manager)

    def test_random_session_end_to_end(self, roster, event_manager, log_manager):
        recorder = EventRecorder(event_manager)
        arena = ArenaManager(roster, event_manager, NumpyRandomSource(2025))

        arena.select_random()
        result = arena.start_battle()

        types = recorder.types()
        assert EventType.ROSTER_LOADED in types
        assert types.count(EventType.ROUND_RESOLVED) == result.rounds_fought
        assert types[-1] == EventType.LOG_MESSAGE
        assert EventType.BATTLE_CONCLUDED in types
        assert any(m.startswith("[CAT]") for m in log_manager.get_formatted_messages())

        stream = io.StringIO()
        TextRenderer(stream=stream, sleep=Mock()).replay(result, arena.stats)
        assert f"{result.winner.name} WINS!" in stream.getvalue()

    def test_same_seed_same_session(self, roster, event_manager):
        results = []
        for _ in range(2):
            arena = ArenaManager(roster, event_manager, NumpyRandomSource(77))
            arena.select_random()
            results.append(DataConverter.battle_result_to_dict(arena.start_battle()))
        assert results[0] == results[1]

    def test_every_pairing_resolves(self, roster):
        """Any two roster entries, in either order, fight a valid battle."""
        rng = NumpyRandomSource(5)
        entities = list(roster)
        arena = ArenaManager(roster, Mock(), rng)
        for first in entities:
            for second in entities:
                if first is second:
                    continue
                arena.select_fighters(first.id, second.id)
                result = arena.start_battle()
                assert 1 <= result.rounds_fought <= MAX_ROUNDS
                assert all(0 <= health <= 100 for health in result.final_health)
                assert result.winner is not result.loser
                assert result.health_of(result.winner) >= result.health_of(result.loser)

    def test_rematches_vary(self, roster, event_manager):
        arena = ArenaManager(roster, event_manager, NumpyRandomSource(3))
        arena.select_fighters(2, 5)
        outcomes = {arena.start_battle().final_health}
        for _ in range(20):
            outcomes.add(arena.rematch().final_health)
        assert len(outcomes) > 1
