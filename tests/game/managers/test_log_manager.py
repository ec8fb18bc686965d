"""
Unit tests for the LogManager.

Tests event-driven log collection, category and level filtering,
the bounded buffer and saving logs to disk.
"""

from dinoarena.core.data.game_enums import LogCategory, LogLevel
from dinoarena.core.events.events import DebugMessage, LogMessage, LogSaveRequested
from dinoarena.game.managers.log_manager import LogEntry, LogManager


class TestLogEntry:
    """Test log entry formatting."""

    def test_format_with_category(self):
        entry = LogEntry("Round 1", LogCategory.BATTLE)
        assert entry.format() == "[BTL] Round 1"

    def test_format_plain(self):
        entry = LogEntry("hello", LogCategory.SYSTEM)
        assert entry.format(include_category=False) == "hello"

    def test_format_timestamp(self):
        entry = LogEntry("hello", LogCategory.SYSTEM)
        assert entry.format(include_timestamp=True).startswith(f"[{entry.timestamp.strftime('%H:%M:%S')}]")


class TestLogManager:
    """Test LogManager behaviour."""

    def test_log_message_events_collected(self, event_manager, log_manager):
        event_manager.publish(LogMessage(turn=0, message="Fight!", category="BATTLE",
                                         level=LogLevel.INFO, source="test"))
        event_manager.process_events()
        assert log_manager.get_formatted_messages() == ["[BTL] Fight!"]

    def test_unknown_category_falls_back_to_system(self, event_manager, log_manager):
        event_manager.publish_immediate(LogMessage(turn=0, message="odd", category="WEIRD",
                                                   level=LogLevel.INFO, source="test"))
        assert log_manager.get_messages()[0].category is LogCategory.SYSTEM

    def test_debug_messages_hidden_by_default(self, event_manager, log_manager):
        event_manager.publish_immediate(DebugMessage(turn=0, message="details", source="Resolver"))
        assert log_manager.get_messages() == []

        log_manager.toggle_debug()
        assert log_manager.is_debug_enabled()
        assert log_manager.get_formatted_messages() == ["[DBG] [Resolver] details"]

        log_manager.toggle_debug()
        assert not log_manager.is_debug_enabled()

    def test_level_filter(self, log_manager):
        log_manager.system("info")
        log_manager.warning("careful")
        log_manager.error("broken")
        log_manager.set_log_level(LogLevel.WARNING)
        assert [m.text for m in log_manager.get_messages()] == ["careful", "broken"]

    def test_category_filter(self, log_manager):
        log_manager.battle("hit")
        log_manager.catalog("loaded")
        assert [m.text for m in log_manager.get_messages(categories={LogCategory.CATALOG})] == ["loaded"]

        log_manager.disable_category(LogCategory.BATTLE)
        assert [m.text for m in log_manager.get_messages()] == ["loaded"]
        log_manager.enable_category(LogCategory.BATTLE)
        assert len(log_manager.get_messages()) == 2

    def test_count_returns_most_recent(self, log_manager):
        for i in range(5):
            log_manager.system(f"m{i}")
        assert [m.text for m in log_manager.get_messages(count=2)] == ["m3", "m4"]

    def test_buffer_is_bounded(self, event_manager):
        manager = LogManager(event_manager, max_messages=3)
        for i in range(5):
            manager.system(f"m{i}")
        assert [m.text for m in manager.get_messages()] == ["m2", "m3", "m4"]

    def test_clear(self, log_manager):
        log_manager.system("x")
        log_manager.clear()
        assert log_manager.get_messages() == []

    def test_save_log_to_file(self, log_manager, tmp_path):
        log_manager.battle("Round 1: Alpha stomps the ground")
        path = log_manager.save_log_to_file(str(tmp_path / "logs" / "battle.log"))

        assert path == str(tmp_path / "logs" / "battle.log")
        content = (tmp_path / "logs" / "battle.log").read_text(encoding="utf-8")
        assert "[BATTLE] Round 1: Alpha stomps the ground" in content
        assert log_manager.get_messages()[-1].text.startswith("Arena log saved to")

    def test_save_default_path(self, event_manager, tmp_path):
        manager = LogManager(event_manager, log_dir=str(tmp_path))
        path = manager.save_log_to_file()
        assert path.startswith(str(tmp_path))
        assert path.endswith(".log")

    def test_save_request_event(self, event_manager, log_manager, tmp_path):
        target = tmp_path / "requested.log"
        event_manager.publish_immediate(LogSaveRequested(turn=0, file_path=str(target)))
        assert target.exists()

    def test_save_failure_returns_none(self, log_manager, tmp_path):
        # A directory cannot be opened as a file
        assert log_manager.save_log_to_file(str(tmp_path)) is None
        assert log_manager.get_messages()[-1].category is LogCategory.ERROR
