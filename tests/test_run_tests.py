"""
Tests for the test runner's command construction.
"""

import sys

import pytest

import run_tests


@pytest.fixture
def commands(monkeypatch):
    """Capture commands instead of running them."""
    captured = []

    def fake_run(cmd, description):
        captured.append(cmd)
        return True

    monkeypatch.setattr(run_tests, "run_command", fake_run)
    return captured


class TestRunTests:
    """Test how each mode builds its pytest invocation."""

    @pytest.mark.parametrize("name,expected", [
        ("combat_resolver", "test_combat_resolver.py"),
        ("test_combat_resolver", "test_combat_resolver.py"),
        ("test_combat_resolver.py", "test_combat_resolver.py"),
    ])
    def test_normalize_test_name(self, name, expected):
        assert run_tests.normalize_test_name(name) == expected

    def test_unit_tests_skip_suite_directories(self, commands):
        run_tests.run_unit_tests(verbose=False)
        cmd = commands[0]
        assert cmd[:3] == [sys.executable, "-m", "pytest"]
        for name in ("integration", "edge_cases", "performance"):
            assert any(arg.startswith("--ignore=") and arg.endswith(name) for arg in cmd)
        assert "-v" not in cmd

    def test_performance_suite_runs_benchmarks_only(self, commands):
        run_tests.run_suite("performance")
        assert "--benchmark-only" in commands[0]
        assert commands[0][-1] == "-v"

    def test_fast_mode_deselects_benchmarks(self, commands):
        run_tests.run_fast_tests(verbose=False)
        assert commands[0][-3:] == ["-m", "not performance", "--benchmark-disable"]

    def test_missing_test_file(self, commands, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        assert not run_tests.run_specific_test("test_nothing_here.py")
        assert commands == []
