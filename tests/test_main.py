"""Tests for the command-line entry point."""

from __future__ import annotations

import json
import logging

import pytest

from core.clock import ManualClock
from loggers.formatters import ConsoleFormatter
from main import main


@pytest.fixture
def cli(tmp_path, monkeypatch, t0):
    monkeypatch.setenv("PET_LOG_DIR", str(tmp_path / "logs"))
    clock = ManualClock(t0)
    state_dir = str(tmp_path / "state")

    def invoke(*args):
        return main(["--state-dir", state_dir, *args], clock=clock)

    invoke.clock = clock
    return invoke


class TestCli:
    def test_status_creates_and_saves_pet(self, cli, capsys, tmp_path):
        assert cli("status") == 0
        out = capsys.readouterr().out
        assert "hunger" in out
        assert "100.00/100" in out
        assert (tmp_path / "state" / "core_state.json").exists()

    def test_decay_between_runs(self, cli, capsys):
        cli("status")
        cli.clock.advance(hours=2)
        capsys.readouterr()
        cli("status")
        assert "90.00/100" in capsys.readouterr().out

    def test_mutation_is_persisted(self, cli, capsys):
        assert cli("decrease", "hunger", "30") == 0
        capsys.readouterr()
        cli("status")
        assert "70.00/100" in capsys.readouterr().out

    def test_unknown_need(self, cli, capsys):
        assert cli("increase", "thirst", "5") == 1
        assert "thirst" in capsys.readouterr().err

    def test_unusable_need(self, cli, capsys):
        cli("set", "energy", "5")
        assert cli("increase", "fun", "10") == 1
        assert "not available" in capsys.readouterr().err

    def test_forecast(self, cli, capsys):
        assert cli("forecast") == 0
        lines = [l for l in capsys.readouterr().out.splitlines() if l.strip()]
        assert "fun" in lines[0]
        assert "2024-03-02 00:00" in lines[0]

    def test_reset(self, cli, capsys, tmp_path):
        cli("status")
        assert cli("reset") == 0
        assert not (tmp_path / "state" / "core_state.json").exists()

    def test_usage_condition_sees_decay_since_last_run(self, cli, capsys):
        assert cli("set", "energy", "25") == 0
        cli.clock.advance(hours=10)
        capsys.readouterr()
        assert cli("increase", "fun", "10") == 1
        assert "not available" in capsys.readouterr().err

    def test_unusable_need_in_save_falls_back_to_backup(self, cli, capsys, tmp_path):
        cli("set", "energy", "42")
        state_file = tmp_path / "state" / "core_state.json"
        data = json.loads(state_file.read_text(encoding="utf-8"))
        data["needs"]["hunger"]["updated_at"] = "yesterday"
        state_file.write_text(json.dumps(data), encoding="utf-8")
        capsys.readouterr()

        assert cli("status") == 0
        assert "42.00/100" in capsys.readouterr().out


@pytest.fixture
def restore_handlers():
    loggers = [logging.getLogger(name) for name in ("pet.needs", "pet.system", "pet.events")]
    before = {logger.name: list(logger.handlers) for logger in loggers}
    yield
    for logger in loggers:
        for handler in logger.handlers[:]:
            if handler not in before[logger.name]:
                logger.removeHandler(handler)


class TestVerbose:
    def test_verbose_adds_console_handler(self, cli, restore_handlers):
        assert cli("--verbose", "status") == 0
        for name in ("pet.needs", "pet.system", "pet.events"):
            console = [h for h in logging.getLogger(name).handlers if type(h) is logging.StreamHandler]
            assert len(console) == 1
            assert isinstance(console[0].formatter, ConsoleFormatter)
            assert console[0].level == logging.WARNING

    def test_verbose_twice_does_not_duplicate(self, cli, restore_handlers):
        cli("--verbose", "status")
        cli("--verbose", "status")
        console = [h for h in logging.getLogger("pet.needs").handlers if type(h) is logging.StreamHandler]
        assert len(console) == 1

    def test_console_formatter_marks_warnings(self):
        formatter = ConsoleFormatter()
        warning = logging.LogRecord("pet.needs", logging.WARNING, __file__, 1, "low energy", None, None)
        info = logging.LogRecord("pet.needs", logging.INFO, __file__, 1, "fed", None, None)
        assert formatter.format(warning) == "! low energy"
        assert formatter.format(info) == "fed"
