"""
Tests for the command-line interface and settings.

These tests verify:
1. Each demo command succeeds and prints its output
2. Environment settings choose the product family
3. Flags take precedence over the environment
"""

import argparse

import pytest

from creational.cli.main import (
    cmd_all,
    cmd_characters,
    cmd_gui,
    create_parser,
    main,
)
from creational.config import CreationalSettings, get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate each test from the caller's environment and cached settings."""
    for name in ("PLATFORM", "DATABASE", "ARCHETYPE", "LOG_LEVEL"):
        monkeypatch.delenv(f"CREATIONAL_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# SETTINGS TESTS
# =============================================================================

class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self):
        """Defaults select MacOS, MySQL and the hero."""
        settings = CreationalSettings(_env_file=None)

        assert settings.platform == "macos"
        assert settings.database == "mysql"
        assert settings.archetype == "hero"
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch):
        """CREATIONAL_* variables override defaults."""
        monkeypatch.setenv("CREATIONAL_PLATFORM", "linux")
        monkeypatch.setenv("CREATIONAL_DATABASE", "oracle")

        settings = CreationalSettings(_env_file=None)

        assert settings.platform == "linux"
        assert settings.database == "oracle"


# =============================================================================
# CLI COMMAND TESTS
# =============================================================================

class TestCLICommands:
    """Test CLI commands."""

    @pytest.mark.parametrize("command, expected", [
        (["gui", "--platform", "windows"], "WindowsButton"),
        (["database", "--database", "postgres"], "PostgreSQL executing: SELECT * FROM some_table"),
        (["npc", "--seed", "1"], "NPC Link:"),
        (["characters", "--archetype", "rogue", "--seed", "2"], "Rogue "),
        (["shapes"], "Colliding basic collider..."),
    ])
    def test_demo_commands(self, capsys, command, expected):
        """Every demo command returns 0 and prints its output."""
        assert main(command) == 0

        assert expected in capsys.readouterr().out

    def test_gui_uses_environment(self, capsys, monkeypatch):
        """Without a flag the platform comes from the environment."""
        monkeypatch.setenv("CREATIONAL_PLATFORM", "linux")

        assert cmd_gui(argparse.Namespace()) == 0

        assert "LinuxButton" in capsys.readouterr().out

    def test_flag_beats_environment(self, capsys, monkeypatch):
        """A command-line flag wins over the environment."""
        monkeypatch.setenv("CREATIONAL_DATABASE", "oracle")

        assert main(["database", "--database", "mysql"]) == 0

        assert "MySQL executing" in capsys.readouterr().out

    def test_query_flag(self, capsys):
        """The database command runs the given query."""
        assert main(["database", "--query", "SELECT 1"]) == 0

        assert "MySQL executing: SELECT 1" in capsys.readouterr().out

    def test_shapes_bad_obround_still_succeeds(self, capsys):
        """A rejected obround is reported but not fatal."""
        assert main(["shapes", "--obround", "2", "9"]) == 0

        assert "Failed to create obround" in capsys.readouterr().err

    def test_unexpected_demo_error_returns_one(self, capsys):
        """An exception escaping a demo is reported and exits with 1."""
        assert main(["npc", "--seed", "-1"]) == 1

        out = capsys.readouterr().out
        assert "ERROR: Demo failed" in out
        assert "Reason:" in out

    def test_unknown_archetype_fails(self, capsys):
        """An unknown archetype returns exit code 1."""
        args = argparse.Namespace(archetype="bard", seed=None)

        assert cmd_characters(args) == 1
        assert "ERROR:" in capsys.readouterr().out

    def test_all_runs_every_demo(self, capsys):
        """The all command runs each demo once."""
        assert cmd_all(argparse.Namespace()) == 0

        out = capsys.readouterr().out
        assert "MacOSButton" in out
        assert "MySQL executing" in out
        assert "NPC Link:" in out
        assert "Hero " in out
        assert "Drawing a basic sprite..." in out


# =============================================================================
# PARSER TESTS
# =============================================================================

class TestParser:
    """Test argument parsing."""

    def test_no_command_prints_help(self, capsys):
        """Without a command the help text is shown."""
        assert main([]) == 0

        assert "usage: creational" in capsys.readouterr().out

    def test_obround_takes_two_floats(self):
        """--obround parses LENGTH and HEIGHT."""
        args = create_parser().parse_args(["shapes", "--obround", "9", "2"])

        assert args.obround == [9.0, 2.0]

    def test_verbose_flag(self):
        """-v is a global flag."""
        args = create_parser().parse_args(["-v", "gui"])

        assert args.verbose is True
