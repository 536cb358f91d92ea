"""
Testing the login loop and configuration selection.
"""

import logging

import pytest
from rich.console import Console

import main
from baseball.config import DevelopmentConfig, ProductionConfig, TestingConfig, get_config
from baseball.services.user_registry import UserRegistry
from conftest import ScriptedInput, output_of
from main import login_loop


def test_login_logout_then_quit(display):
    registry = UserRegistry()
    source = ScriptedInput(["Dana", "4", "dana", "2", "4", "q"])
    login_loop(registry, source, display)

    assert source.lines == []
    assert [user.username for user in registry.all_users()] == ["Dana"]
    output = output_of(display)
    assert "Welcome, Dana!" in output
    assert "Welcome back, Dana!" in output


def test_blank_name_quits_immediately(display):
    registry = UserRegistry()
    login_loop(registry, ScriptedInput([""]), display)
    assert registry.all_users() == []


def test_too_long_name_is_reported(display):
    registry = UserRegistry(max_username_length=3)
    login_loop(registry, ScriptedInput(["abcdef", "q"]), display)

    assert registry.all_users() == []
    assert "at most 3 characters" in output_of(display)


def test_get_config(monkeypatch):
    assert get_config("development") is DevelopmentConfig
    assert get_config("TESTING") is TestingConfig
    assert get_config("unknown") is ProductionConfig

    monkeypatch.setenv("BASEBALL_ENV", "testing")
    assert get_config() is TestingConfig


@pytest.mark.parametrize("interrupt", [EOFError, KeyboardInterrupt])
def test_closed_input_ends_program_cleanly(monkeypatch, capsys, interrupt):
    def closed_input(self, prompt=""):
        raise interrupt()

    monkeypatch.setattr(Console, "input", closed_input)

    assert main.main() == 0
    assert "Bye." in capsys.readouterr().out


def test_broken_difficulty_table_only_warns(monkeypatch, caplog):
    def broken_table():
        raise ValueError("Difficulty 'Hard' has secret length 12, expected 1..10")

    monkeypatch.setattr(main, "validate_difficulty_integrity", broken_table)
    monkeypatch.setattr(Console, "input", lambda self, prompt="": "q")

    with caplog.at_level(logging.WARNING, logger="baseball_game"):
        assert main.main() == 0
    assert "Difficulty configuration problem" in caplog.text
