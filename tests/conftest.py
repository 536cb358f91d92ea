"""
Shared fixtures: scripted input, a fixed-secret engine and a captured console.
"""

import io
import os

# Settings are read at import time, so pin them before the package loads
os.environ["LOG_TO_FILE"] = "False"
os.environ["EASY_DIGITS"] = "3"
os.environ["NORMAL_DIGITS"] = "4"
os.environ["HARD_DIGITS"] = "5"

import pytest
from rich.console import Console

from baseball.models.user import User
from baseball.services.guess_engine import GuessEngine
from baseball.services.user_registry import UserRegistry
from baseball.session import GameSession
from baseball.utils.console import GameConsole


class ScriptedInput:
    """Input source that replays a list of lines, then behaves like a closed stdin."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def read_line(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError("no more scripted input")
        return self.lines.pop(0)


class FixedSecretEngine(GuessEngine):
    """Engine whose secret is known in advance."""

    def __init__(self, length, secret):
        super().__init__(length)
        self.fixed_secret = secret

    def generate_secret(self):
        self.secret = self.fixed_secret
        return self.secret


def fixed_engine_factory(secret):
    return lambda length: FixedSecretEngine(length, secret)


@pytest.fixture
def display():
    console = Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)
    return GameConsole(console)


def output_of(display):
    return display.console.file.getvalue()


@pytest.fixture
def registry():
    return UserRegistry()


@pytest.fixture
def user(registry):
    return registry.login("alice")["user"]


@pytest.fixture
def make_session(user, registry, display):
    def _make(lines, secret="123", initial_state=None, session_user=None):
        return GameSession(
            session_user or user,
            registry,
            input_source=ScriptedInput(lines),
            display=display,
            engine_factory=fixed_engine_factory(secret),
            initial_state=initial_state
        )
    return _make
