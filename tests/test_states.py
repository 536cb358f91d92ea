"""
Testing each game state's handling and transitions.
"""

import logging

import pytest

from baseball.config.game_settings import DifficultyMode, INVALID_OPTION_MESSAGE
from baseball.exceptions import GameInitializationError, InvalidOptionError
from baseball.states import (
    HistoryState,
    LogoutState,
    MenuState,
    PlayState,
    RankingState,
    StateKind,
    parse_option,
)
from conftest import output_of


@pytest.mark.parametrize("raw, expected", [
    ("1", (1, "")),
    (" 4 ", (4, "")),
    ("0", (None, INVALID_OPTION_MESSAGE)),
    ("5", (None, INVALID_OPTION_MESSAGE)),
    ("abc", (None, INVALID_OPTION_MESSAGE)),
])
def test_parse_option(raw, expected):
    assert parse_option(raw, 1, 4) == expected


def test_parse_option_blank():
    option, error = parse_option("", 1, 4)
    assert option is None
    assert error


@pytest.mark.parametrize("line", ["0", "5", "abc", ""])
def test_menu_rejects_invalid_option_and_stays(make_session, display, line):
    session = make_session([line])
    state = session.step()

    assert state.kind is StateKind.MENU
    assert isinstance(state, MenuState)
    assert "!" in output_of(display)


@pytest.mark.parametrize("line, expected", [
    ("2", HistoryState),
    ("3", RankingState),
    ("4", LogoutState),
])
def test_menu_transitions(make_session, line, expected):
    session = make_session([line])
    assert isinstance(session.step(), expected)


def test_menu_play_reprompts_until_difficulty_is_valid(make_session):
    session = make_session(["1", "0", "x", "", "2"])
    state = session.step()

    assert isinstance(state, PlayState)
    assert state.difficulty is DifficultyMode.NORMAL
    # main menu prompt + four difficulty prompts
    assert len(session.input_source.prompts) == 5


def test_play_counts_every_line_until_exact_match(make_session, user, display):
    session = make_session(["45", "321", "123"], initial_state=PlayState(DifficultyMode.EASY))
    play_state = session.state
    next_state = session.step()

    assert isinstance(next_state, MenuState)
    record = play_state.record
    assert record.attempt_count == 3
    assert record.finished is True
    assert record.finished_at is not None
    assert user.history == [record]
    assert record.sealed

    output = output_of(display)
    assert "exactly 3 digits" in output
    assert "1 strike(s), 2 ball(s)" in output
    assert "3 attempt(s)" in output


def test_invalid_guess_counts_as_attempt_without_finishing(make_session, user):
    session = make_session(["45"], initial_state=PlayState(DifficultyMode.EASY))
    play_state = session.state

    # input runs out while the game is still unsolved
    with pytest.raises(EOFError):
        session.step()

    assert play_state.record.attempt_count == 1
    assert play_state.record.finished is False
    assert user.history == []


def test_finished_on_exactly_the_matching_submission(make_session):
    session = make_session(["456", "789", "123", "999"], initial_state=PlayState(DifficultyMode.EASY))
    play_state = session.state
    session.step()

    assert play_state.record.attempt_count == 3
    # the fourth line is never read
    assert session.input_source.lines == ["999"]


def test_play_init_failure_returns_to_menu_without_record(user, registry, display):
    from baseball.session import GameSession
    from conftest import ScriptedInput

    def broken_factory(length):
        raise GameInitializationError("cannot build engine")

    session = GameSession(
        user, registry, ScriptedInput([]), display,
        engine_factory=broken_factory,
        initial_state=PlayState(DifficultyMode.HARD)
    )
    next_state = session.step()

    assert isinstance(next_state, MenuState)
    assert user.history == []
    assert "cannot build engine" in output_of(display)


def test_play_with_impossible_length_returns_to_menu(user, registry, display):
    from baseball.services.guess_engine import GuessEngine
    from baseball.session import GameSession
    from conftest import ScriptedInput

    session = GameSession(
        user, registry, ScriptedInput([]), display,
        engine_factory=lambda length: GuessEngine(length + 10),
        initial_state=PlayState(DifficultyMode.EASY)
    )

    assert isinstance(session.step(), MenuState)
    assert user.history == []


def test_each_play_builds_a_fresh_engine(make_session):
    first = PlayState(DifficultyMode.EASY)
    second = PlayState(DifficultyMode.EASY)
    make_session(["123"], initial_state=first).step()
    make_session(["123"], initial_state=second).step()

    assert first.engine is not second.engine


def test_history_shows_records_and_returns_to_menu(make_session, display):
    session = make_session(["123"], initial_state=PlayState(DifficultyMode.EASY))
    session.step()

    session.state = HistoryState()
    assert isinstance(session.step(), MenuState)
    output = output_of(display)
    assert "#1" in output
    assert "Easy" in output


def test_empty_history(make_session, display):
    session = make_session([], initial_state=HistoryState())
    assert isinstance(session.step(), MenuState)
    assert "No games played yet" in output_of(display)


def test_ranking_covers_all_registered_users(make_session, registry, display):
    bob = registry.login("bob")["user"]
    make_session(["321", "123"], initial_state=PlayState(DifficultyMode.EASY), session_user=bob).step()
    make_session(["123"], initial_state=PlayState(DifficultyMode.EASY)).step()

    session = make_session([], initial_state=RankingState())
    assert isinstance(session.step(), MenuState)

    output = output_of(display)
    assert "alice" in output
    assert "bob" in output
    assert [entry.username for entry in registry.ranking()] == ["alice", "bob"]


def test_logout_ends_session(make_session, display):
    session = make_session([], initial_state=LogoutState())
    state = session.step()

    assert state.kind is StateKind.LOGOUT
    assert session.ended is True
    assert "Goodbye, alice" in output_of(display)


class InterruptedInput:
    """Replays lines, then raises KeyboardInterrupt like Ctrl-C at the prompt."""

    def __init__(self, lines):
        self.lines = list(lines)

    def read_line(self, prompt=""):
        if not self.lines:
            raise KeyboardInterrupt
        return self.lines.pop(0)


def test_interrupted_prompt_does_not_count_an_attempt(make_session, user):
    session = make_session([], initial_state=PlayState(DifficultyMode.EASY))
    session.input_source = InterruptedInput(["456", "12", "789"])
    play_state = session.state

    with pytest.raises(KeyboardInterrupt):
        session.step()

    # three lines submitted, the fourth prompt was interrupted
    assert play_state.record.attempt_count == 3
    assert play_state.record.finished is False
    assert user.history == []


def test_play_init_failure_logs_game_aborted(user, registry, display, caplog):
    from baseball.session import GameSession
    from conftest import ScriptedInput

    def broken_factory(length):
        raise GameInitializationError("cannot build engine")

    session = GameSession(
        user, registry, ScriptedInput([]), display,
        engine_factory=broken_factory,
        initial_state=PlayState(DifficultyMode.HARD)
    )
    with caplog.at_level(logging.INFO, logger="baseball_game"):
        session.step()

    assert '"action": "game_aborted"' in caplog.text
    assert '"event_type": "GAME_EVENT"' in caplog.text


def test_difficulty_missing_from_table_is_reprompted(make_session, display, monkeypatch):
    lookup = DifficultyMode.find_by_option

    def table_with_gap(option):
        if option == 2:
            raise InvalidOptionError(option)
        return lookup(option)

    monkeypatch.setattr(DifficultyMode, "find_by_option", table_with_gap)
    session = make_session(["1", "2", "3"])
    state = session.step()

    assert isinstance(state, PlayState)
    assert state.difficulty is DifficultyMode.HARD
    assert INVALID_OPTION_MESSAGE in output_of(display)
