import io

import pytest

from marsquest.board import Board
from marsquest.console import Console
from marsquest.session import (
    SWITCH_BACK,
    SWITCH_EAST,
    SWITCH_WEST,
    Session,
)


def make_session(inputs=(), started=True):
    board = Board()
    if started:
        board.labinit()
    stream = io.StringIO()
    return Session(board, Console(stream), inputs), stream


def test_say_writes_text():
    session, stream = make_session()
    session.say("hello\n")
    assert stream.getvalue() == "hello\n"


def test_say_hold_consumes_two_timer_events():
    session, stream = make_session()
    session.say_hold("wait\n")
    assert stream.getvalue() == "wait\n"
    assert session.board.timer_event is False
    assert session.board.timeout_count == 0


def test_say_hold_uses_pending_event():
    session, _ = make_session()
    for _ in range(10):
        session.board.tick()
    session.say_hold("x")
    assert session.board.timer_event is False


def test_say_hold_without_timer_raises():
    session, stream = make_session(started=False)
    with pytest.raises(RuntimeError):
        session.say_hold("never")
    assert stream.getvalue() == ""


def test_read_switches_returns_current_then_advances():
    session, _ = make_session([SWITCH_WEST])
    session.board.set_switches(SWITCH_EAST)
    assert session.read_switches() == SWITCH_EAST
    assert session.read_switches() == SWITCH_WEST
    with pytest.raises(EOFError):
        session.read_switches()


def test_yes_no_yes():
    session, stream = make_session([SWITCH_EAST])
    session.board.set_switches(0)
    assert session.wait_for_yes_no() is True
    assert "Press EAST for Yes, WEST for No.\n" in stream.getvalue()


def test_yes_no_no_after_idle_input():
    session, _ = make_session([0, SWITCH_BACK, SWITCH_WEST])
    session.board.set_switches(0)
    assert session.wait_for_yes_no() is False
    assert session.board.get_sw() == SWITCH_WEST


def test_yes_no_current_state_answers_immediately():
    session, _ = make_session([])
    session.board.set_switches(SWITCH_WEST)
    assert session.wait_for_yes_no() is False


def test_yes_no_exhausted_input():
    session, _ = make_session([0])
    session.board.set_switches(0)
    with pytest.raises(EOFError):
        session.wait_for_yes_no()


def test_wait_for_exit_default_message():
    session, stream = make_session([0, SWITCH_BACK])
    session.board.set_switches(0)
    session.wait_for_exit()
    assert stream.getvalue() == "Press BACK to exit.\nExiting...\n"


def test_wait_for_exit_custom_message():
    session, stream = make_session([SWITCH_BACK])
    session.board.set_switches(0)
    session.wait_for_exit("Leave now.\n")
    assert stream.getvalue().startswith("Leave now.\n")
    assert stream.getvalue().endswith("Exiting...\n")


def test_switch_changes_during_wait_raise_event():
    session, _ = make_session([SWITCH_EAST])
    session.board.set_switches(0)
    session.board.take_switch_event()
    session.wait_for_yes_no()
    assert session.board.take_switch_event() is True


def test_running_flag_starts_true():
    session, _ = make_session()
    session.running = False
    assert session.running is False
    fresh, _ = make_session()
    assert fresh.running is True