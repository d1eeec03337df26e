import io
import os
import sys
import termios

import pytest

from consolekit.cli import (
    format_mouse_event,
    handle_input,
    main,
    reset_terminal_mode,
    set_raw_mode,
)
from consolekit.events import KeyEventData, Modifier, MouseButton, MouseEventData, MouseEventType
from consolekit.keyboard import format_raw_bytes
from consolekit.mouse import parse_mouse_event


@pytest.fixture
def pty_pair():
    master, slave = os.openpty()
    yield master, slave
    os.close(master)
    os.close(slave)


@pytest.fixture
def pipe_pair():
    read_end, write_end = os.pipe()
    yield read_end, write_end
    os.close(read_end)
    os.close(write_end)


def test_format_mouse_event_pinned():
    event = MouseEventData(MouseEventType.PRESS, MouseButton.LEFT, 10, 20, Modifier.NONE)
    assert format_mouse_event(event) == "MOUSE: type=0 button=0 x=10 y=20 mods=0"


def test_format_mouse_event_carries_coordinates():
    event = parse_mouse_event(b"\x1b[<35;42;17M")
    line = format_mouse_event(event)
    assert line.startswith("MOUSE: ")
    assert "x=42" in line
    assert "y=17" in line


def test_handle_input_mouse():
    out = io.StringIO()
    event = handle_input(b"\x1b[<2;30;40m", out)
    assert event == parse_mouse_event(b"\x1b[<2;30;40m")
    assert out.getvalue() == format_mouse_event(event) + "\n"


def test_handle_input_keyboard():
    out = io.StringIO()
    data = b"\x1b[1A"
    event = handle_input(data, out)
    assert event == KeyEventData()
    assert out.getvalue() == format_raw_bytes(data) + "\n"


def test_handle_input_plain_text_ignored():
    out = io.StringIO()
    assert handle_input(b"abc", out) is None
    assert out.getvalue() == ""


def test_set_raw_mode_clears_echo_and_canonical(pty_pair):
    _, slave = pty_pair
    set_raw_mode(slave)
    attrs = termios.tcgetattr(slave)
    assert attrs[3] & termios.ECHO == 0
    assert attrs[3] & termios.ICANON == 0
    assert attrs[6][termios.VMIN] == 1
    assert attrs[6][termios.VTIME] == 0


def test_reset_terminal_mode_restores_flags(pty_pair):
    _, slave = pty_pair
    set_raw_mode(slave)
    reset_terminal_mode(slave)
    attrs = termios.tcgetattr(slave)
    assert attrs[3] & termios.ECHO == termios.ECHO
    assert attrs[3] & termios.ICANON == termios.ICANON


def test_set_raw_mode_on_pipe_raises(pipe_pair):
    read_end, _ = pipe_pair
    with pytest.raises(termios.error):
        set_raw_mode(read_end)


def test_reset_terminal_mode_on_pipe_raises(pipe_pair):
    read_end, _ = pipe_pair
    with pytest.raises(termios.error):
        reset_terminal_mode(read_end)


def test_main_fails_when_stdin_is_not_a_terminal(pipe_pair, monkeypatch, capsys):
    read_end, _ = pipe_pair
    stdin = os.fdopen(os.dup(read_end), "rb", closefd=True)
    monkeypatch.setattr(sys, "stdin", stdin)
    try:
        status = main([])
    finally:
        stdin.close()
    assert status == 1
    assert "terminal setup failed" in capsys.readouterr().err