import io

import pytest

from consolekit.events import KeyCode, KeyEventData, KeyEventType, Modifier
from consolekit.keyboard import (
    disable_keyboard,
    enable_keyboard,
    format_raw_bytes,
    is_keyboard_event,
    parse_keyboard_event,
)


def test_enable_keyboard_writes_sequence():
    out = io.StringIO()
    enable_keyboard(out)
    assert out.getvalue() == "\033[>8u"


def test_disable_keyboard_writes_sequence():
    out = io.StringIO()
    disable_keyboard(out)
    assert out.getvalue() == "\033[<u"


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x1b[", True),
        (b"\x1b[97u", True),
        (b"\x1b[<0;1;1M", True),
        (b"\x1b", False),
        (b"a[", False),
        (b"\x1bO", False),
        (b"", False),
    ],
)
def test_is_keyboard_event(data, expected):
    assert is_keyboard_event(data) is expected


@pytest.mark.parametrize("tail", [b"[97u", b"[1A", b"[15~", b"[57442u"])
def test_format_raw_bytes_replaces_first_byte(tail):
    assert format_raw_bytes(b"\x1b" + tail) == "ESC" + tail.decode()


def test_format_raw_bytes_first_byte_always_esc():
    assert format_raw_bytes(b"x") == "ESC"


def test_format_raw_bytes_empty():
    assert format_raw_bytes(b"") == ""


def test_parse_keyboard_event_returns_unknown_press():
    out = io.StringIO()
    event = parse_keyboard_event(b"\x1b[97u", out)
    assert event == KeyEventData()
    assert event.event_type is KeyEventType.PRESS
    assert event.key_code is KeyCode.UNKNOWN
    assert event.modifiers == Modifier.NONE
    assert event.utf8 == ""


def test_parse_keyboard_event_reports_raw_bytes():
    out = io.StringIO()
    data = b"\x1b[1;5A"
    parse_keyboard_event(data, out)
    assert out.getvalue() == format_raw_bytes(data) + "\n"