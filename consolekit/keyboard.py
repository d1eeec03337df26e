"""Kitty keyboard protocol: switching it on and off, and inspecting its reports."""

from __future__ import annotations

import sys
from typing import TextIO

from consolekit.events import KeyEventData

ENABLE_SEQUENCE = "\033[>8u"
DISABLE_SEQUENCE = "\033[<u"

_CSI = b"\x1b["


def _write(sequence: str, stream: TextIO | None) -> None:
    out = sys.stdout if stream is None else stream
    out.write(sequence)
    out.flush()


def enable_keyboard(stream: TextIO | None = None) -> None:
    """Push the keyboard protocol mode that reports all keys as escape codes."""
    _write(ENABLE_SEQUENCE, stream)


def disable_keyboard(stream: TextIO | None = None) -> None:
    """Pop the keyboard protocol mode."""
    _write(DISABLE_SEQUENCE, stream)


def is_keyboard_event(data: bytes) -> bool:
    """Tell whether the bytes start a control sequence."""
    return bytes(data[:2]) == _CSI


def format_raw_bytes(data: bytes) -> str:
    """Render a sequence with its leading byte shown as ``ESC``."""
    data = bytes(data)
    if not data:
        return ""
    return "ESC" + data[1:].decode("latin-1")


def parse_keyboard_event(data: bytes, stream: TextIO | None = None) -> KeyEventData:
    """Report the raw sequence and return a press of an unknown key."""
    out = sys.stdout if stream is None else stream
    out.write(format_raw_bytes(data) + "\n")
    out.flush()
    return KeyEventData()