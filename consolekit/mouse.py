"""SGR mouse reporting: switching it on and off, and decoding its reports."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from consolekit.events import Modifier, MouseButton, MouseEventData, MouseEventType

ENABLE_SEQUENCE = "\033[?1006h\033[?1003h"
DISABLE_SEQUENCE = "\033[?1003l"

_PREFIX = b"\x1b[<"
_NUMBER = re.compile(rb"[0-9]{0,15}")
_BUTTONS = (MouseButton.LEFT, MouseButton.MIDDLE, MouseButton.RIGHT, MouseButton.OTHER)
_MODIFIER_BITS = ((4, Modifier.SHIFT), (8, Modifier.ALT), (16, Modifier.CTRL))


def _write(sequence: str, stream: TextIO | None) -> None:
    out = sys.stdout if stream is None else stream
    out.write(sequence)
    out.flush()


def enable_mouse(stream: TextIO | None = None) -> None:
    """Ask the terminal for SGR mouse reports of all motion and button events."""
    _write(ENABLE_SEQUENCE, stream)


def disable_mouse(stream: TextIO | None = None) -> None:
    """Stop mouse motion reporting."""
    _write(DISABLE_SEQUENCE, stream)


def is_mouse_event(data: bytes) -> bool:
    """Tell whether the bytes start an SGR mouse report."""
    return len(data) > len(_PREFIX) and bytes(data[: len(_PREFIX)]) == _PREFIX


def _read_number(data: bytes, pos: int) -> tuple[int, int]:
    match = _NUMBER.match(data, pos)
    digits = match.group()
    return (int(digits) if digits else 0), match.end()


def parse_mouse_event(data: bytes) -> MouseEventData:
    """Decode an SGR mouse report such as ``ESC[<0;10;20M``.

    Input that is not a complete report gives an event of unknown type.
    """
    event = MouseEventData()
    data = bytes(data)
    if not is_mouse_event(data):
        return event

    button_code, pos = _read_number(data, len(_PREFIX))
    if data[pos : pos + 1] != b";":
        return event
    x, pos = _read_number(data, pos + 1)
    if data[pos : pos + 1] != b";":
        return event
    y, pos = _read_number(data, pos + 1)
    final = data[pos : pos + 1]
    if final not in (b"M", b"m"):
        return event

    button = button_code & 3
    if button_code & 64:
        event.event_type = MouseEventType.WHEEL_UP if button == 0 else MouseEventType.WHEEL_DOWN
        event.button = MouseButton.NONE
    elif button_code & 32:
        event.event_type = MouseEventType.MOTION
        event.button = MouseButton.NONE if button == 3 else _BUTTONS[button]
    else:
        event.event_type = MouseEventType.PRESS if final == b"M" else MouseEventType.RELEASE
        event.button = _BUTTONS[button]

    event.x = x
    event.y = y

    modifiers = Modifier.NONE
    for bit, flag in _MODIFIER_BITS:
        if button_code & bit:
            modifiers |= flag
    event.modifiers = modifiers
    return event