"""Command that puts the terminal in raw mode and prints the input events it sees."""

from __future__ import annotations

import argparse
import os
import select
import sys
import termios
from typing import TextIO

from consolekit.events import KeyEventData, MouseEventData
from consolekit.keyboard import (
    disable_keyboard,
    enable_keyboard,
    is_keyboard_event,
    parse_keyboard_event,
)
from consolekit.mouse import disable_mouse, enable_mouse, is_mouse_event, parse_mouse_event

_POLL_INTERVAL = 0.001
_READ_SIZE = 256
_LFLAG = 3
_CC = 6


def _resolve_fd(fd: int | None) -> int:
    return sys.stdin.fileno() if fd is None else fd


def set_raw_mode(fd: int | None = None) -> None:
    """Turn off echo and line buffering on the terminal.

    Raises ``termios.error`` if the descriptor is not a terminal.
    """
    fd = _resolve_fd(fd)
    attrs = termios.tcgetattr(fd)
    attrs[_LFLAG] &= ~(termios.ECHO | termios.ICANON)
    attrs[_CC][termios.VMIN] = 1
    attrs[_CC][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, attrs)


def reset_terminal_mode(fd: int | None = None) -> None:
    """Turn echo and line buffering back on."""
    fd = _resolve_fd(fd)
    attrs = termios.tcgetattr(fd)
    attrs[_LFLAG] |= termios.ECHO | termios.ICANON
    termios.tcsetattr(fd, termios.TCSANOW, attrs)


def format_mouse_event(event: MouseEventData) -> str:
    """Render a mouse event as one line of numeric fields."""
    return (
        f"MOUSE: type={int(event.event_type)} button={int(event.button)} "
        f"x={event.x} y={event.y} mods={int(event.modifiers)}"
    )


def handle_input(
    data: bytes, stream: TextIO | None = None
) -> MouseEventData | KeyEventData | None:
    """Decode one chunk of input, report it, and return the event it held."""
    out = sys.stdout if stream is None else stream
    if is_mouse_event(data):
        event = parse_mouse_event(data)
        out.write(format_mouse_event(event) + "\n")
        out.flush()
        return event
    if is_keyboard_event(data):
        return parse_keyboard_event(data, out)
    return None


def _run(fd: int, stream: TextIO) -> None:
    while True:
        try:
            ready, _, _ = select.select([fd], [], [], _POLL_INTERVAL)
        except OSError as exc:
            print(f"select: {exc}", file=sys.stderr)
            return
        if not ready:
            continue
        try:
            data = os.read(fd, _READ_SIZE)
        except OSError:
            return
        if not data:
            return
        handle_input(data, stream)


def main(argv: list[str] | None = None) -> int:
    """Report mouse and keyboard events from the terminal until interrupted."""
    parser = argparse.ArgumentParser(
        prog="consolekit",
        description="Print mouse and keyboard events read from the terminal.",
    )
    parser.parse_args(argv)

    fd = sys.stdin.fileno()
    stream = sys.stdout
    try:
        set_raw_mode(fd)
    except termios.error as exc:
        print(f"terminal setup failed: {exc}", file=sys.stderr)
        return 1

    status = 0
    try:
        enable_keyboard(stream)
        enable_mouse(stream)
        _run(fd, stream)
    except KeyboardInterrupt:
        pass
    finally:
        disable_keyboard(stream)
        disable_mouse(stream)
        try:
            reset_terminal_mode(fd)
        except termios.error as exc:
            print(f"terminal reset failed: {exc}", file=sys.stderr)
            status = 1
        stream.flush()
    return status