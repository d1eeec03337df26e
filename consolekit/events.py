"""Terminal input event types and key code lookup."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from string import ascii_uppercase


class Modifier(enum.IntFlag):
    """Modifier keys held during an event."""

    NONE = 0
    SHIFT = 1 << 0
    ALT = 1 << 1
    CTRL = 1 << 2
    SUPER = 1 << 3
    HYPER = 1 << 4
    META = 1 << 5
    CAPSLOCK = 1 << 6
    NUMLOCK = 1 << 7


class MouseEventType(enum.IntEnum):
    """Kind of mouse event."""

    PRESS = 0
    RELEASE = 1
    MOTION = 2
    WHEEL_UP = 3
    WHEEL_DOWN = 4
    UNKNOWN = 5


class MouseButton(enum.IntEnum):
    """Mouse button involved in an event."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2
    OTHER = 3
    NONE = 4


class KeyCode(enum.IntEnum):
    """Keys reported by the keyboard protocol."""

    UNKNOWN = 0

    A = enum.auto()
    B = enum.auto()
    C = enum.auto()
    D = enum.auto()
    E = enum.auto()
    F = enum.auto()
    G = enum.auto()
    H = enum.auto()
    I = enum.auto()  # noqa: E741
    J = enum.auto()
    K = enum.auto()
    L = enum.auto()
    M = enum.auto()
    N = enum.auto()
    O = enum.auto()  # noqa: E741
    P = enum.auto()
    Q = enum.auto()
    R = enum.auto()
    S = enum.auto()
    T = enum.auto()
    U = enum.auto()
    V = enum.auto()
    W = enum.auto()
    X = enum.auto()
    Y = enum.auto()
    Z = enum.auto()

    NUM0 = enum.auto()
    NUM1 = enum.auto()
    NUM2 = enum.auto()
    NUM3 = enum.auto()
    NUM4 = enum.auto()
    NUM5 = enum.auto()
    NUM6 = enum.auto()
    NUM7 = enum.auto()
    NUM8 = enum.auto()
    NUM9 = enum.auto()

    MINUS = enum.auto()
    EQUALS = enum.auto()
    SEMICOLON = enum.auto()
    APOSTROPHE = enum.auto()
    COMMA = enum.auto()
    PERIOD = enum.auto()
    SLASH = enum.auto()
    BACKSLASH = enum.auto()
    BACKTICK = enum.auto()
    OPEN_BRACKET = enum.auto()
    CLOSE_BRACKET = enum.auto()

    UP = enum.auto()
    DOWN = enum.auto()
    RIGHT = enum.auto()
    LEFT = enum.auto()

    F1 = enum.auto()
    F2 = enum.auto()
    F3 = enum.auto()
    F4 = enum.auto()
    F5 = enum.auto()
    F6 = enum.auto()
    F7 = enum.auto()
    F8 = enum.auto()
    F9 = enum.auto()
    F10 = enum.auto()
    F11 = enum.auto()
    F12 = enum.auto()

    ESCAPE = enum.auto()
    TAB = enum.auto()
    CAPS_LOCK = enum.auto()
    ENTER = enum.auto()
    SPACE = enum.auto()
    BACKSPACE = enum.auto()
    DELETE = enum.auto()
    INSERT = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()
    CTRL_LEFT = enum.auto()
    CTRL_RIGHT = enum.auto()
    SHIFT_LEFT = enum.auto()
    SHIFT_RIGHT = enum.auto()
    ALT_LEFT = enum.auto()
    ALT_RIGHT = enum.auto()
    SUPER_LEFT = enum.auto()
    SUPER_RIGHT = enum.auto()

    NUMPAD_INS = enum.auto()
    NUMPAD_END = enum.auto()
    NUMPAD_DOWN = enum.auto()
    NUMPAD_PG_DN = enum.auto()
    NUMPAD_LEFT = enum.auto()
    NUMPAD_CENTER = enum.auto()
    NUMPAD_RIGHT = enum.auto()
    NUMPAD_HOME = enum.auto()
    NUMPAD_UP = enum.auto()
    NUMPAD_PG_UP = enum.auto()
    NUMPAD_DEL = enum.auto()

    NUMPAD_0 = enum.auto()
    NUMPAD_1 = enum.auto()
    NUMPAD_2 = enum.auto()
    NUMPAD_3 = enum.auto()
    NUMPAD_4 = enum.auto()
    NUMPAD_5 = enum.auto()
    NUMPAD_6 = enum.auto()
    NUMPAD_7 = enum.auto()
    NUMPAD_8 = enum.auto()
    NUMPAD_9 = enum.auto()
    NUMPAD_DOT = enum.auto()

    NUMPAD_DIVIDE = enum.auto()
    NUMPAD_MULTIPLY = enum.auto()
    NUMPAD_MINUS = enum.auto()
    NUMPAD_PLUS = enum.auto()
    NUMPAD_ENTER = enum.auto()
    NUM_LOCK = enum.auto()


class EventType(enum.IntEnum):
    """Kind of input event."""

    MOUSE = 0
    KEY = 1
    UNKNOWN = 2


class KeyEventType(enum.IntEnum):
    """Kind of key event."""

    PRESS = 0
    RELEASE = 1
    REPEAT = 2


@dataclass
class MouseEventData:
    """A decoded mouse event."""

    event_type: MouseEventType = MouseEventType.UNKNOWN
    button: MouseButton = MouseButton.NONE
    x: int = 0
    y: int = 0
    modifiers: Modifier = Modifier.NONE


@dataclass
class KeyEventData:
    """A decoded key event, with its text if the terminal supplied one."""

    event_type: KeyEventType = KeyEventType.PRESS
    key_code: KeyCode = KeyCode.UNKNOWN
    modifiers: Modifier = Modifier.NONE
    utf8: str = ""


@dataclass
class Event:
    """An input event of any kind."""

    type: EventType = EventType.UNKNOWN
    data: MouseEventData | KeyEventData | None = None


def _build_code_table() -> dict[str, KeyCode]:
    table: dict[str, KeyCode] = {
        f"{ord(letter.lower())}u": KeyCode[letter] for letter in ascii_uppercase
    }
    table.update({f"{ord(str(digit))}u": KeyCode[f"NUM{digit}"] for digit in range(10)})
    table.update(
        {
            "45u": KeyCode.MINUS,
            "61u": KeyCode.EQUALS,
            "59u": KeyCode.SEMICOLON,
            "39u": KeyCode.APOSTROPHE,
            "44u": KeyCode.COMMA,
            "46u": KeyCode.PERIOD,
            "47u": KeyCode.SLASH,
            "92u": KeyCode.BACKSLASH,
            "96u": KeyCode.BACKTICK,
            "91u": KeyCode.OPEN_BRACKET,
            "93u": KeyCode.CLOSE_BRACKET,
            "1A": KeyCode.UP,
            "1B": KeyCode.DOWN,
            "1C": KeyCode.RIGHT,
            "1D": KeyCode.LEFT,
            "1P": KeyCode.F1,
            "1Q": KeyCode.F2,
            "13~": KeyCode.F3,
            "1S": KeyCode.F4,
            "15~": KeyCode.F5,
            "17~": KeyCode.F6,
            "18~": KeyCode.F7,
            "19~": KeyCode.F8,
            "20~": KeyCode.F9,
            "21~": KeyCode.F10,
            "23~": KeyCode.F11,
            "24~": KeyCode.F12,
            "27u": KeyCode.ESCAPE,
            "9u": KeyCode.TAB,
            "57358u": KeyCode.CAPS_LOCK,
            "13u": KeyCode.ENTER,
            "32u": KeyCode.SPACE,
            "8u": KeyCode.BACKSPACE,
            "3~": KeyCode.DELETE,
            "2~": KeyCode.INSERT,
            "1H": KeyCode.HOME,
            "1F": KeyCode.END,
            "5~": KeyCode.PAGE_UP,
            "6~": KeyCode.PAGE_DOWN,
            "57442u": KeyCode.CTRL_LEFT,
            "57448u": KeyCode.CTRL_RIGHT,
            "57441u": KeyCode.SHIFT_LEFT,
            "57447u": KeyCode.SHIFT_RIGHT,
            "57443u": KeyCode.ALT_LEFT,
            "57449u": KeyCode.ALT_RIGHT,
            "57444u": KeyCode.SUPER_LEFT,
            "57450u": KeyCode.SUPER_RIGHT,
            "57425u": KeyCode.NUMPAD_INS,
            "57424u": KeyCode.NUMPAD_END,
            "57420u": KeyCode.NUMPAD_DOWN,
            "57422u": KeyCode.NUMPAD_PG_DN,
            "57417u": KeyCode.NUMPAD_LEFT,
            "57427u": KeyCode.NUMPAD_CENTER,
            "57418u": KeyCode.NUMPAD_RIGHT,
            "57423u": KeyCode.NUMPAD_HOME,
            "57419u": KeyCode.NUMPAD_UP,
            "57421u": KeyCode.NUMPAD_PG_UP,
            "57426u": KeyCode.NUMPAD_DEL,
        }
    )
    table.update({f"{57399 + digit}u": KeyCode[f"NUMPAD_{digit}"] for digit in range(10)})
    table.update(
        {
            "57409u": KeyCode.NUMPAD_DOT,
            "57410u": KeyCode.NUMPAD_DIVIDE,
            "57411u": KeyCode.NUMPAD_MULTIPLY,
            "57412u": KeyCode.NUMPAD_MINUS,
            "57413u": KeyCode.NUMPAD_PLUS,
            "57414u": KeyCode.NUMPAD_ENTER,
            "57360u": KeyCode.NUM_LOCK,
        }
    )
    return table


def _build_display_names() -> dict[KeyCode, str]:
    names: dict[KeyCode, str] = {KeyCode[letter]: letter for letter in ascii_uppercase}
    names.update({KeyCode[f"NUM{digit}"]: str(digit) for digit in range(10)})
    names.update(
        {
            KeyCode.MINUS: "Minus",
            KeyCode.EQUALS: "Equals",
            KeyCode.SEMICOLON: "Semicolon",
            KeyCode.APOSTROPHE: "Apostrophe",
            KeyCode.COMMA: "Comma",
            KeyCode.PERIOD: "Period",
            KeyCode.SLASH: "Slash",
            KeyCode.BACKSLASH: "Backslash",
            KeyCode.BACKTICK: "Backtick",
            KeyCode.OPEN_BRACKET: "OpenBracket",
            KeyCode.CLOSE_BRACKET: "CloseBracket",
            KeyCode.UP: "Up",
            KeyCode.DOWN: "Down",
            KeyCode.RIGHT: "Right",
            KeyCode.LEFT: "Left",
        }
    )
    names.update({KeyCode[f"F{n}"]: f"F{n}" for n in range(1, 13)})
    names.update(
        {
            KeyCode.ESCAPE: "Escape",
            KeyCode.TAB: "Tab",
            KeyCode.CAPS_LOCK: "CapsLock",
            KeyCode.ENTER: "Enter",
            KeyCode.SPACE: "Space",
            KeyCode.BACKSPACE: "Backspace",
            KeyCode.DELETE: "Delete",
            KeyCode.INSERT: "Insert",
            KeyCode.HOME: "Home",
            KeyCode.END: "End",
            KeyCode.PAGE_UP: "PageUp",
            KeyCode.PAGE_DOWN: "PageDown",
            KeyCode.CTRL_LEFT: "ControlLeft",
            KeyCode.CTRL_RIGHT: "ControlRight",
            KeyCode.SHIFT_LEFT: "ShiftLeft",
            KeyCode.SHIFT_RIGHT: "ShiftRight",
            KeyCode.ALT_LEFT: "AltLeft",
            KeyCode.ALT_RIGHT: "AltRight",
            KeyCode.SUPER_LEFT: "SuperLeft",
            KeyCode.SUPER_RIGHT: "SuperRight",
            KeyCode.NUMPAD_INS: "NumpadIns",
            KeyCode.NUMPAD_END: "NumpadEnd",
            KeyCode.NUMPAD_DOWN: "NumpadDown",
            KeyCode.NUMPAD_PG_DN: "NumpadPgDn",
            KeyCode.NUMPAD_LEFT: "NumpadLeft",
            KeyCode.NUMPAD_CENTER: "NumpadCenter",
            KeyCode.NUMPAD_RIGHT: "NumpadRight",
            KeyCode.NUMPAD_HOME: "NumpadHome",
            KeyCode.NUMPAD_UP: "NumpadUp",
            KeyCode.NUMPAD_PG_UP: "NumpadPgUp",
            KeyCode.NUMPAD_DEL: "NumpadDel",
        }
    )
    names.update({KeyCode[f"NUMPAD_{digit}"]: f"Numpad{digit}" for digit in range(10)})
    names.update(
        {
            KeyCode.NUMPAD_DOT: "NumpadDot",
            KeyCode.NUMPAD_DIVIDE: "NumpadDivide",
            KeyCode.NUMPAD_MULTIPLY: "NumpadMultiply",
            KeyCode.NUMPAD_MINUS: "NumpadMinus",
            KeyCode.NUMPAD_PLUS: "NumpadPlus",
            KeyCode.NUMPAD_ENTER: "NumpadEnter",
            KeyCode.NUM_LOCK: "NumLock",
        }
    )
    return names


_CODE_TABLE = _build_code_table()
_DISPLAY_NAMES = _build_display_names()


def key_code_from_string(key_str: str | None) -> KeyCode:
    """Look up the key for a protocol key code such as ``"97u"`` or ``"1A"``.

    Unrecognised codes are reported on standard output and give ``KeyCode.UNKNOWN``.
    """
    if key_str is None:
        return KeyCode.UNKNOWN
    key = _CODE_TABLE.get(key_str)
    if key is None:
        print(f"Unknown key code: {key_str}", file=sys.stdout)
        return KeyCode.UNKNOWN
    return key


def key_code_to_string(key_code: int) -> str:
    """Return the display name of a key, or ``Unknown(<n>)`` for unnamed codes."""
    try:
        return _DISPLAY_NAMES[KeyCode(key_code)]
    except (ValueError, KeyError):
        return f"Unknown({int(key_code)})"