# consolekit

consolekit reads mouse and keyboard input from a terminal and turns it into
structured events.

It can switch on SGR mouse reporting (modes 1006 and 1003) and the kitty
keyboard protocol. It decodes the mouse reports that the terminal sends back.

consolekit runs on POSIX systems only, because the command uses `termios` and
`select`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command-line use

```
consolekit
```

The command switches off echo and line buffering on the terminal. It then
turns on keyboard and mouse reporting and polls standard input. Each mouse
report is printed as one line of numbers:

```
MOUSE: type=0 button=0 x=12 y=5 mods=0
```

The fields are:

- `type` is the `MouseEventType` value.
- `button` is the `MouseButton` value.
- `x` and `y` are the reported coordinates.
- `mods` is the `Modifier` flags.

Any other control sequence is printed raw, with its leading escape byte shown
as `ESC`.

The command stops on Ctrl+C or when input ends. It then turns reporting off and
switches echo and line buffering back on. If the terminal cannot be set up, the
command prints a message on standard error and exits with status 1.

## Library use

```python
from consolekit.events import KeyCode, MouseButton, MouseEventType, key_code_from_string, key_code_to_string
from consolekit.mouse import is_mouse_event, parse_mouse_event

data = b"\x1b[<0;10;20M"
if is_mouse_event(data):
    event = parse_mouse_event(data)
    assert event.event_type is MouseEventType.PRESS
    assert event.button is MouseButton.LEFT
    assert (event.x, event.y) == (10, 20)

assert key_code_from_string("97u") is KeyCode.A
assert key_code_to_string(KeyCode.F5) == "F5"
```

### Modules

- `consolekit.events`
  - The enums `Modifier`, `MouseEventType`, `MouseButton`, `KeyCode`,
    `EventType` and `KeyEventType`.
  - The dataclasses `MouseEventData`, `KeyEventData` and `Event`.
  - `key_code_from_string` maps a kitty key code such as `"97u"` or `"1A"` to a
    `KeyCode`. It prints a notice for codes it does not know and returns
    `KeyCode.UNKNOWN`.
  - `key_code_to_string` gives a key's display name, or `Unknown(<n>)` for a
    key that has none.
- `consolekit.mouse`
  - `enable_mouse` and `disable_mouse` write the control sequences to a
    stream, which is standard output by default.
  - `is_mouse_event` checks whether bytes start an SGR mouse report.
  - `parse_mouse_event` decodes a report into a `MouseEventData`. It handles
    press, release, motion, wheel and the shift, alt and ctrl modifiers.
    Incomplete input gives an event of type `UNKNOWN`.
- `consolekit.keyboard`
  - `enable_keyboard` and `disable_keyboard` write the control sequences to a
    stream.
  - `is_keyboard_event` checks whether bytes start a control sequence.
  - `format_raw_bytes` renders a sequence with `ESC` in front.
  - `parse_keyboard_event` prints the raw sequence and returns a
    `KeyEventData`.
- `consolekit.cli`
  - `set_raw_mode` and `reset_terminal_mode` change a terminal's settings.
  - `format_mouse_event` renders a mouse event as the line shown above.
  - `handle_input` decodes and reports one chunk of input.
  - `main` is the command's entry point.

## What it does not do

Keyboard sequences are not decoded yet. `parse_keyboard_event` always returns a
press of `KeyCode.UNKNOWN` with no modifiers and no text. The key code table in
`consolekit.events` is available for lookups, but nothing applies it to
incoming input. The command does not build `Event` objects. It only prints what
it receives.