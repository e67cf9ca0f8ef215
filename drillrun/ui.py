"""Terminal styling and the warning/success status lines."""

from __future__ import annotations

import os

_CODES = {
    "bold": "1",
    "red": "31",
    "green": "32",
    "blue": "34",
}
_RESET = "\x1b[0m"


def style(text, *args) -> str:
    """Wrap ``text`` in ANSI escape codes for each named style in ``args``."""
    text = str(text)
    if not args:
        return text
    try:
        prefix = "".join(f"\x1b[{_CODES[name]}m" for name in args)
    except KeyError as err:
        raise ValueError(f"unknown style: {err.args[0]!r}") from None
    return f"{prefix}{text}{_RESET}"


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def warn(message) -> str:
    """Print ``message`` as a red warning line and return the printed line."""
    icon = "!" if _no_emoji() else "⚠️ "
    line = f"{style(icon, 'red')} {style(message, 'red')}"
    print(line)
    return line


def success(message) -> str:
    """Print ``message`` as a green success line and return the printed line."""
    icon = "✓" if _no_emoji() else "✅"
    line = f"{style(icon, 'green')} {style(message, 'green')}"
    print(line)
    return line