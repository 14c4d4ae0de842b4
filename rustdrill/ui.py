"""Coloured status lines for the terminal."""

import os

_RESET = "\x1b[0m"
_BOLD = "1"
_RED = "31"
_GREEN = "32"
_BLUE = "34"


def _style(text: object, code: str) -> str:
    return f"\x1b[{code}m{text}{_RESET}"


def bold(text: object) -> str:
    """Return ``text`` wrapped in the bold terminal attribute."""
    return _style(text, _BOLD)


def blue(text: object) -> str:
    """Return ``text`` coloured blue."""
    return _style(text, _BLUE)


def _red(text: object) -> str:
    return _style(text, _RED)


def _green(text: object) -> str:
    return _style(text, _GREEN)


def no_emoji() -> bool:
    """True when the ``NO_EMOJI`` environment variable is set."""
    return "NO_EMOJI" in os.environ


def warn(message: object) -> None:
    """Print a red warning line."""
    prefix = "!" if no_emoji() else "⚠️ "
    print(f"{_red(prefix)} {_red(message)}")


def success(message: object) -> None:
    """Print a green success line."""
    prefix = "✓" if no_emoji() else "✅"
    print(f"{_green(prefix)} {_green(message)}")