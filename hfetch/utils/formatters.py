"""Formatting utilities for hfetch."""

import re

# CSI sequences such as "\033[1;34m"
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text.

    Examples:
        >>> strip_ansi("\\x1b[1;35mlogo\\x1b[0m")
        'logo'
    """
    return ANSI_ESCAPE_RE.sub("", text)


def visible_width(text: str) -> int:
    """Return the number of characters text occupies on screen.

    Examples:
        >>> visible_width("\\x1b[1;34mhostname: \\x1b[0m")
        10
    """
    return len(strip_ansi(text))


def colorize(text: str, color: str, reset: str = "\x1b[0m") -> str:
    """Wrap text in a color code and a trailing reset."""
    return f"{color}{text}{reset}"
