"""Banner rendering: logo and host facts side by side."""

import sys
from itertools import zip_longest
from typing import Optional, TextIO

from ..utils.formatters import colorize, visible_width
from .sysinfo import SystemInfo

LOGO: tuple[str, ...] = (
    ".------.",
    "|H.--. |",
    "| :/\\: |",
    "| (__) |",
    "| '--'H|",
    "`------'",
)

LOGO_COLOR = "\033[1;35m"
LABEL_COLOR = "\033[1;34m"
RESET = "\033[0m"
SEPARATOR = "    "


def label(name: str) -> str:
    """Return a colored ``name: `` prefix for an info line."""
    return colorize(f"{name}: ", LABEL_COLOR, RESET)


def build_info_lines(info: SystemInfo) -> list[str]:
    """
    Format the six info lines in display order.

    Args:
        info: Collected host facts

    Returns:
        hostname, distro, kernel, init, packages and memory lines
    """
    return [
        label("hostname") + info.hostname,
        label("distro") + info.distro,
        label("kernel") + info.kernel_version,
        label("init") + info.init_system.value,
        label("packages")
        + f"{info.native_packages} native | {info.flatpak_packages} flatpak",
        label("memory") + f"{info.mem_free}MB | {info.mem_total}MB",
    ]


def render_banner(info: SystemInfo, logo: tuple[str, ...] = LOGO) -> list[str]:
    """
    Pair logo lines with info lines.

    When one side is longer, its extra rows are printed with the other side
    blank. A blank logo cell is padded to the logo width so info stays
    aligned.

    Args:
        info: Collected host facts
        logo: Logo lines (uncolored)

    Returns:
        Output rows without trailing newlines
    """
    logo_width = max((visible_width(line) for line in logo), default=0)
    rows = []

    for logo_line, info_line in zip_longest(logo, build_info_lines(info)):
        if logo_line is None:
            left = " " * logo_width
        else:
            left = colorize(logo_line, LOGO_COLOR, RESET)

        if info_line is None:
            rows.append(left)
        else:
            rows.append(left + SEPARATOR + info_line)

    return rows


def print_banner(info: SystemInfo, stream: Optional[TextIO] = None) -> None:
    """Write the banner to stream (default: stdout)."""
    stream = stream or sys.stdout
    stream.write("\n".join(render_banner(info)) + "\n")
    stream.flush()
