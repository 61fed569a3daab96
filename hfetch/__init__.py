"""hfetch - Minimal system fetch banner for the terminal."""

__version__ = "0.1.0"

from .core.collectors import collect_system_info

__all__ = ["collect_system_info"]
