"""Host facts collection for the hfetch banner.

Every probe is best effort: a missing file, an absent binary or a failing
OS call falls back to a placeholder value instead of aborting collection.
"""

import logging
import os
from pathlib import Path
from typing import NamedTuple, Optional, Union

from .shell import CommandRunner, ShellRunner
from .sysinfo import InitSystem, SystemInfo

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = "/etc/os-release"
LSB_RELEASE_PATH = "/etc/lsb-release"
MEMINFO_PATH = "/proc/meminfo"

UNKNOWN_DISTRO = "unknown"

# Checked in order, first match wins. Hybrid systems can carry markers for
# several init systems at once, so the order is significant.
INIT_MARKERS: tuple[tuple[InitSystem, tuple[str, ...]], ...] = (
    (InitSystem.SYSTEMD, ("/run/systemd/system",)),
    (InitSystem.OPENRC, ("/sbin/openrc",)),
    (InitSystem.RUNIT, ("/etc/runit/runsvdir/default",)),
    (InitSystem.S6, ("/etc/s6",)),
    (InitSystem.SYSVINIT, ("/etc/init.d", "/sbin/rc")),
    (InitSystem.DINIT, ("/etc/dinit",)),
    (InitSystem.SHEPHERD, ("/run/shepherd",)),
)


class PackageManager(NamedTuple):
    """A native package manager: marker path and counting command."""

    name: str
    marker: str
    command: str


# Mutually exclusive, first match wins
PACKAGE_MANAGERS: tuple[PackageManager, ...] = (
    PackageManager("dpkg", "/usr/bin/dpkg", "dpkg -l | grep '^ii' | wc -l"),
    PackageManager("pacman", "/usr/bin/pacman", "pacman -Q | wc -l"),
    PackageManager("rpm", "/usr/bin/rpm", "rpm -qa | wc -l"),
    PackageManager("xbps", "/usr/bin/xbps-query", "xbps-query -l | wc -l"),
    PackageManager("qlist", "/usr/bin/qlist", "qlist -I | wc -l"),
    PackageManager("apk", "/sbin/apk", "apk info | wc -l"),
    PackageManager(
        "nix",
        "/run/current-system/sw/bin/nix",
        "nix-store -q --requisites /run/current-system/sw | wc -l",
    ),
)

FLATPAK_COMMAND = "flatpak list | wc -l"


def parse_count(text: str) -> int:
    """Parse a line count printed by ``wc -l``.

    Args:
        text: Raw command output

    Returns:
        The parsed count, or 0 for empty, non-numeric or negative output

    Examples:
        >>> parse_count("42\\n")
        42
        >>> parse_count("")
        0
    """
    try:
        count = int(text.strip())
    except ValueError:
        return 0
    return max(count, 0)


def read_key_value(path: Path, key: str) -> Optional[str]:
    """Return the unquoted value of the first ``key=value`` line in a file.

    Args:
        path: File in os-release format
        key: Key to look up (e.g. "PRETTY_NAME")

    Returns:
        The value with surrounding quotes stripped, or None if the file is
        missing, unreadable or has no such key
    """
    prefix = f"{key}="
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            for line in f:
                line = line.strip()
                if line.startswith(prefix):
                    return line[len(prefix):].strip("\"'")
    except OSError as e:
        logger.debug("Could not read %s: %s", path, e)
    return None


class HostFactsCollector:
    """
    Collect SystemInfo from live OS state.

    All absolute paths are resolved below ``root`` so that a staged directory
    tree can stand in for the real filesystem. External commands go through
    ``runner``, which can be swapped for a fake.
    """

    def __init__(
        self,
        root: Union[str, Path] = "/",
        runner: Optional[CommandRunner] = None,
    ):
        """
        Initialize collector.

        Args:
            root: Filesystem root that probed paths are resolved against
            runner: Command runner for package counts (default: ShellRunner)
        """
        self.root = Path(root)
        self.runner = runner or ShellRunner()

    def _path(self, path: str) -> Path:
        return self.root / path.lstrip("/")

    def _exists(self, path: str) -> bool:
        try:
            return self._path(path).exists()
        except OSError:
            return False

    def get_uname(self) -> tuple[str, str]:
        """Return (hostname, kernel release), empty strings if uname fails."""
        try:
            uts = os.uname()
        except OSError as e:
            logger.debug("uname failed: %s", e)
            return "", ""
        return uts.nodename, uts.release

    def get_distro_name(self) -> str:
        """
        Return the distribution's pretty name.

        Reads PRETTY_NAME from os-release, then DISTRIB_DESCRIPTION from
        lsb-release, and gives "unknown" when neither is available.
        """
        for path, key in (
            (OS_RELEASE_PATH, "PRETTY_NAME"),
            (LSB_RELEASE_PATH, "DISTRIB_DESCRIPTION"),
        ):
            value = read_key_value(self._path(path), key)
            if value:
                return value
        return UNKNOWN_DISTRO

    def get_init_system(self) -> InitSystem:
        """Detect the init system from marker paths, in priority order."""
        for init_system, markers in INIT_MARKERS:
            if all(self._exists(marker) for marker in markers):
                return init_system
        return InitSystem.OTHER

    def detect_package_manager(self) -> Optional[PackageManager]:
        """Return the first package manager whose marker exists."""
        for manager in PACKAGE_MANAGERS:
            if self._exists(manager.marker):
                return manager
        return None

    def count_native_packages(self) -> int:
        """Count packages installed by the native package manager (0 if none)."""
        manager = self.detect_package_manager()
        if manager is None:
            logger.debug("No known package manager found")
            return 0
        logger.debug("Using package manager: %s", manager.name)
        return parse_count(self.runner.run(manager.command).stdout)

    def count_flatpak_packages(self) -> int:
        """Count flatpak installs; 0 when flatpak is missing."""
        return parse_count(self.runner.run(FLATPAK_COMMAND).stdout)

    def get_memory_info(self) -> tuple[int, int]:
        """
        Return (total, free) physical memory in megabytes.

        Page counts from sysconf are scaled by the page size. Falls back to
        /proc/meminfo, then to (0, 0).
        """
        try:
            page_size = os.sysconf("SC_PAGE_SIZE")
            total_pages = os.sysconf("SC_PHYS_PAGES")
            free_pages = os.sysconf("SC_AVPHYS_PAGES")
        except (OSError, ValueError, AttributeError) as e:
            logger.debug("sysconf memory query failed: %s", e)
        else:
            if page_size > 0 and total_pages > 0 and free_pages >= 0:
                total = total_pages * page_size // 1024 // 1024
                free = free_pages * page_size // 1024 // 1024
                return total, min(free, total)

        return self._read_meminfo()

    def _read_meminfo(self) -> tuple[int, int]:
        values: dict[str, int] = {}
        try:
            with open(self._path(MEMINFO_PATH), encoding="utf-8") as f:
                for line in f:
                    key, _, rest = line.partition(":")
                    if key in ("MemTotal", "MemFree"):
                        fields = rest.split()
                        values[key] = parse_count(fields[0]) if fields else 0
                    if len(values) == 2:
                        break
        except OSError as e:
            logger.debug("Could not read %s: %s", MEMINFO_PATH, e)
            return 0, 0

        # meminfo reports kB
        total = values.get("MemTotal", 0) // 1024
        free = values.get("MemFree", 0) // 1024
        return total, min(free, total)

    def collect(self) -> SystemInfo:
        """Run every probe and return the collected SystemInfo."""
        hostname, kernel = self.get_uname()
        mem_total, mem_free = self.get_memory_info()

        return SystemInfo(
            hostname=hostname,
            distro=self.get_distro_name(),
            init_system=self.get_init_system(),
            kernel_version=kernel,
            native_packages=self.count_native_packages(),
            flatpak_packages=self.count_flatpak_packages(),
            mem_total=mem_total,
            mem_free=mem_free,
        )


def collect_system_info(
    root: Union[str, Path] = "/", runner: Optional[CommandRunner] = None
) -> SystemInfo:
    """
    Collect host facts for the banner.

    Args:
        root: Filesystem root that probed paths are resolved against
        runner: Command runner for package counts (default: ShellRunner)

    Returns:
        SystemInfo with placeholder values for anything that could not be
        determined
    """
    return HostFactsCollector(root, runner).collect()
