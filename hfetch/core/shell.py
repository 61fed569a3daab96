"""Shell command execution for hfetch probes."""

import logging
import subprocess
from typing import NamedTuple, Protocol

logger = logging.getLogger(__name__)

# Exit status reported when the shell itself could not be started
SPAWN_FAILED = 127


class CommandResult(NamedTuple):
    """Captured output of a shell command."""

    stdout: str
    returncode: int

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Anything that can run a shell command and capture its output."""

    def run(self, command: str) -> CommandResult: ...


class ShellRunner:
    """
    Run commands through the system shell.

    Pipelines such as ``dpkg -l | grep '^ii' | wc -l`` are passed verbatim,
    so the shell is required. No timeout is applied: the call blocks until
    the pipeline exits and its output has been read.
    """

    def run(self, command: str) -> CommandResult:
        logger.debug("Running: %s", command)
        try:
            result = subprocess.run(
                command, shell=True, capture_output=True, text=True, errors="replace"
            )
        except OSError as e:
            logger.debug("Could not run %r: %s", command, e)
            return CommandResult("", SPAWN_FAILED)

        if result.returncode != 0:
            logger.debug(
                "Command %r exited with %d: %s",
                command,
                result.returncode,
                result.stderr.strip(),
            )
        return CommandResult(result.stdout, result.returncode)
