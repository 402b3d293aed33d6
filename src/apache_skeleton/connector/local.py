"""Local Connector - Command execution and filesystem checks on this host.

Every probe goes through this class so scanners and actions can be
tested against a mock instead of the real machine.
"""

import glob as globmod
import logging
import os
import shlex
import shutil
import stat
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Result of a command execution."""

    command: str
    stdout: str
    stderr: str
    exit_code: int
    success: bool = field(init=False)

    def __post_init__(self) -> None:
        self.success = self.exit_code == 0


class LocalConnector:
    """Runs commands and inspects files on the local host.

    Example:
        >>> conn = LocalConnector()
        >>> result = conn.run("php -v")
        >>> result.success
        True
    """

    def run(self, command: str | list[str], *, capture: bool = True) -> CommandResult:
        """Execute a command without a shell.

        Args:
            command: Command line string or argv list.
            capture: Capture output. When False the child inherits the
                terminal, so long installs stream to the operator.

        Returns:
            CommandResult. A missing binary yields exit code 127 instead
            of raising.
        """
        argv = shlex.split(command) if isinstance(command, str) else list(command)
        display = " ".join(argv)
        logger.debug("run: %s", display)

        try:
            proc = subprocess.run(
                argv,
                capture_output=capture,
                text=True,
                errors="replace",
                check=False,
            )
        except FileNotFoundError as e:
            return CommandResult(command=display, stdout="", stderr=str(e), exit_code=127)
        except OSError as e:
            return CommandResult(command=display, stdout="", stderr=str(e), exit_code=126)

        return CommandResult(
            command=display,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
            exit_code=proc.returncode,
        )

    def which(self, name: str) -> str | None:
        """Return the absolute path of an executable on PATH, if any."""
        return shutil.which(name)

    def is_root(self) -> bool:
        return os.geteuid() == 0

    def is_socket(self, path: str) -> bool:
        """Check if a unix domain socket exists at path."""
        try:
            return stat.S_ISSOCK(os.stat(path).st_mode)
        except OSError:
            return False

    def glob(self, pattern: str) -> list[str]:
        """Expand a wildcard pattern, sorted for a stable first match."""
        return sorted(globmod.glob(pattern))

    def dir_exists(self, path: str) -> bool:
        return Path(path).is_dir()

    def read_file(self, path: str) -> str | None:
        """Read a text file.

        Returns:
            File contents as string, or None if it can't be read.
        """
        try:
            return Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError:
            return None
