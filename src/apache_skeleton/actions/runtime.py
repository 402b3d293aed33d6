"""Runtime Action - Make sure PHP can run before a PHP project is created.

CONTRACT:
- read_only: False (may install php-fpm with apt)
- requires confirmation: True
- marketing projects never trigger it
"""

import logging
from typing import Callable

from rich.console import Console

from apache_skeleton.connector.local import LocalConnector
from apache_skeleton.console import bold, info, warn
from apache_skeleton.errors import AbortedError, PreconditionError
from apache_skeleton.model.project import ProjectType
from apache_skeleton.model.runtime import RuntimeMode
from apache_skeleton.scanner.php import PHPRuntimeScanner

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[str], bool]


class RuntimeAction:
    """Offer to install php-fpm when no PHP runtime is detected."""

    def __init__(
        self,
        connector: LocalConnector,
        scanner: PHPRuntimeScanner,
        console: Console,
        confirm: ConfirmFn,
        fpm_package: str = "php-fpm",
    ) -> None:
        self.connector = connector
        self.scanner = scanner
        self.console = console
        self.confirm = confirm
        self.fpm_package = fpm_package

    def ensure(self, mode: RuntimeMode, project_type: ProjectType) -> RuntimeMode:
        """Return a runtime mode the project can be configured for.

        Args:
            mode: Result of the initial probe.
            project_type: Selected project type.

        Returns:
            The input mode when nothing needs doing, otherwise the mode
            re-probed after installation (which may still lack a socket).

        Raises:
            PreconditionError: apt or sudo is missing, or the install failed.
            AbortedError: The operator declined the install.
        """
        if not project_type.needs_php:
            return mode
        if mode.is_available:
            return mode

        self.console.print()
        bold(self.console, "PHP runtime not detected")
        self.console.print("No PHP-FPM socket found and mod_php does not appear to be enabled.")
        self.console.print()
        self.console.print("Recommended fix (Ubuntu/Debian):")
        self.console.print(f"  sudo apt update && sudo apt install -y {self.fpm_package}")
        self.console.print()

        if not self.connector.which("apt"):
            raise PreconditionError(
                f"apt not found. Install {self.fpm_package} using your distro's "
                "package manager, then rerun."
            )

        if not self.confirm(f"Want me to install {self.fpm_package} now?"):
            raise AbortedError(f"Ok. Install {self.fpm_package}, then rerun.")

        self._install(self._privilege_prefix())

        new_mode = self.scanner.probe()
        if not new_mode.is_fpm:
            warn(self.console, f"{self.fpm_package} installed but no socket detected yet. "
                               "You may need to start/restart php-fpm.")
            self.console.print("Try:")
            self.console.print("  sudo systemctl restart php8.3-fpm  (or your version)")

        logger.debug("runtime after install: %s", new_mode)
        return new_mode

    def _privilege_prefix(self) -> list[str]:
        if self.connector.is_root():
            return []
        if not self.connector.which("sudo"):
            raise PreconditionError(
                f"sudo not found. Run: sudo apt update && sudo apt install -y {self.fpm_package}"
            )
        return ["sudo"]

    def _install(self, prefix: list[str]) -> None:
        info(self.console, f"Installing {self.fpm_package}...")
        for argv in (
            prefix + ["apt", "update"],
            prefix + ["apt", "install", "-y", self.fpm_package],
        ):
            result = self.connector.run(argv, capture=False)
            if not result.success:
                raise PreconditionError(
                    f"'{result.command}' failed with exit code {result.exit_code}"
                )
