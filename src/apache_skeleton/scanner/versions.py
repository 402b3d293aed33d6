"""Version Scanner - Best-effort host version strings for the audit file.

Each probe that fails, for whatever reason, becomes "Unknown".
"""

import logging
import re
from datetime import datetime, timezone

from apache_skeleton.connector.local import LocalConnector
from apache_skeleton.model.project import UNKNOWN, AuditRecord
from apache_skeleton.model.runtime import RuntimeMode

logger = logging.getLogger(__name__)


class VersionScanner:
    """Collects OS, Apache, PHP and database client versions."""

    OS_RELEASE = "/etc/os-release"

    APACHE_COMMANDS = ["apache2 -v", "httpd -v"]
    PHP_COMMANDS = ["php -v"]
    DATABASE_COMMANDS = ["mariadb --version", "mysql --version"]

    def __init__(self, connector: LocalConnector) -> None:
        self.connector = connector

    def scan(self, project: str, mode: RuntimeMode, now: datetime | None = None) -> AuditRecord:
        """Build the audit record for a project.

        Args:
            project: Project name (the domain).
            mode: Resolved PHP runtime mode.
            now: Creation time; defaults to the current UTC time.
        """
        created = now or datetime.now(timezone.utc)
        return AuditRecord(
            project=project,
            created=created.astimezone(timezone.utc),
            os=self.get_os_name(),
            apache=self._first_output(self.APACHE_COMMANDS, lines=2),
            php=self._first_output(self.PHP_COMMANDS, lines=1),
            database=self._first_output(self.DATABASE_COMMANDS, lines=1),
            php_mode=str(mode),
        )

    def get_os_name(self) -> str:
        """Read PRETTY_NAME from /etc/os-release."""
        content = self.connector.read_file(self.OS_RELEASE)
        if not content:
            return UNKNOWN

        for line in content.split("\n"):
            if line.startswith("PRETTY_NAME="):
                value = line.split("=", 1)[1].strip().strip('"')
                return value or UNKNOWN
        return UNKNOWN

    def _first_output(self, commands: list[str], lines: int) -> str:
        """Run commands in order, return the first successful output.

        The first ``lines`` lines are joined and whitespace is collapsed.
        """
        for command in commands:
            result = self.connector.run(command)
            if not result.success:
                logger.debug("%s failed (exit %s)", command, result.exit_code)
                continue
            head = result.stdout.strip().split("\n")[:lines]
            text = re.sub(r"\s+", " ", " ".join(head)).strip()
            if text:
                return text
        return UNKNOWN
