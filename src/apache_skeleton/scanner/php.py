"""PHP Scanner - Detects how PHP can be executed behind Apache.

Resolution order:
1. A PHP-FPM socket at one of the versioned canonical paths
2. Any php*-fpm.sock in the same directory
3. An enabled mod_php loader in mods-enabled
"""

import logging

from apache_skeleton.connector.local import LocalConnector
from apache_skeleton.model.runtime import RuntimeMode

logger = logging.getLogger(__name__)


class PHPRuntimeScanner:
    """Scanner for the PHP runtime available to Apache."""

    # Newest version first
    SOCKET_CANDIDATES = [
        "/run/php/php8.4-fpm.sock",
        "/run/php/php8.3-fpm.sock",
        "/run/php/php8.2-fpm.sock",
        "/run/php/php8.1-fpm.sock",
        "/run/php/php8.0-fpm.sock",
    ]

    SOCKET_GLOB = "/run/php/php*-fpm.sock"

    MODS_ENABLED_DIR = "/etc/apache2/mods-enabled"
    MOD_PHP_GLOB = "php*.load"

    def __init__(self, connector: LocalConnector) -> None:
        self.connector = connector

    def probe(self) -> RuntimeMode:
        """Resolve the PHP runtime mode.

        Returns:
            RuntimeMode. Absence of PHP is RuntimeMode.none(), not an error.
        """
        socket_path = self.find_fpm_socket()
        if socket_path:
            logger.debug("php-fpm socket found at %s", socket_path)
            return RuntimeMode.fpm(socket_path)

        if self._mod_php_enabled():
            logger.debug("mod_php loader found in %s", self.MODS_ENABLED_DIR)
            return RuntimeMode.module()

        logger.debug("no PHP runtime detected")
        return RuntimeMode.none()

    def find_fpm_socket(self) -> str | None:
        """Return the first listening PHP-FPM socket, or None."""
        for candidate in self.SOCKET_CANDIDATES:
            if self.connector.is_socket(candidate):
                return candidate

        matches = self.connector.glob(self.SOCKET_GLOB)
        if matches and self.connector.is_socket(matches[0]):
            return matches[0]

        return None

    def _mod_php_enabled(self) -> bool:
        if not self.connector.dir_exists(self.MODS_ENABLED_DIR):
            return False
        return bool(self.connector.glob(f"{self.MODS_ENABLED_DIR}/{self.MOD_PHP_GLOB}"))
