"""Scanner package - Data collection from the host.

Scanners run commands and check paths. They never prompt, install
or write anything, and they never raise on missing evidence.
"""

from apache_skeleton.scanner.php import PHPRuntimeScanner
from apache_skeleton.scanner.versions import VersionScanner

__all__ = ["PHPRuntimeScanner", "VersionScanner"]
