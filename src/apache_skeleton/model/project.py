"""Project dataclasses - the validated input and the audit snapshot."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from apache_skeleton.errors import InputError

UNKNOWN = "Unknown"


class ProjectType(Enum):
    """Supported project layouts, in menu order."""

    SMALL_APP = "small-app"  # public/ + includes/ + app/
    SAAS_API = "saas-api"  # MVC-ish app/{Controllers,Models,Views}
    LARGE_APP = "large-app"  # Laravel-like placeholder
    MARKETING = "marketing"  # public-only static site

    @property
    def needs_php(self) -> bool:
        return self != ProjectType.MARKETING

    @property
    def entry_point(self) -> str:
        return "index.php" if self.needs_php else "index.html"

    @classmethod
    def from_choice(cls, choice: str) -> "ProjectType":
        """Resolve a menu number (1-4) or a type name.

        Raises:
            InputError: If the choice is neither.
        """
        choice = choice.strip()
        members = list(cls)
        if choice.isdigit() and 1 <= int(choice) <= len(members):
            return members[int(choice) - 1]
        for member in members:
            if member.value == choice:
                return member
        raise InputError(f"Invalid choice '{choice}'. Must be 1-{len(members)}.")


@dataclass(frozen=True)
class ProjectSpec:
    """Immutable description of the project to create."""

    domain: str
    base_dir: str
    project_type: ProjectType

    @classmethod
    def build(cls, domain: str, base_dir: str, project_type: ProjectType) -> "ProjectSpec":
        """Validate raw operator input.

        Raises:
            InputError: If the domain is empty or is not a single path component.
        """
        domain = (domain or "").strip()
        if not domain:
            raise InputError("Domain cannot be empty.")
        if "/" in domain or "\\" in domain or domain in (".", ".."):
            raise InputError(f"Invalid domain '{domain}': must be a single directory name.")
        base_dir = (base_dir or "").strip()
        if not base_dir:
            raise InputError("Base directory cannot be empty.")
        return cls(domain=domain, base_dir=base_dir, project_type=project_type)

    @property
    def root(self) -> Path:
        return Path(self.base_dir.rstrip("/") or "/") / self.domain

    @property
    def public_dir(self) -> Path:
        return self.root / "public"

    @property
    def config_dir(self) -> Path:
        return self.root / "config"

    @property
    def vhost_path(self) -> Path:
        return self.config_dir / f"{self.domain}.conf"

    @property
    def versions_path(self) -> Path:
        return self.config_dir / "versions.txt"


@dataclass
class AuditRecord:
    """Host and tool versions captured when the project was created.

    Informational only; never parsed back.
    """

    project: str
    created: datetime
    os: str = UNKNOWN
    apache: str = UNKNOWN
    php: str = UNKNOWN
    database: str = UNKNOWN
    php_mode: str = "none"

    @property
    def created_iso(self) -> str:
        return self.created.strftime("%Y-%m-%dT%H:%M:%SZ")
