"""Materialize Action - Create the project tree on disk.

CONTRACT:
- read_only: False (writes under <base_dir>/<domain>)
- overwrite: asks first when the project root already exists
- idempotent: rerunning rewrites generated files, keeps placeholders
"""

import logging
from pathlib import Path
from typing import Callable

from rich.console import Console

from apache_skeleton import render
from apache_skeleton.config import Settings
from apache_skeleton.console import warn
from apache_skeleton.errors import AbortedError, PreconditionError
from apache_skeleton.model.project import AuditRecord, ProjectSpec, ProjectType
from apache_skeleton.model.runtime import RuntimeMode

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[str], bool]

COMMON_DIRS = ("config", "public", "database", "storage", "storage/logs")

ASSET_DIRS = ("public/assets", "public/assets/css", "public/assets/js")

TYPE_DIRS: dict[ProjectType, tuple[str, ...]] = {
    ProjectType.SMALL_APP: (
        "includes",
        "app",
        *ASSET_DIRS,
        "public/uploads",
    ),
    ProjectType.SAAS_API: (
        "includes",
        "app",
        "app/Controllers",
        "app/Models",
        "app/Views",
        "app/Views/layouts",
        "app/Views/pages",
        "app/Views/partials",
        *ASSET_DIRS,
        "public/uploads",
    ),
    ProjectType.LARGE_APP: (
        "includes",
        "app",
        "bootstrap",
        "routes",
        "resources",
        "resources/views",
        *ASSET_DIRS,
    ),
    ProjectType.MARKETING: (
        *ASSET_DIRS,
        "public/assets/images",
    ),
}

# Created empty, never overwritten
PLACEHOLDERS = ("README.md", ".env.example")
LARGE_APP_PLACEHOLDERS = ("artisan",)


def plan_directories(project_type: ProjectType) -> tuple[str, ...]:
    """Relative directories for a project type, parents included."""
    plan: list[str] = []
    for path in COMMON_DIRS + TYPE_DIRS[project_type]:
        if path not in plan:
            plan.append(path)
    return tuple(plan)


def plan_placeholders(project_type: ProjectType) -> tuple[str, ...]:
    if project_type == ProjectType.LARGE_APP:
        return PLACEHOLDERS + LARGE_APP_PLACEHOLDERS
    return PLACEHOLDERS


def render_files(
    spec: ProjectSpec,
    mode: RuntimeMode,
    record: AuditRecord,
    settings: Settings,
) -> dict[str, str]:
    """Render every generated file, keyed by path relative to the root."""
    files = {
        "public/assets/css/style.css": render.render_stylesheet(),
        "public/assets/js/app.js": render.render_script(),
    }

    if spec.project_type.needs_php:
        files["includes/header.php"] = render.render_header(settings)
        files["includes/footer.php"] = render.render_footer(settings)
        files["public/index.php"] = render.render_index_php()
    else:
        files["public/index.html"] = render.render_index_html(spec, settings)

    files["public/.htaccess"] = render.render_htaccess(spec.project_type.entry_point)
    files[f"config/{spec.domain}.conf"] = render.render_vhost(spec, mode)
    files["config/versions.txt"] = render.render_versions(record)
    return files


class MaterializeAction:
    """Writes the directory plan and template set for a project."""

    def __init__(self, console: Console, confirm: ConfirmFn) -> None:
        self.console = console
        self.confirm = confirm

    def materialize(
        self,
        spec: ProjectSpec,
        mode: RuntimeMode,
        record: AuditRecord,
        settings: Settings,
    ) -> Path:
        """Create the project and return its root.

        Raises:
            AbortedError: The root exists and the operator declined to
                continue. Nothing has been written at that point.
            PreconditionError: A directory or file could not be written.
        """
        root = spec.root
        if root.exists():
            warn(self.console, f"Directory already exists: {root}")
            if not self.confirm("Type 'yes' to continue (may overwrite some files)"):
                raise AbortedError("Aborted.")

        files = render_files(spec, mode, record, settings)

        try:
            self._write(root, spec.project_type, files)
        except OSError as e:
            path = e.filename or root
            raise PreconditionError(f"Cannot write {path}: {e.strerror or e}") from e

        return root

    def _write(self, root: Path, project_type: ProjectType, files: dict[str, str]) -> None:
        root.mkdir(parents=True, exist_ok=True)
        for rel in plan_directories(project_type):
            (root / rel).mkdir(parents=True, exist_ok=True)

        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            logger.debug("wrote %s", target)

        for rel in plan_placeholders(project_type):
            (root / rel).touch(exist_ok=True)
