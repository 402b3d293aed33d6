"""Value types shared by the scanners and actions."""

from apache_skeleton.model.project import AuditRecord, ProjectSpec, ProjectType
from apache_skeleton.model.runtime import RuntimeKind, RuntimeMode

__all__ = [
    "AuditRecord",
    "ProjectSpec",
    "ProjectType",
    "RuntimeKind",
    "RuntimeMode",
]
