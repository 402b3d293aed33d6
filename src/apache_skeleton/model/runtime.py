"""RuntimeMode - how PHP execution is available on the host."""

from dataclasses import dataclass
from enum import Enum


class RuntimeKind(Enum):
    """Detected PHP execution mode."""

    FPM = "fpm"  # PHP-FPM listening on a unix socket
    MODULE = "mod_php"  # libapache2-mod-php enabled
    NONE = "none"


@dataclass(frozen=True)
class RuntimeMode:
    """Result of probing the host for a PHP runtime.

    Exactly one kind holds per run. ``socket_path`` is only set for FPM.
    """

    kind: RuntimeKind
    socket_path: str | None = None

    @classmethod
    def fpm(cls, socket_path: str) -> "RuntimeMode":
        return cls(RuntimeKind.FPM, socket_path)

    @classmethod
    def module(cls) -> "RuntimeMode":
        return cls(RuntimeKind.MODULE)

    @classmethod
    def none(cls) -> "RuntimeMode":
        return cls(RuntimeKind.NONE)

    @property
    def is_fpm(self) -> bool:
        return self.kind == RuntimeKind.FPM

    @property
    def is_available(self) -> bool:
        """True when PHP can run without installing anything."""
        return self.kind != RuntimeKind.NONE

    def __str__(self) -> str:
        """Format as fpm:<socket>, mod_php or none."""
        if self.is_fpm:
            return f"fpm:{self.socket_path}"
        return self.kind.value
