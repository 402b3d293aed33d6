"""Fatal error types. Every one of these ends the run with a non-zero status."""


class SkeletonError(Exception):
    """Base class for errors that abort project creation."""


class InputError(SkeletonError):
    """Operator input was rejected (empty domain, bad menu choice)."""


class PreconditionError(SkeletonError):
    """The host is missing something the run needs (apt, sudo, a package)."""


class AbortedError(SkeletonError):
    """The operator declined a mandatory confirmation."""
