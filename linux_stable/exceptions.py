"""
Exception hierarchy for the linux-stable updater.

Components raise these at the point an error is detected; the command line
prints the message and decides the exit status.
"""

from typing import Optional


class StableUpdateError(Exception):
    """
    Base exception for all linux-stable update errors.

    Attributes:
        message: Human-readable error message
        show_help: Whether the usage text should follow the message
        cause: Original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        show_help: bool = False,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.show_help = show_help
        self.cause = cause

    def __str__(self):
        return self.message


class UsageError(StableUpdateError):
    """Invalid combination of command line options."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("show_help", True)
        super().__init__(message, **kwargs)


class KernelTreeError(StableUpdateError):
    """The kernel folder is missing, unusable, or not a kernel tree."""


class RemoteError(StableUpdateError):
    """Fetching from the linux-stable remote failed."""


class VersionRangeError(StableUpdateError):
    """The target version is outside the range current < target <= latest."""


class ApplyConflictError(StableUpdateError):
    """
    Cherry-pick or merge stopped and needs manual intervention.

    The repository is left in git's in-progress state; ``instructions``
    tells the operator how to finish.
    """

    def __init__(self, message: str, instructions: str, **kwargs):
        super().__init__(f"{message}\n\n{instructions}", **kwargs)
        self.instructions = instructions
