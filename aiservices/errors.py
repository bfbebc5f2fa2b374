"""
Error Types

Exceptions raised by the bootstrap tooling.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .bootstrap.models import ValidationReport


class BootstrapError(Exception):
    """Base class for errors surfaced to the command line."""
    pass


class ConfigError(BootstrapError):
    """Configuration loading or validation error."""
    pass


class PrivilegeError(BootstrapError):
    """The process is not running with root privileges."""
    pass


class PodmanError(BootstrapError):
    """Podman is missing, broken or too old."""
    pass


class ValidationFailedError(BootstrapError):
    """One or more validation checks failed."""

    def __init__(self, report: "ValidationReport"):
        self.report = report
        super().__init__(f"{len(report.failures)} validation check(s) failed")
