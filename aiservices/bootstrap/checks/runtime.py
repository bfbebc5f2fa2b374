"""
Container Runtime Validation

Wraps the Podman validator as a bootstrap check.
"""

import logging

from ...config import BootstrapSettings
from ...errors import PodmanError
from ...validators import validate_podman
from ..models import CheckResult


def check_container_runtime(settings: BootstrapSettings, logger: logging.Logger) -> CheckResult:
    """Check Podman is installed with a compatible version."""
    try:
        info = validate_podman(settings.podman)
    except PodmanError as e:
        logger.debug("Podman validation failed", extra={"fields": {"error": str(e)}})
        return CheckResult(
            name="Podman",
            passed=False,
            message=f"podman validation failed: {e}"
        )

    logger.debug("Podman validation passed", extra={"fields": {"version": info.version}})
    return CheckResult(
        name="Podman",
        passed=True,
        message=f"podman {info.version}"
    )
