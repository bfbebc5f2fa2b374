"""
Placeholder Checks

Checks that are listed in the bootstrap checklist but have no real logic
yet. Each one always passes.
"""

import logging

from ...config import BootstrapSettings
from ..models import CheckResult


def _not_yet_implemented(name: str) -> CheckResult:
    return CheckResult(
        name=name,
        passed=True,
        message="Not yet implemented",
        implemented=False
    )


def check_rhn_registration(settings: BootstrapSettings, logger: logging.Logger) -> CheckResult:
    """Check the system is registered with RHN."""
    logger.debug("Validating RHN registration...")
    return _not_yet_implemented("RHN Registration")


def check_ltc_repository(settings: BootstrapSettings, logger: logging.Logger) -> CheckResult:
    """Check the LTC yum repository providing service-report is configured."""
    logger.debug("Validating LTC RPM repository...")
    return _not_yet_implemented("LTC RPM Repository")


def check_rhaiis_license(settings: BootstrapSettings, logger: logging.Logger) -> CheckResult:
    """Check a valid RHAIIS license is present."""
    logger.debug("Validating RHAIIS license...")
    return _not_yet_implemented("RHAIIS License")
