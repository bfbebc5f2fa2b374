"""
Validation Runner

Runs the bootstrap checklist and aggregates the results.
"""

import logging
from typing import List, Optional

from ..config import BootstrapSettings
from ..errors import PrivilegeError, ValidationFailedError
from .checks import DEFAULT_CHECKS
from .models import Check, CheckResult, ValidationReport


class ValidationRunner:
    """
    Runs validation checks in a fixed order.

    A failed fatal check raises immediately. Every other failure is
    recorded and the remaining checks still run; the run then fails as a
    whole with all recorded failures.
    """

    def __init__(
        self,
        settings: BootstrapSettings,
        logger: logging.Logger,
        checks: Optional[List[Check]] = None,
    ):
        """
        Initialize the runner.

        Args:
            settings: Host prerequisites
            logger: Logger shared with every check
            checks: Checklist to run (defaults to the bootstrap checklist)
        """
        self.settings = settings
        self.logger = logger
        self.checks = list(DEFAULT_CHECKS if checks is None else checks)

    def run(self) -> ValidationReport:
        """
        Run all checks.

        Returns:
            ValidationReport when every check passed

        Raises:
            PrivilegeError: If a fatal check failed
            ValidationFailedError: If any other check failed
        """
        self.logger.info("Running bootstrap validation...")
        report = ValidationReport()

        for check in self.checks:
            result = self._run_check(check)
            if check.fatal and not result.passed:
                raise PrivilegeError(result.message)
            report.checks.append(result)

        if report.failures:
            self.logger.error("Validation failed with errors:")
            for i, failure in enumerate(report.failures, 1):
                self.logger.error(f"  {i}. {failure.message}")
            raise ValidationFailedError(report)

        self.logger.info("All validations passed")
        return report

    def _run_check(self, check: Check) -> CheckResult:
        """Run one check, turning I/O and decoding errors into a failed result."""
        try:
            result = check.func(self.settings, self.logger)
        except (OSError, ValueError) as e:
            self.logger.debug("Check raised an error", extra={"fields": {"check": check.name}})
            result = CheckResult(
                name=check.name,
                passed=False,
                message=f"{check.name} check failed: {e}"
            )

        result.implemented = result.implemented and check.implemented
        return result
