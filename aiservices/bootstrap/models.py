"""
Validation Models

Shared data types for bootstrap validation.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List

from ..config import BootstrapSettings


@dataclass
class CheckResult:
    """Result of a single validation check."""
    name: str
    passed: bool
    message: str
    details: List[str] = field(default_factory=list)
    implemented: bool = True

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {self.name}: {self.message}"


CheckFunc = Callable[[BootstrapSettings, logging.Logger], CheckResult]


@dataclass(frozen=True)
class Check:
    """
    A named entry in the validation checklist.

    A fatal check stops the run on failure instead of being recorded.
    Checks with ``implemented=False`` are placeholders that always pass
    until real logic replaces them.
    """
    name: str
    func: CheckFunc
    fatal: bool = False
    implemented: bool = True


@dataclass
class ValidationReport:
    """Ordered results of one validation run."""
    checks: List[CheckResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """Check if every check passed."""
        return not self.failures

    @property
    def failures(self) -> List[CheckResult]:
        """Failed checks, in execution order."""
        return [c for c in self.checks if not c.passed]

    @property
    def stubs(self) -> List[CheckResult]:
        """Checks that are not implemented yet."""
        return [c for c in self.checks if not c.implemented]

    def summary(self) -> str:
        """Get summary string."""
        total = len(self.checks)
        passed = total - len(self.failures)
        status = "PASSED" if self.passed else "FAILED"
        return f"{status}: {passed}/{total} checks passed ({len(self.stubs)} not yet implemented)"
