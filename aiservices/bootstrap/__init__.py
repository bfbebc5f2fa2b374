"""
Bootstrap Validation Module

Validates host prerequisites before enabling AI services.
"""

from .models import Check, CheckResult, ValidationReport
from .runner import ValidationRunner

__all__ = [
    "Check",
    "CheckResult",
    "ValidationReport",
    "ValidationRunner",
]
