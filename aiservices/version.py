"""
Version Helpers

Parsing and comparison of dotted numeric versions such as ``9.6`` or ``5.4.2``.
"""

import re
from typing import Tuple

_DOTTED = re.compile(r"^\d+(\.\d+)*$")


def is_dotted_version(text: str) -> bool:
    """Check that text is a purely numeric dotted version."""
    return bool(_DOTTED.match(text.strip()))


def parse_version(text: str, width: int = 2) -> Tuple[int, ...]:
    """
    Parse a dotted version into a fixed-width tuple of integers.

    Missing components default to 0 and components that are not numbers
    count as 0, so ``"9"`` becomes ``(9, 0)`` and ``"9.6beta"`` becomes
    ``(9, 0)``.

    Args:
        text: Version string
        width: Number of components to keep

    Returns:
        Tuple of ``width`` integers
    """
    parts = text.strip().split(".")
    numbers = []

    for i in range(width):
        if i < len(parts):
            part = parts[i].strip()
            numbers.append(int(part) if part.isdecimal() else 0)
        else:
            numbers.append(0)

    return tuple(numbers)


def version_at_least(version: str, minimum: str, width: int = 2) -> bool:
    """Compare two dotted versions numerically, component by component."""
    return parse_version(version, width) >= parse_version(minimum, width)
