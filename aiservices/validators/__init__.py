"""
External Tool Validators

Checks for third-party tools that AI services depend on.
"""

from .podman import PodmanInfo, validate_podman

__all__ = [
    "PodmanInfo",
    "validate_podman",
]
