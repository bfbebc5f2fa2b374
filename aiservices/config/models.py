"""
Pydantic models for bootstrap configuration.

Every field has a default, so an empty configuration reproduces the
built-in prerequisites for AI services hosts.
"""

from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, field_validator

from ..version import is_dotted_version


DEFAULT_DISTRIBUTION_MARKERS = [
    "Red Hat Enterprise Linux",
    'ID="rhel"',
    "ID=rhel",
]


class PodmanSettings(BaseModel):
    """Container runtime requirements."""
    binary: str = "podman"
    min_version: str = "4.9.0"
    timeout: float = Field(default=10.0, gt=0)

    @field_validator("min_version")
    @classmethod
    def validate_min_version(cls, v: str) -> str:
        if not is_dotted_version(v):
            raise ValueError(f"Invalid version: {v}")
        return v.strip()


class BootstrapSettings(BaseModel):
    """Host prerequisites checked by ``bootstrap validate``."""
    os_release_path: Path = Path("/etc/os-release")
    cpuinfo_path: Path = Path("/proc/cpuinfo")
    distribution_markers: List[str] = Field(
        default_factory=lambda: list(DEFAULT_DISTRIBUTION_MARKERS),
        min_length=1,
    )
    min_os_version: str = "9.6"
    required_architecture: str = "ppc64le"
    required_cpu_generation: str = "POWER11"
    podman: PodmanSettings = Field(default_factory=PodmanSettings)

    @field_validator("min_os_version")
    @classmethod
    def validate_min_os_version(cls, v: str) -> str:
        """Minimum OS version must be numeric, e.g. 9.6."""
        if not is_dotted_version(v):
            raise ValueError(f"Invalid version: {v}")
        return v.strip()
