"""
Podman Validation

Verifies that Podman is installed and recent enough to run AI services.
"""

import json
import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional

from ..config import PodmanSettings
from ..errors import PodmanError
from ..version import version_at_least


@dataclass
class PodmanInfo:
    """Version details reported by ``podman version``."""
    version: str
    api_version: Optional[str] = None
    os_arch: Optional[str] = None


def validate_podman(settings: Optional[PodmanSettings] = None) -> PodmanInfo:
    """
    Validate the Podman installation.

    Args:
        settings: Podman requirements (defaults apply when omitted)

    Returns:
        PodmanInfo for the installed client

    Raises:
        PodmanError: If podman is missing, fails to run, or is too old
    """
    settings = settings or PodmanSettings()

    binary = shutil.which(settings.binary)
    if not binary:
        raise PodmanError(f"{settings.binary} is not installed")

    info = _read_version(binary, settings.timeout)

    if not version_at_least(info.version, settings.min_version, width=3):
        raise PodmanError(
            f"podman version {info.version} is not supported, "
            f"minimum required version is {settings.min_version}"
        )

    return info


def _read_version(binary: str, timeout: float) -> PodmanInfo:
    """Run ``podman version`` and parse the client block."""
    try:
        result = subprocess.run(
            [binary, "version", "--format", "json"],
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout
        )
    except subprocess.TimeoutExpired:
        raise PodmanError(f"podman version timed out after {timeout:g}s")
    except OSError as e:
        raise PodmanError(f"failed to run {binary}: {e}")

    if result.returncode != 0:
        stderr = result.stderr.strip() or f"exit status {result.returncode}"
        raise PodmanError(f"podman version failed: {stderr}")

    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise PodmanError(f"unable to parse podman version output: {e}")

    client = data.get("Client") if isinstance(data, dict) else None
    if not isinstance(client, dict) or not client.get("Version"):
        raise PodmanError("podman version output has no client version")

    return PodmanInfo(
        version=str(client["Version"]),
        api_version=client.get("APIVersion"),
        os_arch=client.get("OsArch"),
    )
