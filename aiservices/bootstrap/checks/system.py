"""
System Validation

Checks host privileges, operating system release and CPU architecture.
"""

import logging
import os
import platform
from pathlib import Path
from typing import Optional

from ...config import BootstrapSettings
from ...version import parse_version
from ..models import CheckResult


def check_root(settings: BootstrapSettings, logger: logging.Logger) -> CheckResult:
    """Check the process runs with root privileges."""
    euid = os.geteuid()

    if euid == 0:
        logger.debug("Current user is root.")
        return CheckResult(
            name="Root Privileges",
            passed=True,
            message="Running as root"
        )

    logger.error("Current user is not root.")
    logger.debug("Effective User ID", extra={"fields": {"euid": euid}})
    return CheckResult(
        name="Root Privileges",
        passed=False,
        message="root privileges are required to run this command",
        details=[f"Effective user ID is {euid}"]
    )


def check_os(settings: BootstrapSettings, logger: logging.Logger) -> CheckResult:
    """
    Check the host runs a supported RHEL release.

    The release file is matched on substrings and ``KEY=value`` lines, so
    field order and unknown fields do not matter.
    """
    logger.debug("Validating operating system...")
    name = "Operating System"

    try:
        os_info = _read_text(settings.os_release_path)
    except OSError as e:
        return CheckResult(
            name=name,
            passed=False,
            message=f"unable to read {settings.os_release_path}: {_reason(e)}"
        )

    if not any(marker in os_info for marker in settings.distribution_markers):
        return CheckResult(
            name=name,
            passed=False,
            message="unsupported operating system: only RHEL is supported"
        )

    version = release_field(os_info, "VERSION_ID")
    if version is None:
        return CheckResult(
            name=name,
            passed=False,
            message="unable to determine OS version"
        )

    if parse_version(version) < parse_version(settings.min_os_version):
        return CheckResult(
            name=name,
            passed=False,
            message=(
                f"unsupported RHEL version: {version}. "
                f"Minimum required version is {settings.min_os_version}"
            )
        )

    logger.debug("Operating system is RHEL", extra={"fields": {"version": version}})
    return CheckResult(
        name=name,
        passed=True,
        message=f"RHEL {version}"
    )


def check_power_version(settings: BootstrapSettings, logger: logging.Logger) -> CheckResult:
    """Check the host is IBM Power (ppc64le) with the required CPU generation."""
    logger.debug("Validating IBM Power version...")
    name = "IBM Power Version"
    arch = settings.required_architecture
    generation = settings.required_cpu_generation

    machine = platform.machine()
    if machine != arch:
        return CheckResult(
            name=name,
            passed=False,
            message=(
                f"unsupported architecture: {machine}. "
                f"IBM Power architecture ({arch}) is required"
            )
        )

    try:
        cpuinfo = _read_text(settings.cpuinfo_path)
    except OSError as e:
        return CheckResult(
            name=name,
            passed=False,
            message=f"unable to read {settings.cpuinfo_path}: {_reason(e)}"
        )

    if generation not in cpuinfo:
        return CheckResult(
            name=name,
            passed=False,
            message=f"unsupported IBM Power version: {generation} is required"
        )

    logger.debug(f"System is running on IBM {generation} architecture")
    return CheckResult(
        name=name,
        passed=True,
        message=f"IBM {generation} ({machine})"
    )


def release_field(content: str, key: str) -> Optional[str]:
    """
    Get a field from os-release style content.

    Args:
        content: File content
        key: Field name, e.g. ``VERSION_ID``

    Returns:
        Value with surrounding quotes removed, or None if absent
    """
    for line in content.splitlines():
        field_name, sep, value = line.partition("=")
        if sep and field_name.strip() == key:
            return value.strip().strip('"').strip("'")
    return None


def _read_text(path: Path) -> str:
    return Path(path).read_text(errors="replace")


def _reason(error: OSError) -> str:
    return error.strerror or str(error)
