"""
Bootstrap Check Implementations

The default checklist, in the order it runs.
"""

from ..models import Check
from .placeholders import check_ltc_repository, check_rhaiis_license, check_rhn_registration
from .runtime import check_container_runtime
from .system import check_os, check_power_version, check_root

DEFAULT_CHECKS = [
    Check("Root Privileges", check_root, fatal=True),
    Check("Operating System", check_os),
    Check("RHN Registration", check_rhn_registration, implemented=False),
    Check("LTC RPM Repository", check_ltc_repository, implemented=False),
    Check("Podman", check_container_runtime),
    Check("IBM Power Version", check_power_version),
    Check("RHAIIS License", check_rhaiis_license, implemented=False),
]

__all__ = [
    "DEFAULT_CHECKS",
    "check_container_runtime",
    "check_ltc_repository",
    "check_os",
    "check_power_version",
    "check_rhaiis_license",
    "check_rhn_registration",
    "check_root",
]
