"""Shared fixtures for bootstrap validation tests."""

import json
import logging
import subprocess

import pytest

from aiservices.config import BootstrapSettings

RHEL_96 = """NAME="Red Hat Enterprise Linux"
VERSION="9.6 (Plow)"
ID="rhel"
ID_LIKE="fedora"
VERSION_ID="9.6"
PLATFORM_ID="platform:el9"
PRETTY_NAME="Red Hat Enterprise Linux 9.6 (Plow)"
"""

POWER11_CPUINFO = """processor\t: 0
cpu\t\t: POWER11 (architected), altivec supported
clock\t\t: 3900.000000MHz
revision\t: 2.0 (pvr 0082 0200)

timebase\t: 512000000
platform\t: pSeries
model\t\t: IBM,9080-HEX
"""

POWER10_CPUINFO = POWER11_CPUINFO.replace("POWER11", "POWER10")


def podman_output(version="5.4.0"):
    return json.dumps({
        "Client": {
            "APIVersion": version,
            "Version": version,
            "OsArch": "linux/ppc64le",
        }
    })


@pytest.fixture
def logger():
    log = logging.getLogger("tests.bootstrap")
    log.setLevel(logging.DEBUG)
    return log


@pytest.fixture
def host_files(tmp_path):
    """Write os-release and cpuinfo files describing a supported host."""
    os_release = tmp_path / "os-release"
    cpuinfo = tmp_path / "cpuinfo"
    os_release.write_text(RHEL_96)
    cpuinfo.write_text(POWER11_CPUINFO)
    return os_release, cpuinfo


@pytest.fixture
def settings(host_files):
    os_release, cpuinfo = host_files
    return BootstrapSettings(os_release_path=os_release, cpuinfo_path=cpuinfo)


@pytest.fixture
def fake_podman(monkeypatch):
    """Install a fake podman binary; returns a dict to tweak its behaviour."""
    state = {"installed": True, "stdout": podman_output(), "returncode": 0, "stderr": ""}

    def fake_which(name):
        return f"/usr/bin/{name}" if state["installed"] else None

    def fake_run(cmd, **kwargs):
        return subprocess.CompletedProcess(
            cmd, state["returncode"], stdout=state["stdout"], stderr=state["stderr"]
        )

    monkeypatch.setattr("shutil.which", fake_which)
    monkeypatch.setattr("subprocess.run", fake_run)
    return state


@pytest.fixture
def power11_host(monkeypatch, fake_podman):
    """A root shell on a ppc64le POWER11 host with podman installed."""
    monkeypatch.setattr("os.geteuid", lambda: 0)
    monkeypatch.setattr("platform.machine", lambda: "ppc64le")
    return fake_podman


def write_executable(directory, body, name="podman"):
    """Write a shell script standing in for a real binary."""
    path = directory / name
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(0o755)
    return str(path)
