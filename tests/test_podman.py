"""Tests for the Podman validator and the container runtime check."""

import subprocess

import pytest

from aiservices.bootstrap.checks.runtime import check_container_runtime
from aiservices.config import PodmanSettings
from aiservices.errors import PodmanError
from aiservices.validators import validate_podman
from tests.conftest import podman_output, write_executable


class TestValidatePodman:

    def test_returns_version_info(self, fake_podman):
        info = validate_podman()
        assert info.version == "5.4.0"
        assert info.api_version == "5.4.0"
        assert info.os_arch == "linux/ppc64le"

    def test_not_installed(self, fake_podman):
        fake_podman["installed"] = False
        with pytest.raises(PodmanError, match="podman is not installed"):
            validate_podman()

    def test_version_too_old(self, fake_podman):
        fake_podman["stdout"] = podman_output("4.4.1")
        with pytest.raises(PodmanError, match="podman version 4.4.1 is not supported"):
            validate_podman()

    def test_minimum_version_is_inclusive(self, fake_podman):
        fake_podman["stdout"] = podman_output("4.9.0")
        assert validate_podman(PodmanSettings(min_version="4.9.0")).version == "4.9.0"

    def test_command_failure(self, fake_podman):
        fake_podman["returncode"] = 125
        fake_podman["stderr"] = "Error: cannot connect to podman socket"
        with pytest.raises(PodmanError, match="cannot connect to podman socket"):
            validate_podman()

    def test_unparsable_output(self, fake_podman):
        fake_podman["stdout"] = "podman version 5.4.0"
        with pytest.raises(PodmanError, match="unable to parse"):
            validate_podman()

    def test_missing_client_block(self, fake_podman):
        fake_podman["stdout"] = '{"Server": {"Version": "5.4.0"}}'
        with pytest.raises(PodmanError, match="no client version"):
            validate_podman()

    def test_timeout(self, fake_podman, monkeypatch):
        def slow_run(cmd, **kwargs):
            raise subprocess.TimeoutExpired(cmd, kwargs.get("timeout"))

        monkeypatch.setattr("subprocess.run", slow_run)
        with pytest.raises(PodmanError, match="timed out"):
            validate_podman(PodmanSettings(timeout=2))

    def test_custom_binary(self, fake_podman, monkeypatch):
        calls = []

        def recording_run(cmd, **kwargs):
            calls.append(cmd)
            return subprocess.CompletedProcess(cmd, 0, stdout=podman_output(), stderr="")

        monkeypatch.setattr("subprocess.run", recording_run)
        validate_podman(PodmanSettings(binary="podman-remote"))
        assert calls == [["/usr/bin/podman-remote", "version", "--format", "json"]]


class TestCheckContainerRuntime:

    def test_passes(self, fake_podman, settings, logger):
        result = check_container_runtime(settings, logger)
        assert result.passed
        assert result.message == "podman 5.4.0"

    def test_wraps_validator_error(self, fake_podman, settings, logger):
        fake_podman["installed"] = False
        result = check_container_runtime(settings, logger)
        assert not result.passed
        assert result.message == "podman validation failed: podman is not installed"


class TestValidatePodmanBinary:
    """Runs a real executable so output decoding is exercised."""

    def test_reads_version_from_binary(self, tmp_path):
        binary = write_executable(
            tmp_path,
            "cat <<'JSON'\n"
            '{"Client": {"Version": "5.4.0", "APIVersion": "5.4.0"}}\n'
            "JSON\n"
        )
        assert validate_podman(PodmanSettings(binary=binary)).version == "5.4.0"

    def test_undecodable_stderr(self, tmp_path):
        binary = write_executable(tmp_path, "printf '\\377\\376 socket error' >&2\nexit 125\n")
        with pytest.raises(PodmanError, match="socket error"):
            validate_podman(PodmanSettings(binary=binary))

    def test_undecodable_stdout(self, tmp_path):
        binary = write_executable(tmp_path, "printf '\\377\\376'\n")
        with pytest.raises(PodmanError, match="unable to parse"):
            validate_podman(PodmanSettings(binary=binary))
