"""Tests for runner install script generation."""

import pytest

from garmgcp.bootstrap.install_script import get_runner_install_script
from garmgcp.errors import UnsupportedOSError
from garmgcp.models.params import BootstrapInstance, RunnerApplicationDownload


@pytest.fixture
def tools():
    return RunnerApplicationDownload(
        os="linux",
        architecture="x64",
        download_url="https://example.com/actions-runner-linux-x64-2.316.0.tar.gz",
        filename="actions-runner-linux-x64-2.316.0.tar.gz",
    )


def _bootstrap(os_type="linux", **kwargs):
    params = {
        "name": "garm-runner-1",
        "os_type": os_type,
        "repo_url": "https://github.com/org/repo",
        "callback_url": "https://garm.example.com/api/v1/callbacks",
        "metadata_url": "https://garm.example.com/api/v1/metadata",
        "instance_token": "secret-token",
        "labels": ["gcp", "ubuntu"],
    }
    params.update(kwargs)
    return BootstrapInstance(**params)


class TestLinuxInstallScript:
    """Test the bash install script."""

    def test_shebang_first_line(self, tools):
        script = get_runner_install_script(_bootstrap(), tools, "garm-runner-1")

        assert isinstance(script, bytes)
        assert script.decode().split("\n")[0] == "#!/bin/bash"

    def test_context_rendered(self, tools):
        script = get_runner_install_script(_bootstrap(), tools, "display-name").decode()

        assert tools.download_url in script
        assert "/home/runner/actions-runner-linux-x64-2.316.0.tar.gz" in script
        assert '--name "display-name"' in script
        assert '--labels "gcp,ubuntu"' in script
        assert 'BEARER_TOKEN="secret-token"' in script
        assert "--url \"https://github.com/org/repo\"" in script
        assert "sha256sum" not in script
        assert "--runnergroup" not in script

    def test_checksum_and_group(self, tools):
        tools.sha256_checksum = "abc123"
        bootstrap = _bootstrap(github_runner_group="ci")

        script = get_runner_install_script(bootstrap, tools, "garm-runner-1").decode()

        assert 'echo "abc123  /home/runner/' in script
        assert '--runnergroup "ci"' in script


class TestWindowsInstallScript:
    """Test the PowerShell install script."""

    def test_header(self, tools):
        script = get_runner_install_script(_bootstrap("windows"), tools, "garm-runner-1").decode()

        assert script.startswith("#ps1_sysnative\n")
        assert tools.download_url in script
        assert '--name "garm-runner-1"' in script
        assert "C:\\actions-runner" in script


def test_unsupported_os(tools):
    with pytest.raises(UnsupportedOSError):
        get_runner_install_script(_bootstrap("unknown"), tools, "garm-runner-1")
