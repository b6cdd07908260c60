"""Runner install script generation."""

import logging

from garmgcp.defaults import DEFAULT_USER
from garmgcp.errors import UnsupportedOSError
from garmgcp.models.params import BootstrapInstance, OSType, RunnerApplicationDownload
from garmgcp.utils.templates import render_template


logger = logging.getLogger(__name__)


LINUX_INSTALL_TEMPLATE = """#!/bin/bash

set -e
set -o pipefail

CALLBACK_URL="{{ callback_url }}"
METADATA_URL="{{ metadata_url }}"
BEARER_TOKEN="{{ instance_token }}"
RUN_HOME="/home/{{ run_as_user }}/actions-runner"

function call() {
	PAYLOAD="$1"
	[ -z "$CALLBACK_URL" ] && return 0
	curl --retry 5 --retry-delay 5 --retry-connrefused --fail -s -X POST -d "${PAYLOAD}" \\
		-H 'Accept: application/json' -H "Authorization: Bearer ${BEARER_TOKEN}" \\
		"${CALLBACK_URL}" || echo "failed to call home: exit code ($?)"
}

function sendStatus() {
	call "{\\"status\\": \\"installing\\", \\"message\\": \\"$1\\"}"
}

function success() {
	call "{\\"status\\": \\"idle\\", \\"message\\": \\"$1\\"}"
}

function fail() {
	call "{\\"status\\": \\"failed\\", \\"message\\": \\"$1\\"}"
	exit 1
}

sendStatus "downloading tools from {{ download_url }}"
TEMP_TOKEN=""
if [ -n "{{ temp_download_token }}" ]; then
	TEMP_TOKEN="Authorization: Bearer {{ temp_download_token }}"
fi
curl --retry 5 --retry-delay 5 --retry-connrefused --fail -L -H "${TEMP_TOKEN}" \\
	-o "/home/{{ run_as_user }}/{{ filename }}" "{{ download_url }}" || fail "failed to download tools"
{% if sha256_checksum %}
echo "{{ sha256_checksum }}  /home/{{ run_as_user }}/{{ filename }}" | sha256sum -c - || fail "checksum mismatch"
{% endif %}
mkdir -p "$RUN_HOME" || fail "failed to create actions-runner folder"

sendStatus "extracting runner"
tar xf "/home/{{ run_as_user }}/{{ filename }}" -C "$RUN_HOME" || fail "failed to extract runner"
chown {{ run_as_user }}:{{ run_as_user }} -R "$RUN_HOME" || fail "failed to change owner"

sendStatus "configuring runner"
REG_TOKEN=$(curl --retry 5 --retry-delay 5 --retry-connrefused --fail -s \\
	-H "Authorization: Bearer ${BEARER_TOKEN}" "${METADATA_URL}/runner-registration-token/") || fail "failed to get runner registration token"
cd "$RUN_HOME"
sudo -u {{ run_as_user }} -- ./config.sh --unattended --ephemeral \\
	--url "{{ repo_url }}" --token "$REG_TOKEN" --name "{{ runner_name }}" \\
	{% if runner_group %}--runnergroup "{{ runner_group }}" {% endif %}--labels "{{ labels }}" || fail "failed to configure runner"

sendStatus "installing runner service"
./svc.sh install {{ run_as_user }} || fail "failed to install service"
./svc.sh start || fail "failed to start service"

success "runner successfully installed"
"""


WINDOWS_INSTALL_TEMPLATE = """#ps1_sysnative
Param(
	[Parameter(Mandatory=$false)]
	[string]$Token="{{ instance_token }}"
)

$ErrorActionPreference="Stop"

function Update-GarmStatus() {
	param (
		[parameter(Mandatory=$true)]
		[string]$Message,
		[parameter(Mandatory=$false)]
		[string]$Status="installing"
	)
	if (-not "{{ callback_url }}") { return }
	$body = @{
		"status"=$Status
		"message"=$Message
	} | ConvertTo-Json
	Invoke-RestMethod -Uri "{{ callback_url }}" -Method Post -Body $body `
		-Headers @{"Authorization"="Bearer $Token"; "Accept"="application/json"}
}

try {
	$runnerDir = "C:\\actions-runner"
	mkdir $runnerDir -Force | Out-Null
	$downloadPath = Join-Path $env:TMP "{{ filename }}"

	Update-GarmStatus -Message "downloading tools from {{ download_url }}"
	$headers = @{}
	if ("{{ temp_download_token }}") {
		$headers["Authorization"] = "Bearer {{ temp_download_token }}"
	}
	Invoke-WebRequest -UseBasicParsing -Uri "{{ download_url }}" -Headers $headers -OutFile $downloadPath
{% if sha256_checksum %}
	$hash = (Get-FileHash -Algorithm SHA256 -Path $downloadPath).Hash.ToLower()
	if ($hash -ne "{{ sha256_checksum }}") {
		Throw "checksum mismatch"
	}
{% endif %}
	Update-GarmStatus -Message "extracting runner"
	Add-Type -AssemblyName System.IO.Compression.FileSystem
	[System.IO.Compression.ZipFile]::ExtractToDirectory($downloadPath, $runnerDir)

	Update-GarmStatus -Message "configuring runner"
	$regToken = Invoke-RestMethod -Uri "{{ metadata_url }}/runner-registration-token/" `
		-Headers @{"Authorization"="Bearer $Token"}
	Set-Location $runnerDir
	./config.cmd --unattended --ephemeral --url "{{ repo_url }}" --token $regToken `
		--name "{{ runner_name }}" {% if runner_group %}--runnergroup "{{ runner_group }}" {% endif %}--labels "{{ labels }}" --runasservice

	Update-GarmStatus -Message "runner successfully installed" -Status "idle"
} catch {
	Update-GarmStatus -Message $_ -Status "failed"
	Throw $_
}
"""


_TEMPLATES = {
    OSType.LINUX: LINUX_INSTALL_TEMPLATE,
    OSType.WINDOWS: WINDOWS_INSTALL_TEMPLATE,
}


def get_runner_install_script(
    bootstrap: BootstrapInstance,
    tools: RunnerApplicationDownload,
    runner_name: str,
) -> bytes:
    """Render the OS native runner install script."""
    template = _TEMPLATES.get(bootstrap.os_type)
    if template is None:
        raise UnsupportedOSError(
            f"no install script for OS type: {bootstrap.os_type.value}"
        )

    context = {
        "callback_url": bootstrap.callback_url,
        "metadata_url": bootstrap.metadata_url,
        "instance_token": bootstrap.instance_token,
        "repo_url": bootstrap.repo_url,
        "runner_group": bootstrap.github_runner_group,
        "labels": ",".join(bootstrap.labels),
        "runner_name": runner_name,
        "run_as_user": DEFAULT_USER,
        "download_url": tools.download_url or "",
        "filename": tools.filename or "",
        "sha256_checksum": tools.sha256_checksum or "",
        "temp_download_token": tools.temp_download_token or "",
    }

    logger.debug(f"Rendering {bootstrap.os_type.value} install script for {runner_name}")
    return render_template(template, **context).encode("utf-8")
