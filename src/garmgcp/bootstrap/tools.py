"""Runner agent download selection."""

import logging
from typing import Sequence

from garmgcp.errors import ToolResolutionError
from garmgcp.models.params import OSArch, OSType, RunnerApplicationDownload


logger = logging.getLogger(__name__)

# Names used by the runner download index.
_GITHUB_OS_NAMES = {
    OSType.LINUX: "linux",
    OSType.WINDOWS: "win",
}

_GITHUB_ARCH_NAMES = {
    OSArch.AMD64: "x64",
    OSArch.I386: "x86",
    OSArch.ARM64: "arm64",
    OSArch.ARM: "arm",
}


def resolve_tools(
    os_type: OSType,
    os_arch: OSArch,
    tools: Sequence[RunnerApplicationDownload],
) -> RunnerApplicationDownload:
    """Return the first download matching the OS type and architecture."""
    os_name = _GITHUB_OS_NAMES.get(os_type)
    if os_name is None:
        raise ToolResolutionError(f"unsupported OS type: {os_type.value}")

    arch_name = _GITHUB_ARCH_NAMES[os_arch]
    for tool in tools:
        if not tool.download_url:
            continue
        if tool.os == os_name and tool.architecture == arch_name:
            logger.debug(f"Selected runner download {tool.filename} for {os_name}/{arch_name}")
            return tool

    raise ToolResolutionError(
        f"failed to find tools for OS {os_type.value} and arch {os_arch.value}"
    )
