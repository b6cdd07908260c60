"""Default collaborators used to bootstrap runners."""

from garmgcp.bootstrap.install_script import get_runner_install_script
from garmgcp.bootstrap.tools import resolve_tools

__all__ = [
    "get_runner_install_script",
    "resolve_tools",
]
