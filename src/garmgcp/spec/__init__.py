"""Runner spec resolution."""

from garmgcp.spec.resolver import (
    LINUX_SETUP_COMMANDS,
    SpecResolver,
    compose_user_data,
    get_runner_spec_from_bootstrap_params,
    splice_setup_commands,
)

__all__ = [
    "LINUX_SETUP_COMMANDS",
    "SpecResolver",
    "compose_user_data",
    "get_runner_spec_from_bootstrap_params",
    "splice_setup_commands",
]
