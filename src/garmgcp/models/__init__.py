"""Pydantic models for configuration and validation."""

from garmgcp.models.config import ProviderConfig, GCPConfig, LoggingConfig
from garmgcp.models.extra_specs import ExtraSpecs, EXTRA_SPECS_SCHEMA, parse_extra_specs
from garmgcp.models.params import (
    BootstrapInstance,
    OSArch,
    OSType,
    RunnerApplicationDownload,
)
from garmgcp.models.runner import RunnerSpec

__all__ = [
    "ProviderConfig",
    "GCPConfig",
    "LoggingConfig",
    "ExtraSpecs",
    "EXTRA_SPECS_SCHEMA",
    "parse_extra_specs",
    "BootstrapInstance",
    "OSArch",
    "OSType",
    "RunnerApplicationDownload",
    "RunnerSpec",
]
