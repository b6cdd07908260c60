"""
garmgcp - runner specifications for GARM on Google Compute Engine.

Turns a GARM bootstrap request into a validated instance specification and
renders the startup script that registers the instance as a runner.
"""

__version__ = "0.1.0"

# Re-export key components for easier access
from garmgcp.models.config import ProviderConfig
from garmgcp.models.extra_specs import ExtraSpecs, parse_extra_specs
from garmgcp.models.params import BootstrapInstance
from garmgcp.models.runner import RunnerSpec
from garmgcp.spec.resolver import SpecResolver

__all__ = [
    "BootstrapInstance",
    "ExtraSpecs",
    "ProviderConfig",
    "RunnerSpec",
    "SpecResolver",
    "parse_extra_specs",
]
