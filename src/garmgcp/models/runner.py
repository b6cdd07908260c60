"""Runner specification model."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from garmgcp.defaults import DEFAULT_DISK_SIZE_GB, DEFAULT_NIC_TYPE
from garmgcp.errors import SpecificationIncompleteError
from garmgcp.models.extra_specs import ExtraSpecs
from garmgcp.models.params import BootstrapInstance, RunnerApplicationDownload


class RunnerSpec(BaseModel):
    """Fully resolved specification for one runner instance."""
    zone: str = Field(default="")
    tools: RunnerApplicationDownload = Field(default_factory=RunnerApplicationDownload)
    bootstrap_params: BootstrapInstance
    network_id: str = Field(default="")
    subnetwork_id: str = Field(default="")
    controller_id: str = Field(default="")
    nic_type: str = Field(default=DEFAULT_NIC_TYPE)
    disk_size: int = Field(default=DEFAULT_DISK_SIZE_GB, description="Root disk size in GB")
    custom_labels: Dict[str, str] = Field(default_factory=dict)
    network_tags: Optional[List[str]] = None
    source_snapshot: Optional[str] = None

    class Config:
        """Pydantic config."""
        extra = "ignore"

    def merge_extra_specs(self, extra_specs: ExtraSpecs) -> None:
        """Apply extra specs overrides in place.

        Only set, non-empty and non-zero values win. Custom labels are merged
        key by key, so an override may shadow one of the reserved labels.
        Network tags replace the existing list.
        """
        if extra_specs.network_id:
            self.network_id = extra_specs.network_id
        if extra_specs.subnetwork_id:
            self.subnetwork_id = extra_specs.subnetwork_id
        if extra_specs.disksize is not None and extra_specs.disksize > 0:
            self.disk_size = extra_specs.disksize
        if extra_specs.nic_type:
            self.nic_type = extra_specs.nic_type
        if extra_specs.custom_labels:
            self.custom_labels.update(extra_specs.custom_labels)
        if extra_specs.network_tags:
            self.network_tags = list(extra_specs.network_tags)
        if extra_specs.source_snapshot:
            self.source_snapshot = extra_specs.source_snapshot

    def validate_spec(self) -> None:
        """Ensure fields needed to create the instance are set."""
        if not self.zone:
            raise SpecificationIncompleteError("missing zone")
        if not self.network_id:
            raise SpecificationIncompleteError("missing network id")
        if not self.subnetwork_id:
            raise SpecificationIncompleteError("missing subnetwork id")
        if not self.controller_id:
            raise SpecificationIncompleteError("missing controller id")
        if not self.nic_type:
            raise SpecificationIncompleteError("missing nic type")
