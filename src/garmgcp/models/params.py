"""Bootstrap request models."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class OSType(str, Enum):
    """Operating system family of a runner."""
    LINUX = "linux"
    WINDOWS = "windows"
    UNKNOWN = "unknown"


class OSArch(str, Enum):
    """CPU architecture of a runner."""
    AMD64 = "amd64"
    I386 = "i386"
    ARM64 = "arm64"
    ARM = "arm"


class RunnerApplicationDownload(BaseModel):
    """Download descriptor for the runner agent."""
    os: Optional[str] = None
    architecture: Optional[str] = None
    download_url: Optional[str] = None
    filename: Optional[str] = None
    sha256_checksum: Optional[str] = None
    temp_download_token: Optional[str] = None

    class Config:
        """Pydantic config."""
        extra = "ignore"


class BootstrapInstance(BaseModel):
    """Request to bootstrap a single runner instance."""
    name: str = Field(..., description="Runner display name")
    tools: List[RunnerApplicationDownload] = Field(default_factory=list)
    repo_url: str = Field(default="")
    callback_url: str = Field(default="")
    metadata_url: str = Field(default="")
    instance_token: str = Field(default="")
    ssh_keys: List[str] = Field(default_factory=list)
    ca_cert_bundle: Optional[str] = None
    github_runner_group: str = Field(default="")
    os_type: OSType = Field(default=OSType.LINUX)
    arch: OSArch = Field(default=OSArch.AMD64)
    flavor: str = Field(default="")
    image: str = Field(default="")
    labels: List[str] = Field(default_factory=list)
    pool_id: str = Field(default="")
    # Raw, untrusted payload. Parsed by garmgcp.models.extra_specs.
    extra_specs: Optional[Any] = None

    class Config:
        """Pydantic config."""
        extra = "ignore"
