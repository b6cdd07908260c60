"""Configuration models."""

from typing import Optional
from pydantic import BaseModel, Field, validator


class GCPConfig(BaseModel):
    """Operator defaults for the target GCP project."""
    project_id: str = Field(default="")
    zone: str = Field(default="", description="Zone where runners are created")
    network_id: str = Field(default="", description="Default network for runners")
    subnetwork_id: str = Field(default="", description="Default subnetwork for runners")
    credentials_file: Optional[str] = None


class LoggingConfig(BaseModel):
    """Logging configuration."""
    log_level: str = Field(default="INFO")

    @validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()


class ProviderConfig(BaseModel):
    """Main configuration model."""
    gcp: GCPConfig = Field(default_factory=GCPConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    class Config:
        """Pydantic config."""
        extra = "ignore"
