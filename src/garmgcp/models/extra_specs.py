"""Extra specs accepted in a pool's extra_specs payload."""

import json
from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    StrictInt,
    StrictStr,
    ValidationError,
    root_validator,
    validator,
)

from garmgcp.defaults import (
    MAX_CUSTOM_LABELS,
    MAX_NETWORK_TAGS,
    is_valid_label_key,
    is_valid_label_value,
    is_valid_network_tag,
)
from garmgcp.errors import ExtraSpecsValidationError


# Published schema for operators. Must list the same properties as ExtraSpecs.
EXTRA_SPECS_SCHEMA: Dict[str, Any] = {
    "$schema": "http://cloudbase.it/garm-provider-gcp/schemas/extra_specs#",
    "type": "object",
    "description": "Schema defining supported extra specs for the Garm GCP Provider",
    "properties": {
        "disksize": {
            "type": "integer",
            "description": "The size of the root disk in GB. Default is 127 GB.",
        },
        "network_id": {
            "type": "string",
            "description": "The name of the network attached to the instance.",
        },
        "subnetwork_id": {
            "type": "string",
            "description": "The name of the subnetwork attached to the instance.",
        },
        "nic_type": {
            "type": "string",
            "description": "The type of NIC attached to the instance. Default is VIRTIO_NET.",
        },
        "custom_labels": {
            "type": "object",
            "description": (
                "Custom labels to be attached to the instance. Each label is a "
                "key-value pair where both key and value are strings."
            ),
            "additionalProperties": {"type": "string"},
        },
        "network_tags": {
            "type": "array",
            "description": "A list of network tags to be attached to the instance.",
            "items": {"type": "string"},
        },
        "source_snapshot": {
            "type": "string",
            "description": "The source snapshot to create this disk.",
        },
    },
    "additionalProperties": False,
}


class ExtraSpecs(BaseModel):
    """Validated overrides for a runner spec.

    Every field is optional. A missing, zero or empty value means the
    corresponding runner spec field keeps its default.
    """
    disksize: Optional[StrictInt] = None
    network_id: Optional[StrictStr] = None
    subnetwork_id: Optional[StrictStr] = None
    nic_type: Optional[StrictStr] = None
    custom_labels: Optional[Dict[StrictStr, StrictStr]] = None
    network_tags: Optional[List[StrictStr]] = None
    source_snapshot: Optional[StrictStr] = None

    class Config:
        """Pydantic config."""
        extra = "forbid"

    @validator("*", pre=True)
    def reject_null(cls, v):
        """JSON null is not a valid value for any property."""
        if v is None:
            raise ValueError("value must not be null")
        return v

    @root_validator(skip_on_failure=True)
    def validate_labels_and_tags(cls, values):
        """Check label and tag rules once every field has decoded.

        Labels are checked before tags, each in their given order.
        """
        labels = values.get("custom_labels") or {}
        if len(labels) > MAX_CUSTOM_LABELS:
            raise ValueError(f"custom labels cannot exceed {MAX_CUSTOM_LABELS} items")
        for key, value in labels.items():
            if not is_valid_label_key(key):
                raise ValueError(f"custom label key '{key}' does not match requirements")
            if not is_valid_label_value(value):
                raise ValueError(f"custom label value '{value}' does not match requirements")

        tags = values.get("network_tags") or []
        if len(tags) > MAX_NETWORK_TAGS:
            raise ValueError(f"network tags cannot exceed {MAX_NETWORK_TAGS} items")
        for tag in tags:
            if not is_valid_network_tag(tag):
                raise ValueError(f"network tag '{tag}' does not match requirements")
        return values


def parse_extra_specs(raw: Any) -> ExtraSpecs:
    """Decode and validate a raw extra specs payload.

    ``raw`` may be None, JSON text or bytes, or an already decoded mapping.
    An absent or empty payload yields an ExtraSpecs with nothing set.

    Raises:
        ExtraSpecsValidationError: if the payload is not a JSON object, has
            unknown or mistyped properties, or breaks a label or tag rule.
            Only the first violation is reported.
    """
    if raw is None:
        return ExtraSpecs()

    if isinstance(raw, (bytes, bytearray, str)):
        if not raw.strip():
            return ExtraSpecs()
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise ExtraSpecsValidationError(f"failed to decode extra specs: {e}") from e
    else:
        data = raw

    if not isinstance(data, dict):
        raise ExtraSpecsValidationError(
            f"extra specs must be a JSON object, got {type(data).__name__}"
        )

    try:
        return ExtraSpecs(**data)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "extra_specs"
        raise ExtraSpecsValidationError(
            f"failed to validate extra specs: {field}: {error['msg']}"
        ) from e
