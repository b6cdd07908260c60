"""Process-wide defaults and validation patterns."""

import re
import unicodedata

DEFAULT_DISK_SIZE_GB = 127
DEFAULT_NIC_TYPE = "VIRTIO_NET"

# Service account created on Linux runners.
DEFAULT_USER = "runner"

# Reserved label keys seeded on every runner.
GARM_POOL_ID_LABEL = "garmpoolid"
GARM_CONTROLLER_ID_LABEL = "garmcontrollerid"
OS_TYPE_LABEL = "ostype"

MAX_CUSTOM_LABELS = 61
MAX_NETWORK_TAGS = 64

# Label patterns are matched against lowercase-folded text, see
# fold_lowercase(). Every Unicode lowercase letter becomes "a".
CUSTOM_LABEL_KEY_PATTERN = re.compile(r"[a-z][a-z0-9_-]{0,62}")
CUSTOM_LABEL_VALUE_PATTERN = re.compile(r"[a-z0-9_-]{0,63}")
NETWORK_TAG_PATTERN = re.compile(r"[a-z][a-z0-9-]{0,61}[a-z0-9]")


def fold_lowercase(text: str) -> str:
    """Replace every lowercase letter (category Ll) with "a"."""
    return "".join("a" if unicodedata.category(ch) == "Ll" else ch for ch in text)


def is_valid_label_key(key: str) -> bool:
    return CUSTOM_LABEL_KEY_PATTERN.fullmatch(fold_lowercase(key)) is not None


def is_valid_label_value(value: str) -> bool:
    return CUSTOM_LABEL_VALUE_PATTERN.fullmatch(fold_lowercase(value)) is not None


def is_valid_network_tag(tag: str) -> bool:
    return NETWORK_TAG_PATTERN.fullmatch(tag) is not None
