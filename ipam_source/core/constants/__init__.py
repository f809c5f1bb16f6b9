"""
Константы IPAM Source.

Импорт:
    from ipam_source.core.constants import normalize_mac_raw, LOCAL_SCOPE
    from ipam_source.core.constants.paths import default_interfaces_path
"""

# MAC
from .mac import (
    MAC_SEPARATORS,
    normalize_mac_raw,
    normalize_mac_ieee,
    macs_equal,
)

# Пути
from .paths import (
    DEFAULT_LINUX_INTERFACES_PATH,
    DEFAULT_WINDOWS_INTERFACES_PATH,
    default_interfaces_path,
)

# IPAM
from .ipam import (
    LOCAL_DEFAULT_ADDRESS_SPACE_ID,
    LOCAL_SCOPE,
    PRIORITY_PRIMARY,
    PRIORITY_SECONDARY,
    SOURCE_NAME,
    pool_priority,
)

__all__ = [
    "MAC_SEPARATORS",
    "normalize_mac_raw",
    "normalize_mac_ieee",
    "macs_equal",
    "DEFAULT_LINUX_INTERFACES_PATH",
    "DEFAULT_WINDOWS_INTERFACES_PATH",
    "default_interfaces_path",
    "LOCAL_DEFAULT_ADDRESS_SPACE_ID",
    "LOCAL_SCOPE",
    "PRIORITY_PRIMARY",
    "PRIORITY_SECONDARY",
    "SOURCE_NAME",
    "pool_priority",
]
