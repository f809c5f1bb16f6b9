"""
Экспорт адресных пространств.
"""

from .json_exporter import AddressSpaceExporter, snapshot_address_space

__all__ = [
    "AddressSpaceExporter",
    "snapshot_address_space",
]
