"""
Коллекторы входных данных.

- descriptors: файл описания интерфейсов от агента оркестратора
- host_interfaces: живые интерфейсы хоста (psutil)
"""

from .descriptors import DescriptorLoader, load_descriptors, parse_descriptors
from .host_interfaces import HostInterfaceCollector, collect_host_interfaces

__all__ = [
    "DescriptorLoader",
    "load_descriptors",
    "parse_descriptors",
    "HostInterfaceCollector",
    "collect_host_interfaces",
]
