"""
Хранилище адресных пространств.

- base: интерфейс sink, через который источник публикует результат
- memory: реализация в памяти (CLI, тесты)
"""

from .base import AddressConfigSink
from .memory import AddressPool, AddressRecord, AddressSpace, MemorySink

__all__ = [
    "AddressConfigSink",
    "AddressPool",
    "AddressRecord",
    "AddressSpace",
    "MemorySink",
]
