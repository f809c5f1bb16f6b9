"""
IPAM Source - источник конфигурации IPAM из файла интерфейсов хоста.

Агент оркестратора пишет JSON-файл с интерфейсами хоста, их MAC-адресами
и подсетями. Модуль:
- Читает и валидирует файл интерфейсов
- Сопоставляет описания с интерфейсами хоста (по MAC, иначе по имени)
- Строит пулы адресов (приоритет, резерв адресов хоста, без повторов)
- Публикует локальное адресное пространство через sink

Примеры использования:
    # CLI
    python -m ipam_source refresh
    python -m ipam_source refresh --file ./interfaces.json --output pools.json
    python -m ipam_source show-interfaces

    # Python API
    from ipam_source import InterfaceFileSource, MemorySink, load_config

    source = InterfaceFileSource.from_config(load_config())
    source.start(MemorySink())
    result = source.refresh()
    print(result.stats())

Версия: 1.0.0
"""

__version__ = "1.0.0"

# Конфигурация
from .config import load_config, resolve_interfaces_path

# Коллекторы
from .collectors import DescriptorLoader, HostInterfaceCollector

# Domain
from .core.domain import AddressPoolPopulator, InterfaceMatcher

# Хранилище
from .store import AddressConfigSink, MemorySink

# Источник
from .sync import InterfaceFileSource, RefreshResult, SourceState

# Экспорт
from .exporters import AddressSpaceExporter

__all__ = [
    # Версия
    "__version__",
    # Config
    "load_config",
    "resolve_interfaces_path",
    # Collectors
    "DescriptorLoader",
    "HostInterfaceCollector",
    # Domain
    "AddressPoolPopulator",
    "InterfaceMatcher",
    # Store
    "AddressConfigSink",
    "MemorySink",
    # Source
    "InterfaceFileSource",
    "RefreshResult",
    "SourceState",
    # Exporters
    "AddressSpaceExporter",
]
