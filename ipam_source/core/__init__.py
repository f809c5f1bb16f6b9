"""
Core модули IPAM Source.

Содержит:
- models: описания интерфейсов и интерфейсы хоста
- domain: сопоставление интерфейсов и построение пулов
- RunContext: Контекст выполнения для отслеживания запусков
- Structured Logging: JSON/Human-readable логирование
- exceptions: типизированные исключения
- constants: Константы и нормализация MAC
"""

from .context import RunContext, get_current_context, set_current_context
from .logging import (
    get_logger,
    setup_logging,
    setup_logging_from_config,
    StructuredLogger,
    JSONFormatter,
    HumanFormatter,
    LogConfig,
    RotationType,
)
from .exceptions import (
    IpamSourceError,
    DescriptorError,
    DescriptorReadError,
    DescriptorParseError,
    HostInterfaceError,
    SourceError,
    SourceNotStartedError,
    StoreError,
    AddressSpaceError,
    PoolExistsError,
    AddressExistsError,
    InvalidAddressError,
    ConfigError,
    format_error_for_log,
    is_fatal,
)
from .models import (
    AddressDescriptor,
    SubnetDescriptor,
    InterfaceDescriptor,
    HostInterface,
)

__all__ = [
    # Context
    "RunContext",
    "get_current_context",
    "set_current_context",
    # Logging
    "get_logger",
    "setup_logging",
    "setup_logging_from_config",
    "StructuredLogger",
    "JSONFormatter",
    "HumanFormatter",
    "LogConfig",
    "RotationType",
    # Exceptions
    "IpamSourceError",
    "DescriptorError",
    "DescriptorReadError",
    "DescriptorParseError",
    "HostInterfaceError",
    "SourceError",
    "SourceNotStartedError",
    "StoreError",
    "AddressSpaceError",
    "PoolExistsError",
    "AddressExistsError",
    "InvalidAddressError",
    "ConfigError",
    "format_error_for_log",
    "is_fatal",
    # Models
    "AddressDescriptor",
    "SubnetDescriptor",
    "InterfaceDescriptor",
    "HostInterface",
]
