"""
Типизированные исключения для IPAM Source.

Иерархия:
    IpamSourceError (базовый)
    ├── DescriptorError (файл описания интерфейсов)
    │   ├── DescriptorReadError (файл не читается)
    │   └── DescriptorParseError (невалидный JSON / структура)
    ├── HostInterfaceError (перечисление интерфейсов хоста)
    ├── SourceError (жизненный цикл источника)
    │   └── SourceNotStartedError (refresh без sink)
    ├── StoreError (хранилище адресных пространств)
    │   ├── AddressSpaceError (пространство не принадлежит sink)
    │   ├── PoolExistsError (пул с такой сетью уже есть)
    │   ├── AddressExistsError (адрес уже есть в пуле)
    │   └── InvalidAddressError (адрес вне сети пула)
    └── ConfigError (конфигурация)

Фатальные ошибки (прерывают refresh): DescriptorError, HostInterfaceError,
SourceError, AddressSpaceError. Остальные ошибки StoreError при создании
пулов и записей логируются и пропускаются.

Пример использования:
    from ipam_source.core.exceptions import DescriptorError, is_fatal

    try:
        source.refresh()
    except DescriptorError as e:
        logger.error(f"Файл интерфейсов: {e.path} - {e.message}")
"""

from typing import Optional, Any


class IpamSourceError(Exception):
    """
    Базовое исключение для всех ошибок IPAM Source.

    Attributes:
        message: Описание ошибки
        details: Дополнительные детали (dict)
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def to_dict(self) -> dict:
        """Сериализация для логов/отчётов."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


# === Descriptor Errors ===

class DescriptorError(IpamSourceError):
    """
    Ошибка файла описания интерфейсов.

    Attributes:
        path: Путь к файлу
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.path = path
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class DescriptorReadError(DescriptorError):
    """
    Файл не удалось открыть или прочитать.

    Пример:
        raise DescriptorReadError("No such file", path="/etc/kubernetes/interfaces.json")
    """
    pass


class DescriptorParseError(DescriptorError):
    """
    Содержимое файла не является корректным описанием интерфейсов.

    Attributes:
        position: Место ошибки (строка:колонка для JSON, путь поля для схемы)

    Пример:
        raise DescriptorParseError("Expecting value", path="interfaces.json", position="1:1")
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        position: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.position = position
        details = details or {}
        if position:
            details["position"] = position
        super().__init__(message, path, details)


# === Host Interface Errors ===

class HostInterfaceError(IpamSourceError):
    """
    Не удалось получить список интерфейсов хоста.

    Пример:
        raise HostInterfaceError("Permission denied")
    """
    pass


# === Source Errors ===

class SourceError(IpamSourceError):
    """
    Ошибка жизненного цикла источника.

    Attributes:
        source: Имя источника
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.source = source
        details = details or {}
        if source:
            details["source"] = source
        super().__init__(message, details)


class SourceNotStartedError(SourceError):
    """
    refresh() вызван до start(): sink не подключён.

    Пример:
        raise SourceNotStartedError("Sink is not attached", source="MAS")
    """
    pass


# === Store Errors ===

class StoreError(IpamSourceError):
    """
    Базовая ошибка хранилища адресных пространств.

    Attributes:
        key: Ключ объекта (id пространства, сеть пула, адрес)
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.key = key
        details = details or {}
        if key:
            details["key"] = key
        super().__init__(message, details)


class AddressSpaceError(StoreError):
    """
    Адресное пространство не может быть создано или активировано.

    Пример:
        raise AddressSpaceError("Address space is not owned by sink", key="local")
    """
    pass


class PoolExistsError(StoreError):
    """
    Пул с такой сетью уже существует в адресном пространстве.

    Пример:
        raise PoolExistsError("Address pool already exists", key="10.0.0.0/24")
    """
    pass


class AddressExistsError(StoreError):
    """
    Адрес уже записан в пул.

    Пример:
        raise AddressExistsError("Address already exists", key="10.0.0.5")
    """
    pass


class InvalidAddressError(StoreError):
    """
    Адрес не принадлежит сети пула.

    Пример:
        raise InvalidAddressError("Address is outside of pool", key="192.168.0.1")
    """
    pass


# === Config Errors ===

class ConfigError(IpamSourceError):
    """
    Ошибка конфигурации.

    Attributes:
        config_file: Путь к файлу конфигурации
        key: Ключ конфигурации с ошибкой

    Пример:
        raise ConfigError("Missing required field", config_file="config.yaml", key="source.file_path")
    """

    def __init__(
        self,
        message: str,
        config_file: Optional[str] = None,
        key: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.config_file = config_file
        self.key = key
        details = details or {}
        if config_file:
            details["config_file"] = config_file
        if key:
            details["key"] = key
        super().__init__(message, details)


# === Utility Functions ===

def format_error_for_log(error: Exception) -> str:
    """
    Форматирует ошибку для вывода в лог.

    Args:
        error: Исключение

    Returns:
        str: Отформатированная строка ошибки
    """
    if isinstance(error, IpamSourceError):
        return str(error)
    return f"{error.__class__.__name__}: {error}"


def is_fatal(error: Exception) -> bool:
    """
    Проверяет, прерывает ли ошибка refresh целиком.

    Отказы хранилища при создании пулов и записей не фатальны:
    такой пул или адрес пропускается.

    Args:
        error: Исключение

    Returns:
        bool: True если ошибка фатальная
    """
    if isinstance(error, AddressSpaceError):
        return True
    if isinstance(error, StoreError):
        return False
    return True
