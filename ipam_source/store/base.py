"""
Интерфейс хранилища адресных пространств (sink).

Источник конфигурации не владеет адресными пространствами: он создаёт их
через sink, наполняет пулами и активирует. Реализация хранилища может быть
любой, если она предоставляет эти операции.

Пример реализации:
    class MySink(AddressConfigSink):
        def new_address_space(self, space_id, scope):
            ...

        def set_address_space(self, space):
            ...
"""

from abc import ABC, abstractmethod
from typing import Any


class AddressConfigSink(ABC):
    """
    Абстрактный sink для результатов источника конфигурации.

    new_address_space() возвращает объект адресного пространства, у которого
    есть new_address_pool(interface_name, priority, network); у пула есть
    new_address_record(address).
    """

    @abstractmethod
    def new_address_space(self, space_id: str, scope: int) -> Any:
        """
        Создаёт пустое адресное пространство.

        Args:
            space_id: Идентификатор пространства
            scope: Область видимости (LOCAL_SCOPE)

        Returns:
            Адресное пространство

        Raises:
            AddressSpaceError: Пространство не может быть создано
        """

    @abstractmethod
    def set_address_space(self, space: Any) -> None:
        """
        Делает пространство активным (каноническим для своего id).

        Raises:
            AddressSpaceError: Пространство не может быть активировано
        """
