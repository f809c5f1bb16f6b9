"""
Сопоставление интерфейсов из файла описания с интерфейсами хоста.

Правила:
- MAC задан: ищется первый интерфейс хоста с таким же hardware address
  (без учёта регистра и разделителей). Имя при этом не проверяется,
  даже если MAC невалидный.
- MAC не задан: ищется первый интерфейс хоста с точно таким же именем.

Не зависит от psutil и файлов: работает с готовыми моделями.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..constants import macs_equal
from ..models import HostInterface, InterfaceDescriptor

MATCH_BY_MAC = "mac"
MATCH_BY_NAME = "name"


@dataclass
class InterfaceMatch:
    """
    Пара описание ↔ интерфейс хоста.

    Attributes:
        descriptor: Интерфейс из файла описания
        host_interface: Найденный интерфейс хоста
        matched_by: По какому признаку найден (mac/name)
    """
    descriptor: InterfaceDescriptor
    host_interface: HostInterface
    matched_by: str

    def to_dict(self) -> dict:
        """Сериализация для отчётов."""
        return {
            "descriptor": self.descriptor.label,
            "interface": self.host_interface.name,
            "matched_by": self.matched_by,
        }


class InterfaceMatcher:
    """
    Сопоставитель интерфейсов: MAC в приоритете, имя как запасной вариант.

    Example:
        matcher = InterfaceMatcher()
        host = matcher.match(descriptor, host_interfaces)
        if host is None:
            # описание пропускается
            ...
    """

    def match(
        self,
        descriptor: InterfaceDescriptor,
        host_interfaces: Sequence[HostInterface],
    ) -> Optional[HostInterface]:
        """
        Находит интерфейс хоста для описания.

        Args:
            descriptor: Интерфейс из файла описания
            host_interfaces: Интерфейсы хоста в порядке перечисления

        Returns:
            HostInterface или None если не найден
        """
        found = self.find(descriptor, host_interfaces)
        return found.host_interface if found else None

    def find(
        self,
        descriptor: InterfaceDescriptor,
        host_interfaces: Sequence[HostInterface],
    ) -> Optional[InterfaceMatch]:
        """
        Как match(), но возвращает пару с признаком сопоставления.

        Returns:
            InterfaceMatch или None если не найден
        """
        if descriptor.mac_address:
            for host in host_interfaces:
                if macs_equal(descriptor.mac_address, host.hardware_address):
                    return InterfaceMatch(descriptor, host, MATCH_BY_MAC)
            return None

        if not descriptor.name:
            return None

        for host in host_interfaces:
            if host.name == descriptor.name:
                return InterfaceMatch(descriptor, host, MATCH_BY_NAME)
        return None
