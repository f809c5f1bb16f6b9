"""
Data Models для IPAM Source.

Типизированные dataclasses вместо Dict[str, Any]:
- InterfaceDescriptor / SubnetDescriptor / AddressDescriptor — что объявил агент
  оркестратора в файле интерфейсов
- HostInterface — живой интерфейс хоста (имя + hardware address)

Descriptor-модели создаёт только загрузчик файла (collectors/descriptors.py),
он же проверяет типы полей.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class AddressDescriptor:
    """
    IP-адрес в подсети интерфейса.

    Attributes:
        address: IP-адрес строкой (10.240.0.5), "" если не задан
        is_primary: Адрес зарезервирован за хостом и в пул не попадает
    """
    address: str = ""
    is_primary: bool = False


@dataclass
class SubnetDescriptor:
    """
    Подсеть интерфейса.

    Attributes:
        prefix: Сеть в CIDR нотации (10.240.0.0/12), "" если не задана
        addresses: Адреса подсети в порядке объявления
    """
    prefix: str = ""
    addresses: List[AddressDescriptor] = field(default_factory=list)


@dataclass
class InterfaceDescriptor:
    """
    Интерфейс из файла описания.

    Сопоставляется с интерфейсом хоста по MAC, а если MAC не указан — по имени.

    Attributes:
        mac_address: MAC-адрес в любом регистре и с любыми разделителями
        name: Имя интерфейса (eth0)
        is_primary: Первичный интерфейс хоста (пулы получают приоритет 0)
        subnets: Подсети интерфейса в порядке объявления
    """
    mac_address: str = ""
    name: str = ""
    is_primary: bool = False
    subnets: List[SubnetDescriptor] = field(default_factory=list)

    @property
    def label(self) -> str:
        """Идентификатор для логов: MAC если задан, иначе имя."""
        if self.mac_address:
            return f"mac={self.mac_address}"
        return f"name={self.name}"


@dataclass
class HostInterface:
    """
    Сетевой интерфейс хоста.

    Attributes:
        name: Имя интерфейса (eth0)
        hardware_address: MAC-адрес как его отдаёт ОС ("" если нет)
    """
    name: str
    hardware_address: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Конвертирует в словарь (вывод show-interfaces --format json)."""
        return {"name": self.name, "hardware_address": self.hardware_address}
