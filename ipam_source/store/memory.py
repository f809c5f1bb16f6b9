"""
In-memory хранилище адресных пространств.

Хранит пространства, пулы и записи адресов в словарях. Используется CLI
и тестами; агент может подставить своё хранилище через AddressConfigSink.

Пример использования:
    sink = MemorySink()
    space = sink.new_address_space(LOCAL_DEFAULT_ADDRESS_SPACE_ID, LOCAL_SCOPE)
    pool = space.new_address_pool("eth0", 1, ipaddress.ip_network("10.0.0.0/24"))
    pool.new_address_record(ipaddress.ip_address("10.0.0.5"))
    sink.set_address_space(space)
"""

import ipaddress
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from .base import AddressConfigSink
from ..core.exceptions import (
    AddressExistsError,
    AddressSpaceError,
    InvalidAddressError,
    PoolExistsError,
)
from ..core.logging import get_logger

logger = get_logger(__name__)

IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]
IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass
class AddressRecord:
    """
    Адрес в пуле.

    Attributes:
        address: IP-адрес
        in_use: Адрес выдан (выдачей управляет IPAM, не источник)
    """
    address: IPAddress
    in_use: bool = False

    def to_dict(self) -> dict:
        """Сериализация в словарь."""
        return {"address": str(self.address), "in_use": self.in_use}


@dataclass
class AddressPool:
    """
    Пул адресов одной сети.

    Attributes:
        interface_name: Интерфейс хоста
        priority: Приоритет (0 — первичный интерфейс)
        network: Сеть пула
        addresses: Записи по строке адреса
    """
    interface_name: str
    priority: int
    network: IPNetwork
    addresses: Dict[str, AddressRecord] = field(default_factory=dict)

    @property
    def key(self) -> str:
        """Каноническая запись сети."""
        return str(self.network)

    def new_address_record(self, address: IPAddress) -> AddressRecord:
        """
        Добавляет адрес в пул.

        Args:
            address: IP-адрес

        Returns:
            AddressRecord: Новая запись

        Raises:
            InvalidAddressError: Адрес вне сети пула
            AddressExistsError: Адрес уже в пуле
        """
        if address.version != self.network.version or address not in self.network:
            raise InvalidAddressError(
                f"Адрес не принадлежит сети {self.key}", key=str(address)
            )
        address_key = str(address)
        if address_key in self.addresses:
            raise AddressExistsError("Адрес уже есть в пуле", key=address_key)

        record = AddressRecord(address=address)
        self.addresses[address_key] = record
        return record

    def to_dict(self) -> dict:
        """Сериализация в словарь."""
        return {
            "network": self.key,
            "interface": self.interface_name,
            "priority": self.priority,
            "addresses": list(self.addresses),
        }


@dataclass
class AddressSpace:
    """
    Адресное пространство: пулы по каноническому ключу сети.

    Attributes:
        id: Идентификатор пространства
        scope: Область видимости
        pools: Пулы по ключу сети (10.240.0.0/12)
    """
    id: str
    scope: int
    pools: Dict[str, AddressPool] = field(default_factory=dict)
    sink: Optional["MemorySink"] = field(default=None, repr=False, compare=False)

    def new_address_pool(
        self,
        interface_name: str,
        priority: int,
        network: IPNetwork,
    ) -> AddressPool:
        """
        Создаёт пул для сети.

        Raises:
            PoolExistsError: Пул для этой сети уже есть
        """
        key = str(network)
        if key in self.pools:
            raise PoolExistsError("Пул адресов уже существует", key=key)

        pool = AddressPool(interface_name=interface_name, priority=priority, network=network)
        self.pools[key] = pool
        return pool

    def to_dict(self) -> dict:
        """Сериализация в словарь."""
        return {
            "id": self.id,
            "scope": self.scope,
            "pools": [pool.to_dict() for pool in self.pools.values()],
        }


class MemorySink(AddressConfigSink):
    """
    Хранилище адресных пространств в памяти.

    Attributes:
        spaces: Активные пространства по id
    """

    def __init__(self):
        self.spaces: Dict[str, AddressSpace] = {}

    def new_address_space(self, space_id: str, scope: int) -> AddressSpace:
        """Создаёт пустое пространство, не активируя его."""
        if not space_id:
            raise AddressSpaceError("Пустой идентификатор адресного пространства")
        return AddressSpace(id=space_id, scope=scope, sink=self)

    def set_address_space(self, space: AddressSpace) -> None:
        """
        Активирует пространство, заменяя прежнее с тем же id.

        Raises:
            AddressSpaceError: Пространство создано другим хранилищем
        """
        if getattr(space, "sink", None) is not self:
            raise AddressSpaceError(
                "Адресное пространство создано другим хранилищем", key=space.id
            )
        self.spaces[space.id] = space
        logger.debug(f"Адресное пространство {space.id} активировано: пулов {len(space.pools)}")

    def get_address_space(self, space_id: str) -> Optional[AddressSpace]:
        """Активное пространство по id."""
        return self.spaces.get(space_id)
