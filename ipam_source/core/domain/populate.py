"""
Domain Layer: построение пулов адресов из описаний интерфейсов.

Чистая логика без обращений к хранилищу: результат — план адресного
пространства (AddressSpacePlan), который затем целиком применяется к sink.
Так ошибка на середине разбора не оставляет хранилище в частичном состоянии.

Правила:
- приоритет пула 0 для первичного интерфейса, 1 для остальных;
- подсеть с неразбираемым префиксом пропускается;
- одна сеть — один пул: первая подсеть занимает сеть, следующие подсети
  с той же сетью пропускаются (pool_exists), их адреса не добавляются;
- адрес с IsPrimary=true зарезервирован за хостом и не попадает ни в один
  пул, даже если в другой подсети он объявлен без IsPrimary;
- неразбираемый адрес пропускается, повтор адреса в пуле игнорируется.

Пример использования:
    populator = AddressPoolPopulator()
    result = populator.populate(descriptors, host_interfaces)

    print(result.stats())
    for pool in result.plan:
        print(pool.key, pool.interface_name, pool.priority, pool.addresses)
"""

import ipaddress
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Set, Union

from ..constants import pool_priority
from ..logging import get_logger
from ..models import HostInterface, InterfaceDescriptor
from .matcher import InterfaceMatch, InterfaceMatcher

logger = get_logger(__name__)

IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]
IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class SkipReason(str, Enum):
    """Причина пропуска интерфейса, подсети или адреса."""
    NO_MATCHING_INTERFACE = "no_matching_interface"
    INVALID_PREFIX = "invalid_prefix"
    POOL_EXISTS = "pool_exists"
    HOST_RESERVED = "host_reserved"
    INVALID_ADDRESS = "invalid_address"
    DUPLICATE = "duplicate"
    REJECTED = "rejected"


class SkipKind(str, Enum):
    """Что пропущено."""
    INTERFACE = "interface"
    SUBNET = "subnet"
    ADDRESS = "address"
    POOL = "pool"


@dataclass
class SkippedItem:
    """
    Пропущенный элемент.

    Attributes:
        kind: Что пропущено (interface/subnet/address/pool)
        value: Значение (MAC/имя, префикс, адрес)
        reason: Причина пропуска
        interface: Интерфейс хоста (или описание, если интерфейс не найден)
        detail: Текст ошибки, если есть
    """
    kind: SkipKind
    value: str
    reason: SkipReason
    interface: str = ""
    detail: str = ""

    def __str__(self) -> str:
        return f"  {self.kind.value} {self.value} (skip: {self.reason.value})"

    def to_dict(self) -> Dict[str, str]:
        """Сериализация в словарь."""
        data = {
            "kind": self.kind.value,
            "value": self.value,
            "reason": self.reason.value,
        }
        if self.interface:
            data["interface"] = self.interface
        if self.detail:
            data["detail"] = self.detail
        return data


@dataclass
class PoolPlan:
    """
    Будущий пул адресов.

    Attributes:
        network: Сеть пула (адрес + маска, хостовые биты обнулены)
        interface_name: Интерфейс хоста
        priority: Приоритет (0 — первичный интерфейс)
        addresses: Адреса в порядке объявления, без повторов
    """
    network: IPNetwork
    interface_name: str
    priority: int
    addresses: List[IPAddress] = field(default_factory=list)
    _seen: Set[IPAddress] = field(default_factory=set, init=False, repr=False, compare=False)

    @property
    def key(self) -> str:
        """Каноническая запись сети (10.240.0.0/12)."""
        return str(self.network)

    def add(self, address: IPAddress) -> bool:
        """
        Добавляет адрес.

        Returns:
            bool: False если адрес уже есть
        """
        if address in self._seen:
            return False
        self._seen.add(address)
        self.addresses.append(address)
        return True

    def to_dict(self) -> Dict[str, object]:
        """Сериализация в словарь."""
        return {
            "network": self.key,
            "interface": self.interface_name,
            "priority": self.priority,
            "addresses": [str(addr) for addr in self.addresses],
        }


@dataclass
class AddressSpacePlan:
    """Упорядоченный набор будущих пулов: одна сеть — один пул."""
    pools: Dict[str, PoolPlan] = field(default_factory=dict)

    def get(self, key: str) -> Optional[PoolPlan]:
        """Пул по каноническому ключу сети."""
        return self.pools.get(key)

    def add_pool(self, pool: PoolPlan) -> None:
        """Добавляет пул (ключ должен быть свободен)."""
        if pool.key in self.pools:
            raise ValueError(f"Pool {pool.key} already planned")
        self.pools[pool.key] = pool

    @property
    def address_count(self) -> int:
        """Всего адресов во всех пулах."""
        return sum(len(pool.addresses) for pool in self.pools.values())

    def __iter__(self) -> Iterator[PoolPlan]:
        return iter(self.pools.values())

    def __len__(self) -> int:
        return len(self.pools)

    def __contains__(self, key: str) -> bool:
        return key in self.pools


@dataclass
class PopulateResult:
    """
    Результат построения пулов.

    Attributes:
        plan: План адресного пространства
        matched: Найденные пары описание ↔ интерфейс хоста
        skipped_interfaces: Описания без интерфейса на хосте
        skipped_subnets: Пропущенные подсети
        skipped_addresses: Пропущенные адреса (включая повторы и резерв хоста)
    """
    plan: AddressSpacePlan = field(default_factory=AddressSpacePlan)
    matched: List[InterfaceMatch] = field(default_factory=list)
    skipped_interfaces: List[SkippedItem] = field(default_factory=list)
    skipped_subnets: List[SkippedItem] = field(default_factory=list)
    skipped_addresses: List[SkippedItem] = field(default_factory=list)

    def skipped_by_reason(self, reason: SkipReason) -> List[SkippedItem]:
        """Все пропуски с указанной причиной."""
        items = self.skipped_interfaces + self.skipped_subnets + self.skipped_addresses
        return [item for item in items if item.reason == reason]

    def stats(self) -> Dict[str, int]:
        """Статистика: сколько найдено, создано и пропущено."""
        return {
            "matched": len(self.matched),
            "pools": len(self.plan),
            "addresses": self.plan.address_count,
            "skipped_interfaces": len(self.skipped_interfaces),
            "skipped_subnets": len(self.skipped_subnets),
            "skipped_addresses": len(self.skipped_addresses),
        }

    def to_dict(self) -> Dict[str, object]:
        """Сериализация в словарь."""
        return {
            "stats": self.stats(),
            "pools": [pool.to_dict() for pool in self.plan],
            "matched": [match.to_dict() for match in self.matched],
            "skipped": {
                "interfaces": [item.to_dict() for item in self.skipped_interfaces],
                "subnets": [item.to_dict() for item in self.skipped_subnets],
                "addresses": [item.to_dict() for item in self.skipped_addresses],
            },
        }


def parse_network(prefix: str) -> IPNetwork:
    """
    Разбирает префикс в CIDR нотации.

    Хостовые биты обнуляются (10.240.0.4/12 → 10.240.0.0/12).
    Длина префикса обязательна и должна быть числом.

    Args:
        prefix: Префикс (10.240.0.0/12)

    Returns:
        IPv4Network или IPv6Network

    Raises:
        ValueError: Префикс невалидный
    """
    address, sep, length = prefix.partition("/")
    if not sep or not address or not length.isdigit():
        raise ValueError(f"invalid CIDR address: {prefix}")
    return ipaddress.ip_network(prefix, strict=False)


def parse_address(address: str) -> IPAddress:
    """
    Разбирает IP-адрес.

    Raises:
        ValueError: Адрес невалидный
    """
    return ipaddress.ip_address(address)


def reserved_addresses(descriptors: Sequence[InterfaceDescriptor]) -> Set[IPAddress]:
    """
    Собирает адреса, помеченные IsPrimary, по всему файлу.

    Args:
        descriptors: Интерфейсы из файла описания

    Returns:
        Set: Разобранные адреса хоста (неразбираемые не учитываются)
    """
    reserved: Set[IPAddress] = set()
    for descriptor in descriptors:
        for subnet in descriptor.subnets:
            for addr in subnet.addresses:
                if not addr.is_primary:
                    continue
                try:
                    reserved.add(parse_address(addr.address))
                except ValueError:
                    pass
    return reserved


class AddressPoolPopulator:
    """
    Строит пулы адресов из описаний интерфейсов.

    Все пропуски не фатальны: они логируются и попадают в PopulateResult.

    Attributes:
        matcher: Сопоставитель интерфейсов
    """

    def __init__(self, matcher: Optional[InterfaceMatcher] = None):
        self.matcher = matcher or InterfaceMatcher()

    def populate(
        self,
        descriptors: Sequence[InterfaceDescriptor],
        host_interfaces: Sequence[HostInterface],
    ) -> PopulateResult:
        """
        Сопоставляет интерфейсы и строит план пулов.

        Args:
            descriptors: Интерфейсы из файла описания
            host_interfaces: Интерфейсы хоста в порядке перечисления

        Returns:
            PopulateResult: План и список пропусков
        """
        result = PopulateResult()
        reserved = reserved_addresses(descriptors)

        for descriptor in descriptors:
            match = self.matcher.find(descriptor, host_interfaces)
            if match is None:
                logger.warning(
                    f"Не найден интерфейс с MAC {descriptor.mac_address!r} "
                    f"или именем {descriptor.name!r}",
                    interface=descriptor.label,
                    reason=SkipReason.NO_MATCHING_INTERFACE.value,
                )
                result.skipped_interfaces.append(SkippedItem(
                    kind=SkipKind.INTERFACE,
                    value=descriptor.mac_address or descriptor.name,
                    reason=SkipReason.NO_MATCHING_INTERFACE,
                    interface=descriptor.label,
                ))
                continue

            result.matched.append(match)
            self._populate_interface(descriptor, match.host_interface, reserved, result)

        logger.info(
            f"Построено пулов: {len(result.plan)}, адресов: {result.plan.address_count}",
            **{k: v for k, v in result.stats().items() if k.startswith("skipped")},
        )
        return result

    def _populate_interface(
        self,
        descriptor: InterfaceDescriptor,
        host: HostInterface,
        reserved: Set[IPAddress],
        result: PopulateResult,
    ) -> None:
        """Добавляет в план подсети одного интерфейса."""
        priority = pool_priority(descriptor.is_primary)

        for subnet in descriptor.subnets:
            try:
                network = parse_network(subnet.prefix)
            except ValueError as e:
                logger.warning(
                    f"Не удалось разобрать подсеть {subnet.prefix!r}: {e}",
                    interface=host.name,
                    prefix=subnet.prefix,
                )
                result.skipped_subnets.append(SkippedItem(
                    kind=SkipKind.SUBNET,
                    value=subnet.prefix,
                    reason=SkipReason.INVALID_PREFIX,
                    interface=host.name,
                    detail=str(e),
                ))
                continue

            key = str(network)
            if key in result.plan:
                owner = result.plan.get(key).interface_name
                logger.warning(
                    f"Пул {key} уже создан для интерфейса {owner}, подсеть пропущена",
                    interface=host.name,
                    prefix=subnet.prefix,
                )
                result.skipped_subnets.append(SkippedItem(
                    kind=SkipKind.SUBNET,
                    value=subnet.prefix,
                    reason=SkipReason.POOL_EXISTS,
                    interface=host.name,
                    detail=f"owned by {owner}",
                ))
                continue

            pool = PoolPlan(network=network, interface_name=host.name, priority=priority)
            result.plan.add_pool(pool)

            for addr in subnet.addresses:
                self._add_address(pool, addr.address, addr.is_primary, reserved, result)

    def _add_address(
        self,
        pool: PoolPlan,
        literal: str,
        is_primary: bool,
        reserved: Set[IPAddress],
        result: PopulateResult,
    ) -> None:
        """Добавляет адрес в пул или фиксирует пропуск."""
        # Адреса хоста в пул не попадают
        if is_primary:
            logger.debug("Адрес хоста пропущен", interface=pool.interface_name, address=literal)
            result.skipped_addresses.append(SkippedItem(
                kind=SkipKind.ADDRESS,
                value=literal,
                reason=SkipReason.HOST_RESERVED,
                interface=pool.interface_name,
            ))
            return

        try:
            address = parse_address(literal)
        except ValueError as e:
            logger.warning(
                f"Не удалось разобрать адрес {literal!r}",
                interface=pool.interface_name,
                address=literal,
            )
            result.skipped_addresses.append(SkippedItem(
                kind=SkipKind.ADDRESS,
                value=literal,
                reason=SkipReason.INVALID_ADDRESS,
                interface=pool.interface_name,
                detail=str(e),
            ))
            return

        if address in reserved:
            logger.debug(
                "Адрес зарезервирован за хостом в другой подсети",
                interface=pool.interface_name,
                address=literal,
            )
            result.skipped_addresses.append(SkippedItem(
                kind=SkipKind.ADDRESS,
                value=literal,
                reason=SkipReason.HOST_RESERVED,
                interface=pool.interface_name,
            ))
            return

        if not pool.add(address):
            logger.debug("Повтор адреса в пуле", interface=pool.interface_name, address=literal)
            result.skipped_addresses.append(SkippedItem(
                kind=SkipKind.ADDRESS,
                value=literal,
                reason=SkipReason.DUPLICATE,
                interface=pool.interface_name,
            ))
