"""
Загрузчик файла описания интерфейсов.

Агент оркестратора периодически пишет JSON-файл со списком интерфейсов,
их MAC-адресами и подсетями:

    [
      {
        "MacAddress": "000D3A6E1825",
        "IsPrimary": true,
        "IPSubnets": [
          {
            "Prefix": "10.240.0.0/12",
            "IPAddresses": [
              {"Address": "10.240.0.4", "IsPrimary": true},
              {"Address": "10.240.0.5", "IsPrimary": false}
            ]
          }
        ]
      }
    ]

Документ разбирается целиком: любая ошибка чтения или разбора фатальна,
частичной загрузки нет. Имена полей сравниваются без учёта регистра,
неизвестные поля игнорируются.

Пример использования:
    loader = DescriptorLoader("/etc/kubernetes/interfaces.json")
    descriptors = loader.load()
"""

import json
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, TypeAdapter, ValidationError

from ..core.exceptions import DescriptorParseError, DescriptorReadError
from ..core.logging import get_logger
from ..core.models import AddressDescriptor, InterfaceDescriptor, SubnetDescriptor

logger = get_logger(__name__)


# ==================== СХЕМА ФАЙЛА ====================
# Ключи приводятся к нижнему регистру до валидации, поэтому алиасы в lower case.


class _AddressSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    address: Optional[StrictStr] = Field(default=None, alias="address")
    is_primary: Optional[StrictBool] = Field(default=None, alias="isprimary")

    def to_descriptor(self) -> AddressDescriptor:
        return AddressDescriptor(address=self.address or "", is_primary=bool(self.is_primary))


class _SubnetSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    prefix: Optional[StrictStr] = Field(default=None, alias="prefix")
    addresses: Optional[List[Optional[_AddressSchema]]] = Field(default=None, alias="ipaddresses")

    def to_descriptor(self) -> SubnetDescriptor:
        return SubnetDescriptor(
            prefix=self.prefix or "",
            addresses=[
                addr.to_descriptor() if addr is not None else AddressDescriptor()
                for addr in self.addresses or []
            ],
        )


class _InterfaceSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    mac_address: Optional[StrictStr] = Field(default=None, alias="macaddress")
    name: Optional[StrictStr] = Field(default=None, alias="name")
    is_primary: Optional[StrictBool] = Field(default=None, alias="isprimary")
    subnets: Optional[List[Optional[_SubnetSchema]]] = Field(default=None, alias="ipsubnets")

    def to_descriptor(self) -> InterfaceDescriptor:
        """Конвертирует схему в доменную модель (null → значения по умолчанию)."""
        return InterfaceDescriptor(
            mac_address=self.mac_address or "",
            name=self.name or "",
            is_primary=bool(self.is_primary),
            subnets=[
                subnet.to_descriptor() if subnet is not None else SubnetDescriptor()
                for subnet in self.subnets or []
            ],
        )


# null элемент списка = пустое описание, дальше он пропускается как
# no_matching_interface / invalid_prefix / invalid_address
_DOCUMENT = TypeAdapter(List[Optional[_InterfaceSchema]])


def _lower_keys(value: Any) -> Any:
    """Рекурсивно приводит ключи словарей к нижнему регистру."""
    if isinstance(value, dict):
        return {str(k).lower(): _lower_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_lower_keys(item) for item in value]
    return value


def parse_descriptors(content: str, path: Optional[str] = None) -> List[InterfaceDescriptor]:
    """
    Разбирает содержимое файла интерфейсов.

    Args:
        content: JSON текст
        path: Путь к файлу (для сообщений об ошибках)

    Returns:
        List[InterfaceDescriptor]: Интерфейсы в порядке объявления

    Raises:
        DescriptorParseError: Невалидный JSON или структура документа
    """
    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise DescriptorParseError(
            f"Невалидный JSON: {e.msg}",
            path=path,
            position=f"{e.lineno}:{e.colno}",
        ) from e

    # null = пустой список интерфейсов
    if document is None:
        return []

    try:
        interfaces = _DOCUMENT.validate_python(_lower_keys(document))
    except ValidationError as e:
        first_error = e.errors()[0]
        position = ".".join(str(x) for x in first_error.get("loc", []))
        raise DescriptorParseError(
            f"Невалидная структура: {first_error.get('msg', 'Unknown error')}",
            path=path,
            position=position or None,
        ) from e

    return [
        interface.to_descriptor() if interface is not None else InterfaceDescriptor()
        for interface in interfaces
    ]


def load_descriptors(path: str) -> List[InterfaceDescriptor]:
    """
    Читает и разбирает файл интерфейсов.

    Args:
        path: Путь к файлу

    Returns:
        List[InterfaceDescriptor]: Интерфейсы в порядке объявления

    Raises:
        DescriptorReadError: Файл не открывается/не читается
        DescriptorParseError: Содержимое невалидно
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DescriptorParseError(f"Файл не в UTF-8: {e.reason}", path=str(path)) from e
    except OSError as e:
        raise DescriptorReadError(
            f"Не удалось прочитать файл интерфейсов: {e.strerror or e}",
            path=str(path),
        ) from e

    descriptors = parse_descriptors(content, path=str(path))
    logger.debug(f"Загружено интерфейсов: {len(descriptors)}", path=str(path))
    return descriptors


class DescriptorLoader:
    """
    Загрузчик файла интерфейсов с фиксированным путём.

    Путь разрешается один раз при создании (конфигурация или путь
    по умолчанию для платформы), каждый load() читает файл заново.

    Attributes:
        path: Путь к файлу интерфейсов
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> List[InterfaceDescriptor]:
        """Читает и разбирает файл. Ошибки фатальны."""
        return load_descriptors(self.path)

    def __repr__(self) -> str:
        return f"DescriptorLoader(path={self.path!r})"
