"""
Перечисление сетевых интерфейсов хоста.

Использует psutil: имя интерфейса и его hardware address (запись AF_LINK).
Порядок интерфейсов сохраняется таким, как его отдаёт ОС: сопоставление
берёт первый подходящий интерфейс.
"""

from typing import Callable, List, Union

import psutil

from ..core.exceptions import HostInterfaceError
from ..core.logging import get_logger
from ..core.models import HostInterface

logger = get_logger(__name__)


class HostInterfaceCollector:
    """
    Коллектор интерфейсов хоста.

    Example:
        collector = HostInterfaceCollector()
        for intf in collector.collect():
            print(intf.name, intf.hardware_address)
    """

    def collect(self) -> List[HostInterface]:
        """
        Возвращает интерфейсы хоста.

        Returns:
            List[HostInterface]: Интерфейсы в порядке ОС

        Raises:
            HostInterfaceError: ОС не отдала список интерфейсов
        """
        try:
            addrs = psutil.net_if_addrs()
        except (psutil.Error, OSError) as e:
            raise HostInterfaceError(f"Не удалось получить интерфейсы хоста: {e}") from e

        interfaces = []
        for name, snics in addrs.items():
            hardware_address = ""
            for snic in snics:
                if snic.family == psutil.AF_LINK:
                    hardware_address = snic.address or ""
                    break
            interfaces.append(HostInterface(name=name, hardware_address=hardware_address))

        logger.debug(f"Интерфейсы хоста: {[intf.name for intf in interfaces]}")
        return interfaces


# Коллектор или функция без аргументов, возвращающая список интерфейсов
HostInterfaceProvider = Union[HostInterfaceCollector, Callable[[], List[HostInterface]]]


def collect_host_interfaces(provider: HostInterfaceProvider) -> List[HostInterface]:
    """
    Получает интерфейсы от коллектора или функции.

    Ошибки, отличные от HostInterfaceError, оборачиваются в HostInterfaceError.

    Args:
        provider: Объект с методом collect() или callable

    Returns:
        List[HostInterface]: Интерфейсы хоста
    """
    collect = getattr(provider, "collect", provider)
    try:
        return list(collect())
    except HostInterfaceError:
        raise
    except Exception as e:
        raise HostInterfaceError(f"Не удалось получить интерфейсы хоста: {e}") from e
