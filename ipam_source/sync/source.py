"""
Источник конфигурации IPAM из файла интерфейсов.

Жизненный цикл:
    STOPPED --start(sink)--> STARTED --refresh() ok--> LOADED

refresh() загружает файл один раз за жизнь объекта: после первой успешной
загрузки повторные вызовы ничего не делают (в том числе после stop/start).
При фатальной ошибке состояние остаётся STARTED и следующий refresh()
начинает заново.

Порядок refresh():
1. файл интерфейсов → описания (ошибка фатальна)
2. интерфейсы хоста (ошибка фатальна)
3. план пулов (пропуски не фатальны)
4. sink.new_address_space → пулы и адреса → sink.set_address_space

План строится целиком до первого обращения к sink, поэтому ошибки чтения
и разбора не оставляют в хранилище частичных изменений.

Пример использования:
    source = InterfaceFileSource.from_config(load_config())
    source.start(MemorySink())
    result = source.refresh()
    print(result.stats())
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..collectors.descriptors import DescriptorLoader
from ..collectors.host_interfaces import (
    HostInterfaceCollector,
    HostInterfaceProvider,
    collect_host_interfaces,
)
from ..config import resolve_interfaces_path
from ..core.config_schema import AppConfig
from ..core.constants import LOCAL_DEFAULT_ADDRESS_SPACE_ID, LOCAL_SCOPE, SOURCE_NAME
from ..core.domain.populate import (
    AddressPoolPopulator,
    AddressSpacePlan,
    PopulateResult,
    SkipKind,
    SkipReason,
    SkippedItem,
)
from ..core.exceptions import (
    SourceNotStartedError,
    StoreError,
    format_error_for_log,
    is_fatal,
)
from ..core.logging import get_logger
from ..core.models import InterfaceDescriptor
from ..store.base import AddressConfigSink

logger = get_logger(__name__)


class SourceState(str, Enum):
    """Состояние источника."""
    STOPPED = "stopped"
    STARTED = "started"
    LOADED = "loaded"


@dataclass
class RefreshResult:
    """
    Результат успешного refresh().

    Attributes:
        path: Прочитанный файл интерфейсов
        populate: План и пропуски построения пулов
        space: Активированное адресное пространство
        rejected: Пулы и адреса, которые отверг sink
    """
    path: str
    populate: PopulateResult
    space: Any = None
    rejected: List[SkippedItem] = field(default_factory=list)

    def stats(self) -> Dict[str, int]:
        """Статистика построения плюс отказы sink."""
        stats = self.populate.stats()
        stats["rejected"] = len(self.rejected)
        return stats

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в словарь."""
        data = self.populate.to_dict()
        data["stats"] = self.stats()
        data["path"] = self.path
        data["rejected"] = [item.to_dict() for item in self.rejected]
        return data


def commit_plan(space: Any, plan: AddressSpacePlan) -> List[SkippedItem]:
    """
    Создаёт пулы и записи адресов плана в адресном пространстве.

    Отказы sink (пул уже есть, адрес вне сети и т.п.) не фатальны:
    пул или адрес пропускается.

    Args:
        space: Адресное пространство, созданное sink
        plan: План пулов

    Returns:
        List[SkippedItem]: Отвергнутые пулы и адреса
    """
    rejected: List[SkippedItem] = []

    for pool_plan in plan:
        try:
            pool = space.new_address_pool(
                pool_plan.interface_name, pool_plan.priority, pool_plan.network
            )
        except StoreError as e:
            if is_fatal(e):
                raise
            logger.warning(
                f"Не удалось создать пул {pool_plan.key}: {format_error_for_log(e)}",
                interface=pool_plan.interface_name,
                prefix=pool_plan.key,
            )
            rejected.append(SkippedItem(
                kind=SkipKind.POOL,
                value=pool_plan.key,
                reason=SkipReason.REJECTED,
                interface=pool_plan.interface_name,
                detail=e.message,
            ))
            continue

        for address in pool_plan.addresses:
            try:
                pool.new_address_record(address)
            except StoreError as e:
                if is_fatal(e):
                    raise
                logger.warning(
                    f"Не удалось добавить адрес {address}: {format_error_for_log(e)}",
                    interface=pool_plan.interface_name,
                    address=str(address),
                )
                rejected.append(SkippedItem(
                    kind=SkipKind.ADDRESS,
                    value=str(address),
                    reason=SkipReason.REJECTED,
                    interface=pool_plan.interface_name,
                    detail=e.message,
                ))

    return rejected


class InterfaceFileSource:
    """
    Источник конфигурации IPAM из файла интерфейсов агента оркестратора.

    Не потокобезопасен: refresh() должен вызываться одним владельцем
    (например, циклом опроса IPAM).

    Attributes:
        name: Имя источника для логов
        file_path: Путь к файлу интерфейсов (разрешён при создании)
        sink: Подключённое хранилище (None до start() и после stop())
        loaded: Файл успешно загружен
    """

    name = SOURCE_NAME

    def __init__(
        self,
        file_path: str,
        host_interfaces: Optional[HostInterfaceProvider] = None,
        loader: Optional[Callable[[], Sequence[InterfaceDescriptor]]] = None,
        populator: Optional[AddressPoolPopulator] = None,
    ):
        """
        Инициализация источника.

        Args:
            file_path: Путь к файлу интерфейсов
            host_interfaces: Коллектор интерфейсов хоста (по умолчанию psutil)
            loader: Функция загрузки описаний (по умолчанию чтение file_path)
            populator: Построитель пулов
        """
        self.file_path = file_path
        self.host_interfaces = host_interfaces or HostInterfaceCollector()
        self.loader = loader or DescriptorLoader(file_path).load
        self.populator = populator or AddressPoolPopulator()

        self.sink: Optional[AddressConfigSink] = None
        self.loaded = False
        self.last_result: Optional[RefreshResult] = None
        self._log = logger.bind(source=self.name)

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        platform: Optional[str] = None,
        **kwargs: Any,
    ) -> "InterfaceFileSource":
        """
        Создаёт источник из конфигурации.

        Путь к файлу: source.file_path или путь по умолчанию для платформы.

        Args:
            config: Конфигурация приложения
            platform: Значение sys.platform (для тестов)
            **kwargs: Остальные аргументы конструктора

        Returns:
            InterfaceFileSource: Новый источник
        """
        return cls(resolve_interfaces_path(config, platform=platform), **kwargs)

    @property
    def state(self) -> SourceState:
        """Текущее состояние."""
        if self.loaded:
            return SourceState.LOADED
        if self.sink is not None:
            return SourceState.STARTED
        return SourceState.STOPPED

    def start(self, sink: AddressConfigSink) -> None:
        """Подключает хранилище."""
        self.sink = sink
        self._log.debug("Источник запущен", path=self.file_path)

    def stop(self) -> None:
        """Отключает хранилище. Признак загрузки не сбрасывается."""
        self.sink = None
        self._log.debug("Источник остановлен")

    def refresh(self) -> Optional[RefreshResult]:
        """
        Загружает файл интерфейсов и публикует пулы в sink.

        Returns:
            RefreshResult или None если файл уже был загружен

        Raises:
            SourceNotStartedError: sink не подключён
            DescriptorError: Файл не читается или невалиден
            HostInterfaceError: Не удалось получить интерфейсы хоста
            AddressSpaceError: sink не создал или не активировал пространство
        """
        if self.loaded:
            return None

        if self.sink is None:
            raise SourceNotStartedError("Хранилище не подключено", source=self.name)

        self._log.info("Загрузка файла интерфейсов", path=self.file_path)
        try:
            descriptors = self.loader()
            host_interfaces = collect_host_interfaces(self.host_interfaces)
            populate = self.populator.populate(descriptors, host_interfaces)

            space = self.sink.new_address_space(LOCAL_DEFAULT_ADDRESS_SPACE_ID, LOCAL_SCOPE)
            rejected = commit_plan(space, populate.plan)
            self.sink.set_address_space(space)
        except Exception as e:
            self._log.error(
                f"Загрузка не удалась: {format_error_for_log(e)}",
                path=self.file_path,
            )
            raise

        result = RefreshResult(
            path=self.file_path,
            populate=populate,
            space=space,
            rejected=rejected,
        )
        self.loaded = True
        self.last_result = result

        stats = result.stats()
        self._log.info(
            f"Файл интерфейсов загружен: пулов={stats['pools']}, адресов={stats['addresses']}, "
            f"пропущено интерфейсов={stats['skipped_interfaces']}, "
            f"подсетей={stats['skipped_subnets']}, адресов={stats['skipped_addresses']}, "
            f"отвергнуто={stats['rejected']}",
            path=self.file_path,
        )
        return result

    def __repr__(self) -> str:
        return f"InterfaceFileSource(path={self.file_path!r}, state={self.state.value})"
