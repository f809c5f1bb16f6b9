"""
Команда refresh.

Загружает файл интерфейсов для текущего хоста в хранилище в памяти
и выводит получившиеся пулы адресов в JSON.
"""

from ...collectors.host_interfaces import HostInterfaceCollector
from ...core.exceptions import IpamSourceError, format_error_for_log
from ...core.logging import get_logger
from ...exporters import AddressSpaceExporter
from ...store import MemorySink
from ...sync import InterfaceFileSource

logger = get_logger(__name__)


def cmd_refresh(args, config, ctx=None) -> int:
    """Обработчик команды refresh (файл интерфейсов → пулы адресов)."""
    if args.file:
        source = InterfaceFileSource(args.file, host_interfaces=HostInterfaceCollector())
    else:
        source = InterfaceFileSource.from_config(config, host_interfaces=HostInterfaceCollector())

    sink = MemorySink()
    source.start(sink)
    try:
        result = source.refresh()
    except IpamSourceError as e:
        logger.error(f"Не удалось загрузить: {format_error_for_log(e)}", path=source.file_path)
        return 1
    finally:
        source.stop()

    exporter = AddressSpaceExporter(indent=None if args.compact else 2)
    if args.output:
        path = exporter.export(result.space, args.output, result)
        print(f"Пулы адресов сохранены: {path}")
    else:
        print(exporter.to_json(result.space, result))

    stats = result.stats()
    logger.info(
        f"Пулов: {stats['pools']}, адресов: {stats['addresses']}, "
        f"пропущено интерфейсов: {stats['skipped_interfaces']}"
    )
    return 0
