"""
CLI модуль ipam_source.

Структура:
- commands/: обработчики команд
  - refresh.py: refresh
  - interfaces.py: show-interfaces

Примеры использования:
    python -m ipam_source refresh
    python -m ipam_source -v refresh --file ./interfaces.json --output pools.json
    python -m ipam_source --json-logs show-interfaces --format json
"""

import argparse
import logging
from typing import List, Optional

from .commands import cmd_refresh, cmd_show_interfaces
from ..core.logging import get_logger

logger = get_logger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """
    Создаёт парсер аргументов командной строки.

    Returns:
        ArgumentParser: Настроенный парсер
    """
    parser = argparse.ArgumentParser(
        prog="ipam_source",
        description="Источник конфигурации IPAM из файла интерфейсов хоста",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  %(prog)s refresh
  %(prog)s refresh --file ./interfaces.json --output reports/pools.json
  %(prog)s show-interfaces --format json
        """,
    )

    # Общие аргументы
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Подробный вывод (DEBUG)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Путь к файлу конфигурации YAML (default: ipam_source.yaml)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Логи в формате JSON",
    )

    # Подкоманды
    subparsers = parser.add_subparsers(dest="command", help="Команды")

    # === REFRESH ===
    refresh_parser = subparsers.add_parser(
        "refresh",
        help="Загрузить файл интерфейсов и показать пулы адресов",
    )
    refresh_parser.add_argument(
        "--file",
        "-f",
        default=None,
        help="Файл интерфейсов (default: из конфигурации или путь платформы)",
    )
    refresh_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Записать JSON в файл вместо stdout",
    )
    refresh_parser.add_argument(
        "--compact",
        action="store_true",
        help="JSON без отступов",
    )

    # === SHOW-INTERFACES ===
    interfaces_parser = subparsers.add_parser(
        "show-interfaces",
        help="Показать интерфейсы хоста и их MAC-адреса",
    )
    interfaces_parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Формат вывода (default: table)",
    )

    return parser


def _setup_logging(args: argparse.Namespace, config) -> None:
    """
    Настраивает логирование.

    Приоритет: -v флаг > конфигурация > INFO по умолчанию.
    --json-logs выводит JSON в stderr вместо настроек из конфигурации.
    """
    from ..core.logging import LogConfig, setup_logging, setup_logging_from_config

    log_config = LogConfig.from_dict(config.logging.model_dump())
    if args.verbose:
        log_config.level = logging.DEBUG

    if args.json_logs:
        setup_logging(json_format=True, level=log_config.level)
    else:
        setup_logging_from_config(log_config)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Главная функция CLI.

    Args:
        argv: Аргументы командной строки (по умолчанию sys.argv)

    Returns:
        int: Код завершения (0 - успех, 1 - ошибка)
    """
    from ..config import load_config
    from ..core.context import RunContext, set_current_context
    from ..core.exceptions import ConfigError, format_error_for_log
    from ..core.logging import setup_logging

    parser = setup_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Загружаем конфигурацию из YAML (если есть)
    try:
        config = load_config(args.config)
    except ConfigError as e:
        setup_logging(json_format=args.json_logs)
        logger.error(f"Ошибка конфигурации: {format_error_for_log(e)}")
        return 1

    # Создаём контекст выполнения
    ctx = RunContext.create(triggered_by="cli", command=args.command)
    set_current_context(ctx)

    _setup_logging(args, config)
    logger.debug(f"Run started (command={args.command}, run_id={ctx.run_id})")

    try:
        if args.command == "refresh":
            return cmd_refresh(args, config, ctx)
        if args.command == "show-interfaces":
            return cmd_show_interfaces(args, config, ctx)
        parser.print_help()
        return 1
    finally:
        logger.debug(f"Run finished in {ctx.elapsed_seconds:.2f}s")
        set_current_context(None)


__all__ = ["main", "setup_parser"]
