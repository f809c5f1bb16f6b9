"""
Команда show-interfaces.

Показывает интерфейсы хоста так, как их видит сопоставление:
имя и MAC-адрес.
"""

import json

from ...collectors.host_interfaces import HostInterfaceCollector, collect_host_interfaces
from ...core.constants import normalize_mac_ieee
from ...core.exceptions import HostInterfaceError, format_error_for_log
from ...core.logging import get_logger

logger = get_logger(__name__)


def cmd_show_interfaces(args, config=None, ctx=None) -> int:
    """Обработчик команды show-interfaces."""
    try:
        interfaces = collect_host_interfaces(HostInterfaceCollector())
    except HostInterfaceError as e:
        logger.error(format_error_for_log(e))
        return 1

    if args.format == "json":
        print(json.dumps([intf.to_dict() for intf in interfaces], indent=2, ensure_ascii=False))
        return 0

    width = max([len(intf.name) for intf in interfaces] + [len("Interface")])
    print(f"{'Interface'.ljust(width)}  MAC")
    for intf in interfaces:
        print(f"{intf.name.ljust(width)}  {normalize_mac_ieee(intf.hardware_address) or '-'}")
    print(f"\nВсего: {len(interfaces)}")
    return 0
