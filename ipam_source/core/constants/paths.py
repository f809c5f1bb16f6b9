"""
Пути к файлу описания интерфейсов по умолчанию.

Файл пишет агент оркестратора; путь зависит от платформы хоста.
"""

import sys
from typing import Optional

DEFAULT_LINUX_INTERFACES_PATH = "/etc/kubernetes/interfaces.json"
DEFAULT_WINDOWS_INTERFACES_PATH = r"c:\k\interfaces.json"


def default_interfaces_path(platform: Optional[str] = None) -> str:
    """
    Возвращает путь к файлу интерфейсов по умолчанию для платформы.

    Args:
        platform: Значение sys.platform (по умолчанию текущая платформа)

    Returns:
        str: Путь к файлу
    """
    platform = platform or sys.platform
    if platform.startswith("win"):
        return DEFAULT_WINDOWS_INTERFACES_PATH
    return DEFAULT_LINUX_INTERFACES_PATH
