"""
CLI команды.

Каждый модуль содержит обработчики команд:
- refresh.py: refresh
- interfaces.py: show-interfaces

Обработчик принимает (args, config, ctx) и возвращает код завершения.
"""

from .refresh import cmd_refresh
from .interfaces import cmd_show_interfaces

__all__ = [
    "cmd_refresh",
    "cmd_show_interfaces",
]
