"""
Публикация конфигурации IPAM в хранилище.

InterfaceFileSource читает файл интерфейсов один раз и наполняет
адресное пространство через sink.
"""

from .source import InterfaceFileSource, RefreshResult, SourceState, commit_plan

__all__ = [
    "InterfaceFileSource",
    "RefreshResult",
    "SourceState",
    "commit_plan",
]
