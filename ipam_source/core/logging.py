"""
Structured Logging для IPAM Source.

Именованные поля сообщения (interface, prefix, address, reason, ...)
попадают в LogRecord как атрибуты. JSONFormatter пишет их все,
HumanFormatter добавляет известные поля в конец строки.

Пример использования:
    from ipam_source.core.logging import setup_logging, get_logger

    setup_logging(json_format=True)

    logger = get_logger(__name__)
    logger.warning("Подсеть пропущена", interface="eth0", prefix="bad")

Формат вывода (JSON):
    {"timestamp": "2026-10-18T10:30:15.123456", "level": "WARNING",
     "logger": "ipam_source.core.domain.populate", "message": "Подсеть пропущена",
     "interface": "eth0", "prefix": "bad", "run_id": "2026-10-18T10-30-00"}
"""

import json
import logging
import logging.handlers
import sys
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

# Атрибуты, которые есть у любого LogRecord: всё остальное пришло из extra
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class RotationType(str, Enum):
    """Тип ротации файла логов."""
    SIZE = "size"
    TIME = "time"
    NONE = "none"


@dataclass
class LogConfig:
    """
    Конфигурация логирования (секция logging конфига).

    Attributes:
        level: Уровень логирования
        json_format: JSON в файле (консоль всегда human-readable)
        console: Выводить в stderr
        file_path: Файл логов (None = без файла)
        rotation: Ротация файла
        max_bytes: Размер файла для size-ротации
        backup_count: Сколько старых файлов хранить
        when: Интервал time-ротации (S, M, H, D, midnight)
        interval: Частота time-ротации
    """
    level: int = logging.INFO
    json_format: bool = False
    console: bool = True
    file_path: Optional[str] = None
    rotation: RotationType = RotationType.SIZE
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5
    when: str = "midnight"
    interval: int = 1

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogConfig":
        """Создаёт конфигурацию из словаря (LoggingConfig.model_dump())."""
        level = data.get("level", "INFO")
        if isinstance(level, str):
            level = getattr(logging, level.upper(), logging.INFO)

        defaults = cls()
        return cls(
            level=level,
            json_format=data.get("json_format", defaults.json_format),
            console=data.get("console", defaults.console),
            file_path=data.get("file_path"),
            rotation=RotationType(data.get("rotation", defaults.rotation)),
            max_bytes=data.get("max_bytes", defaults.max_bytes),
            backup_count=data.get("backup_count", defaults.backup_count),
            when=data.get("when", defaults.when),
            interval=data.get("interval", defaults.interval),
        )


class JSONFormatter(logging.Formatter):
    """Одна запись лога = одна JSON строка со всеми extra полями."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                data[key] = value
        return json.dumps(data, ensure_ascii=False, default=str)


class HumanFormatter(logging.Formatter):
    """
    Формат для консоли.

    TIMESTAMP - LEVEL - [run_id] MESSAGE (interface=X, prefix=Y)
    """

    EXTRA_FIELDS = ("source", "interface", "prefix", "address", "reason", "path")

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        run_id = getattr(record, "run_id", None)
        run_prefix = f"[{run_id}] " if run_id else ""

        extras = [
            f"{attr}={getattr(record, attr)}"
            for attr in self.EXTRA_FIELDS
            if getattr(record, attr, None) not in (None, "")
        ]
        extra_str = f" ({', '.join(extras)})" if extras else ""

        return (
            f"{timestamp} - {record.levelname.ljust(8)} - "
            f"{run_prefix}{record.getMessage()}{extra_str}"
        )


class StructuredLogger:
    """
    Обёртка над logging.Logger: именованные аргументы становятся полями записи.

        logger.warning("Адрес пропущен", address="10.0.0.x", reason="invalid_address")

    run_id текущего RunContext добавляется автоматически.
    """

    def __init__(self, name: str, default_extra: Optional[Dict[str, Any]] = None):
        self._logger = logging.getLogger(name)
        self._default_extra = default_extra or {}

    def _log(self, level: int, message: str, fields: Dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return

        extra = {**self._default_extra, **fields}
        if "run_id" not in extra:
            from ipam_source.core.context import get_current_context
            ctx = get_current_context()
            if ctx:
                extra["run_id"] = ctx.run_id

        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, **fields: Any) -> None:
        self._log(logging.DEBUG, message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._log(logging.INFO, message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._log(logging.WARNING, message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._log(logging.ERROR, message, fields)

    def bind(self, **fields: Any) -> "StructuredLogger":
        """
        Логгер с полями по умолчанию.

        Example:
            source_logger = logger.bind(source="MAS")
            source_logger.info("Loaded")  # добавит source=MAS
        """
        return StructuredLogger(self._logger.name, {**self._default_extra, **fields})


_loggers: Dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """Возвращает StructuredLogger (кэшируется по имени)."""
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name)
    return _loggers[name]


def _file_handler(config: LogConfig) -> logging.Handler:
    """File handler с ротацией из конфигурации."""
    Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)

    if config.rotation == RotationType.SIZE:
        return logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    if config.rotation == RotationType.TIME:
        return logging.handlers.TimedRotatingFileHandler(
            config.file_path,
            when=config.when,
            interval=config.interval,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    return logging.FileHandler(config.file_path, encoding="utf-8")


def _install(handlers: Dict[logging.Handler, logging.Formatter], level: int) -> None:
    """Заменяет handlers root логгера."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler, formatter in handlers.items():
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


def setup_logging(json_format: bool = False, level: int = logging.INFO, stream: Any = None) -> None:
    """
    Логирование в один поток (по умолчанию stderr).

    Example:
        setup_logging(json_format=args.json_logs)
    """
    formatter = JSONFormatter() if json_format else HumanFormatter()
    _install({logging.StreamHandler(stream or sys.stderr): formatter}, level)


def setup_logging_from_config(config: LogConfig) -> None:
    """
    Логирование по конфигурации: консоль и/или файл с ротацией.

    Консоль всегда human-readable, формат файла задаётся json_format.
    """
    handlers: Dict[logging.Handler, logging.Formatter] = {}
    if config.console:
        handlers[logging.StreamHandler(sys.stderr)] = HumanFormatter()
    if config.file_path:
        handlers[_file_handler(config)] = JSONFormatter() if config.json_format else HumanFormatter()
    _install(handlers, config.level)
