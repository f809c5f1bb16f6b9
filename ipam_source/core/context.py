"""
Контекст выполнения для отслеживания запусков.

RunContext создаётся один раз на запуск (CLI, агент) и даёт run_id,
который StructuredLogger добавляет к каждому сообщению.

Пример использования:
    ctx = RunContext.create(triggered_by="cli", command="refresh")
    set_current_context(ctx)
    # Все логи получат run_id
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Literal

from .logging import get_logger

logger = get_logger(__name__)

TriggerSource = Literal["cli", "agent", "test"]


@dataclass
class RunContext:
    """
    Контекст выполнения операции.

    Attributes:
        run_id: Уникальный идентификатор запуска (timestamp или UUID)
        started_at: Время начала выполнения
        triggered_by: Источник запуска (cli/agent/test)
        command: Команда CLI которая была вызвана
        extra: Дополнительные данные контекста
    """

    run_id: str
    started_at: datetime
    triggered_by: TriggerSource = "cli"
    command: str = ""
    extra: dict = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        triggered_by: TriggerSource = "cli",
        command: str = "",
        use_timestamp_id: bool = True,
    ) -> "RunContext":
        """
        Создаёт новый контекст выполнения.

        Args:
            triggered_by: Источник запуска
            command: Название команды CLI
            use_timestamp_id: Использовать timestamp вместо UUID

        Returns:
            RunContext: Новый контекст
        """
        started_at = datetime.now()

        if use_timestamp_id:
            # Формат: 2026-10-18T12-30-22
            run_id = started_at.strftime("%Y-%m-%dT%H-%M-%S")
        else:
            run_id = str(uuid.uuid4())[:8]

        ctx = cls(
            run_id=run_id,
            started_at=started_at,
            triggered_by=triggered_by,
            command=command,
        )
        logger.debug(f"Created RunContext: {ctx.run_id}")
        return ctx

    @property
    def elapsed_seconds(self) -> float:
        """Время выполнения в секундах."""
        return (datetime.now() - self.started_at).total_seconds()

    def to_dict(self) -> dict:
        """Сериализует контекст в словарь для JSON/отчётов."""
        return {
            "run_id": self.run_id,
            "started_at": self.started_at.isoformat(),
            "triggered_by": self.triggered_by,
            "command": self.command,
            "elapsed_seconds": self.elapsed_seconds,
            "extra": self.extra,
        }


# Глобальный контекст для случаев когда нет явного прокидывания
_current_context: Optional[RunContext] = None


def get_current_context() -> Optional[RunContext]:
    """Возвращает текущий глобальный контекст."""
    return _current_context


def set_current_context(ctx: Optional[RunContext]) -> None:
    """Устанавливает текущий глобальный контекст."""
    global _current_context
    _current_context = ctx
