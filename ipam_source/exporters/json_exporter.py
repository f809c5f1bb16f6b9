"""
JSON экспортер адресного пространства.

Сохраняет снимок пулов (сеть, интерфейс, приоритет, адреса) и, если передан,
результат refresh() со статистикой и пропусками.

Пример использования:
    exporter = AddressSpaceExporter(indent=2)
    print(exporter.to_json(space, result))
    exporter.export(space, "reports/pools.json", result)
"""

import ipaddress
import json
from datetime import datetime, date
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.logging import get_logger

logger = get_logger(__name__)


def snapshot_address_space(space: Any) -> Dict[str, Any]:
    """
    Снимок адресного пространства в виде словаря.

    Работает с любым хранилищем, у пространства которого есть id, scope
    и pools (ключ сети → пул с interface_name, priority, addresses).

    Args:
        space: Адресное пространство

    Returns:
        Dict: {"id", "scope", "pools": [...]}
    """
    pools = []
    for key, pool in space.pools.items():
        pools.append({
            "network": str(key),
            "interface": pool.interface_name,
            "priority": pool.priority,
            "addresses": [str(addr) for addr in pool.addresses],
        })
    return {"id": space.id, "scope": space.scope, "pools": pools}


class AddressSpaceExporter:
    """
    Экспортер адресного пространства в JSON.

    Attributes:
        indent: Отступ для форматирования (None = компактный)
        ensure_ascii: Экранировать не-ASCII символы
        include_metadata: Добавить метаданные (дата, количество пулов)
        encoding: Кодировка файла
    """

    def __init__(
        self,
        indent: Optional[int] = 2,
        ensure_ascii: bool = False,
        include_metadata: bool = True,
        encoding: str = "utf-8",
    ):
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.include_metadata = include_metadata
        self.encoding = encoding

    def build(self, space: Any, result: Any = None) -> Dict[str, Any]:
        """
        Формирует структуру для записи.

        Args:
            space: Адресное пространство
            result: RefreshResult (опционально)

        Returns:
            Dict: Данные для JSON
        """
        output: Dict[str, Any] = {"address_space": snapshot_address_space(space)}

        if result is not None:
            output["stats"] = result.stats()
            output["skipped"] = result.to_dict()["skipped"]
            output["rejected"] = [item.to_dict() for item in result.rejected]

        if self.include_metadata:
            output["metadata"] = {
                "generated_at": datetime.now().isoformat(),
                "total_pools": len(space.pools),
                "source_file": getattr(result, "path", None),
            }
        return output

    def to_json(self, space: Any, result: Any = None) -> str:
        """Возвращает JSON строку."""
        return json.dumps(
            self.build(space, result),
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=self._json_serializer,
        )

    def export(
        self,
        space: Any,
        file_path: Union[str, Path],
        result: Any = None,
    ) -> Path:
        """
        Записывает JSON в файл.

        Args:
            space: Адресное пространство
            file_path: Путь к файлу
            result: RefreshResult (опционально)

        Returns:
            Path: Путь к записанному файлу
        """
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(space, result), encoding=self.encoding)
        logger.info("Снимок адресного пространства сохранён", path=str(path))
        return path

    @staticmethod
    def _json_serializer(obj: Any) -> Any:
        """Сериализатор для нестандартных типов данных."""
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if isinstance(obj, (ipaddress.IPv4Address, ipaddress.IPv6Address,
                            ipaddress.IPv4Network, ipaddress.IPv6Network)):
            return str(obj)
        if isinstance(obj, set):
            return sorted(str(item) for item in obj)
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
