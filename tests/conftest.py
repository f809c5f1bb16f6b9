"""
Pytest configuration и общие fixtures для тестов.

Предоставляет переиспользуемые fixtures:
- fixtures_dir / interfaces_file: тестовый файл интерфейсов
- host_interfaces: интерфейсы хоста (eth0 с MAC 00:0d:3a:6e:18:25)
- write_interfaces: запись файла интерфейсов во временную папку
- restore_logging: восстановление root логгера после setup_logging
"""

import json
import logging
from pathlib import Path
from typing import Any, List

import pytest

from ipam_source.core.context import set_current_context
from ipam_source.core.models import HostInterface


@pytest.fixture
def fixtures_dir() -> Path:
    """Возвращает путь к директории fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def interfaces_file(fixtures_dir) -> Path:
    """Файл интерфейсов: eth0 по имени и MAC 000D3A6E1825 (первичный)."""
    return fixtures_dir / "interfaces.json"


@pytest.fixture
def host_interfaces() -> List[HostInterface]:
    """
    Интерфейсы хоста.

    Returns:
        List[HostInterface]: eth0 с MAC 00:0d:3a:6e:18:25
    """
    return [HostInterface(name="eth0", hardware_address="00:0d:3a:6e:18:25")]


@pytest.fixture
def write_interfaces(tmp_path):
    """
    Fixture для записи файла интерфейсов.

    Usage:
        path = write_interfaces([{"Name": "eth0", "IPSubnets": []}])
        path = write_interfaces("not json")
    """
    def _write(content: Any, name: str = "interfaces.json") -> Path:
        path = tmp_path / name
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def restore_logging():
    """Восстанавливает handlers и уровень root логгера после теста."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture(autouse=True)
def reset_run_context():
    """Сбрасывает глобальный RunContext после каждого теста."""
    yield
    set_current_context(None)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Без переменных окружения IPAM_* и без config.yaml в рабочей папке."""
    monkeypatch.delenv("IPAM_INTERFACES_FILE", raising=False)
    monkeypatch.delenv("IPAM_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def pytest_configure(config):
    """Регистрация custom markers для pytest."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (быстрые, без внешних зависимостей)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (файл интерфейсов + sink в памяти)"
    )
