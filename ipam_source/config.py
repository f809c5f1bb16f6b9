"""
Загрузчик конфигурации из YAML.

Порядок применения (каждый следующий перекрывает предыдущий):
1. Значения по умолчанию (AppConfig)
2. YAML файл (явно указанный или найденный в search paths)
3. Переменные окружения (IPAM_INTERFACES_FILE, IPAM_LOG_LEVEL)

Пример:
    config = load_config()
    config.source.file_path     # None или путь
    resolve_interfaces_path(config)  # "/etc/kubernetes/interfaces.json"
"""

import os
from typing import Any, Dict, Optional

import yaml

from .core.config_schema import AppConfig, validate_config
from .core.constants import default_interfaces_path
from .core.exceptions import ConfigError
from .core.logging import get_logger

logger = get_logger(__name__)

# Где искать конфиг, если путь не передан явно
CONFIG_SEARCH_PATHS = [
    "ipam_source.yaml",
    "ipam_source.yml",
    "config.yaml",
    "/etc/ipam_source/config.yaml",
]

# Переменные окружения
ENV_INTERFACES_FILE = "IPAM_INTERFACES_FILE"
ENV_LOG_LEVEL = "IPAM_LOG_LEVEL"


def _find_config_file() -> Optional[str]:
    """Ищет первый существующий файл из CONFIG_SEARCH_PATHS."""
    for path in CONFIG_SEARCH_PATHS:
        if os.path.exists(path):
            return path
    return None


def _read_yaml(config_file: str) -> Dict[str, Any]:
    """
    Читает YAML файл конфигурации.

    Raises:
        ConfigError: Файл не читается или не является YAML-словарём
    """
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Не удалось прочитать конфигурацию: {e}", config_file=config_file) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Невалидный YAML: {e}", config_file=config_file) from e

    if not isinstance(data, dict):
        raise ConfigError("Конфигурация должна быть словарём", config_file=config_file)
    return data


def _merge_dict(base: dict, override: dict) -> None:
    """Рекурсивно мержит словари."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _merge_dict(base[key], value)
        else:
            base[key] = value


def _apply_env(data: Dict[str, Any]) -> None:
    """Применяет переопределения из переменных окружения."""
    file_path = os.getenv(ENV_INTERFACES_FILE)
    if file_path:
        data.setdefault("source", {})["file_path"] = file_path
    log_level = os.getenv(ENV_LOG_LEVEL)
    if log_level:
        data.setdefault("logging", {})["level"] = log_level.upper()


def load_config(config_file: Optional[str] = None) -> AppConfig:
    """
    Загружает конфигурацию.

    Args:
        config_file: Путь к YAML файлу (опционально)

    Returns:
        AppConfig: Валидированная конфигурация

    Raises:
        ConfigError: Явно указанный файл не найден или конфигурация невалидна
    """
    data: Dict[str, Any] = {}

    if config_file:
        if not os.path.exists(config_file):
            raise ConfigError("Файл конфигурации не найден", config_file=config_file)
    else:
        config_file = _find_config_file()

    if config_file:
        _merge_dict(data, _read_yaml(config_file))
        logger.debug("Конфигурация загружена", path=str(config_file))

    _apply_env(data)
    return validate_config(data, config_file=config_file or "<defaults>")


def resolve_interfaces_path(config: AppConfig, platform: Optional[str] = None) -> str:
    """
    Возвращает путь к файлу интерфейсов.

    Явное переопределение из конфигурации, иначе путь по умолчанию
    для платформы.

    Args:
        config: Конфигурация
        platform: Значение sys.platform (для тестов)

    Returns:
        str: Путь к файлу интерфейсов
    """
    if config.source.file_path:
        return config.source.file_path
    return default_interfaces_path(platform)
