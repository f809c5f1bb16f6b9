"""
Нормализация MAC-адресов.

Для сравнения MAC из файла описания с hardware address интерфейса хоста
оба значения приводятся к сырому формату: нижний регистр, без разделителей.
"""

import re

# Разделители, которые встречаются в разных форматах записи MAC
MAC_SEPARATORS = (":", "-", ".", " ")

_HEX_RE = re.compile(r"^[0-9a-f]+$")


def normalize_mac_raw(mac: str) -> str:
    """
    Нормализует MAC-адрес в сырой формат (нижний регистр, без разделителей).

    Длина не фиксирована: hardware address бывает длиннее 6 байт
    (например, InfiniBand).

    Args:
        mac: MAC-адрес в любом формате

    Returns:
        str: Шестнадцатеричная строка (000d3a6e1825) или "" если MAC невалидный
    """
    if not mac:
        return ""
    mac_clean = mac.strip().lower()
    for char in MAC_SEPARATORS:
        mac_clean = mac_clean.replace(char, "")
    if not mac_clean or len(mac_clean) % 2 or not _HEX_RE.match(mac_clean):
        return ""
    return mac_clean


def normalize_mac_ieee(mac: str) -> str:
    """
    Нормализует MAC-адрес в IEEE формат (aa:bb:cc:dd:ee:ff).

    Args:
        mac: MAC-адрес в любом формате

    Returns:
        str: MAC через двоеточие (или пустая строка)
    """
    clean = normalize_mac_raw(mac)
    if not clean:
        return ""
    return ":".join(clean[i : i + 2] for i in range(0, len(clean), 2))


def macs_equal(first: str, second: str) -> bool:
    """
    Сравнивает два MAC-адреса без учёта регистра и разделителей.

    Невалидный или пустой MAC не равен ничему.

    Args:
        first: MAC-адрес
        second: MAC-адрес

    Returns:
        bool: True если адреса совпадают
    """
    first_raw = normalize_mac_raw(first)
    return bool(first_raw) and first_raw == normalize_mac_raw(second)
