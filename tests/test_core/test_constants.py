"""
Тесты для core/constants.

Тестируем:
- normalize_mac_* и macs_equal: регистр и разделители
- default_interfaces_path: путь по платформе
- pool_priority
"""

import pytest

from ipam_source.core.constants import (
    DEFAULT_LINUX_INTERFACES_PATH,
    DEFAULT_WINDOWS_INTERFACES_PATH,
    LOCAL_DEFAULT_ADDRESS_SPACE_ID,
    LOCAL_SCOPE,
    PRIORITY_PRIMARY,
    PRIORITY_SECONDARY,
    default_interfaces_path,
    macs_equal,
    normalize_mac_ieee,
    normalize_mac_raw,
    pool_priority,
)


# =============================================================================
# MAC NORMALIZATION TESTS
# =============================================================================


@pytest.mark.unit
class TestNormalizeMacRaw:
    """Тесты normalize_mac_raw: lowercase, без разделителей."""

    @pytest.mark.parametrize("mac,expected", [
        # IEEE формат
        ("00:0d:3a:6e:18:25", "000d3a6e1825"),
        ("AA:BB:CC:DD:EE:FF", "aabbccddeeff"),
        # Cisco формат
        ("000d.3a6e.1825", "000d3a6e1825"),
        # Windows формат
        ("00-0D-3A-6E-18-25", "000d3a6e1825"),
        # Без разделителей (как в файле интерфейсов)
        ("000D3A6E1825", "000d3a6e1825"),
        # С пробелами
        ("  00:0d:3a:6e:18:25  ", "000d3a6e1825"),
        # Длинный hardware address
        ("00:11:22:33:44:55:66:77", "0011223344556677"),
    ])
    def test_valid_mac(self, mac: str, expected: str):
        """Валидные MAC нормализуются в hex lowercase."""
        assert normalize_mac_raw(mac) == expected

    @pytest.mark.parametrize("mac", [
        "",
        None,
        "invalid",
        "zz:zz:zz:zz:zz:zz",
        "000d3a6e182",  # нечётная длина
        ":::",
    ])
    def test_invalid_mac_returns_empty(self, mac):
        """Невалидные MAC возвращают пустую строку."""
        assert normalize_mac_raw(mac) == ""


@pytest.mark.unit
class TestNormalizeMacIeee:
    """Тесты normalize_mac_ieee: формат aa:bb:cc:dd:ee:ff."""

    @pytest.mark.parametrize("mac,expected", [
        ("000D3A6E1825", "00:0d:3a:6e:18:25"),
        ("000d.3a6e.1825", "00:0d:3a:6e:18:25"),
        ("00-0D-3A-6E-18-25", "00:0d:3a:6e:18:25"),
    ])
    def test_formats_as_ieee(self, mac: str, expected: str):
        assert normalize_mac_ieee(mac) == expected

    def test_invalid_returns_empty(self):
        assert normalize_mac_ieee("invalid") == ""
        assert normalize_mac_ieee("") == ""


@pytest.mark.unit
class TestMacsEqual:
    """Тесты macs_equal."""

    def test_separator_and_case_insensitive(self):
        assert macs_equal("000D3A6E1825", "00:0d:3a:6e:18:25")

    def test_different_macs(self):
        assert not macs_equal("000D3A6E1825", "00:0d:3a:6e:18:26")

    def test_empty_never_matches(self):
        """Пустой MAC не совпадает даже с пустым hardware address."""
        assert not macs_equal("", "")

    def test_invalid_never_matches(self):
        assert not macs_equal("invalid", "invalid")


# =============================================================================
# PATHS / IPAM CONSTANTS
# =============================================================================


@pytest.mark.unit
class TestDefaultInterfacesPath:
    """Путь к файлу интерфейсов по умолчанию."""

    @pytest.mark.parametrize("platform,expected", [
        ("linux", DEFAULT_LINUX_INTERFACES_PATH),
        ("darwin", DEFAULT_LINUX_INTERFACES_PATH),
        ("win32", DEFAULT_WINDOWS_INTERFACES_PATH),
    ])
    def test_platform(self, platform, expected):
        assert default_interfaces_path(platform) == expected

    def test_values(self):
        assert DEFAULT_LINUX_INTERFACES_PATH == "/etc/kubernetes/interfaces.json"
        assert DEFAULT_WINDOWS_INTERFACES_PATH == "c:\\k\\interfaces.json"


@pytest.mark.unit
class TestIpamConstants:
    """Константы адресного пространства и приоритеты."""

    def test_local_space(self):
        assert LOCAL_DEFAULT_ADDRESS_SPACE_ID == "LocalDefaultAddressSpace"
        assert LOCAL_SCOPE == 0

    def test_pool_priority(self):
        assert pool_priority(True) == PRIORITY_PRIMARY == 0
        assert pool_priority(False) == PRIORITY_SECONDARY == 1
