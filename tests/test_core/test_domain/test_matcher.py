"""
Тесты для InterfaceMatcher.

Чистые unit-тесты без моков внешних систем.
"""

import pytest

from ipam_source.core.domain.matcher import (
    MATCH_BY_MAC,
    MATCH_BY_NAME,
    InterfaceMatcher,
)
from ipam_source.core.models import HostInterface, InterfaceDescriptor


@pytest.fixture
def hosts():
    """Интерфейсы хоста в порядке перечисления ОС."""
    return [
        HostInterface("lo", ""),
        HostInterface("eth0", "00:0d:3a:6e:18:25"),
        HostInterface("eth1", "00:0d:3a:6e:18:26"),
    ]


@pytest.mark.unit
class TestMatchByMac:
    """Сопоставление по MAC."""

    def setup_method(self):
        self.matcher = InterfaceMatcher()

    def test_mac_case_and_separator_insensitive(self, hosts):
        """MAC из файла без разделителей совпадает с MAC хоста через двоеточие."""
        found = self.matcher.find(InterfaceDescriptor(mac_address="000D3A6E1825"), hosts)

        assert found.host_interface.name == "eth0"
        assert found.matched_by == MATCH_BY_MAC

    @pytest.mark.parametrize("mac", [
        "00-0D-3A-6E-18-26",
        "000d.3a6e.1826",
        "00:0D:3A:6E:18:26",
    ])
    def test_mac_formats(self, hosts, mac):
        assert self.matcher.match(InterfaceDescriptor(mac_address=mac), hosts).name == "eth1"

    def test_mac_blocks_name_fallback(self, hosts):
        """Невалидный MAC + существующее имя: не найдено."""
        descriptor = InterfaceDescriptor(mac_address="invalid", name="eth0")

        assert self.matcher.match(descriptor, hosts) is None

    def test_mac_ignores_name_of_other_interface(self, hosts):
        """Имя указывает на eth1, MAC на eth0: выбирается eth0."""
        descriptor = InterfaceDescriptor(mac_address="000D3A6E1825", name="eth1")

        assert self.matcher.match(descriptor, hosts).name == "eth0"

    def test_unknown_mac(self, hosts):
        descriptor = InterfaceDescriptor(mac_address="AABBCCDDEEFF", name="eth0")

        assert self.matcher.match(descriptor, hosts) is None

    def test_host_without_hardware_address(self):
        """Интерфейс без MAC не совпадает ни с каким MAC."""
        hosts = [HostInterface("tun0", "")]

        assert self.matcher.match(InterfaceDescriptor(mac_address="000D3A6E1825"), hosts) is None

    def test_first_match_wins(self):
        """Два интерфейса с одним MAC: берётся первый по порядку."""
        hosts = [
            HostInterface("bond0", "00:0d:3a:6e:18:25"),
            HostInterface("eth0", "00:0d:3a:6e:18:25"),
        ]

        assert self.matcher.match(InterfaceDescriptor(mac_address="000D3A6E1825"), hosts).name == "bond0"


@pytest.mark.unit
class TestMatchByName:
    """Сопоставление по имени (MAC не задан)."""

    def setup_method(self):
        self.matcher = InterfaceMatcher()

    def test_exact_name(self, hosts):
        found = self.matcher.find(InterfaceDescriptor(name="eth1"), hosts)

        assert found.host_interface.hardware_address == "00:0d:3a:6e:18:26"
        assert found.matched_by == MATCH_BY_NAME

    @pytest.mark.parametrize("name", ["ETH0", "eth0 ", "eth"])
    def test_name_must_be_exact(self, hosts, name):
        assert self.matcher.match(InterfaceDescriptor(name=name), hosts) is None

    def test_empty_name_never_matches(self):
        """Пустое описание не совпадает с интерфейсом без имени."""
        hosts = [HostInterface("", "")]

        assert self.matcher.match(InterfaceDescriptor(), hosts) is None

    def test_no_hosts(self):
        assert self.matcher.match(InterfaceDescriptor(name="eth0"), []) is None


@pytest.mark.unit
class TestInterfaceMatch:
    """Тесты InterfaceMatch."""

    def test_match_to_dict(self, hosts):
        found = InterfaceMatcher().find(InterfaceDescriptor(name="eth0"), hosts)

        assert found.to_dict() == {
            "descriptor": "name=eth0",
            "interface": "eth0",
            "matched_by": "name",
        }
