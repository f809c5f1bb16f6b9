"""
Тесты JSON экспортера адресного пространства.
"""

import ipaddress
import json
from datetime import datetime

import pytest

from ipam_source.exporters import AddressSpaceExporter, snapshot_address_space
from ipam_source.store import MemorySink
from ipam_source.sync import InterfaceFileSource


@pytest.fixture
def refreshed(interfaces_file, host_interfaces):
    """Результат refresh() тестового файла интерфейсов."""
    source = InterfaceFileSource(str(interfaces_file), host_interfaces=lambda: host_interfaces)
    source.start(MemorySink())
    return source.refresh()


@pytest.mark.unit
class TestSnapshot:
    """Тесты snapshot_address_space."""

    def test_snapshot(self, refreshed):
        snapshot = snapshot_address_space(refreshed.space)

        assert snapshot["id"] == "LocalDefaultAddressSpace"
        assert snapshot["scope"] == 0
        assert snapshot["pools"][0] == {
            "network": "10.240.0.0/12",
            "interface": "eth0",
            "priority": 1,
            "addresses": ["10.240.0.5"],
        }


@pytest.mark.unit
class TestAddressSpaceExporter:
    """Тесты AddressSpaceExporter."""

    def test_build_with_result(self, refreshed):
        data = AddressSpaceExporter().build(refreshed.space, refreshed)

        assert set(data) == {"address_space", "stats", "skipped", "rejected", "metadata"}
        assert data["stats"]["pools"] == 2
        assert data["rejected"] == []
        assert [item["value"] for item in data["skipped"]["addresses"]] == ["10.240.0.4", "1.0.0.4"]
        assert data["metadata"]["total_pools"] == 2
        assert data["metadata"]["source_file"] == refreshed.path

    def test_build_space_only(self, refreshed):
        data = AddressSpaceExporter(include_metadata=False).build(refreshed.space)

        assert list(data) == ["address_space"]

    def test_to_json(self, refreshed):
        text = AddressSpaceExporter(indent=None).to_json(refreshed.space, refreshed)

        assert "\n" not in text
        assert json.loads(text)["address_space"]["pools"][1]["addresses"] == [
            "1.0.0.5", "1.0.0.6", "1.0.0.7",
        ]

    def test_export_creates_dirs(self, refreshed, tmp_path):
        target = tmp_path / "reports" / "pools.json"

        path = AddressSpaceExporter().export(refreshed.space, target, refreshed)

        assert path == target
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["stats"]["addresses"] == 4

    @pytest.mark.parametrize("value,expected", [
        (ipaddress.ip_address("10.0.0.5"), "10.0.0.5"),
        (ipaddress.ip_network("fd00::/64"), "fd00::/64"),
        (datetime(2026, 10, 18, 12, 0), "2026-10-18T12:00:00"),
        ({"b", "a"}, ["a", "b"]),
    ])
    def test_json_serializer(self, value, expected):
        assert AddressSpaceExporter._json_serializer(value) == expected

    def test_json_serializer_unknown(self):
        with pytest.raises(TypeError):
            AddressSpaceExporter._json_serializer(object())
