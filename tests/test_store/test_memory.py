"""
Тесты хранилища адресных пространств в памяти.
"""

import ipaddress

import pytest

from ipam_source.core.constants import LOCAL_DEFAULT_ADDRESS_SPACE_ID, LOCAL_SCOPE
from ipam_source.core.exceptions import (
    AddressExistsError,
    AddressSpaceError,
    InvalidAddressError,
    PoolExistsError,
)
from ipam_source.store import AddressConfigSink, MemorySink


def _net(value):
    return ipaddress.ip_network(value)


def _ip(value):
    return ipaddress.ip_address(value)


@pytest.mark.unit
class TestMemorySink:
    """Создание и активация пространств."""

    def setup_method(self):
        self.sink = MemorySink()

    def test_is_sink(self):
        assert isinstance(self.sink, AddressConfigSink)

    def test_new_space_not_active(self):
        space = self.sink.new_address_space(LOCAL_DEFAULT_ADDRESS_SPACE_ID, LOCAL_SCOPE)

        assert space.id == LOCAL_DEFAULT_ADDRESS_SPACE_ID
        assert space.scope == LOCAL_SCOPE
        assert space.pools == {}
        assert self.sink.get_address_space(LOCAL_DEFAULT_ADDRESS_SPACE_ID) is None

    def test_set_space_activates(self):
        space = self.sink.new_address_space(LOCAL_DEFAULT_ADDRESS_SPACE_ID, LOCAL_SCOPE)

        self.sink.set_address_space(space)

        assert self.sink.get_address_space(LOCAL_DEFAULT_ADDRESS_SPACE_ID) is space

    def test_set_space_replaces_previous(self):
        first = self.sink.new_address_space("local", LOCAL_SCOPE)
        second = self.sink.new_address_space("local", LOCAL_SCOPE)
        self.sink.set_address_space(first)

        self.sink.set_address_space(second)

        assert self.sink.spaces == {"local": second}

    def test_empty_space_id(self):
        with pytest.raises(AddressSpaceError):
            self.sink.new_address_space("", LOCAL_SCOPE)

    def test_foreign_space_rejected(self):
        space = MemorySink().new_address_space("local", LOCAL_SCOPE)

        with pytest.raises(AddressSpaceError) as exc_info:
            self.sink.set_address_space(space)

        assert exc_info.value.key == "local"
        assert self.sink.spaces == {}


@pytest.mark.unit
class TestAddressSpace:
    """Пулы и записи адресов."""

    def setup_method(self):
        self.space = MemorySink().new_address_space("local", LOCAL_SCOPE)

    def test_new_pool(self):
        pool = self.space.new_address_pool("eth0", 0, _net("10.240.0.0/12"))

        assert self.space.pools == {"10.240.0.0/12": pool}
        assert pool.interface_name == "eth0"
        assert pool.priority == 0

    def test_duplicate_pool(self):
        self.space.new_address_pool("eth0", 0, _net("10.0.0.0/24"))

        with pytest.raises(PoolExistsError) as exc_info:
            self.space.new_address_pool("eth1", 1, _net("10.0.0.0/24"))

        assert exc_info.value.key == "10.0.0.0/24"
        assert self.space.pools["10.0.0.0/24"].interface_name == "eth0"

    def test_new_record(self):
        pool = self.space.new_address_pool("eth0", 1, _net("10.0.0.0/24"))

        record = pool.new_address_record(_ip("10.0.0.5"))

        assert record.address == _ip("10.0.0.5")
        assert record.in_use is False
        assert list(pool.addresses) == ["10.0.0.5"]

    def test_duplicate_record(self):
        pool = self.space.new_address_pool("eth0", 1, _net("10.0.0.0/24"))
        pool.new_address_record(_ip("10.0.0.5"))

        with pytest.raises(AddressExistsError):
            pool.new_address_record(_ip("10.0.0.5"))

    @pytest.mark.parametrize("address", ["10.0.1.5", "fd00::5"])
    def test_record_outside_network(self, address):
        pool = self.space.new_address_pool("eth0", 1, _net("10.0.0.0/24"))

        with pytest.raises(InvalidAddressError):
            pool.new_address_record(_ip(address))

        assert pool.addresses == {}

    def test_to_dict(self):
        pool = self.space.new_address_pool("eth0", 1, _net("10.0.0.0/24"))
        pool.new_address_record(_ip("10.0.0.5"))

        assert self.space.to_dict() == {
            "id": "local",
            "scope": 0,
            "pools": [{
                "network": "10.0.0.0/24",
                "interface": "eth0",
                "priority": 1,
                "addresses": ["10.0.0.5"],
            }],
        }
        assert pool.addresses["10.0.0.5"].to_dict() == {"address": "10.0.0.5", "in_use": False}
