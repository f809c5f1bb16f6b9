"""
Тесты для типизированных исключений.
"""

import pytest

from ipam_source.core.exceptions import (
    AddressExistsError,
    AddressSpaceError,
    ConfigError,
    DescriptorError,
    DescriptorParseError,
    DescriptorReadError,
    HostInterfaceError,
    InvalidAddressError,
    IpamSourceError,
    PoolExistsError,
    SourceError,
    SourceNotStartedError,
    StoreError,
    format_error_for_log,
    is_fatal,
)


@pytest.mark.unit
class TestHierarchy:
    """Иерархия исключений."""

    @pytest.mark.parametrize("error_cls,parent", [
        (DescriptorReadError, DescriptorError),
        (DescriptorParseError, DescriptorError),
        (SourceNotStartedError, SourceError),
        (AddressSpaceError, StoreError),
        (PoolExistsError, StoreError),
        (AddressExistsError, StoreError),
        (InvalidAddressError, StoreError),
        (HostInterfaceError, IpamSourceError),
        (ConfigError, IpamSourceError),
    ])
    def test_subclass(self, error_cls, parent):
        assert issubclass(error_cls, parent)
        assert issubclass(error_cls, IpamSourceError)


@pytest.mark.unit
class TestIpamSourceError:
    """Базовое исключение."""

    def test_message_only(self):
        error = IpamSourceError("Что-то пошло не так")

        assert str(error) == "Что-то пошло не так"
        assert error.details == {}

    def test_details_in_str(self):
        error = IpamSourceError("Ошибка", details={"key": "value"})

        assert str(error) == "Ошибка (key='value')"

    def test_to_dict(self):
        error = PoolExistsError("Пул уже существует", key="10.0.0.0/24")

        assert error.to_dict() == {
            "error_type": "PoolExistsError",
            "message": "Пул уже существует",
            "details": {"key": "10.0.0.0/24"},
        }


@pytest.mark.unit
class TestDescriptorErrors:
    """Ошибки файла интерфейсов."""

    def test_read_error_path(self):
        error = DescriptorReadError("No such file", path="/etc/kubernetes/interfaces.json")

        assert error.path == "/etc/kubernetes/interfaces.json"
        assert error.details["path"] == "/etc/kubernetes/interfaces.json"

    def test_parse_error_position(self):
        error = DescriptorParseError("Expecting value", path="interfaces.json", position="1:1")

        assert error.position == "1:1"
        assert error.details == {"position": "1:1", "path": "interfaces.json"}
        assert "position='1:1'" in str(error)

    def test_parse_error_without_position(self):
        error = DescriptorParseError("Bad")

        assert error.position is None
        assert error.path is None
        assert error.details == {}


@pytest.mark.unit
class TestOtherErrors:
    """Ошибки источника, хранилища и конфигурации."""

    def test_source_error(self):
        error = SourceNotStartedError("Sink is not attached", source="MAS")

        assert error.source == "MAS"
        assert error.details == {"source": "MAS"}

    def test_store_error_key(self):
        error = InvalidAddressError("Outside", key="192.168.0.1")

        assert error.key == "192.168.0.1"
        assert error.details == {"key": "192.168.0.1"}

    def test_config_error(self):
        error = ConfigError("Missing", config_file="config.yaml", key="source.file_path")

        assert error.config_file == "config.yaml"
        assert error.key == "source.file_path"
        assert error.details == {"config_file": "config.yaml", "key": "source.file_path"}


@pytest.mark.unit
class TestUtilities:
    """format_error_for_log и is_fatal."""

    def test_format_ipam_error(self):
        error = StoreError("Отказ", key="k")

        assert format_error_for_log(error) == "Отказ (key='k')"

    def test_format_other_error(self):
        assert format_error_for_log(ValueError("bad")) == "ValueError: bad"

    @pytest.mark.parametrize("error,expected", [
        (DescriptorReadError("x"), True),
        (DescriptorParseError("x"), True),
        (HostInterfaceError("x"), True),
        (SourceNotStartedError("x"), True),
        (AddressSpaceError("x"), True),
        (PoolExistsError("x"), False),
        (AddressExistsError("x"), False),
        (InvalidAddressError("x"), False),
        (RuntimeError("x"), True),
    ])
    def test_is_fatal(self, error, expected):
        assert is_fatal(error) is expected
