"""
Domain Layer IPAM Source.

Чистая логика без I/O:
- InterfaceMatcher: описание интерфейса ↔ интерфейс хоста
- AddressPoolPopulator: план пулов адресов с учётом правил пропуска
"""

from .matcher import InterfaceMatch, InterfaceMatcher, MATCH_BY_MAC, MATCH_BY_NAME
from .populate import (
    AddressPoolPopulator,
    AddressSpacePlan,
    PoolPlan,
    PopulateResult,
    SkipKind,
    SkipReason,
    SkippedItem,
    parse_address,
    parse_network,
    reserved_addresses,
)

__all__ = [
    "InterfaceMatch",
    "InterfaceMatcher",
    "MATCH_BY_MAC",
    "MATCH_BY_NAME",
    "AddressPoolPopulator",
    "AddressSpacePlan",
    "PoolPlan",
    "PopulateResult",
    "SkipKind",
    "SkipReason",
    "SkippedItem",
    "parse_address",
    "parse_network",
    "reserved_addresses",
]
