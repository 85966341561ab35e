# Kodebase Frozen Data
# Read-only views of nested configuration documents

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


def freeze(data: Any) -> Any:
    """
    Build a read-only copy of a nested document.

    Mappings become ``MappingProxyType`` views and lists become tuples, at
    every level.
    """
    if isinstance(data, Mapping):
        return MappingProxyType({key: freeze(value) for key, value in data.items()})
    if isinstance(data, (list, tuple)):
        return tuple(freeze(item) for item in data)
    return data


def thaw(data: Any) -> Any:
    """Build a plain, mutable copy of a (possibly frozen) document."""
    if isinstance(data, Mapping):
        return {key: thaw(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [thaw(item) for item in data]
    return data
