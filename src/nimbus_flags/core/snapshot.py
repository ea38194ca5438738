"""Read-only view of a remote configuration snapshot."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({str(key): _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


class ConfigurationSnapshot:
    """Feature name -> settings record, as supplied by the Nimbus client.

    The schema belongs to the remote configuration service; this class only
    offers read access and never validates field types.
    """

    def __init__(self, data: Mapping[str, Any] | None = None):
        self._data = _freeze(data or {})

    @classmethod
    def empty(cls) -> "ConfigurationSnapshot":
        return cls()

    def feature(self, name: str) -> Mapping[str, Any]:
        """Return the settings record for a feature, or an empty mapping."""
        record = self._data.get(name)
        if isinstance(record, Mapping):
            return record
        return _EMPTY

    def lookup(self, feature: str, *path: str) -> Any | None:
        """Walk ``path`` below a feature record; None when any step is missing."""
        node: Any = self.feature(feature)
        for key in path:
            if not isinstance(node, Mapping):
                return None
            node = node.get(key)
            if node is None:
                return None
        return node

    @property
    def features(self) -> tuple[str, ...]:
        return tuple(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigurationSnapshot):
            return NotImplemented
        return dict(self._data) == dict(other._data)

    def __repr__(self) -> str:
        return f"ConfigurationSnapshot(features={list(self._data)!r})"
