"""Core ports (interfaces) for nimbus_flags.

These protocols separate flag resolution from where snapshots come from
and from how call sites consult flags.
"""

from __future__ import annotations

from typing import Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from ..feature_id import FeatureID
    from .feature_flags import FlagCheck
    from .snapshot import ConfigurationSnapshot


@runtime_checkable
class SnapshotSource(Protocol):
    """Supplies the current remote configuration."""

    def load(self) -> "ConfigurationSnapshot":
        """Return a snapshot; never None."""


@runtime_checkable
class FeatureFlagSource(Protocol):
    """Answers whether a feature is enabled."""

    def is_feature_enabled(self, feature_id: "FeatureID", checking: "FlagCheck") -> bool:
        """Check a feature against build and/or user configuration."""
