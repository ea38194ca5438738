"""File adapters for snapshots and user preferences.

YAML is read with ``yaml.safe_load``, so JSON exports load too. Unreadable
files degrade to empty results with a logged warning; flag resolution then
falls back to its defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..core.snapshot import ConfigurationSnapshot
from ..feature_id import FeatureID, StartAtHomeSetting, parse_feature_id, parse_start_at_home

logger = logging.getLogger(__name__)


def _load_mapping(path: Path) -> dict[str, Any]:
    if not path.exists():
        logger.warning("Config file not found: %s", path)
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Error loading %s: %s", path, e)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Expected a mapping at the top of %s, got %s", path, type(data).__name__)
        return {}
    return data


def load_snapshot(path: str | Path) -> ConfigurationSnapshot:
    """Load a configuration snapshot from a YAML/JSON file."""
    path = Path(path)
    data = _load_mapping(path)
    # Nimbus exports may wrap all feature records in a lone "features" key
    if list(data) == ["features"] and isinstance(data["features"], dict):
        data = data["features"]
    snapshot = ConfigurationSnapshot(data)
    logger.debug("Loaded snapshot from %s with features: %s", path, snapshot.features)
    return snapshot


def load_user_preferences(path: str | Path) -> dict[FeatureID, bool | StartAtHomeSetting]:
    """Load ``{feature-id: bool}`` preferences; start-at-home takes a setting name."""
    preferences: dict[FeatureID, bool | StartAtHomeSetting] = {}
    for name, value in _load_mapping(Path(path)).items():
        feature_id = parse_feature_id(str(name))
        if feature_id is None:
            logger.warning("Skipping preference for unknown feature: %s", name)
            continue
        if feature_id == FeatureID.START_AT_HOME and isinstance(value, str):
            preferences[feature_id] = parse_start_at_home(value)
        elif isinstance(value, bool):
            preferences[feature_id] = value
        else:
            logger.warning("Skipping non-boolean preference %s=%r", name, value)
    return preferences


class FileSnapshotSource:
    """SnapshotSource reading a file on every load."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> ConfigurationSnapshot:
        return load_snapshot(self.path)
