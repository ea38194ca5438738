"""Feature flag resolution over a Nimbus configuration snapshot.

Every lookup degrades to a safe default (False, DISABLED, or the default
wallpaper version) when the snapshot lacks a key or holds an unexpected
type. Nothing here raises for configuration content.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..feature_id import FeatureID, StartAtHomeSetting, parse_start_at_home
from .flag_table import START_AT_HOME, WALLPAPER, FlagRoute, LookupKind, route_for
from .snapshot import ConfigurationSnapshot

logger = logging.getLogger(__name__)

DEFAULT_WALLPAPER_VERSION = "v1"


def _as_flag(value, route: FlagRoute) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        logger.debug("No value at %s, defaulting to False", route.describe())
    else:
        logger.debug("Non-boolean %r at %s, defaulting to False", value, route.describe())
    return False


def _read_field(route: FlagRoute, snapshot: ConfigurationSnapshot) -> bool:
    return _as_flag(snapshot.lookup(route.feature, *route.path), route)


def _read_keyed(route: FlagRoute, snapshot: ConfigurationSnapshot) -> bool:
    enabled_map = snapshot.lookup(route.feature, *route.path)
    if not isinstance(enabled_map, Mapping):
        return _as_flag(None, route)
    return _as_flag(enabled_map.get(route.key), route)


def _read_start_at_home(route: FlagRoute, snapshot: ConfigurationSnapshot) -> bool:
    setting = parse_start_at_home(snapshot.lookup(route.feature, *route.path))
    return setting != StartAtHomeSetting.DISABLED


_READERS = {
    LookupKind.FIELD: _read_field,
    LookupKind.KEYED: _read_keyed,
    LookupKind.START_AT_HOME: _read_start_at_home,
}


class FeatureFlagResolver:
    """Resolves FeatureIDs against a snapshot passed in on every call.

    Args:
        experiment_overrides: Read MR 2022 features from the experiment's
            override record. When False, the natural routes they supersede
            are used instead.
    """

    def __init__(self, experiment_overrides: bool = True):
        self.experiment_overrides = experiment_overrides

    def resolve(self, feature_id: FeatureID, snapshot: ConfigurationSnapshot) -> bool:
        route = route_for(feature_id, use_overrides=self.experiment_overrides)
        if route is None:
            logger.warning("No configuration route for %s, defaulting to False", feature_id)
            return False
        return _READERS[route.kind](route, snapshot)

    def resolve_all(self, snapshot: ConfigurationSnapshot) -> dict[FeatureID, bool]:
        return {feature_id: self.resolve(feature_id, snapshot) for feature_id in FeatureID}

    def start_at_home(self, snapshot: ConfigurationSnapshot) -> StartAtHomeSetting:
        raw = snapshot.lookup(START_AT_HOME, "setting")
        setting = parse_start_at_home(raw)
        if raw is not None and setting == StartAtHomeSetting.DISABLED and raw != "disabled":
            logger.debug("Unrecognised start-at-home setting %r, using disabled", raw)
        return setting

    def wallpaper_version(self, snapshot: ConfigurationSnapshot) -> str:
        version = snapshot.lookup(WALLPAPER, "configuration", "version")
        if isinstance(version, str) and version:
            return version
        return DEFAULT_WALLPAPER_VERSION
