"""Feature flag checks combining remote (build) values with user preferences."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, auto
from types import MappingProxyType

from ..feature_id import FeatureID, StartAtHomeSetting
from .resolver import FeatureFlagResolver
from .snapshot import ConfigurationSnapshot


class FlagCheck(Enum):
    BUILD_ONLY = auto()
    USER_ONLY = auto()
    BUILD_AND_USER = auto()


class FeatureFlagManager:
    """Read-only flag lookups for call sites.

    User preferences map a FeatureID to the user's choice. A missing
    preference means the user never changed it, so the build value stands in.
    The start-at-home choice is stored under ``FeatureID.START_AT_HOME`` as a
    ``StartAtHomeSetting``, or as a boolean where False turns it off and True
    keeps the remote setting.
    """

    def __init__(
        self,
        snapshot: ConfigurationSnapshot,
        user_preferences: Mapping[FeatureID, object] | None = None,
        resolver: FeatureFlagResolver | None = None,
    ):
        self._snapshot = snapshot
        self._user_preferences = MappingProxyType(dict(user_preferences or {}))
        self._resolver = resolver or FeatureFlagResolver()

    def is_feature_enabled(
        self, feature_id: FeatureID, checking: FlagCheck = FlagCheck.BUILD_ONLY
    ) -> bool:
        build_value = self._resolver.resolve(feature_id, self._snapshot)
        if checking == FlagCheck.BUILD_ONLY:
            return build_value

        user_value = self._user_value(feature_id, build_value)
        if checking == FlagCheck.USER_ONLY:
            return user_value
        return build_value and user_value

    def _user_value(self, feature_id: FeatureID, build_value: bool) -> bool:
        if feature_id == FeatureID.START_AT_HOME:
            build_setting = self._resolver.start_at_home(self._snapshot)
            return self._user_start_at_home(build_setting) != StartAtHomeSetting.DISABLED
        preference = self._user_preferences.get(feature_id)
        if isinstance(preference, bool):
            return preference
        return build_value

    def _user_start_at_home(self, build_setting: StartAtHomeSetting) -> StartAtHomeSetting:
        # A boolean preference can only switch the remote setting off
        preference = self._user_preferences.get(FeatureID.START_AT_HOME)
        if isinstance(preference, StartAtHomeSetting):
            return preference
        if preference is False:
            return StartAtHomeSetting.DISABLED
        return build_setting

    def start_at_home_setting(
        self, checking: FlagCheck = FlagCheck.BUILD_AND_USER
    ) -> StartAtHomeSetting:
        build_setting = self._resolver.start_at_home(self._snapshot)
        if checking == FlagCheck.BUILD_ONLY:
            return build_setting

        user_setting = self._user_start_at_home(build_setting)
        if checking == FlagCheck.BUILD_AND_USER and build_setting == StartAtHomeSetting.DISABLED:
            return StartAtHomeSetting.DISABLED
        return user_setting

    def wallpaper_version(self) -> str:
        return self._resolver.wallpaper_version(self._snapshot)
