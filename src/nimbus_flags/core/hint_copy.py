"""Copy selection for contextual hints (CFRs)."""

from __future__ import annotations

import logging
from enum import Enum

from .. import strings
from ..feature_id import FeatureID
from .feature_flags import FeatureFlagManager, FlagCheck
from .ports import FeatureFlagSource
from .snapshot import ConfigurationSnapshot

logger = logging.getLogger(__name__)


class HintType(Enum):
    INACTIVE_TABS = "inactive-tabs"
    JUMP_BACK_IN = "jump-back-in"
    JUMP_BACK_IN_SYNCED_TAB = "jump-back-in-synced-tab"
    TOOLBAR_LOCATION = "toolbar-location"


class CopyKind(Enum):
    ACTION = "action"
    DESCRIPTION = "description"


class ArrowDirection(Enum):
    UP = "up"
    DOWN = "down"
    UNKNOWN = "unknown"


_ACTION_COPY = {
    HintType.INACTIVE_TABS: strings.INACTIVE_TABS_ACTION,
    HintType.TOOLBAR_LOCATION: strings.TOOLBAR_SEARCH_BAR_PLACEMENT_BUTTON,
    HintType.JUMP_BACK_IN: "",
    HintType.JUMP_BACK_IN_SYNCED_TAB: "",
}

# direction -> (copy when the new toolbar copy is enabled, legacy copy)
_TOOLBAR_DESCRIPTIONS = {
    ArrowDirection.UP: (
        strings.TOOLBAR_SEARCH_BAR_TOP_PLACEMENT,
        strings.TOOLBAR_SEARCH_BAR_PLACEMENT_FOR_EXISTING_USERS,
    ),
    ArrowDirection.DOWN: (
        strings.TOOLBAR_SEARCH_BAR_BOTTOM_PLACEMENT,
        strings.TOOLBAR_SEARCH_BAR_PLACEMENT_FOR_NEW_USERS,
    ),
}


class ContextualHintCopyProvider:
    """Returns the action or description copy for a contextual hint.

    The arrow direction only affects toolbar copy and is fixed when the
    provider is created.
    """

    def __init__(self, flags: FeatureFlagSource, arrow_direction: ArrowDirection | None = None):
        self._flags = flags
        self.arrow_direction = arrow_direction

    @classmethod
    def from_snapshot(
        cls, snapshot: ConfigurationSnapshot, arrow_direction: ArrowDirection | None = None
    ) -> "ContextualHintCopyProvider":
        return cls(FeatureFlagManager(snapshot), arrow_direction)

    def get_copy(self, copy_kind: CopyKind, hint: HintType) -> str:
        if copy_kind == CopyKind.ACTION:
            return _ACTION_COPY.get(hint, "")
        return self._description_copy(hint)

    def _is_enabled(self, feature_id: FeatureID) -> bool:
        return self._flags.is_feature_enabled(feature_id, FlagCheck.BUILD_ONLY)

    def _description_copy(self, hint: HintType) -> str:
        if hint == HintType.INACTIVE_TABS:
            return strings.INACTIVE_TABS_BODY
        if hint == HintType.JUMP_BACK_IN:
            if self._is_enabled(FeatureID.COPY_FOR_JUMP_BACK_IN):
                return strings.JUMP_BACK_IN_PERSONALIZED_HOME
            return strings.JUMP_BACK_IN_PERSONALIZED_HOME_OLD_COPY
        if hint == HintType.JUMP_BACK_IN_SYNCED_TAB:
            return strings.JUMP_BACK_IN_SYNCED_TAB
        if hint == HintType.TOOLBAR_LOCATION:
            return self._toolbar_description(self._is_enabled(FeatureID.COPY_FOR_TOOLBAR))
        return ""

    def _toolbar_description(self, show_new: bool) -> str:
        # Toolbar hints must always be created with an arrow direction
        options = _TOOLBAR_DESCRIPTIONS.get(self.arrow_direction)
        if options is None:
            logger.warning(
                "Toolbar hint copy requested without a usable arrow direction (%s)",
                self.arrow_direction,
            )
            return ""
        new_copy, legacy_copy = options
        return new_copy if show_new else legacy_copy
