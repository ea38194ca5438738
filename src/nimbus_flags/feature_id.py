"""Feature identifiers and the remote configuration groups they belong to"""

from enum import Enum


class FeatureID(Enum):
    """Toggleable behaviours resolved from the Nimbus snapshot

    Values are the kebab-case names used on the command line and in
    user preference files.
    """

    PULL_TO_REFRESH = "pull-to-refresh"
    REPORT_SITE_ISSUE = "report-site-issue"
    SHAKE_TO_RESTORE = "shake-to-restore"
    BOTTOM_SEARCH_BAR = "bottom-search-bar"
    SEARCH_HIGHLIGHTS = "search-highlights"
    TOP_SITES = "top-sites"
    JUMP_BACK_IN = "jump-back-in"
    RECENTLY_SAVED = "recently-saved"
    HISTORY_HIGHLIGHTS = "history-highlights"
    POCKET = "pocket"
    JUMP_BACK_IN_SYNCED_TAB = "jump-back-in-synced-tab"
    SPONSORED_POCKET = "sponsored-pocket"
    INACTIVE_TABS = "inactive-tabs"
    HISTORY_GROUPS = "history-groups"
    TAB_TRAY_GROUPS = "tab-tray-groups"
    SPONSORED_TILES = "sponsored-tiles"
    START_AT_HOME = "start-at-home"
    WALLPAPERS = "wallpapers"
    WALLPAPER_VERSION = "wallpaper-version"
    WALLPAPER_ONBOARDING_SHEET = "wallpaper-onboarding-sheet"
    ONBOARDING_FRESH_INSTALL = "onboarding-fresh-install"
    ONBOARDING_UPGRADE = "onboarding-upgrade"
    CONTEXTUAL_HINT_FOR_JUMP_BACK_IN_SYNCED_TAB = "contextual-hint-for-jump-back-in-synced-tab"
    COPY_FOR_JUMP_BACK_IN = "copy-for-jump-back-in"
    COPY_FOR_TOOLBAR = "copy-for-toolbar"


class FeatureGroup(Enum):
    """Configuration sections a feature is resolved through"""

    GENERAL = "general"
    AWESOME_BAR = "awesome-bar"
    HOMESCREEN_SECTIONS = "homescreen-sections"
    JUMP_BACK_IN_SYNCED_TAB = "jump-back-in-synced-tab"
    SPONSORED_POCKET = "sponsored-pocket"
    TAB_TRAY = "tab-tray"
    GROUPING = "grouping"
    SPONSORED_TILES = "sponsored-tiles"
    START_AT_HOME = "start-at-home"
    WALLPAPERS = "wallpapers"
    MR_2022 = "mr-2022"  # Temporary experiment override


class StartAtHomeSetting(Enum):
    DISABLED = "disabled"
    AFTER_FOUR_HOURS = "after-four-hours"
    ALWAYS = "always"


def parse_feature_id(name: str) -> FeatureID | None:
    """Look up a FeatureID by its kebab-case value or its enum name"""
    try:
        return FeatureID(name)
    except ValueError:
        return FeatureID.__members__.get(name.upper().replace("-", "_"))


def parse_start_at_home(value) -> StartAtHomeSetting:
    """Parse a start-at-home setting, falling back to DISABLED"""
    if isinstance(value, StartAtHomeSetting):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower().replace("_", "-")
        # Manifest variants are camelCase in some exports
        if normalized == "afterfourhours":
            normalized = StartAtHomeSetting.AFTER_FOUR_HOURS.value
        for setting in StartAtHomeSetting:
            if setting.value == normalized:
                return setting
    return StartAtHomeSetting.DISABLED
