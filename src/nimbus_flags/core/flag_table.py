"""Static routing table from FeatureID to the snapshot field that backs it.

Each row names the group a feature belongs to, the route it is read through
normally, and optionally an override route. Override routes belong to the
MR 2022 experiment (FXIOS-4875): while that experiment runs they supersede the
natural routes. Ending it means dropping the override column, not touching
resolver code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from ..feature_id import FeatureGroup, FeatureID


class LookupKind(Enum):
    FIELD = auto()  # Boolean at ``path``
    KEYED = auto()  # Map at ``path``, boolean under ``key``
    START_AT_HOME = auto()  # Enum at ``path``; enabled unless disabled


@dataclass(frozen=True)
class FlagRoute:
    feature: str
    path: tuple[str, ...]
    kind: LookupKind = LookupKind.FIELD
    key: str | None = None

    def describe(self) -> str:
        dotted = ".".join((self.feature, *self.path))
        return f"{dotted}[{self.key}]" if self.key else dotted


@dataclass(frozen=True)
class FlagRow:
    group: FeatureGroup
    route: FlagRoute
    override: FlagRoute | None = None


# Snapshot feature records, spelled as in the Nimbus manifest
GENERAL_APP_FEATURES = "general-app-features"
SEARCH = "search"
HOMESCREEN = "homescreenFeature"
TAB_TRAY = "tabTrayFeature"
SEARCH_TERM_GROUPS = "search-term-groups-feature"
START_AT_HOME = "start-at-home-feature"
WALLPAPER = "wallpaper-feature"
ONBOARDING = "onboarding-feature"
CONTEXTUAL_HINT = "contextual-hint-feature"
MR_2022 = "mr-2022"


def _field(feature: str, *path: str) -> FlagRoute:
    return FlagRoute(feature=feature, path=path)


def _keyed(feature: str, map_name: str, key: str) -> FlagRoute:
    return FlagRoute(feature=feature, path=(map_name,), kind=LookupKind.KEYED, key=key)


def _homescreen_section(key: str) -> FlagRow:
    return FlagRow(FeatureGroup.HOMESCREEN_SECTIONS, _keyed(HOMESCREEN, "sections-enabled", key))


def _mr_2022(natural: FlagRoute, section: str) -> FlagRow:
    return FlagRow(FeatureGroup.MR_2022, natural, _keyed(MR_2022, "sections-enabled", section))


ROUTES: dict[FeatureID, FlagRow] = {
    # General
    FeatureID.PULL_TO_REFRESH: FlagRow(
        FeatureGroup.GENERAL, _field(GENERAL_APP_FEATURES, "pull-to-refresh", "status")
    ),
    FeatureID.REPORT_SITE_ISSUE: FlagRow(
        FeatureGroup.GENERAL, _field(GENERAL_APP_FEATURES, "report-site-issue", "status")
    ),
    FeatureID.SHAKE_TO_RESTORE: FlagRow(
        FeatureGroup.GENERAL, _field(GENERAL_APP_FEATURES, "shake-to-restore", "status")
    ),
    # Awesome bar
    FeatureID.BOTTOM_SEARCH_BAR: FlagRow(
        FeatureGroup.AWESOME_BAR,
        _field(SEARCH, "awesome-bar", "position", "is-position-feature-enabled"),
    ),
    FeatureID.SEARCH_HIGHLIGHTS: FlagRow(
        FeatureGroup.AWESOME_BAR, _field(SEARCH, "awesome-bar", "search-highlights")
    ),
    # Homescreen sections
    FeatureID.TOP_SITES: _homescreen_section("top-sites"),
    FeatureID.JUMP_BACK_IN: _homescreen_section("jump-back-in"),
    FeatureID.RECENTLY_SAVED: _homescreen_section("recently-saved"),
    FeatureID.HISTORY_HIGHLIGHTS: _homescreen_section("recent-explorations"),
    FeatureID.POCKET: _homescreen_section("pocket"),
    # Single-flag homescreen fields
    FeatureID.JUMP_BACK_IN_SYNCED_TAB: FlagRow(
        FeatureGroup.JUMP_BACK_IN_SYNCED_TAB, _field(HOMESCREEN, "jump-back-in-synced-tab")
    ),
    FeatureID.SPONSORED_POCKET: FlagRow(
        FeatureGroup.SPONSORED_POCKET, _field(HOMESCREEN, "pocket-sponsored-stories")
    ),
    FeatureID.SPONSORED_TILES: FlagRow(
        FeatureGroup.SPONSORED_TILES, _field(HOMESCREEN, "sponsored-tiles", "status")
    ),
    # Tab tray and grouping
    FeatureID.INACTIVE_TABS: FlagRow(
        FeatureGroup.TAB_TRAY, _keyed(TAB_TRAY, "sections-enabled", "inactive-tabs")
    ),
    FeatureID.HISTORY_GROUPS: FlagRow(
        FeatureGroup.GROUPING, _keyed(SEARCH_TERM_GROUPS, "grouping-enabled", "history-groups")
    ),
    FeatureID.TAB_TRAY_GROUPS: FlagRow(
        FeatureGroup.GROUPING, _keyed(SEARCH_TERM_GROUPS, "grouping-enabled", "tab-tray-groups")
    ),
    FeatureID.START_AT_HOME: FlagRow(
        FeatureGroup.START_AT_HOME,
        FlagRoute(feature=START_AT_HOME, path=("setting",), kind=LookupKind.START_AT_HOME),
    ),
    # Wallpapers; the version flag only gates on the same status field
    FeatureID.WALLPAPERS: FlagRow(
        FeatureGroup.WALLPAPERS, _field(WALLPAPER, "configuration", "status")
    ),
    FeatureID.WALLPAPER_VERSION: FlagRow(
        FeatureGroup.WALLPAPERS, _field(WALLPAPER, "configuration", "status")
    ),
    # MR 2022 experiment overrides
    FeatureID.WALLPAPER_ONBOARDING_SHEET: _mr_2022(
        _field(WALLPAPER, "onboarding-sheet"), "wallpaper-onboarding-sheet"
    ),
    FeatureID.ONBOARDING_FRESH_INSTALL: _mr_2022(
        _field(ONBOARDING, "first-run-flow"), "onboarding-first-run-flow"
    ),
    FeatureID.ONBOARDING_UPGRADE: _mr_2022(
        _field(ONBOARDING, "upgrade-flow"), "onboarding-upgrade-flow"
    ),
    FeatureID.CONTEXTUAL_HINT_FOR_JUMP_BACK_IN_SYNCED_TAB: _mr_2022(
        _keyed(CONTEXTUAL_HINT, "features-enabled", "jump-back-in-synced-tab-contextual-hint"),
        "sync-cfr",
    ),
    FeatureID.COPY_FOR_JUMP_BACK_IN: _mr_2022(
        _field(CONTEXTUAL_HINT, "hint-copy", "jump-back-in"), "jump-back-in-cfr-update"
    ),
    FeatureID.COPY_FOR_TOOLBAR: _mr_2022(
        _field(CONTEXTUAL_HINT, "hint-copy", "toolbar"), "toolbar-cfr-update"
    ),
}


def route_for(feature_id: FeatureID, use_overrides: bool = True) -> FlagRoute | None:
    """Return the route a feature is read through, or None if it has no row."""
    row = ROUTES.get(feature_id)
    if row is None:
        return None
    if use_overrides and row.override is not None:
        return row.override
    return row.route


def members(group: FeatureGroup) -> list[FeatureID]:
    return [feature_id for feature_id, row in ROUTES.items() if row.group == group]


def unrouted() -> set[FeatureID]:
    return set(FeatureID) - set(ROUTES)
