from nimbus_flags.core import flag_table
from nimbus_flags.core.flag_table import LookupKind, members, route_for, unrouted
from nimbus_flags.feature_id import FeatureGroup, FeatureID


def test_every_feature_has_exactly_one_row():
    assert unrouted() == set()
    grouped = [feature_id for group in FeatureGroup for feature_id in members(group)]
    assert sorted(grouped, key=lambda f: f.value) == sorted(FeatureID, key=lambda f: f.value)


def test_override_group_members():
    assert set(members(FeatureGroup.MR_2022)) == {
        FeatureID.WALLPAPER_ONBOARDING_SHEET,
        FeatureID.ONBOARDING_FRESH_INSTALL,
        FeatureID.ONBOARDING_UPGRADE,
        FeatureID.CONTEXTUAL_HINT_FOR_JUMP_BACK_IN_SYNCED_TAB,
        FeatureID.COPY_FOR_JUMP_BACK_IN,
        FeatureID.COPY_FOR_TOOLBAR,
    }


def test_only_override_group_has_override_routes():
    for feature_id, row in flag_table.ROUTES.items():
        has_override = row.override is not None
        assert has_override == (row.group == FeatureGroup.MR_2022), feature_id


def test_route_for_switches_on_overrides():
    override = route_for(FeatureID.COPY_FOR_TOOLBAR)
    natural = route_for(FeatureID.COPY_FOR_TOOLBAR, use_overrides=False)

    assert override.feature == flag_table.MR_2022
    assert override.kind == LookupKind.KEYED
    assert override.key == "toolbar-cfr-update"
    assert natural.describe() == "contextual-hint-feature.hint-copy.toolbar"


def test_route_for_ignores_overrides_for_plain_rows():
    assert route_for(FeatureID.POCKET) == route_for(FeatureID.POCKET, use_overrides=False)
    assert route_for(FeatureID.POCKET).describe() == "homescreenFeature.sections-enabled[pocket]"
