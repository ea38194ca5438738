from nimbus_flags.adapters.snapshot_file import load_user_preferences
from nimbus_flags.core.feature_flags import FeatureFlagManager, FlagCheck
from nimbus_flags.core.resolver import FeatureFlagResolver
from nimbus_flags.core.snapshot import ConfigurationSnapshot
from nimbus_flags.feature_id import FeatureID, StartAtHomeSetting


def _snapshot(start_at_home="always"):
    return ConfigurationSnapshot(
        {
            "general-app-features": {
                "pull-to-refresh": {"status": True},
                "shake-to-restore": {"status": False},
            },
            "start-at-home-feature": {"setting": start_at_home},
            "wallpaper-feature": {"configuration": {"status": True, "version": "v1"}},
        }
    )


def test_build_only_ignores_user_preferences():
    manager = FeatureFlagManager(_snapshot(), {FeatureID.PULL_TO_REFRESH: False})

    assert manager.is_feature_enabled(FeatureID.PULL_TO_REFRESH) is True
    assert manager.is_feature_enabled(FeatureID.PULL_TO_REFRESH, FlagCheck.BUILD_ONLY) is True


def test_build_and_user_requires_both():
    manager = FeatureFlagManager(
        _snapshot(),
        {FeatureID.PULL_TO_REFRESH: False, FeatureID.SHAKE_TO_RESTORE: True},
    )

    assert manager.is_feature_enabled(FeatureID.PULL_TO_REFRESH, FlagCheck.BUILD_AND_USER) is False
    assert manager.is_feature_enabled(FeatureID.SHAKE_TO_RESTORE, FlagCheck.BUILD_AND_USER) is False


def test_user_only_falls_back_to_build_value():
    manager = FeatureFlagManager(_snapshot(), {FeatureID.SHAKE_TO_RESTORE: True})

    assert manager.is_feature_enabled(FeatureID.SHAKE_TO_RESTORE, FlagCheck.USER_ONLY) is True
    assert manager.is_feature_enabled(FeatureID.PULL_TO_REFRESH, FlagCheck.USER_ONLY) is True
    assert manager.is_feature_enabled(FeatureID.POCKET, FlagCheck.USER_ONLY) is False


def test_preferences_are_copied():
    preferences = {FeatureID.PULL_TO_REFRESH: True}
    manager = FeatureFlagManager(_snapshot(), preferences)
    preferences[FeatureID.PULL_TO_REFRESH] = False

    assert manager.is_feature_enabled(FeatureID.PULL_TO_REFRESH, FlagCheck.BUILD_AND_USER) is True


def test_start_at_home_user_setting():
    manager = FeatureFlagManager(
        _snapshot("always"), {FeatureID.START_AT_HOME: StartAtHomeSetting.AFTER_FOUR_HOURS}
    )

    assert manager.start_at_home_setting(FlagCheck.BUILD_ONLY) == StartAtHomeSetting.ALWAYS
    assert manager.start_at_home_setting() == StartAtHomeSetting.AFTER_FOUR_HOURS


def test_start_at_home_disabled_remotely_wins_for_build_and_user():
    manager = FeatureFlagManager(
        _snapshot("disabled"), {FeatureID.START_AT_HOME: StartAtHomeSetting.ALWAYS}
    )

    assert manager.start_at_home_setting(FlagCheck.BUILD_AND_USER) == StartAtHomeSetting.DISABLED
    assert manager.start_at_home_setting(FlagCheck.USER_ONLY) == StartAtHomeSetting.ALWAYS
    assert manager.is_feature_enabled(FeatureID.START_AT_HOME, FlagCheck.BUILD_AND_USER) is False


def test_manager_uses_supplied_resolver():
    snapshot = ConfigurationSnapshot(
        {
            "onboarding-feature": {"upgrade-flow": True},
            "mr-2022": {"sections-enabled": {"onboarding-upgrade-flow": False}},
        }
    )

    default = FeatureFlagManager(snapshot)
    natural = FeatureFlagManager(snapshot, resolver=FeatureFlagResolver(experiment_overrides=False))

    assert default.is_feature_enabled(FeatureID.ONBOARDING_UPGRADE) is False
    assert natural.is_feature_enabled(FeatureID.ONBOARDING_UPGRADE) is True


def test_wallpaper_version_passthrough():
    assert FeatureFlagManager(_snapshot()).wallpaper_version() == "v1"


def test_boolean_start_at_home_preference_agrees_with_setting(tmp_path):
    prefs = tmp_path / "prefs.yaml"
    prefs.write_text("start-at-home: false\n")
    manager = FeatureFlagManager(_snapshot("always"), load_user_preferences(prefs))

    for check in (FlagCheck.USER_ONLY, FlagCheck.BUILD_AND_USER):
        setting = manager.start_at_home_setting(check)
        enabled = manager.is_feature_enabled(FeatureID.START_AT_HOME, check)
        assert setting == StartAtHomeSetting.DISABLED
        assert enabled == (setting != StartAtHomeSetting.DISABLED)


def test_true_start_at_home_preference_keeps_remote_setting():
    for remote in ("always", "disabled"):
        manager = FeatureFlagManager(_snapshot(remote), {FeatureID.START_AT_HOME: True})

        for check in (FlagCheck.USER_ONLY, FlagCheck.BUILD_AND_USER):
            setting = manager.start_at_home_setting(check)
            assert setting == manager.start_at_home_setting(FlagCheck.BUILD_ONLY)
            assert manager.is_feature_enabled(FeatureID.START_AT_HOME, check) == (
                setting != StartAtHomeSetting.DISABLED
            )
