#!/usr/bin/env python3
"""nimbus-flags: inspect resolved feature flags and contextual hint copy"""

import argparse
import logging
import sys

from .adapters.config_env import load_app_config
from .adapters.snapshot_file import FileSnapshotSource, load_user_preferences
from .core.feature_flags import FeatureFlagManager, FlagCheck
from .core.hint_copy import ArrowDirection, ContextualHintCopyProvider, CopyKind, HintType
from .core.resolver import FeatureFlagResolver
from .feature_id import FeatureID, parse_feature_id

_CHECKS = {
    "build": FlagCheck.BUILD_ONLY,
    "user": FlagCheck.USER_ONLY,
    "build-and-user": FlagCheck.BUILD_AND_USER,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nimbus-flags", description=__doc__)
    parser.add_argument("--snapshot", help="Snapshot file (YAML or JSON)")
    parser.add_argument(
        "--no-overrides",
        action="store_true",
        help="Ignore the MR 2022 experiment overrides",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    flags = sub.add_parser("flags", help="Print resolved feature flags")
    flags.add_argument("features", nargs="*", metavar="FEATURE")
    flags.add_argument("--check", choices=sorted(_CHECKS), default="build")
    flags.add_argument("--prefs", help="User preferences file")

    copy = sub.add_parser("copy", help="Print contextual hint copy")
    copy.add_argument("hint", choices=[h.value for h in HintType])
    copy.add_argument("kind", choices=[k.value for k in CopyKind])
    copy.add_argument("--arrow", choices=[a.value for a in ArrowDirection])
    return parser


def _print_flags(manager: FeatureFlagManager, features: list[FeatureID], check: FlagCheck):
    for feature_id in features:
        enabled = manager.is_feature_enabled(feature_id, check)
        print(f"{feature_id.value}: {'true' if enabled else 'false'}")


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    app_config = load_app_config()

    logging.basicConfig(
        level=logging.DEBUG if app_config.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    snapshot = FileSnapshotSource(args.snapshot or app_config.snapshot_path).load()
    resolver = FeatureFlagResolver(
        experiment_overrides=app_config.experiment_overrides and not args.no_overrides
    )

    if args.command == "flags":
        features = []
        for name in args.features:
            feature_id = parse_feature_id(name)
            if feature_id is None:
                parser.error(f"unknown feature: {name}")
            features.append(feature_id)

        prefs_path = args.prefs or app_config.user_prefs_path
        preferences = load_user_preferences(prefs_path) if prefs_path else {}
        manager = FeatureFlagManager(snapshot, preferences, resolver)
        check = _CHECKS[args.check]

        _print_flags(manager, features or list(FeatureID), check)
        if not features:
            print(f"start-at-home setting: {manager.start_at_home_setting(check).value}")
            print(f"wallpaper version: {manager.wallpaper_version()}")
        return 0

    arrow = ArrowDirection(args.arrow) if args.arrow else None
    provider = ContextualHintCopyProvider(FeatureFlagManager(snapshot, resolver=resolver), arrow)
    print(provider.get_copy(CopyKind(args.kind), HintType(args.hint)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
