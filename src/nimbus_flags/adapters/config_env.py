"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

from pathlib import Path

from ..config import Config
from ..core.config_model import AppConfig


def load_app_config(settings=None) -> AppConfig:
    settings = settings or Config()
    prefs_path = settings.USER_PREFS_PATH
    return AppConfig(
        debug=settings.DEBUG,
        snapshot_path=Path(settings.SNAPSHOT_PATH),
        user_prefs_path=Path(prefs_path) if prefs_path else None,
        experiment_overrides=settings.EXPERIMENT_OVERRIDES,
    )
