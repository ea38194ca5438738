"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppConfig:
    debug: bool
    snapshot_path: Path
    user_prefs_path: Path | None
    experiment_overrides: bool
