"""Configuration for nimbus_flags"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Environment-backed settings"""

    # Snapshot exported from the Nimbus client (YAML or JSON)
    SNAPSHOT_PATH = Path(os.getenv("NIMBUS_SNAPSHOT_PATH", "nimbus.yaml"))

    # Optional user preference overrides; empty means none
    USER_PREFS_PATH = os.getenv("NIMBUS_USER_PREFS_PATH", "")

    # Route MR 2022 features through the experiment's override record
    EXPERIMENT_OVERRIDES = _env_bool("NIMBUS_EXPERIMENT_OVERRIDES", "true")

    DEBUG = _env_bool("DEBUG", "false")


config = Config()
