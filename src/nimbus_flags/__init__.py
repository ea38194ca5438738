"""nimbus_flags - Nimbus feature flag resolution and contextual hint copy"""

__version__ = "1.0.0"
__description__ = "Nimbus feature flag resolution and contextual hint copy"

__all__ = [
    "ConfigurationSnapshot",
    "ContextualHintCopyProvider",
    "FeatureFlagManager",
    "FeatureFlagResolver",
    "FeatureID",
    "__version__",
]


def __getattr__(name: str):
    """Lazy import so that importing nimbus_flags.config alone stays cheap."""
    if name == "FeatureID":
        from .feature_id import FeatureID

        return FeatureID
    if name == "ConfigurationSnapshot":
        from .core.snapshot import ConfigurationSnapshot

        return ConfigurationSnapshot
    if name == "FeatureFlagResolver":
        from .core.resolver import FeatureFlagResolver

        return FeatureFlagResolver
    if name == "FeatureFlagManager":
        from .core.feature_flags import FeatureFlagManager

        return FeatureFlagManager
    if name == "ContextualHintCopyProvider":
        from .core.hint_copy import ContextualHintCopyProvider

        return ContextualHintCopyProvider
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
