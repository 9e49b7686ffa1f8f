"""Configuration package -- typed, validated settings from YAML + .env."""

from .settings import LoggingSettings, SpewerSettings

__all__ = [
    "LoggingSettings",
    "SpewerSettings",
    "load_all_settings",
]


def load_all_settings() -> tuple[SpewerSettings, LoggingSettings]:
    """Load and return all configuration objects.

    Returns a tuple of (SpewerSettings, LoggingSettings), each populated
    from its own YAML file with environment variable overrides.
    """
    return SpewerSettings(), LoggingSettings()
