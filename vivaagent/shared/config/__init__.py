"""Application settings."""

from vivaagent.shared.config.settings import (
    AppSettings,
    DEFAULT_REFERENCE_DATE,
    load_settings,
    validate_required_configuration,
)

__all__ = [
    "AppSettings",
    "DEFAULT_REFERENCE_DATE",
    "load_settings",
    "validate_required_configuration",
]
