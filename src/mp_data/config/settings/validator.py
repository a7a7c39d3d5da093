"""Config settings – SettingsValidator."""
from __future__ import annotations

import dataclasses

from mp_data.config.settings.base import Settings


class SettingsValidator:
    """Validate a populated settings instance without raising."""

    def validate(self, settings: Settings) -> list[str]:
        """Return a list of validation error messages (empty when valid)."""
        errors: list[str] = []
        for field in dataclasses.fields(settings):
            value = getattr(settings, field.name)
            if value is None and field.default is dataclasses.MISSING:
                errors.append(f"{field.name} is required but None")
        try:
            settings._validate()
        except Exception as exc:  # noqa: BLE001 – reported, not raised
            errors.append(getattr(exc, "message", str(exc)))
        return errors


__all__ = ["SettingsValidator"]
