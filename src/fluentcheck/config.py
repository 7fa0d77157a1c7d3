"""Display and reporting configuration.

Values come from ``FLUENTCHECK_*`` environment variables (or a ``.env``
file) and fall back to the defaults declared on :class:`Settings`.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "FLUENTCHECK_"


class Settings(BaseSettings):
    """Library-wide settings.

    Attributes:
    ----------
    max_repr_length: int
        Reprs longer than this are truncated when diagnostics are serialized
        with the ``truncate`` context.
    sort_for_display: bool
        Default for ``CollectionSubject.sortable``.
    fail_fast: bool
        When no sink is bound, raise on the first failure instead of collecting.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    max_repr_length: int = Field(default=50, ge=4)
    sort_for_display: bool = True
    fail_fast: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from the process environment, or from ``environ`` when given.

        A given mapping is read on its own: neither ``os.environ`` nor ``.env``
        contribute.
        """
        if environ is None:
            return cls()
        values = {
            key[len(ENV_PREFIX):].lower(): value
            for key, value in environ.items()
            if key.upper().startswith(ENV_PREFIX) and value.strip()
        }
        return cls.model_validate(values)


_settings: Settings | None = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    with _settings_lock:
        if _settings is None:
            _settings = Settings.from_env()
        return _settings


def set_settings(settings: Settings | None) -> None:
    """Replace the cached settings; ``None`` reloads from the environment on next use."""
    global _settings
    with _settings_lock:
        _settings = settings
