"""
Configuration for logfacade.

Settings come from environment variables, optionally layered over a YAML
file. Environment values win over file values.

Environment Variables:
    LOGFACADE_PROVIDER: Provider identifier to resolve (default: "stdlib")
    LOGFACADE_SANITIZER: Sanitizer name(s), comma-separated
        Example: "control,redact"

Config file (``~/.config/logfacade/config.yaml``)::

    logging:
      provider: stdlib
      sanitizer: control,redact
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PROVIDER = "stdlib"

# Environment variable names
ENV_PROVIDER = "LOGFACADE_PROVIDER"
ENV_SANITIZER = "LOGFACADE_SANITIZER"

_log = logging.getLogger(__name__)


class LoggingSettings(BaseModel):
    """Which provider to resolve and how its services sanitize output."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    provider: str = Field(
        default="",
        description="Provider identifier. Empty selects the built-in 'stdlib' provider.",
    )
    sanitizer: str = Field(
        default="",
        description="Sanitizer name or comma-separated names. Empty means pass-through.",
    )

    @property
    def provider_identifier(self) -> str:
        """The provider identifier to resolve, with the default applied."""
        return self.provider.strip() or DEFAULT_PROVIDER

    @classmethod
    def from_env(cls, base: LoggingSettings | None = None) -> LoggingSettings:
        """Build settings from environment variables.

        Args:
            base: Values used where a variable is unset or empty.
        """
        values = base.model_dump() if base else {}
        provider = os.environ.get(ENV_PROVIDER, "").strip()
        if provider:
            values["provider"] = provider
        sanitizer = os.environ.get(ENV_SANITIZER, "").strip()
        if sanitizer:
            values["sanitizer"] = sanitizer
        return cls(**values)


def get_config_file() -> Path:
    """Get the config file path. Computed at runtime for test compatibility."""
    return Path.home() / ".config" / "logfacade" / "config.yaml"


def _load_file_values(config_file: Path) -> dict[str, Any]:
    if not config_file.exists():
        return {}

    try:
        data = yaml.safe_load(config_file.read_text()) or {}
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
        _log.debug(f"Ignoring unreadable logfacade config {config_file}: {e}")
        return {}

    section = data.get("logging", {}) if isinstance(data, dict) else {}
    if not isinstance(section, dict):
        return {}
    values: dict[str, Any] = {}
    for key, value in section.items():
        if key not in LoggingSettings.model_fields or value is None:
            continue
        if isinstance(value, list):
            # `sanitizer: [control, redact]` is the same as "control,redact"
            values[key] = ",".join(str(item).strip() for item in value if item is not None)
        elif isinstance(value, (str, int, float, bool)):
            values[key] = str(value)
        else:
            _log.debug(f"Ignoring non-scalar logfacade setting '{key}' in {config_file}")
    return values


def load_settings(path: Path | None = None) -> LoggingSettings:
    """Load settings from a YAML file, then apply environment overrides.

    Args:
        path: Config file to read. Defaults to :func:`get_config_file`.

    Returns:
        The merged settings. A missing or unreadable file yields defaults.
    """
    file_values = _load_file_values(path or get_config_file())
    return LoggingSettings.from_env(LoggingSettings(**file_values))
