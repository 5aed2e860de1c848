"""Application settings loaded from a JSON file and the environment."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

APP_NAME = "PromptPage"

ENV_PREFIX = "PROMPTPAGE_"


def app_data_dir() -> Path:
    """Return the platform-specific application data directory."""
    if os.name == "nt":
        base = Path(os.getenv("LOCALAPPDATA", Path.home()))
    else:
        base = Path.home() / ".local" / "share"
    return base / APP_NAME


def default_settings_path() -> Path:
    override = os.getenv(f"{ENV_PREFIX}SETTINGS", "")
    if override:
        return Path(override)
    return app_data_dir() / "settings.json"


class Settings(BaseSettings):
    """Runtime settings; ``PROMPTPAGE_<NAME>`` variables override the defaults."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore", populate_by_name=True)

    # The key keeps the variable name every OpenAI client reads.
    api_key: str = Field(default="", validation_alias="OPENAI_API_KEY")
    api_base: str = "https://api.openai.com/v1"
    model: str = "gpt-4o-mini"
    temperature: float = 0.7
    timeout: float = 60.0
    strict: bool = False
    trusted_markup: bool = False
    log_level: str = "INFO"

    @field_validator("temperature", "timeout", "strict", "trusted_markup", mode="wrap")
    @classmethod
    def keep_default_on_bad_value(cls, value: Any, handler: Any, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            logger.warning("Ignoring invalid %s setting %r", info.field_name, value)
            return cls.model_fields[info.field_name].default


def _read_settings_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Could not read settings from %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_settings(path: Optional[Path] = None) -> Settings:
    """Build settings from defaults, then the settings file, then the environment."""
    path = path if path is not None else default_settings_path()
    from_env = Settings()
    values = {
        key: value
        for key, value in _read_settings_file(path).items()
        if key in Settings.model_fields
    }
    values.update(from_env.model_dump(include=from_env.model_fields_set))
    return Settings(**values)


def save_settings(settings: Settings, path: Optional[Path] = None) -> None:
    path = path if path is not None else default_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    # The key belongs in the environment, never on disk.
    payload = settings.model_dump(exclude={"api_key"})
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
