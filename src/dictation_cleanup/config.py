"""Settings loading and management for dictation-cleanup.

Handles loading the post-processing settings from a JSON file.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from dictation_cleanup.errors import ConfigurationError, ResourceError

CONFIG_ENV_VAR = "DICTATION_CLEANUP_CONFIG"

DEFAULT_WORD_CORRECTION_THRESHOLD = 0.18


class CleanupSettings(BaseModel):
    """Post-processing settings owned by the calling application."""

    # Canonical spellings, in priority order (earlier wins on ties)
    custom_words: list[str] = Field(default_factory=list)
    # Combined score must be strictly below this for a correction.
    # Not range checked: <= 0 disables corrections, 1.0 matches broadly.
    word_correction_threshold: float = DEFAULT_WORD_CORRECTION_THRESHOLD
    # Remove filler words and collapse stutters after correction
    filter_filler_words: bool = True


def get_default_settings_path() -> Path:
    """Get the settings file path.

    Uses DICTATION_CLEANUP_CONFIG if set, otherwise
    ~/.dictation-cleanup/settings.json.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".dictation-cleanup" / "settings.json"


def load_settings(path: Path | str | None = None) -> CleanupSettings:
    """Load settings from a JSON file.

    Args:
        path: Settings file (defaults to get_default_settings_path())

    Returns:
        CleanupSettings object

    Raises:
        ResourceError: If the settings file doesn't exist
        ConfigurationError: If the file is not valid JSON or has invalid fields
    """
    config_path = Path(path) if path is not None else get_default_settings_path()
    if not config_path.exists():
        raise ResourceError(
            f"Settings file not found: {config_path}",
            context={"path": str(config_path)},
        )

    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Settings file is not valid JSON: {e.msg}",
            context={"path": str(config_path), "line": e.lineno},
        ) from e

    try:
        return CleanupSettings.model_validate(data)
    except PydanticValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<root>" for err in e.errors())
        raise ConfigurationError(
            f"Invalid settings: {fields}",
            context={"path": str(config_path)},
        ) from e


def save_settings(settings: CleanupSettings, path: Path | str | None = None) -> Path:
    """Save settings to a JSON file with atomic write.

    Args:
        settings: Settings to save
        path: Settings file (defaults to get_default_settings_path())

    Returns:
        Path to the saved settings file
    """
    config_path = Path(path) if path is not None else get_default_settings_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = config_path.with_name(config_path.name + ".tmp")

    # Atomic write: write to temp file, then rename
    with open(temp_path, "w", encoding="utf-8") as f:
        json.dump(settings.model_dump(), f, indent=2, ensure_ascii=False)

    temp_path.replace(config_path)
    return config_path
