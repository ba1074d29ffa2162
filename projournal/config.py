"""Configuration loading for projournal.

Settings live in ``~/.config/projournal/config.toml``. The path can be
overridden with the PROJOURNAL_CONFIG environment variable.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field

from projournal.models import DEFAULT_LOCATION

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PROJOURNAL_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "projournal" / "config.toml"


class JournalSettings(BaseModel):
    location: str = Field(default=DEFAULT_LOCATION, description="Default location code")
    projects_dir: Path = Field(default=Path("."), description="Parent folder for new projects")
    default_version: str = Field(default="0.1.0", description="Version of new projects")


class LoggingSettings(BaseModel):
    level: str = Field(default="WARNING", description="Root log level")


class AppConfig(BaseModel):
    """Effective application configuration."""

    journal: JournalSettings = Field(default_factory=JournalSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def get_config_path(path: Optional[Path] = None) -> Path:
    """Get the config file path, honouring PROJOURNAL_CONFIG."""
    if path is not None:
        return Path(path).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load configuration, falling back to defaults.

    Args:
        path: Explicit config file. Defaults to ``get_config_path()``.

    Returns:
        The parsed config, or defaults if the file is missing or invalid.
    """
    config_path = get_config_path(path)

    if not config_path.exists():
        return AppConfig()

    try:
        return AppConfig(**toml.load(config_path))
    except Exception as e:
        logger.warning("Ignoring invalid config %s: %s", config_path, e)
        return AppConfig()


def write_template_config(path: Optional[Path] = None) -> Path:
    """Write a config file holding the default settings.

    Returns:
        Path of the written file.
    """
    config_path = get_config_path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    template = {
        "journal": {
            "location": DEFAULT_LOCATION,
            "projects_dir": ".",
            "default_version": "0.1.0",
        },
        "logging": {
            "level": "WARNING",
        },
    }

    with open(config_path, "w") as f:
        toml.dump(template, f)

    return config_path
