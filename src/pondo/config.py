"""Configuration management for pondo.

Paths are derived once from the user's home directory and handed to the
store explicitly. Display and id settings come from an optional
``config.yaml`` inside the config directory.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .ids import ID_STRATEGIES

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".pondo"
TASKS_FILE_NAME = "tasks.json"
SETTINGS_FILE_NAME = "config.yaml"


def resolve_paths(home: Optional[Path] = None) -> Tuple[Path, Path]:
    """Return ``(config_dir, tasks_file)`` for a home directory.

    Pure function of its input (or of ``$HOME`` when ``home`` is None);
    nothing is created on disk.
    """
    home = Path(home) if home is not None else Path.home()
    config_dir = home / CONFIG_DIR_NAME
    return config_dir, config_dir / TASKS_FILE_NAME


@dataclass(frozen=True)
class ConfigModel:
    """Resolved configuration for one pondo process."""

    # File paths
    config_dir: Path
    tasks_file: Path

    # Display preferences
    use_emoji: bool = True
    no_color: bool = False

    # Id generation: "unique" (collision-checked) or "random"
    id_strategy: str = "unique"

    @property
    def settings_file(self) -> Path:
        """Get the optional settings file path."""
        return self.config_dir / SETTINGS_FILE_NAME

    @classmethod
    def from_home(cls, home: Optional[Path] = None, **settings: Any) -> "ConfigModel":
        """Build a config with paths derived from ``home``."""
        config_dir, tasks_file = resolve_paths(home)
        return cls(config_dir=config_dir, tasks_file=tasks_file, **settings)

    @staticmethod
    def settings_from_yaml(yaml_str: str) -> Dict[str, Any]:
        """Parse and validate settings from YAML text.

        Raises:
            ValueError: if the document is not a mapping or a value is invalid
            yaml.YAMLError: if the document is not valid YAML
        """
        data = yaml.safe_load(yaml_str)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError("settings must be a mapping")

        known = {f.name for f in fields(ConfigModel)} - {"config_dir", "tasks_file"}
        settings: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown setting %r", key)
                continue
            settings[key] = value

        for flag in ("use_emoji", "no_color"):
            if flag in settings and not isinstance(settings[flag], bool):
                raise ValueError(f"'{flag}' must be true or false")

        strategy = settings.get("id_strategy")
        if strategy is not None and strategy not in ID_STRATEGIES:
            raise ValueError(
                f"'id_strategy' must be one of {', '.join(ID_STRATEGIES)}, got {strategy!r}"
            )

        return settings


def load_config(home: Optional[Path] = None) -> ConfigModel:
    """Resolve paths and apply settings from ``config.yaml`` if present.

    A broken settings file never blocks a command: the problem is logged
    and defaults are used.
    """
    config = ConfigModel.from_home(home)
    settings_path = config.settings_file

    if not settings_path.is_file():
        return config

    try:
        settings = ConfigModel.settings_from_yaml(settings_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.warning("Failed to load settings from %s: %s. Using defaults.", settings_path, e)
        return config

    logger.debug("Loaded settings from %s: %s", settings_path, settings)
    return ConfigModel.from_home(home, **settings)
