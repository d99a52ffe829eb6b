"""
Configuration Loader - Load and validate configuration from YAML.

Settings live in config/default.yaml. Sections map onto dataclasses:

- game: board size, speed and scoring (GameConfig)
- food: food points and special-food behaviour (FoodConfig)
- display: window settings for the pygame front end
- logging: log level and optional log file

Missing sections and keys fall back to the dataclass defaults.
"""
import logging
from copy import deepcopy
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..game.config import FoodConfig, GameConfig

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent


@dataclass
class DisplayConfig:
    """Window settings for the pygame front end."""
    cell_size: int = 30
    fps: int = 60
    title: str = "Snake"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Complete application configuration."""
    game: GameConfig = field(default_factory=GameConfig)
    food: FoodConfig = field(default_factory=FoodConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    'game': GameConfig,
    'food': FoodConfig,
    'display': DisplayConfig,
    'logging': LoggingConfig,
}


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries, with override values taking precedence.

    Args:
        base: Base dictionary
        override: Dictionary with values to override

    Returns:
        Merged dictionary
    """
    result = deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)

    return result


def _find_config_file() -> Optional[Path]:
    """Find config/default.yaml relative to the working directory or the project."""
    possible_paths = [
        Path("config") / "default.yaml",
        PROJECT_ROOT / "config" / "default.yaml",
    ]

    for path in possible_paths:
        if path.is_file():
            return path

    return None


def _load_yaml_file(path: Path) -> Dict:
    """Load a YAML file, returning empty dict if it is empty."""
    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    return data if data else {}


def config_from_dict(data: Dict[str, Any]) -> Config:
    """
    Build a Config from a nested dictionary.

    Unknown sections and keys are ignored.
    """
    config = Config()

    for section, cls in _SECTIONS.items():
        if section in data:
            setattr(config, section, _dict_to_dataclass(data[section], cls))

    return config


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config/default.yaml)
        overrides: Nested values applied on top of the file

    Returns:
        Config object with all settings
    """
    path = Path(config_path) if config_path else _find_config_file()

    if path is None or not path.exists():
        logger.info("No config file found, using defaults")
        data: Dict[str, Any] = {}
    else:
        data = _load_yaml_file(path)
        logger.debug("Loaded config from %s", path)

    if overrides:
        data = _deep_merge(data, overrides)

    return config_from_dict(data)


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
