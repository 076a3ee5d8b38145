"""
Configuration Loader - Load and validate configuration from YAML.

Settings live in config.yaml at the project root:
- game: simulation settings (grid size, tail length, tick rate, policies)
- display: window settings for the play script

Missing keys fall back to defaults; unknown keys are ignored.
"""
import yaml
from pathlib import Path
from typing import Optional, Any
from dataclasses import dataclass, field, asdict

from ..game.config import SnakeConfig


@dataclass
class DisplayConfig:
    """Window settings."""
    window_width: int = 416
    window_height: int = 473
    title: str = "SnakeGame"
    render_fps: int = 60


@dataclass
class Config:
    """Complete application configuration."""
    game: SnakeConfig = field(default_factory=SnakeConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Find config.yaml in the usual places."""
    possible_paths = [
        Path("config.yaml"),
        Path(__file__).parent.parent.parent / "config.yaml",
        Path.cwd() / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path

    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to project root config.yaml)

    Returns:
        Config object with all settings

    Raises:
        ValueError: If the game settings are out of range
    """
    path = Path(config_path) if config_path else _find_config_file()

    if path is None or not path.exists():
        print("[Config] No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()

    config = Config()

    if 'game' in data:
        config.game = _dict_to_dataclass(data['game'], SnakeConfig)

    if 'display' in data:
        config.display = _dict_to_dataclass(data['display'], DisplayConfig)

    config.game.validate()
    return config


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
