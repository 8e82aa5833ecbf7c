"""
Configuration Loader - Load and validate configuration from YAML.

Looks for config.yaml or config/default.yaml; sections that are missing
fall back to the dataclass defaults below.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field, asdict

logger = logging.getLogger(__name__)

DIFFICULTIES = ("easy", "medium", "hard")


class ConfigError(ValueError):
    """Raised when a configuration value is out of range."""


@dataclass
class GameConfig:
    """Board and match settings."""
    grid_width: int = 30
    grid_height: int = 20
    difficulty: str = "medium"


@dataclass
class AIConfig:
    """Strategy tuning."""
    easy_food_bias: float = 0.2
    medium_flood_fill_cap: int = 20
    hard_search_depth: int = 3
    hard_flood_fill_cap: int = 15
    seed: Optional[int] = None


@dataclass
class SpeedConfig:
    """Milliseconds between ticks per difficulty."""
    easy: int = 150
    medium: int = 100
    hard: int = 80

    def interval_for(self, difficulty: str) -> int:
        return getattr(self, difficulty, self.medium)


@dataclass
class VisualizationConfig:
    """Visualization settings."""
    cell_size: int = 25
    render_fps: int = 60


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Complete application configuration."""
    game: GameConfig = field(default_factory=GameConfig)
    ai: AIConfig = field(default_factory=AIConfig)
    speed: SpeedConfig = field(default_factory=SpeedConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)


_SECTIONS = {
    'game': GameConfig,
    'ai': AIConfig,
    'speed': SpeedConfig,
    'visualization': VisualizationConfig,
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


def config_from_dict(data: Optional[Dict[str, Any]]) -> Config:
    """
    Build and validate a Config from a (possibly partial) dictionary.

    Raises:
        ConfigError: If a value is out of range
    """
    config = Config()

    for section, cls in _SECTIONS.items():
        if data and section in data:
            setattr(config, section, _dict_to_dataclass(data[section], cls))

    validate_config(config)
    return config


def validate_config(config: Config) -> None:
    """
    Check value ranges.

    Raises:
        ConfigError: On the first invalid value found
    """
    if config.game.grid_width <= 0 or config.game.grid_height <= 0:
        raise ConfigError(
            f"Grid must be positive, got {config.game.grid_width}x{config.game.grid_height}"
        )
    if config.game.difficulty not in DIFFICULTIES:
        raise ConfigError(
            f"Unknown difficulty '{config.game.difficulty}', expected one of {', '.join(DIFFICULTIES)}"
        )
    if not 0.0 <= config.ai.easy_food_bias <= 1.0:
        raise ConfigError(f"easy_food_bias must be within [0, 1], got {config.ai.easy_food_bias}")
    for name in ("medium_flood_fill_cap", "hard_search_depth", "hard_flood_fill_cap"):
        if getattr(config.ai, name) <= 0:
            raise ConfigError(f"{name} must be positive, got {getattr(config.ai, name)}")


def _find_config_file() -> Optional[Path]:
    """Try to find a config file in common locations."""
    possible_paths = [
        Path("config.yaml"),
        Path("config") / "default.yaml",
        Path(__file__).parent.parent.parent / "config" / "default.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path
    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml or config/default.yaml)

    Returns:
        Config object with all settings

    Raises:
        ConfigError: If the file holds out-of-range values
    """
    path = Path(config_path) if config_path is not None else _find_config_file()

    if path is None or not path.exists():
        logger.info("No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    logger.debug("Loaded config from %s", path)
    return config_from_dict(data)


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    with open(config_path, 'w') as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
