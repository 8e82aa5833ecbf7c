from .config_loader import Config, ConfigError, load_config, save_config
from .logging_setup import setup_logging

__all__ = ["Config", "ConfigError", "load_config", "save_config", "setup_logging"]
