from .config import DEFAULTS_PATH, load_config, validate_config
from .schema import DemoConfig

__all__ = ["DEFAULTS_PATH", "load_config", "validate_config", "DemoConfig"]
