"""Configuration loading and path policy."""

from .config import KNOWN_PROVIDERS, Config
from .paths import default_config_path, default_log_file, default_output_dir

__all__ = [
    "Config",
    "KNOWN_PROVIDERS",
    "default_config_path",
    "default_log_file",
    "default_output_dir",
]
