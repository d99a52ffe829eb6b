"""
Configuration and logging helpers.
"""

from .config_loader import Config, DisplayConfig, LoggingConfig, load_config, save_config
from .log import setup_logging

__all__ = [
    'Config',
    'DisplayConfig',
    'LoggingConfig',
    'load_config',
    'save_config',
    'setup_logging',
]
