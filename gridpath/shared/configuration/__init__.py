"""Configuration management."""
from .config_manager import ConfigManager, get_config, initialize_config
from .settings import (
    PathfindingSettings, LoggingSettings, ApplicationSettings,
    HEURISTIC_NAMES, FRONTIER_KINDS
)

__all__ = [
    'ConfigManager', 'get_config', 'initialize_config',
    'PathfindingSettings', 'LoggingSettings', 'ApplicationSettings',
    'HEURISTIC_NAMES', 'FRONTIER_KINDS'
]
