"""Settings dataclasses for gridpath."""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..exceptions import ValidationError
from ..utils.validation_utils import validate_non_negative_int

HEURISTIC_NAMES = ("manhattan", "zero")
FRONTIER_KINDS = ("heap", "linear")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _is_level_name(value: Any) -> bool:
    return isinstance(value, str) and value.upper() in _LOG_LEVELS


@dataclass
class PathfindingSettings:
    """Search engine settings."""
    heuristic: str = "manhattan"
    frontier: str = "heap"
    max_iterations: int = 0  # 0 means unbounded
    snapshot_grid: bool = False  # copy occupancy before each search
    
    def validate(self) -> List[str]:
        """Validate pathfinding settings."""
        errors = []
        
        if self.heuristic not in HEURISTIC_NAMES:
            errors.append(f"heuristic must be one of {HEURISTIC_NAMES}, got {self.heuristic!r}")
        
        if self.frontier not in FRONTIER_KINDS:
            errors.append(f"frontier must be one of {FRONTIER_KINDS}, got {self.frontier!r}")
        
        try:
            validate_non_negative_int(self.max_iterations, "max_iterations")
        except ValidationError as e:
            errors.append(e.args[0])
        
        return errors


@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: str = "INFO"
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    console_output: bool = True
    file_output: bool = False
    log_file: str = "logs/gridpath.log"
    max_file_size_mb: int = 10
    backup_count: int = 3
    component_levels: Dict[str, str] = field(default_factory=dict)
    
    def validate(self) -> List[str]:
        """Validate logging settings."""
        errors = []
        
        if not _is_level_name(self.level):
            errors.append(f"Invalid log level: {self.level!r}")
        
        for component, level in self.component_levels.items():
            if not _is_level_name(level):
                errors.append(f"Invalid log level for {component}: {level!r}")
        
        try:
            if validate_non_negative_int(self.max_file_size_mb, "max_file_size_mb") == 0:
                errors.append("max_file_size_mb must be positive")
        except ValidationError as e:
            errors.append(e.args[0])
        
        try:
            validate_non_negative_int(self.backup_count, "backup_count")
        except ValidationError as e:
            errors.append(e.args[0])
        
        return errors
    
    @property
    def numeric_level(self) -> int:
        """Numeric level, INFO when the configured name is invalid."""
        if not _is_level_name(self.level):
            return logging.INFO
        return getattr(logging, self.level.upper())


@dataclass
class ApplicationSettings:
    """Top-level application settings."""
    version: str = "1.0.0"
    config_version: int = 1
    pathfinding: PathfindingSettings = field(default_factory=PathfindingSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    
    def validate(self) -> Dict[str, List[str]]:
        """Validate all settings categories."""
        return {
            "pathfinding": self.pathfinding.validate(),
            "logging": self.logging.validate(),
        }
