"""Logging utilities for gridpath."""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..configuration.settings import LoggingSettings


def setup_logging(settings: 'LoggingSettings') -> None:
    """Setup logging configuration based on settings.
    
    Args:
        settings: Logging settings configuration
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.numeric_level)
    
    # Clear existing handlers
    root_logger.handlers.clear()
    
    formatter = logging.Formatter(
        fmt=settings.format_string,
        datefmt=settings.date_format
    )
    
    if settings.console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(settings.numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)
    
    if settings.file_output:
        try:
            log_path = Path(settings.log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            
            file_handler = logging.handlers.RotatingFileHandler(
                filename=settings.log_file,
                maxBytes=settings.max_file_size_mb * 1024 * 1024,
                backupCount=settings.backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(settings.numeric_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            
        except OSError as e:
            # If file logging fails, keep console logging going
            root_logger.error(f"Failed to setup file logging: {e}")
    
    for component, level in settings.component_levels.items():
        if not isinstance(level, str) or not isinstance(getattr(logging, level.upper(), None), int):
            root_logger.warning(f"Ignoring invalid log level for {component}: {level!r}")
            continue
        logging.getLogger(component).setLevel(getattr(logging, level.upper()))
    
    root_logger.debug("gridpath logging initialized")


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter prefixing every message with ``[key=value ...]``."""

    def process(self, msg, kwargs):
        if self.extra:
            context_str = " ".join(f"{k}={v}" for k, v in self.extra.items())
            msg = f"[{context_str}] {msg}"
        return msg, kwargs


def get_context_logger(name: str, **context) -> ContextLogger:
    """Get a logger that tags its messages with the given context."""
    return ContextLogger(logging.getLogger(name), context)
