"""Shared utilities."""
from .logging_utils import setup_logging, get_context_logger
from .validation_utils import (
    validate_cell_components, validate_grid_dimensions, validate_non_negative_int
)
from .performance_utils import timing_context, memory_profiler

__all__ = [
    'setup_logging', 'get_context_logger',
    'validate_cell_components', 'validate_grid_dimensions', 'validate_non_negative_int',
    'timing_context', 'memory_profiler'
]
