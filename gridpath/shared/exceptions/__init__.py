"""Shared exceptions for gridpath."""
from .base_exceptions import (
    GridPathException, ConfigurationError, ValidationError, PathfindingError
)
from .domain_exceptions import (
    GridError, InvalidCoordinateError, ScenarioLoadError
)

__all__ = [
    'GridPathException', 'ConfigurationError', 'ValidationError',
    'PathfindingError',
    'GridError', 'InvalidCoordinateError', 'ScenarioLoadError'
]
