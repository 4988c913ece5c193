"""Validation utilities for gridpath."""
from typing import Any, Tuple

import numpy as np

from ..exceptions import ValidationError

_INTEGER_TYPES = (int, np.integer)


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid coordinate
    return isinstance(value, _INTEGER_TYPES) and not isinstance(value, (bool, np.bool_))


def validate_cell_components(x: Any, y: Any) -> Tuple[int, int]:
    """Validate cell coordinate components.

    Only the type is checked. Range checks belong to the grid, which raises
    InvalidCoordinateError for cells outside it.
    
    Args:
        x: Column index
        y: Row index
        
    Returns:
        The components as plain ints
        
    Raises:
        ValidationError: If either component is not an integer
    """
    if not _is_int(x):
        raise ValidationError(f"X coordinate must be integer, got {type(x).__name__}", field="x", value=x)
    
    if not _is_int(y):
        raise ValidationError(f"Y coordinate must be integer, got {type(y).__name__}", field="y", value=y)
    
    return int(x), int(y)


def validate_grid_dimensions(width: Any, height: Any) -> Tuple[int, int]:
    """Validate grid width and height.
    
    Raises:
        ValidationError: If either dimension is not a positive integer
    """
    for field_name, value in (("width", width), ("height", height)):
        if not _is_int(value):
            raise ValidationError(
                f"{field_name} must be integer, got {type(value).__name__}",
                field=field_name, value=value
            )
        if value <= 0:
            raise ValidationError(
                f"{field_name} must be positive, got {value}",
                field=field_name, value=value
            )
    
    return int(width), int(height)


def validate_non_negative_int(value: Any, field_name: str) -> int:
    """Validate that a value is a non-negative integer.
    
    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if not _is_int(value):
        raise ValidationError(
            f"{field_name} must be integer, got {type(value).__name__}",
            field=field_name, value=value
        )
    
    if value < 0:
        raise ValidationError(
            f"{field_name} must be non-negative, got {value}",
            field=field_name, value=value
        )
    
    return int(value)


def validate_range(value: Any, field_name: str, min_val: float, max_val: float) -> float:
    """Validate that a number lies within [min_val, max_val].
    
    Raises:
        ValidationError: If value is not numeric or not in range
    """
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ValidationError(
            f"{field_name} must be numeric, got {type(value).__name__}",
            field=field_name, value=value
        )
    
    if value < min_val or value > max_val:
        raise ValidationError(
            f"{field_name} must be between {min_val} and {max_val}, got {value}",
            field=field_name, value=value
        )
    
    return float(value)
