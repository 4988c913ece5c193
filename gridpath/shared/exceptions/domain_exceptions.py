"""Domain-specific exceptions."""
from .base_exceptions import GridPathException


class GridError(GridPathException):
    """Exception raised for grid construction and access errors."""
    
    def __init__(self, message: str, grid_bounds: tuple = None, **kwargs):
        """Initialize grid error.
        
        Args:
            message: Error message
            grid_bounds: Grid bounds that caused error as (min_x, min_y, max_x, max_y)
        """
        super().__init__(message, **kwargs)
        self.grid_bounds = grid_bounds


class InvalidCoordinateError(GridError):
    """Exception raised when a cell lies outside the grid."""
    
    def __init__(self, message: str, cell=None, **kwargs):
        """Initialize invalid coordinate error.
        
        Args:
            message: Error message
            cell: The offending cell
        """
        kwargs.setdefault('error_code', 'INVALID_COORDINATE')
        super().__init__(message, **kwargs)
        self.cell = cell


class ScenarioLoadError(GridPathException):
    """Exception raised when a scenario file cannot be read."""
    
    def __init__(self, message: str, file_path: str = None, **kwargs):
        super().__init__(message, **kwargs)
        self.file_path = file_path
