"""
gridpath - shortest four-connected paths on obstacle grids
"""

__version__ = "1.0.0"
__license__ = "MIT"
__description__ = "A* pathfinding on 2D grids with user-placed obstacles"

from .domain.models.grid import Cell, CellState, Grid
from .domain.services.pathfinder import PathfindingService, SearchResult
from .application.services.path_service import PathService, create_grid, set_blocked, find_path
from .shared.exceptions import (
    GridPathException, ConfigurationError, ValidationError,
    GridError, InvalidCoordinateError
)

__all__ = [
    'Cell', 'CellState', 'Grid',
    'PathfindingService', 'SearchResult',
    'PathService', 'create_grid', 'set_blocked', 'find_path',
    'GridPathException', 'ConfigurationError', 'ValidationError',
    'GridError', 'InvalidCoordinateError',
]
