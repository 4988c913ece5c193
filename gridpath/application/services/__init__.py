"""Application services."""
from .path_service import PathService, create_grid, set_blocked, find_path

__all__ = ['PathService', 'create_grid', 'set_blocked', 'find_path']
