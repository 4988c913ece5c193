"""Domain models."""
from .grid import Cell, CellState, Grid, NEIGHBOR_OFFSETS

__all__ = ['Cell', 'CellState', 'Grid', 'NEIGHBOR_OFFSETS']
