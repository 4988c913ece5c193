"""Application service wrapping grid editing and path searches."""
import logging
from typing import Iterable, List, Optional, Sequence, Union

from ...domain.models.grid import Cell, Grid
from ...domain.services.pathfinder import (
    PathfindingService, SearchResult, get_frontier_factory, get_heuristic
)
from ...shared.configuration.settings import PathfindingSettings
from ...shared.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CellLike = Union[Cell, Sequence[int]]


class PathService:
    """Builds a configured :class:`PathfindingService` and runs searches."""

    def __init__(self, settings: Optional[PathfindingSettings] = None):
        """Initialize path service.

        Raises:
            ConfigurationError: If the settings do not validate
        """
        self.settings = settings or PathfindingSettings()

        errors = self.settings.validate()
        if errors:
            raise ConfigurationError(
                "Invalid pathfinding settings: " + "; ".join(errors),
                error_code="INVALID_SETTINGS", details={"errors": errors}
            )

        self.pathfinder = PathfindingService(
            heuristic=get_heuristic(self.settings.heuristic),
            frontier_factory=get_frontier_factory(self.settings.frontier),
            max_iterations=self.settings.max_iterations,
        )

    def route(self, grid: Grid, start: CellLike, end: CellLike) -> SearchResult:
        """Search for a path, copying the grid first if configured to."""
        start_cell = Cell.from_value(start)
        end_cell = Cell.from_value(end)
        target = grid.copy() if self.settings.snapshot_grid else grid

        result = self.pathfinder.search(target, start_cell, end_cell)
        if result.success:
            logger.info(f"Path {start_cell} -> {end_cell}: {result.length} moves, {result.expanded} expansions")
        else:
            logger.info(f"No path {start_cell} -> {end_cell} ({result.reason})")
        return result

    def find_path(self, grid: Grid, start: CellLike, end: CellLike) -> List[Cell]:
        return self.route(grid, start, end).path


def create_grid(width: int, height: int, obstacles: Iterable[CellLike] = ()) -> Grid:
    """Create a grid and block the given cells."""
    grid = Grid(width, height)
    for cell in obstacles:
        grid.set_blocked(Cell.from_value(cell), True)
    return grid


def set_blocked(grid: Grid, cell: CellLike, blocked: bool = True) -> None:
    """Add or remove an obstacle."""
    grid.set_blocked(Cell.from_value(cell), blocked)


def find_path(grid: Grid, start: CellLike, end: CellLike, **options) -> List[Cell]:
    """Shortest four-connected path from start to end, or [] if unreachable.

    Keyword options are :class:`PathfindingSettings` fields.
    """
    return PathService(PathfindingSettings(**options)).find_path(grid, start, end)
