"""Domain model for the 2D obstacle grid."""
import collections.abc
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Set, Tuple, Union

import numpy as np

from ...shared.exceptions import GridError, InvalidCoordinateError, ValidationError
from ...shared.utils.validation_utils import validate_cell_components, validate_grid_dimensions

logger = logging.getLogger(__name__)

# Left, right, down, up
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Cell:
    """Value object for a grid position. ``x`` is the column, ``y`` the row.

    Any integer pair is a valid Cell; whether it lies on a grid is for
    :meth:`Grid.contains` to decide.
    """
    x: int
    y: int

    def __post_init__(self):
        validate_cell_components(self.x, self.y)

    @classmethod
    def from_value(cls, value: Union['Cell', Sequence[int]]) -> 'Cell':
        """Coerce a Cell or an ``(x, y)`` pair into a Cell."""
        if isinstance(value, Cell):
            return value
        if isinstance(value, (str, bytes)) or not isinstance(value, (collections.abc.Sequence, np.ndarray)):
            raise ValidationError(
                f"Cell must be a Cell or an (x, y) pair, got {type(value).__name__}",
                field="cell", value=value
            )
        if len(value) != 2:
            raise ValidationError(
                f"Cell must have exactly two components, got {len(value)}",
                field="cell", value=value
            )
        x, y = validate_cell_components(value[0], value[1])
        return cls(x, y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def neighbors4(self) -> Iterator['Cell']:
        """Yield the four orthogonal neighbours, possibly off-grid.

        Negative coordinates are skipped since no grid can contain them.
        """
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = self.x + dx, self.y + dy
            if nx >= 0 and ny >= 0:
                yield Cell(nx, ny)

    def manhattan_to(self, other: 'Cell') -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class CellState(Enum):
    """States of grid cells. Every non-empty state blocks movement."""
    EMPTY = 0
    BLOCKED = 1
    BUILDING = 2
    BRIDGE = 3

    @property
    def is_obstacle(self) -> bool:
        return self is not CellState.EMPTY


class Grid:
    """Fixed-size grid owning a mutable set of blocked cells.

    Occupancy is held in a numpy array indexed ``[y, x]``. The grid is not
    thread-safe; a search must not run while another thread edits it. Use
    :meth:`copy` to hand an independent snapshot to a search.
    """

    def __init__(self, width: int, height: int):
        """Initialize an empty grid.

        Raises:
            GridError: If width or height is not a positive integer
        """
        try:
            self.width, self.height = validate_grid_dimensions(width, height)
        except ValidationError as e:
            raise GridError(f"Invalid grid dimensions: {e}", grid_bounds=(width, height)) from e

        self._states = np.zeros((self.height, self.width), dtype=np.int8)
        logger.debug(f"Initialized grid: {self.width}x{self.height}")

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """Inclusive bounds as (min_x, min_y, max_x, max_y)."""
        return (0, 0, self.width - 1, self.height - 1)

    @property
    def obstacle_count(self) -> int:
        return int(np.count_nonzero(self._states))

    def contains(self, cell: Cell) -> bool:
        """True iff the cell lies within [0, width) x [0, height)."""
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def _require_contains(self, cell: Cell) -> None:
        if not self.contains(cell):
            raise InvalidCoordinateError(
                f"Cell {cell} outside grid {self.width}x{self.height}",
                cell=cell, grid_bounds=self.bounds
            )

    def get_state(self, cell: Cell) -> CellState:
        """Get state of a grid cell.

        Raises:
            InvalidCoordinateError: If the cell is out of range
        """
        self._require_contains(cell)
        return CellState(int(self._states[cell.y, cell.x]))

    def is_blocked(self, cell: Cell) -> bool:
        """True iff the cell holds an obstacle.

        Raises:
            InvalidCoordinateError: If the cell is out of range
        """
        self._require_contains(cell)
        return bool(self._states[cell.y, cell.x])

    def set_blocked(self, cell: Cell, blocked: bool = True) -> None:
        """Add or remove an obstacle.

        Blocking a cell that already holds an obstacle keeps its state.

        Raises:
            InvalidCoordinateError: If the cell is out of range
        """
        self._require_contains(cell)
        if not blocked:
            self._states[cell.y, cell.x] = CellState.EMPTY.value
        elif not self._states[cell.y, cell.x]:
            self._states[cell.y, cell.x] = CellState.BLOCKED.value

    def place_obstacle(self, cell: Cell, kind: CellState = CellState.BUILDING) -> bool:
        """Place a typed obstacle on an empty cell.

        Returns:
            False (and leaves the grid unchanged) if the cell is already occupied

        Raises:
            InvalidCoordinateError: If the cell is out of range
            ValidationError: If kind is EMPTY
        """
        if not kind.is_obstacle:
            raise ValidationError("Obstacle kind cannot be EMPTY", field="kind", value=kind)
        self._require_contains(cell)
        if self._states[cell.y, cell.x]:
            logger.debug(f"Cell {cell} already occupied, obstacle not placed")
            return False
        self._states[cell.y, cell.x] = kind.value
        return True

    def occupied_cells(self) -> Set[Cell]:
        """Return the set of blocked cells."""
        ys, xs = np.nonzero(self._states)
        return {Cell(int(x), int(y)) for x, y in zip(xs, ys)}

    def obstacles(self) -> List[Tuple[Cell, CellState]]:
        """Return blocked cells with their states in row-major order."""
        ys, xs = np.nonzero(self._states)
        return [
            (Cell(int(x), int(y)), CellState(int(self._states[y, x])))
            for x, y in zip(xs, ys)
        ]

    def free_cells(self) -> List[Cell]:
        """Return unblocked cells in row-major order."""
        ys, xs = np.nonzero(self._states == CellState.EMPTY.value)
        return [Cell(int(x), int(y)) for x, y in zip(xs, ys)]

    def random_free_cell(self, rng: np.random.Generator,
                         exclude: Iterable[Cell] = ()) -> Optional[Cell]:
        """Pick a uniformly random unblocked cell not in ``exclude``.

        Returns None when no candidate is left.
        """
        excluded = set(exclude)
        candidates = [cell for cell in self.free_cells() if cell not in excluded]
        if not candidates:
            return None
        return candidates[int(rng.integers(len(candidates)))]

    def clear(self) -> None:
        """Remove every obstacle."""
        self._states.fill(CellState.EMPTY.value)

    def copy(self) -> 'Grid':
        """Return an independent snapshot with the same size and occupancy."""
        clone = Grid(self.width, self.height)
        clone._states = self._states.copy()
        return clone

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, obstacles={self.obstacle_count})"
