"""Domain service for A* pathfinding on a four-connected grid.

- Manhattan distance heuristic (admissible and consistent for unit moves).
- Four orthogonal neighbours, every move costs exactly 1.
- Ties on ``f`` are broken by lowest ``h``, then by discovery order.
"""
import heapq
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from itertools import count
from typing import Dict, Iterator, List, Optional, Set, Tuple

from ..models.grid import Cell, Grid
from ...shared.exceptions import ConfigurationError, InvalidCoordinateError, PathfindingError

logger = logging.getLogger(__name__)

NO_PATH_FOUND = "no_path_found"
ENDPOINT_BLOCKED = "endpoint_blocked"
MAX_ITERATIONS_EXHAUSTED = "max_iterations_exhausted"


class HeuristicFunction(ABC):
    """Abstract base class for heuristic functions."""

    name = "abstract"

    @abstractmethod
    def calculate(self, start: Cell, end: Cell) -> int:
        """Calculate heuristic cost between two cells."""
        pass


class ManhattanHeuristic(HeuristicFunction):
    """Manhattan distance heuristic."""

    name = "manhattan"

    def calculate(self, start: Cell, end: Cell) -> int:
        return abs(start.x - end.x) + abs(start.y - end.y)


class ZeroHeuristic(HeuristicFunction):
    """Zero heuristic, turning A* into Dijkstra's algorithm."""

    name = "zero"

    def calculate(self, start: Cell, end: Cell) -> int:
        return 0


_HEURISTICS = {
    ManhattanHeuristic.name: ManhattanHeuristic,
    ZeroHeuristic.name: ZeroHeuristic,
}


def get_heuristic(name: str) -> HeuristicFunction:
    """Look up a heuristic by name."""
    try:
        return _HEURISTICS[name]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown heuristic: {name!r} (expected one of {sorted(_HEURISTICS)})",
            error_code="UNKNOWN_HEURISTIC"
        ) from None


@dataclass(eq=False)
class SearchNode:
    """Node owned by a single search run."""
    cell: Cell
    g: int                              # cost from start
    h: int                              # heuristic to goal
    order: int                          # discovery sequence, kept across updates
    parent: Optional['SearchNode'] = None

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def priority(self) -> Tuple[int, int, int]:
        return (self.f, self.h, self.order)


class Frontier(ABC):
    """Open set: cells discovered but not yet finalized."""

    @abstractmethod
    def push_or_update(self, node: SearchNode) -> None:
        """Insert a new node, or re-rank one whose ``g`` was lowered in place."""
        pass

    @abstractmethod
    def pop_min(self) -> SearchNode:
        """Remove and return the node with the smallest priority."""
        pass

    @abstractmethod
    def get(self, cell: Cell) -> Optional[SearchNode]:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __contains__(self, cell: Cell) -> bool:
        return self.get(cell) is not None


class HeapFrontier(Frontier):
    """Binary-heap frontier with lazy invalidation of outdated entries."""

    def __init__(self):
        self._heap: List[Tuple[int, int, int, SearchNode]] = []
        self._nodes: Dict[Cell, SearchNode] = {}

    def push_or_update(self, node: SearchNode) -> None:
        self._nodes[node.cell] = node
        heapq.heappush(self._heap, (node.f, node.h, node.order, node))

    def pop_min(self) -> SearchNode:
        while self._heap:
            f, _, _, node = heapq.heappop(self._heap)
            # An entry is current only if the node is still open and its f matches
            if self._nodes.get(node.cell) is node and node.f == f:
                del self._nodes[node.cell]
                return node
        raise IndexError("pop from empty frontier")

    def get(self, cell: Cell) -> Optional[SearchNode]:
        return self._nodes.get(cell)

    def __len__(self) -> int:
        return len(self._nodes)


class LinearScanFrontier(Frontier):
    """Naive frontier scanning every open node on extraction. O(V) per pop."""

    def __init__(self):
        self._nodes: Dict[Cell, SearchNode] = {}

    def push_or_update(self, node: SearchNode) -> None:
        self._nodes[node.cell] = node

    def pop_min(self) -> SearchNode:
        if not self._nodes:
            raise IndexError("pop from empty frontier")
        node = min(self._nodes.values(), key=lambda n: n.priority)
        del self._nodes[node.cell]
        return node

    def get(self, cell: Cell) -> Optional[SearchNode]:
        return self._nodes.get(cell)

    def __len__(self) -> int:
        return len(self._nodes)


_FRONTIERS = {
    "heap": HeapFrontier,
    "linear": LinearScanFrontier,
}


def get_frontier_factory(kind: str):
    """Look up a frontier class by name."""
    try:
        return _FRONTIERS[kind]
    except KeyError:
        raise ConfigurationError(
            f"Unknown frontier kind: {kind!r} (expected one of {sorted(_FRONTIERS)})",
            error_code="UNKNOWN_FRONTIER"
        ) from None


@dataclass
class SearchResult:
    """Outcome of one search. An empty path means the goal is unreachable."""
    path: List[Cell] = field(default_factory=list)
    expanded: int = 0
    reason: Optional[str] = None

    @property
    def success(self) -> bool:
        return bool(self.path)

    @property
    def length(self) -> int:
        """Number of moves in the path."""
        return max(len(self.path) - 1, 0)


class PathfindingService:
    """A* search over a :class:`Grid` snapshot.

    The service holds configuration only; every call builds its own frontier
    and closed set, so one instance may serve independent searches.
    """

    def __init__(self, heuristic: HeuristicFunction = None,
                 frontier_factory=HeapFrontier, max_iterations: int = 0):
        """Initialize pathfinding service.

        Args:
            heuristic: Heuristic function, Manhattan distance by default
            frontier_factory: Callable returning an empty Frontier
            max_iterations: Expansion cap; 0 means unbounded
        """
        self.heuristic = heuristic or ManhattanHeuristic()
        self.frontier_factory = frontier_factory
        self.max_iterations = max_iterations

    def find_path(self, grid: Grid, start: Cell, end: Cell) -> List[Cell]:
        """Return the cells from start to end inclusive, or [] when unreachable."""
        return self.search(grid, start, end).path

    def search(self, grid: Grid, start: Cell, end: Cell) -> SearchResult:
        """Run A* from start to end.

        Raises:
            InvalidCoordinateError: If start or end lies outside the grid
        """
        for label, cell in (("start", start), ("end", end)):
            if not grid.contains(cell):
                raise InvalidCoordinateError(
                    f"{label.capitalize()} cell {cell} outside grid {grid.width}x{grid.height}",
                    cell=cell, grid_bounds=grid.bounds
                )

        if grid.is_blocked(start) or grid.is_blocked(end):
            logger.debug(f"Endpoint blocked: start={start}, end={end}")
            return SearchResult(reason=ENDPOINT_BLOCKED)

        frontier = self.frontier_factory()
        closed: Set[Cell] = set()
        discovery = count()

        h0 = self.heuristic.calculate(start, end)
        frontier.push_or_update(SearchNode(start, 0, h0, next(discovery)))

        expanded = 0
        while frontier:
            if self.max_iterations and expanded >= self.max_iterations:
                logger.warning(f"A* gave up after {expanded} expansions from {start} to {end}")
                return SearchResult(expanded=expanded, reason=MAX_ITERATIONS_EXHAUSTED)

            current = frontier.pop_min()
            closed.add(current.cell)
            expanded += 1

            if current.cell == end:
                path = self._reconstruct_path(current)
                logger.debug(f"A* found path with {len(path)} cells in {expanded} expansions")
                return SearchResult(path=path, expanded=expanded)

            for neighbor in self._neighbors(current.cell, grid, closed):
                tentative_g = current.g + 1
                existing = frontier.get(neighbor)

                if existing is None:
                    frontier.push_or_update(SearchNode(
                        neighbor, tentative_g,
                        self.heuristic.calculate(neighbor, end),
                        next(discovery), parent=current
                    ))
                elif tentative_g < existing.g:
                    existing.g = tentative_g
                    existing.parent = current
                    frontier.push_or_update(existing)

        logger.debug(f"A* found no path from {start} to {end} after {expanded} expansions")
        return SearchResult(expanded=expanded, reason=NO_PATH_FOUND)

    @staticmethod
    def _neighbors(cell: Cell, grid: Grid, closed: Set[Cell]) -> Iterator[Cell]:
        """Yield in-bounds, unvisited, unblocked orthogonal neighbours."""
        for neighbor in cell.neighbors4():
            if not grid.contains(neighbor):
                continue
            if neighbor in closed:
                continue
            if grid.is_blocked(neighbor):
                continue
            yield neighbor

    @staticmethod
    def _reconstruct_path(node: SearchNode) -> List[Cell]:
        """Follow parent links back to the start and reverse."""
        path = []
        seen = set()
        while node is not None:
            if node.cell in seen:
                raise PathfindingError(f"Cycle in parent links at {node.cell}", algorithm_name="a_star")
            seen.add(node.cell)
            path.append(node.cell)
            node = node.parent
        path.reverse()
        return path

    def estimate_path_cost(self, start: Cell, end: Cell) -> int:
        """Estimate the cost of a path between two cells."""
        return self.heuristic.calculate(start, end)

    @staticmethod
    def validate_path(path: List[Cell], grid: Optional[Grid] = None) -> List[str]:
        """Check that a path is contiguous and, given a grid, in-bounds and unblocked."""
        issues = []

        if grid is not None:
            for i, cell in enumerate(path):
                if not grid.contains(cell):
                    issues.append(f"Cell out of bounds at step {i}: {cell}")
                elif grid.is_blocked(cell):
                    issues.append(f"Blocked cell at step {i}: {cell}")

        for i in range(len(path) - 1):
            current = path[i]
            next_cell = path[i + 1]
            if current.manhattan_to(next_cell) != 1:
                issues.append(f"Invalid movement at step {i}: {current} -> {next_cell}")

        return issues
