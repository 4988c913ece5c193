"""Domain services."""
from .pathfinder import (
    PathfindingService, SearchResult, SearchNode,
    HeuristicFunction, ManhattanHeuristic, ZeroHeuristic, get_heuristic,
    Frontier, HeapFrontier, LinearScanFrontier, get_frontier_factory,
    NO_PATH_FOUND, ENDPOINT_BLOCKED, MAX_ITERATIONS_EXHAUSTED
)

__all__ = [
    'PathfindingService', 'SearchResult', 'SearchNode',
    'HeuristicFunction', 'ManhattanHeuristic', 'ZeroHeuristic', 'get_heuristic',
    'Frontier', 'HeapFrontier', 'LinearScanFrontier', 'get_frontier_factory',
    'NO_PATH_FOUND', 'ENDPOINT_BLOCKED', 'MAX_ITERATIONS_EXHAUSTED'
]
