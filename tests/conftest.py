"""Test configuration and fixtures for gridpath."""
import sys
from collections import deque
from pathlib import Path
from typing import Optional

import pytest

# Add the project root to Python path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from gridpath.domain.models.grid import Cell, Grid


def bfs_distance(grid: Grid, start: Cell, end: Cell) -> Optional[int]:
    """Reference shortest move count by breadth-first search, None if unreachable."""
    if grid.is_blocked(start) or grid.is_blocked(end):
        return None
    queue = deque([(start, 0)])
    seen = {start}
    while queue:
        cell, dist = queue.popleft()
        if cell == end:
            return dist
        for neighbor in cell.neighbors4():
            if grid.contains(neighbor) and neighbor not in seen and not grid.is_blocked(neighbor):
                seen.add(neighbor)
                queue.append((neighbor, dist + 1))
    return None


@pytest.fixture
def empty_grid():
    """5x5 grid with no obstacles."""
    return Grid(5, 5)


@pytest.fixture
def wall_grid():
    """3x3 grid whose middle column is fully blocked."""
    grid = Grid(3, 3)
    for y in range(3):
        grid.set_blocked(Cell(1, y), True)
    return grid


@pytest.fixture
def detour_grid():
    """5x5 grid with a wall at x=2 covering rows 0-3, open only at the top row."""
    grid = Grid(5, 5)
    for y in range(4):
        grid.set_blocked(Cell(2, y), True)
    return grid


@pytest.fixture
def sample_scenario_data():
    """Scenario in its JSON form."""
    return {
        "format": "gridpath-scenario",
        "version": "1.0",
        "grid": {"width": 6, "height": 4},
        "obstacles": [
            {"x": 2, "y": 0, "kind": "building"},
            {"x": 2, "y": 1, "kind": "bridge"},
            {"x": 2, "y": 2},
        ],
        "start": {"x": 0, "y": 0},
        "end": {"x": 5, "y": 0},
    }
