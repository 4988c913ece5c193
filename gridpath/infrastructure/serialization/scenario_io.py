"""
Scenario file format

A scenario is a grid size, its obstacles and one start/end pair, stored as
JSON (gzip-compressed when the filename ends in ``.gz``):

    {"format": "gridpath-scenario", "version": "1.0",
     "grid": {"width": 20, "height": 20},
     "obstacles": [{"x": 3, "y": 4, "kind": "building"}],
     "start": {"x": 0, "y": 0}, "end": {"x": 19, "y": 19}}
"""

import gzip
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

import numpy as np

from ...domain.models.grid import Cell, CellState, Grid
from ...domain.services.pathfinder import SearchResult
from ...shared.exceptions import GridError, ScenarioLoadError, ValidationError
from ...shared.utils.validation_utils import validate_range

logger = logging.getLogger(__name__)

FORMAT_NAME = "gridpath-scenario"
FORMAT_VERSION = "1.0"

_KIND_NAMES = {
    CellState.BLOCKED: "blocked",
    CellState.BUILDING: "building",
    CellState.BRIDGE: "bridge",
}
_KINDS_BY_NAME = {name: kind for kind, name in _KIND_NAMES.items()}


@dataclass
class Scenario:
    """A grid plus the endpoints of one path request."""
    grid: Grid
    start: Cell
    end: Cell


def _cell_to_dict(cell: Cell) -> Dict[str, int]:
    return {"x": cell.x, "y": cell.y}


def _cell_from_dict(data: Any, field_name: str) -> Cell:
    if not isinstance(data, dict) or "x" not in data or "y" not in data:
        raise ValidationError(f"{field_name} must be an object with x and y", field=field_name, value=data)
    return Cell.from_value((data["x"], data["y"]))


def scenario_to_dict(scenario: Scenario) -> Dict[str, Any]:
    """Serialize a scenario to plain JSON-compatible data."""
    return {
        "format": FORMAT_NAME,
        "version": FORMAT_VERSION,
        "grid": {"width": scenario.grid.width, "height": scenario.grid.height},
        "obstacles": [
            {"x": cell.x, "y": cell.y, "kind": _KIND_NAMES[state]}
            for cell, state in scenario.grid.obstacles()
        ],
        "start": _cell_to_dict(scenario.start),
        "end": _cell_to_dict(scenario.end),
    }


def scenario_from_dict(data: Dict[str, Any]) -> Scenario:
    """Build a scenario from parsed JSON data.

    Raises:
        ValidationError: If required fields are missing or malformed
    """
    if not isinstance(data, dict):
        raise ValidationError("Scenario must be a JSON object", field="scenario", value=type(data).__name__)

    fmt = data.get("format", FORMAT_NAME)
    if fmt != FORMAT_NAME:
        raise ValidationError(f"Unsupported scenario format: {fmt}", field="format", value=fmt)

    grid_data = data.get("grid")
    if not isinstance(grid_data, dict):
        raise ValidationError("Scenario is missing the grid section", field="grid", value=grid_data)

    try:
        grid = Grid(grid_data.get("width"), grid_data.get("height"))
    except GridError as e:
        raise ValidationError(str(e), field="grid", value=grid_data) from e

    obstacles = data.get("obstacles", [])
    if not isinstance(obstacles, list):
        raise ValidationError("obstacles must be a list", field="obstacles", value=obstacles)

    for index, entry in enumerate(obstacles):
        cell = _cell_from_dict(entry, f"obstacles[{index}]")
        kind_name = entry.get("kind", "blocked")
        if not isinstance(kind_name, str) or kind_name not in _KINDS_BY_NAME:
            raise ValidationError(f"Unknown obstacle kind: {kind_name}", field=f"obstacles[{index}].kind", value=kind_name)
        if not grid.contains(cell):
            raise ValidationError(f"Obstacle {cell} outside grid", field=f"obstacles[{index}]", value=entry)
        if not grid.place_obstacle(cell, _KINDS_BY_NAME[kind_name]):
            logger.warning(f"Duplicate obstacle at {cell} ignored")

    start = _cell_from_dict(data.get("start"), "start")
    end = _cell_from_dict(data.get("end"), "end")
    return Scenario(grid=grid, start=start, end=end)


def save_scenario(scenario: Scenario, filepath: Union[str, Path]) -> None:
    """Write a scenario to disk. A ``.gz`` suffix selects gzip compression."""
    output_path = Path(filepath)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = scenario_to_dict(scenario)

    if output_path.suffix == ".gz":
        with gzip.open(output_path, 'wt', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
    else:
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    logger.info(f"Saved scenario {scenario.grid.width}x{scenario.grid.height} to {output_path}")


def load_scenario(filepath: Union[str, Path]) -> Scenario:
    """Read a scenario from disk.

    Raises:
        ScenarioLoadError: If the file cannot be read, is truncated or is not valid JSON
        ValidationError: If the JSON content is malformed
    """
    input_path = Path(filepath)
    try:
        if input_path.suffix == ".gz":
            with gzip.open(input_path, 'rt', encoding='utf-8') as f:
                data = json.load(f)
        else:
            with open(input_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
    except (OSError, EOFError, ValueError) as e:
        raise ScenarioLoadError(f"Cannot read scenario {input_path}: {e}", file_path=str(input_path)) from e

    scenario = scenario_from_dict(data)
    logger.debug(f"Loaded scenario from {input_path}: {scenario.grid!r}")
    return scenario


def path_to_dict(path: List[Cell]) -> List[List[int]]:
    return [[cell.x, cell.y] for cell in path]


def result_to_dict(result: SearchResult) -> Dict[str, Any]:
    """Serialize a search result for output."""
    return {
        "found": result.success,
        "length": result.length,
        "expanded": result.expanded,
        "reason": result.reason,
        "path": path_to_dict(result.path),
    }


def generate_scenario(width: int, height: int, obstacle_density: float = 0.2,
                      seed: int = None) -> Scenario:
    """Create a random scenario with distinct free start and end cells.

    Raises:
        ValidationError: If the density is outside [0, 1] or the grid has
            fewer than two free cells
    """
    validate_range(obstacle_density, "obstacle_density", 0.0, 1.0)
    rng = np.random.default_rng(seed)
    grid = Grid(width, height)

    mask = rng.random((grid.height, grid.width)) < obstacle_density
    for y, x in zip(*np.nonzero(mask)):
        kind = CellState.BUILDING if rng.random() < 0.5 else CellState.BRIDGE
        grid.place_obstacle(Cell(int(x), int(y)), kind)

    start = grid.random_free_cell(rng)
    end = grid.random_free_cell(rng, exclude=[start]) if start is not None else None
    if start is None or end is None:
        raise ValidationError(
            "Not enough free cells for a start and an end",
            field="obstacle_density", value=obstacle_density
        )

    logger.debug(f"Generated scenario {width}x{height} with {grid.obstacle_count} obstacles")
    return Scenario(grid=grid, start=start, end=end)
