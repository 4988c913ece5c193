"""Tests for the application call boundary."""
import pytest

from gridpath import Cell, Grid, PathService, create_grid, find_path, set_blocked
from gridpath.domain.services.pathfinder import LinearScanFrontier, ZeroHeuristic
from gridpath.shared.configuration import PathfindingSettings
from gridpath.shared.exceptions import ConfigurationError, InvalidCoordinateError, ValidationError


class TestFunctionalInterface:
    """Test create_grid / set_blocked / find_path"""

    def test_create_grid_with_obstacles(self):
        grid = create_grid(4, 3, obstacles=[(1, 0), Cell(2, 2)])
        assert grid.width == 4
        assert grid.height == 3
        assert grid.occupied_cells() == {Cell(1, 0), Cell(2, 2)}

    def test_create_grid_rejects_out_of_range_obstacle(self):
        with pytest.raises(InvalidCoordinateError):
            create_grid(2, 2, obstacles=[(2, 0)])

    def test_set_blocked_accepts_tuples(self):
        grid = create_grid(3, 3)
        set_blocked(grid, (1, 1))
        assert grid.is_blocked(Cell(1, 1))
        set_blocked(grid, (1, 1), False)
        assert not grid.is_blocked(Cell(1, 1))

    def test_set_blocked_out_of_range(self):
        with pytest.raises(InvalidCoordinateError):
            set_blocked(create_grid(3, 3), (3, 3), True)

    def test_find_path_returns_cells(self):
        grid = create_grid(5, 5)
        path = find_path(grid, (0, 0), (4, 0))
        assert [cell.as_tuple() for cell in path] == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]

    def test_find_path_full_column_wall(self):
        grid = create_grid(3, 3, obstacles=[(1, 0), (1, 1), (1, 2)])
        assert find_path(grid, (0, 1), (2, 1)) == []

    def test_find_path_out_of_range_endpoint(self):
        with pytest.raises(InvalidCoordinateError):
            find_path(create_grid(3, 3), (0, 0), (3, 0))

    @pytest.mark.parametrize("start,end", [((-1, 0), (1, 1)), ((1, 1), (0, -1))])
    def test_find_path_negative_endpoint(self, start, end):
        with pytest.raises(InvalidCoordinateError):
            find_path(create_grid(3, 3), start, end)

    def test_set_blocked_negative_cell(self):
        grid = create_grid(3, 3)
        with pytest.raises(InvalidCoordinateError):
            set_blocked(grid, (-1, 0), True)
        assert grid.obstacle_count == 0

    def test_create_grid_negative_obstacle(self):
        with pytest.raises(InvalidCoordinateError):
            create_grid(3, 3, obstacles=[(0, -2)])

    def test_find_path_rejects_malformed_cell(self):
        with pytest.raises(ValidationError):
            find_path(create_grid(3, 3), (0, 0, 0), (1, 1))

    def test_find_path_options(self):
        grid = create_grid(6, 6, obstacles=[(2, y) for y in range(5)])
        default = find_path(grid, (0, 0), (5, 0))
        linear = find_path(grid, (0, 0), (5, 0), frontier="linear")
        dijkstra = find_path(grid, (0, 0), (5, 0), heuristic="zero")
        assert linear == default
        assert len(dijkstra) == len(default)


class TestPathService:
    """Test settings-driven path service"""

    def test_builds_pathfinder_from_settings(self):
        service = PathService(PathfindingSettings(heuristic="zero", frontier="linear", max_iterations=50))
        assert isinstance(service.pathfinder.heuristic, ZeroHeuristic)
        assert service.pathfinder.frontier_factory is LinearScanFrontier
        assert service.pathfinder.max_iterations == 50

    @pytest.mark.parametrize("settings", [
        PathfindingSettings(heuristic="euclidean"),
        PathfindingSettings(frontier="fibonacci"),
        PathfindingSettings(max_iterations=-1),
    ])
    def test_invalid_settings(self, settings):
        with pytest.raises(ConfigurationError) as exc_info:
            PathService(settings)
        assert exc_info.value.details["errors"]

    def test_route_result(self):
        result = PathService().route(Grid(4, 4), (0, 0), (3, 3))
        assert result.success
        assert result.length == 6
        assert result.reason is None

    def test_route_max_iterations(self):
        result = PathService(PathfindingSettings(max_iterations=2)).route(Grid(10, 10), (0, 0), (9, 9))
        assert result.path == []
        assert result.reason == "max_iterations_exhausted"

    def test_snapshot_grid_searches_a_copy(self, monkeypatch):
        grid = Grid(4, 4)
        copies = []
        original_copy = Grid.copy

        def spy_copy(self):
            clone = original_copy(self)
            copies.append(clone)
            return clone

        monkeypatch.setattr(Grid, "copy", spy_copy)

        PathService(PathfindingSettings(snapshot_grid=True)).route(grid, (0, 0), (3, 3))
        assert len(copies) == 1

        PathService(PathfindingSettings(snapshot_grid=False)).route(grid, (0, 0), (3, 3))
        assert len(copies) == 1
