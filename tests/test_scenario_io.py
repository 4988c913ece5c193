"""Tests for scenario file serialization."""
import copy
import gzip
import json

import pytest

from gridpath.domain.models.grid import Cell, CellState
from gridpath.domain.services.pathfinder import PathfindingService, SearchResult
from gridpath.infrastructure.serialization import (
    generate_scenario, load_scenario, result_to_dict, save_scenario,
    scenario_from_dict, scenario_to_dict
)
from gridpath.shared.exceptions import ScenarioLoadError, ValidationError


class TestScenarioDict:
    """Test conversion between scenarios and JSON data"""

    def test_from_dict(self, sample_scenario_data):
        scenario = scenario_from_dict(sample_scenario_data)
        assert scenario.grid.width == 6
        assert scenario.grid.height == 4
        assert scenario.start == Cell(0, 0)
        assert scenario.end == Cell(5, 0)
        assert scenario.grid.get_state(Cell(2, 0)) is CellState.BUILDING
        assert scenario.grid.get_state(Cell(2, 1)) is CellState.BRIDGE
        assert scenario.grid.get_state(Cell(2, 2)) is CellState.BLOCKED

    def test_loaded_scenario_is_searchable(self, sample_scenario_data):
        scenario = scenario_from_dict(sample_scenario_data)
        path = PathfindingService().find_path(scenario.grid, scenario.start, scenario.end)
        assert len(path) - 1 == 11
        assert Cell(2, 3) in path

    def test_to_dict_preserves_obstacles(self, sample_scenario_data):
        data = scenario_to_dict(scenario_from_dict(sample_scenario_data))
        assert data["format"] == "gridpath-scenario"
        assert data["grid"] == {"width": 6, "height": 4}
        assert data["obstacles"] == [
            {"x": 2, "y": 0, "kind": "building"},
            {"x": 2, "y": 1, "kind": "bridge"},
            {"x": 2, "y": 2, "kind": "blocked"},
        ]
        assert data["start"] == {"x": 0, "y": 0}
        assert data["end"] == {"x": 5, "y": 0}

    def test_duplicate_obstacle_keeps_first(self, sample_scenario_data):
        sample_scenario_data["obstacles"].append({"x": 2, "y": 0, "kind": "bridge"})
        scenario = scenario_from_dict(sample_scenario_data)
        assert scenario.grid.get_state(Cell(2, 0)) is CellState.BUILDING

    @pytest.mark.parametrize("mutate", [
        lambda d: d.pop("grid"),
        lambda d: d.update(grid={"width": 0, "height": 4}),
        lambda d: d.update(format="something-else"),
        lambda d: d.pop("start"),
        lambda d: d.update(end={"x": 1}),
        lambda d: d["obstacles"].append({"x": 9, "y": 0}),
        lambda d: d["obstacles"].append({"x": 1, "y": 1, "kind": "tree"}),
        lambda d: d["obstacles"].append({"x": -1, "y": 1}),
        lambda d: d.update(obstacles=None),
        lambda d: d.update(obstacles={"x": 1, "y": 1}),
        lambda d: d["obstacles"].append({"x": 1, "y": 1, "kind": ["building"]}),
        lambda d: d["obstacles"].append([1, 1]),
    ])
    def test_malformed_data(self, sample_scenario_data, mutate):
        data = copy.deepcopy(sample_scenario_data)
        mutate(data)
        with pytest.raises(ValidationError):
            scenario_from_dict(data)

    def test_not_an_object(self):
        with pytest.raises(ValidationError):
            scenario_from_dict([1, 2, 3])


class TestScenarioFiles:
    """Test reading and writing scenario files"""

    @pytest.mark.parametrize("filename", ["scenario.json", "scenario.json.gz"])
    def test_save_and_load(self, tmp_path, sample_scenario_data, filename):
        scenario = scenario_from_dict(sample_scenario_data)
        target = tmp_path / "nested" / filename

        save_scenario(scenario, target)
        loaded = load_scenario(target)

        assert loaded.grid.obstacles() == scenario.grid.obstacles()
        assert loaded.start == scenario.start
        assert loaded.end == scenario.end

    def test_missing_file(self, tmp_path):
        with pytest.raises(ScenarioLoadError) as exc_info:
            load_scenario(tmp_path / "missing.json")
        assert exc_info.value.file_path.endswith("missing.json")

    def test_invalid_json(self, tmp_path):
        target = tmp_path / "broken.json"
        target.write_text("{not json", encoding="utf-8")
        with pytest.raises(ScenarioLoadError):
            load_scenario(target)

    def test_truncated_gzip(self, tmp_path, sample_scenario_data):
        target = tmp_path / "scenario.json.gz"
        compressed = gzip.compress(json.dumps(sample_scenario_data).encode("utf-8"))
        target.write_bytes(compressed[:len(compressed) // 2])
        with pytest.raises(ScenarioLoadError):
            load_scenario(target)

    def test_written_file_is_plain_json(self, tmp_path, sample_scenario_data):
        target = tmp_path / "scenario.json"
        save_scenario(scenario_from_dict(sample_scenario_data), target)
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["version"] == "1.0"


class TestGenerateScenario:
    """Test random scenario generation"""

    def test_endpoints_are_free_and_distinct(self):
        for seed in range(10):
            scenario = generate_scenario(10, 10, obstacle_density=0.3, seed=seed)
            assert scenario.start != scenario.end
            assert not scenario.grid.is_blocked(scenario.start)
            assert not scenario.grid.is_blocked(scenario.end)

    def test_seed_is_reproducible(self):
        first = generate_scenario(12, 8, obstacle_density=0.25, seed=42)
        second = generate_scenario(12, 8, obstacle_density=0.25, seed=42)
        assert scenario_to_dict(first) == scenario_to_dict(second)

    def test_zero_density(self):
        scenario = generate_scenario(5, 5, obstacle_density=0.0, seed=1)
        assert scenario.grid.obstacle_count == 0

    def test_full_density_fails(self):
        with pytest.raises(ValidationError):
            generate_scenario(2, 2, obstacle_density=1.0, seed=1)

    @pytest.mark.parametrize("density", [-0.1, 1.5])
    def test_density_out_of_range(self, density):
        with pytest.raises(ValidationError):
            generate_scenario(4, 4, obstacle_density=density)


def test_result_to_dict():
    result = SearchResult(path=[Cell(0, 0), Cell(0, 1)], expanded=2)
    assert result_to_dict(result) == {
        "found": True,
        "length": 1,
        "expanded": 2,
        "reason": None,
        "path": [[0, 0], [0, 1]],
    }
    assert result_to_dict(SearchResult(reason="no_path_found"))["found"] is False
