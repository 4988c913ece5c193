"""Scenario serialization."""
from .scenario_io import (
    Scenario, load_scenario, save_scenario, scenario_from_dict, scenario_to_dict,
    result_to_dict, path_to_dict, generate_scenario
)

__all__ = [
    'Scenario', 'load_scenario', 'save_scenario', 'scenario_from_dict',
    'scenario_to_dict', 'result_to_dict', 'path_to_dict', 'generate_scenario'
]
