"""
gridpath command line interface

Loads grid scenarios from JSON, runs the A* search and prints the result.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..application.services.path_service import PathService
from ..infrastructure.serialization.scenario_io import (
    generate_scenario, load_scenario, result_to_dict, save_scenario
)
from ..shared.configuration import FRONTIER_KINDS, HEURISTIC_NAMES, get_config, initialize_config
from ..shared.exceptions import GridPathException
from ..shared.utils.logging_utils import get_context_logger, setup_logging
from ..shared.utils.performance_utils import memory_profiler, timing_context

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_ERROR = 1
EXIT_NO_PATH = 2


def setup_environment(config_path: Optional[str] = None, log_level: Optional[str] = None):
    """Load configuration and configure logging."""
    config = initialize_config(config_path) if config_path else get_config()

    if log_level:
        config.update_logging_settings(level=log_level)

    setup_logging(config.get_settings().logging)
    return config


def run_find(args, config) -> int:
    """Search the path described by a scenario file."""
    overrides = {
        "frontier": args.frontier,
        "heuristic": args.heuristic,
        "max_iterations": args.max_iterations,
    }
    config.update_pathfinding_settings(**{k: v for k, v in overrides.items() if v is not None})

    log = get_context_logger(__name__, scenario=Path(args.scenario).name)
    scenario = load_scenario(args.scenario)
    log.info(f"Loaded {scenario.grid!r}, start {scenario.start}, end {scenario.end}")
    service = PathService(config.get_settings().pathfinding)

    if args.profile:
        with timing_context("Search", log), memory_profiler("Search", log):
            result = service.route(scenario.grid, scenario.start, scenario.end)
    else:
        result = service.route(scenario.grid, scenario.start, scenario.end)

    output = json.dumps(result_to_dict(result), indent=2)
    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
        log.info(f"Result written to {args.output}")
    else:
        print(output)

    return EXIT_FOUND if result.success else EXIT_NO_PATH


def run_generate(args, config) -> int:
    """Write a random scenario file."""
    scenario = generate_scenario(args.width, args.height, args.density, args.seed)
    save_scenario(scenario, args.output)
    print(f"Scenario written to {args.output} (start {scenario.start}, end {scenario.end}, "
          f"{scenario.grid.obstacle_count} obstacles)")
    return EXIT_FOUND


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridpath",
        description="gridpath - shortest paths on obstacle grids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s find scenario.json                  # Print the shortest path
  %(prog)s find scenario.json -o result.json   # Save the result
  %(prog)s generate 20 20 --seed 7 -o s.json   # Random 20x20 scenario
        """
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-c', '--config', help='Configuration file path')
    parser.add_argument(
        '--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Override the configured log level'
    )

    subparsers = parser.add_subparsers(dest='mode', help='Operation mode')

    find_parser = subparsers.add_parser('find', help='Find a path in a scenario file')
    find_parser.add_argument('scenario', help='Scenario file (.json or .json.gz)')
    find_parser.add_argument('-o', '--output', help='Write the result JSON here instead of stdout')
    find_parser.add_argument('--frontier', choices=FRONTIER_KINDS, help='Open set implementation')
    find_parser.add_argument('--heuristic', choices=HEURISTIC_NAMES, help='Heuristic function')
    find_parser.add_argument('--max-iterations', type=int, help='Expansion cap (0 = unbounded)')
    find_parser.add_argument('--profile', action='store_true', help='Log search time and memory')

    gen_parser = subparsers.add_parser('generate', help='Generate a random scenario')
    gen_parser.add_argument('width', type=int, help='Grid width in cells')
    gen_parser.add_argument('height', type=int, help='Grid height in cells')
    gen_parser.add_argument('--density', type=float, default=0.2, help='Obstacle density 0-1 (default: 0.2)')
    gen_parser.add_argument('--seed', type=int, help='Random seed')
    gen_parser.add_argument('-o', '--output', required=True, help='Scenario file to write')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.mode:
        parser.print_help()
        return EXIT_ERROR

    try:
        config = setup_environment(args.config, args.log_level)
        if args.mode == 'find':
            return run_find(args, config)
        return run_generate(args, config)

    except GridPathException as e:
        logger.error(f"{args.mode} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 130


if __name__ == '__main__':
    sys.exit(main())
