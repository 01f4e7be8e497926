"""Command line interface for querying a road file.

    town-graph towns
    town-graph roads --file data/towns.txt
    town-graph path "Town A" "Town D"
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import ObservabilityConfig, get_config
from .container import Container
from .domain.errors import ConfigurationError, TownGraphError
from .services import TownGraphManager


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging level and format from configuration.

    Raises:
        ConfigurationError: If the configured level is not a logging level.
    """
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level {config.level!r}",
            setting_name="level",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )
    logging.basicConfig(level=level, format=config.format)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="town-graph", description="Shortest paths between towns"
    )
    parser.add_argument(
        "--file", help="Road file to import (defaults to the configured roads file)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("towns", help="List all towns")
    sub.add_parser("roads", help="List all roads")

    p_path = sub.add_parser("path", help="Shortest path between two towns")
    p_path.add_argument("source")
    p_path.add_argument("destination")

    return parser


def cmd_towns(manager: TownGraphManager, args: argparse.Namespace) -> int:
    for name in manager.all_towns():
        print(name)
    return 0


def cmd_roads(manager: TownGraphManager, args: argparse.Namespace) -> int:
    for name in manager.all_roads():
        print(name)
    return 0


def cmd_path(manager: TownGraphManager, args: argparse.Namespace) -> int:
    route = manager.get_route(args.source, args.destination)
    if route.is_empty:
        print(f"No path from {args.source} to {args.destination}")
        return 1
    for line in route.descriptions():
        print(line)
    print(f"Total distance: {route.total_distance} mi")
    return 0


COMMANDS = {
    "towns": cmd_towns,
    "roads": cmd_roads,
    "path": cmd_path,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        configure_logging()
        manager: TownGraphManager = Container.create_default().resolve(TownGraphManager)
        manager.populate_town_graph(args.file)
    except TownGraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return COMMANDS[args.command](manager, args)


if __name__ == "__main__":
    sys.exit(main())
