"""CLI entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from fabric_chassis.chassis.grouping import GroupingConfig, group_nodes
from fabric_chassis.core.errors import ChassisInvariantError, FabricLoadError
from fabric_chassis.core.serialization import fabric_chassis_to_json
from fabric_chassis.discovery.plugins.static import StaticFabricPlugin

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""

    parser = argparse.ArgumentParser(description="group discovered fabric nodes into chassis")
    parser.add_argument("--fabric", required=True, help="path to discovered fabric JSON")
    parser.add_argument("--out", help="write the JSON report here instead of stdout")
    parser.add_argument(
        "--min-group-size",
        type=int,
        default=2,
        help="nodes sharing a system image GUID needed to form a chassis",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["INFO", "DEBUG", "WARN"],
        help="log level",
    )
    return parser


def configure_logging(level: str) -> None:
    """Configure logging."""

    logging.basicConfig(level=getattr(logging, level), format="%(levelname)s %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run chassis grouping."""

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        fabric = StaticFabricPlugin(path=Path(args.fabric)).load()
    except FabricLoadError as exc:
        _LOGGER.error("Invalid input: %s", exc)
        return 2
    _LOGGER.info("Loaded %s nodes from %s", len(fabric), args.fabric)

    try:
        group_nodes(fabric, GroupingConfig(min_identity_group_size=args.min_group_size))
    except ChassisInvariantError as exc:
        _LOGGER.error("Chassis grouping aborted: %s", exc)
        return 3

    text = json.dumps(fabric_chassis_to_json(fabric), indent=2, sort_keys=True)
    if args.out:
        Path(args.out).write_text(text + "\n", encoding="utf-8")
        _LOGGER.info("Report written to %s", args.out)
    else:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
