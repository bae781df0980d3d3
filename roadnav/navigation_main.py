#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command line entry point

Loads a region payload file and drives a NavigationEngine: list buildings,
plan a single route, or replay a stream of positions.
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

import numpy as np
from loguru import logger

from roadnav.common.exceptions import NavigationError
from roadnav.config.loader import load_config, load_region_payload
from roadnav.config.models import EngineConfig
from roadnav.nav_runtime.navigation_engine import NavigationEngine
from roadnav.path_planner.grid_rasterizer import region_cell_range
from roadnav.path_planner.map_model import AgentPosition, PlanResult
from roadnav.utils.logger import SetupLogger


EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_BAD_INPUT = 2

MAX_ASCII_SIZE = 200


def render_ascii(engine: NavigationEngine, result: PlanResult) -> List[str]:
    """
    Character map of roads and the planned path

    '.' = road, 'B' = destination, '*' = path, 'S' = start, 'G' = goal
    """
    ranges = [r for r in (region_cell_range(road) for road in engine.regions.Roads()) if r is not None]
    destination = engine.session.destination_
    dest_range = region_cell_range(destination) if destination is not None else None
    if dest_range is not None:
        ranges.append(dest_range)
    if not ranges:
        return []

    x_min = min(r[0] for r in ranges)
    x_max = max(r[1] for r in ranges)
    z_min = min(r[2] for r in ranges)
    z_max = max(r[3] for r in ranges)
    w, h = x_max - x_min + 1, z_max - z_min + 1
    if w > MAX_ASCII_SIZE or h > MAX_ASCII_SIZE:
        logger.warning(f"Map too large for ASCII output: {w}x{h}")
        return []

    vis = np.full((h, w), ' ', dtype=str)
    for road in engine.regions.Roads():
        cell_range = region_cell_range(road)
        if cell_range is not None:
            x0, x1, z0, z1 = cell_range
            vis[z0 - z_min:z1 - z_min + 1, x0 - x_min:x1 - x_min + 1] = '.'
    if dest_range is not None:
        x0, x1, z0, z1 = dest_range
        vis[z0 - z_min:z1 - z_min + 1, x0 - x_min:x1 - x_min + 1] = 'B'

    if result.ok and result.path:
        for node in result.path:
            vis[node.z - z_min, node.x - x_min] = '*'
        vis[result.path[0].z - z_min, result.path[0].x - x_min] = 'S'
        vis[result.path[-1].z - z_min, result.path[-1].x - x_min] = 'G'

    return ["".join(row) for row in vis]


def _build_engine(args) -> NavigationEngine:
    config = load_config(Path(args.config)) if args.config else EngineConfig()
    SetupLogger(level=args.log_level or config.logging.level, log_dir=config.logging.log_dir,
                retention=config.logging.retention)

    engine = NavigationEngine(config)
    if not engine.LoadPayload(load_region_payload(Path(args.regions))):
        raise NavigationError(f"Region payload rejected: {args.regions}")
    return engine


def _parse_positions(lines: Iterable[str]) -> Iterable[AgentPosition]:
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        parts = line.replace(',', ' ').split()
        if len(parts) != 3:
            logger.warning(f"Line {lineno}: expected 'x y z', got {line!r}")
            continue
        try:
            yield AgentPosition(*(float(p) for p in parts))
        except ValueError:
            logger.warning(f"Line {lineno}: not a number: {line!r}")


def cmd_buildings(engine: NavigationEngine, args, out: TextIO) -> int:
    for name in engine.ListBuildings():
        print(name, file=out)
    return EXIT_OK


def cmd_plan(engine: NavigationEngine, args, out: TextIO) -> int:
    if not engine.SelectDestination(args.to):
        print(f"Unknown building: {args.to}", file=out)
        return EXIT_BAD_INPUT

    result = engine.Update(AgentPosition(*args.position))
    if result is None or not result.ok:
        reason = result.reason.value if result is not None else "not-computed"
        print(f"No path: {reason}", file=out)
        return EXIT_NO_PATH

    print(f"Path: {len(result.path)} nodes", file=out)
    print(" ".join(f"{n.x},{n.z}" for n in result.path), file=out)
    if args.ascii:
        for row in render_ascii(engine, result):
            print(row, file=out)
    return EXIT_OK


def cmd_simulate(engine: NavigationEngine, args, out: TextIO) -> int:
    if not engine.SelectDestination(args.to):
        print(f"Unknown building: {args.to}", file=out)
        return EXIT_BAD_INPUT

    if args.positions:
        try:
            with open(args.positions, 'r', encoding='utf-8') as f:
                lines = f.readlines()
        except OSError as e:
            print(f"Error: {e}", file=out)
            return EXIT_BAD_INPUT
    else:
        lines = sys.stdin.readlines()

    interval = engine.config.runtime.refresh_rate_s if args.realtime else None
    for pos in _parse_positions(lines):
        if interval is not None:
            time.sleep(interval)
        result = engine.Update(pos)
        status = engine.GetStatus(pos)
        if result is not None:
            outcome = f"{len(result.path)} nodes" if result.ok else result.reason.value
            print(f"X={pos.x:.0f} Z={pos.z:.0f} area={status['area']} facing={status['facing']} "
                  f"recomputed: {outcome}", file=out)

    return EXIT_OK if engine.session.hasPath() else EXIT_NO_PATH


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="roadnav", description="Shortest routes over rectangular road regions.")
    parser.add_argument("--config", type=str, default=None, help="Path to config.yaml (default: built-in defaults)")
    parser.add_argument("--regions", type=str, required=True, help="Region payload file with ROADS and BUILDINGS")
    parser.add_argument("--log-level", type=str, default=None, help="Override the configured log level")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("buildings", help="List building names")

    plan = sub.add_parser("plan", help="Plan one route")
    plan.add_argument("--from", dest="position", type=float, nargs=3, metavar=('X', 'Y', 'Z'), required=True,
                      help="Agent position")
    plan.add_argument("--to", type=str, required=True, help="Destination building name")
    plan.add_argument("--ascii", action="store_true", help="Print a character map of the route")

    simulate = sub.add_parser("simulate", help="Replay positions ('x y z' per line) and recompute as needed")
    simulate.add_argument("--to", type=str, required=True, help="Destination building name")
    simulate.add_argument("--positions", type=str, default=None, help="Positions file (default: stdin)")
    simulate.add_argument("--realtime", action="store_true",
                          help="Wait runtime.refresh_rate_s before each position, like a live client tick")

    return parser


COMMANDS = {
    "buildings": cmd_buildings,
    "plan": cmd_plan,
    "simulate": cmd_simulate,
}


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    out = out if out is not None else sys.stdout

    try:
        engine = _build_engine(args)
    except NavigationError as e:
        print(f"Error: {e}", file=out)
        return EXIT_BAD_INPUT

    return COMMANDS[args.command](engine, args, out)


if __name__ == "__main__":
    sys.exit(main())
