"""Headless runner: play the relining procedure with the autopilot.

Usage:
  relining run [--seed N] [--tps N] [--width W] [--height H]
               [--max-ticks N] [--json] [--log-level LEVEL]
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from relining.autopilot import Autopilot
from relining.config import DEFAULT_HEIGHT, DEFAULT_WIDTH, SiteConfig
from relining.engine import Simulation
from relining.signals import NOTICE, STAGE_CHANGED
from relining.types import Stage


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="relining", description="Furnace relining simulation")
    sub = p.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Run the procedure headless with the autopilot")
    run.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    run.add_argument("--tps", type=int, default=60, help="Ticks per second (default: 60)")
    run.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Viewport width")
    run.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Viewport height")
    run.add_argument("--max-ticks", type=int, default=10_000,
                     help="Give up after this many ticks (default: 10000)")
    run.add_argument("--json", action="store_true", help="Print the final snapshot as JSON")
    run.add_argument("--log-level", default="WARNING",
                     choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = SiteConfig.for_viewport(args.width, args.height)
    sim = Simulation(config, tps=args.tps, seed=args.seed)

    def _on_stage(signal: str, data: dict) -> None:
        print(f"  [tick {sim.tick_number:5d}] {data['old']} -> {data['new']}")

    def _on_notice(signal: str, data: dict) -> None:
        print(f"  [tick {sim.tick_number:5d}] ({data['text']})")

    sim.bus.subscribe(STAGE_CHANGED, _on_stage)
    sim.bus.subscribe(NOTICE, _on_notice)

    print(f"=== Furnace relining (seed={sim.seed}) ===\n")
    final = Autopilot(config).drive(sim, max_ticks=args.max_ticks)

    if args.json:
        print(json.dumps(final.to_dict(), indent=2))

    if final.stage is Stage.VICTORY:
        print(f"\nRelined in {final.tick_number} ticks ({final.tick_number / sim.tps:.1f}s).")
        return 0
    print(f"\nStopped in stage {final.stage.value} after {final.tick_number} ticks.")
    return 1


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    if args.command == "run":
        sys.exit(run(args))


if __name__ == "__main__":
    main()
