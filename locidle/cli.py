from __future__ import annotations

import argparse
import logging
import sys

from locidle.config import GameConfig
from locidle.formatting import format_text_report
from locidle.simulation import Simulation
from locidle.strategy import ClickOnly, GreedyCheapest, Strategy

STRATEGIES = {
    "greedy_cheapest": GreedyCheapest,
    "click_only": ClickOnly,
}


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="locidle",
        description="LOC Idle: an incremental game about writing code",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command")

    play = sub.add_parser("play", help="Open the game window")
    play.add_argument(
        "--tick-ms", type=_positive_int, default=50, help="Timer interval in milliseconds"
    )

    sim = sub.add_parser("simulate", help="Run a headless simulation")
    sim.add_argument(
        "--strategy",
        default="greedy_cheapest",
        choices=sorted(STRATEGIES),
        help="Strategy to use (default: greedy_cheapest)",
    )
    sim.add_argument("--cps", type=float, default=5.0, help="Clicks per second")
    sim.add_argument(
        "--duration", type=float, default=600.0, help="Simulated time (s)"
    )
    sim.add_argument(
        "--tick-resolution", type=float, default=1.0, help="Seconds per tick"
    )
    sim.add_argument("--export-csv", default=None, help="CSV export path prefix")
    sim.add_argument("--export-json", default=None, help="JSON export path")
    sim.add_argument("--plot", default=None, help="Plot output path (PNG)")

    return parser


def build_strategy(name: str, cps: float) -> Strategy:
    cls = STRATEGIES[name]
    return cls(clicks_per_second=cps)


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "play":
        from locidle.gui import run

        sys.exit(run(GameConfig(tick_interval_ms=args.tick_ms), argv=sys.argv[:1]))

    if args.command == "simulate":
        sim = Simulation(
            strategy=build_strategy(args.strategy, args.cps),
            duration=args.duration,
            tick_resolution=args.tick_resolution,
        )
        report = sim.run()
        print(format_text_report(report))

        if args.export_csv:
            from locidle.export import export_csv
            export_csv(report, args.export_csv)
            print(f"\nCSV exported to {args.export_csv}_*.csv")

        if args.export_json:
            from locidle.export import export_json
            export_json(report, args.export_json)
            print(f"\nJSON exported to {args.export_json}")

        if args.plot:
            from locidle.visualization import plot_simulation
            plot_simulation(report, args.plot)
            print(f"\nPlot saved to {args.plot}")
