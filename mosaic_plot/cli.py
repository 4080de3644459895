from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from mosaic_plot.config import TicsConfig
from mosaic_plot.engine import AxisTicsEngine
from mosaic_plot.errors import AxisTicsError
from mosaic_plot.labels import format_tics

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mosaic-tics", description="Compute major and minor tics for a linear axis.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    interval = sub.add_parser("interval", help="Tics for an explicit major tic interval.")
    interval.add_argument("x1", type=float)
    interval.add_argument("x2", type=float)
    interval.add_argument("dtic", type=float)

    count = sub.add_parser("count", help="Tics for a maximum number of major tics.")
    count.add_argument("x1", type=float)
    count.add_argument("x2", type=float)
    count.add_argument(
        "ntic",
        type=int,
        nargs="?",
        default=None,
        help="Maximum number of major tics. Default: MOSAIC_TICS_DEFAULT_MAX_COUNT or 10.",
    )

    for p in (interval, count):
        p.add_argument("--primary-tics", type=float, nargs="*", default=None)
        p.add_argument("--primary-label", default="")
        p.add_argument("--secondary-tics", type=float, nargs="*", default=None)
        p.add_argument("--secondary-label", default="")
        p.add_argument("--values", action="store_true", help="Also print major and minor tic values.")
        p.add_argument("--json", action="store_true", help="Print JSON instead of key: value lines.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    config = TicsConfig.from_env()
    try:
        if args.command == "interval":
            engine = AxisTicsEngine.for_interval(args.x1, args.x2, args.dtic, config=config)
        else:
            engine = AxisTicsEngine.for_count(args.x1, args.x2, args.ntic, config=config)
    except AxisTicsError as exc:
        LOGGER.debug("tic computation rejected input", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.primary_tics is not None:
        engine.set_custom_tics_primary(args.primary_tics, args.primary_label)
    if args.secondary_tics is not None:
        engine.set_custom_tics_secondary(args.secondary_tics, args.secondary_label)

    major = engine.major_values()
    minor = engine.minor_values()
    if args.json:
        payload = engine.as_dict()
        if args.values:
            payload["major_values"] = major.tolist()
            payload["minor_values"] = minor.tolist()
        print(json.dumps(payload, indent=2))
        return 0

    sys.stdout.write(engine.debug_dump())
    if args.values:
        delta_major = None if engine.has_custom_tics_primary else engine.delta_major
        print("major_values: " + " ".join(format_tics(major.tolist(), delta_major)))
        print("minor_values: " + " ".join(format_tics(minor.tolist(), engine.delta_minor)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
