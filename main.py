from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from luvatrix_scatter import (
    RandomColorSource,
    ScatterPlotError,
    load_settings_file,
    render,
    to_svg_markup,
    write_svg,
)
from luvatrix_scatter.datafile import load_series_file

LOGGER = logging.getLogger("luvatrix_scatter.cli")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="luvatrix-scatter")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("render", help="Render a scatter plot from a JSON series file to SVG.")
    run.add_argument("data", type=Path, help="JSON file: a list of series or {\"series\": [...]}.")
    run.add_argument("--settings", type=Path, default=None, help="TOML plot settings ([plot] table).")
    run.add_argument("--out", type=Path, default=None, help="Output SVG path. Default: stdout.")
    run.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for colors assigned to series without one. Default: unseeded.",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        try:
            settings = load_settings_file(args.settings) if args.settings is not None else None
            series = load_series_file(args.data)
            plot = render(settings, series, color_source=RandomColorSource(args.seed))
        except (ScatterPlotError, FileNotFoundError) as exc:
            LOGGER.error("render failed: %s", exc)
            return 2
        if args.out is None:
            sys.stdout.write(to_svg_markup(plot.graphic) + "\n")
        else:
            out = write_svg(plot.graphic, args.out)
            LOGGER.info("wrote %s (%d primitives)", out, len(plot.graphic.primitives))
        return 0

    raise RuntimeError(f"unsupported command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
