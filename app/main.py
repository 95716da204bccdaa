"""Command-line entry point: render a burndown chart PNG from a project JSON file.

Usage:
    burndown <data-file.json> [output-file-path]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from config import Settings, get_settings
from core.burndown import prepare_burndown_data
from core.errors import BurndownError
from visualization import build_burndown_chart, write_chart_png

logger = logging.getLogger("burndown")


def resolve_output_path(raw_path: str | None, settings: Settings) -> Path:
    """Return the PNG path to write, appending ``.png`` when it is missing."""

    candidate = raw_path or settings.default_output
    if not candidate.endswith(".png"):
        candidate += ".png"
    return Path(candidate)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="burndown",
        description="Render a task-granularity burndown chart from a project JSON file.",
    )
    parser.add_argument("data_file", help="Project JSON with startDate, tasks and milestones")
    parser.add_argument(
        "output_file",
        nargs="?",
        default=None,
        help="PNG file to write (default: BURNDOWN_DEFAULT_OUTPUT or chart.png)",
    )
    return parser


def main(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    """Application entrypoint for the burndown CLI; returns the process exit status."""

    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )

    output_path = resolve_output_path(args.output_file, settings)

    try:
        data = prepare_burndown_data(args.data_file)
    except FileNotFoundError as exc:
        print(f"Error reading \"{args.data_file}\": {exc}", file=sys.stderr)
        return 1
    except BurndownError as exc:
        print(f"Error processing \"{args.data_file}\": {exc}", file=sys.stderr)
        return 1

    logger.info(
        "Rendering %d ideal and %d actual points with %d milestones",
        len(data["ideal_series"]),
        len(data["actual_series"]),
        len(data["milestones"]),
    )
    fig = build_burndown_chart(data, settings)
    try:
        write_chart_png(fig, output_path, settings)
    except (OSError, ValueError, RuntimeError) as exc:
        print(f"Error generating chart: {exc}", file=sys.stderr)
        return 1

    print(f"Chart generated: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
