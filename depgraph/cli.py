"""Command-line interface for depgraph."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from depgraph.config import DEFAULT_CONFIG, ReporterConfig
from depgraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from depgraph.reporter import generate_report
from depgraph.snapshot import load_snapshot_file

logger = get_logger(__name__)


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural or (singular + "s")


def _render_snapshot(
    path: Path,
    output_dir: Optional[Path],
    config: ReporterConfig,
) -> None:
    """Generate dependency graph reports for every suite of a snapshot file.

    Args:
        path: Snapshot YAML/JSON file.
        output_dir: Base for relative or missing suite output directories.
        config: Reporter configuration built from the command line.
    """
    logger.info(f"Loading snapshot from: {path}")
    start = perf_counter()

    try:
        suites = load_snapshot_file(path, output_dir)
    except FileNotFoundError:
        logger.error(f"Snapshot file not found: {path}")
        print(f"ERROR: Snapshot file not found: {path}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Failed to read snapshot {path}: {e}")
        print(f"ERROR: Failed to read snapshot: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Failed to load snapshot: {e}")
        print(f"ERROR: Failed to load snapshot: {e}")
        sys.exit(1)

    reports = generate_report(suites, config)

    for report in reports:
        if report.written:
            print(f"OK    {report.suite_name}: {report.dot_path}")
        else:
            print(f"FAIL  {report.suite_name}: {report.error}")

    written = sum(1 for r in reports if r.written)
    logger.info(
        f"Wrote {written}/{len(reports)} {_plural(len(reports), 'suite report')} "
        f"in {perf_counter() - start:.2f} s"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``depgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="depgraph",
        description="Draw test dependency graphs from completed test runs.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{render}",
        help="Available commands",
    )

    render_parser = subparsers.add_parser(
        "render", help="Write a dependency graph for each suite of a snapshot"
    )
    render_parser.add_argument(
        "snapshot", type=Path, help="Path to snapshot YAML or JSON"
    )
    render_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help=(
            "Base directory for suite outputs. Relative suite directories are"
            " placed under it; suites without one use '<output>/<suite name>'."
        ),
    )
    render_parser.add_argument(
        "--no-render",
        action="store_true",
        help="Only write the .dot files, do not start the image renderer",
    )
    render_parser.add_argument(
        "--renderer",
        default=DEFAULT_CONFIG.renderer_command,
        help="Rasterizer command (default: %(default)s)",
    )
    render_parser.add_argument(
        "--format",
        "-T",
        dest="image_format",
        default=DEFAULT_CONFIG.image_format,
        help="Image format passed to the rasterizer (default: %(default)s)",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    if args.command == "render":
        config = replace(
            DEFAULT_CONFIG,
            renderer_command=args.renderer,
            image_format=args.image_format,
            render_image=not args.no_render,
        )
        _render_snapshot(args.snapshot, args.output, config)


if __name__ == "__main__":
    main()
