"""Utilities for building report artifact paths.

Each suite writes into its own directory. Suite directories come from the
snapshot; relative ones are anchored at an optional base output directory,
and suites without one get ``<base>/<suite name>``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from depgraph.config import DEFAULT_CONFIG, ReporterConfig

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def suite_dir_name(suite_name: str) -> str:
    """Return a filesystem-safe directory name for a suite.

    Examples:
        "Smoke tests" -> "Smoke_tests"; "" -> "suite".
    """
    safe = _UNSAFE_CHARS.sub("_", suite_name).strip("._")
    return safe or "suite"


def resolve_suite_dir(
    suite_name: str, output_dir: Optional[Path], base_dir: Optional[Path]
) -> Path:
    """Resolve the output directory of a suite.

    - Absolute ``output_dir`` values are returned as-is.
    - Relative ``output_dir`` values are interpreted relative to ``base_dir``
      when provided; otherwise relative to the current working directory.
    - Without ``output_dir`` the suite gets ``<base_dir>/<suite name>``.

    Args:
        suite_name: Suite name, used when no directory is given.
        output_dir: Directory supplied for the suite, if any.
        base_dir: Optional base directory; if None, use CWD.

    Returns:
        The suite's output directory.
    """
    base = base_dir if base_dir is not None else Path.cwd()
    if output_dir is None:
        return base / suite_dir_name(suite_name)
    if output_dir.is_absolute():
        return output_dir
    return base / output_dir


def dot_path_for_suite(
    suite_dir: Path, config: ReporterConfig = DEFAULT_CONFIG
) -> Path:
    """Return the DOT artifact path inside a suite directory."""
    return suite_dir / config.dot_filename


def image_path_for_suite(
    suite_dir: Path, config: ReporterConfig = DEFAULT_CONFIG
) -> Path:
    """Return the rendered image path inside a suite directory."""
    return suite_dir / config.image_filename
