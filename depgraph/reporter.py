"""Per-suite dependency graph report generation.

Reports are generated from immutable :class:`~depgraph.model.Suite` snapshots
after test execution has completed. Suites are independent: each gets its
own graph, its own ``.dot`` file and its own render attempt, and a failure in
one suite never stops the others.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from depgraph.collector import collect_result_sets
from depgraph.config import DEFAULT_CONFIG, ReporterConfig
from depgraph.dot import to_dot, write_dot
from depgraph.graph import build_dependency_graph
from depgraph.indexer import index_groups
from depgraph.logging import get_logger
from depgraph.model import Suite
from depgraph.renderer import render_image
from depgraph.utils.output_paths import dot_path_for_suite, image_path_for_suite

logger = get_logger(__name__)


@dataclass(frozen=True)
class SuiteReport:
    """Outcome of report generation for one suite.

    Attributes:
        suite_name: Name of the suite.
        dot_path: Where the DOT description was (or would have been) written.
        image_path: Where the renderer was asked to write the image.
        written: Whether the DOT file was written completely.
        error: Description of the I/O error when ``written`` is False.
        render_started: Whether a renderer process was launched.
    """

    suite_name: str
    dot_path: Path
    image_path: Path
    written: bool
    error: Optional[str] = None
    render_started: bool = False


def render_suite_dot(suite: Suite, config: ReporterConfig = DEFAULT_CONFIG) -> str:
    """Return the DOT description of a suite without touching the filesystem."""
    result_sets = collect_result_sets(suite.results)
    group_index = index_groups(result_sets.all_methods)
    return to_dot(build_dependency_graph(result_sets, group_index), config)


def generate_suite_report(
    suite: Suite, config: ReporterConfig = DEFAULT_CONFIG
) -> SuiteReport:
    """Write the dependency graph of one suite and start its rendering.

    I/O and path encoding errors are logged and recorded in the returned
    report rather than raised. Rendering is attempted even when the write failed.

    Args:
        suite: Suite snapshot.
        config: Styling and artifact configuration.

    Returns:
        A :class:`SuiteReport` describing what happened.
    """
    dot_path = dot_path_for_suite(suite.output_dir, config)
    image_path = image_path_for_suite(suite.output_dir, config)

    text = render_suite_dot(suite, config)

    written = False
    error: Optional[str] = None
    try:
        suite.output_dir.mkdir(parents=True, exist_ok=True)
        write_dot(text, dot_path)
        written = True
        logger.info(f"Suite '{suite.name}': dependency graph written to {dot_path}")
    except (OSError, UnicodeError) as e:
        error = f"{type(e).__name__}: {e}"
        logger.error(
            f"Suite '{suite.name}': failed to write dependency graph "
            f"to {dot_path}: {error}"
        )

    render_started = False
    if config.render_image:
        render_started = render_image(dot_path, image_path, config) is not None

    return SuiteReport(
        suite_name=suite.name,
        dot_path=dot_path,
        image_path=image_path,
        written=written,
        error=error,
        render_started=render_started,
    )


def generate_report(
    suites: Iterable[Suite], config: ReporterConfig = DEFAULT_CONFIG
) -> List[SuiteReport]:
    """Generate dependency graph reports for every suite, in order."""
    reports = [generate_suite_report(suite, config) for suite in suites]
    failed = sum(1 for r in reports if not r.written)
    if failed:
        logger.warning(
            f"{failed} of {len(reports)} suite report(s) could not be written"
        )
    return reports
