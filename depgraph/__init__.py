"""depgraph: test dependency graphs from completed test runs.

Turns the outcome of a finished test run into a Graphviz description: test
methods become nodes coloured by outcome, groups become aggregation nodes,
and edges show which methods and groups depend on which.

Primary API:
    generate_report() - Write ``dependency_graph.dot`` (and start rendering
        ``dependency_graph.png``) for every suite
    render_suite_dot() - DOT text for one suite, no filesystem access
    build_suite_graph() - networkx MultiDiGraph for a suite's result buckets
    load_snapshot() / load_snapshot_file() - Read suites from YAML or JSON

Example:
    from pathlib import Path
    from depgraph import ResultBucket, Suite, TestMethod, generate_report

    a = TestMethod("com.example.Foo", "testA",
                   depends_on_methods=("com.example.Bar.testB",))
    b = TestMethod("com.example.Bar", "testB")
    suite = Suite("smoke", Path("out/smoke"),
                  (ResultBucket(passed=(a,), failed=(b,), methods=(a, b)),))
    generate_report([suite])
"""

from __future__ import annotations

from depgraph import cli, logging
from depgraph.collector import SuiteResultSets, collect_result_sets
from depgraph.config import DEFAULT_CONFIG, ReporterConfig
from depgraph.dot import to_dot
from depgraph.graph import build_dependency_graph, build_suite_graph
from depgraph.indexer import GroupIndex, index_groups
from depgraph.keys import method_ref_key, node_key
from depgraph.model import Outcome, ResultBucket, Suite, TestMethod
from depgraph.reporter import (
    SuiteReport,
    generate_report,
    generate_suite_report,
    render_suite_dot,
)
from depgraph.snapshot import load_snapshot, load_snapshot_file

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "Outcome",
    "TestMethod",
    "ResultBucket",
    "Suite",
    # Aggregation
    "SuiteResultSets",
    "collect_result_sets",
    "GroupIndex",
    "index_groups",
    # Graph + serialization
    "build_dependency_graph",
    "build_suite_graph",
    "to_dot",
    "node_key",
    "method_ref_key",
    # Reports
    "SuiteReport",
    "generate_report",
    "generate_suite_report",
    "render_suite_dot",
    # Snapshots
    "load_snapshot",
    "load_snapshot_file",
    # Configuration
    "ReporterConfig",
    "DEFAULT_CONFIG",
    # Utilities
    "cli",
    "logging",
]
