"""In-memory dependency graph for one suite.

The graph is a ``networkx.MultiDiGraph`` because duplicate edges are allowed.
Method nodes are keyed by their node key; group nodes are keyed by
``("group", name)`` so a group can never collide with a method key in the
graph itself.

Node attributes:
    kind: ``"method"`` or ``"group"``.
    class_name / method_name: method nodes only (simple class name).
    outcomes: method nodes only; outcomes the method ended with, in
        skipped, failed, passed order. Empty for methods that are only
        referenced.
    name: group nodes only.

Edge attributes:
    kind: ``"method"`` (method -> method it depends on),
        ``"depends_on_group"`` (method -> group) or
        ``"group_member"`` (group -> member method).
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import networkx as nx

from depgraph.collector import SuiteResultSets, collect_result_sets
from depgraph.indexer import GroupIndex, index_groups
from depgraph.keys import node_key, parse_method_ref, simple_class_name
from depgraph.logging import get_logger
from depgraph.model import Outcome, ResultBucket, TestMethod

logger = get_logger(__name__)

NODE_METHOD = "method"
NODE_GROUP = "group"

EDGE_METHOD = "method"
EDGE_DEPENDS_ON_GROUP = "depends_on_group"
EDGE_GROUP_MEMBER = "group_member"

# Declaration order of outcome categories
OUTCOME_ORDER: Tuple[Outcome, ...] = (
    Outcome.SKIPPED,
    Outcome.FAILED,
    Outcome.PASSED,
)

GroupNode = Tuple[str, str]


def group_node(name: str) -> GroupNode:
    """Return the graph node id of a group."""
    return (NODE_GROUP, name)


def _ensure_method_node(
    graph: nx.MultiDiGraph, class_name: str, method_name: str
) -> str:
    key = node_key(class_name, method_name)
    if key not in graph:
        graph.add_node(
            key,
            kind=NODE_METHOD,
            class_name=simple_class_name(class_name),
            method_name=method_name,
            outcomes=(),
        )
    return key


def _add_method(graph: nx.MultiDiGraph, method: TestMethod) -> str:
    return _ensure_method_node(graph, method.class_name, method.method_name)


def build_dependency_graph(
    result_sets: SuiteResultSets, group_index: Optional[GroupIndex] = None
) -> nx.MultiDiGraph:
    """Build the dependency graph of one suite.

    Args:
        result_sets: Suite-wide method sets from the collector.
        group_index: Group indices; derived from ``result_sets.all_methods``
            when omitted.

    Returns:
        A new MultiDiGraph; see the module docstring for its attributes.
    """
    if group_index is None:
        group_index = index_groups(result_sets.all_methods)

    graph = nx.MultiDiGraph()

    for outcome in OUTCOME_ORDER:
        for method in result_sets.by_outcome(outcome):
            key = _add_method(graph, method)
            graph.nodes[key]["outcomes"] += (outcome,)

    # Method dependencies are drawn only from methods with a terminal outcome
    for method in result_sets.finished:
        source = _add_method(graph, method)
        for ref in method.depends_on_methods:
            class_name, method_name = parse_method_ref(ref, method.class_name)
            target = _ensure_method_node(graph, class_name, method_name)
            graph.add_edge(source, target, kind=EDGE_METHOD)

    for name in group_index.all_groups:
        gnode = group_node(name)
        graph.add_node(gnode, kind=NODE_GROUP, name=name)
        for method in group_index.dependents(name):
            graph.add_edge(
                _add_method(graph, method), gnode, kind=EDGE_DEPENDS_ON_GROUP
            )
        for method in group_index.members(name):
            graph.add_edge(
                gnode, _add_method(graph, method), kind=EDGE_GROUP_MEMBER
            )

    logger.debug(
        f"Built dependency graph with {graph.number_of_nodes()} nodes and "
        f"{graph.number_of_edges()} edges ({len(group_index.all_groups)} groups)"
    )
    return graph


def build_suite_graph(buckets: Iterable[ResultBucket]) -> nx.MultiDiGraph:
    """Collect, index and build the graph for a suite's result buckets."""
    result_sets = collect_result_sets(buckets)
    return build_dependency_graph(result_sets, index_groups(result_sets.all_methods))


def method_nodes(graph: nx.MultiDiGraph) -> List[str]:
    """Return method node keys in sorted order."""
    return sorted(
        node for node, kind in graph.nodes(data="kind") if kind == NODE_METHOD
    )


def group_names(graph: nx.MultiDiGraph) -> List[str]:
    """Return group names in sorted order."""
    return sorted(
        data["name"]
        for _, data in graph.nodes(data=True)
        if data.get("kind") == NODE_GROUP
    )


def edges_of_kind(graph: nx.MultiDiGraph, kind: str) -> List[Tuple]:
    """Return ``(source, target)`` pairs of edges with ``kind``, duplicates kept."""
    return [(u, v) for u, v, k in graph.edges(data="kind") if k == kind]
