"""Graphviz DOT serialization of suite dependency graphs."""

from __future__ import annotations

from pathlib import Path
from typing import List

import networkx as nx

from depgraph.config import DEFAULT_CONFIG, ReporterConfig
from depgraph.graph import (
    EDGE_DEPENDS_ON_GROUP,
    EDGE_GROUP_MEMBER,
    EDGE_METHOD,
    OUTCOME_ORDER,
    edges_of_kind,
    group_names,
    group_node,
    method_nodes,
)
from depgraph.keys import dot_id, label, quote


def _method_declaration(graph: nx.MultiDiGraph, key: str, color: str) -> str:
    data = graph.nodes[key]
    return (
        f"{dot_id(key)} [shape=box,color={color},style=rounded,"
        f"label={label(data['class_name'], data['method_name'])}]"
    )


def _group_block(
    graph: nx.MultiDiGraph, name: str, config: ReporterConfig
) -> List[str]:
    gnode = group_node(name)
    gid = quote(name)
    lines = [
        f"subgraph {quote(name + '_group')} {{",
        f"{gid} [shape=box,color={config.group_color},label={gid}]",
    ]
    dependents = sorted(
        u for u, _, kind in graph.in_edges(gnode, data="kind")
        if kind == EDGE_DEPENDS_ON_GROUP
    )
    members = sorted(
        v for _, v, kind in graph.out_edges(gnode, data="kind")
        if kind == EDGE_GROUP_MEMBER
    )
    lines.extend(f"{dot_id(key)} -> {gid}" for key in dependents)
    lines.extend(f"{gid} -> {dot_id(key)}" for key in members)
    lines.append("}")
    return lines


def to_dot(graph: nx.MultiDiGraph, config: ReporterConfig = DEFAULT_CONFIG) -> str:
    """Serialize a dependency graph to DOT text.

    Layout of the output:

    1. ``digraph <name> {`` and the ``overlap`` hint.
    2. Method node declarations, skipped then failed then passed. A method in
       several outcome buckets is declared once per bucket.
    3. Method-to-method dependency edges.
    4. One ``subgraph "<group>_group"`` per group holding the group node, the
       edges from dependent methods into the group and the edges from the
       group to its members.
    5. The closing brace.

    Lines within each category are sorted by node key.

    Args:
        graph: Graph from :func:`depgraph.graph.build_dependency_graph`.
        config: Styling configuration.

    Returns:
        The DOT document, newline terminated.
    """
    lines = [f"digraph {dot_id(config.graph_name)} {{", f"overlap = {config.overlap}"]

    keys = method_nodes(graph)
    for outcome in OUTCOME_ORDER:
        color = config.outcome_color(outcome)
        for key in keys:
            if outcome in graph.nodes[key]["outcomes"]:
                lines.append(_method_declaration(graph, key, color))

    for source, target in sorted(edges_of_kind(graph, EDGE_METHOD)):
        lines.append(f"{dot_id(source)} -> {dot_id(target)}")

    for name in group_names(graph):
        lines.extend(_group_block(graph, name, config))

    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(text: str, path: Path) -> None:
    """Write a DOT document as UTF-8.

    Characters UTF-8 cannot encode (lone surrogates) are written as
    backslash escapes. I/O errors propagate to the caller; a partially
    written file is left as is.
    """
    with open(path, "w", encoding="utf-8", errors="backslashreplace") as f:
        f.write(text)
