"""Group dependency indices.

A group stands for "every method that declares membership in it". Routing
edges through one node per group keeps the graph at O(methods + groups)
edges instead of wiring each dependent method to each member.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable

from depgraph.model import TestMethod


@dataclass(frozen=True)
class GroupIndex:
    """Bidirectional group indices for one suite.

    Attributes:
        depends_on_groups: Group name -> methods that depend on the group.
        groups_depends_on: Group name -> methods that are members of the group.
        all_groups: Every group name seen in either role.
    """

    depends_on_groups: Dict[str, FrozenSet[TestMethod]] = field(default_factory=dict)
    groups_depends_on: Dict[str, FrozenSet[TestMethod]] = field(default_factory=dict)
    all_groups: FrozenSet[str] = field(default_factory=frozenset)

    def dependents(self, group: str) -> FrozenSet[TestMethod]:
        """Methods that depend on ``group`` (empty when none)."""
        return self.depends_on_groups.get(group, frozenset())

    def members(self, group: str) -> FrozenSet[TestMethod]:
        """Methods that declare membership in ``group`` (empty when none)."""
        return self.groups_depends_on.get(group, frozenset())


class GroupDependencyIndexer:
    """Single-pass builder for a :class:`GroupIndex`.

    Instances hold per-suite state only; build a fresh one for every suite.
    """

    def __init__(self) -> None:
        self._depends_on_groups: Dict[str, set[TestMethod]] = {}
        self._groups_depends_on: Dict[str, set[TestMethod]] = {}
        self._all_groups: set[str] = set()

    def add(self, method: TestMethod) -> None:
        for group in method.depends_on_groups:
            self._all_groups.add(group)
            self._depends_on_groups.setdefault(group, set()).add(method)
        for group in method.groups:
            self._all_groups.add(group)
            self._groups_depends_on.setdefault(group, set()).add(method)

    def build(self) -> GroupIndex:
        return GroupIndex(
            depends_on_groups={
                g: frozenset(ms) for g, ms in self._depends_on_groups.items()
            },
            groups_depends_on={
                g: frozenset(ms) for g, ms in self._groups_depends_on.items()
            },
            all_groups=frozenset(self._all_groups),
        )


def index_groups(methods: Iterable[TestMethod]) -> GroupIndex:
    """Index the group relations of every method in ``methods``."""
    indexer = GroupDependencyIndexer()
    for method in methods:
        indexer.add(method)
    return indexer.build()
