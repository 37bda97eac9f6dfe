"""Merge per-context outcome buckets into suite-wide method sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

from depgraph.model import Outcome, ResultBucket, TestMethod


@dataclass(frozen=True)
class SuiteResultSets:
    """Suite-wide method sets, one per outcome plus every declared method.

    Attributes:
        skipped: Methods skipped in any context.
        failed: Methods failed in any context.
        passed: Methods passed in any context.
        all_methods: Every declared method, a superset of the three outcome
            sets used to mine group metadata.
    """

    skipped: FrozenSet[TestMethod] = field(default_factory=frozenset)
    failed: FrozenSet[TestMethod] = field(default_factory=frozenset)
    passed: FrozenSet[TestMethod] = field(default_factory=frozenset)
    all_methods: FrozenSet[TestMethod] = field(default_factory=frozenset)

    def by_outcome(self, outcome: Outcome) -> FrozenSet[TestMethod]:
        if outcome is Outcome.SKIPPED:
            return self.skipped
        if outcome is Outcome.FAILED:
            return self.failed
        return self.passed

    @property
    def finished(self) -> FrozenSet[TestMethod]:
        """Methods that ended in one of the three terminal outcomes."""
        return self.skipped | self.failed | self.passed


class ResultSetCollector:
    """Accumulate result buckets with set semantics.

    A method reported by several contexts is kept once.
    """

    def __init__(self) -> None:
        self._skipped: set[TestMethod] = set()
        self._failed: set[TestMethod] = set()
        self._passed: set[TestMethod] = set()
        self._all: set[TestMethod] = set()

    def add(self, bucket: ResultBucket) -> None:
        self._skipped.update(bucket.skipped)
        self._failed.update(bucket.failed)
        self._passed.update(bucket.passed)
        self._all.update(bucket.methods)
        # Outcome methods are always declared methods too
        self._all.update(bucket.skipped, bucket.failed, bucket.passed)

    def result_sets(self) -> SuiteResultSets:
        return SuiteResultSets(
            skipped=frozenset(self._skipped),
            failed=frozenset(self._failed),
            passed=frozenset(self._passed),
            all_methods=frozenset(self._all),
        )


def collect_result_sets(
    buckets: Optional[Iterable[ResultBucket]],
) -> SuiteResultSets:
    """Build the suite-wide method sets from a suite's result buckets.

    Args:
        buckets: Per-context result buckets; ``None`` or empty yields empty sets.

    Returns:
        The merged :class:`SuiteResultSets`.
    """
    collector = ResultSetCollector()
    for bucket in buckets or ():
        collector.add(bucket)
    return collector.result_sets()
