"""Immutable snapshot types for completed test runs.

The test-execution engine produces these objects wholesale once a run has
finished. Nothing in depgraph mutates them; reports are derived purely from
their contents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Tuple

from depgraph.keys import node_key


class Outcome(str, Enum):
    """Terminal outcome of a test method."""

    SKIPPED = "skipped"
    FAILED = "failed"
    PASSED = "passed"


@dataclass(frozen=True)
class TestMethod:
    """A single test method and its dependency metadata.

    Attributes:
        class_name: Declaring class, qualified (``com.example.Foo``) or simple.
        method_name: Method name.
        groups: Groups the method declares membership in.
        depends_on_groups: Groups the method depends on.
        depends_on_methods: Fully qualified ``<class>.<method>`` references to
            methods this one depends on.
    """

    __test__ = False  # not a pytest test class

    class_name: str
    method_name: str
    groups: Tuple[str, ...] = ()
    depends_on_groups: Tuple[str, ...] = ()
    depends_on_methods: Tuple[str, ...] = ()

    @property
    def key(self) -> str:
        """Node key of this method within a suite graph."""
        return node_key(self.class_name, self.method_name)


@dataclass(frozen=True)
class ResultBucket:
    """Outcome buckets from one run context (one sub-result of a suite).

    Attributes:
        name: Optional context name, informational only.
        skipped: Methods that ended skipped.
        failed: Methods that ended failed.
        passed: Methods that ended passed.
        methods: Every method declared in the context, including ones that
            are in no outcome bucket (e.g. configuration methods).
    """

    name: str = ""
    skipped: Tuple[TestMethod, ...] = ()
    failed: Tuple[TestMethod, ...] = ()
    passed: Tuple[TestMethod, ...] = ()
    methods: Tuple[TestMethod, ...] = ()


@dataclass(frozen=True)
class Suite:
    """Unit of report generation with its own output directory."""

    name: str
    output_dir: Path
    results: Tuple[ResultBucket, ...] = field(default_factory=tuple)
