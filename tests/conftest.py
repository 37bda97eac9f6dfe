"""Shared fixtures for depgraph tests."""

from __future__ import annotations

import logging
from typing import Callable

import pytest

from depgraph.logging import set_global_log_level
from depgraph.model import TestMethod


@pytest.fixture(autouse=True)
def _restore_log_level():
    """Keep INFO as the depgraph level between tests (CLI flags change it)."""
    yield
    set_global_log_level(logging.INFO)


@pytest.fixture
def make_method() -> Callable[..., TestMethod]:
    """Factory for TestMethod objects with list-friendly arguments."""

    def _make(
        class_name: str,
        method_name: str,
        groups=(),
        depends_on_groups=(),
        depends_on_methods=(),
    ) -> TestMethod:
        return TestMethod(
            class_name=class_name,
            method_name=method_name,
            groups=tuple(groups),
            depends_on_groups=tuple(depends_on_groups),
            depends_on_methods=tuple(depends_on_methods),
        )

    return _make
