"""YAML/JSON loader + schema validation for test run snapshots.

A snapshot records, per suite, the methods of each run context together with
their outcome and dependency metadata. JSON documents are valid YAML, so one
loader handles both formats.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
import yaml

from depgraph.logging import get_logger
from depgraph.model import Outcome, ResultBucket, Suite, TestMethod
from depgraph.utils.output_paths import resolve_suite_dir

logger = get_logger(__name__)


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("depgraph.schemas")
        .joinpath("snapshot.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def validate_snapshot_data(data: Any) -> Dict[str, Any]:
    """Validate a parsed snapshot document against the packaged schema.

    Raises:
        ValueError: If the document is not a mapping or violates the schema.
    """
    if not isinstance(data, dict):
        raise ValueError("The provided snapshot must map to a dictionary at top-level.")
    try:
        jsonschema.validate(data, _load_schema())
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise ValueError(f"Invalid snapshot at '{location}': {e.message}") from e
    return data


def _method_from_dict(entry: Dict[str, Any]) -> TestMethod:
    return TestMethod(
        class_name=entry["class"],
        method_name=entry["name"],
        groups=tuple(entry.get("groups", ())),
        depends_on_groups=tuple(entry.get("depends_on_groups", ())),
        depends_on_methods=tuple(entry.get("depends_on_methods", ())),
    )


def _bucket_from_dict(entry: Dict[str, Any]) -> ResultBucket:
    by_outcome: Dict[Outcome, List[TestMethod]] = {o: [] for o in Outcome}
    methods: List[TestMethod] = []
    for method_entry in entry.get("methods", []):
        method = _method_from_dict(method_entry)
        methods.append(method)
        status = method_entry.get("status")
        if status is not None:
            by_outcome[Outcome(status)].append(method)
    return ResultBucket(
        name=entry.get("name", ""),
        skipped=tuple(by_outcome[Outcome.SKIPPED]),
        failed=tuple(by_outcome[Outcome.FAILED]),
        passed=tuple(by_outcome[Outcome.PASSED]),
        methods=tuple(methods),
    )


def suites_from_dict(
    data: Dict[str, Any], output_base: Optional[Path] = None
) -> List[Suite]:
    """Build suites from a validated snapshot document.

    Args:
        data: Validated snapshot document.
        output_base: Base for relative or missing suite output directories.

    Returns:
        Suites in document order.
    """
    suites: List[Suite] = []
    for entry in data["suites"]:
        raw_dir = entry.get("output_dir")
        output_dir = resolve_suite_dir(
            entry["name"], Path(raw_dir) if raw_dir else None, output_base
        )
        suites.append(
            Suite(
                name=entry["name"],
                output_dir=output_dir,
                results=tuple(_bucket_from_dict(r) for r in entry.get("results", [])),
            )
        )
    return suites


def load_snapshot(text: str, output_base: Optional[Path] = None) -> List[Suite]:
    """Parse, validate and convert a snapshot document.

    Raises:
        ValueError: If the text is not valid YAML/JSON or fails validation.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Snapshot is not valid YAML/JSON: {e}") from e
    if data is None:
        data = {"suites": []}
    suites = suites_from_dict(validate_snapshot_data(data), output_base)
    logger.debug(f"Loaded snapshot with {len(suites)} suite(s)")
    return suites


def load_snapshot_file(path: Path, output_base: Optional[Path] = None) -> List[Suite]:
    """Load a snapshot from a file; see :func:`load_snapshot`."""
    return load_snapshot(path.read_text(encoding="utf-8"), output_base)
