"""Utility helpers used across depgraph.

Keep modules minimal and focused.
"""

from depgraph.utils.output_paths import (
    dot_path_for_suite,
    image_path_for_suite,
    resolve_suite_dir,
    suite_dir_name,
)

__all__ = [
    "dot_path_for_suite",
    "image_path_for_suite",
    "resolve_suite_dir",
    "suite_dir_name",
]
