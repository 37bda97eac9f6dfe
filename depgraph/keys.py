"""Node keys and DOT identifier helpers.

Both declared method nodes and dependency edge endpoints derive their key from
the same ``(class name, method name)`` pair via :func:`node_key`, so a method
always maps to one key no matter how it is referenced.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

_BARE_ID = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def simple_class_name(class_name: str) -> str:
    """Return the simple name of a possibly qualified or nested class name.

    Examples:
        ``com.example.Foo`` -> ``Foo``; ``com.example.Outer$Inner`` -> ``Inner``.
    """
    simple = class_name.rsplit(".", 1)[-1]
    return simple.rsplit("$", 1)[-1]


def node_key(class_name: str, method_name: str) -> str:
    """Return the node key ``<SimpleClass>_<method>`` for a method."""
    return f"{simple_class_name(class_name)}_{method_name}"


def parse_method_ref(
    ref: str, default_class: Optional[str] = None
) -> Tuple[str, str]:
    """Split a ``<package/class>.<method>`` reference into class and method.

    A reference with no separator names a method of ``default_class``.

    Args:
        ref: Method reference as supplied by the execution engine.
        default_class: Class used for unqualified references.

    Returns:
        ``(class_name, method_name)`` tuple.
    """
    class_name, sep, method_name = ref.rpartition(".")
    if not sep:
        return default_class or "", ref
    return class_name, method_name


def method_ref_key(ref: str, default_class: Optional[str] = None) -> str:
    """Return the node key a method reference resolves to."""
    return node_key(*parse_method_ref(ref, default_class))


def escape(text: str) -> str:
    """Escape backslashes and double quotes for use inside a DOT string."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted DOT string."""
    return f'"{escape(text)}"'


def label(*lines: str) -> str:
    """Return a quoted multi-line DOT label joined with the ``\\n`` escape."""
    return '"' + "\\n".join(escape(line) for line in lines) + '"'


def dot_id(key: str) -> str:
    """Render a node key as a DOT identifier, quoting only when required."""
    if _BARE_ID.match(key):
        return key
    return quote(key)
