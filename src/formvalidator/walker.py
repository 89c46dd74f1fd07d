"""Field walker: descends data and the compiled field tree in lockstep."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from formvalidator.tree import FieldGroup, FieldRules

logger = logging.getLogger("formvalidator.walker")

# Called once per leaf field: (field_path, rules, value)
type LeafVisitor = Callable[[str, FieldRules, Any], None]


def join_path(prefix: str | None, key: object) -> str:
    """``"address" + "city"`` -> ``"address.city"``; bare key at top level."""
    if prefix is None:
        return str(key)
    return f"{prefix}.{key}"


def walk(
    group: FieldGroup,
    data: Any,
    visit: LeafVisitor,
    prefix: str | None = None,
) -> None:
    """Visit every data key that has rules, recursing into nested objects.

    Only keys present in *data* are visited. Keys without a node in *group*
    are skipped. Sequences are leaves, never descended into. Where the tree
    expects a nested object but the data holds ``None`` or a scalar, the
    branch ends without error.
    """
    if not isinstance(data, Mapping):
        return

    for key, value in data.items():
        node = group.get(key)
        if node is None:
            continue

        path = join_path(prefix, key)
        if isinstance(node, FieldGroup):
            if isinstance(value, Mapping):
                walk(node, value, visit, path)
            else:
                logger.debug("Skipping %r: expected a nested object, got %s", path, type(value).__name__)
            continue

        visit(path, node, value)
