"""Typed field tree compiled from a nested rule tree.

A rule tree is a plain nested mapping::

    {
        "name": {"required": True, "maxlength": 50},
        "address": {
            "city": {"required": True},
            "zip": {"numbers": True},
        },
    }

Each node is either a ``FieldRules`` leaf (rule name -> parameter) or a
``FieldGroup`` of named child nodes. A node is a group when at least one
of its values is itself a mapping; rule parameters are never mappings.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from formvalidator.errors import ConfigurationError

logger = logging.getLogger("formvalidator.tree")


@dataclass(frozen=True, slots=True)
class FieldRules:
    """Rules configured for a single field, in configuration order."""

    rules: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class FieldGroup:
    """Named child nodes for a nested object."""

    children: Mapping[str, "FieldNode"] = field(default_factory=dict)

    def get(self, key: str) -> "FieldNode | None":
        return self.children.get(key)


type FieldNode = FieldRules | FieldGroup


def compile_tree(rule_tree: Mapping[str, Any]) -> FieldGroup:
    """Compile a nested rule mapping into a ``FieldGroup``.

    Entries whose spec is empty-ish (``None``, ``False``) or not a mapping
    are dropped, so they never match a data key.

    Raises:
        ConfigurationError: *rule_tree* itself is not a mapping.
    """
    if not isinstance(rule_tree, Mapping):
        msg = f"Rule tree must be a mapping, got {type(rule_tree).__name__}"
        raise ConfigurationError(msg)
    return _compile_group(rule_tree)


def _compile_group(specs: Mapping[str, Any]) -> FieldGroup:
    children: dict[str, FieldNode] = {}
    for key, spec in specs.items():
        node = _compile_node(key, spec)
        if node is not None:
            children[key] = node
    return FieldGroup(children=children)


def _compile_node(key: str, spec: Any) -> FieldNode | None:
    if not spec or not isinstance(spec, Mapping):
        logger.debug("Ignoring rule spec for %r: %r is not a rule mapping", key, spec)
        return None

    nested = {name: value for name, value in spec.items() if isinstance(value, Mapping)}
    if not nested:
        return FieldRules(rules=dict(spec))

    if len(nested) != len(spec):
        dropped = sorted(str(name) for name in spec if name not in nested)
        logger.debug("Group %r ignores non-nested entries %s", key, dropped)
    return _compile_group(nested)
