"""Rule checker: applies one field's rules and records failures."""

import logging
from collections.abc import Mapping
from typing import Any

from formvalidator.rules import RuleEvaluator
from formvalidator.store import ErrorStore

logger = logging.getLogger("formvalidator.checker")


def check_rules(
    store: ErrorStore,
    catalog: Mapping[str, RuleEvaluator],
    field_path: str,
    rule_spec: Mapping[str, Any],
    value: Any,
) -> None:
    """Evaluate every rule in *rule_spec* against *value*.

    An empty value (``""``, ``0``, ``None``, ``False``, empty container) on
    a field that is not ``required`` is valid whatever else is configured.
    Because of that, ``required`` rarely fails together with another rule
    on the same field; when it does, both are recorded.

    Rule names missing from *catalog* neither pass nor fail.
    """
    if not value and not rule_spec.get("required"):
        return

    for rule_name, param in rule_spec.items():
        evaluator = catalog.get(rule_name)
        if evaluator is None:
            logger.debug("Unknown rule %r on field %r ignored", rule_name, field_path)
            continue
        if not evaluator.passes(param, value):
            store.add_error(field_path, rule_name, param)
