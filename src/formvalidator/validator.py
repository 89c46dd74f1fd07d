"""FormValidator: the stateful object a hosting component holds.

The host keeps ``data`` current, calls ``validate`` with its rule tree and
reads the outcome back through the query methods::

    validator = FormValidator(config=ValidatorConfig(locale="fr"))
    validator.data = {"name": "", "address": {"city": "Lyon"}}

    if not validator.validate({"name": {"required": True}}):
        banner = validator.get_error_messages()
        name_errors = validator.get_errors_in_field("name")
"""

import logging
from collections.abc import Mapping
from typing import Any

from formvalidator.checker import check_rules
from formvalidator.config import ValidatorConfig
from formvalidator.result import ValidationResult
from formvalidator.store import ErrorStore, FieldError
from formvalidator.tree import FieldRules, compile_tree
from formvalidator.walker import walk

logger = logging.getLogger("formvalidator")


class FormValidator:
    """Validates a nested data snapshot against a nested rule tree.

    One instance per concurrent validation context: the error store is
    instance state and every ``validate`` call starts by clearing it.
    """

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        *,
        config: ValidatorConfig | None = None,
    ) -> None:
        self.config = config or ValidatorConfig()
        self.data = data
        self.rules = self.config.rule_catalog()
        self.messages = self.config.message_catalog()
        if self.config.locale not in self.messages:
            logger.warning(
                "Locale %r has no message templates; failures will raise MissingMessageError",
                self.config.locale,
            )
        self._store = ErrorStore(self.messages, self.config.locale, self.config.on_error)

    @property
    def locale(self) -> str:
        return self.config.locale

    def validate(
        self,
        rule_tree: Mapping[str, Any],
        data: Mapping[str, Any] | None = None,
    ) -> bool:
        """Validate *data* (default: ``self.data``) against *rule_tree*.

        Returns True when no field failed. Failures are recorded, never
        raised; only configuration defects such as a missing message
        template propagate.
        """
        self._store.reset()
        tree = compile_tree(rule_tree)
        walk(tree, self.data if data is None else data, self._check_field)
        logger.debug("Validation finished with %d field(s) in error", len(self._store))
        return self._store.is_form_valid()

    def _check_field(self, field_path: str, field: FieldRules, value: Any) -> None:
        check_rules(self._store, self.rules, field_path, field.rules, value)

    def reset(self) -> None:
        """Forget the errors of the last run."""
        self._store.reset()

    # -- Queries --

    @property
    def has_error(self) -> bool:
        """Set once any failure is recorded; hosts use it to re-render."""
        return self._store.has_error

    @property
    def errors(self) -> tuple[FieldError, ...]:
        return self._store.errors

    def result(self) -> ValidationResult:
        """Immutable snapshot of the current errors."""
        return ValidationResult.from_errors(self._store.errors)

    def is_form_valid(self) -> bool:
        return self._store.is_form_valid()

    def is_field_in_error(self, field_path: str) -> bool:
        return self._store.is_field_in_error(field_path)

    def get_failed_rules(self) -> dict[str, list[str]]:
        """``{"field.path": ["required", ...]}`` for every field in error."""
        return self._store.get_failed_rules()

    def get_failed_rules_in_field(self, field_path: str) -> list[str]:
        return self._store.get_failed_rules_in_field(field_path)

    def get_error_messages(self, separator: str = "\n") -> str:
        return self._store.get_error_messages(separator)

    def get_errors_in_field(self, field_path: str) -> list[str]:
        return self._store.get_errors_in_field(field_path)


def validate(
    data: Mapping[str, Any] | None,
    rule_tree: Mapping[str, Any],
    *,
    config: ValidatorConfig | None = None,
) -> ValidationResult:
    """Validate *data* against *rule_tree* with a throwaway validator.

    Example::

        result = validate(
            {"email": "nope", "address": {"city": ""}},
            {"email": {"email": True}, "address": {"city": {"required": True}}},
        )
        if not result:
            # result.failed_rules == {"email": ["email"], "address.city": ["required"]}
            ...
    """
    validator = FormValidator(data, config=config)
    validator.validate(rule_tree)
    return validator.result()
