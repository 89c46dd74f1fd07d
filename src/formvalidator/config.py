"""Validator configuration.

ValidatorConfig is a frozen dataclass: immutable after creation, one value
per validator instance, no shared mutable catalogs.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from formvalidator.messages import DEFAULT_LOCALE, MessageCatalog, merge_messages
from formvalidator.rules import RuleEvaluator, merge_rules

if TYPE_CHECKING:
    from formvalidator.store import FieldError


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Validator configuration. Immutable after creation.

    ``rules`` and ``messages`` extend the built-in catalogs; entries given
    here win per key, the defaults fill in the rest::

        config = ValidatorConfig(
            locale="fr",
            rules={"zipcode": re.compile(r"^\\d{5}$")},
            messages={"fr": {"zipcode": "Le champ {0} doit être un code postal."}},
        )
    """

    # Row of the message catalog used to render failures
    locale: str = DEFAULT_LOCALE

    # Rule name -> Predicate, Pattern, callable or compiled regex
    rules: Mapping[str, Any] | None = None

    # Locale -> rule name -> template
    messages: MessageCatalog | None = None

    # Called with the updated FieldError after every recorded failure
    on_error: Callable[["FieldError"], None] | None = None

    def rule_catalog(self) -> dict[str, RuleEvaluator]:
        """Built-in rules merged with ``rules``."""
        return merge_rules(self.rules)

    def message_catalog(self) -> dict[str, dict[str, str]]:
        """Built-in messages merged with ``messages``."""
        return merge_messages(self.messages)
