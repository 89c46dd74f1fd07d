"""Error store: per-field failures of one validation run.

Entries are keyed by field path and kept in insertion order::

    [FieldError(field_name="name",
                failed_rules=["required"],
                messages=['The field "name" is mandatory.'])]
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from formvalidator.messages import MessageCatalog, render_message


@dataclass(slots=True)
class FieldError:
    """Failed rules for one field, paired positionally with their messages."""

    field_name: str
    failed_rules: list[str] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)


class ErrorStore:
    """Accumulates ``FieldError`` entries, at most one per field path.

    Not thread-safe: each concurrent validation context needs its own store.
    """

    __slots__ = ("_errors", "_messages", "has_error", "locale", "on_error")

    def __init__(
        self,
        messages: MessageCatalog,
        locale: str,
        on_error: Callable[[FieldError], None] | None = None,
    ) -> None:
        self._errors: dict[str, FieldError] = {}
        self._messages = messages
        self.locale = locale
        self.on_error = on_error
        self.has_error = False

    def add_error(self, field_path: str, rule: str, param: Any) -> FieldError:
        """Record *rule* as failed for *field_path*.

        Raises:
            MissingMessageError: No template for *rule* in the store's locale.
                Nothing is recorded in that case.
        """
        message = render_message(self._messages, self.locale, rule, field_path, param)
        error = self._errors.get(field_path)
        if error is None:
            error = FieldError(field_name=field_path)
            self._errors[field_path] = error
        error.failed_rules.append(rule)
        error.messages.append(message)
        self.has_error = True
        if self.on_error is not None:
            self.on_error(error)
        return error

    def reset(self) -> None:
        self._errors.clear()
        self.has_error = False

    # -- Queries --

    @property
    def errors(self) -> tuple[FieldError, ...]:
        return tuple(self._errors.values())

    def __len__(self) -> int:
        return len(self._errors)

    def is_form_valid(self) -> bool:
        return not self._errors

    def is_field_in_error(self, field_path: str) -> bool:
        return field_path in self._errors

    def get_failed_rules(self) -> dict[str, list[str]]:
        """Map every field in error to its failed rule names."""
        return {path: list(error.failed_rules) for path, error in self._errors.items()}

    def get_failed_rules_in_field(self, field_path: str) -> list[str]:
        error = self._errors.get(field_path)
        if error is None:
            return []
        return list(error.failed_rules)

    def get_error_messages(self, separator: str = "\n") -> str:
        """Join every message, field by field, in the order they were recorded."""
        return separator.join(
            message for error in self._errors.values() for message in error.messages
        )

    def get_errors_in_field(self, field_path: str) -> list[str]:
        error = self._errors.get(field_path)
        if error is None:
            return []
        return list(error.messages)
