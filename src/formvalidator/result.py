"""Validation result: immutable snapshot of one validation run."""

from dataclasses import dataclass

from formvalidator.store import FieldError


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating data against a rule tree.

    ``is_valid`` is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = validate(data, rules)
        if not result:
            show(result.messages)

    ``errors`` holds copies of the store's entries, so the snapshot does
    not change when the validator runs again.
    """

    errors: tuple[FieldError, ...] = ()

    @classmethod
    def from_errors(cls, errors: tuple[FieldError, ...]) -> "ValidationResult":
        return cls(
            errors=tuple(
                FieldError(
                    field_name=error.field_name,
                    failed_rules=list(error.failed_rules),
                    messages=list(error.messages),
                )
                for error in errors
            )
        )

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    @property
    def failed_rules(self) -> dict[str, list[str]]:
        """``{"address.city": ["required"]}``"""
        return {error.field_name: list(error.failed_rules) for error in self.errors}

    @property
    def messages(self) -> dict[str, list[str]]:
        """``{"address.city": ['The field "address.city" is mandatory.']}``"""
        return {error.field_name: list(error.messages) for error in self.errors}

    def __bool__(self) -> bool:
        """Falsy when invalid, enabling the ``if not result:`` pattern."""
        return self.is_valid
