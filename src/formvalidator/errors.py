"""formvalidator exception hierarchy.

Per-field validation failures are never raised: they are recorded in the
error store. Exceptions here signal configuration defects that must reach
the caller.
"""

from dataclasses import dataclass
from typing import Any


class FormValidatorError(Exception):
    """Base for all formvalidator-specific errors."""


class ConfigurationError(FormValidatorError):
    """Raised when validator configuration is invalid.

    Typically raised while merging rule or message catalogs, or while
    rendering a message for a rule the catalogs do not agree on.
    """


@dataclass(frozen=True, slots=True)
class MissingMessageError(ConfigurationError):
    """No message template exists for a locale/rule combination.

    Rendering fails loudly instead of producing a malformed message.
    """

    locale: str
    rule: str

    def __str__(self) -> str:
        return f"No message template for rule {self.rule!r} in locale {self.locale!r}"


@dataclass(frozen=True, slots=True)
class InvalidRuleParameterError(ConfigurationError):
    """A built-in rule was configured without a usable parameter."""

    rule: str
    param: Any = None

    def __str__(self) -> str:
        return f"Invalid parameter {self.param!r} for rule {self.rule!r}, check your {self.rule} settings"


class TemplatingNotInstalledError(FormValidatorError):
    """Raised when kida is not installed."""
