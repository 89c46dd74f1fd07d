"""formvalidator: declarative validation for nested data.

Describe each field's rules in a tree shaped like the data, validate, then
ask which fields failed which rules.

Basic usage::

    from formvalidator import FormValidator

    validator = FormValidator({"name": "", "address": {"city": ""}})
    validator.validate({
        "name": {"required": True, "maxlength": 50},
        "address": {"city": {"required": True}},
    })
    validator.get_failed_rules()
    # {"name": ["required"], "address.city": ["required"]}

Localized messages and custom rules come from ``ValidatorConfig``::

    from formvalidator import ValidatorConfig

    validator = FormValidator(config=ValidatorConfig(locale="fr"))

Template filters (``pip install formvalidator[templates]``)::

    from formvalidator.templating import register_filters
    register_filters(env)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DEFAULT_MESSAGES",
    "DEFAULT_RULES",
    "FieldError",
    "FormValidator",
    "FormValidatorError",
    "InvalidRuleParameterError",
    "MissingMessageError",
    "Pattern",
    "Predicate",
    "ValidationResult",
    "ValidatorConfig",
    "validate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formvalidator`` fast while providing a clean top-level API.
    """
    if name in ("FormValidator", "validate"):
        from formvalidator import validator as _validator

        return getattr(_validator, name)

    if name == "ValidatorConfig":
        from formvalidator.config import ValidatorConfig

        return ValidatorConfig

    if name == "ValidationResult":
        from formvalidator.result import ValidationResult

        return ValidationResult

    if name == "FieldError":
        from formvalidator.store import FieldError

        return FieldError

    if name in ("DEFAULT_RULES", "Pattern", "Predicate"):
        from formvalidator import rules as _rules

        return getattr(_rules, name)

    if name == "DEFAULT_MESSAGES":
        from formvalidator.messages import DEFAULT_MESSAGES

        return DEFAULT_MESSAGES

    if name in (
        "ConfigurationError",
        "FormValidatorError",
        "InvalidRuleParameterError",
        "MissingMessageError",
    ):
        from formvalidator import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
