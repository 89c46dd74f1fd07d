"""kida template integration.

Filters let a server-rendered host display the validator's state::

    {% for msg in form | field_errors("address.city") %}
      <span class="error">{{ msg }}</span>
    {% end %}

Register them on an existing environment with ``register_filters(env)``,
or let ``create_environment()`` build one. ``render_errors()`` renders the
whole error report as an HTML list.

Requires ``kida``::

    pip install formvalidator[templates]
"""

from typing import TYPE_CHECKING, Any

from formvalidator.errors import TemplatingNotInstalledError
from formvalidator.validator import FormValidator

if TYPE_CHECKING:
    from kida import Environment


ERROR_SUMMARY = (
    "{% if errors %}<ul class=\"form-errors\">"
    "{% for error in errors %}{% for message in error.messages %}"
    "<li data-field=\"{{ error.field_name }}\">{{ message }}</li>"
    "{% end %}{% end %}"
    "</ul>{% end %}"
)


def field_errors(validator: FormValidator | None, field_path: str) -> list[str]:
    """Messages for one field; empty when *validator* is None or the field is valid.

    Example:
        {% for msg in form | field_errors("email") %}{{ msg }}{% end %}

    """
    if validator is None:
        return []
    return validator.get_errors_in_field(field_path)


def failed_rules(validator: FormValidator | None, field_path: str) -> list[str]:
    """Failed rule names for one field, e.g. to build CSS classes.

    Example:
        <input class="{{ form | failed_rules("email") | join(" ") }}">

    """
    if validator is None:
        return []
    return validator.get_failed_rules_in_field(field_path)


def error_messages(validator: FormValidator | None, separator: str = "\n") -> str:
    """All messages joined with *separator*."""
    if validator is None:
        return ""
    return validator.get_error_messages(separator)


def has_errors(validator: FormValidator | None, field_path: str | None = None) -> bool:
    """True if the form (or the given field) has errors."""
    if validator is None:
        return False
    if field_path is None:
        return not validator.is_form_valid()
    return validator.is_field_in_error(field_path)


FILTERS: dict[str, Any] = {
    "error_messages": error_messages,
    "failed_rules": failed_rules,
    "field_errors": field_errors,
    "has_errors": has_errors,
}


def register_filters(env: "Environment") -> "Environment":
    """Add the validation filters to a kida environment."""
    env.update_filters(FILTERS)
    return env


def create_environment(**options: Any) -> "Environment":
    """Create a kida Environment with the validation filters registered.

    *options* are passed to ``kida.Environment``; ``autoescape`` defaults
    to True.
    """
    try:
        from kida import Environment
    except ImportError:
        msg = (
            "formvalidator.templating requires 'kida' for template rendering. "
            "Install with: pip install formvalidator[templates]"
        )
        raise TemplatingNotInstalledError(msg) from None

    options.setdefault("autoescape", True)
    return register_filters(Environment(**options))


def render_errors(
    validator: FormValidator,
    source: str = ERROR_SUMMARY,
    env: "Environment | None" = None,
) -> str:
    """Render the validator's errors with a kida template.

    The template sees ``errors`` (tuple of ``FieldError``) and ``form``
    (the validator itself, for use with the filters).
    """
    env = env or create_environment()
    template = env.from_string(source)
    return template.render({"errors": validator.errors, "form": validator})
