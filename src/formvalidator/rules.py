"""Rule catalog: named evaluators for field values.

A rule evaluator comes in one of two shapes::

    Predicate(fn)      # fn(param, value) -> bool, True means the value passes
    Pattern(regex)     # regex searched against the value's string form

Both expose the same contract, ``passes(param, value) -> bool``, so the
rule checker never needs to know which shape it holds.

Custom rules extend or override the defaults by name::

    from formvalidator.rules import Predicate, merge_rules

    catalog = merge_rules({
        "maxLength": Predicate(lambda n, value: len(value) <= n),
        "zipcode": re.compile(r"^\\d{5}$"),
    })
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any

from formvalidator.errors import ConfigurationError, InvalidRuleParameterError

# Type alias for a predicate function
type RuleFunction = Callable[[Any, Any], bool]


@dataclass(frozen=True, slots=True)
class Predicate:
    """Rule evaluated by calling ``fn(param, value)``."""

    fn: RuleFunction

    def passes(self, param: Any, value: Any) -> bool:
        return bool(self.fn(param, value))


@dataclass(frozen=True, slots=True)
class Pattern:
    """Rule evaluated by searching ``regex`` in the value's string form.

    The rule parameter is ignored: ``{"email": True}`` and
    ``{"email": "yes"}`` behave the same.
    """

    regex: re.Pattern[str]

    def passes(self, param: Any, value: Any) -> bool:
        return self.regex.search(_as_text(value)) is not None


type RuleEvaluator = Predicate | Pattern


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _length(value: Any) -> int:
    try:
        return len(value)
    except TypeError:
        return len(_as_text(value))


def as_number(param: Any) -> int | float | None:
    """Numeric form of a rule parameter: ``5`` and ``"5"`` both give ``5``.

    Returns None when *param* is not a number or a numeric string.
    """
    if isinstance(param, bool):
        return None
    if isinstance(param, int | float):
        return param
    if isinstance(param, str):
        for convert in (int, float):
            try:
                return convert(param.strip())
            except ValueError:
                continue
    return None


def _length_param(rule: str, length: Any) -> int | float:
    number = as_number(length)
    if number is None:
        raise InvalidRuleParameterError(rule=rule, param=length)
    return number


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def required(param: Any, value: Any) -> bool:
    """Value must be present and, for strings, not blank."""
    if not param:
        return True
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def minlength(length: Any, value: Any) -> bool:
    """Value must be at least *length* characters (or items) long."""
    return _length(value) >= _length_param("minlength", length)


def maxlength(length: Any, value: Any) -> bool:
    """Value must be at most *length* characters (or items) long."""
    return _length(value) <= _length_param("maxlength", length)


def equal_password(expected: Any, value: Any) -> bool:
    """Value must equal the configured comparison value."""
    return expected == value


DEFAULT_DATE_FORMAT = "YYYY-MM-DD"

# Moment-style tokens, longest first so "YYYY" wins over "YY"
_DATE_TOKENS = (
    ("YYYY", "%Y"),
    ("YY", "%y"),
    ("MM", "%m"),
    ("DD", "%d"),
    ("HH", "%H"),
    ("mm", "%M"),
    ("ss", "%S"),
)
_DATE_TOKEN_RE = re.compile("|".join(token for token, _ in _DATE_TOKENS))
_DATE_DIRECTIVES = dict(_DATE_TOKENS)


def date_format(fmt: str) -> str:
    """Translate a moment-style format (``YYYY-MM-DD``) to ``strptime`` syntax."""
    escaped = fmt.replace("%", "%%")
    return _DATE_TOKEN_RE.sub(lambda m: _DATE_DIRECTIVES[m.group(0)], escaped)


def date(fmt: Any, value: Any) -> bool:
    """Value must be a date in the given format (default ``YYYY-MM-DD``).

    ``None`` or ``True`` as the parameter selects the default format.
    """
    if fmt is None or fmt is True:
        fmt = DEFAULT_DATE_FORMAT
    if not isinstance(fmt, str) or not fmt:
        raise InvalidRuleParameterError(rule="date", param=fmt)
    try:
        datetime.strptime(_as_text(value), date_format(fmt))
    except ValueError:
        return False
    return True


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

NUMBERS_RE = re.compile(r"^(([0-9]*)|(([0-9]*)\.([0-9]*)))$")

EMAIL_RE = re.compile(
    r"^(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))"
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])"
    r"|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)


DEFAULT_RULES: Mapping[str, RuleEvaluator] = MappingProxyType({
    "numbers": Pattern(NUMBERS_RE),
    "email": Pattern(EMAIL_RE),
    "required": Predicate(required),
    "date": Predicate(date),
    "minlength": Predicate(minlength),
    "maxlength": Predicate(maxlength),
    "equalPassword": Predicate(equal_password),
    "hasNumber": Pattern(re.compile(r"\d")),
    "hasUpperCase": Pattern(re.compile(r"[A-Z]")),
    "hasLowerCase": Pattern(re.compile(r"[a-z]")),
    "hasSpecialCharacter": Pattern(re.compile(r"\W")),
})


def as_evaluator(name: str, rule: Any) -> RuleEvaluator:
    """Wrap a plain callable or compiled regex in its tagged variant."""
    if isinstance(rule, Predicate | Pattern):
        return rule
    if isinstance(rule, re.Pattern):
        return Pattern(rule)
    if callable(rule):
        return Predicate(rule)
    msg = (
        f"Rule {name!r} must be a callable, a compiled regex, a Predicate "
        f"or a Pattern, got {type(rule).__name__}"
    )
    raise ConfigurationError(msg)


def merge_rules(
    overrides: Mapping[str, Any] | None = None,
    defaults: Mapping[str, RuleEvaluator] = DEFAULT_RULES,
) -> dict[str, RuleEvaluator]:
    """Build a rule catalog where *overrides* win per rule name."""
    catalog = dict(defaults)
    if overrides:
        for name, rule in overrides.items():
            catalog[name] = as_evaluator(name, rule)
    return catalog
