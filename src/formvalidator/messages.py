"""Message catalog: per-locale templates for failed rules.

Templates carry two positional tokens::

    {0}  the field path ("address.city")
    {1}  the rule parameter

Only the first occurrence of each token is substituted.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from formvalidator.errors import MissingMessageError
from formvalidator.rules import as_number

type MessageCatalog = Mapping[str, Mapping[str, str]]

DEFAULT_LOCALE = "en"

_TEMPLATES: dict[str, dict[str, str]] = {
    "en": {
        "numbers": 'The field "{0}" must be a valid number.',
        "email": 'The field "{0}" must be a valid email address.',
        "required": 'The field "{0}" is mandatory.',
        "date": 'The field "{0}" must be a valid date ({1}).',
        "minlength": 'The field "{0}" length must be greater than {1}.',
        "maxlength": 'The field "{0}" length must not exceed {1}.',
        "equalPassword": "Passwords are different.",
        "hasNumber": 'The field "{0}" must contain a number.',
        "hasUpperCase": 'The field "{0}" must contain an upper case letter.',
        "hasLowerCase": 'The field "{0}" must contain a lower case letter.',
        "hasSpecialCharacter": 'The field "{0}" must contain a special character.',
    },
    "fr": {
        "numbers": 'Le champ "{0}" doit être un nombre valide.',
        "email": 'Le champ "{0}" doit être une adresse email valide.',
        "required": 'Le champ "{0}" est obligatoire.',
        "date": 'Le champ "{0}" doit correspondre à une date valide ({1}).',
        "minlength": 'Le nombre de caractères du champ "{0}" doit être supérieur à {1}.',
        "maxlength": 'Le nombre de caractères du champ "{0}" ne doit pas dépasser {1}.',
        "equalPassword": "Les mots de passe sont différents.",
        "hasNumber": 'Le champ "{0}" doit contenir un chiffre.',
        "hasUpperCase": 'Le champ "{0}" doit contenir une majuscule.',
        "hasLowerCase": 'Le champ "{0}" doit contenir une minuscule.',
        "hasSpecialCharacter": 'Le champ "{0}" doit contenir un caractère spécial.',
    },
    "es": {
        "numbers": 'El campo "{0}" debe ser un número válido.',
        "email": 'El campo "{0}" debe ser una dirección de correo electrónico válida.',
        "required": 'El campo "{0}" es obligatorio.',
        "date": 'El campo "{0}" debe ser una fecha válida ({1}).',
        "minlength": 'La longitud del campo "{0}" debe ser mayor que {1}.',
        "maxlength": 'La longitud del campo "{0}" no debe superar {1}.',
        "equalPassword": "Las contraseñas son diferentes.",
        "hasNumber": 'El campo "{0}" debe contener un número.',
        "hasUpperCase": 'El campo "{0}" debe contener una letra mayúscula.',
        "hasLowerCase": 'El campo "{0}" debe contener una letra minúscula.',
        "hasSpecialCharacter": 'El campo "{0}" debe contener un carácter especial.',
    },
    "pt": {
        "numbers": 'O campo "{0}" deve ser um número válido.',
        "email": 'O campo "{0}" deve ser um endereço de e-mail válido.',
        "required": 'O campo "{0}" é obrigatório.',
        "date": 'O campo "{0}" deve ser uma data válida ({1}).',
        "minlength": 'O comprimento do campo "{0}" deve ser maior que {1}.',
        "maxlength": 'O comprimento do campo "{0}" não deve exceder {1}.',
        "equalPassword": "As senhas são diferentes.",
        "hasNumber": 'O campo "{0}" deve conter um número.',
        "hasUpperCase": 'O campo "{0}" deve conter uma letra maiúscula.',
        "hasLowerCase": 'O campo "{0}" deve conter uma letra minúscula.',
        "hasSpecialCharacter": 'O campo "{0}" deve conter um caractere especial.',
    },
}

DEFAULT_MESSAGES: MessageCatalog = MappingProxyType(
    {locale: MappingProxyType(templates) for locale, templates in _TEMPLATES.items()}
)


def display_param(rule: str, param: Any) -> Any:
    """Value shown for ``{1}``.

    ``minlength`` is displayed one below its configured value. Existing
    message tables are written against that convention, so it stays.
    """
    if rule == "minlength":
        number = as_number(param)
        if number is not None:
            return number - 1
    return param


def render_message(
    messages: MessageCatalog,
    locale: str,
    rule: str,
    field_path: str,
    param: Any,
) -> str:
    """Render the failure message for *rule* on *field_path*.

    Raises:
        MissingMessageError: The locale or the rule has no template.
    """
    try:
        template = messages[locale][rule]
    except KeyError:
        raise MissingMessageError(locale=locale, rule=rule) from None
    return template.replace("{0}", field_path, 1).replace("{1}", str(display_param(rule, param)), 1)


def merge_messages(
    overrides: MessageCatalog | None = None,
    defaults: MessageCatalog = DEFAULT_MESSAGES,
) -> dict[str, dict[str, str]]:
    """Build a message catalog where *overrides* win per locale and rule."""
    catalog = {locale: dict(templates) for locale, templates in defaults.items()}
    if overrides:
        for locale, templates in overrides.items():
            catalog.setdefault(locale, {}).update(templates)
    return catalog


def missing_templates(
    rule_names: Iterable[str],
    messages: MessageCatalog,
    locales: Iterable[str] | None = None,
) -> list[tuple[str, str]]:
    """List ``(locale, rule)`` pairs that have no template.

    Checks every locale in *messages* unless *locales* narrows it down.
    """
    names = list(rule_names)
    missing: list[tuple[str, str]] = []
    for locale in locales if locales is not None else messages:
        templates = messages.get(locale, {})
        missing.extend((locale, name) for name in names if name not in templates)
    return missing
