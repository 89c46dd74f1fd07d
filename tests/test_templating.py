"""Tests for formvalidator.templating: kida filters and error rendering."""

import pytest

from formvalidator.config import ValidatorConfig
from formvalidator.templating import (
    FILTERS,
    error_messages,
    failed_rules,
    field_errors,
    has_errors,
)
from formvalidator.validator import FormValidator

MESSAGES = {"en": {"required": "{0} is required", "email": "{0} is not an email"}}


@pytest.fixture
def form() -> FormValidator:
    validator = FormValidator(
        {"name": "", "email": "nope", "age": "30"},
        config=ValidatorConfig(messages=MESSAGES),
    )
    validator.validate({"name": {"required": True}, "email": {"email": True}})
    return validator


# ---------------------------------------------------------------------------
# Filters as plain functions
# ---------------------------------------------------------------------------


class TestFilters:
    def test_field_errors(self, form: FormValidator) -> None:
        assert field_errors(form, "name") == ["name is required"]

    def test_field_errors_valid_field(self, form: FormValidator) -> None:
        assert field_errors(form, "age") == []

    def test_field_errors_none(self) -> None:
        assert field_errors(None, "name") == []

    def test_failed_rules(self, form: FormValidator) -> None:
        assert failed_rules(form, "email") == ["email"]

    def test_failed_rules_none(self) -> None:
        assert failed_rules(None, "email") == []

    def test_error_messages(self, form: FormValidator) -> None:
        assert error_messages(form, " | ") == "name is required | email is not an email"

    def test_error_messages_none(self) -> None:
        assert error_messages(None) == ""

    def test_has_errors(self, form: FormValidator) -> None:
        assert has_errors(form) is True
        assert has_errors(form, "name") is True
        assert has_errors(form, "age") is False
        assert has_errors(None) is False

    def test_registry(self) -> None:
        assert set(FILTERS) == {"error_messages", "failed_rules", "field_errors", "has_errors"}


# ---------------------------------------------------------------------------
# kida integration
# ---------------------------------------------------------------------------


class TestKidaIntegration:
    @pytest.fixture(autouse=True)
    def _kida(self) -> None:
        pytest.importorskip("kida")

    def test_register_filters(self, form: FormValidator) -> None:
        from formvalidator.templating import create_environment

        env = create_environment()
        tpl = env.from_string('{% for msg in form | field_errors("name") %}[{{ msg }}]{% end %}')

        assert tpl.render({"form": form}).strip() == "[name is required]"

    def test_failed_rules_in_template(self, form: FormValidator) -> None:
        from formvalidator.templating import create_environment

        env = create_environment()
        tpl = env.from_string('{% if form | has_errors("email") %}invalid{% end %}')

        assert tpl.render({"form": form}).strip() == "invalid"

    def test_render_errors(self, form: FormValidator) -> None:
        from formvalidator.templating import render_errors

        html = render_errors(form)

        assert '<ul class="form-errors">' in html
        assert 'data-field="name"' in html
        assert "name is required" in html
        assert "email is not an email" in html

    def test_render_errors_valid_form(self) -> None:
        from formvalidator.templating import render_errors

        validator = FormValidator({"name": "alice"})
        validator.validate({"name": {"required": True}})

        assert render_errors(validator).strip() == ""

    def test_messages_are_escaped(self) -> None:
        from formvalidator.templating import render_errors

        config = ValidatorConfig(messages={"en": {"required": "<b>{0}</b> is required"}})
        validator = FormValidator({"name": ""}, config=config)
        validator.validate({"name": {"required": True}})

        html = render_errors(validator)

        assert "<b>" not in html
        assert "&lt;b&gt;" in html
