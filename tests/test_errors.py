"""Tests for formvalidator.errors: exception hierarchy and error messages."""

import pytest

from formvalidator.errors import (
    ConfigurationError,
    FormValidatorError,
    InvalidRuleParameterError,
    MissingMessageError,
    TemplatingNotInstalledError,
)


class TestHierarchy:
    def test_configuration_error_is_base_error(self) -> None:
        assert issubclass(ConfigurationError, FormValidatorError)

    def test_missing_message_is_configuration_error(self) -> None:
        assert issubclass(MissingMessageError, ConfigurationError)

    def test_invalid_param_is_configuration_error(self) -> None:
        assert issubclass(InvalidRuleParameterError, ConfigurationError)

    def test_templating_not_installed_is_base_error(self) -> None:
        assert issubclass(TemplatingNotInstalledError, FormValidatorError)


class TestMissingMessageError:
    def test_fields(self) -> None:
        err = MissingMessageError(locale="fr", rule="zipcode")
        assert err.locale == "fr"
        assert err.rule == "zipcode"

    def test_str(self) -> None:
        err = MissingMessageError(locale="fr", rule="zipcode")
        assert str(err) == "No message template for rule 'zipcode' in locale 'fr'"

    def test_frozen(self) -> None:
        err = MissingMessageError(locale="fr", rule="zipcode")
        with pytest.raises(AttributeError):
            err.locale = "en"  # type: ignore[misc]

    def test_raisable(self) -> None:
        with pytest.raises(ConfigurationError):
            raise MissingMessageError(locale="fr", rule="zipcode")


class TestInvalidRuleParameterError:
    def test_str(self) -> None:
        err = InvalidRuleParameterError(rule="minlength")
        assert str(err) == "Invalid parameter None for rule 'minlength', check your minlength settings"
