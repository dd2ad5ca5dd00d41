# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Per-call options: add_prefix, error_class and error_factory."""

from __future__ import annotations

import pytest

from paramguard import (
    InvalidErrorClassError,
    InvalidOptionsError,
    InvalidPrefixError,
    ParameterValidationError,
    ValidateOptions,
)


@pytest.fixture()
def cartoon_names():
    return {"dog": "Scooby", "bear": "Yogi", "penguin": "Tux"}


class TestAddPrefix:
    def test_non_string_prefix_raises(self, parameter_validator, cartoon_names):
        with pytest.raises(InvalidPrefixError):
            parameter_validator.validate(cartoon_names, ["penguin", "bear"], {}, {"add_prefix": 4})

    def test_prefix_is_added_to_extracted_names(self, parameter_validator, cartoon_names):
        accumulator = {}

        parameter_validator.validate(cartoon_names, ["penguin", "bear"], accumulator, {"addPrefix": "_"})

        assert accumulator == {"_penguin": "Tux", "_bear": "Yogi"}

    def test_prefix_sets_private_attributes_on_an_object(self, parameter_validator, cartoon_names):
        class Cartoon:
            def __init__(self, params):
                parameter_validator.validate(params, ["dog", ["bear", "penguin"]], self, add_prefix="_")

        cartoon = Cartoon(cartoon_names)

        assert cartoon._dog == "Scooby"
        assert cartoon._bear == "Yogi"
        assert cartoon._penguin == "Tux"

    def test_error_messages_use_unprefixed_names(self, parameter_validator, cartoon_names):
        with pytest.raises(ParameterValidationError) as excinfo:
            parameter_validator.validate(cartoon_names, ["walrus"], add_prefix="_")

        assert "'walrus'" in str(excinfo.value)
        assert "_walrus" not in str(excinfo.value)

    def test_none_prefix_means_no_prefix(self, parameter_validator, cartoon_names):
        assert parameter_validator.validate(cartoon_names, ["dog"], add_prefix=None) == {"dog": "Scooby"}


class TestErrorClass:
    def test_custom_error_class_is_raised(self, parameter_validator):
        class MissingAnimalError(Exception):
            pass

        with pytest.raises(MissingAnimalError, match="parameter 'walrus'"):
            parameter_validator.validate({}, ["walrus"], None, {"errorClass": MissingAnimalError})

    def test_subclass_of_validation_error_keeps_individual_errors(self, parameter_validator):
        class ZooError(ParameterValidationError):
            pass

        with pytest.raises(ZooError) as excinfo:
            parameter_validator.validate({}, ["walrus", "seal"], error_class=ZooError)

        assert len(excinfo.value.errors) == 2

    @pytest.mark.parametrize("error_class", ["ValueError", 42, dict, BaseException])
    def test_non_exception_class_raises(self, parameter_validator, error_class):
        with pytest.raises(InvalidErrorClassError):
            parameter_validator.validate({}, ["walrus"], error_class=error_class)

    def test_error_class_is_checked_even_when_validation_passes(self, parameter_validator):
        with pytest.raises(InvalidErrorClassError):
            parameter_validator.validate({"walrus": 1}, ["walrus"], error_class=object)


class TestErrorFactory:
    def test_factory_builds_the_raised_error(self, parameter_validator):
        seen = []

        def factory(message):
            seen.append(message)
            return LookupError(f"bad request: {message}")

        with pytest.raises(LookupError, match="bad request: Invalid value of 'undefined'"):
            parameter_validator.validate({}, ["walrus"], error_factory=factory)

        assert seen == ["Invalid value of 'undefined' was provided for parameter 'walrus'."]

    def test_factory_wins_over_error_class(self, parameter_validator):
        with pytest.raises(KeyError):
            parameter_validator.validate(
                {}, ["walrus"], error_class=ValueError, error_factory=lambda message: KeyError(message)
            )

    def test_factory_returning_non_exception_raises(self, parameter_validator):
        with pytest.raises(InvalidErrorClassError):
            parameter_validator.validate({}, ["walrus"], error_factory=lambda message: message)

    def test_non_callable_factory_raises(self, parameter_validator):
        with pytest.raises(InvalidErrorClassError):
            parameter_validator.validate({}, ["walrus"], error_factory="nope")


class TestOptionParsing:
    def test_unknown_option_key_raises(self, parameter_validator):
        with pytest.raises(InvalidOptionsError, match="prefix"):
            parameter_validator.validate({}, [], None, {"prefix": "_"})

    def test_non_mapping_options_raise(self, parameter_validator):
        with pytest.raises(InvalidOptionsError):
            parameter_validator.validate({}, [], None, "_")

    def test_options_object_is_accepted(self, parameter_validator):
        options = ValidateOptions(add_prefix="m_")

        assert parameter_validator.validate({"a": 1}, ["a"], None, options) == {"m_a": 1}

    def test_keyword_overrides_options_mapping(self, parameter_validator):
        extracted = parameter_validator.validate({"a": 1}, ["a"], None, {"add_prefix": "x_"}, add_prefix="y_")

        assert extracted == {"y_a": 1}

    def test_unknown_keyword_option_raises(self, parameter_validator):
        with pytest.raises(InvalidOptionsError):
            parameter_validator.validate({}, [], prefix="_")
