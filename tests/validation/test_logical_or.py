# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Logical-OR groups (list/tuple descriptors)."""

from __future__ import annotations

import pytest

from paramguard import ParameterValidationError, ParameterValidator


def test_all_present_members_are_extracted(parameter_validator, animal_names):
    extracted = parameter_validator.validate(animal_names, [["dog", "cat", "squirrel"]])

    assert extracted == animal_names


def test_group_does_not_extract_parameters_outside_it(parameter_validator, animal_names):
    provided = dict(animal_names, mouse="Jerry")

    extracted = parameter_validator.validate(provided, [["cat", "dog", "squirrel"]])

    assert extracted == animal_names


def test_partial_group_passes_and_extracts_only_present_members(parameter_validator, animal_names):
    provided = dict(animal_names, mouse="Jerry")

    extracted = parameter_validator.validate(provided, [["cat", "dog", "chimp"]])

    assert extracted == {"cat": "Garfield", "dog": "Jake"}


def test_group_order_is_preserved_in_output(parameter_validator, animal_names):
    extracted = parameter_validator.validate(animal_names, [("squirrel", "cat")])

    assert list(extracted) == ["squirrel", "cat"]


def test_no_member_present_raises_single_error_listing_group(parameter_validator):
    with pytest.raises(ParameterValidationError) as excinfo:
        parameter_validator.validate(
            {"cat": "Garfield", "dog": "Jake"},
            [["moose", "kangaroo", "mouse"]],
        )

    assert str(excinfo.value) == (
        "One of the following parameters must be included: 'moose', 'kangaroo', 'mouse'."
    )
    assert len(excinfo.value.errors) == 1


def test_existing_target_is_updated_in_place(parameter_validator, animal_names):
    existing = {"elephant": "Dumbo"}

    extracted = parameter_validator.validate(animal_names, [["cat", "dog", "chimp"]], existing)

    assert extracted is existing
    assert existing == {"elephant": "Dumbo", "cat": "Garfield", "dog": "Jake"}


def test_group_uses_truthiness_of_configured_default_predicate():
    validator = ParameterValidator(default_validation=lambda value: value if value else None)

    extracted = validator.validate({"a": "x", "b": ""}, [["a", "b"]])

    assert extracted == {"a": "x"}
