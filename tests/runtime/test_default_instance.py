# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Shared default instance and standalone entry points."""

from __future__ import annotations

import pytest

import paramguard
from paramguard import (
    ParameterValidationError,
    ParameterValidator,
    create_validator,
    get_parameter_validator,
    validate,
    validate_async,
)


def test_default_instance_is_shared():
    assert get_parameter_validator() is get_parameter_validator()
    assert isinstance(get_parameter_validator(), ParameterValidator)


def test_standalone_validate_uses_default_predicate():
    assert validate({"cat": None}, ["cat"]) == {"cat": None}


def test_standalone_validate_reports_failures():
    with pytest.raises(ParameterValidationError) as excinfo:
        validate({"cat": "Garfield", "dog": "Jake"}, ["cat", "dog", "squirrel"])

    assert str(excinfo.value) == "Invalid value of 'undefined' was provided for parameter 'squirrel'."


@pytest.mark.anyio
async def test_standalone_validate_async():
    assert await validate_async({"cat": "Garfield"}, [["cat", "dog"]]) == {"cat": "Garfield"}


def test_standalone_entry_points_delegate_to_shared_instance(monkeypatch):
    calls = []

    class _Recorder(ParameterValidator):
        def validate(self, *args, **kwargs):
            calls.append((args, kwargs))
            return {"recorded": True}

    monkeypatch.setattr("paramguard.runtime.default._VALIDATOR", _Recorder())

    assert paramguard.validate({"a": 1}, ["a"], add_prefix="_") == {"recorded": True}
    assert calls == [(({"a": 1}, ["a"]), {"add_prefix": "_"})]


def test_create_validator_builds_independent_instances():
    strict = create_validator(default_validation=lambda value: value not in (None, ""))

    assert strict is not get_parameter_validator()
    with pytest.raises(ParameterValidationError):
        strict.validate({"cat": ""}, ["cat"])
    assert validate({"cat": ""}, ["cat"]) == {"cat": ""}
