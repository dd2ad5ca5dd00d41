"""Pytest fixtures shared by the paramguard test-suite."""
from __future__ import annotations

import pytest

from paramguard import ParameterValidator


@pytest.fixture()
def parameter_validator() -> ParameterValidator:  # noqa: D401
    """Return a freshly constructed validator with the default predicate."""
    return ParameterValidator()


@pytest.fixture()
def animal_names() -> dict:
    return {"cat": "Garfield", "dog": "Jake", "squirrel": "Rocky"}


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


# ---------------------------------------------------------------------------
# anyio backend selection – ensure tests run only with asyncio backend
# ---------------------------------------------------------------------------

@pytest.fixture()
def anyio_backend():  # noqa: D401
    """Force *anyio* tests to use the standard asyncio backend only."""
    return "asyncio"
