"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessey.core.state import State


@pytest.fixture
def initial_state() -> State:
    """Standard starting position, white to move."""
    return State.initial()


@pytest.fixture(autouse=True)
def _clear_chessey_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``CHESSEY_*`` variables of the host shell out of the tests."""
    for name in ("CHESSEY_HISTORY", "CHESSEY_LOG_LEVEL", "CHESSEY_NOTATION"):
        monkeypatch.delenv(name, raising=False)
