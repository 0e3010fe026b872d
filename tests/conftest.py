"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.options import RuleOptions
from chessrules.core.position import Position


@pytest.fixture
def start() -> Position:
    """Fresh standard starting position."""
    return Position.initial()


@pytest.fixture(
    params=[RuleOptions.faithful(), RuleOptions.strict()],
    ids=["faithful", "strict"],
)
def options(request: pytest.FixtureRequest) -> RuleOptions:
    """Both rule presets, for behavior that must not depend on them."""
    return request.param
