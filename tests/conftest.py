"""Shared fixtures: every test starts from the initial process-wide defaults."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from eventually.config import reset_defaults


@pytest.fixture(autouse=True)
def _fresh_defaults() -> Iterator[None]:
    reset_defaults()
    yield
    reset_defaults()
