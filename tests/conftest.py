from __future__ import annotations

import pytest

from hexvertex.base_cells import PENTAGON_BASE_CELLS
from hexvertex.config import settings
from hexvertex.types import Direction


class StubCell:
    """Minimal object satisfying the Cell protocol, pentagon flag given explicitly."""

    def __init__(
        self,
        base_cell: int,
        face: int,
        leading_digit: Direction = Direction.CENTER,
        is_pentagon: bool | None = None,
    ):
        self.base_cell = base_cell
        self.face = face
        self.leading_digit = leading_digit
        if is_pentagon is None:
            is_pentagon = base_cell in PENTAGON_BASE_CELLS
        self.is_pentagon = is_pentagon


@pytest.fixture
def make_cell():
    """Factory for stub cells."""
    return StubCell


@pytest.fixture
def release_mode(monkeypatch):
    """Unresolvable orientations return the sentinel."""
    monkeypatch.setattr(settings, "debug", False)
    return settings


@pytest.fixture
def debug_mode(monkeypatch):
    """Unresolvable orientations raise."""
    monkeypatch.setattr(settings, "debug", True)
    return settings
