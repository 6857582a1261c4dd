"""Tests for grid types and rotation step helpers."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hexvertex.types import (
    INVALID_FACE,
    NUM_DIGITS,
    PENTAGON_SKIPPED_DIGIT,
    BaseCellRotation,
    Direction,
    rotate_ccw60,
    rotate_cw60,
)


class TestDirection:
    def test_digit_values(self) -> None:
        assert [d.value for d in Direction] == list(range(8))

    def test_num_digits_excludes_invalid(self) -> None:
        assert NUM_DIGITS == 7
        assert Direction.INVALID == NUM_DIGITS

    def test_pentagon_skips_k_axis(self) -> None:
        assert PENTAGON_SKIPPED_DIGIT is Direction.K_AXES

    def test_out_of_range_digit_rejected(self) -> None:
        with pytest.raises(ValueError):
            Direction(8)


class TestBaseCellRotation:
    def test_valid_slot(self) -> None:
        slot = BaseCellRotation(face=3, ccw_rot60=5)
        assert slot.is_valid

    def test_unused_slot(self) -> None:
        slot = BaseCellRotation(face=INVALID_FACE)
        assert not slot.is_valid
        assert slot.ccw_rot60 == 0

    def test_frozen(self) -> None:
        slot = BaseCellRotation(face=3, ccw_rot60=1)
        with pytest.raises(ValidationError):
            slot.face = 4

    def test_hashable(self) -> None:
        assert len({BaseCellRotation(face=1), BaseCellRotation(face=1)}) == 1


class TestRotationSteps:
    def test_ccw_step(self) -> None:
        assert [rotate_ccw60(r) for r in range(6)] == [1, 2, 3, 4, 5, 0]

    def test_cw_step(self) -> None:
        assert [rotate_cw60(r) for r in range(6)] == [5, 0, 1, 2, 3, 4]

    def test_cw_undoes_ccw(self) -> None:
        for r in range(6):
            assert rotate_cw60(rotate_ccw60(r)) == r
            assert rotate_ccw60(rotate_cw60(r)) == r
