"""Tests for the base cell vertex rotation table."""

from __future__ import annotations

import pytest

from hexvertex.base_cells import (
    BASE_CELL_VERTEX_ROTATIONS,
    PENTAGON_BASE_CELLS,
    PENTAGON_IK_SLOT,
    PENTAGON_JK_SLOT,
    base_cell_faces,
    base_cell_rotations,
    is_base_cell_pentagon,
    validate_rotation_table,
)
from hexvertex.errors import InvalidBaseCellError
from hexvertex.types import (
    INVALID_FACE,
    MAX_BASE_CELL_FACES,
    NUM_BASE_CELLS,
    BaseCellRotation,
)


def _row(*pairs: tuple[int, int]) -> tuple[BaseCellRotation, ...]:
    slots = [BaseCellRotation(face=f, ccw_rot60=r) for f, r in pairs]
    slots += [BaseCellRotation(face=INVALID_FACE)] * (MAX_BASE_CELL_FACES - len(slots))
    return tuple(slots)


class TestTableShape:
    def test_has_122_base_cells(self) -> None:
        assert len(BASE_CELL_VERTEX_ROTATIONS) == NUM_BASE_CELLS

    def test_every_row_has_5_slots(self) -> None:
        for row in BASE_CELL_VERTEX_ROTATIONS:
            assert len(row) == MAX_BASE_CELL_FACES

    def test_every_base_cell_has_a_face(self) -> None:
        for base_cell in range(NUM_BASE_CELLS):
            assert 1 <= len(base_cell_faces(base_cell)) <= MAX_BASE_CELL_FACES

    def test_rotations_in_range(self) -> None:
        for row in BASE_CELL_VERTEX_ROTATIONS:
            for slot in row:
                assert 0 <= slot.ccw_rot60 <= 5

    def test_reference_table_passes_validation(self) -> None:
        assert validate_rotation_table() == []


class TestTableValues:
    """Spot checks against the reference grid data."""

    def test_base_cell_0(self) -> None:
        assert base_cell_rotations(0) == _row((0, 5), (1, 0), (2, 1))

    def test_base_cell_2(self) -> None:
        assert base_cell_rotations(2) == _row((0, 5), (1, 0), (2, 1), (6, 3))

    def test_base_cell_4_pentagon(self) -> None:
        assert base_cell_rotations(4) == _row((4, 5), (0, 0), (2, 3), (1, 2), (3, 4))

    def test_base_cell_117_pentagon(self) -> None:
        assert base_cell_rotations(117) == _row(
            (15, 5), (19, 0), (17, 3), (18, 2), (16, 4),
        )

    def test_base_cell_121(self) -> None:
        assert base_cell_rotations(121) == _row((17, 1), (18, 0), (19, 5))

    def test_faces_skip_unused_slots(self) -> None:
        assert base_cell_faces(1) == [1, 2]


class TestPentagons:
    def test_twelve_pentagons(self) -> None:
        assert len(PENTAGON_BASE_CELLS) == 12
        assert sum(is_base_cell_pentagon(bc) for bc in range(NUM_BASE_CELLS)) == 12

    def test_known_pentagons(self) -> None:
        assert is_base_cell_pentagon(4)
        assert is_base_cell_pentagon(117)
        assert not is_base_cell_pentagon(0)
        assert not is_base_cell_pentagon(121)

    def test_pentagons_touch_5_faces(self) -> None:
        for base_cell in PENTAGON_BASE_CELLS:
            assert len(base_cell_faces(base_cell)) == 5

    def test_crossing_slots(self) -> None:
        assert PENTAGON_JK_SLOT == 1
        assert PENTAGON_IK_SLOT == 3

    def test_crossing_slots_on_distinct_faces(self) -> None:
        for base_cell in PENTAGON_BASE_CELLS:
            row = base_cell_rotations(base_cell)
            assert row[PENTAGON_JK_SLOT].face != row[PENTAGON_IK_SLOT].face


class TestOutOfRange:
    @pytest.mark.parametrize("base_cell", [-1, NUM_BASE_CELLS, 1000])
    def test_rotations_rejects_bad_base_cell(self, base_cell: int) -> None:
        with pytest.raises(InvalidBaseCellError) as exc_info:
            base_cell_rotations(base_cell)
        assert exc_info.value.base_cell == base_cell

    def test_pentagon_check_rejects_bad_base_cell(self) -> None:
        with pytest.raises(ValueError):
            is_base_cell_pentagon(NUM_BASE_CELLS)


class TestValidateRotationTable:
    def _replace_row(self, base_cell: int, row: tuple[BaseCellRotation, ...]):
        table = list(BASE_CELL_VERTEX_ROTATIONS)
        table[base_cell] = row
        return tuple(table)

    def test_missing_rows(self) -> None:
        errors = validate_rotation_table(BASE_CELL_VERTEX_ROTATIONS[:-1])
        assert any("Expected 122 base cells" in e for e in errors)

    def test_wrong_pentagon_count(self) -> None:
        errors = validate_rotation_table(pentagons=frozenset({4}))
        assert any("Expected 12 pentagons" in e for e in errors)

    def test_short_row(self) -> None:
        table = self._replace_row(0, base_cell_rotations(0)[:3])
        errors = validate_rotation_table(table)
        assert errors == ["Base cell 0: 3 slots"]

    def test_empty_row(self) -> None:
        errors = validate_rotation_table(self._replace_row(0, _row()))
        assert errors == ["Base cell 0: no faces"]

    def test_gap_before_used_slot(self) -> None:
        row = (
            BaseCellRotation(face=0, ccw_rot60=5),
            BaseCellRotation(face=INVALID_FACE),
            BaseCellRotation(face=1, ccw_rot60=0),
            BaseCellRotation(face=INVALID_FACE),
            BaseCellRotation(face=INVALID_FACE),
        )
        errors = validate_rotation_table(self._replace_row(0, row))
        assert errors == ["Base cell 0: unused slot before a used one"]

    def test_duplicate_face(self) -> None:
        errors = validate_rotation_table(self._replace_row(0, _row((0, 5), (0, 1))))
        assert errors == ["Base cell 0: duplicate face"]

    def test_face_out_of_range(self) -> None:
        errors = validate_rotation_table(self._replace_row(0, _row((20, 0))))
        assert errors == ["Base cell 0: face 20 out of range"]

    def test_rotation_out_of_range(self) -> None:
        errors = validate_rotation_table(self._replace_row(0, _row((0, 6))))
        assert errors == ["Base cell 0: rotation 6 out of range"]

    def test_pentagon_missing_face(self) -> None:
        errors = validate_rotation_table(self._replace_row(4, _row((4, 5), (0, 0))))
        assert errors == ["Pentagon 4: expected 5 faces, got 2"]

    def test_pentagon_crossing_slots_collide(self) -> None:
        row = (
            BaseCellRotation(face=4, ccw_rot60=5),
            BaseCellRotation(face=0, ccw_rot60=0),
            BaseCellRotation(face=2, ccw_rot60=3),
            BaseCellRotation(face=0, ccw_rot60=2),
            BaseCellRotation(face=3, ccw_rot60=4),
        )
        errors = validate_rotation_table(self._replace_row(4, row))
        assert "Pentagon 4: JK and IK slots share a face" in errors
