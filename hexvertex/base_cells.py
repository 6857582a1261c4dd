"""Base cell vertex rotation table.

For each base cell, the faces it appears on and the CCW 60-degree rotations
that bring vertexes on that face to the orientation of the base cell's home
face. Faces of hexagon base cells are unordered; pentagon base cells list
their faces in directional order starting at the J axis, so the JK and IK
sides of the deleted K axis sit at fixed slots.

Any change to this data changes the meaning of every vertex number derived
from it.
"""

from __future__ import annotations

from hexvertex.errors import InvalidBaseCellError
from hexvertex.types import (
    MAX_BASE_CELL_FACES,
    NUM_BASE_CELLS,
    NUM_HEX_VERTS,
    NUM_ICOSA_FACES,
    NUM_PENTAGONS,
    BaseCellRotation,
    Direction,
)

# Raw rows of (face, ccw_rot60); unused slots are (-1, 0).
RotationRow = tuple[tuple[int, int], ...]

_RAW_VERTEX_ROTATIONS: tuple[RotationRow, ...] = (
    ((0, 5), (1, 0), (2, 1), (-1, 0), (-1, 0)),  # 0
    ((1, 5), (2, 0), (-1, 0), (-1, 0), (-1, 0)),  # 1
    ((0, 5), (1, 0), (2, 1), (6, 3), (-1, 0)),  # 2
    ((1, 5), (2, 0), (3, 1), (-1, 0), (-1, 0)),  # 3
    ((4, 5), (0, 0), (2, 3), (1, 2), (3, 4)),  # 4 (pentagon)
    ((0, 5), (1, 0), (-1, 0), (-1, 0), (-1, 0)),  # 5
    ((1, 0), (2, 1), (6, 3), (-1, 0), (-1, 0)),  # 6
    ((1, 5), (2, 0), (3, 1), (7, 3), (-1, 0)),  # 7
    ((0, 0), (1, 1), (4, 5), (-1, 0), (-1, 0)),  # 8
    ((1, 5), (2, 0), (7, 3), (-1, 0), (-1, 0)),  # 9
    ((0, 5), (1, 0), (6, 3), (-1, 0), (-1, 0)),  # 10
    ((1, 0), (6, 3), (-1, 0), (-1, 0), (-1, 0)),  # 11
    ((2, 5), (3, 0), (4, 1), (-1, 0), (-1, 0)),  # 12
    ((2, 5), (3, 0), (-1, 0), (-1, 0), (-1, 0)),  # 13
    ((6, 3), (11, 0), (2, 1), (7, 4), (1, 0)),  # 14 (pentagon)
    ((0, 1), (3, 5), (4, 0), (-1, 0), (-1, 0)),  # 15
    ((0, 0), (1, 1), (4, 5), (5, 3), (-1, 0)),  # 16
    ((1, 3), (6, 0), (11, 3), (-1, 0), (-1, 0)),  # 17
    ((0, 0), (1, 1), (5, 3), (-1, 0), (-1, 0)),  # 18
    ((2, 0), (7, 3), (-1, 0), (-1, 0), (-1, 0)),  # 19
    ((2, 3), (7, 0), (11, 3), (-1, 0), (-1, 0)),  # 20
    ((2, 0), (3, 1), (7, 3), (-1, 0), (-1, 0)),  # 21
    ((0, 0), (4, 5), (-1, 0), (-1, 0), (-1, 0)),  # 22
    ((1, 3), (6, 0), (10, 3), (-1, 0), (-1, 0)),  # 23
    ((5, 3), (10, 0), (1, 1), (6, 4), (0, 0)),  # 24 (pentagon)
    ((1, 3), (6, 0), (10, 3), (11, 3), (-1, 0)),  # 25
    ((2, 5), (3, 0), (4, 1), (8, 3), (-1, 0)),  # 26
    ((6, 3), (7, 3), (11, 0), (-1, 0), (-1, 0)),  # 27
    ((3, 5), (4, 0), (-1, 0), (-1, 0), (-1, 0)),  # 28
    ((2, 5), (3, 0), (8, 3), (-1, 0), (-1, 0)),  # 29
    ((0, 0), (5, 3), (-1, 0), (-1, 0), (-1, 0)),  # 30
    ((0, 1), (3, 5), (4, 0), (9, 3), (-1, 0)),  # 31
    ((0, 3), (5, 0), (10, 3), (-1, 0), (-1, 0)),  # 32
    ((0, 0), (4, 5), (5, 3), (-1, 0), (-1, 0)),  # 33
    ((2, 3), (7, 0), (12, 3), (-1, 0), (-1, 0)),  # 34
    ((6, 3), (11, 0), (-1, 0), (-1, 0), (-1, 0)),  # 35
    ((2, 3), (7, 0), (11, 3), (12, 3), (-1, 0)),  # 36
    ((5, 3), (6, 3), (10, 0), (-1, 0), (-1, 0)),  # 37
    ((7, 3), (12, 0), (3, 1), (8, 4), (2, 0)),  # 38 (pentagon)
    ((6, 0), (10, 3), (-1, 0), (-1, 0), (-1, 0)),  # 39
    ((7, 0), (11, 3), (-1, 0), (-1, 0), (-1, 0)),  # 40
    ((0, 1), (4, 0), (9, 3), (-1, 0), (-1, 0)),  # 41
    ((3, 0), (4, 1), (8, 3), (-1, 0), (-1, 0)),  # 42
    ((3, 0), (8, 3), (-1, 0), (-1, 0), (-1, 0)),  # 43
    ((3, 5), (4, 0), (9, 3), (-1, 0), (-1, 0)),  # 44
    ((6, 0), (10, 3), (11, 3), (-1, 0), (-1, 0)),  # 45
    ((6, 3), (7, 3), (11, 0), (16, 3), (-1, 0)),  # 46
    ((3, 3), (8, 0), (12, 3), (-1, 0), (-1, 0)),  # 47
    ((0, 3), (5, 0), (14, 3), (-1, 0), (-1, 0)),  # 48
    ((9, 3), (14, 0), (0, 1), (5, 4), (4, 0)),  # 49 (pentagon)
    ((0, 3), (5, 0), (10, 3), (14, 3), (-1, 0)),  # 50
    ((7, 3), (8, 3), (12, 0), (-1, 0), (-1, 0)),  # 51
    ((5, 3), (10, 0), (-1, 0), (-1, 0), (-1, 0)),  # 52
    ((4, 0), (9, 3), (-1, 0), (-1, 0), (-1, 0)),  # 53
    ((7, 3), (12, 0), (-1, 0), (-1, 0), (-1, 0)),  # 54
    ((7, 0), (11, 3), (12, 3), (-1, 0), (-1, 0)),  # 55
    ((6, 3), (11, 0), (16, 3), (-1, 0), (-1, 0)),  # 56
    ((5, 1), (6, 3), (10, 0), (15, 3), (-1, 0)),  # 57
    ((8, 3), (13, 0), (4, 1), (9, 4), (3, 0)),  # 58 (pentagon)
    ((6, 3), (10, 0), (15, 3), (-1, 0), (-1, 0)),  # 59
    ((7, 3), (11, 0), (16, 3), (-1, 0), (-1, 0)),  # 60
    ((4, 3), (9, 0), (14, 3), (-1, 0), (-1, 0)),  # 61
    ((3, 3), (8, 0), (13, 3), (-1, 0), (-1, 0)),  # 62
    ((11, 3), (6, 0), (15, 1), (10, 4), (16, 0)),  # 63 (pentagon)
    ((3, 3), (8, 0), (12, 3), (13, 3), (-1, 0)),  # 64
    ((4, 3), (9, 0), (13, 3), (-1, 0), (-1, 0)),  # 65
    ((5, 3), (9, 3), (14, 0), (-1, 0), (-1, 0)),  # 66
    ((5, 0), (14, 3), (-1, 0), (-1, 0), (-1, 0)),  # 67
    ((11, 3), (16, 0), (-1, 0), (-1, 0), (-1, 0)),  # 68
    ((8, 0), (12, 3), (-1, 0), (-1, 0), (-1, 0)),  # 69
    ((5, 0), (10, 3), (14, 3), (-1, 0), (-1, 0)),  # 70
    ((7, 3), (8, 3), (12, 0), (17, 3), (-1, 0)),  # 71
    ((12, 3), (7, 0), (16, 1), (11, 4), (17, 0)),  # 72 (pentagon)
    ((7, 3), (12, 0), (17, 3), (-1, 0), (-1, 0)),  # 73
    ((5, 3), (10, 0), (15, 3), (-1, 0), (-1, 0)),  # 74
    ((4, 3), (9, 0), (13, 3), (14, 3), (-1, 0)),  # 75
    ((8, 3), (9, 3), (13, 0), (-1, 0), (-1, 0)),  # 76
    ((11, 3), (15, 1), (16, 0), (-1, 0), (-1, 0)),  # 77
    ((10, 3), (15, 0), (-1, 0), (-1, 0), (-1, 0)),  # 78
    ((10, 3), (15, 0), (16, 5), (-1, 0), (-1, 0)),  # 79
    ((11, 3), (16, 0), (17, 5), (-1, 0), (-1, 0)),  # 80
    ((9, 3), (14, 0), (-1, 0), (-1, 0), (-1, 0)),  # 81
    ((8, 3), (13, 0), (-1, 0), (-1, 0), (-1, 0)),  # 82
    ((10, 3), (5, 0), (19, 1), (14, 4), (15, 0)),  # 83 (pentagon)
    ((8, 0), (12, 3), (13, 3), (-1, 0), (-1, 0)),  # 84
    ((5, 3), (9, 3), (14, 0), (19, 3), (-1, 0)),  # 85
    ((9, 0), (13, 3), (-1, 0), (-1, 0), (-1, 0)),  # 86
    ((5, 3), (14, 0), (19, 3), (-1, 0), (-1, 0)),  # 87
    ((12, 3), (16, 1), (17, 0), (-1, 0), (-1, 0)),  # 88
    ((8, 3), (12, 0), (17, 3), (-1, 0), (-1, 0)),  # 89
    ((11, 3), (15, 1), (16, 0), (17, 5), (-1, 0)),  # 90
    ((12, 3), (17, 0), (-1, 0), (-1, 0), (-1, 0)),  # 91
    ((10, 3), (15, 0), (19, 1), (-1, 0), (-1, 0)),  # 92
    ((15, 1), (16, 0), (-1, 0), (-1, 0), (-1, 0)),  # 93
    ((9, 0), (13, 3), (14, 3), (-1, 0), (-1, 0)),  # 94
    ((10, 3), (15, 0), (16, 5), (19, 1), (-1, 0)),  # 95
    ((8, 3), (9, 3), (13, 0), (18, 3), (-1, 0)),  # 96
    ((13, 3), (8, 0), (17, 1), (12, 4), (18, 0)),  # 97 (pentagon)
    ((8, 3), (13, 0), (18, 3), (-1, 0), (-1, 0)),  # 98
    ((16, 1), (17, 0), (-1, 0), (-1, 0), (-1, 0)),  # 99
    ((14, 3), (15, 5), (19, 0), (-1, 0), (-1, 0)),  # 100
    ((9, 3), (14, 0), (19, 3), (-1, 0), (-1, 0)),  # 101
    ((14, 3), (19, 0), (-1, 0), (-1, 0), (-1, 0)),  # 102
    ((12, 3), (17, 0), (18, 5), (-1, 0), (-1, 0)),  # 103
    ((9, 3), (13, 0), (18, 3), (-1, 0), (-1, 0)),  # 104
    ((12, 3), (16, 1), (17, 0), (18, 5), (-1, 0)),  # 105
    ((15, 1), (16, 0), (17, 5), (-1, 0), (-1, 0)),  # 106
    ((14, 3), (9, 0), (18, 1), (13, 4), (19, 0)),  # 107 (pentagon)
    ((15, 0), (19, 1), (-1, 0), (-1, 0), (-1, 0)),  # 108
    ((15, 0), (16, 5), (19, 1), (-1, 0), (-1, 0)),  # 109
    ((13, 3), (18, 0), (-1, 0), (-1, 0), (-1, 0)),  # 110
    ((13, 3), (17, 1), (18, 0), (-1, 0), (-1, 0)),  # 111
    ((14, 3), (18, 1), (19, 0), (-1, 0), (-1, 0)),  # 112
    ((16, 1), (17, 0), (18, 5), (-1, 0), (-1, 0)),  # 113
    ((14, 3), (15, 5), (18, 1), (19, 0), (-1, 0)),  # 114
    ((13, 3), (18, 0), (19, 5), (-1, 0), (-1, 0)),  # 115
    ((17, 1), (18, 0), (-1, 0), (-1, 0), (-1, 0)),  # 116
    ((15, 5), (19, 0), (17, 3), (18, 2), (16, 4)),  # 117 (pentagon)
    ((15, 5), (18, 1), (19, 0), (-1, 0), (-1, 0)),  # 118
    ((13, 3), (17, 1), (18, 0), (19, 5), (-1, 0)),  # 119
    ((18, 1), (19, 0), (-1, 0), (-1, 0), (-1, 0)),  # 120
    ((17, 1), (18, 0), (19, 5), (-1, 0), (-1, 0)),  # 121
)

PENTAGON_BASE_CELLS: frozenset[int] = frozenset(
    {4, 14, 24, 38, 49, 58, 63, 72, 83, 97, 107, 117}
)

# Pentagon slots holding the faces on either side of the deleted K axis
PENTAGON_JK_SLOT = Direction.JK_AXES - 2
PENTAGON_IK_SLOT = Direction.IK_AXES - 2


def _build_rotation_table(
    raw: tuple[RotationRow, ...],
) -> tuple[tuple[BaseCellRotation, ...], ...]:
    return tuple(
        tuple(BaseCellRotation(face=face, ccw_rot60=rot) for face, rot in row)
        for row in raw
    )


BASE_CELL_VERTEX_ROTATIONS = _build_rotation_table(_RAW_VERTEX_ROTATIONS)
"""Index by base cell number; each row has MAX_BASE_CELL_FACES slots."""


def _check_base_cell(base_cell: int) -> None:
    if not 0 <= base_cell < NUM_BASE_CELLS:
        raise InvalidBaseCellError(base_cell)


def base_cell_rotations(base_cell: int) -> tuple[BaseCellRotation, ...]:
    """Return all MAX_BASE_CELL_FACES slots for a base cell, unused ones included."""
    _check_base_cell(base_cell)
    return BASE_CELL_VERTEX_ROTATIONS[base_cell]


def base_cell_faces(base_cell: int) -> list[int]:
    """Return the faces a base cell appears on."""
    return [slot.face for slot in base_cell_rotations(base_cell) if slot.is_valid]


def is_base_cell_pentagon(base_cell: int) -> bool:
    _check_base_cell(base_cell)
    return base_cell in PENTAGON_BASE_CELLS


def validate_rotation_table(
    table: tuple[tuple[BaseCellRotation, ...], ...] = BASE_CELL_VERTEX_ROTATIONS,
    pentagons: frozenset[int] = PENTAGON_BASE_CELLS,
) -> list[str]:
    """Run sanity checks on a rotation table. Returns list of errors (empty = OK)."""
    errors: list[str] = []

    if len(table) != NUM_BASE_CELLS:
        errors.append(f"Expected {NUM_BASE_CELLS} base cells, got {len(table)}")
    if len(pentagons) != NUM_PENTAGONS:
        errors.append(f"Expected {NUM_PENTAGONS} pentagons, got {len(pentagons)}")

    for base_cell, row in enumerate(table):
        if len(row) != MAX_BASE_CELL_FACES:
            errors.append(f"Base cell {base_cell}: {len(row)} slots")
            continue

        valid = [slot for slot in row if slot.is_valid]
        if not valid:
            errors.append(f"Base cell {base_cell}: no faces")
            continue

        # Unused slots must trail the used ones
        if any(slot.is_valid for slot in row[len(valid):]):
            errors.append(f"Base cell {base_cell}: unused slot before a used one")

        faces = [slot.face for slot in valid]
        if len(set(faces)) != len(faces):
            errors.append(f"Base cell {base_cell}: duplicate face")

        for slot in valid:
            if not 0 <= slot.face < NUM_ICOSA_FACES:
                errors.append(f"Base cell {base_cell}: face {slot.face} out of range")
            if not 0 <= slot.ccw_rot60 < NUM_HEX_VERTS:
                errors.append(
                    f"Base cell {base_cell}: rotation {slot.ccw_rot60} out of range"
                )

        if base_cell in pentagons:
            if len(valid) != MAX_BASE_CELL_FACES:
                errors.append(f"Pentagon {base_cell}: expected 5 faces, got {len(valid)}")
            elif row[PENTAGON_JK_SLOT].face == row[PENTAGON_IK_SLOT].face:
                errors.append(f"Pentagon {base_cell}: JK and IK slots share a face")

    return errors
