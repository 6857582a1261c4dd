"""Domain types and constants for the hexagonal grid vertex model."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict

NUM_ICOSA_FACES = 20
NUM_BASE_CELLS = 122
NUM_PENTAGONS = 12
MAX_BASE_CELL_FACES = 5  # A base cell touches at most 5 icosahedron faces

NUM_HEX_VERTS = 6
NUM_PENT_VERTS = 5

# Sentinels
INVALID_FACE = -1
INVALID_ROTATIONS = -1
INVALID_VERTEX_NUM = -1


class Direction(IntEnum):
    """Per-resolution digit: the six axis directions plus center.

    Values follow the 3-bit digit encoding, so a digit can be used directly
    as an index into per-direction tables.
    """
    CENTER = 0
    K_AXES = 1
    J_AXES = 2
    JK_AXES = 3
    I_AXES = 4
    IK_AXES = 5
    IJ_AXES = 6
    INVALID = 7


NUM_DIGITS = Direction.INVALID  # Table size: CENTER through IJ_AXES

# Pentagons delete this axis
PENTAGON_SKIPPED_DIGIT = Direction.K_AXES


class BaseCellRotation(BaseModel):
    """One face a base cell appears on, with the CCW 60-degree rotations
    needed to bring vertexes on that face to the base cell's home orientation."""

    model_config = ConfigDict(frozen=True)

    face: int
    ccw_rot60: int = 0

    @property
    def is_valid(self) -> bool:
        return self.face != INVALID_FACE


def rotate_ccw60(rotations: int) -> int:
    """Add one counter-clockwise 60-degree step to a rotation count."""
    return (rotations + 1) % NUM_HEX_VERTS


def rotate_cw60(rotations: int) -> int:
    """Remove one counter-clockwise 60-degree step (i.e. rotate clockwise)."""
    return NUM_HEX_VERTS - 1 if rotations == 0 else rotations - 1
