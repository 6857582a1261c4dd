"""Cell vertex numbering.

Vertex numbers run 0-5 around a hexagon and 0-4 around a pentagon. The
neighbor in a given direction lies across the edge that starts at the
vertex returned by vertex_num_for_direction and ends at the next vertex.

Cells are numbered relative to their base cell's home face. A cell
projected onto another face sees its vertexes rotated by whole 60-degree
steps, which vertex_rotations recovers from the base cell rotation table.
"""

from __future__ import annotations

import logging

from hexvertex.base_cells import (
    PENTAGON_IK_SLOT,
    PENTAGON_JK_SLOT,
    base_cell_rotations,
)
from hexvertex.cell import Cell
from hexvertex.config import settings
from hexvertex.errors import UnresolvableOrientationError
from hexvertex.types import (
    INVALID_ROTATIONS,
    INVALID_VERTEX_NUM,
    NUM_HEX_VERTS,
    NUM_PENT_VERTS,
    PENTAGON_SKIPPED_DIGIT,
    Direction,
    rotate_ccw60,
    rotate_cw60,
)

logger = logging.getLogger(__name__)

# Direction to vertex number on the base cell's home face, indexed by digit.
# CENTER has no vertex.
DIRECTION_TO_VERTEX_NUM_HEX: tuple[int, ...] = (
    INVALID_VERTEX_NUM, 3, 1, 2, 5, 4, 0,
)

# Same for pentagons, where the K axis is also deleted.
DIRECTION_TO_VERTEX_NUM_PENT: tuple[int, ...] = (
    INVALID_VERTEX_NUM, INVALID_VERTEX_NUM, 1, 2, 4, 3, 0,
)


def _invert(table: tuple[int, ...], size: int) -> tuple[Direction, ...]:
    inverse = [Direction.INVALID] * size
    for digit, vertex_num in enumerate(table):
        if vertex_num != INVALID_VERTEX_NUM:
            inverse[vertex_num] = Direction(digit)
    return tuple(inverse)


VERTEX_NUM_TO_DIRECTION_HEX = _invert(DIRECTION_TO_VERTEX_NUM_HEX, NUM_HEX_VERTS)
VERTEX_NUM_TO_DIRECTION_PENT = _invert(DIRECTION_TO_VERTEX_NUM_PENT, NUM_PENT_VERTS)


def vertex_rotations(cell: Cell) -> int:
    """Number of CCW 60-degree rotations of the cell's vertex numbers relative
    to the directional layout of its neighbors.

    Returns INVALID_ROTATIONS if the cell's base cell is not on the cell's
    face, which only happens with a bad face projection or table. With
    settings.debug enabled that case raises UnresolvableOrientationError.
    """
    face = cell.face
    base_cell = cell.base_cell
    slots = base_cell_rotations(base_cell)

    for slot in slots:
        if slot.face != face:
            continue
        rotations = slot.ccw_rot60

        # Cells whose leading digit straddles the deleted pentagon
        # subsequence are skewed by one step
        if cell.is_pentagon:
            leading_digit = cell.leading_digit
            if (
                leading_digit == Direction.JK_AXES
                and face == slots[PENTAGON_IK_SLOT].face
            ):
                # Crosses from JK to IK: rotate CW
                logger.debug(
                    "Base cell %s face %s: JK to IK crossing", base_cell, face,
                )
                return rotate_cw60(rotations)
            if (
                leading_digit == Direction.IK_AXES
                and face == slots[PENTAGON_JK_SLOT].face
            ):
                # Crosses from IK to J: rotate CCW
                logger.debug(
                    "Base cell %s face %s: IK to J crossing", base_cell, face,
                )
                return rotate_ccw60(rotations)
        return rotations

    if settings.debug:
        raise UnresolvableOrientationError(base_cell, face)
    logger.error(f"Base cell {base_cell} has no vertex rotation for face {face}")
    return INVALID_ROTATIONS


def vertex_num_for_direction(cell: Cell, direction: Direction | int) -> int:
    """Return the first vertex number of the edge shared with the neighbor
    in the given direction, or INVALID_VERTEX_NUM if the cell has no
    neighbor in that direction.
    """
    try:
        direction = Direction(direction)
    except ValueError:
        return INVALID_VERTEX_NUM

    is_pentagon = cell.is_pentagon
    if direction in (Direction.CENTER, Direction.INVALID):
        return INVALID_VERTEX_NUM
    if is_pentagon and direction == PENTAGON_SKIPPED_DIGIT:
        return INVALID_VERTEX_NUM

    rotations = vertex_rotations(cell)
    if rotations == INVALID_ROTATIONS:
        return INVALID_VERTEX_NUM

    # Rotate the home-face numbering CCW into the cell's own numbering
    if is_pentagon:
        return (
            DIRECTION_TO_VERTEX_NUM_PENT[direction] + NUM_PENT_VERTS - rotations
        ) % NUM_PENT_VERTS
    return (
        DIRECTION_TO_VERTEX_NUM_HEX[direction] + NUM_HEX_VERTS - rotations
    ) % NUM_HEX_VERTS


def direction_for_vertex_num(cell: Cell, vertex_num: int) -> Direction:
    """Return the direction of the neighbor across the edge starting at
    vertex_num. Inverse of vertex_num_for_direction."""
    is_pentagon = cell.is_pentagon
    num_verts = NUM_PENT_VERTS if is_pentagon else NUM_HEX_VERTS
    if not 0 <= vertex_num < num_verts:
        return Direction.INVALID

    rotations = vertex_rotations(cell)
    if rotations == INVALID_ROTATIONS:
        return Direction.INVALID

    # Rotate CW back to the home-face numbering
    if is_pentagon:
        return VERTEX_NUM_TO_DIRECTION_PENT[(vertex_num + rotations) % NUM_PENT_VERTS]
    return VERTEX_NUM_TO_DIRECTION_HEX[(vertex_num + rotations) % NUM_HEX_VERTS]
