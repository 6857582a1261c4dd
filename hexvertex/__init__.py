from hexvertex.base_cells import (
    BASE_CELL_VERTEX_ROTATIONS,
    PENTAGON_BASE_CELLS,
    base_cell_faces,
    base_cell_rotations,
    is_base_cell_pentagon,
    validate_rotation_table,
)
from hexvertex.cell import Cell, CellInstance
from hexvertex.errors import (
    HexVertexError,
    InvalidBaseCellError,
    UnresolvableOrientationError,
)
from hexvertex.types import (
    INVALID_FACE,
    INVALID_ROTATIONS,
    INVALID_VERTEX_NUM,
    NUM_HEX_VERTS,
    NUM_PENT_VERTS,
    BaseCellRotation,
    Direction,
)
from hexvertex.vertex import (
    direction_for_vertex_num,
    vertex_num_for_direction,
    vertex_rotations,
)

__all__ = [
    "BASE_CELL_VERTEX_ROTATIONS",
    "PENTAGON_BASE_CELLS",
    "base_cell_faces",
    "base_cell_rotations",
    "is_base_cell_pentagon",
    "validate_rotation_table",
    "Cell",
    "CellInstance",
    "HexVertexError",
    "InvalidBaseCellError",
    "UnresolvableOrientationError",
    "INVALID_FACE",
    "INVALID_ROTATIONS",
    "INVALID_VERTEX_NUM",
    "NUM_HEX_VERTS",
    "NUM_PENT_VERTS",
    "BaseCellRotation",
    "Direction",
    "direction_for_vertex_num",
    "vertex_num_for_direction",
    "vertex_rotations",
]
