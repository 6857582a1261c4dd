from __future__ import annotations


class HexVertexError(Exception):
    """Base class for vertex orientation errors."""
    pass


class InvalidBaseCellError(HexVertexError, ValueError):
    """Base cell number is outside the table."""

    def __init__(self, base_cell: int):
        self.base_cell = base_cell
        super().__init__(f"Invalid base cell: {base_cell}")


class UnresolvableOrientationError(HexVertexError):
    """Base cell has no recorded rotation for the face the cell projects to."""

    def __init__(self, base_cell: int, face: int):
        self.base_cell = base_cell
        self.face = face
        self.message = f"Base cell {base_cell} is not found on face {face}"
        super().__init__(self.message)
