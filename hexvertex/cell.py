from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from hexvertex.base_cells import is_base_cell_pentagon
from hexvertex.types import NUM_BASE_CELLS, NUM_ICOSA_FACES, Direction


@runtime_checkable
class Cell(Protocol):
    """What the vertex functions read from a cell.

    Face projection and index decoding live outside this package; anything
    that can answer these four questions can be passed in.
    """

    @property
    def base_cell(self) -> int:
        ...

    @property
    def face(self) -> int:
        """Icosahedron face the cell currently projects to."""
        ...

    @property
    def leading_digit(self) -> Direction:
        """Coarsest-resolution non-zero digit, or CENTER if there is none."""
        ...

    @property
    def is_pentagon(self) -> bool:
        ...


class CellInstance(BaseModel):
    """Plain cell value with its pentagon flag derived from the base cell."""

    model_config = ConfigDict(frozen=True)

    base_cell: int = Field(ge=0, lt=NUM_BASE_CELLS)
    face: int = Field(ge=0, lt=NUM_ICOSA_FACES)
    leading_digit: Direction = Direction.CENTER

    @property
    def is_pentagon(self) -> bool:
        return is_base_cell_pentagon(self.base_cell)
