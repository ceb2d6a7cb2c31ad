"""Catalogue entry types."""

from __future__ import annotations

from pydantic import BaseModel

from mksa.dimension import Dimension
from mksa.value import MksValue


class Constant(BaseModel):
    """A named physical constant or unit of measure, in base MKSA units."""

    name: str
    value: float
    dimension: tuple[int, int, int, int] = (0, 0, 0, 0)
    description: str = ""

    @property
    def unit(self) -> Dimension:
        return Dimension(*self.dimension)

    def quantity(self, raw: float = 1.0) -> MksValue:
        """``raw`` of this unit as an MksValue, e.g. ``foot.quantity(6.0)``."""
        return MksValue.new(raw, self.value, self.unit)
