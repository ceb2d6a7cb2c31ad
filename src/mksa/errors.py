"""Exception types raised by the dimension algebra and the constant catalogue."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mksa.dimension import Dimension


class MksError(Exception):
    """Base class for all mksa errors."""


class DimensionMismatchError(MksError, ValueError):
    """Additive combination of values whose dimensions differ."""

    def __init__(self, left: Dimension, right: Dimension, op: str = "+") -> None:
        self.left = left
        self.right = right
        self.op = op
        super().__init__(
            f"Dimension mismatch in '{op}': {left} {op} {right} "
            f"(addition and subtraction require equal dimensions)"
        )


class InvalidRootExponentError(MksError, ValueError):
    """Root taken of a dimension whose exponents are not all divisible by the degree."""

    def __init__(self, dimension: Dimension, degree: int) -> None:
        self.dimension = dimension
        self.degree = degree
        super().__init__(
            f"Cannot take root of degree {degree} of {dimension}: "
            f"exponents {dimension.to_tuple()} are not all divisible by {degree}"
        )


class UnknownConstantError(MksError, KeyError):
    """Lookup of a name that is not in the constant catalogue."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown constant: {self.name!r}"
