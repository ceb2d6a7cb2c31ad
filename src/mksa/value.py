"""MKSA values: a float magnitude in base units bundled with its dimension."""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass

import numpy as np

from mksa.dimension import DIMENSIONLESS, Dimension
from mksa.errors import DimensionMismatchError, InvalidRootExponentError

logger = logging.getLogger(__name__)

# Magnitudes follow IEEE-754: inf/nan instead of ZeroDivisionError/OverflowError.
_IEEE = {"divide": "ignore", "over": "ignore", "under": "ignore", "invalid": "ignore"}


@dataclass(frozen=True)
class MksValue:
    """A magnitude expressed in meters, kilograms, seconds and amperes.

    The value never remembers which named unit produced it, only its
    dimension. Customary-unit factors (feet, pounds, hours, ...) are folded
    into the magnitude at construction.

    Example (simple pendulum period ``T = 2*pi*sqrt(L/g)``):
        >>> from mksa import MksValue, LENGTH, ACCELERATION, TIME
        >>> length = MksValue.new(6.0, 0.3048, LENGTH)
        >>> g = MksValue.new(1.0, 9.80665, ACCELERATION)
        >>> period = MksValue.scalar(2 * 3.141592653589793) * (length / g).sqrt()
        >>> period.dimension == TIME
        True
    """

    magnitude: float
    dimension: Dimension = DIMENSIONLESS

    @classmethod
    def new(cls, raw: float, factor: float, dimension: Dimension) -> MksValue:
        """Build ``raw * factor`` with the given dimension.

        The factor is trusted to belong to ``dimension``; no check is made.
        """
        with np.errstate(**_IEEE):
            return cls(float(np.float64(raw) * np.float64(factor)), dimension)

    @classmethod
    def scalar(cls, raw: float) -> MksValue:
        """Dimensionless value."""
        return cls(float(raw), DIMENSIONLESS)

    # -- additive: dimensions must agree -----------------------------------

    def _check_same(self, other: MksValue, op: str) -> None:
        if self.dimension != other.dimension:
            raise DimensionMismatchError(self.dimension, other.dimension, op)

    def __add__(self, other: MksValue | float) -> MksValue:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        self._check_same(other, "+")
        return MksValue(self.magnitude + other.magnitude, self.dimension)

    def __radd__(self, other: float) -> MksValue:
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return left + self

    def __sub__(self, other: MksValue | float) -> MksValue:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        self._check_same(other, "-")
        return MksValue(self.magnitude - other.magnitude, self.dimension)

    def __rsub__(self, other: float) -> MksValue:
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return left - self

    def __neg__(self) -> MksValue:
        return MksValue(-self.magnitude, self.dimension)

    def __abs__(self) -> MksValue:
        return MksValue(abs(self.magnitude), self.dimension)

    # -- multiplicative: dimensions combine --------------------------------

    def __mul__(self, other: MksValue | float) -> MksValue:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        with np.errstate(**_IEEE):
            mag = np.float64(self.magnitude) * np.float64(other.magnitude)
        return MksValue(float(mag), self.dimension * other.dimension)

    def __rmul__(self, other: float) -> MksValue:
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return left * self

    def __truediv__(self, other: MksValue | float) -> MksValue:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        with np.errstate(**_IEEE):
            mag = np.float64(self.magnitude) / np.float64(other.magnitude)
        return MksValue(float(mag), self.dimension / other.dimension)

    def __rtruediv__(self, other: float) -> MksValue:
        left = _coerce(other)
        if left is None:
            return NotImplemented
        return left / self

    def pow(self, n: int) -> MksValue:
        """Raise to an integer power; every exponent is multiplied by ``n``."""
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise TypeError(f"pow expects an integer exponent, got {type(n).__name__}")
        n = int(n)
        with np.errstate(**_IEEE):
            mag = np.power(np.float64(self.magnitude), np.float64(n))
        return MksValue(float(mag), self.dimension**n)

    def __pow__(self, n: int) -> MksValue:
        return self.pow(n)

    # -- roots --------------------------------------------------------------

    def _root_dimension(self, degree: int, strict: bool) -> Dimension:
        if not self.dimension.divisible_by(degree):
            if strict:
                raise InvalidRootExponentError(self.dimension, degree)
            logger.debug(
                f"Truncating exponents of {self.dimension} in root of degree {degree}"
            )
        return self.dimension.root(degree)

    def sqrt(self, strict: bool = False) -> MksValue:
        """Square root. Exponents are halved with truncation toward zero.

        With ``strict=True`` an odd exponent raises
        :class:`InvalidRootExponentError` instead of being truncated.
        """
        dim = self._root_dimension(2, strict)
        with np.errstate(**_IEEE):
            mag = np.sqrt(np.float64(self.magnitude))
        return MksValue(float(mag), dim)

    def cbrt(self, strict: bool = False) -> MksValue:
        """Cube root. Exponents are divided by 3 with truncation toward zero."""
        dim = self._root_dimension(3, strict)
        mag = np.cbrt(np.float64(self.magnitude))
        return MksValue(float(mag), dim)

    # -- helpers ------------------------------------------------------------

    def same_dimension(self, other: MksValue) -> bool:
        return self.dimension == other.dimension

    def in_units(self, factor: float) -> float:
        """Magnitude expressed as a multiple of ``factor`` (e.g. a catalogue unit)."""
        with np.errstate(**_IEEE):
            return float(np.float64(self.magnitude) / np.float64(factor))

    def __str__(self) -> str:
        return f"{self.magnitude:g} {self.dimension}"


def _coerce(other: object) -> MksValue | None:
    if isinstance(other, MksValue):
        return other
    if isinstance(other, numbers.Real) and not isinstance(other, bool):
        return MksValue.scalar(float(other))
    return None
