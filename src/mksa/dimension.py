"""MKSA dimension vectors: integer exponents of (m, kg, s, A)."""

from __future__ import annotations

from dataclasses import dataclass

# Display order is fixed: length, mass, time, current.
_NAMES = ("m", "kg", "s", "A")


@dataclass(frozen=True)
class Dimension:
    """Exponents of the MKSA base units [m, kg, s, A].

    Multiplication adds exponents, division subtracts them. All-zero is
    the identity and means dimensionless.
    """

    m: int = 0
    kg: int = 0
    s: int = 0
    a: int = 0

    def __mul__(self, other: Dimension) -> Dimension:
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension(
            m=self.m + other.m,
            kg=self.kg + other.kg,
            s=self.s + other.s,
            a=self.a + other.a,
        )

    def __truediv__(self, other: Dimension) -> Dimension:
        if not isinstance(other, Dimension):
            return NotImplemented
        return Dimension(
            m=self.m - other.m,
            kg=self.kg - other.kg,
            s=self.s - other.s,
            a=self.a - other.a,
        )

    def __pow__(self, n: int) -> Dimension:
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Dimension power expects int, got {type(n).__name__}")
        return Dimension(m=self.m * n, kg=self.kg * n, s=self.s * n, a=self.a * n)

    def root(self, n: int) -> Dimension:
        """Divide every exponent by ``n``, truncating toward zero.

        An exponent that is not a multiple of ``n`` loses its remainder, so
        the result is only meaningful when ``divisible_by(n)`` holds.
        """
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Root degree must be int, got {type(n).__name__}")
        if n == 0:
            raise ValueError("Root degree must be non-zero")
        return Dimension(*(int(e / n) for e in self.to_tuple()))

    def divisible_by(self, n: int) -> bool:
        return all(e % n == 0 for e in self.to_tuple())

    @property
    def is_dimensionless(self) -> bool:
        return all(e == 0 for e in self.to_tuple())

    def to_tuple(self) -> tuple[int, int, int, int]:
        return (self.m, self.kg, self.s, self.a)

    def as_string(self) -> str:
        """Render as e.g. ``"m / s^2"``; empty string when dimensionless."""
        exps = self.to_tuple()
        positive = [(name, e) for name, e in zip(_NAMES, exps) if e > 0]
        negative = [(name, -e) for name, e in zip(_NAMES, exps) if e < 0]

        if not positive and not negative:
            return ""

        out = _join_powers(positive) if positive else "1"
        if negative:
            out += " / " + _join_powers(negative)
        return out

    def __str__(self) -> str:
        return f"[{self.as_string()}]"


def _join_powers(powers: list[tuple[str, int]]) -> str:
    return " ".join(name if p == 1 else f"{name}^{p}" for name, p in powers)


# Base dimensions
DIMENSIONLESS = Dimension()
LENGTH = Dimension(m=1)
MASS = Dimension(kg=1)
TIME = Dimension(s=1)
CURRENT = Dimension(a=1)

# Common derived dimensions
AREA = LENGTH**2
VOLUME = LENGTH**3
FREQUENCY = DIMENSIONLESS / TIME
VELOCITY = LENGTH / TIME
ACCELERATION = VELOCITY / TIME
FORCE = MASS * ACCELERATION
ENERGY = FORCE * LENGTH
POWER = ENERGY / TIME
PRESSURE = FORCE / AREA
CHARGE = CURRENT * TIME
