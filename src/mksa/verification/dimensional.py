"""Dimensional consistency checks for equations and computed quantities."""

from __future__ import annotations

from mksa.dimension import Dimension
from mksa.types.check import CheckResult
from mksa.value import MksValue


def _dimension_of(x: Dimension | MksValue) -> Dimension:
    if isinstance(x, MksValue):
        return x.dimension
    if isinstance(x, Dimension):
        return x
    raise TypeError(f"Expected Dimension or MksValue, got {type(x).__name__}")


def check_dimensional_consistency(
    lhs: Dimension | MksValue, rhs: Dimension | MksValue, equation_name: str = ""
) -> tuple[bool, str]:
    """Check that LHS and RHS of an equation have matching dimensions."""
    lhs_dims = _dimension_of(lhs)
    rhs_dims = _dimension_of(rhs)
    if lhs_dims == rhs_dims:
        return True, f"{equation_name}: dimensionally consistent ({lhs_dims})"
    return False, (
        f"{equation_name}: dimensional mismatch, LHS={lhs_dims}, RHS={rhs_dims}"
    )


def check_quantity(
    value: MksValue, expected: Dimension, name: str = "quantity"
) -> CheckResult:
    """Check that a computed value carries the expected dimension."""
    passed = value.dimension == expected
    if passed:
        message = f"{name} has dimension {expected}"
    else:
        message = f"{name} has dimension {value.dimension}, expected {expected}"
    return CheckResult(
        name=name,
        passed=passed,
        expected=str(expected),
        actual=str(value.dimension),
        message=message,
    )
