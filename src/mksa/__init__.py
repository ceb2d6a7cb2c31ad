"""mksa: dimensional analysis for physical quantities in MKSA units."""

__version__ = "0.1.0"

from mksa.constants import ConstantCatalogue, get_constant, load_catalogue, quantity
from mksa.dimension import (
    ACCELERATION,
    AREA,
    CHARGE,
    CURRENT,
    DIMENSIONLESS,
    ENERGY,
    FORCE,
    FREQUENCY,
    LENGTH,
    MASS,
    POWER,
    PRESSURE,
    TIME,
    VELOCITY,
    VOLUME,
    Dimension,
)
from mksa.errors import (
    DimensionMismatchError,
    InvalidRootExponentError,
    MksError,
    UnknownConstantError,
)
from mksa.value import MksValue

__all__ = [
    "__version__",
    # dimension
    "Dimension",
    "DIMENSIONLESS",
    "LENGTH",
    "MASS",
    "TIME",
    "CURRENT",
    "AREA",
    "VOLUME",
    "FREQUENCY",
    "VELOCITY",
    "ACCELERATION",
    "FORCE",
    "ENERGY",
    "POWER",
    "PRESSURE",
    "CHARGE",
    # value
    "MksValue",
    # constants
    "ConstantCatalogue",
    "load_catalogue",
    "get_constant",
    "quantity",
    # errors
    "MksError",
    "DimensionMismatchError",
    "InvalidRootExponentError",
    "UnknownConstantError",
]
