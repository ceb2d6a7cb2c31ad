"""Catalogue of named MKSA constants and units of measure.

Each entry pairs a factor in base units with its dimension, so that
``quantity(6.0, "foot")`` gives 1.8288 [m]. The catalogue is lookup only:
it never searches for conversions between units.

Storage: YAML, ``constants: {name: {value, dimension: [m, kg, s, a], description}}``.
The packaged default lives in ``mksa/data/constants.yaml``.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml

from mksa.dimension import Dimension
from mksa.errors import UnknownConstantError
from mksa.types.constant import Constant
from mksa.value import MksValue

logger = logging.getLogger(__name__)

DEFAULT_CATALOGUE_PATH = Path(__file__).resolve().parent / "data" / "constants.yaml"


def _key(name: str) -> str:
    return name.strip().lower().replace(" ", "_").replace("-", "_")


class ConstantCatalogue:
    """Name -> Constant mapping with case-insensitive lookup."""

    def __init__(self, constants: list[Constant] | None = None) -> None:
        self._constants: dict[str, Constant] = {}
        for c in constants or []:
            self._constants[_key(c.name)] = c

    def get(self, name: str) -> Constant:
        try:
            return self._constants[_key(name)]
        except KeyError:
            raise UnknownConstantError(name) from None

    def names(self) -> list[str]:
        return list(self._constants)

    def quantity(self, raw: float, name: str) -> MksValue:
        """``raw`` units of the named constant as an MksValue."""
        return self.get(name).quantity(raw)

    def with_dimension(self, dimension: Dimension) -> list[Constant]:
        """All constants whose dimension equals ``dimension``."""
        return [c for c in self._constants.values() if c.unit == dimension]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _key(name) in self._constants

    def __len__(self) -> int:
        return len(self._constants)

    def __iter__(self) -> Iterator[Constant]:
        return iter(self._constants.values())


def load_catalogue(path: str | Path | None = None) -> ConstantCatalogue:
    """Load a constant catalogue from a YAML file.

    Falls back to the packaged catalogue if no path is given.
    """
    if path is None:
        path = DEFAULT_CATALOGUE_PATH
    path = Path(path)

    with open(path) as f:
        raw: dict[str, Any] = yaml.safe_load(f) or {}

    entries: dict[str, dict[str, Any]] = raw.get("constants") or {}
    constants = [Constant(name=name, **entry) for name, entry in entries.items()]
    logger.debug(f"Loaded {len(constants)} constants from {path}")
    return ConstantCatalogue(constants)


@functools.lru_cache(maxsize=1)
def default_catalogue() -> ConstantCatalogue:
    """The packaged catalogue, loaded once."""
    return load_catalogue()


def get_constant(name: str) -> Constant:
    return default_catalogue().get(name)


def quantity(raw: float, name: str) -> MksValue:
    """``raw`` units of a packaged constant, e.g. ``quantity(1.0, "light_year")``."""
    return default_catalogue().quantity(raw, name)
