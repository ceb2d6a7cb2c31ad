"""Dimensionless scale factors: SI prefixes and binary data sizes."""

from __future__ import annotations

YOTTA = 1.0e24
ZETTA = 1.0e21
EXA = 1.0e18
PETA = 1.0e15
TERA = 1.0e12
GIGA = 1.0e9
MEGA = 1.0e6
KILO = 1.0e3
MILLI = 1.0e-3
MICRO = 1.0e-6
NANO = 1.0e-9
PICO = 1.0e-12
FEMTO = 1.0e-15
ATTO = 1.0e-18
ZEPTO = 1.0e-21
YOCTO = 1.0e-24

KILOBYTE = 1024.0
MEGABYTE = KILOBYTE * KILOBYTE
GIGABYTE = MEGABYTE * KILOBYTE
TERABYTE = GIGABYTE * KILOBYTE
PETABYTE = TERABYTE * KILOBYTE

PREFIXES: dict[str, float] = {
    "yotta": YOTTA,
    "zetta": ZETTA,
    "exa": EXA,
    "peta": PETA,
    "tera": TERA,
    "giga": GIGA,
    "mega": MEGA,
    "kilo": KILO,
    "milli": MILLI,
    "micro": MICRO,
    "nano": NANO,
    "pico": PICO,
    "femto": FEMTO,
    "atto": ATTO,
    "zepto": ZEPTO,
    "yocto": YOCTO,
}


def to_units(x: float, factor: float) -> float:
    """Scale ``x`` by ``factor``, e.g. ``to_units(3.0, KILO) == 3000.0``."""
    return x * factor


def in_units(x: float, factor: float) -> float:
    """Express ``x`` as a multiple of ``factor``."""
    return x / factor
