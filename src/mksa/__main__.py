"""CLI entry point for mksa.

Usage:
    mksa list [NAME]       List catalogue constants (or those sharing NAME's dimension)
    mksa show NAME [RAW]   Show RAW (default 1) units of NAME in base MKSA units
    mksa demo              Run worked examples (pendulum period, light-year)
    mksa version           Show version
"""
from __future__ import annotations

import logging
import math
import sys

from mksa.constants import ConstantCatalogue, default_catalogue, load_catalogue
from mksa.errors import MksError
from mksa.utils.config import MksaConfig, load_config

logger = logging.getLogger("mksa")


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(0)

    command = sys.argv[1].lower()
    args = sys.argv[2:]

    config = load_config()
    logging.basicConfig(level=config.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        if command == "list":
            _run_list(config, args)
        elif command == "show":
            _run_show(config, args)
        elif command == "demo":
            _run_demo(config)
        elif command in ("version", "--version", "-v"):
            from mksa import __version__
            print(f"mksa {__version__}")
        elif command in ("help", "--help", "-h"):
            print(__doc__)
        else:
            print(f"Unknown command: {command}")
            print(__doc__)
            sys.exit(1)
    except MksError as e:
        logger.error(str(e))
        sys.exit(2)


def _catalogue(config: MksaConfig) -> ConstantCatalogue:
    if config.catalogue_path:
        return load_catalogue(config.catalogue_path)
    return default_catalogue()


def _run_list(config: MksaConfig, args: list[str]) -> None:
    """Print the catalogue, optionally filtered to one constant's dimension."""
    catalogue = _catalogue(config)
    if args:
        constants = catalogue.with_dimension(catalogue.get(args[0]).unit)
    else:
        constants = list(catalogue)

    width = max((len(c.name) for c in constants), default=0)
    for c in constants:
        print(f"  {c.name:<{width}}  {c.value:<22.{config.precision}g} {c.unit}")
    print(f"\n{len(constants)} constants")


def _run_show(config: MksaConfig, args: list[str]) -> None:
    """Print RAW units of a constant expressed in base MKSA units."""
    if not args:
        print("Usage: mksa show NAME [RAW]")
        sys.exit(1)
    try:
        raw = float(args[1]) if len(args) > 1 else 1.0
    except ValueError:
        print(f"Not a number: {args[1]}")
        sys.exit(1)

    constant = _catalogue(config).get(args[0])
    value = constant.quantity(raw)
    print(f"{raw:g} {constant.name} = {value.magnitude:.{config.precision}g} {value.dimension}")
    if constant.description:
        print(f"  ({constant.description})")


def _run_demo(config: MksaConfig) -> None:
    """Pendulum period T = 2*pi*sqrt(L/g) and light-year travel time."""
    catalogue = _catalogue(config)
    p = config.precision

    length = catalogue.quantity(6.0, "foot")
    g = catalogue.quantity(1.0, "grav_accel")
    print(f"Pendulum length is {length.magnitude:.{p}g} {length.dimension}")
    print(f"g on Earth is {g.magnitude:.{p}g} {g.dimension}")
    period = 2.0 * math.pi * (length / g).sqrt()
    print(f"Pendulum period is {period.magnitude:.{p}g} {period.dimension}")

    light_time = catalogue.quantity(1.0, "light_year") / catalogue.quantity(1.0, "speed_of_light")
    days = light_time.in_units(catalogue.get("day").value)
    print(f"Light travels one light-year in {light_time.magnitude:.{p}g} {light_time.dimension} "
          f"({days:.{p}g} days)")


if __name__ == "__main__":
    main()
