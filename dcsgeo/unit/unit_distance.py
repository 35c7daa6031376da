"""Length units for displacements on the theatre plane.

Theatre grids are metric, so every length is stored in meters. Mission
planning tends to quote ranges in nautical miles and altitudes in feet; those
units convert on construction.

Example:
    >>> leg = NauticalMile(10)
    >>> float(leg)
    18520.0
    >>> print(leg)
    10 NM
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance unit: meter (SI base unit for length)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Distance unit: kilometer."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class NauticalMile(Meter):
    """Distance unit: international nautical mile (1852 m)."""

    SCALE_TO_SI = 1852.0
    SYMBOL = "NM"


class Foot(Meter):
    """Distance unit: international foot (0.3048 m)."""

    SCALE_TO_SI = 0.3048
    SYMBOL = "ft"


Length = Meter | Kilometer | NauticalMile | Foot
