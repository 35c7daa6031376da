"""Type-safe angle and length units.

Bearings and distances passed to the planar offset helpers may be plain
numbers (degrees and meters) or units from this package. Units are floats
stored in SI, so they drop into ``math`` calls unchanged, and the family check
keeps an angle from being used where a length is expected.

Unit Families:
    - Angle: Radian (root), Degree
    - Length: Meter (root), Kilometer, NauticalMile, Foot

Example:
    >>> from dcsgeo.unit import Degree, NauticalMile
    >>> from dcsgeo.geo import offset
    >>> offset(0.0, 0.0, Degree(90), NauticalMile(1))
    (1.1340...e-13, 1852.0)
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Foot, Kilometer, Length, Meter, NauticalMile
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Distance units
    "Meter",
    "Kilometer",
    "NauticalMile",
    "Foot",
    "Length",
]
