"""Angular units for bearings on the theatre plane.

Angles are stored in radians. ``Degree`` is the scale bearings are usually
written in; passing one to ``math.cos``/``math.sin`` uses its radian value.

Example:
    >>> bearing = Degree(90)
    >>> print(bearing)
    90 °
    >>> round(float(bearing), 4)
    1.5708
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: radian (SI base unit for angles)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: degree, 1/360 of a full turn."""

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
