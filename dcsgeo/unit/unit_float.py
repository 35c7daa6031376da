"""Float-backed units stored in SI.

``UnitFloat`` is a ``float`` holding its value in the SI base unit of its
family (radians, meters), so it can be passed straight into ``math``
functions. The class it was built with keeps the display scale.

Example:
    >>> class Meter(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SYMBOL = "m"
    >>> class NauticalMile(Meter):
    ...     SCALE_TO_SI = 1852.0
    ...     SYMBOL = "NM"
    >>> float(NauticalMile(2))
    3704.0
    >>> str(NauticalMile(2))
    '2 NM'
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Unit


class UnitFloat(float, Unit):
    """Base class for SI-backed float units.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Conversion factor to the SI base unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0

    def __new__(cls, value: int | float):
        return float.__new__(cls, float(value) * cls.SCALE_TO_SI)

    def __str__(self) -> str:
        native = float(self) / type(self).SCALE_TO_SI
        return f"{native:g} {type(self).SYMBOL}".strip()
