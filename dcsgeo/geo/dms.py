"""Degrees-Minutes-Seconds encoding and display.

:func:`decimal_to_dms` splits a signed decimal angle into whole degrees,
whole minutes and fractional seconds, moving the sign into a hemisphere
letter. It never rounds: seconds keep full float precision and always stay
in ``[0, 60)``.

Rounding happens only in :func:`format_dms`. When the seconds round up to 60
at display precision, the rendered text carries into the minutes (and the
minutes into the degrees), so ``10°59'59.9996"`` displays as
``11°00'00.000"`` rather than ``10°59'60.000"``. The :class:`DMS` value
itself is left as encoded.

Example:
    >>> dms = decimal_to_dms(37.7749, is_latitude=True)
    >>> dms.degrees, dms.minutes, dms.direction
    (37, 46, 'N')
    >>> format_dms(dms)
    '37°46\\'29.640"N'
"""

import math
from dataclasses import dataclass

from dcsgeo import config


@dataclass(frozen=True)
class DMS:
    """Unsigned degrees/minutes/seconds with a hemisphere letter.

    Attributes:
        degrees: Whole degrees, never negative.
        minutes: Whole minutes, 0-59.
        seconds: Seconds, 0 <= seconds < 60.
        direction: One of ``"N"``, ``"S"``, ``"E"``, ``"W"``.
    """

    degrees: int
    minutes: int
    seconds: float
    direction: str


def decimal_to_dms(value: float, is_latitude: bool) -> DMS:
    """Convert a decimal angle to DMS.

    Args:
        value: Angle in decimal degrees; negative is south or west.
        is_latitude: Selects N/S instead of E/W.

    Returns:
        DMS: The encoded angle.

    Raises:
        ValueError: If ``value`` is nan.
        OverflowError: If ``value`` is infinite.
    """
    abs_value = abs(value)
    degrees = math.floor(abs_value)
    minutes_float = (abs_value - degrees) * 60.0
    minutes = math.floor(minutes_float)
    seconds = (minutes_float - minutes) * 60.0

    if is_latitude:
        direction = "N" if value >= 0.0 else "S"
    else:
        direction = "E" if value >= 0.0 else "W"

    return DMS(degrees=degrees, minutes=minutes, seconds=seconds, direction=direction)


def format_dms(dms: DMS, precision: int = config.DMS_SECONDS_PRECISION) -> str:
    """Render ``dms`` as ``D°MM'SS.sss"X``.

    Degrees are unpadded, minutes are two digits, seconds are zero-padded to
    two integer digits with ``precision`` decimals.

    Args:
        dms: Angle to render.
        precision: Decimals shown for the seconds.

    Returns:
        str: The display string.
    """
    degrees, minutes = dms.degrees, dms.minutes
    seconds = round(dms.seconds, precision)
    if seconds >= 60.0:
        seconds -= 60.0
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1

    width = precision + 3 if precision > 0 else 2
    return f"{degrees}°{minutes:02d}'{seconds:0{width}.{precision}f}\"{dms.direction}"
