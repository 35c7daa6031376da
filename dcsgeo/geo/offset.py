"""Bearing/distance displacement on a theatre grid.

The offset works purely in grid coordinates and knows nothing about the
projection: bearing 0 points along +x and angles grow counter-clockwise
towards +y. Bearings outside [0, 360) and negative distances are used as
given.
"""

import math

from dcsgeo.unit import Degree, Meter, Radian, Unit


def _as_angle(bearing) -> Radian:
    # Plain numbers are degrees; unit angles already hold radians.
    if isinstance(bearing, Unit):
        Radian._check_same_root(type(bearing))
        return bearing
    return Degree(bearing)


def _as_length(distance) -> Meter:
    if isinstance(distance, Unit):
        Meter._check_same_root(type(distance))
        return distance
    return Meter(distance)


def offset(x_init: float, y_init: float, bearing_deg, distance) -> tuple[float, float]:
    """Displace a grid point along a bearing.

    Args:
        x_init: Start x (meters).
        y_init: Start y (meters).
        bearing_deg: Bearing in degrees, or any :mod:`dcsgeo.unit` angle.
        distance: Distance in meters, or any :mod:`dcsgeo.unit` length.

    Returns:
        tuple[float, float]: The displaced ``(x, y)``.

    Example:
        >>> offset(10.0, 20.0, 90.0, 10.0)
        (10.0..., 30.0)
        >>> offset(0.0, 0.0, Degree(0), NauticalMile(1))
        (1852.0, 0.0)
    """
    bearing = _as_angle(bearing_deg)
    distance_m = float(_as_length(distance))
    x2 = x_init + distance_m * math.cos(bearing)
    y2 = y_init + distance_m * math.sin(bearing)
    return x2, y2
