"""Theatre-grid to geographic coordinate conversion.

This module ties the registry, the projection engine and the DMS codec into a
single call. A conversion runs:

    theatre id ──lookup──▶ TransverseMercator ──proj_from_map──▶ handle
    (x, y) ──convert_dcs_lat_lon(handle)──▶ (lat, lon) ──▶ GeoCoordinate

and either returns a complete :class:`~dcsgeo.models.GeoCoordinate` or raises
:class:`~dcsgeo.errors.UnknownTheatreError`,
:class:`~dcsgeo.errors.ProjectionInitError` or
:class:`~dcsgeo.errors.OutOfDomainError`.

Mission files carry two kinds of points that need converting: the coalition
bullseye (the reference point all bearing/range calls are made from) and
route waypoints. Both go through the same pipeline; :meth:`convert_bullseye`
and :meth:`convert_waypoint` only name the call site.

Example:
    >>> from dcsgeo import convert_bullseye, format_coordinate
    >>> coord = convert_bullseye(-100594.371094, -88875.371094, "PersianGulf")
    >>> round(coord.lat_decimal, 5), round(coord.lon_decimal, 5)
    (55.36526, 25.25638)
    >>> format_coordinate(coord)
    '55°21\\'54.940"N 25°15\\'22.953"E'
"""

import logging
from collections.abc import Iterable
from typing import Any, Dict, List

from dcsgeo.models import GeoCoordinate
from dcsgeo.projection import DEFAULT_ENGINE, ProjectionEngine, convert_dcs_lat_lon, convert_many, proj_from_map
from dcsgeo.theatre import lookup

logger = logging.getLogger(__name__)


class CoordinateConverter:
    """Converts theatre-grid points to :class:`GeoCoordinate` values.

    Projection handles are built on first use of a theatre and, when
    ``cache_handles`` is set, reused for later calls. The cache only saves
    engine work; disabling it does not change any result.

    Attributes:
        engine (ProjectionEngine): Engine used to build and apply projections.
        cache_handles (bool): Whether handles are kept per theatre.

    Example:
        >>> converter = CoordinateConverter()
        >>> converter.convert_waypoint(0.0, 0.0, "Caucasus")
        GeoCoordinate(lat_decimal=..., lon_decimal=..., ...)
    """

    def __init__(self, engine: ProjectionEngine | None = None, cache_handles: bool = True):
        self.engine = engine if engine is not None else DEFAULT_ENGINE
        self.cache_handles = cache_handles
        self._handles: Dict[str, Any] = {}

    def projection(self, theatre: str):
        """Return the projection handle for ``theatre``.

        Raises:
            UnknownTheatreError: If ``theatre`` is not registered.
            ProjectionInitError: If the engine rejects the theatre's grid.
        """
        params = lookup(theatre)
        handle = self._handles.get(theatre) if self.cache_handles else None
        if handle is None:
            handle = proj_from_map(params, self.engine)
            if self.cache_handles:
                self._handles[theatre] = handle
        return handle

    def convert_point(self, x: float, y: float, theatre: str) -> GeoCoordinate:
        """Convert a grid point of ``theatre`` to latitude/longitude.

        Args:
            x: Grid x coordinate (meters).
            y: Grid y coordinate (meters).
            theatre: Theatre identifier, matched exactly.

        Returns:
            GeoCoordinate: Decimal and DMS latitude/longitude.
        """
        handle = self.projection(theatre)
        lat, lon = convert_dcs_lat_lon(x, y, handle, self.engine)
        return GeoCoordinate.from_decimal(lat, lon)

    def convert_bullseye(self, x: float, y: float, theatre: str) -> GeoCoordinate:
        """Convert a coalition bullseye. Same pipeline as :meth:`convert_point`."""
        return self.convert_point(x, y, theatre)

    def convert_waypoint(self, x: float, y: float, theatre: str) -> GeoCoordinate:
        """Convert a route waypoint. Same pipeline as :meth:`convert_point`."""
        return self.convert_point(x, y, theatre)

    def convert_path(self, points: Iterable, theatre: str) -> List[GeoCoordinate]:
        """Convert a sequence of waypoints in one engine call.

        Args:
            points: ``(x, y)`` pairs or :class:`~dcsgeo.models.PlanarPoint` objects.
            theatre: Theatre identifier, matched exactly.

        Returns:
            List[GeoCoordinate]: One coordinate per input point, in order.

        Raises:
            OutOfDomainError: If any point is outside the projection domain;
                nothing is returned for the other points.
        """
        pairs = [tuple(point) for point in points]
        handle = self.projection(theatre)
        if not pairs:
            return []
        xs, ys = zip(*pairs)
        lats, lons = convert_many(xs, ys, handle, self.engine)
        logger.debug("Converted %d waypoints on %s", len(pairs), theatre)
        return [GeoCoordinate.from_decimal(float(lat), float(lon)) for lat, lon in zip(lats, lons)]

    def clear_cache(self) -> None:
        """Drop all cached projection handles."""
        self._handles.clear()


_default_converter = CoordinateConverter()


def convert_point(x: float, y: float, theatre: str) -> GeoCoordinate:
    """Convert a grid point with the shared default converter."""
    return _default_converter.convert_point(x, y, theatre)


def convert_bullseye(x: float, y: float, theatre: str) -> GeoCoordinate:
    """Convert a bullseye reference point read from a mission file."""
    return _default_converter.convert_bullseye(x, y, theatre)


def convert_waypoint(x: float, y: float, theatre: str) -> GeoCoordinate:
    """Convert a waypoint read from a mission file."""
    return _default_converter.convert_waypoint(x, y, theatre)


def convert_path(points: Iterable, theatre: str) -> List[GeoCoordinate]:
    """Convert a route with the shared default converter."""
    return _default_converter.convert_path(points, theatre)


__all__ = [
    "CoordinateConverter",
    "convert_point",
    "convert_bullseye",
    "convert_waypoint",
    "convert_path",
]
