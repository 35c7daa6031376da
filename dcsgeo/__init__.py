"""Theatre-grid to latitude/longitude conversion for DCS mission geometry.

DCS World places every object of a mission on a flat, per-map grid measured in
meters. Each map ("theatre") is a transverse Mercator projection with its own
central meridian and false origin. dcsgeo turns those grid positions into
WGS84 latitude/longitude, both as decimal degrees and as
Degrees-Minutes-Seconds for kneeboards and briefings, and displaces grid
points by bearing and distance.

Package Layout:
    Theatre Registry (dcsgeo.theatre):
        • TransverseMercator: frozen projection parameters of one theatre
        • lookup: exact-match theatre id → parameters

    Projection (dcsgeo.projection):
        • ProjectionEngine: capability interface over the cartographic engine
        • PyprojEngine: default engine built on pyproj
        • proj_from_map / convert_dcs_lat_lon: build a handle, convert a point

    Geometry helpers (dcsgeo.geo):
        • offset: bearing/distance displacement on the grid
        • decimal_to_dms / format_dms: DMS encoding and display

    Conversion facade (dcsgeo.converter):
        • CoordinateConverter: full pipeline with per-theatre handle cache
        • convert_bullseye / convert_waypoint / convert_path

    Units (dcsgeo.unit):
        • Degree, Radian, Meter, Kilometer, NauticalMile, Foot

Usage:
    >>> from dcsgeo import convert_bullseye, format_coordinate, offset
    >>> bullseye = convert_bullseye(-281713.0, 647369.0, "Caucasus")
    >>> print(format_coordinate(bullseye))
    >>>
    >>> # 20 km along +y from the bullseye, then convert
    >>> x, y = offset(-281713.0, 647369.0, 90.0, 20000.0)
    >>> waypoint = convert_waypoint(x, y, "Caucasus")

Errors:
    All failures derive from dcsgeo.errors.DcsGeoError: UnknownTheatreError,
    ProjectionInitError and OutOfDomainError. Conversions never return partial
    results.
"""

import logging

from dcsgeo.converter import (
    CoordinateConverter,
    convert_bullseye,
    convert_path,
    convert_point,
    convert_waypoint,
)
from dcsgeo.errors import DcsGeoError, OutOfDomainError, ProjectionInitError, UnknownTheatreError
from dcsgeo.geo import DMS, decimal_to_dms, format_dms, offset
from dcsgeo.models import GeoCoordinate, PlanarPoint, format_coordinate
from dcsgeo.theatre import THEATRE_IDS, TransverseMercator, lookup

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CoordinateConverter",
    "convert_point",
    "convert_bullseye",
    "convert_waypoint",
    "convert_path",
    "format_coordinate",
    "GeoCoordinate",
    "PlanarPoint",
    "DMS",
    "decimal_to_dms",
    "format_dms",
    "offset",
    "TransverseMercator",
    "THEATRE_IDS",
    "lookup",
    "DcsGeoError",
    "UnknownTheatreError",
    "ProjectionInitError",
    "OutOfDomainError",
]
