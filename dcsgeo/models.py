"""
Value objects passed in and out of the conversion pipeline.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator

from dcsgeo import config
from dcsgeo.geo import DMS, decimal_to_dms, format_dms, offset


@dataclass(frozen=True)
class PlanarPoint:
    """A point on a theatre grid, in meters."""
    x: float
    y: float

    def offset(self, bearing, distance) -> "PlanarPoint":
        """Return the point reached by moving ``distance`` along ``bearing``."""
        return PlanarPoint(*offset(self.x, self.y, bearing, distance))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class GeoCoordinate:
    """One geographic point in decimal and DMS form."""
    lat_decimal: float
    lon_decimal: float
    lat_dms: DMS
    lon_dms: DMS

    @classmethod
    def from_decimal(cls, lat: float, lon: float) -> "GeoCoordinate":
        """Build the coordinate, deriving both DMS components."""
        return cls(
            lat_decimal=lat,
            lon_decimal=lon,
            lat_dms=decimal_to_dms(lat, True),
            lon_dms=decimal_to_dms(lon, False),
        )

    def as_dict(self) -> Dict[str, Any]:
        """Plain nested dict, suitable for JSON encoding."""
        return asdict(self)

    def __str__(self) -> str:
        return format_coordinate(self)


def format_coordinate(coordinate: GeoCoordinate, precision: int = config.DMS_SECONDS_PRECISION) -> str:
    """Render ``coordinate`` as ``"<lat DMS> <lon DMS>"``."""
    return f"{format_dms(coordinate.lat_dms, precision)} {format_dms(coordinate.lon_dms, precision)}"
