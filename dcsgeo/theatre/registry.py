"""Transverse Mercator parameters for every supported theatre.

Each theatre grid is a transverse Mercator projection with its own central
meridian and false easting/northing, chosen so that the map origin sits near
the middle of the theatre. The values are the ones the simulator itself uses
and must not be rounded.

The table is built once at import time and exposed read-only; lookups are
exact string matches.
"""

from dataclasses import dataclass
from types import MappingProxyType

from dcsgeo import config
from dcsgeo.errors import UnknownTheatreError


@dataclass(frozen=True)
class TransverseMercator:
    """Projection parameters of one theatre grid.

    Attributes:
        central_meridian: Longitude of the projection's central meridian, whole degrees.
        false_easting: Offset added to eastings, meters.
        false_northing: Offset added to northings, meters.
        scale_factor: Scale factor on the central meridian.
    """

    central_meridian: int
    false_easting: float
    false_northing: float
    scale_factor: float

    @property
    def proj4(self) -> str:
        """PROJ definition string for this grid.

        Example:
            >>> TransverseMercator(57, 75755.99999999645, -2894933.0000000377, 0.9996).proj4
            '+proj=tmerc +lat_0=0 +lon_0=57 +k_0=0.9996 +x_0=75755.99999999645 +y_0=-2894933.0000000377'
        """
        return (
            f"+proj=tmerc +lat_0={config.LATITUDE_OF_ORIGIN} +lon_0={self.central_meridian}"
            f" +k_0={self.scale_factor} +x_0={self.false_easting} +y_0={self.false_northing}"
        )


THEATRES = MappingProxyType(
    {
        "PersianGulf": TransverseMercator(
            central_meridian=57,
            false_easting=75755.99999999645,
            false_northing=-2894933.0000000377,
            scale_factor=0.9996,
        ),
        "Falklands": TransverseMercator(
            central_meridian=-57,
            false_easting=147639.99999997593,
            false_northing=5815417.000000032,
            scale_factor=0.9996,
        ),
        "Caucasus": TransverseMercator(
            central_meridian=33,
            false_easting=-99516.99999997323,
            false_northing=-4998114.999999984,
            scale_factor=0.9996,
        ),
        "MarianaIslands": TransverseMercator(
            central_meridian=147,
            false_easting=238417.99999989968,
            false_northing=-1491840.000000048,
            scale_factor=0.9996,
        ),
        "Nevada": TransverseMercator(
            central_meridian=-117,
            false_easting=-193996.80999964548,
            false_northing=-4410028.063999966,
            scale_factor=0.9996,
        ),
        "Normandy": TransverseMercator(
            central_meridian=-3,
            false_easting=-195526.00000000204,
            false_northing=-5484812.999999951,
            scale_factor=0.9996,
        ),
        "Syria": TransverseMercator(
            central_meridian=39,
            false_easting=282801.00000003993,
            false_northing=-3879865.9999999935,
            scale_factor=0.9996,
        ),
        "SinaiMap": TransverseMercator(
            central_meridian=33,
            false_easting=169221.9999999585,
            false_northing=-3325312.9999999693,
            scale_factor=0.9996,
        ),
    }
)

THEATRE_IDS = tuple(sorted(THEATRES))


def lookup(theatre: str) -> TransverseMercator:
    """Return the projection parameters registered for ``theatre``.

    Args:
        theatre: Theatre identifier as written in the mission file, e.g. ``"Caucasus"``.

    Returns:
        TransverseMercator: The theatre's constant parameters.

    Raises:
        UnknownTheatreError: If no theatre is registered under exactly this name.
    """
    try:
        return THEATRES[theatre]
    except (KeyError, TypeError) as err:
        raise UnknownTheatreError(theatre) from err
