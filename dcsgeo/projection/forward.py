"""Forward conversion of theatre-grid points to geographic coordinates.

Theatre grids name the northing axis ``x`` and the easting axis ``y``; the
engine wants (easting, northing). Both functions here therefore submit
``(y, x)``. The engine's two output components are returned in the order it
emits them, as ``(lat, lon)``.
"""

import logging
import math

import numpy as np

from dcsgeo.config import BASE_TYPE
from dcsgeo.errors import OutOfDomainError
from dcsgeo.projection.engine import DEFAULT_ENGINE, ProjectionEngine

logger = logging.getLogger(__name__)


def convert_dcs_lat_lon(
    x: float, y: float, handle, engine: ProjectionEngine | None = None
) -> tuple[float, float]:
    """Convert one theatre-grid point to decimal degrees.

    Args:
        x: Grid x coordinate (meters).
        y: Grid y coordinate (meters).
        handle: Projection handle from :func:`~dcsgeo.projection.proj_from_map`.
        engine: Engine that owns ``handle``. Defaults to the pyproj engine.

    Returns:
        tuple[float, float]: ``(lat, lon)`` in decimal degrees.

    Raises:
        OutOfDomainError: If the point falls outside the projection's domain.
            Results are never clamped.

    Note:
        Only the engine decides what is out of domain. PROJ's transverse
        Mercator rejects points far out along ``y`` (the easting) but accepts
        far ``x`` (northing) values and wraps them onto the globe, so
        PersianGulf ``(1e8, 0)`` comes back as a finite, meaningless
        coordinate. Points are not checked against the theatre's map area.

    Example:
        >>> handle = proj_from_map(lookup("PersianGulf"))
        >>> convert_dcs_lat_lon(-100594.371094, -88875.371094, handle)
        (55.3652612..., 25.2563758...)
    """
    engine = engine if engine is not None else DEFAULT_ENGINE
    lat, lon = engine.forward(handle, y, x)
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise OutOfDomainError((y, x), "engine returned a non-finite coordinate")
    logger.debug("Converted grid point (%s, %s) to (%s, %s)", x, y, lat, lon)
    return lat, lon


def convert_many(
    xs: BASE_TYPE, ys: BASE_TYPE, handle, engine: ProjectionEngine | None = None
) -> tuple[np.ndarray, np.ndarray]:
    """Vectorised :func:`convert_dcs_lat_lon`.

    All points go through the engine in one call. If any point is out of
    domain the whole batch fails; no partial result is returned.

    Returns:
        tuple[np.ndarray, np.ndarray]: ``(lats, lons)`` arrays.
    """
    engine = engine if engine is not None else DEFAULT_ENGINE
    xs = np.atleast_1d(np.asarray(xs, dtype=float))
    ys = np.atleast_1d(np.asarray(ys, dtype=float))
    if xs.shape != ys.shape:
        msg = f"x and y arrays differ in shape: {xs.shape} != {ys.shape}"
        raise ValueError(msg)

    lats, lons = engine.forward_many(handle, ys, xs)
    finite = np.isfinite(lats) & np.isfinite(lons)
    if not finite.all():
        bad = int(np.argmin(finite))
        raise OutOfDomainError((ys[bad], xs[bad]), "engine returned a non-finite coordinate")
    return lats, lons
