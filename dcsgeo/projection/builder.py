"""Build projection handles from theatre parameters."""

import logging

from dcsgeo import config
from dcsgeo.errors import ProjectionInitError
from dcsgeo.projection.engine import DEFAULT_ENGINE, ProjectionEngine
from dcsgeo.theatre import TransverseMercator

logger = logging.getLogger(__name__)


def proj_from_map(projection: TransverseMercator, engine: ProjectionEngine | None = None):
    """Create a projection handle from theatre grid to WGS84.

    Args:
        projection: Theatre projection parameters.
        engine: Engine that builds the handle. Defaults to the pyproj engine.

    Returns:
        The engine's handle for ``projection.proj4`` → ``config.TARGET_CRS``.

    Raises:
        ProjectionInitError: If the engine rejects the definition. The
            parameters are constants, so this is logged as a defect and
            re-raised as is.
    """
    engine = engine if engine is not None else DEFAULT_ENGINE
    definition = projection.proj4
    try:
        return engine.build(definition, config.TARGET_CRS)
    except ProjectionInitError as err:
        logger.error("Projection engine rejected theatre grid %r: %s", definition, err.detail)
        raise
