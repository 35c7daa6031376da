"""Projection engine capability and its pyproj implementation.

The conversion pipeline never talks to PROJ directly. It needs two things
from an engine: turn a definition string into a handle, and push a planar
point through that handle. :class:`ProjectionEngine` states exactly that, so
tests and alternative back ends can stand in for :class:`PyprojEngine`.

Axis order at this boundary is the engine's: input is (easting, northing),
output is whatever pair the target CRS yields in x/y order.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

import numpy as np
from pyproj import CRS, Transformer
from pyproj.exceptions import ProjError

from dcsgeo.errors import OutOfDomainError, ProjectionInitError

logger = logging.getLogger(__name__)


class ProjectionEngine(ABC):
    """Abstract projection engine.

    Implementations build opaque handles from PROJ-style definition strings
    and forward-transform points with them. Handles are never mutated after
    construction.
    """

    @abstractmethod
    def build(self, definition: str, target: str) -> Any:
        """Construct a handle converting ``definition`` coordinates to ``target``.

        Args:
            definition: Source projection definition string.
            target: Target CRS identifier.

        Returns:
            Any: Engine-specific handle.

        Raises:
            ProjectionInitError: If the engine rejects either CRS.
        """

    @abstractmethod
    def forward(self, handle: Any, easting: float, northing: float) -> tuple[float, float]:
        """Transform one planar point with ``handle``.

        Raises:
            OutOfDomainError: If the engine cannot represent the point.
        """

    def forward_many(
        self, handle: Any, eastings: np.ndarray, northings: np.ndarray
    ) -> tuple[np.ndarray, np.ndarray]:
        """Transform arrays of planar points.

        The default implementation calls :meth:`forward` point by point.
        """
        pairs = [self.forward(handle, float(e), float(n)) for e, n in zip(eastings, northings)]
        if not pairs:
            return np.empty(0), np.empty(0)
        first, second = zip(*pairs)
        return np.asarray(first, dtype=float), np.asarray(second, dtype=float)


class PyprojEngine(ProjectionEngine):
    """Projection engine backed by :mod:`pyproj`.

    Handles are :class:`pyproj.Transformer` objects created with
    ``always_xy=True``, so geographic output is (longitude, latitude) order.
    Transforms run with ``errcheck=True``: PROJ failures raise instead of
    returning ``inf``.
    """

    def build(self, definition: str, target: str) -> Transformer:
        try:
            return Transformer.from_crs(
                CRS.from_user_input(definition),
                CRS.from_user_input(target),
                always_xy=True,
            )
        except ProjError as err:
            raise ProjectionInitError(definition, str(err)) from err

    def forward(self, handle: Transformer, easting: float, northing: float) -> tuple[float, float]:
        try:
            first, second = handle.transform(easting, northing, errcheck=True)
        except ProjError as err:
            raise OutOfDomainError((easting, northing), str(err)) from err
        return float(first), float(second)

    def forward_many(
        self, handle: Transformer, eastings: np.ndarray, northings: np.ndarray
    ) -> tuple[np.ndarray, np.ndarray]:
        eastings = np.asarray(eastings, dtype=float)
        northings = np.asarray(northings, dtype=float)
        try:
            first, second = handle.transform(eastings, northings, errcheck=True)
        except ProjError as err:
            raise OutOfDomainError((eastings, northings), str(err)) from err
        logger.debug("Transformed %d points", eastings.size)
        return np.asarray(first, dtype=float), np.asarray(second, dtype=float)


DEFAULT_ENGINE = PyprojEngine()
