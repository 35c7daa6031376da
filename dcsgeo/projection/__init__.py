"""Projection construction and forward conversion.

Components:
    ProjectionEngine: Capability interface over a cartographic engine
    PyprojEngine: Default engine built on pyproj/PROJ
    proj_from_map: Theatre parameters → projection handle
    convert_dcs_lat_lon: Grid (x, y) → (lat, lon) through a handle
    convert_many: Array version of convert_dcs_lat_lon
"""

from .builder import proj_from_map
from .engine import DEFAULT_ENGINE, ProjectionEngine, PyprojEngine
from .forward import convert_dcs_lat_lon, convert_many

__all__ = [
    "DEFAULT_ENGINE",
    "ProjectionEngine",
    "PyprojEngine",
    "proj_from_map",
    "convert_dcs_lat_lon",
    "convert_many",
]
