"""Package-wide constants for theatre coordinate conversion.

TARGET_CRS is the geographic reference every theatre projection converts
into. DMS_SECONDS_PRECISION is the number of decimals rendered for DMS
seconds. LOG_LEVEL is read once from ``DCSGEO_LOG_LEVEL`` and used by
:func:`dcsgeo.log.configure_logging` when no level is passed.

BASE_TYPE is the numeric type accepted by the batch conversion helpers:
scalars or NumPy arrays.
"""

import os

from numpy import ndarray

BASE_TYPE = int | float | ndarray

# Geographic target of every forward conversion (WGS84 lat/lon)
TARGET_CRS = "EPSG:4326"

# Projection origin latitude shared by all theatre grids
LATITUDE_OF_ORIGIN = 0

# DMS display
DMS_SECONDS_PRECISION = 3

# Logging
LOG_LEVEL = os.environ.get("DCSGEO_LOG_LEVEL", "WARNING").upper()
