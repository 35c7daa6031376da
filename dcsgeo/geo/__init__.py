"""Angle encoding and planar displacement helpers.

Components:
    DMS: Degrees/minutes/seconds value with hemisphere letter
    decimal_to_dms: Decimal degrees → DMS
    format_dms: DMS → ``D°MM'SS.sss"X`` display string
    offset: Bearing/distance displacement on a theatre grid
"""

from .dms import DMS, decimal_to_dms, format_dms
from .offset import offset

__all__ = ["DMS", "decimal_to_dms", "format_dms", "offset"]
