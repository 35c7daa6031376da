"""Theatre projection registry.

Components:
    TransverseMercator: Frozen projection parameters of one theatre grid
    THEATRES: Read-only mapping of theatre id to parameters
    THEATRE_IDS: Sorted tuple of supported theatre ids
    lookup: Exact-match theatre lookup

Typical Usage:
    >>> from dcsgeo.theatre import lookup
    >>> lookup("Syria").central_meridian
    39
"""

from .registry import THEATRE_IDS, THEATRES, TransverseMercator, lookup

__all__ = ["THEATRES", "THEATRE_IDS", "TransverseMercator", "lookup"]
