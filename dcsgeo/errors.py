"""Exceptions raised by theatre coordinate conversion.

Every failure is terminal for the call that raised it: a conversion either
returns a complete :class:`~dcsgeo.models.GeoCoordinate` or raises one of the
errors below. None of them is worth retrying.

Hierarchy:
    DcsGeoError
    ├── UnknownTheatreError   theatre id not in the registry (also a KeyError)
    ├── ProjectionInitError   engine rejected a projection definition
    └── OutOfDomainError      point cannot be represented geographically (also a ValueError)
"""


class DcsGeoError(Exception):
    """Base class for all conversion errors."""


class UnknownTheatreError(DcsGeoError, KeyError):
    """Raised when a theatre identifier has no registered projection.

    Attributes:
        theatre: The identifier that failed the lookup, unchanged.
    """

    def __init__(self, theatre):
        self.theatre = theatre
        msg = f"TransverseMercator not known for {theatre}"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class ProjectionInitError(DcsGeoError):
    """Raised when the projection engine cannot build a handle.

    The theatre parameters are constants, so this always points at a broken
    table entry or a broken engine installation.

    Attributes:
        definition: The projection definition string that was submitted.
        detail: The engine's diagnostic.
    """

    def __init__(self, definition: str, detail: str):
        self.definition = definition
        self.detail = detail
        msg = f"cannot initialise projection {definition!r}: {detail}"
        super().__init__(msg)


class OutOfDomainError(DcsGeoError, ValueError):
    """Raised when a planar point lies outside the projection's valid domain.

    Attributes:
        point: The (easting, northing) pair handed to the engine.
        detail: The engine's diagnostic, if it gave one.
    """

    def __init__(self, point, detail: str = ""):
        self.point = point
        self.detail = detail
        msg = f"point {point} is outside the projection domain"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
