"""Unit family foundation for angles and planar distances.

Every measurement handed to the offset utilities belongs to a unit family
(angle, length). A class that sets ``IS_FAMILY_ROOT`` becomes the ``ROOT`` of
itself and every subclass below it; an angle and a length never share a
``ROOT``.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class NauticalMile(Length):
    ...     pass
    >>> NauticalMile.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for all unit types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the root unit of a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Subclasses of a root inherit its ROOT attribute unchanged.
        if cls.__dict__.get("IS_FAMILY_ROOT", False) or not hasattr(cls, "ROOT"):
            cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type):
        """Reject a unit from another family.

        Args:
            unit_type: The other operand's type.

        Raises:
            TypeError: If ``unit_type`` is not a unit of ``cls``'s family.
        """
        if getattr(unit_type, "ROOT", None) is not cls.ROOT:
            msg = f"expected a {cls.ROOT.__name__} unit, got {unit_type.__name__}"
            raise TypeError(msg)
