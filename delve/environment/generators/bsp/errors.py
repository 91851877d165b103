"""Exceptions raised by the BSP layout generator."""


class LayoutGenerationError(Exception):
    """Base class for layout generation failures."""


class InvalidParametersError(LayoutGenerationError, ValueError):
    """The initial region or minimum room size is not usable.

    Raised before any partitioning starts.
    """


class InvalidLayoutError(LayoutGenerationError):
    """The partition produced geometry a door cannot be placed in.

    The whole build fails; no partial tree is returned.
    """
