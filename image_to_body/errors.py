"""Typed failures raised by the conversion functions.

Every error here is a caller-input violation. They all derive from
ValueError so existing ``except ValueError`` handlers keep working.
"""


class ConversionError(ValueError):
    """Base class for invalid input to a pixel/angle conversion."""


class DegenerateExtentError(ConversionError):
    """Image width (and so half width) is zero."""


class OutOfRangeError(ConversionError):
    """A pixel position lies outside ``[0, width]`` or is not finite."""


class DegenerateFieldOfViewError(ConversionError):
    """Field of view is not in the open interval (0, pi) radians."""


class DegenerateResolutionError(ConversionError):
    """Tangent-per-pixel constant is not finite, or zero where it divides."""
