"""Image extent and pixel coordinate value types."""

from __future__ import annotations

from dataclasses import dataclass

from image_to_body.errors import DegenerateExtentError, OutOfRangeError
from image_to_body.types import UINT64_MAX, Pixels, PixelsFloat


def _validate_index(value: int | float, name: str) -> int:
    """Validate that a pixel index or dimension fits the unsigned 64-bit range.

    Integral floats (e.g. a ``half_width`` of 320.0) are accepted.

    Args:
        value: The value to validate.
        name: Name of the field for error messages.

    Returns:
        The value as a plain int.

    Raises:
        TypeError: If value is not an integer or an integral float.
        OutOfRangeError: If value is negative or exceeds 2**64 - 1.
    """
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got bool")
    if isinstance(value, float):
        if not value.is_integer():
            raise TypeError(f"{name} must be a whole number, got {value}")
        value = int(value)
    elif hasattr(value, "__index__"):
        # numpy integers expose __index__ but are not int subclasses
        value = value.__index__()
    else:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise OutOfRangeError(f"{name} must be non-negative, got {value}")
    if value > UINT64_MAX:
        raise OutOfRangeError(f"{name} exceeds the 64-bit range, got {value}")
    return value


@dataclass(frozen=True)
class ImageExtent:
    """Size of an image frame.

    A zero width is allowed at construction (the default extent is 0x0) but
    every conversion rejects it with DegenerateExtentError.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
    """

    width: Pixels = Pixels(0)
    height: Pixels = Pixels(0)

    def __post_init__(self) -> None:
        """Validate image dimensions."""
        object.__setattr__(self, "width", Pixels(_validate_index(self.width, "width")))
        object.__setattr__(self, "height", Pixels(_validate_index(self.height, "height")))

    @property
    def half_width(self) -> PixelsFloat:
        """Half of the width, not truncated."""
        return PixelsFloat(self.width / 2.0)

    @property
    def half_height(self) -> PixelsFloat:
        """Half of the height, not truncated."""
        return PixelsFloat(self.height / 2.0)

    def contains(self, pixel: PixelCoordinate) -> bool:
        """Whether ``pixel`` lies in ``[0, width]``."""
        return pixel.value <= self.width


@dataclass(frozen=True)
class PixelCoordinate:
    """Integer position along one image axis.

    Whole-number floats are accepted, so ``PixelCoordinate(extent.half_width)``
    names the centre pixel of an even-width image. For odd widths the centre
    falls between two pixels and that call raises TypeError.

    Attributes:
        value: Pixel index, 0 at the left edge.
    """

    value: Pixels

    def __post_init__(self) -> None:
        """Validate the pixel index."""
        object.__setattr__(self, "value", Pixels(_validate_index(self.value, "pixel value")))

    def normalized(self, extent: ImageExtent) -> float:
        """Map the pixel to ``[-1, 1]`` across ``extent``.

        Pixel 0 maps to -1, the centre to 0 and ``width`` to +1. Pixels
        beyond ``width`` extrapolate linearly.

        Raises:
            DegenerateExtentError: If the extent has zero width.
        """
        if extent.width == 0:
            raise DegenerateExtentError("cannot normalize against an extent of zero width")
        return self.value / extent.half_width - 1.0
