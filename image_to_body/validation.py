"""
Boundary validation for the conversion functions.

Every conversion checks its inputs here before doing any arithmetic, so a
degenerate extent, field of view or resolution constant surfaces as a typed
ConversionError instead of a NaN or infinity flowing into an actuator.

Continuous pixel positions are turned back into PixelCoordinate values by
`quantize_pixel`, which never lets a negative or non-finite position wrap
around into a huge unsigned index. What happens to positions outside
``[0, width]`` is chosen by the caller through RangePolicy.
"""

from __future__ import annotations

import logging
import math
from enum import Enum

from image_to_body.angle import Angle, as_radians
from image_to_body.errors import (
    ConversionError,
    DegenerateExtentError,
    DegenerateFieldOfViewError,
    DegenerateResolutionError,
    OutOfRangeError,
)
from image_to_body.image import ImageExtent, PixelCoordinate
from image_to_body.types import Radians

logger = logging.getLogger(__name__)


class RangePolicy(Enum):
    """How pixel positions outside ``[0, width]`` are handled."""

    RAISE = "raise"
    """Raise OutOfRangeError (default)."""

    CLAMP = "clamp"
    """Clamp into ``[0, width]`` and log a warning."""


def parse_range_policy(policy_str: str) -> RangePolicy:
    """Parse a range policy string into a RangePolicy enum.

    Raises:
        ValueError: If policy_str is not a valid policy.
    """
    try:
        return RangePolicy(policy_str.lower())
    except ValueError:
        valid = [p.value for p in RangePolicy]
        raise ValueError(
            f"Invalid range policy '{policy_str}'. Must be one of: {', '.join(valid)}"
        ) from None


def require_extent(extent: ImageExtent) -> None:
    """Reject extents whose half width is zero.

    Raises:
        DegenerateExtentError: If extent.width is 0.
    """
    if extent.width == 0:
        raise DegenerateExtentError(
            f"image width must be positive, got {extent.width}x{extent.height}"
        )


def require_fov(fov: Angle | float) -> Radians:
    """Validate a field of view and return it in radians.

    Args:
        fov: Field of view as an Angle, or a float in radians.

    Returns:
        The field of view in radians.

    Raises:
        DegenerateFieldOfViewError: If fov is not finite or not in (0, pi).
    """
    fov_rad = as_radians(fov)
    if not math.isfinite(fov_rad) or not 0.0 < fov_rad < math.pi:
        raise DegenerateFieldOfViewError(
            f"field of view must be in (0, pi) radians, got {fov_rad}"
        )
    return fov_rad


def require_resolution(k: float, nonzero: bool = False) -> float:
    """Validate the tangent-per-pixel constant.

    Args:
        k: Tangent change per pixel.
        nonzero: Also reject zero (when k is used as a divisor).

    Raises:
        DegenerateResolutionError: If k is not finite, or zero when nonzero is set.
    """
    k = float(k)
    if not math.isfinite(k):
        raise DegenerateResolutionError(f"tangent-per-pixel constant must be finite, got {k}")
    if nonzero and k == 0.0:
        raise DegenerateResolutionError("tangent-per-pixel constant must be non-zero")
    return k


def require_finite(value: float, name: str) -> float:
    """Reject NaN and infinite scalars.

    Raises:
        ConversionError: If value is not finite.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ConversionError(f"{name} must be finite, got {value}")
    return value


def require_pixel_in_extent(
    pixel: PixelCoordinate,
    extent: ImageExtent,
    policy: RangePolicy = RangePolicy.RAISE,
) -> PixelCoordinate:
    """Check that an input pixel lies in ``[0, width]``.

    Returns:
        The pixel, or the pixel clamped to ``width`` under RangePolicy.CLAMP.

    Raises:
        OutOfRangeError: If the pixel is beyond ``width`` under RangePolicy.RAISE.
    """
    if extent.contains(pixel):
        return pixel
    if policy is RangePolicy.RAISE:
        raise OutOfRangeError(
            f"pixel {pixel.value} is outside the image extent [0, {extent.width}]"
        )
    logger.warning(f"Clamping input pixel {pixel.value} to image width {extent.width}")
    return PixelCoordinate(extent.width)


def _round_half_away_from_zero(value: float) -> float:
    """Round to the nearest integer, ties away from zero.

    ``floor(x + 0.5)`` is not used: the addition itself rounds, turning
    0.49999999999999994 into 1 and moving whole numbers above 2**52.
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # exact for doubles; values >= 2**52 are already whole
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value)


def quantize_pixel(
    position: float,
    extent: ImageExtent,
    policy: RangePolicy = RangePolicy.RAISE,
    round_to_nearest: bool = True,
) -> PixelCoordinate:
    """Convert a continuous pixel position into a PixelCoordinate.

    Args:
        position: Continuous pixel position along the axis.
        extent: Image the position belongs to.
        policy: What to do when the result falls outside ``[0, width]``.
        round_to_nearest: Round to nearest (ties away from zero) when True,
            truncate toward zero when False.

    Returns:
        The discrete pixel coordinate.

    Raises:
        OutOfRangeError: If position is NaN, or if the quantized pixel is
            outside ``[0, width]`` under RangePolicy.RAISE.
    """
    if math.isnan(position):
        raise OutOfRangeError("computed pixel position is NaN")

    if math.isinf(position):
        quantized = position
    elif round_to_nearest:
        quantized = _round_half_away_from_zero(position)
    else:
        quantized = float(math.trunc(position))

    if 0.0 <= quantized <= extent.width:
        return PixelCoordinate(int(quantized))

    if policy is RangePolicy.RAISE:
        raise OutOfRangeError(
            f"computed pixel position {position} is outside the image extent [0, {extent.width}]"
        )

    clamped = 0 if quantized < 0.0 else extent.width
    logger.warning(f"Clamping computed pixel position {position} to {clamped}")
    return PixelCoordinate(clamped)
