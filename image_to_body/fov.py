"""
Field-of-view based pixel/angle conversion.

Uses a rectilinear (pinhole) projection: the tangent of the angle to a pixel
grows linearly across the image, from ``-tan(fov/2)`` at pixel 0 to
``+tan(fov/2)`` at pixel ``width``. The angle itself is therefore not linear
in pixel and saturates at ``±fov/2`` towards the edges.

Example:
    >>> from image_to_body import Angle, ImageExtent, PixelCoordinate
    >>> extent = ImageExtent(640, 480)
    >>> fov = Angle.from_degrees(32.0)
    >>> angle = pixel_to_tangent_angle_by_fov(PixelCoordinate(480), extent, fov)
    >>> tangent_to_pixel_by_fov(angle.tangent(), extent, fov)
    PixelCoordinate(value=480)
"""

from __future__ import annotations

import math

from image_to_body.angle import Angle
from image_to_body.image import ImageExtent, PixelCoordinate
from image_to_body.validation import (
    RangePolicy,
    quantize_pixel,
    require_extent,
    require_finite,
    require_fov,
    require_pixel_in_extent,
)


def pixel_to_tangent_angle_by_fov(
    pixel: PixelCoordinate,
    extent: ImageExtent,
    fov: Angle | float,
    *,
    policy: RangePolicy = RangePolicy.RAISE,
) -> Angle:
    """
    Angle between the optical axis and the ray through a pixel.

    Args:
        pixel: Pixel position along the axis.
        extent: Image the pixel belongs to.
        fov: Full field of view along the axis (Angle, or float in radians).
        policy: Handling of pixels beyond ``extent.width``.

    Returns:
        Radian-tagged angle; 0 at the centre pixel, ``±fov/2`` at the edges.

    Raises:
        DegenerateExtentError: If the extent has zero width.
        DegenerateFieldOfViewError: If fov is not in (0, pi).
        OutOfRangeError: If the pixel is beyond the extent under RangePolicy.RAISE.
    """
    require_extent(extent)
    fov_rad = require_fov(fov)
    pixel = require_pixel_in_extent(pixel, extent, policy)

    norm = pixel.normalized(extent)
    half_fov_tan = math.tan(fov_rad / 2.0)
    return Angle.from_radians(math.atan(norm * half_fov_tan))


def tangent_to_pixel_by_fov(
    pixel_tangent: float,
    extent: ImageExtent,
    fov: Angle | float,
    *,
    policy: RangePolicy = RangePolicy.RAISE,
) -> PixelCoordinate:
    """
    Pixel whose ray makes the given tangent with the optical axis.

    Note that this takes the tangent of the angle, not the angle itself:
    pass ``angle.tangent()``, not ``angle``.

    Args:
        pixel_tangent: Tangent of the angle from the optical axis.
        extent: Image to place the pixel in.
        fov: Full field of view along the axis (Angle, or float in radians).
        policy: Handling of positions outside ``[0, width]``.

    Returns:
        Nearest pixel (ties rounded away from zero).

    Raises:
        ConversionError: If pixel_tangent is not finite.
        DegenerateExtentError: If the extent has zero width.
        DegenerateFieldOfViewError: If fov is not in (0, pi).
        OutOfRangeError: If the pixel falls outside the extent under RangePolicy.RAISE.
    """
    pixel_tangent = require_finite(pixel_tangent, "pixel tangent")
    require_extent(extent)
    fov_rad = require_fov(fov)

    half_fov_tan = math.tan(fov_rad / 2.0)
    norm = pixel_tangent / half_fov_tan
    position = norm * extent.half_width + extent.half_width
    return quantize_pixel(position, extent, policy)
