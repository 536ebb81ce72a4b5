"""
Angular-resolution based pixel/tangent conversion.

A locally linear model: the tangent offset from the optical axis is the
pixel's distance from the image centre times a calibrated constant ``k``
(tangent change per pixel). No trigonometry is involved and the offset is
unbounded, so this only makes sense where the per-pixel pitch is already
calibrated.
"""

from __future__ import annotations

from image_to_body.angle import Angle
from image_to_body.image import ImageExtent, PixelCoordinate
from image_to_body.types import TangentOffset, Unitless
from image_to_body.validation import (
    RangePolicy,
    quantize_pixel,
    require_extent,
    require_finite,
    require_pixel_in_extent,
    require_resolution,
)


def _raw_value(tangent: Angle | float) -> float:
    # An Angle's stored value is used as-is, whatever its unit, not tan(angle)
    if isinstance(tangent, Angle):
        return require_finite(tangent.value, "tangent offset")
    return require_finite(tangent, "tangent offset")


def tangent_offset_from_pixel(
    pixel: PixelCoordinate,
    extent: ImageExtent,
    k: Unitless,
    *,
    policy: RangePolicy = RangePolicy.RAISE,
) -> TangentOffset:
    """
    Tangent offset of a pixel from the image centre.

    Args:
        pixel: Pixel position along the axis.
        extent: Image the pixel belongs to.
        k: Tangent change per pixel.
        policy: Handling of pixels beyond ``extent.width``.

    Returns:
        ``(pixel - half_width) * k``; exactly 0 at the centre.

    Raises:
        DegenerateExtentError: If the extent has zero width.
        DegenerateResolutionError: If k is not finite.
        OutOfRangeError: If the pixel is beyond the extent under RangePolicy.RAISE.
    """
    require_extent(extent)
    k = require_resolution(k)
    pixel = require_pixel_in_extent(pixel, extent, policy)
    return TangentOffset((pixel.value - extent.half_width) * k)


def pixel_from_tangent_angle(
    angle: Angle | float,
    extent: ImageExtent,
    k: Unitless,
    *,
    policy: RangePolicy = RangePolicy.RAISE,
) -> PixelCoordinate:
    """
    Pixel for a tangent offset carried in an Angle.

    The Angle's raw stored value is read directly as a tangent offset; it is
    not passed through ``tan()`` and its unit tag is ignored. A bare float
    is accepted as the same scalar.

    Args:
        angle: Tangent offset, as an Angle's raw value or a float.
        extent: Image to place the pixel in.
        k: Tangent change per pixel.
        policy: Handling of positions outside ``[0, width]``.

    Returns:
        ``round(value / k + half_width)``, ties away from zero.

    Raises:
        ConversionError: If the offset is not finite.
        DegenerateExtentError: If the extent has zero width.
        DegenerateResolutionError: If k is zero or not finite.
        OutOfRangeError: If the pixel falls outside the extent under RangePolicy.RAISE.
    """
    raw = _raw_value(angle)
    require_extent(extent)
    k = require_resolution(k, nonzero=True)
    return quantize_pixel(raw / k + extent.half_width, extent, policy)


def tangent_offset_from_pixel_clipped(
    pixel: PixelCoordinate,
    extent: ImageExtent,
    k: Unitless,
    clip_threshold: Unitless,
    *,
    policy: RangePolicy = RangePolicy.RAISE,
) -> TangentOffset:
    """
    Tangent offset of a pixel with a dead-zone around the centre.

    Pixels closer to the centre than ``clip_threshold * half_width`` return
    exactly 0, so detection jitter near the optical axis does not drive the
    actuator. Elsewhere the result equals `tangent_offset_from_pixel`.

    Args:
        pixel: Pixel position along the axis.
        extent: Image the pixel belongs to.
        k: Tangent change per pixel.
        clip_threshold: Dead-zone half-size as a fraction of ``half_width``
            (0.05 = 5%).
        policy: Handling of pixels beyond ``extent.width``.

    Raises:
        ConversionError: If clip_threshold is not finite.
        DegenerateExtentError: If the extent has zero width.
        DegenerateResolutionError: If k is not finite.
        OutOfRangeError: If the pixel is beyond the extent under RangePolicy.RAISE.
    """
    clip_threshold = require_finite(clip_threshold, "clip threshold")
    require_extent(extent)
    k = require_resolution(k)
    pixel = require_pixel_in_extent(pixel, extent, policy)

    diff = pixel.value - extent.half_width
    if abs(diff) < clip_threshold * extent.half_width:
        return TangentOffset(0.0)
    return TangentOffset(diff * k)


def pixel_from_tangent_offset(
    tangent: Angle | float,
    extent: ImageExtent,
    k: Unitless,
    round_to_nearest: bool,
    *,
    policy: RangePolicy = RangePolicy.RAISE,
) -> PixelCoordinate:
    """
    Pixel for a tangent offset, with an explicit rounding policy.

    Args:
        tangent: Tangent offset, as an Angle's raw value or a float.
        extent: Image to place the pixel in.
        k: Tangent change per pixel.
        round_to_nearest: Round to the nearest pixel (ties away from zero)
            when True; truncate toward zero when False.
        policy: Handling of positions outside ``[0, width]``.

    Raises:
        ConversionError: If the offset is not finite.
        DegenerateExtentError: If the extent has zero width.
        DegenerateResolutionError: If k is zero or not finite.
        OutOfRangeError: If the pixel falls outside the extent under RangePolicy.RAISE.
    """
    raw = _raw_value(tangent)
    require_extent(extent)
    k = require_resolution(k, nonzero=True)
    return quantize_pixel(raw / k + extent.half_width, extent, policy, round_to_nearest)
