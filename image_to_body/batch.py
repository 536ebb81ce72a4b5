"""
Vectorized forward conversions for arrays of detections.

Same models and validation as `image_to_body.fov` and
`image_to_body.resolution`, applied to a whole array of pixel positions at
once. Results agree element-wise with the scalar functions.
"""

from __future__ import annotations

import logging

import numpy as np

from image_to_body.angle import Angle
from image_to_body.errors import OutOfRangeError
from image_to_body.image import ImageExtent
from image_to_body.validation import (
    RangePolicy,
    require_extent,
    require_finite,
    require_fov,
    require_resolution,
)

logger = logging.getLogger(__name__)


def _validate_pixels(
    pixels: np.ndarray | list[int],
    extent: ImageExtent,
    policy: RangePolicy,
) -> np.ndarray:
    """Validate pixel indices and return them as a float64 array.

    Raises:
        TypeError: If the array does not hold integers.
        OutOfRangeError: If any pixel is negative, or beyond the extent
            under RangePolicy.RAISE.
    """
    arr = np.asarray(pixels)
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"pixel array must hold integers, got dtype {arr.dtype}")
    arr = arr.astype(np.float64)

    if np.any(arr < 0):
        raise OutOfRangeError("pixel array contains negative values")

    beyond = arr > extent.width
    if np.any(beyond):
        if policy is RangePolicy.RAISE:
            raise OutOfRangeError(
                f"{int(np.count_nonzero(beyond))} pixel(s) outside the image extent "
                f"[0, {extent.width}]"
            )
        logger.warning(
            f"Clamping {int(np.count_nonzero(beyond))} pixel(s) to image width {extent.width}"
        )
        arr = np.minimum(arr, extent.width)
    return arr


def tangent_angles_by_fov(
    pixels: np.ndarray | list[int],
    extent: ImageExtent,
    fov: Angle | float,
    *,
    policy: RangePolicy = RangePolicy.RAISE,
) -> np.ndarray:
    """
    Angles (radians) to each pixel using the field-of-view model.

    Args:
        pixels: Integer pixel positions, any shape.
        extent: Image the pixels belong to.
        fov: Full field of view along the axis (Angle, or float in radians).
        policy: Handling of pixels beyond ``extent.width``.

    Returns:
        float64 array of angles in radians, same shape as ``pixels``.
    """
    require_extent(extent)
    fov_rad = require_fov(fov)
    arr = _validate_pixels(pixels, extent, policy)

    norm = arr / extent.half_width - 1.0
    return np.arctan(norm * np.tan(fov_rad / 2.0))


def tangent_offsets_from_pixels(
    pixels: np.ndarray | list[int],
    extent: ImageExtent,
    k: float,
    clip_threshold: float = 0.0,
    *,
    policy: RangePolicy = RangePolicy.RAISE,
) -> np.ndarray:
    """
    Tangent offsets of each pixel using the linear model.

    Args:
        pixels: Integer pixel positions, any shape.
        extent: Image the pixels belong to.
        k: Tangent change per pixel.
        clip_threshold: Dead-zone half-size as a fraction of ``half_width``;
            0 disables the dead-zone.
        policy: Handling of pixels beyond ``extent.width``.

    Returns:
        float64 array of tangent offsets, same shape as ``pixels``.
    """
    clip_threshold = require_finite(clip_threshold, "clip threshold")
    require_extent(extent)
    k = require_resolution(k)
    arr = _validate_pixels(pixels, extent, policy)

    diff = arr - extent.half_width
    offsets = diff * k
    dead_zone = np.abs(diff) < clip_threshold * extent.half_width
    return np.where(dead_zone, 0.0, offsets)
