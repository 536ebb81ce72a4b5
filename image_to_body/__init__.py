"""
Pixel to body-frame angle conversion.

This package converts between discrete pixel positions along one image axis
and angular offsets from the camera's optical axis, so that a detection's
pixel location can drive a gimbal, turret or pan/tilt head, and an aiming
angle can be drawn back onto the image.

Two conversion models are provided:
    - Field of view: rectilinear (pinhole) projection from the full FOV
    - Angular resolution: linear model from a calibrated tangent-per-pixel
      constant ``k``

Example Usage:
    >>> from image_to_body import (
    ...     Angle,
    ...     ImageExtent,
    ...     PixelCoordinate,
    ...     pixel_to_tangent_angle_by_fov,
    ...     tangent_offset_from_pixel_clipped,
    ... )
    >>>
    >>> extent = ImageExtent(width=640, height=480)
    >>> angle = pixel_to_tangent_angle_by_fov(
    ...     PixelCoordinate(480), extent, Angle.from_degrees(32.0)
    ... )
    >>> print(f"Aim at {angle.degrees:.2f} deg")
    >>>
    >>> # Dead-zone of 5% of half width around the centre
    >>> tangent_offset_from_pixel_clipped(PixelCoordinate(330), extent, 0.0025, 0.05)
    0.0

All conversions are pure functions. Invalid input (zero-width images,
degenerate fields of view, pixels that fall outside the image) raises a
ConversionError subclass rather than producing NaN or a wrapped index.
"""

# Value types
from image_to_body.angle import Angle, AngleUnit, to_degrees, to_radians
from image_to_body.image import ImageExtent, PixelCoordinate

# Errors
from image_to_body.errors import (
    ConversionError,
    DegenerateExtentError,
    DegenerateFieldOfViewError,
    DegenerateResolutionError,
    OutOfRangeError,
)

# Conversions
from image_to_body.fov import pixel_to_tangent_angle_by_fov, tangent_to_pixel_by_fov
from image_to_body.resolution import (
    pixel_from_tangent_angle,
    pixel_from_tangent_offset,
    tangent_offset_from_pixel,
    tangent_offset_from_pixel_clipped,
)
from image_to_body.validation import RangePolicy

# Configuration
from image_to_body.config import ProjectionConfig, get_default_config, load_config

# Define public API
__all__ = [
    # Value types
    'Angle',
    'AngleUnit',
    'ImageExtent',
    'PixelCoordinate',
    'to_degrees',
    'to_radians',

    # Errors
    'ConversionError',
    'DegenerateExtentError',
    'DegenerateFieldOfViewError',
    'DegenerateResolutionError',
    'OutOfRangeError',

    # Conversions
    'pixel_to_tangent_angle_by_fov',
    'tangent_to_pixel_by_fov',
    'tangent_offset_from_pixel',
    'pixel_from_tangent_angle',
    'tangent_offset_from_pixel_clipped',
    'pixel_from_tangent_offset',
    'RangePolicy',

    # Configuration
    'ProjectionConfig',
    'get_default_config',
    'load_config',
]

# Package metadata
__version__ = '0.1.0'
__description__ = 'Pixel to body-frame angle conversion for image-based aiming'
