"""
Unit type annotations for the pixel/angle conversion functions.

These NewType aliases document which unit a float or int carries in a
function signature. They are erased at runtime, so `Radians(0.5)` is just
`0.5`; the tagged `Angle` value type in `image_to_body.angle` is what
carries a unit at runtime.

Usage Example:
    >>> from image_to_body.types import Pixels, TangentOffset, Unitless
    >>>
    >>> def offset(pixel: Pixels, k: Unitless) -> TangentOffset:
    ...     pass
"""

from typing import NewType

# Angular units
Radians = NewType('Radians', float)
"""Angle in radians (field of view, atan results)"""

Degrees = NewType('Degrees', float)
"""Angle in degrees (configuration and CLI input)"""

# Image coordinate units
Pixels = NewType('Pixels', int)
"""Discrete pixel position or image dimension"""

PixelsFloat = NewType('PixelsFloat', float)
"""Continuous pixel position before quantization (e.g., half width)"""

# Dimensionless quantities
TangentOffset = NewType('TangentOffset', float)
"""Tangent of the angle between a ray and the optical axis"""

Unitless = NewType('Unitless', float)
"""Dimensionless scalar (tangent-per-pixel constant, clip threshold)"""

# Largest value an image dimension or pixel index may take
UINT64_MAX = 2**64 - 1
