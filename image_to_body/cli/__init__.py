"""CLI module for pixel/angle conversion.

Provides the `itb` command-line interface for converting detections between
pixel positions and aiming angles.
"""

from image_to_body.cli.main import app

__all__ = ["app"]
