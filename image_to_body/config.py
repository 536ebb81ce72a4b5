"""
Configuration for a single image axis.

Holds the calibration a caller needs to drive the conversion functions:
image size, field of view, tangent-per-pixel constant, dead-zone and
quantization policies. Loaded from a YAML file with a ``projection``
section:

    projection:
      image_width: 640
      image_height: 480
      fov_deg: 32.0
      pixel_to_tan: 0.0025
      clip_threshold: 0.05
      round_to_nearest: true
      range_policy: raise
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from image_to_body.angle import Angle
from image_to_body.image import ImageExtent
from image_to_body.validation import RangePolicy, parse_range_policy

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "IMAGE_TO_BODY_CONFIG"
"""Environment variable naming the default configuration file"""

DEFAULT_IMAGE_WIDTH = 640
DEFAULT_IMAGE_HEIGHT = 480
DEFAULT_FOV_DEG = 32.0
DEFAULT_PIXEL_TO_TAN = 0.0025

_KNOWN_KEYS = {
    'image_width',
    'image_height',
    'fov_deg',
    'pixel_to_tan',
    'clip_threshold',
    'round_to_nearest',
    'range_policy',
}


@dataclass
class ProjectionConfig:
    """Calibration for converting along one image axis.

    Attributes:
        image_width: Image width in pixels (must be positive).
        image_height: Image height in pixels.
        fov_deg: Full field of view along the axis in degrees, or None when
            only the linear model is calibrated.
        pixel_to_tan: Tangent change per pixel (``k``), or None when only
            the field-of-view model is calibrated.
        clip_threshold: Dead-zone half-size as a fraction of half width.
        round_to_nearest: Rounding policy for tangent-to-pixel conversion.
        range_policy: Handling of pixel positions outside the image.
    """
    image_width: int = DEFAULT_IMAGE_WIDTH
    image_height: int = DEFAULT_IMAGE_HEIGHT
    fov_deg: Optional[float] = DEFAULT_FOV_DEG
    pixel_to_tan: Optional[float] = DEFAULT_PIXEL_TO_TAN
    clip_threshold: float = 0.0
    round_to_nearest: bool = True
    range_policy: RangePolicy = RangePolicy.RAISE

    @property
    def extent(self) -> ImageExtent:
        """Image extent built from the configured dimensions."""
        return ImageExtent(self.image_width, self.image_height)

    @property
    def fov(self) -> Angle:
        """Field of view as a degree-tagged Angle.

        Raises:
            ValueError: If no field of view is configured.
        """
        if self.fov_deg is None:
            raise ValueError("fov_deg is not configured")
        return Angle.from_degrees(self.fov_deg)

    @property
    def k(self) -> float:
        """Tangent-per-pixel constant.

        Raises:
            ValueError: If no constant is configured.
        """
        if self.pixel_to_tan is None:
            raise ValueError("pixel_to_tan is not configured")
        return self.pixel_to_tan

    @classmethod
    def from_yaml(cls, path: str | Path) -> 'ProjectionConfig':
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            ProjectionConfig instance loaded from file

        Raises:
            FileNotFoundError: If configuration file does not exist
            ValueError: If configuration file is malformed or contains invalid values

        Example:
            >>> config = ProjectionConfig.from_yaml('config/projection_config.yaml')
            >>> config.extent
            ImageExtent(width=640, height=480)
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {path}\n"
                f"Please create a configuration file or use get_default_config()"
            )

        logger.debug(f"Loading projection configuration from {config_path}")
        try:
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML configuration file: {e}") from e

        if not data:
            raise ValueError(
                f"Configuration file is empty: {path}\n"
                f"Expected a 'projection' section"
            )

        if not isinstance(data, dict) or 'projection' not in data:
            raise ValueError(
                f"Configuration file missing 'projection' section: {path}\n"
                f"Expected structure: projection:\n  image_width: ...\n  ..."
            )

        config = cls.from_dict(data['projection'])
        logger.info(f"Loaded projection configuration from {config_path}")
        return config

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProjectionConfig':
        """Create configuration from a dictionary.

        Args:
            data: Contents of the ``projection`` section

        Returns:
            ProjectionConfig instance

        Raises:
            ValueError: If a value is missing, of the wrong type, or out of range
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"'projection' section must be a mapping, got {type(data).__name__}"
            )

        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            logger.warning(f"Ignoring unknown projection config keys: {', '.join(sorted(unknown))}")

        image_width = cls._parse_int(data.get('image_width', DEFAULT_IMAGE_WIDTH), 'image_width')
        image_height = cls._parse_int(data.get('image_height', DEFAULT_IMAGE_HEIGHT), 'image_height')
        if image_width <= 0:
            raise ValueError(f"image_width must be positive, got {image_width}")
        if image_height < 0:
            raise ValueError(f"image_height must be non-negative, got {image_height}")

        fov_deg = data.get('fov_deg', DEFAULT_FOV_DEG)
        if fov_deg is not None:
            fov_deg = cls._parse_float(fov_deg, 'fov_deg')
            if not 0.0 < fov_deg < 180.0:
                raise ValueError(f"fov_deg must be in (0, 180), got {fov_deg}")

        pixel_to_tan = data.get('pixel_to_tan', DEFAULT_PIXEL_TO_TAN)
        if pixel_to_tan is not None:
            pixel_to_tan = cls._parse_float(pixel_to_tan, 'pixel_to_tan')
            if pixel_to_tan == 0.0:
                raise ValueError("pixel_to_tan must be non-zero")

        clip_threshold = cls._parse_float(data.get('clip_threshold', 0.0), 'clip_threshold')
        if clip_threshold < 0.0:
            raise ValueError(f"clip_threshold must be non-negative, got {clip_threshold}")

        round_to_nearest = data.get('round_to_nearest', True)
        if not isinstance(round_to_nearest, bool):
            raise ValueError(
                f"round_to_nearest must be a boolean, got {type(round_to_nearest).__name__}"
            )

        range_policy = data.get('range_policy', RangePolicy.RAISE.value)
        if not isinstance(range_policy, str):
            raise ValueError(
                f"range_policy must be a string, got {type(range_policy).__name__}"
            )

        return cls(
            image_width=image_width,
            image_height=image_height,
            fov_deg=fov_deg,
            pixel_to_tan=pixel_to_tan,
            clip_threshold=clip_threshold,
            round_to_nearest=round_to_nearest,
            range_policy=parse_range_policy(range_policy),
        )

    @staticmethod
    def _parse_int(value: Any, name: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        return value

    @staticmethod
    def _parse_float(value: Any, name: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be a number, got {value!r}")
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value}")
        return value

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary for YAML serialization.

        Returns:
            Dictionary suitable for the ``projection`` section
        """
        return {
            'image_width': self.image_width,
            'image_height': self.image_height,
            'fov_deg': self.fov_deg,
            'pixel_to_tan': self.pixel_to_tan,
            'clip_threshold': self.clip_threshold,
            'round_to_nearest': self.round_to_nearest,
            'range_policy': self.range_policy.value,
        }


def get_default_config() -> ProjectionConfig:
    """Get default projection configuration.

    Returns:
        ProjectionConfig for a 640x480 image with a 32 degree field of view
    """
    return ProjectionConfig()


def load_config(path: str | Path | None = None) -> ProjectionConfig:
    """Load configuration from ``path``, the environment, or the defaults.

    Args:
        path: Explicit configuration file. When None, the file named by the
            IMAGE_TO_BODY_CONFIG environment variable is used if set.

    Returns:
        ProjectionConfig instance
    """
    if path is None:
        path = os.getenv(CONFIG_ENV_VAR)
    if not path:
        logger.debug("No projection configuration file given, using defaults")
        return get_default_config()
    return ProjectionConfig.from_yaml(path)
