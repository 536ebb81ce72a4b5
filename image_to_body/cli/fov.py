"""Field-of-view model CLI commands."""

from pathlib import Path
from typing import Optional

import typer

from image_to_body.angle import Angle
from image_to_body.cli.common import (
    CLAMP_OPTION,
    CONFIG_OPTION,
    FORMAT_OPTION,
    HEIGHT_OPTION,
    WIDTH_OPTION,
    OutputFormat,
    emit,
    fail,
    resolve_config,
)
from image_to_body.cli.main import fov_app
from image_to_body.errors import ConversionError
from image_to_body.fov import pixel_to_tangent_angle_by_fov, tangent_to_pixel_by_fov
from image_to_body.image import PixelCoordinate

FOV_OPTION = typer.Option(None, "--fov-deg", help="Field of view in degrees")


@fov_app.command("pixel-to-angle")
def pixel_to_angle_command(
    pixel: int = typer.Argument(..., help="Pixel position along the axis"),
    config: Optional[Path] = CONFIG_OPTION,
    width: Optional[int] = WIDTH_OPTION,
    height: Optional[int] = HEIGHT_OPTION,
    fov_deg: Optional[float] = FOV_OPTION,
    clamp: bool = CLAMP_OPTION,
    output_format: OutputFormat = FORMAT_OPTION,
) -> None:
    """
    Angle from the optical axis to a pixel.

    Example:
        itb fov pixel-to-angle 480 --width 640 --fov-deg 32
    """
    cfg = resolve_config(config, width, height, fov_deg, clamp=clamp)
    try:
        angle = pixel_to_tangent_angle_by_fov(
            PixelCoordinate(pixel), cfg.extent, cfg.fov, policy=cfg.range_policy
        )
    except (ConversionError, ValueError) as e:
        fail(e)

    emit(
        {
            "pixel": pixel,
            "angle_deg": angle.degrees,
            "angle_rad": angle.radians,
            "tangent": angle.tangent(),
        },
        output_format,
    )


@fov_app.command("angle-to-pixel")
def angle_to_pixel_command(
    angle_deg: float = typer.Argument(..., help="Angle from the optical axis in degrees"),
    config: Optional[Path] = CONFIG_OPTION,
    width: Optional[int] = WIDTH_OPTION,
    height: Optional[int] = HEIGHT_OPTION,
    fov_deg: Optional[float] = FOV_OPTION,
    clamp: bool = CLAMP_OPTION,
    output_format: OutputFormat = FORMAT_OPTION,
) -> None:
    """
    Pixel whose ray makes the given angle with the optical axis.

    Negative angles need a "--" separator:

        itb fov angle-to-pixel --width 640 --fov-deg 32 -- -10
    """
    cfg = resolve_config(config, width, height, fov_deg, clamp=clamp)
    tangent = Angle.from_degrees(angle_deg).tangent()
    try:
        pixel = tangent_to_pixel_by_fov(tangent, cfg.extent, cfg.fov, policy=cfg.range_policy)
    except (ConversionError, ValueError) as e:
        fail(e)

    emit({"angle_deg": angle_deg, "tangent": tangent, "pixel": pixel.value}, output_format)
