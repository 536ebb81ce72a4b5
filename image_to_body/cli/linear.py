"""Linear (tangent-per-pixel) model CLI commands."""

from pathlib import Path
from typing import Optional

import typer

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
from image_to_body.cli.main import linear_app
from image_to_body.errors import ConversionError
from image_to_body.image import PixelCoordinate
from image_to_body.resolution import (
    pixel_from_tangent_offset,
    tangent_offset_from_pixel,
    tangent_offset_from_pixel_clipped,
)

K_OPTION = typer.Option(None, "--k", help="Tangent change per pixel")


@linear_app.command("pixel-to-offset")
def pixel_to_offset_command(
    pixel: int = typer.Argument(..., help="Pixel position along the axis"),
    config: Optional[Path] = CONFIG_OPTION,
    width: Optional[int] = WIDTH_OPTION,
    height: Optional[int] = HEIGHT_OPTION,
    k: Optional[float] = K_OPTION,
    clip: bool = typer.Option(False, "--clip", help="Apply the centre dead-zone"),
    clip_threshold: Optional[float] = typer.Option(
        None,
        "--clip-threshold",
        help="Dead-zone as a fraction of half width (implies --clip)",
    ),
    clamp: bool = CLAMP_OPTION,
    output_format: OutputFormat = FORMAT_OPTION,
) -> None:
    """
    Tangent offset of a pixel from the image centre.

    Example:
        itb linear pixel-to-offset 360 --width 640 --k 0.0025 --clip-threshold 0.05
    """
    cfg = resolve_config(config, width, height, k=k, clamp=clamp)
    threshold = clip_threshold if clip_threshold is not None else cfg.clip_threshold
    clipped = clip or clip_threshold is not None

    try:
        pixel_coord = PixelCoordinate(pixel)
        if clipped:
            offset = tangent_offset_from_pixel_clipped(
                pixel_coord, cfg.extent, cfg.k, threshold, policy=cfg.range_policy
            )
        else:
            offset = tangent_offset_from_pixel(
                pixel_coord, cfg.extent, cfg.k, policy=cfg.range_policy
            )
    except (ConversionError, ValueError) as e:
        fail(e)

    result = {"pixel": pixel, "tangent_offset": offset}
    if clipped:
        result["clip_threshold"] = threshold
    emit(result, output_format)


@linear_app.command("offset-to-pixel")
def offset_to_pixel_command(
    offset: float = typer.Argument(..., help="Tangent offset from the optical axis"),
    config: Optional[Path] = CONFIG_OPTION,
    width: Optional[int] = WIDTH_OPTION,
    height: Optional[int] = HEIGHT_OPTION,
    k: Optional[float] = K_OPTION,
    round_to_nearest: Optional[bool] = typer.Option(
        None,
        "--round/--truncate",
        help="Round to nearest pixel or truncate (defaults to the config)",
    ),
    clamp: bool = CLAMP_OPTION,
    output_format: OutputFormat = FORMAT_OPTION,
) -> None:
    """
    Pixel for a tangent offset from the image centre.

    Negative offsets need a "--" separator:

        itb linear offset-to-pixel --width 640 --k 0.0025 -- -0.1
    """
    cfg = resolve_config(config, width, height, k=k, clamp=clamp)
    if round_to_nearest is None:
        round_to_nearest = cfg.round_to_nearest

    try:
        pixel = pixel_from_tangent_offset(
            offset, cfg.extent, cfg.k, round_to_nearest, policy=cfg.range_policy
        )
    except (ConversionError, ValueError) as e:
        fail(e)

    emit(
        {
            "tangent_offset": offset,
            "rounding": "nearest" if round_to_nearest else "truncate",
            "pixel": pixel.value,
        },
        output_format,
    )
