"""Shared option handling and output formatting for CLI commands."""

import json
from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import typer
import yaml

from image_to_body.config import ProjectionConfig, load_config
from image_to_body.validation import RangePolicy


class OutputFormat(str, Enum):
    """Output format options."""

    HUMAN = "human"
    JSON = "json"


CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Projection config YAML (defaults to $IMAGE_TO_BODY_CONFIG)",
)
WIDTH_OPTION = typer.Option(None, "--width", help="Image width in pixels")
HEIGHT_OPTION = typer.Option(None, "--height", help="Image height in pixels")
CLAMP_OPTION = typer.Option(
    False,
    "--clamp",
    help="Clamp out-of-image pixels instead of failing",
)
FORMAT_OPTION = typer.Option(
    OutputFormat.HUMAN,
    "--format",
    "-f",
    help="Output format",
)


def resolve_config(
    config_path: Optional[Path],
    width: Optional[int] = None,
    height: Optional[int] = None,
    fov_deg: Optional[float] = None,
    k: Optional[float] = None,
    clamp: bool = False,
) -> ProjectionConfig:
    """Load configuration and apply command-line overrides.

    Exits with status 1 if the configuration cannot be loaded.
    """
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    overrides: Dict[str, Any] = {}
    if width is not None:
        overrides["image_width"] = width
    if height is not None:
        overrides["image_height"] = height
    if fov_deg is not None:
        overrides["fov_deg"] = fov_deg
    if k is not None:
        overrides["pixel_to_tan"] = k
    if clamp:
        overrides["range_policy"] = RangePolicy.CLAMP
    return replace(config, **overrides)


def emit(result: Dict[str, Any], output_format: OutputFormat) -> None:
    """Print a result mapping in the requested format."""
    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(result, indent=2))
        return

    width = max(len(key) for key in result) + 1
    for key, value in result.items():
        if isinstance(value, float):
            value = f"{value:.6f}"
        typer.echo(f"{(key + ':').ljust(width)} {value}")


def dump_yaml(data: Dict[str, Any]) -> str:
    """Serialize a mapping as YAML, preserving key order."""
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False)


def fail(error: Exception) -> None:
    """Report a conversion error and exit with status 1."""
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)
