"""Configuration CLI commands."""

import json
from pathlib import Path
from typing import Optional

import typer

from image_to_body.cli.common import CONFIG_OPTION, OutputFormat, dump_yaml, resolve_config
from image_to_body.cli.main import config_app


@config_app.command("show")
def show_command(
    config: Optional[Path] = CONFIG_OPTION,
    output_format: OutputFormat = typer.Option(
        OutputFormat.HUMAN,
        "--format",
        "-f",
        help="Output format (human prints YAML)",
    ),
) -> None:
    """
    Print the effective projection configuration.

    Example:
        itb config show --config config/projection_config.yaml
    """
    cfg = resolve_config(config)
    data = {"projection": cfg.to_dict()}

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(data, indent=2))
    else:
        typer.echo(dump_yaml(data), nl=False)
