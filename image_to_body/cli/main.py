"""Main Typer CLI application for pixel/angle conversion."""

import logging

import typer

app = typer.Typer(
    help="Convert between image pixels and aiming angles along one axis",
    no_args_is_help=True,
)

fov_app = typer.Typer(help="Field-of-view model conversions")
linear_app = typer.Typer(help="Linear (tangent-per-pixel) model conversions")
config_app = typer.Typer(help="Configuration commands")

app.add_typer(fov_app, name="fov")
app.add_typer(linear_app, name="linear")
app.add_typer(config_app, name="config")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _register_commands() -> None:
    """
    Import command modules to register commands with their respective apps.

    Commands use decorators like @fov_app.command() which register
    themselves when the module is imported.
    """
    from image_to_body.cli import config_cmds, fov, linear

    # Avoid "imported but unused" warnings by explicitly using the module
    _ = config_cmds
    _ = fov
    _ = linear


_register_commands()


if __name__ == "__main__":
    app()
