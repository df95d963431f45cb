"""CLI entry point: registers all subcommands."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="bellavista",
    help="Bellavista - disk usage treemaps",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"bellavista {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Scan a directory and map its disk usage as nested rectangles."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


def main() -> None:
    app()


# Import subcommands to register them
from .layout import layout as _layout  # noqa: F401, E402
from .report import report as _report  # noqa: F401, E402
from .scan import scan as _scan  # noqa: F401, E402
