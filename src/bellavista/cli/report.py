"""Report CLI command -- generate an interactive HTML treemap."""

from pathlib import Path
from typing import Optional

import click
import typer

from ..layout import compute_boxes
from ..visualization import generate_report
from . import app
from ._common import configure_logging, console, resolve_config, scan_or_exit


@app.command()
def report(
    ctx: typer.Context,
    path: Path = typer.Argument(
        ...,
        help="Directory to scan",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    output: Path = typer.Option(
        Path("bellavista-report.html"),
        "--output",
        "-o",
        help="Output HTML file path",
    ),
    width: Optional[float] = typer.Option(None, "--width", "-W", help="Treemap width", min=0),
    height: Optional[float] = typer.Option(None, "--height", "-H", help="Treemap height", min=0),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Layout engine: squarify | split",
        click_type=click.Choice(["squarify", "split"], case_sensitive=False),
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress logging",
    ),
):
    """
    Generate an interactive HTML treemap of a directory.

    Hover a rectangle to see its path and size; click to copy the path.

    [bold cyan]Examples:[/bold cyan]

      bellavista report ~/Downloads

      bellavista report . --output usage.html --width 1600 --height 900
    """
    config = resolve_config(
        ctx,
        width=width,
        height=height,
        layout_mode=mode.lower() if mode else None,
        verbose=verbose,
        quiet=quiet,
    )
    logger = configure_logging(config)
    root = scan_or_exit(path)

    boxes = compute_boxes(root, config.bounds, config.layout_mode)
    logger.debug(f"Laid out {len(boxes)} boxes for {root.path}")

    try:
        report_path = generate_report(
            root,
            boxes,
            output_path=str(output),
            width=config.width,
            height=config.height,
            title=config.report_title,
        )
    except OSError as e:
        console.print(f"[red]Error:[/red] cannot write report: {e}")
        raise typer.Exit(1)

    console.print(f"\nReport saved to: [bold green]{report_path}[/bold green]")
