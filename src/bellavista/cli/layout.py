"""Layout command: compute treemap rectangles for a directory."""

import json
from pathlib import Path
from typing import Optional

import click
import typer
from rich.markup import escape
from rich.table import Table

from ..layout import aspect_ratio_summary, compute_boxes, coverage_error
from . import app
from ._common import configure_logging, console, format_size, resolve_config, scan_or_exit


@app.command()
def layout(
    ctx: typer.Context,
    path: Path = typer.Argument(
        ...,
        help="Directory to scan",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    width: Optional[float] = typer.Option(None, "--width", "-W", help="Bounds width", min=0),
    height: Optional[float] = typer.Option(None, "--height", "-H", help="Bounds height", min=0),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Layout engine: squarify | split",
        click_type=click.Choice(["squarify", "split"], case_sensitive=False),
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        help="Number of boxes to list",
        min=1,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print every box as JSON",
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
    Scan a directory and lay it out as a treemap.

    Lists the largest boxes with their rectangles, followed by aspect ratio
    statistics for the whole layout.

    [bold cyan]Examples:[/bold cyan]

      bellavista layout . --width 1920 --height 1080

      bellavista layout ~/src --mode split --json
    """
    config = resolve_config(
        ctx,
        width=width,
        height=height,
        layout_mode=mode.lower() if mode else None,
        top_entries=limit,
        verbose=verbose,
        quiet=quiet,
    )
    configure_logging(config)
    root = scan_or_exit(path)

    bounds = config.bounds
    boxes = compute_boxes(root, bounds, config.layout_mode)
    stats = aspect_ratio_summary(boxes)

    if json_output:
        output = {
            "root": root.path,
            "size": root.size,
            "mode": config.layout_mode,
            "bounds": bounds.as_tuple(),
            "boxes": [
                {
                    "path": b.path,
                    "size": b.size,
                    "rect": b.rect.as_tuple(),
                    "parent": b.parent.as_tuple() if b.parent is not None else None,
                    "depth": b.depth,
                }
                for b in boxes
            ],
            "aspect_ratio": stats,
            "coverage_error": coverage_error(boxes, bounds),
        }
        print(json.dumps(output, indent=2))
        return

    console.print()
    console.print(
        f"[bold cyan]{escape(root.path)}[/bold cyan] -- {len(boxes)} boxes in "
        f"{bounds.width:g} x {bounds.height:g} ({config.layout_mode})"
    )
    console.print()

    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("Size", justify="right")
    table.add_column("x0", justify="right")
    table.add_column("y0", justify="right")
    table.add_column("x1", justify="right")
    table.add_column("y1", justify="right")
    table.add_column("Path")

    largest = sorted(boxes, key=lambda b: b.size, reverse=True)[: config.top_entries]
    for box in largest:
        r = box.rect
        table.add_row(
            format_size(box.size),
            f"{r.x0:.1f}",
            f"{r.y0:.1f}",
            f"{r.x1:.1f}",
            f"{r.y1:.1f}",
            escape(box.path),
        )
    console.print(table)

    console.print()
    console.print(
        f"Aspect ratio: mean {stats['mean']:.2f}, median {stats['median']:.2f}, "
        f"p90 {stats['p90']:.2f}, max {stats['max']:.2f} over {stats['count']} boxes"
    )
    console.print(f"Coverage error: {coverage_error(boxes, bounds):.2e}")
