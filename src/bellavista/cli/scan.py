"""Scan command: directory sizes without layout."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..scanning import Node
from . import app
from ._common import configure_logging, console, format_size, resolve_config, scan_or_exit


def node_to_dict(node: Node) -> dict:
    """JSON-ready form of a tree; leaves have no ``children`` key."""
    root: dict = {"path": node.path, "size": node.size}
    pending = [(node, root)]
    while pending:
        current, data = pending.pop()
        if current.children is None:
            continue
        data["children"] = []
        for child in current.children:
            child_data = {"path": child.path, "size": child.size}
            data["children"].append(child_data)
            pending.append((child, child_data))
    return root


@app.command()
def scan(
    ctx: typer.Context,
    path: Path = typer.Argument(
        ...,
        help="Directory to scan",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        "-n",
        help="Number of largest entries to list",
        min=1,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the whole tree as JSON",
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
    Scan a directory and list its largest entries.

    [bold cyan]Examples:[/bold cyan]

      bellavista scan ~/Downloads

      bellavista scan . --top 5

      bellavista scan /var/log --json
    """
    config = resolve_config(ctx, top_entries=top, verbose=verbose, quiet=quiet)
    configure_logging(config)
    root = scan_or_exit(path)

    if json_output:
        print(json.dumps(node_to_dict(root), indent=2))
        return

    children = root.children or ()
    console.print()
    console.print(
        f"[bold cyan]{escape(root.path)}[/bold cyan] -- {format_size(root.size)} "
        f"({root.size} bytes) in {len(children)} entries"
    )
    console.print()

    if not children:
        console.print("[dim]Directory is empty.[/dim]")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("Size", justify="right")
    table.add_column("Share", justify="right")
    table.add_column("Type")
    table.add_column("Path")

    for child in children[: config.top_entries]:
        share = child.size / root.size if root.size else 0.0
        kind = "file" if child.is_leaf else "dir"
        table.add_row(format_size(child.size), f"{share:.1%}", kind, escape(child.path))

    console.print(table)
    if len(children) > config.top_entries:
        console.print(f"[dim]... and {len(children) - config.top_entries} more[/dim]")
