"""Shared CLI helpers."""

import logging
from pathlib import Path
from typing import Optional

import humanize
import typer
from rich.console import Console

from ..config import VisualizerConfig, load_config
from ..exceptions import BellavistaError
from ..logging_config import setup_logging
from ..scanning import Node, scan

console = Console()


def format_size(size: int) -> str:
    return humanize.naturalsize(size, binary=True)


def resolve_config(ctx: typer.Context, **overrides) -> VisualizerConfig:
    """Build config from the global ``--config`` option plus command flags."""
    config_file: Optional[Path] = (ctx.obj or {}).get("config")
    try:
        return load_config(config_file=config_file, **overrides)
    except BellavistaError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)


def configure_logging(config: VisualizerConfig) -> logging.Logger:
    """Install log handlers at the level the resolved config asks for."""
    return setup_logging(
        verbose=config.verbosity == "verbose",
        quiet=config.verbosity == "quiet",
    )


def scan_or_exit(path: Path) -> Node:
    """Scan ``path``; report failure and exit 1 instead of raising."""
    try:
        with console.status(f"Scanning {path}..."):
            return scan(path)
    except BellavistaError as e:
        console.print(f"[red]Scan failed:[/red] {e}")
        console.print("Choose another directory and try again.")
        raise typer.Exit(1)
