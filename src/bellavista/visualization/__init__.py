"""Visualization layer: self-contained HTML treemap report."""

from .report import generate_report

__all__ = ["generate_report"]
