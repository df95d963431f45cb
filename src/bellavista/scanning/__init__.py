"""Filesystem scanning into weighted size trees."""

from .models import Node
from .scanner import ScanStats, TreeScanner, scan

__all__ = ["Node", "ScanStats", "TreeScanner", "scan"]
