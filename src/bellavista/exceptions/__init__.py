"""Exception hierarchy for Bellavista."""

from .base import BellavistaError
from .config import ConfigurationError, InvalidConfigError
from .scanning import ScanError, ScanningError

__all__ = [
    "BellavistaError",
    "ScanningError",
    "ScanError",
    "ConfigurationError",
    "InvalidConfigError",
]
