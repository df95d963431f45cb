"""Scanning exceptions: anything that stops a directory walk."""

from .base import BellavistaError


class ScanningError(BellavistaError):
    """Base class for scan-related errors."""

    pass


class ScanError(ScanningError):
    """Raised when a filesystem entry cannot be read during a scan.

    Covers permission errors, entries that vanish mid-walk and unreadable
    metadata. The scan is aborted; no partial tree is returned.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Cannot scan: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = str(path)
        self.reason = reason
