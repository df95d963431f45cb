"""Root of the Bellavista error hierarchy.

Scanning and configuration failures both derive from ``BellavistaError``; the
CLI catches it at the command boundary, prints it and exits with status 1.
Layout code never raises it.
"""

from typing import Dict, Optional


class BellavistaError(Exception):
    """A failure the user can act on, such as an unreadable directory or a bad config value.

    ``details`` holds key/value context (offending path, config key, reason)
    and is appended to the message when the error is printed.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
