"""Deterministic per-path colors.

Python's built-in ``hash`` is salted per process, so colors are derived from
a blake2b digest instead and stay the same across runs.
"""

import hashlib
from typing import NamedTuple


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    @property
    def hex(self) -> str:
        """``#rrggbb`` form for SVG/CSS fills (alpha dropped)."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


def path_hash(path: str) -> int:
    """Stable unsigned 64-bit hash of ``path``."""
    digest = hashlib.blake2b(path.encode("utf-8", "surrogateescape"), digest_size=8).digest()
    return int.from_bytes(digest, "big")


def color(path: str) -> Color:
    """Color for a leaf: red varies with the path, blue is fixed, opaque."""
    return Color(path_hash(path) % 255, 0x00, 255, 255)
