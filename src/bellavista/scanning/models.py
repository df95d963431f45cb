"""Data models for the scanning layer."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Node:
    """A file (leaf) or directory (internal node) with its aggregate byte size.

    Leaves have ``children is None`` and ``size >= 1``. Directories carry a
    tuple of children sorted non-increasing by size, possibly empty, and
    ``size`` equal to the children's total.
    """

    path: str
    size: int
    children: Optional[tuple["Node", ...]] = None

    @classmethod
    def leaf(cls, path: str, size: int) -> "Node":
        """Leaf for a regular file; zero-byte files are promoted to size 1."""
        if size < 0:
            raise ValueError(f"Negative file size for {path}: {size}")
        return cls(path=path, size=max(size, 1))

    @classmethod
    def directory(cls, path: str, children: Iterable["Node"]) -> "Node":
        """Internal node with aggregated size and size-sorted children.

        Equal sizes keep their input order.
        """
        ordered = tuple(sorted(children, key=lambda c: c.size, reverse=True))
        return cls(path=path, size=sum(c.size for c in ordered), children=ordered)

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    def walk(self) -> Iterator["Node"]:
        """Pre-order traversal including this node."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))

    def leaves(self) -> Iterator["Node"]:
        return (node for node in self.walk() if node.is_leaf)
