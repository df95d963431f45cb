"""Directory tree scanner.

Walks a directory depth-first with ``os.scandir`` and builds an immutable
``Node`` tree whose directory sizes are the sums of their children. The walk
keeps its own stack of open directories, so nesting depth is bounded by the
filesystem rather than the interpreter's recursion limit.
"""

import os
from dataclasses import dataclass, field
from typing import Iterator, Union

from ..exceptions import ScanError
from ..logging_config import get_logger
from .models import Node

logger = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class ScanStats:
    """Counters collected during one walk."""

    directories: int = 0
    files: int = 0
    skipped: int = 0


@dataclass
class _OpenDir:
    """A directory whose entries are still being visited."""

    path: str
    entries: Iterator[os.DirEntry]
    children: list = field(default_factory=list)


class TreeScanner:
    """Builds a weighted ``Node`` tree for one directory.

    Regular files become leaves, directories recurse, and everything else
    (symlinks included) is skipped without contributing to any size.
    Entries are visited in name order so equal-sized siblings come out in a
    reproducible order.
    """

    def __init__(self, root: PathLike):
        self.root = os.fspath(root)
        self.stats = ScanStats()

    def scan(self) -> Node:
        """
        Walk the tree under ``root``.

        Returns:
            Root directory node

        Raises:
            ScanError: If any entry cannot be read. The whole scan is aborted.
        """
        self.stats = ScanStats()
        logger.debug(f"Scanning {self.root}")

        result = self._walk()

        logger.info(
            f"Scan complete: {self.stats.directories} directories, {self.stats.files} files, "
            f"{self.stats.skipped} skipped, {result.size} bytes"
        )
        for child in (result.children or ())[:10]:
            logger.debug(f"{child.size:>14}    {child.path}")
        return result

    def _walk(self) -> Node:
        # Post-order: a directory node is built once its last entry is done
        # and handed to the directory below it on the stack.
        stack = [self._open(self.root)]
        while True:
            current = stack[-1]
            entry = next(current.entries, None)

            if entry is None:
                stack.pop()
                node = Node.directory(current.path, current.children)
                logger.debug(
                    f"Visited {current.path}: {len(current.children)} entries, {node.size} bytes"
                )
                if not stack:
                    return node
                stack[-1].children.append(node)
                continue

            try:
                if entry.is_dir(follow_symlinks=False):
                    is_dir = True
                elif entry.is_file(follow_symlinks=False):
                    is_dir = False
                    size = entry.stat(follow_symlinks=False).st_size
                else:
                    self.stats.skipped += 1
                    logger.debug(f"Skipped (not a regular file): {entry.path}")
                    continue
            except OSError as e:
                raise ScanError(entry.path, _reason(e)) from e

            if is_dir:
                stack.append(self._open(entry.path))
            else:
                current.children.append(Node.leaf(entry.path, size))
                self.stats.files += 1

    def _open(self, path: str) -> _OpenDir:
        try:
            with os.scandir(path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise ScanError(path, _reason(e)) from e

        self.stats.directories += 1
        return _OpenDir(path, iter(entries))


def _reason(error: OSError) -> str:
    return error.strerror or str(error)


def scan(path: PathLike) -> Node:
    """Scan ``path`` and return its weighted tree.

    Raises:
        ScanError: On any filesystem error; no partial tree is returned.
    """
    return TreeScanner(path).scan()
