"""Shared fixtures for Bellavista tests."""

from pathlib import Path

import pytest

from bellavista.geometry import Rect
from bellavista.scanning import Node


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


def flat_tree(sizes, root="root"):
    """Directory with one leaf per size, named f0, f1, ..."""
    return Node.directory(root, [Node.leaf(f"{root}/f{i}", s) for i, s in enumerate(sizes)])


def write_file(path: Path, size: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def squarify_sizes():
    """Sizes from the worked example in the squarified treemap paper."""
    return [6, 6, 4, 3, 2, 2, 1]


@pytest.fixture
def paper_bounds():
    return Rect(0.0, 0.0, 6.0, 4.0)


@pytest.fixture
def nested_tree():
    """Three levels deep, mixed files and directories, one empty directory."""
    src = Node.directory(
        "root/src",
        [
            Node.leaf("root/src/main.py", 400),
            Node.leaf("root/src/util.py", 120),
            Node.directory(
                "root/src/pkg",
                [
                    Node.leaf("root/src/pkg/a.py", 90),
                    Node.leaf("root/src/pkg/b.py", 90),
                    Node.leaf("root/src/pkg/c.py", 10),
                ],
            ),
        ],
    )
    docs = Node.directory(
        "root/docs",
        [Node.leaf("root/docs/index.md", 250), Node.leaf("root/docs/empty.md", 0)],
    )
    return Node.directory(
        "root",
        [
            src,
            docs,
            Node.leaf("root/README", 33),
            Node.directory("root/empty", []),
            Node.leaf("root/LICENSE", 700),
        ],
    )


@pytest.fixture
def disk_tree(tmp_path):
    """A small real directory tree on disk.

    Layout::

        root/
          big.bin        (300 bytes)
          empty.txt      (0 bytes)
          sub/
            a.txt        (100 bytes)
            b.txt        (100 bytes)
            deeper/
              c.txt      (50 bytes)
          hollow/        (no entries)
    """
    root = tmp_path / "root"
    write_file(root / "big.bin", 300)
    write_file(root / "empty.txt", 0)
    write_file(root / "sub" / "a.txt", 100)
    write_file(root / "sub" / "b.txt", 100)
    write_file(root / "sub" / "deeper" / "c.txt", 50)
    (root / "hollow").mkdir()
    return root


@pytest.fixture
def make_flat_tree():
    return flat_tree
