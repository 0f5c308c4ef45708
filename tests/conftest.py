"""Test setup for recursive_category."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from recursive_category import RecursiveCategory  # noqa: E402


@pytest.fixture
def empty_tree() -> RecursiveCategory:
    """A tree with no categories."""
    return RecursiveCategory()


@pytest.fixture
def shop_tree() -> RecursiveCategory:
    """Two roots with a few levels of children.

    Electronics (1)
        Phones (2)
            Android (4)
            iPhone (5)
        Laptops (3)
    Books (6)
        Fiction (7)
    """
    tree = RecursiveCategory()
    tree.add_root_category(1, "Electronics")
    tree.add_child_category(1, 2, "Phones")
    tree.add_child_category(1, 3, "Laptops")
    tree.add_child_category(2, 4, "Android")
    tree.add_child_category(2, 5, "iPhone")
    tree.add_root_category(6, "Books")
    tree.add_child_category(6, 7, "Fiction")
    return tree
