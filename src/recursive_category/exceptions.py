"""Custom exceptions for recursive_category."""

from __future__ import annotations


class RecursiveCategoryError(Exception):
    """Base exception for recursive_category operations."""


class ParseError(RecursiveCategoryError):
    """Error while turning list markup into a category tree."""


class OrphanCategoryError(RecursiveCategoryError):
    """Records reference parents that never appear in the input."""

    def __init__(self, orphan_ids: list[int]) -> None:
        self.orphan_ids = list(orphan_ids)
        ids = ", ".join(str(orphan_id) for orphan_id in self.orphan_ids)
        super().__init__(f"Unresolved parent for categories: {ids}")
