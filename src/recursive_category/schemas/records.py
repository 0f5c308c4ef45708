"""Flat category record model."""

from __future__ import annotations

from pydantic import BaseModel


class CategoryRecord(BaseModel):
    """One category as a flat row.

    Attributes:
        id: Category identifier.
        name: Category name.
        parent_id: Identifier of the parent category, or None for a root.
    """

    id: int
    name: str
    parent_id: int | None = None
