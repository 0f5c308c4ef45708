"""Shared schemas for recursive_category."""

from recursive_category.schemas.category import CategoryNode
from recursive_category.schemas.records import CategoryRecord

__all__ = ["CategoryNode", "CategoryRecord"]
