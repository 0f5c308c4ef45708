"""recursive_category: build hierarchical categories and render them as nested lists."""

from recursive_category.builder import build_category_tree
from recursive_category.exceptions import (
    OrphanCategoryError,
    ParseError,
    RecursiveCategoryError,
)
from recursive_category.html_parser import parse_category_html
from recursive_category.html_utils import escape_html
from recursive_category.schemas import CategoryNode, CategoryRecord
from recursive_category.tree import RecursiveCategory

__all__ = [
    "CategoryNode",
    "CategoryRecord",
    "OrphanCategoryError",
    "ParseError",
    "RecursiveCategory",
    "RecursiveCategoryError",
    "build_category_tree",
    "escape_html",
    "parse_category_html",
]
