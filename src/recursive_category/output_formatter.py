"""Render category trees as nested HTML lists and Markdown outlines."""

from __future__ import annotations

from typing import Iterable, Iterator

from recursive_category.html_utils import escape_html
from recursive_category.schemas import CategoryNode

# Both renderers walk with an explicit stack of sibling iterators so depth is
# not limited by the interpreter recursion limit.


def render_category_list(categories: Iterable[CategoryNode]) -> str:
    """Render categories and their subtrees as a nested ``<ul>`` string.

    Each item is ``<li>name</li>``; a node with children is followed by its
    own nested list. Leaves emit no nested list, and an empty input renders
    as ``<ul></ul>``.
    """
    parts: list[str] = ["<ul>"]
    stack: list[Iterator[CategoryNode]] = [iter(categories)]
    while stack:
        category = next(stack[-1], None)
        if category is None:
            stack.pop()
            parts.append("</ul>")
            continue
        parts.append("<li>" + escape_html(category.name) + "</li>")
        if category.children:
            parts.append("<ul>")
            stack.append(iter(category.children))
    return "".join(parts)


def render_outline(categories: Iterable[CategoryNode], indent: int = 0) -> str:
    """Render categories as a Markdown bullet list, two spaces per level."""
    lines: list[str] = []
    stack: list[Iterator[CategoryNode]] = [iter(categories)]
    while stack:
        category = next(stack[-1], None)
        if category is None:
            stack.pop()
            continue
        depth = indent + len(stack) - 1
        lines.append("  " * depth + "- " + category.name)
        if category.children:
            stack.append(iter(category.children))
    return "\n".join(lines)
