"""Parse nested HTML list markup into a category tree."""

from __future__ import annotations

from itertools import count
from typing import Iterator

from recursive_category.config import RECURSIVE_CATEGORY_HTML_PARSER
from recursive_category.exceptions import ParseError
from recursive_category.html_utils import LIST_TAGS, find_list_root
from recursive_category.schemas import CategoryNode
from recursive_category.tree import RecursiveCategory
from recursive_category.utils.logging_config import get_logger

try:
    from bs4 import BeautifulSoup
    from bs4.element import Comment, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = get_logger(__name__)

# Tags that open a new item scope; text and lists below them belong elsewhere.
_SCOPE_TAGS = ["li", *LIST_TAGS]


def parse_category_html(html: str, *, start_id: int = 1) -> RecursiveCategory:
    """Build a category tree from nested ``<ul>``/``<ol>`` markup.

    Nested lists may sit anywhere inside their ``<li>`` (also wrapped in
    other elements) or directly after it, which is the shape
    :meth:`RecursiveCategory.render` produces. Markup carries no ids, so
    categories are numbered in document order from ``start_id``.

    Raises:
        ParseError: If the markup holds no list, or a nested list has no
            item before it.
    """
    soup = BeautifulSoup(html, RECURSIVE_CATEGORY_HTML_PARSER)
    root = find_list_root(soup)
    if root is None:
        raise ParseError("No <ul> or <ol> element found in markup")

    tree = RecursiveCategory()
    ids = count(start_id)
    _collect_items(root, tree, parent=None, ids=ids)

    logger.debug(
        "Parsed category markup",
        extra={"categories": len(tree), "roots": len(tree.roots)},
    )
    return tree


def _collect_items(
    list_tag: Tag,
    tree: RecursiveCategory,
    *,
    parent: CategoryNode | None,
    ids: Iterator[int],
) -> None:
    previous: CategoryNode | None = None
    for child in list_tag.children:
        if not isinstance(child, Tag):
            continue
        if child.name == "li":
            category = CategoryNode(id=next(ids), name=_item_text(child))
            if parent is None:
                tree.append_root(category)
            else:
                parent.attach_child(category)
            for nested in _nested_lists(child):
                _collect_items(nested, tree, parent=category, ids=ids)
            previous = category
        elif child.name in LIST_TAGS:
            if previous is None:
                raise ParseError("Nested list has no preceding <li> to attach to")
            _collect_items(child, tree, parent=previous, ids=ids)


def _nested_lists(item: Tag) -> list[Tag]:
    """Lists anywhere below ``item`` that are not inside another item or list."""
    return [
        nested
        for nested in item.find_all(list(LIST_TAGS))
        if nested.find_parent(_SCOPE_TAGS) is item
    ]


def _item_text(item: Tag) -> str:
    """Text of an ``<li>`` without the text of nested lists."""
    parts = [
        str(text)
        for text in item.find_all(string=True)
        if not isinstance(text, Comment) and text.find_parent(_SCOPE_TAGS) is item
    ]
    return "".join(parts).strip()
