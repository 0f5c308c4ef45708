"""Shared HTML helpers for rendering and parsing category lists."""

from __future__ import annotations

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


LIST_TAGS = ("ul", "ol")

# Quote-aware escaping; "'" uses the numeric form so output stays byte-compatible
# with existing renderings.
_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)


def escape_html(text: str) -> str:
    """Escape the five markup-special characters in ``text``.

    Existing entities are escaped again, so ``&amp;`` becomes ``&amp;amp;``.
    """
    return text.translate(_ESCAPE_TABLE)


def find_list_root(soup: BeautifulSoup) -> Tag | None:
    """Find the outermost list element of a document.

    Returns the first ``<ul>`` or ``<ol>`` in document order, or None when
    the markup holds no list.
    """
    return soup.find(list(LIST_TAGS))
