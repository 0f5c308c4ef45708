"""Hierarchical category forest with lookup and rendering."""

from __future__ import annotations

from typing import Iterator

from recursive_category.output_formatter import render_category_list, render_outline
from recursive_category.schemas import CategoryNode, CategoryRecord


class RecursiveCategory:
    """An ordered forest of categories.

    Categories are added as roots or under an existing category by id, and
    are never removed. Ids are expected to be unique; when they are not, the
    first match in document order wins for every lookup.
    """

    def __init__(self) -> None:
        self._roots: list[CategoryNode] = []

    @property
    def roots(self) -> tuple[CategoryNode, ...]:
        """Root-level categories in insertion order."""
        return tuple(self._roots)

    def add_root_category(self, id: int, name: str) -> None:
        """Append a new category at the root level."""
        self.append_root(CategoryNode(id=id, name=name))

    def append_root(self, category: CategoryNode) -> CategoryNode:
        """Append a freshly built, detached category at the root level.

        Returns the category so callers can attach under it without another
        lookup.
        """
        self._roots.append(category)
        return category

    def add_child_category(self, parent_id: int, id: int, name: str) -> bool:
        """Attach a new category under the category with ``parent_id``.

        Args:
            parent_id: Id of an existing category.
            id: Id of the new category.
            name: Name of the new category.

        Returns:
            True if the parent was found and the child added; False if no
            category has ``parent_id``, in which case nothing changes.
        """
        parent = self.find_category_by_id(parent_id)
        if parent is None:
            return False
        parent.attach_child(CategoryNode(id=id, name=name))
        return True

    def find_category_by_id(self, id: int) -> CategoryNode | None:
        """Return the first category with ``id`` in depth-first pre-order."""
        for category in self.iter_categories():
            if category.id == id:
                return category
        return None

    def iter_categories(self) -> Iterator[CategoryNode]:
        """Yield every category in document order (depth-first, pre-order)."""
        # Explicit stack so deep trees do not hit the recursion limit.
        stack: list[CategoryNode] = list(reversed(self._roots))
        while stack:
            category = stack.pop()
            yield category
            stack.extend(reversed(category.children))

    def render(self) -> str:
        """Render the forest as nested ``<ul>``/``<li>`` markup."""
        return render_category_list(self._roots)

    def render_outline(self) -> str:
        """Render the forest as an indented Markdown bullet list."""
        return render_outline(self._roots)

    def to_records(self) -> list[CategoryRecord]:
        """Flatten the forest into records, parents before children."""
        return [category.to_record() for category in self.iter_categories()]

    def __iter__(self) -> Iterator[CategoryNode]:
        return self.iter_categories()

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_categories())

    def __repr__(self) -> str:
        return f"RecursiveCategory(roots={len(self._roots)}, categories={len(self)})"
