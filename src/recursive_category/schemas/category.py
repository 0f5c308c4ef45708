"""Category tree node."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field

from recursive_category.schemas.records import CategoryRecord


@dataclass(eq=False)
class CategoryNode:
    """A single category with its ordered children.

    Nodes compare by identity. ``id`` should be unique across the tree for
    lookups to be deterministic, but nothing here enforces it.
    """

    id: int
    name: str
    children: list[CategoryNode] = field(default_factory=list)
    _parent_ref: weakref.ReferenceType[CategoryNode] | None = field(
        default=None, init=False, repr=False
    )

    @property
    def parent(self) -> CategoryNode | None:
        """The node this one was attached to, or None for a root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def attach_child(self, child: CategoryNode) -> None:
        """Link ``child`` under this node, after any existing children."""
        child._parent_ref = weakref.ref(self)
        self.children.append(child)

    def to_record(self) -> CategoryRecord:
        parent = self.parent
        return CategoryRecord(
            id=self.id,
            name=self.name,
            parent_id=parent.id if parent is not None else None,
        )
