"""Build category trees from flat parent-id records."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from recursive_category.exceptions import OrphanCategoryError
from recursive_category.schemas import CategoryRecord
from recursive_category.tree import RecursiveCategory
from recursive_category.utils.logging_config import get_logger

logger = get_logger(__name__)


def build_category_tree(
    records: Iterable[CategoryRecord | Mapping[str, Any]],
    *,
    strict: bool = False,
) -> RecursiveCategory:
    """Assemble a tree from records that point at their parent by id.

    Records may come in any order: a child listed before its parent is
    retried once the parent has been placed. Within a pass the input order
    is kept, so records sorted parents-first keep their sibling order.

    Args:
        records: ``CategoryRecord`` instances or mappings with ``id``,
            ``name`` and optional ``parent_id``.
        strict: Raise instead of skipping records whose parent never shows up.

    Returns:
        The assembled tree.

    Raises:
        OrphanCategoryError: If ``strict`` and some parents are missing.
        pydantic.ValidationError: If a mapping is not a valid record.
    """
    pending = [_coerce(record) for record in records]
    tree = RecursiveCategory()
    passes = 0

    while pending:
        passes += 1
        unresolved: list[CategoryRecord] = []
        for record in pending:
            if record.parent_id is None:
                tree.add_root_category(record.id, record.name)
            elif not tree.add_child_category(record.parent_id, record.id, record.name):
                unresolved.append(record)
        if len(unresolved) == len(pending):
            break
        pending = unresolved

    if pending:
        if strict:
            raise OrphanCategoryError([record.id for record in pending])
        for record in pending:
            logger.warning(
                "Skipping category with unknown parent",
                extra={"category_id": record.id, "parent_id": record.parent_id},
            )

    logger.debug(
        "Built category tree",
        extra={"categories": len(tree), "passes": passes, "skipped": len(pending)},
    )
    return tree


def _coerce(record: CategoryRecord | Mapping[str, Any]) -> CategoryRecord:
    if isinstance(record, CategoryRecord):
        return record
    return CategoryRecord.model_validate(record)
