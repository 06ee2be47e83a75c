"""Domain services for the category hierarchy."""

from collections.abc import Iterable
from logging import Logger

from dericer.domain.models.ids import CategoryId
from dericer.domain.models.ledger import Category


def build_category_index(
    categories: Iterable[Category],
) -> dict[CategoryId, Category]:
    """Index categories by id."""
    return {category.id: category for category in categories}


def get_ancestor_category_ids(
    category_id: CategoryId,
    index: dict[CategoryId, Category],
    logger: Logger | None = None,
) -> list[CategoryId]:
    """Return ancestor ids of a category, nearest parent first.

    The walk stops at a root, at a parent id missing from the index, or when
    a parent repeats (cyclic chain).

    Args:
        category_id: Category to start from; excluded from the result.
        index: Categories indexed by id.
        logger: Optional logger used to report cycles.

    Returns:
        list[CategoryId]: Ancestor ids ordered from nearest to farthest.
    """
    ancestors: list[CategoryId] = []
    seen = {category_id}
    current = index.get(category_id)
    while current is not None and current.parent_id:
        parent_id = current.parent_id
        if parent_id in seen:
            if logger is not None:
                logger.warning(
                    f"Category cycle detected above category_id={category_id}"
                )
            break
        seen.add(parent_id)
        ancestors.append(parent_id)
        current = index.get(parent_id)
    return ancestors


def get_descendant_category_ids(
    root_id: CategoryId,
    categories: Iterable[Category],
    logger: Logger | None = None,
) -> list[CategoryId]:
    """Return every descendant id of ``root_id``, root excluded.

    Sibling order is not significant; each descendant appears once.
    """
    children: dict[CategoryId, list[CategoryId]] = {}
    for category in categories:
        if not category.parent_id:
            continue
        children.setdefault(category.parent_id, []).append(category.id)

    result: list[CategoryId] = []
    visited = {root_id}
    stack = list(children.get(root_id, []))
    while stack:
        current = stack.pop()
        if current in visited:
            if logger is not None:
                logger.warning(
                    f"Category cycle detected below category_id={root_id}"
                )
            continue
        visited.add(current)
        result.append(current)
        stack.extend(children.get(current, []))
    return result


__all__ = [
    "build_category_index",
    "get_ancestor_category_ids",
    "get_descendant_category_ids",
]
