"""Command-level tree transactions.

Each function resolves every name it needs before touching the tree, so a
failed lookup raises with the tree exactly as it was.
"""

from __future__ import annotations

import logging

from puha.errors import ItemNotFoundError, SpaceNotFoundError
from puha.space.models import Item, Space

logger = logging.getLogger(__name__)


def require_space(root: Space, name: str, role: str = "space") -> Space:
    space = root.find_space(name)
    if space is None:
        raise SpaceNotFoundError(name, role)
    return space


# ── Moves ─────────────────────────────────────────────────────


def move_items(root: Space, source: str, destination: str, names: list[str]) -> list[Item]:
    """Move the named items out of the source subtree into the destination.

    Names that cannot be found (or are exhausted by earlier repeats) are
    skipped. Moved items are appended in the order they were requested.
    """
    src = require_space(root, source, "source space")
    dest = require_space(root, destination, "destination space")

    moved: list[Item] = []
    for name in names:
        item = src.remove_item(name)
        if item is None:
            logger.debug("Item %s not found under %s, skipping", name, source)
            continue
        moved.append(item)

    dest.items.extend(moved)
    logger.info("Moved %d item(s) from %s to %s", len(moved), source, destination)
    return moved


def move_space(root: Space, name: str, destination: str) -> Space:
    """Reattach the named space (with its subtree) under the destination.

    The space is located the way ``Space.remove_space`` locates it; the
    destination is resolved as if the space had already been detached, so it
    can never be the moving space or one of its descendants.
    """
    found = root.locate_space(name)
    if found is None:
        raise SpaceNotFoundError(name)
    parent, index = found
    moving = parent.spaces[index]

    dest = next((s for s in root.walk(skip=moving) if s.name == destination), None)
    if dest is None:
        raise SpaceNotFoundError(destination, "destination space")

    parent.spaces.pop(index)
    dest.add_space(moving)
    logger.info("Moved space %s from %s to %s", name, parent.name, dest.name)
    return moving


# ── Deletes ───────────────────────────────────────────────────


def delete_space(root: Space, parent: str, name: str) -> list[Item]:
    """Delete a direct child of ``parent``, merging its subtree's items upward.

    Every item anywhere under the deleted child is appended to the parent in
    pre-order; the child's own sub-spaces are discarded.
    """
    parent_space = require_space(root, parent, "parent space")
    removed = parent_space.remove_direct_space(name)
    if removed is None:
        raise SpaceNotFoundError(name, "child space", within=parent)

    merged = removed.collect_items()
    parent_space.items.extend(merged)
    logger.info(
        "Deleted space %s from %s, merged %d item(s)", name, parent, len(merged)
    )
    return merged


def delete_item(root: Space, space: str, name: str) -> Item:
    """Remove the first direct item named ``name`` from ``space``."""
    target = require_space(root, space)
    item = target.remove_item_local(name)
    if item is None:
        raise ItemNotFoundError(name, space)
    logger.info("Deleted item %s from %s", name, space)
    return item


# ── Edits ─────────────────────────────────────────────────────


def edit_item(
    root: Space,
    space: str,
    item: str,
    *,
    name: str | None = None,
    description: str | None = None,
) -> Item:
    """Replace the name and/or description of a direct item of ``space``."""
    target = require_space(root, space)
    found = target.find_item(item)
    if found is None:
        raise ItemNotFoundError(item, space)
    if name is not None:
        found.name = name
    if description is not None:
        found.description = description
    logger.info("Edited item %s in %s", item, space)
    return found


def rename_space(root: Space, space: str, new_name: str) -> Space:
    target = require_space(root, space)
    target.name = new_name
    logger.info("Renamed space %s to %s", space, new_name)
    return target
