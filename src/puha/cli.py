"""Command-line surface: argument parsing, command handlers, tree printing.

Every mutating command is load -> one operation -> save. Any lookup, parse or
IO failure raises before the save, so the document is never partially updated.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from pathlib import Path

from puha.space import ops
from puha.space.models import Item, Space
from puha.space.store import SpaceStore

logger = logging.getLogger(__name__)


def format_tree(space: Space, indent: int = 0) -> list[str]:
    """Render a subtree as indented lines: spaces by name, items as ``- name``."""
    padding = "  " * indent
    lines = [f"{padding}{space.name}"]
    for item in space.items:
        lines.append(f"{padding}  - {item.name}")
    for child in space.spaces:
        lines.extend(format_tree(child, indent + 1))
    return lines


# ── Read-only commands ────────────────────────────────────────


def cmd_show_tree(store: SpaceStore, args: argparse.Namespace) -> None:
    root = store.load()
    target = ops.require_space(root, args.name) if args.name is not None else root
    print("\n".join(format_tree(target)))


def cmd_list_items(store: SpaceStore, args: argparse.Namespace) -> None:
    target = ops.require_space(store.load(), args.space)
    for item in target.items:
        print(item.name)


def cmd_list(store: SpaceStore, args: argparse.Namespace) -> None:
    target = ops.require_space(store.load(), args.space)
    for item in target.items:
        print(f"item: {item.name}")
    for child in target.spaces:
        print(f"space: {child.name}")


# ── Mutating commands ─────────────────────────────────────────


def cmd_new_root(store: SpaceStore, args: argparse.Namespace) -> None:
    if store.exists():
        logger.warning("Overwriting existing document %s", store.path)
    store.save(Space(name=args.name, root=True))


def cmd_add_item(store: SpaceStore, args: argparse.Namespace) -> None:
    root = store.load()
    target = ops.require_space(root, args.space)
    target.add_item(Item(name=args.item, description=args.description))
    store.save(root)


def cmd_add_space(store: SpaceStore, args: argparse.Namespace) -> None:
    root = store.load()
    ops.require_space(root, args.parent).add_space(Space(name=args.child))
    store.save(root)


def cmd_move_items(store: SpaceStore, args: argparse.Namespace) -> None:
    root = store.load()
    ops.move_items(root, args.source, args.destination, args.items)
    store.save(root)


def cmd_move_space(store: SpaceStore, args: argparse.Namespace) -> None:
    root = store.load()
    ops.move_space(root, args.space, args.destination)
    store.save(root)


def cmd_edit_item(store: SpaceStore, args: argparse.Namespace) -> None:
    root = store.load()
    ops.edit_item(root, args.space, args.item, name=args.name, description=args.description)
    store.save(root)


def cmd_edit_space(store: SpaceStore, args: argparse.Namespace) -> None:
    root = store.load()
    ops.rename_space(root, args.space, args.new_name)
    store.save(root)


def cmd_delete_item(store: SpaceStore, args: argparse.Namespace) -> None:
    root = store.load()
    ops.delete_item(root, args.space, args.item)
    store.save(root)


def cmd_delete_space(store: SpaceStore, args: argparse.Namespace) -> None:
    root = store.load()
    ops.delete_space(root, args.parent, args.space)
    store.save(root)


# ── Parser ────────────────────────────────────────────────────


Handler = Callable[[SpaceStore, argparse.Namespace], None]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="puha", description="Manage a tree of spaces and items.")
    p.add_argument(
        "-f", "--file", type=Path, default=None,
        help="document storing the space tree (default: from config, else space.json)",
    )
    p.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="log progress to stderr (-vv for debug)",
    )
    sub = p.add_subparsers(dest="command", required=True, metavar="COMMAND")

    def add(name: str, handler: Handler, help: str, aliases: list[str] | None = None):
        sp = sub.add_parser(name, help=help, aliases=aliases or [])
        sp.set_defaults(handler=handler)
        return sp

    sp = add("new-root", cmd_new_root, "create a new root space", aliases=["create-root"])
    sp.add_argument("name")

    sp = add("show-tree", cmd_show_tree, "show a space and all of its children")
    sp.add_argument("name", nargs="?", default=None)

    sp = add("add-item", cmd_add_item, "add an item to a space")
    sp.add_argument("space")
    sp.add_argument("item")
    sp.add_argument("description")

    sp = add("add-space", cmd_add_space, "add a space to another space")
    sp.add_argument("parent")
    sp.add_argument("child")

    sp = add("list-items", cmd_list_items, "list all items in a space")
    sp.add_argument("space")

    sp = add("list", cmd_list, "list items and child spaces of a space (one level)")
    sp.add_argument("space")

    sp = add("move-items", cmd_move_items, "move one or more items to a space")
    sp.add_argument("source", metavar="from")
    sp.add_argument("destination", metavar="to")
    sp.add_argument("items", nargs="+")

    sp = add("move-space", cmd_move_space, "move a space and all its children to another space")
    sp.add_argument("space")
    sp.add_argument("destination", metavar="to")

    sp = add("edit-item", cmd_edit_item, "edit an item's name and/or description")
    sp.add_argument("space")
    sp.add_argument("item")
    sp.add_argument("--name", default=None)
    sp.add_argument("--description", default=None)

    sp = add("edit-space", cmd_edit_space, "rename a space")
    sp.add_argument("space")
    sp.add_argument("new_name")

    sp = add("delete-item", cmd_delete_item, "delete an item from a space")
    sp.add_argument("space")
    sp.add_argument("item")

    sp = add("delete-space", cmd_delete_space, "delete a child space and move its items to the parent")
    sp.add_argument("parent")
    sp.add_argument("space")

    return p
