"""Item and Space: the in-memory tree and its structural operations.

A Space owns its items and child spaces outright; there are no parent
pointers. All searches are depth-first pre-order and return the first match,
so duplicate names resolve to whichever node a pre-order walk reaches first.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Item:
    """A named leaf value."""

    name: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Item:
        return cls(name=data["name"], description=data["description"])


@dataclass
class Space:
    """A tree node holding ordered items and ordered child spaces."""

    name: str = ""
    items: list[Item] = field(default_factory=list)
    spaces: list[Space] = field(default_factory=list)
    root: bool = False

    # ── Serialization ────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "items": [item.to_dict() for item in self.items],
            "spaces": [child.to_dict() for child in self.spaces],
            "root": self.root,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Space:
        """Rebuild a tree from ``to_dict`` output. Shape is assumed valid."""
        return cls(
            name=data["name"],
            items=[Item.from_dict(i) for i in data["items"]],
            spaces=[cls.from_dict(s) for s in data["spaces"]],
            root=data["root"],
        )

    # ── Traversal ────────────────────────────────────────────

    def walk(self, skip: Space | None = None) -> Iterator[Space]:
        """Yield this node and its descendants in depth-first pre-order.

        ``skip`` prunes one node (matched by identity) together with its subtree.
        """
        if self is skip:
            return
        yield self
        for child in self.spaces:
            yield from child.walk(skip)

    def find_space(self, name: str) -> Space | None:
        """First space named ``name``, starting with this node itself.

        The live node is returned; mutating it mutates the tree.
        """
        for space in self.walk():
            if space.name == name:
                return space
        return None

    def find_item(self, name: str) -> Item | None:
        """First item named ``name`` among this space's own items."""
        for item in self.items:
            if item.name == name:
                return item
        return None

    def locate_space(self, name: str) -> tuple[Space, int] | None:
        """(parent, index) of the first descendant named ``name``.

        This node itself is never a candidate.
        """
        for index, child in enumerate(self.spaces):
            if child.name == name:
                return self, index
            found = child.locate_space(name)
            if found is not None:
                return found
        return None

    def collect_items(self) -> list[Item]:
        """Every item in this subtree, flattened in pre-order."""
        collected = list(self.items)
        for child in self.spaces:
            collected.extend(child.collect_items())
        return collected

    # ── Local mutation ───────────────────────────────────────

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def add_space(self, space: Space) -> None:
        # Attaching an ancestor here would create a cycle; callers must not.
        self.spaces.append(space)

    def remove_item_local(self, name: str) -> Item | None:
        """Detach the first direct item named ``name``."""
        for index, item in enumerate(self.items):
            if item.name == name:
                return self.items.pop(index)
        return None

    def remove_direct_space(self, name: str) -> Space | None:
        """Detach the first direct child named ``name``; grandchildren are not searched."""
        for index, child in enumerate(self.spaces):
            if child.name == name:
                return self.spaces.pop(index)
        return None

    # ── Recursive removal ────────────────────────────────────

    def remove_item(self, name: str) -> Item | None:
        """Detach the first item named ``name`` anywhere in this subtree.

        Own items are checked before any child subtree.
        """
        item = self.remove_item_local(name)
        if item is not None:
            return item
        for child in self.spaces:
            item = child.remove_item(name)
            if item is not None:
                return item
        return None

    def remove_space(self, name: str) -> Space | None:
        """Detach the first descendant named ``name`` with its whole subtree."""
        found = self.locate_space(name)
        if found is None:
            return None
        parent, index = found
        return parent.spaces.pop(index)
