"""A lazily loaded directory tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from loomcore.dn import rdn_display_name


def _ascii_equal_ignore_case(a: str, b: str) -> bool:
    return a.encode().lower() == b.encode().lower()


@dataclass
class TreeNode:
    """A node in the directory tree."""

    dn: str
    display_name: str = field(init=False)
    children: list[TreeNode] | None = None
    has_children_hint: bool = True

    def __post_init__(self) -> None:
        self.display_name = rdn_display_name(self.dn)

    def is_loaded(self) -> bool:
        """Whether the children of this node have been fetched."""
        return self.children is not None

    def is_expanded(self) -> bool:
        """Whether this node is loaded and has children."""
        return bool(self.children)

    def set_children(self, children: list[TreeNode]) -> None:
        """Set the children of this node."""
        self.has_children_hint = bool(children)
        self.children = list(children)

    def collapse(self) -> None:
        """Drop the loaded children from memory."""
        self.children = None

    def walk(self) -> Iterator[TreeNode]:
        """This node and all loaded descendants, depth first."""
        yield self
        for child in self.children or ():
            yield from child.walk()


class DirectoryTree:
    """The full directory tree, loaded on demand."""

    def __init__(self, root_dn: str) -> None:
        self.root_dn = root_dn
        self.root = TreeNode(root_dn)

    def find_node(self, target_dn: str) -> TreeNode | None:
        """Find a loaded node by DN (ASCII case-insensitive)."""
        return next(
            (node for node in self.root.walk() if _ascii_equal_ignore_case(node.dn, target_dn)),
            None,
        )

    def insert_children(self, parent_dn: str, children: list[TreeNode]) -> None:
        """Set the children of the node with the given DN, if it is loaded."""
        node = self.find_node(parent_dn)
        if node is not None:
            node.set_children(children)