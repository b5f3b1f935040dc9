"""This module represents a single vertex of the string trie."""

import weakref
from typing import Callable, Iterator, Optional

from src.string_trie.children import LinearChildren


class TrieNode:
    """Represent a node in the trie structure.

    A node adds one character to the path spelled by its ancestors. It
    holds the full key as its payload when that path is a stored key.
    """

    __slots__ = ("_parent", "character", "payload", "_children", "__weakref__")

    def __init__(
        self,
        parent: Optional["TrieNode"] = None,
        character: Optional[str] = None,
        payload: Optional[str] = None,
        children_factory: Callable[[], LinearChildren] = LinearChildren,
    ) -> None:
        """Initialize a new Trie node.

        Attributes:
            character (Optional[str]): The character this node adds to
            its parent's path, None for the root.
            payload (Optional[str]): The stored key ending at this node,
            None when the node is only a prefix of other keys.

        Args:
            parent (Optional[TrieNode]): The owning node, None for the root.
            character (Optional[str]): The distinguishing character.
            payload (Optional[str]): The key terminating at this node.
            children_factory (Callable): Builds the child storage.

        """
        self._parent: Optional["weakref.ReferenceType[TrieNode]"] = None
        self.parent = parent
        self.character = character
        self.payload = payload
        self._children = children_factory()

    @property
    def parent(self) -> Optional["TrieNode"]:
        """Return the parent node, or None for the root or a detached node."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: Optional["TrieNode"]) -> None:
        # Weak so that the parent stays the only owner of the edge
        self._parent = None if node is None else weakref.ref(node)

    def new_child(
        self,
        character: str,
        payload: Optional[str] = None,
    ) -> "TrieNode":
        """Create a child using the same child storage as this node.

        The child is not attached; call `add_child` for that.

        Args:
            character (str): The character of the new child.
            payload (Optional[str]): The key terminating at the new child.

        Returns:
            TrieNode: The new detached child.

        """
        return TrieNode(
            self,
            character,
            payload,
            children_factory=type(self._children),
        )

    def add_child(self, node: "TrieNode") -> None:
        """Append a child to this node.

        Args:
            node (TrieNode): The child to append.

        """
        node.parent = self
        self._children.append(node)

    def remove_child(self, index: int) -> bool:
        """Remove the child at `index`, keeping the order of the others.

        Args:
            index (int): Position of the child to remove.

        Returns:
            bool: True if a child was removed, False for an out of
            range index.

        """
        if not 0 <= index < len(self._children):
            return False
        removed = self._children.pop(index)
        removed.parent = None
        return True

    def child_index(self, character: str) -> Optional[int]:
        """Return the position of the child holding `character`, or None."""
        return self._children.index_of(character)

    def get_child(self, index: int) -> Optional["TrieNode"]:
        """Return the child at `index`, or None for an out of range index."""
        if not 0 <= index < len(self._children):
            return None
        return self._children[index]

    def get_children_size(self) -> int:
        return len(self._children)

    def iter_children(self) -> Iterator["TrieNode"]:
        return iter(self._children)

    def __repr__(self) -> str:
        """Return a short description of the node.

        Returns:
            str: The character, payload and number of children.

        """
        return (
            f"TrieNode(character={self.character!r}, "
            f"payload={self.payload!r}, "
            f"children={self.get_children_size()})"
        )
