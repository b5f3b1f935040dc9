"""Child storage strategies used by the trie nodes.

Both strategies keep the children in insertion order and expose the same
index-based contract, so the trie algorithms never depend on how a child
is looked up.
"""

from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from src.string_trie.node import TrieNode


class LinearChildren:
    """Store children in a list and find them with a linear scan.

    Fits the usual case where the fan-out of a node is bounded by a small
    alphabet.
    """

    __slots__ = ("_children",)

    def __init__(self) -> None:
        """Initialize an empty child list."""
        self._children: list["TrieNode"] = []

    def append(self, node: "TrieNode") -> None:
        """Append a child at the end of the list.

        Args:
            node (TrieNode): The child to append.

        """
        self._children.append(node)

    def pop(self, index: int) -> "TrieNode":
        """Remove and return the child at `index`, shifting the rest down.

        Args:
            index (int): Position of the child to remove.

        Returns:
            TrieNode: The removed child.

        """
        return self._children.pop(index)

    def index_of(self, character: str) -> Optional[int]:
        """Return the position of the child holding `character`.

        Args:
            character (str): The character to look for.

        Returns:
            Optional[int]: The position, or None if no child matches.

        """
        for index, child in enumerate(self._children):
            if child.character == character:
                return index
        return None

    def __getitem__(self, index: int) -> "TrieNode":
        return self._children[index]

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator["TrieNode"]:
        return iter(self._children)


class KeyedChildren(LinearChildren):
    """Store children in a list indexed by a character-to-position map.

    Lookup is O(1); removal still shifts the list and renumbers the
    positions that follow the removed slot. Use it for wide fan-out.
    """

    __slots__ = ("_positions",)

    def __init__(self) -> None:
        """Initialize an empty child list and position map."""
        super().__init__()
        self._positions: dict[str, int] = {}

    def append(self, node: "TrieNode") -> None:
        """Append a child and record its position.

        Args:
            node (TrieNode): The child to append.

        """
        assert node.character is not None, "only the root has no character"
        self._positions[node.character] = len(self._children)
        self._children.append(node)

    def pop(self, index: int) -> "TrieNode":
        """Remove and return the child at `index`, renumbering the rest.

        Args:
            index (int): Position of the child to remove.

        Returns:
            TrieNode: The removed child.

        """
        node = self._children.pop(index)
        del self._positions[node.character]
        for position in range(index, len(self._children)):
            self._positions[self._children[position].character] = position
        return node

    def index_of(self, character: str) -> Optional[int]:
        """Return the position of the child holding `character`.

        Args:
            character (str): The character to look for.

        Returns:
            Optional[int]: The position, or None if no child matches.

        """
        return self._positions.get(character)


CHILD_LOOKUP_STRATEGIES: dict[str, type[LinearChildren]] = {
    "linear": LinearChildren,
    "keyed": KeyedChildren,
}
