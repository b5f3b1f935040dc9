"""This module represents the implementation of a Trie structure that's
used for storing, removing and checking the existence of whole strings.

Keys sharing a prefix share the nodes of that prefix. The node ending a
stored key holds the key itself as its payload, which tells a stored key
apart from a mere prefix of one.
"""

import functools
import logging
import time
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional

from src.string_trie import logger, printer
from src.string_trie.children import CHILD_LOOKUP_STRATEGIES
from src.string_trie.node import TrieNode

if TYPE_CHECKING:
    from src.string_trie.config import TrieConfig


class InvalidKeyError(ValueError):
    """Raised when a key is None or not a string."""


class EmptyKeyError(InvalidKeyError):
    """Raised when a key is the empty string."""


def validate_key(key: Any) -> str:
    """Check that `key` can be stored in the trie.

    Args:
        key (Any): The value passed as a key.

    Raises:
        InvalidKeyError: If `key` is None or not a string.
        EmptyKeyError: If `key` is the empty string.

    Returns:
        str: The key itself.

    """
    if not isinstance(key, str):
        raise InvalidKeyError(
            f"Trie keys must be non-empty strings, got {type(key).__name__}.",
        )
    if not key:
        raise EmptyKeyError("Trie keys must be non-empty strings.")
    return key


def _timed(operation: str) -> Callable[[Callable[..., bool]], Any]:
    """Log the result and duration of an operation when the trie asks
    for detailed logging.
    """

    def decorator(method: Callable[..., bool]) -> Any:
        @functools.wraps(method)
        def wrapper(self: "StringTrie", key: str) -> bool:
            if not self.log_details:
                return method(self, key)

            start_time = time.perf_counter()
            result = method(self, key)
            duration = (time.perf_counter() - start_time) * 1000
            logger.log(operation, key, result, duration)
            return result

        return wrapper

    return decorator


class StringTrie:
    """Represents the string trie data structure."""

    def __init__(
        self,
        child_lookup: str = "linear",
        log_details: bool = False,
    ) -> None:
        """Initialize the root node of the Trie.

        Args:
            child_lookup (str): Name of the child lookup strategy,
            "linear" for a scan over the children or "keyed" for a
            character-indexed lookup.
            log_details (bool): Log every add, remove and contains call.

        Raises:
            ValueError: If `child_lookup` is not a known strategy.

        """
        if child_lookup not in CHILD_LOOKUP_STRATEGIES:
            raise ValueError(
                f"Unknown child lookup strategy '{child_lookup}'. Expected "
                f"one of: {', '.join(sorted(CHILD_LOOKUP_STRATEGIES))}.",
            )
        self.child_lookup = child_lookup
        self.log_details = log_details
        self.root = TrieNode(
            children_factory=CHILD_LOOKUP_STRATEGIES[child_lookup],
        )
        self._size = 0
        logging.debug("Created trie with '%s' child lookup", child_lookup)

    @classmethod
    def from_config(cls, config: "TrieConfig") -> "StringTrie":
        """Build a trie from the parsed configuration settings.

        Args:
            config (TrieConfig): The configuration to apply.

        Returns:
            StringTrie: An empty trie.

        """
        return cls(config.child_lookup, config.log_details)

    @_timed("add")
    def add(self, key: str) -> bool:
        """Insert a new key into the String Trie structure.

        Args:
            key (str): The key to be inserted into the Trie structure.

        Raises:
            InvalidKeyError: If `key` is not a non-empty string.

        Returns:
            bool: True if the key was added, False if it was already
            stored.

        """
        validate_key(key)
        node = self.root
        # Walk or build the path for every character but the last
        for char in key[:-1]:
            index = node.child_index(char)
            if index is None:
                child = node.new_child(char)
                node.add_child(child)
            else:
                child = node.get_child(index)
            node = child

        last = key[-1]
        index = node.child_index(last)
        if index is None:
            node.add_child(node.new_child(last, key))
            self._size += 1
            return True

        existing = node.get_child(index)
        assert existing is not None and existing.character == last
        if existing.payload is not None:
            return False
        existing.payload = key
        self._size += 1
        return True

    @_timed("remove")
    def remove(self, key: str) -> bool:
        """Remove a key and prune the branch that only served it.

        Args:
            key (str): The key to be removed from the Trie structure.

        Raises:
            InvalidKeyError: If `key` is not a non-empty string.

        Returns:
            bool: True if the key was removed, False if it was not stored.

        """
        node = self._find(validate_key(key))
        if node is None or node.payload is None:
            return False

        node.payload = None
        self._size -= 1

        # Still the prefix of another key, the node stays
        if node.get_children_size() > 0:
            return True

        current = node
        pruned = 0
        while (
            current is not self.root
            and current.payload is None
            and current.get_children_size() == 0
        ):
            parent = current.parent
            assert parent is not None, "attached node lost its parent"
            index = parent.child_index(current.character)
            assert index is not None, "node missing from its parent"
            parent.remove_child(index)
            pruned += 1
            current = parent

        logging.debug("Pruned %d node(s) after removing '%s'", pruned, key)
        return True

    @_timed("contains")
    def contains(self, key: str) -> bool:
        """Check for the existence of a given key in the String
        Trie structure.

        Args:
            key (str): The key to search for in the Trie structure.

        Raises:
            InvalidKeyError: If `key` is not a non-empty string.

        Returns:
            bool: True if the exact `key` is stored, False if it is
            missing or only a prefix of stored keys.

        """
        node = self._find(validate_key(key))
        return node is not None and node.payload is not None

    def get_size(self) -> int:
        """Return the number of keys stored in the trie."""
        return self._size

    def _find(self, key: str) -> Optional[TrieNode]:
        node = self.root
        for char in key:
            index = node.child_index(char)
            # If the character is not found, the path does not exist
            if index is None:
                return None
            child = node.get_child(index)
            assert child is not None
            node = child
        return node

    def keys(self) -> Iterator[str]:
        """Yield every stored key, depth first in child insertion order.

        Yields:
            str: The stored keys.

        """
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.payload is not None:
                yield node.payload
            stack.extend(reversed(list(node.iter_children())))

    def count_nodes(self) -> int:
        """Return the number of nodes in the trie, root included."""
        total = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.iter_children())
        return total

    def check_invariants(self) -> None:
        """Walk the whole trie and assert its structural invariants.

        Checks that siblings have distinct characters, that every child
        points back to its parent, that no leaf other than the root is
        without a payload, and that the size matches the stored keys.

        Raises:
            AssertionError: If the structure is corrupted.

        """
        payloads = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            children = list(node.iter_children())
            characters = [child.character for child in children]
            assert len(characters) == len(set(characters)), (
                f"duplicate sibling characters under {node!r}"
            )
            assert node is self.root or children or node.payload is not None, (
                f"dangling leaf {node!r}"
            )
            if node.payload is not None:
                payloads += 1
            for child in children:
                assert child.parent is node, f"broken parent of {child!r}"
                assert child.character is not None
            stack.extend(children)
        assert payloads == self._size, (
            f"size {self._size} does not match {payloads} stored keys"
        )

    def render(self) -> str:
        """Return the tree diagram of the trie."""
        return printer.get_string(self)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        return self.contains(key)

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def __str__(self) -> str:
        return self.render()
