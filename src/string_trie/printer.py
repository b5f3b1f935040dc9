"""Render a trie as an indented tree diagram for diagnostics."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.string_trie.node import TrieNode
    from src.string_trie.trie import StringTrie

LAST_CONNECTOR = "└── "
CONNECTOR = "├── "
LAST_INDENT = "    "
INDENT = "│   "


def node_label(node: "TrieNode") -> str:
    """Return the text shown for a node.

    Args:
        node (TrieNode): The node to describe.

    Returns:
        str: "(character) payload" for a node ending a key, the bare
        character otherwise and an empty string for the root.

    """
    character = node.character if node.character is not None else ""
    if node.payload is not None:
        return f"({character}) {node.payload}"
    return character


def get_string(trie: "StringTrie") -> str:
    """Build the tree diagram of a trie.

    Every line is the accumulated indentation, the connector of the node
    and its label. The walk is depth first with an explicit stack, so
    long keys do not run into the recursion limit.

    Args:
        trie (StringTrie): The trie to render.

    Returns:
        str: The diagram, one line per node, each ending with a newline.

    """
    lines = []
    # (node, indentation inherited from the ancestors, is last sibling)
    stack = [(trie.root, "", True)]
    while stack:
        node, prefix, is_tail = stack.pop()
        connector = LAST_CONNECTOR if is_tail else CONNECTOR
        lines.append(f"{prefix}{connector}{node_label(node)}\n")

        child_prefix = prefix + (LAST_INDENT if is_tail else INDENT)
        children = list(node.iter_children())
        for position in range(len(children) - 1, -1, -1):
            stack.append(
                (
                    children[position],
                    child_prefix,
                    position == len(children) - 1,
                ),
            )
    return "".join(lines)


def print_trie(trie: "StringTrie") -> None:
    """Print the tree diagram of a trie to stdout."""
    print(get_string(trie), end="")
