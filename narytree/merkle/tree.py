"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Narytree, a product of Garudex Labs

N-ary Merkle tree construction.

This module builds an immutable hash tree over an ordered sequence of string
blocks. It supports:
- Leaf hashing with a pluggable hash provider (SHA-256 by default)
- Grouping of any fixed number of children per parent
- Validation that the leaf count fills every level exactly
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from narytree.exceptions import InvalidConfigurationError
from narytree.logging_config import get_logger, log_tree_construction
from narytree.merkle.hashing import HashFunction, sha256

logger = get_logger(__name__)

DEFAULT_NUMBER_OF_CHILDREN = 2


@dataclass(frozen=True)
class Node:
    """
    A single vertex of the hash tree.

    Attributes:
        value: Hex digest identifying this node
        children: Child nodes in hashing order (empty for leaves)
        height: Grouping rounds above the leaf level (0 for leaves)
    """
    value: str
    children: Tuple["Node", ...] = ()
    height: int = 0

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class Tree:
    """
    A built Merkle tree.

    The blocks and the hash provider are retained so that proofs can later be
    checked against the tree without passing them around separately.

    Attributes:
        blocks: Original ordered input blocks
        hash_function: Provider the tree was built with
        root: Root node owning the whole node graph
        number_of_children: Branching factor used during construction
    """
    blocks: Tuple[str, ...]
    hash_function: HashFunction = field(repr=False)
    root: Node
    number_of_children: int = DEFAULT_NUMBER_OF_CHILDREN

    @property
    def root_hash(self) -> str:
        return self.root.value

    @property
    def height(self) -> int:
        return self.root.height

    @property
    def leaf_count(self) -> int:
        return len(self.blocks)

    def leaves(self) -> Iterator[Node]:
        """Yield leaf nodes left to right."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                yield node
            else:
                stack.extend(reversed(node.children))


def is_power_of(base: int, count: int) -> bool:
    """
    Check whether count is an exact non-negative integer power of base.

    Args:
        base: Branching factor (must be at least 2)
        count: Number of leaves

    Returns:
        True if count == base ** k for some integer k >= 0
    """
    if base < 2 or count < 1:
        return False
    while count % base == 0:
        count //= base
    return count == 1


def _chunk(nodes: List[Node], size: int) -> List[List[Node]]:
    return [nodes[i:i + size] for i in range(0, len(nodes), size)]


def build(blocks: Sequence[str], hash_function: HashFunction, number_of_children: int) -> Node:
    """
    Build the node graph bottom-up and return its root.

    Each block becomes a leaf holding hash_function(block). Each level is then
    split into consecutive groups of number_of_children nodes, and every group
    gets a parent whose value is the hash of its children's values
    concatenated in order. Grouping repeats until a single node remains.

    The leaf count is not validated here; callers must pass a power of
    number_of_children (see new_tree).

    Args:
        blocks: Ordered blocks to hash into leaves
        hash_function: Hash provider used for leaves and parents
        number_of_children: Nodes grouped under each parent

    Returns:
        Root node of the tree
    """
    level = [Node(value=hash_function(block)) for block in blocks]
    height = 1

    while len(level) > 1:
        level = [
            Node(
                value=hash_function("".join(child.value for child in group)),
                children=tuple(group),
                height=height,
            )
            for group in _chunk(level, number_of_children)
        ]
        height += 1

    return level[0]


def new_tree(
    blocks: Sequence[str],
    hash_function: HashFunction = sha256,
    number_of_children: int = DEFAULT_NUMBER_OF_CHILDREN,
) -> Tree:
    """
    Build a Merkle tree from blocks.

    Args:
        blocks: Strings representing the unhashed leaves of the tree
        hash_function: Hash provider for leaves and nodes (default: SHA-256)
        number_of_children: How many children per node (default: 2)

    Returns:
        Tree holding the blocks, the hash provider and the root node

    Raises:
        InvalidConfigurationError: If number_of_children is not an integer of
            at least 2, blocks is empty, or len(blocks) is not a power of
            number_of_children

    Example:
        >>> tree = new_tree(["a", "b", "c", "d"])
        >>> tree.root_hash
        '58c89d709329eb37285837b042ab6ff72c7c8f74de0446b091b6a0131c102cfd'
    """
    if isinstance(number_of_children, bool) or not isinstance(number_of_children, int):
        raise InvalidConfigurationError(
            f"number_of_children must be an integer (received {number_of_children!r})"
        )
    if number_of_children < 2:
        raise InvalidConfigurationError(
            f"number_of_children must be at least 2 (received {number_of_children})"
        )

    blocks = tuple(blocks)
    if not blocks:
        raise InvalidConfigurationError("Cannot build Merkle tree from empty blocks list")
    if not is_power_of(number_of_children, len(blocks)):
        raise InvalidConfigurationError(
            f"Number of blocks must be a power of number_of_children "
            f"(received {len(blocks)} blocks, number_of_children={number_of_children})"
        )

    root = build(blocks, hash_function, number_of_children)
    tree = Tree(
        blocks=blocks,
        hash_function=hash_function,
        root=root,
        number_of_children=number_of_children,
    )

    log_tree_construction(
        logger,
        leaf_count=len(blocks),
        number_of_children=number_of_children,
        height=root.height,
        root_hash=root.value,
    )

    return tree
