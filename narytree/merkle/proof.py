"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Narytree, a product of Garudex Labs

Merkle proof generation.

A proof for a leaf is the list of sibling hashes met on the way from the root
down to that leaf, ordered from the leaf's own sibling up to the level just
below the root.

The path is encoded as the binary form of the leaf index, one bit per level,
so every level is treated as having two children. On trees built with a
branching factor other than 2 the generated proofs do not follow the real
grouping and will not verify.
"""

from typing import List

from narytree.exceptions import LeafIndexOutOfRangeError
from narytree.logging_config import get_logger
from narytree.merkle.tree import Tree

logger = get_logger(__name__)


def binarize(index: int, width: int) -> List[int]:
    """
    Encode a leaf index as a path of bits.

    The binary form of index is left-padded with zeros to width bits, and only
    the lowest width bits are kept.

    Args:
        index: Non-negative leaf index
        width: Number of bits (tree height)

    Returns:
        List of 0/1 integers, most significant bit first
    """
    if width <= 0:
        return []
    bits = format(index, "b").zfill(width)[-width:]
    return [int(bit) for bit in bits]


def prove(tree: Tree, index: int) -> List[str]:
    """
    Generate proof for the block at a specific index.

    Args:
        tree: A built Merkle tree
        index: Target leaf index in the block list

    Returns:
        Sibling hashes from the leaf's sibling up to the root's child level;
        its length equals the tree height

    Raises:
        LeafIndexOutOfRangeError: If index is outside [0, len(tree.blocks))

    Example:
        >>> tree = new_tree(["a", "b", "c", "d"])
        >>> prove(tree, 1)
        ['ca978112ca1bbdcafac231b39a23dc4da786eff8147c4e72b9807785afee48bb',
         'd3a0f1c792ccf7f1708d5422696263e35755a86917ea76ef9242bd4a8cf4891a']
    """
    if index < 0 or index >= tree.leaf_count:
        raise LeafIndexOutOfRangeError(
            f"Leaf index {index} out of range [0, {tree.leaf_count})"
        )

    if tree.number_of_children != 2:
        logger.warning(
            "non_binary_proof_path",
            number_of_children=tree.number_of_children,
            index=index,
        )

    proof: List[str] = []
    node = tree.root

    for bit in binarize(index, tree.root.height):
        children = node.children[::-1] if bit else node.children
        node, sibling = children[0], children[1]
        proof.insert(0, sibling.value)

    logger.debug(f"Generated proof of length {len(proof)} for leaf {index}")

    return proof
