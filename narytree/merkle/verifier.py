"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Narytree, a product of Garudex Labs

Merkle proof verification.

This module recomputes a candidate root hash from a single block, its index
and a proof, without access to the rest of the tree:
- Proof verification: check a block against a claimed root hash
- Leaf verification: check a block of a built tree using the tree's own
  hash provider and root
"""

from typing import Optional, Sequence

from narytree.exceptions import LeafIndexOutOfRangeError
from narytree.logging_config import get_logger, log_proof_verification
from narytree.merkle.hashing import HashFunction, sha256
from narytree.merkle.proof import binarize, prove
from narytree.merkle.tree import Tree

logger = get_logger(__name__)


def is_proven(
    block: str,
    index: int,
    root_hash: str,
    proof: Sequence[str],
    hash_function: HashFunction = sha256,
) -> bool:
    """
    Verify proof for a block at a specific index.

    The proof length is taken as the tree height. Walking the proof from the
    leaf upwards, each path bit decides on which side the sibling hash is
    concatenated before hashing: bit 1 puts the sibling first, bit 0 puts it
    last. The final hash must equal root_hash exactly.

    An index that is negative or does not fit in len(proof) bits cannot name
    a leaf of a tree of that height and is reported as not proven.

    Args:
        block: Target block (unhashed)
        index: Target leaf index
        root_hash: The Merkle tree root hash
        proof: Sibling hashes as returned by prove()
        hash_function: Hash provider to verify with (default: SHA-256)

    Returns:
        True if the recomputed root equals root_hash, False otherwise

    Example:
        >>> tree = new_tree(["a", "b", "c", "d"])
        >>> is_proven("b", 1, tree.root_hash, prove(tree, 1))
        True
    """
    height = len(proof)

    if index < 0 or index >= 2 ** height:
        log_proof_verification(
            logger,
            index=index,
            proof_length=height,
            success=False,
            failure_reason="index_out_of_range",
        )
        return False

    path = binarize(index, height)
    accumulator = hash_function(block)

    for bit, sibling in zip(reversed(path), proof):
        if bit:
            accumulator = hash_function(sibling + accumulator)
        else:
            accumulator = hash_function(accumulator + sibling)

    result = accumulator == root_hash

    log_proof_verification(
        logger,
        index=index,
        proof_length=height,
        success=result,
        failure_reason=None if result else "root_mismatch",
    )

    return result


def verify_leaf(tree: Tree, index: int, proof: Optional[Sequence[str]] = None) -> bool:
    """
    Verify that the block at index belongs to tree.

    Uses the tree's own hash provider and root hash. When no proof is given
    one is generated from the tree.

    Args:
        tree: A built Merkle tree
        index: Target leaf index
        proof: Optional proof to check instead of a freshly generated one

    Returns:
        True if the block at index is proven against the tree root

    Raises:
        LeafIndexOutOfRangeError: If index is outside [0, len(tree.blocks))
    """
    if index < 0 or index >= tree.leaf_count:
        raise LeafIndexOutOfRangeError(
            f"Leaf index {index} out of range [0, {tree.leaf_count})"
        )

    if proof is None:
        proof = prove(tree, index)

    return is_proven(
        tree.blocks[index],
        index,
        tree.root_hash,
        proof,
        hash_function=tree.hash_function,
    )
