"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Narytree, a product of Garudex Labs

Narytree - N-ary Merkle trees with compact membership proofs

Narytree builds hash trees over ordered string blocks, generates sibling-hash
proofs for any leaf, and verifies membership against a known root hash.
"""

from narytree._version import __version__
from narytree.merkle import (
    MerkleTreeBuilder,
    Node,
    Tree,
    is_proven,
    new_tree,
    prove,
    sha256,
    verify_leaf,
)

__all__ = [
    "__version__",
    "MerkleTreeBuilder",
    "Node",
    "Tree",
    "is_proven",
    "new_tree",
    "prove",
    "sha256",
    "verify_leaf",
]
