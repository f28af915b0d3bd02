"""
Merkle tree implementation for membership proofs.

This module provides N-ary Merkle tree construction, proof generation, and
proof verification over ordered string blocks.
"""

from narytree.merkle.builder import MerkleTreeBuilder
from narytree.merkle.hashing import (
    DEFAULT_HASH_ALGORITHM,
    HashFunction,
    available_algorithms,
    hash_function_for,
    sha256,
)
from narytree.merkle.proof import binarize, prove
from narytree.merkle.tree import Node, Tree, build, is_power_of, new_tree
from narytree.merkle.verifier import is_proven, verify_leaf

__all__ = [
    "DEFAULT_HASH_ALGORITHM",
    "HashFunction",
    "MerkleTreeBuilder",
    "Node",
    "Tree",
    "available_algorithms",
    "binarize",
    "build",
    "hash_function_for",
    "is_power_of",
    "is_proven",
    "new_tree",
    "prove",
    "sha256",
    "verify_leaf",
]
