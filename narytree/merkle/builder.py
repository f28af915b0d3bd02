"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Narytree, a product of Garudex Labs

Builder pattern for convenient tree construction.
"""

from typing import List, Optional, Sequence

from narytree.logging_config import get_logger
from narytree.merkle.hashing import HashFunction, sha256
from narytree.merkle.proof import prove
from narytree.merkle.tree import DEFAULT_NUMBER_OF_CHILDREN, Tree, new_tree
from narytree.merkle.verifier import verify_leaf

logger = get_logger(__name__)


class MerkleTreeBuilder:
    """
    Builder class for constructing Merkle trees from block sequences.
    
    Holds the hash provider and branching factor so that several trees can
    be built with the same settings.
    
    Example:
        >>> builder = MerkleTreeBuilder()
        >>> builder.build_tree(["a", "b", "c", "d"])
        >>> root = builder.get_root()
        >>> proof = builder.get_proof(1)
    """
    
    def __init__(
        self,
        hash_function: HashFunction = sha256,
        number_of_children: int = DEFAULT_NUMBER_OF_CHILDREN,
    ):
        """
        Initialize the Merkle tree builder.
        
        Args:
            hash_function: Hash provider for leaves and nodes
            number_of_children: How many children per node
        """
        self.hash_function = hash_function
        self.number_of_children = number_of_children
        self._tree: Optional[Tree] = None
    
    @property
    def tree(self) -> Tree:
        if self._tree is None:
            raise RuntimeError("Tree has not been built yet. Call build_tree() first.")
        return self._tree
    
    def build_tree(self, blocks: Sequence[str]) -> 'MerkleTreeBuilder':
        """
        Build Merkle tree from blocks.
        
        Args:
            blocks: Ordered blocks to hash into leaves
        
        Returns:
            Self for method chaining
        
        Raises:
            InvalidConfigurationError: If the block count does not fit the
                branching factor
        """
        self._tree = new_tree(
            blocks,
            hash_function=self.hash_function,
            number_of_children=self.number_of_children,
        )
        
        logger.debug(f"Built Merkle tree with {len(self._tree.blocks)} blocks")
        
        return self
    
    def get_root(self) -> str:
        """
        Get the Merkle root hash.
        
        Raises:
            RuntimeError: If tree has not been built yet
        """
        return self.tree.root_hash
    
    def get_proof(self, index: int) -> List[str]:
        """
        Generate Merkle proof for block at given index.
        
        Raises:
            RuntimeError: If tree has not been built yet
            LeafIndexOutOfRangeError: If index is out of range
        """
        return prove(self.tree, index)
    
    def verify(self, index: int) -> bool:
        """
        Verify the block at index against the built tree's root.
        
        Raises:
            RuntimeError: If tree has not been built yet
            LeafIndexOutOfRangeError: If index is out of range
        """
        return verify_leaf(self.tree, index)
