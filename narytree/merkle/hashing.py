"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Narytree, a product of Garudex Labs

Hash providers for Merkle tree construction and proof verification.

A hash provider is any one-argument callable mapping a string to a hex
digest string. Construction and verification accept any such callable;
this module supplies the SHA-256 default and hashlib-backed providers
looked up by algorithm name.
"""

import hashlib
from typing import Callable, Union

from narytree.exceptions import UnsupportedHashAlgorithmError

HashFunction = Callable[[str], str]

DEFAULT_HASH_ALGORITHM = "sha256"

# Variable-length digests need an explicit length and cannot be used here
_VARIABLE_LENGTH_ALGORITHMS = frozenset({"shake_128", "shake_256"})


def _to_bytes(data: Union[str, bytes]) -> bytes:
    if isinstance(data, bytes):
        return data
    return data.encode("utf-8")


def sha256(data: Union[str, bytes]) -> str:
    """
    Hash data using SHA-256.
    
    Args:
        data: Data to hash (strings are UTF-8 encoded)
    
    Returns:
        Lowercase hex digest of data
    """
    return hashlib.sha256(_to_bytes(data)).hexdigest()


def available_algorithms() -> list:
    """Return the sorted hashlib algorithm names usable as hash providers."""
    return sorted(
        name for name in hashlib.algorithms_available
        if name not in _VARIABLE_LENGTH_ALGORITHMS
    )


def hash_function_for(algorithm: str) -> HashFunction:
    """
    Get a hash provider for a hashlib algorithm name.
    
    Args:
        algorithm: Algorithm name (e.g., "sha256", "sha3_256", "blake2b")
    
    Returns:
        Callable mapping a string to its hex digest
    
    Raises:
        UnsupportedHashAlgorithmError: If hashlib does not provide the algorithm
    """
    name = algorithm.lower()
    if name == DEFAULT_HASH_ALGORITHM:
        return sha256

    if name in _VARIABLE_LENGTH_ALGORITHMS:
        raise UnsupportedHashAlgorithmError(
            f"Hash algorithm '{algorithm}' has a variable-length digest"
        )

    try:
        hashlib.new(name)
    except ValueError:
        raise UnsupportedHashAlgorithmError(
            f"Unsupported hash algorithm '{algorithm}'. "
            f"Available: {', '.join(available_algorithms())}"
        )

    def digest(data: Union[str, bytes]) -> str:
        return hashlib.new(name, _to_bytes(data)).hexdigest()

    digest.__name__ = name
    return digest
