"""
Exception hierarchy for Narytree.

All custom exceptions inherit from NaryTreeError base class.
"""


class NaryTreeError(Exception):
    """Base exception for all Narytree errors."""
    pass


# Configuration Errors
class ConfigurationError(NaryTreeError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass


class ConfigurationLoadError(ConfigurationError):
    """Raised when loading configuration fails."""
    pass


# Hash Provider Errors
class HashProviderError(NaryTreeError):
    """Base exception for hash provider errors."""
    pass


class UnsupportedHashAlgorithmError(HashProviderError):
    """Raised when a hash algorithm name is not available in hashlib."""
    pass


# Proof Errors
class ProofError(NaryTreeError):
    """Base exception for proof generation errors."""
    pass


class LeafIndexOutOfRangeError(ProofError):
    """Raised when a proof is requested for a leaf index outside the tree."""
    pass
