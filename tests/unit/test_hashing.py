"""
Unit tests for hash providers.
"""

import hashlib

import pytest

from narytree.exceptions import HashProviderError, UnsupportedHashAlgorithmError
from narytree.merkle.hashing import (
    DEFAULT_HASH_ALGORITHM,
    available_algorithms,
    hash_function_for,
    sha256,
)


class TestSha256:
    """Test the default hash provider."""

    def test_known_digest(self):
        """Test SHA-256 of a single character."""
        assert sha256("a") == "ca978112ca1bbdcafac231b39a23dc4da786eff8147c4e72b9807785afee48bb"

    def test_string_is_utf8_encoded(self):
        """Test non-ASCII text is hashed as UTF-8."""
        assert sha256("é") == hashlib.sha256("é".encode("utf-8")).hexdigest()

    def test_bytes_hashed_as_is(self):
        """Test bytes input is hashed without re-encoding."""
        assert sha256(b"a") == sha256("a")

    def test_digest_is_lowercase_hex(self):
        """Test digest form is 64 lowercase hex characters."""
        digest = sha256("block")
        assert len(digest) == 64
        assert digest == digest.lower()
        int(digest, 16)


class TestHashFunctionLookup:
    """Test hashlib-backed providers by algorithm name."""

    def test_default_name_returns_sha256(self):
        """Test the default algorithm maps to the sha256 provider itself."""
        assert DEFAULT_HASH_ALGORITHM == "sha256"
        assert hash_function_for("sha256") is sha256
        assert hash_function_for("SHA256") is sha256

    @pytest.mark.parametrize("name,length", [
        ("sha512", 128),
        ("sha3_256", 64),
        ("blake2b", 128),
        ("sha1", 40),
    ])
    def test_named_algorithms(self, name, length):
        """Test providers match hashlib digests."""
        provider = hash_function_for(name)
        digest = provider("block")

        assert len(digest) == length
        assert digest == hashlib.new(name, b"block").hexdigest()
        assert provider.__name__ == name

    def test_name_is_case_insensitive(self):
        """Test algorithm names are normalised to lowercase."""
        assert hash_function_for("SHA512")("x") == hash_function_for("sha512")("x")

    def test_unknown_algorithm_raises(self):
        """Test unknown algorithm names are rejected."""
        with pytest.raises(UnsupportedHashAlgorithmError, match="Unsupported hash algorithm"):
            hash_function_for("not-a-hash")

    @pytest.mark.parametrize("name", ["shake_128", "shake_256"])
    def test_variable_length_algorithms_raise(self, name):
        """Test extendable-output functions are rejected."""
        with pytest.raises(HashProviderError, match="variable-length"):
            hash_function_for(name)

    def test_available_algorithms(self):
        """Test the listing contains fixed-length algorithms only."""
        names = available_algorithms()

        assert "sha256" in names
        assert "shake_128" not in names
        assert names == sorted(names)
