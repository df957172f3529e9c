"""
Incremental hash objects used for Fiat-Shamir challenge derivation.
"""

import hashlib
from abc import ABC, abstractmethod


class HashInterface(ABC):
    """
    Interface for hash objects driven by the transform.

    ``finalize_reset`` returns the digest of everything absorbed so far and
    leaves the object as if freshly constructed.
    """

    digest_size = None
    block_size = None

    @abstractmethod
    def update(self, data):
        raise NotImplementedError

    @abstractmethod
    def finalize_reset(self):
        raise NotImplementedError

    @abstractmethod
    def clone(self):
        """Independent copy of the current state."""
        raise NotImplementedError


class HashlibHash(HashInterface):
    """Hash object backed by a ``hashlib`` constructor."""

    name = None  # hashlib algorithm name, set by subclasses

    def __init__(self):
        self._hasher = hashlib.new(self.name)
        self.digest_size = self._hasher.digest_size
        self.block_size = self._hasher.block_size

    def update(self, data):
        self._hasher.update(data)

    def finalize_reset(self):
        digest = self._hasher.digest()
        self._hasher = hashlib.new(self.name)
        return digest

    def clone(self):
        new_hash = self.__class__.__new__(self.__class__)
        new_hash._hasher = self._hasher.copy()
        new_hash.digest_size = self.digest_size
        new_hash.block_size = self.block_size
        return new_hash

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class Blake2bHash(HashlibHash):
    """BLAKE2b-512."""
    name = "blake2b"


class Blake2sHash(HashlibHash):
    """BLAKE2s-256."""
    name = "blake2s"


class Sha3_256Hash(HashlibHash):
    """SHA3-256."""
    name = "sha3_256"
