"""
Registry of the hash functions supported for challenge derivation.
"""

from enum import Enum

from .hashing import Blake2bHash, Blake2sHash, Sha3_256Hash


class HashFunction(Enum):
    """Supported hash functions."""

    BLAKE2B = "blake2b"
    SHA3_256 = "sha3_256"
    BLAKE2S = "blake2s"

    @property
    def block_len(self):
        """Block size in bytes."""
        return _PARAMETERS[self][0]

    @property
    def digest_len(self):
        """Digest size in bytes."""
        return _PARAMETERS[self][1]

    @property
    def hash_class(self):
        return _PARAMETERS[self][2]

    def new(self):
        return self.hash_class()


# (block length, digest length, implementation)
_PARAMETERS = {
    HashFunction.BLAKE2B: (128, 64, Blake2bHash),
    HashFunction.SHA3_256: (136, 32, Sha3_256Hash),
    HashFunction.BLAKE2S: (64, 32, Blake2sHash),
}
