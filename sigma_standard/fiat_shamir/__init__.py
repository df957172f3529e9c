"""
Fiat-Shamir transformation subpackage.
"""

from .transform import NonInteractiveProof, FiatShamirNIZK
from .codec import BatchableProof, ShortProof, ProofCodec
from .hashing import HashInterface, HashlibHash, Blake2bHash, Blake2sHash, Sha3_256Hash
from .hash_registry import HashFunction

__all__ = [
    'NonInteractiveProof',
    'FiatShamirNIZK',
    'BatchableProof',
    'ShortProof',
    'ProofCodec',
    'HashInterface',
    'HashlibHash',
    'Blake2bHash',
    'Blake2sHash',
    'Sha3_256Hash',
    'HashFunction'
]
