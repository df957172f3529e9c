"""
Sigma protocols and their Fiat-Shamir transform - pure Python implementation.
"""

import logging

from .constants import CHALLENGE_LENGTH, DOMSEP, LABEL_LENGTH
from .errors import (
    SigmaError, VerificationFailed, ChallengeConversionFailure,
    SerializationError, ConfigurationError, ProverStateReused
)
from .fiat_shamir import (
    NonInteractiveProof, FiatShamirNIZK, BatchableProof, ShortProof,
    ProofCodec, HashFunction
)
from .sigma_protocols import SigmaProtocol, SchnorrDLOG, SchnorrInstance, CIPHERSUITE
from .groups import GroupP256

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'CHALLENGE_LENGTH', 'DOMSEP', 'LABEL_LENGTH',
    'SigmaError', 'VerificationFailed', 'ChallengeConversionFailure',
    'SerializationError', 'ConfigurationError', 'ProverStateReused',
    'NonInteractiveProof', 'FiatShamirNIZK', 'BatchableProof', 'ShortProof',
    'ProofCodec', 'HashFunction',
    'SigmaProtocol', 'SchnorrDLOG', 'SchnorrInstance', 'CIPHERSUITE',
    'GroupP256'
]
