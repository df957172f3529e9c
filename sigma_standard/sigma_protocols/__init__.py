"""
Sigma protocols core subpackage.
"""

from .sigma_protocols import (
    SigmaProtocol,
    SchnorrDLOG,
    SchnorrInstance,
    ProverState
)
from .ciphersuite import CIPHERSUITE

__all__ = [
    'SigmaProtocol',
    'SchnorrDLOG',
    'SchnorrInstance',
    'ProverState',
    'CIPHERSUITE'
]
