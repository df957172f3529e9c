"""
Ciphersuites for Sigma protocols.
"""

from .sigma_protocols import SchnorrDLOG
from ..fiat_shamir import FiatShamirNIZK, HashFunction
from ..groups import GroupP256


CIPHERSUITE = {
    "P256_BLAKE2B": FiatShamirNIZK(
        SchnorrDLOG,
        GroupP256,
        HashFunction.BLAKE2B
    ),
    "P256_SHA3_256": FiatShamirNIZK(
        SchnorrDLOG,
        GroupP256,
        HashFunction.SHA3_256
    ),
    "P256_BLAKE2S": FiatShamirNIZK(
        SchnorrDLOG,
        GroupP256,
        HashFunction.BLAKE2S
    ),
}
