"""
Wire encodings of non-interactive proofs.

    batchable proof:  commitment || response
    short proof:      challenge (32 bytes) || response

Commitment and response use the canonical encodings of the underlying
Sigma protocol, which have fixed length for a given group.
"""

from collections import namedtuple

from ..constants import CHALLENGE_LENGTH
from ..errors import SerializationError


class BatchableProof(namedtuple("BatchableProof", ["commitment", "response"])):
    """Canonical proof form. Verifiable without recomputing the commitment."""
    __slots__ = ()


class ShortProof(namedtuple("ShortProof", ["challenge", "response"])):
    """Compact proof form. The commitment is recomputed by the verifier."""
    __slots__ = ()


class ProofCodec:
    """Maps proofs of one Sigma protocol instance to and from bytes."""

    def __init__(self, protocol):
        self.protocol = protocol

    @property
    def batchable_length(self):
        return self.protocol.commitment_byte_length() + self.protocol.response_byte_length()

    @property
    def short_length(self):
        return CHALLENGE_LENGTH + self.protocol.response_byte_length()

    def encode_batchable(self, proof):
        return (
            self.protocol.serialize_commitment(proof.commitment) +
            self.protocol.serialize_response(proof.response)
        )

    def decode_batchable(self, data):
        data = bytes(data)
        if len(data) != self.batchable_length:
            raise SerializationError(
                f"Batchable proof must be {self.batchable_length} bytes, got {len(data)}"
            )
        commitment_size = self.protocol.commitment_byte_length()
        commitment = self.protocol.deserialize_commitment(data[:commitment_size])
        response = self.protocol.deserialize_response(data[commitment_size:])
        return BatchableProof(commitment, response)

    def encode_short(self, proof):
        return bytes(proof.challenge) + self.protocol.serialize_response(proof.response)

    def decode_short(self, data):
        data = bytes(data)
        if len(data) != self.short_length:
            raise SerializationError(
                f"Short proof must be {self.short_length} bytes, got {len(data)}"
            )
        challenge = data[:CHALLENGE_LENGTH]
        response = self.protocol.deserialize_response(data[CHALLENGE_LENGTH:])
        return ShortProof(challenge, response)
