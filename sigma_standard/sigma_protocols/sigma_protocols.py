"""
Pure Python implementation of Sigma protocols for zero-knowledge proofs.

Sigma protocols are not meant to be run interactively; use them through the
Fiat-Shamir transform in ``fiat_shamir``.
"""

import logging
from abc import ABC, abstractmethod
from collections import namedtuple

from ..constants import LABEL_LENGTH
from ..errors import (
    ChallengeConversionFailure,
    ConfigurationError,
    ProverStateReused,
    SerializationError,
    VerificationFailed,
)

logger = logging.getLogger(__name__)


class SigmaProtocol(ABC):
    """
    Abstract base class for Sigma protocols.

    A Sigma protocol is a 3-message protocol that is special sound and
    honest-verifier zero-knowledge. Challenges are 32-byte strings; each
    protocol maps them to its own challenge space and raises
    ChallengeConversionFailure when that is not possible.
    """

    @abstractmethod
    def __init__(self, instance):
        raise NotImplementedError

    @abstractmethod
    def label(self):
        """32-byte identifier of the protocol construction."""
        raise NotImplementedError

    @abstractmethod
    def prover_commit(self, witness, rng):
        """Return ``(commitment, prover_state)``."""
        raise NotImplementedError

    @abstractmethod
    def prover_response(self, prover_state, challenge):
        raise NotImplementedError

    @abstractmethod
    def verifier(self, commitment, challenge, response):
        """Return True, or raise VerificationFailed."""
        raise NotImplementedError

    @abstractmethod
    def simulate_response(self, rng):
        raise NotImplementedError

    @abstractmethod
    def simulate_commitment(self, challenge, response):
        raise NotImplementedError

    @abstractmethod
    def serialize_commitment(self, commitment):
        raise NotImplementedError

    @abstractmethod
    def serialize_response(self, response):
        raise NotImplementedError

    @abstractmethod
    def deserialize_commitment(self, data):
        raise NotImplementedError

    @abstractmethod
    def deserialize_response(self, data):
        raise NotImplementedError

    @abstractmethod
    def commitment_byte_length(self):
        raise NotImplementedError

    @abstractmethod
    def response_byte_length(self):
        raise NotImplementedError

    def simulate_transcript(self, challenge, rng):
        """
        Zero-knowledge simulator: an accepting ``(commitment, response)`` pair
        for ``challenge``, produced without a witness.
        """
        response = self.simulate_response(rng)
        return self.simulate_commitment(challenge, response), response


class SchnorrInstance(namedtuple("SchnorrInstance", ["group", "base", "claim"])):
    """
    Statement of the DLOG proof: the prover claims to know ``x`` with
    ``claim = x * base``.
    """
    __slots__ = ()


class ProverState:
    """Witness and nonce of one commitment. Answers a single challenge."""

    __slots__ = ("witness", "nonce", "used")

    def __init__(self, witness, nonce):
        self.witness = witness
        self.nonce = nonce
        self.used = False


class SchnorrDLOG(SigmaProtocol):
    """
    Schnorr proof of knowledge of a discrete logarithm.

        commitment = r * base
        response   = r - c * witness
        accept iff response * base + c * claim == commitment
    """

    def __init__(self, instance, label=None):
        self.instance = instance
        self.group = instance.group
        self.Domain = instance.group.ScalarField
        if label is None:
            label = self.default_label(instance.group)
        label = bytes(label)
        if len(label) != LABEL_LENGTH:
            raise ConfigurationError(f"Protocol label must be {LABEL_LENGTH} bytes")
        self._label = label

    @staticmethod
    def default_label(group):
        protocol_id = b"sigma/schnorr-dlog/" + group.name.encode("ascii")
        if len(protocol_id) > LABEL_LENGTH:
            raise ConfigurationError(f"Group name too long for a label: {group.name}")
        return protocol_id.ljust(LABEL_LENGTH, b"\0")

    def label(self):
        return self._label

    def _challenge_scalar(self, challenge):
        scalar = self.Domain.from_random_bytes(challenge)
        if scalar is None:
            logger.debug("Challenge %s is not a valid scalar", bytes(challenge).hex())
            raise ChallengeConversionFailure("Challenge bytes do not map to a scalar")
        return scalar

    def prover_commit(self, witness, rng):
        """Generate prover's first message (commitment)."""
        nonce = self.Domain.random(rng)
        commitment = self.group.scalar_mult(nonce, self.instance.base)
        return commitment, ProverState(self.Domain.field(witness), nonce)

    def prover_response(self, prover_state, challenge):
        if prover_state.used:
            raise ProverStateReused("Prover state already answered a challenge")
        c = self._challenge_scalar(challenge)
        prover_state.used = True
        return prover_state.nonce - c * prover_state.witness

    def verifier(self, commitment, challenge, response):
        if commitment != self.simulate_commitment(challenge, response):
            logger.debug("Schnorr verification equation does not hold")
            raise VerificationFailed("Verification equation does not hold")
        return True

    def simulate_response(self, rng):
        return self.Domain.field.random(rng)

    def simulate_commitment(self, challenge, response):
        c = self._challenge_scalar(challenge)
        return self.group.msm([response, c], [self.instance.base, self.instance.claim])

    def serialize_commitment(self, commitment):
        return self.group.serialize([commitment])

    def serialize_response(self, response):
        return self.Domain.serialize([response])

    def deserialize_commitment(self, data):
        if len(data) != self.commitment_byte_length():
            raise SerializationError("Invalid commitment length")
        try:
            return self.group.deserialize(data)[0]
        except ValueError as exc:
            raise SerializationError(f"Invalid commitment: {exc}") from exc

    def deserialize_response(self, data):
        if len(data) != self.response_byte_length():
            raise SerializationError("Invalid response length")
        try:
            return self.Domain.deserialize(data)[0]
        except ValueError as exc:
            raise SerializationError(f"Invalid response: {exc}") from exc

    def commitment_byte_length(self):
        return self.group.element_byte_length()

    def response_byte_length(self):
        return self.Domain.scalar_byte_length()
