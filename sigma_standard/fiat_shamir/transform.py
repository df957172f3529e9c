"""
Fiat-Shamir transformation of Sigma protocols.

The challenge for a commitment ``a`` and optional message ``m`` is the first
32 bytes of

    H(hd || hctx || ha || H(m) || a)      (message present)
    H(hd || hctx || ha || a)              (no message)

where ``hd = H(DOMSEP)``, ``hctx = H(context)`` and ``ha`` is the protocol
label. All inner digests are truncated to 32 bytes.
"""

import hmac
import logging

from ..constants import CHALLENGE_LENGTH, DOMSEP, LABEL_LENGTH
from ..errors import ConfigurationError, VerificationFailed
from .codec import BatchableProof, ProofCodec, ShortProof
from .hash_registry import HashFunction

logger = logging.getLogger(__name__)


def _as_bytes(value, what):
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise ConfigurationError(f"{what} must be bytes, got {type(value).__name__}")
    return bytes(value)


class NonInteractiveProof:
    """
    A NIZK session bound to one Sigma protocol instance, hash and context.

    The session labels are computed once. Every challenge is derived from a
    clone of a hash state that has absorbed ``hd || hctx || ha`` and nothing
    else, so the session can be reused for any number of proofs and
    verifications.
    """

    def __init__(self, protocol, hasher, context):
        if hasher.digest_size is None or hasher.digest_size < CHALLENGE_LENGTH:
            raise ConfigurationError(
                f"Hash digest must be at least {CHALLENGE_LENGTH} bytes"
            )
        context = _as_bytes(context, "context")

        self.protocol = protocol
        self.codec = ProofCodec(protocol)
        self._hasher = hasher.clone()
        # discard anything absorbed before the session took ownership
        self._hasher.finalize_reset()

        self.hd = self._label_digest(DOMSEP)
        self.ha = bytes(protocol.label())
        if len(self.ha) != LABEL_LENGTH:
            raise ConfigurationError(f"Protocol label must be {LABEL_LENGTH} bytes")
        self.hctx = self._label_digest(context)

        self._prefix = self._hasher.clone()
        self._prefix.update(self.hd)
        self._prefix.update(self.hctx)
        self._prefix.update(self.ha)

        logger.debug(
            "NIZK session for %s with %r, context of %d bytes",
            type(protocol).__name__, hasher, len(context),
        )

    def _label_digest(self, data):
        hasher = self._hasher.clone()
        hasher.update(data)
        return hasher.finalize_reset()[:LABEL_LENGTH]

    def challenge(self, message, commitment):
        """Derive the challenge for ``commitment`` and an optional message."""
        commitment_bytes = self.protocol.serialize_commitment(commitment)

        hasher = self._prefix.clone()
        if message is not None:
            hasher.update(self._label_digest(_as_bytes(message, "message")))
        hasher.update(commitment_bytes)
        return hasher.finalize_reset()[:CHALLENGE_LENGTH]

    def _commit_and_respond(self, witness, message, rng):
        commitment, prover_state = self.protocol.prover_commit(witness, rng)
        challenge = self.challenge(message, commitment)
        response = self.protocol.prover_response(prover_state, challenge)
        return commitment, challenge, response

    def batchable_proof(self, witness, rng, message=None):
        """
        Produce a batchable proof.

        Raises ChallengeConversionFailure when the derived challenge is not a
        valid scalar; call again to retry with fresh randomness.
        """
        commitment, _, response = self._commit_and_respond(witness, message, rng)
        return BatchableProof(commitment, response)

    def batchable_verify(self, proof, message=None):
        """Return True, or raise VerificationFailed."""
        challenge = self.challenge(message, proof.commitment)
        return self.protocol.verifier(proof.commitment, challenge, proof.response)

    def short_proof(self, witness, rng, message=None):
        """Produce a short proof; same failure modes as ``batchable_proof``."""
        _, challenge, response = self._commit_and_respond(witness, message, rng)
        return ShortProof(challenge, response)

    def short_verify(self, proof, message=None):
        """Return True, or raise VerificationFailed."""
        commitment = self.protocol.simulate_commitment(proof.challenge, proof.response)
        challenge = self.challenge(message, commitment)

        if not hmac.compare_digest(challenge, bytes(proof.challenge)):
            logger.debug("Short proof rejected: recomputed challenge differs")
            raise VerificationFailed("Recomputed challenge does not match")
        return True

    def prove(self, witness, rng, message=None):
        """Batchable proof, encoded."""
        return self.codec.encode_batchable(self.batchable_proof(witness, rng, message))

    def verify(self, data, message=None):
        return self.batchable_verify(self.codec.decode_batchable(data), message)

    def prove_short(self, witness, rng, message=None):
        """Short proof, encoded."""
        return self.codec.encode_short(self.short_proof(witness, rng, message))

    def verify_short(self, data, message=None):
        return self.short_verify(self.codec.decode_short(data), message)


class FiatShamirNIZK:
    """
    Non-interactive zero-knowledge proof via Fiat-Shamir.

    Binds a Sigma protocol class, a group and a hash function; calling it
    with a context and an instance opens a session.
    """

    def __init__(self, protocol, group, hash_function):
        self.Protocol = protocol
        self.Group = group
        if isinstance(hash_function, HashFunction):
            hash_function = hash_function.hash_class
        self.Hash = hash_function

    def __call__(self, context, instance, **protocol_options):
        """Create a proof interface for the given instance."""
        if getattr(instance, "group", self.Group) is not self.Group:
            raise ConfigurationError(
                f"Instance over {instance.group.name} used with a {self.Group.name} ciphersuite"
            )
        protocol = self.Protocol(instance, **protocol_options)
        return NonInteractiveProof(protocol, self.Hash(), context)
