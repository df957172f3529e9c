"""
Exceptions raised by Sigma protocols and the Fiat-Shamir transform.
"""


class SigmaError(Exception):
    """Base exception for Sigma protocol errors."""

    pass


class VerificationFailed(SigmaError):
    """The verification equation, or the recomputed challenge, did not match."""

    pass


class ChallengeConversionFailure(SigmaError):
    """
    The challenge bytes do not map to a scalar of the underlying field.

    This is an expected event for some fields. The prover should draw fresh
    randomness and try again.
    """

    retryable = True


class SerializationError(SigmaError, ValueError):
    """Malformed or truncated proof bytes."""

    pass


class ConfigurationError(SigmaError):
    """Invalid session or ciphersuite configuration."""

    pass


class ProverStateReused(SigmaError):
    """A prover state was asked to answer a second challenge."""

    pass
