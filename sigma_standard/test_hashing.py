#!/usr/bin/env python3
"""
Tests for the hash objects and the hash function registry.
"""

import hashlib

import pytest

from .fiat_shamir import Blake2bHash, HashFunction, Sha3_256Hash


@pytest.mark.parametrize("hash_function, block_len, digest_len", [
    (HashFunction.BLAKE2B, 128, 64),
    (HashFunction.SHA3_256, 136, 32),
    (HashFunction.BLAKE2S, 64, 32),
])
def test_registry_parameters(hash_function, block_len, digest_len):
    assert hash_function.block_len == block_len
    assert hash_function.digest_len == digest_len

    hasher = hash_function.new()
    assert hasher.block_size == block_len
    assert hasher.digest_size == digest_len


def test_finalize_reset_matches_hashlib_and_resets():
    hasher = Sha3_256Hash()
    hasher.update(b"hello ")
    hasher.update(b"world")
    assert hasher.finalize_reset() == hashlib.sha3_256(b"hello world").digest()

    hasher.update(b"again")
    assert hasher.finalize_reset() == hashlib.sha3_256(b"again").digest()
    assert hasher.finalize_reset() == hashlib.sha3_256(b"").digest()


def test_clone_is_independent():
    hasher = Blake2bHash()
    hasher.update(b"prefix")
    clone = hasher.clone()
    clone.update(b"suffix")

    assert hasher.finalize_reset() == hashlib.blake2b(b"prefix").digest()
    assert clone.finalize_reset() == hashlib.blake2b(b"prefixsuffix").digest()
