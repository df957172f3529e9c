#!/usr/bin/env python3
"""
Tests for the P-256 group and its scalar field.
"""

import pytest

from .groups import GF, GroupP256, P256ScalarField
from .test_drng import TestDRNG


@pytest.fixture
def rng():
    return TestDRNG(b"groups_test_seed")


def test_field_arithmetic():
    F = GF(101)
    a, b = F(7), F(30)
    assert a + b == 37
    assert a - b == 78
    assert a * b == 210 % 101
    assert (a / b) * b == a
    assert -a == 94
    assert 3 - a == 97
    assert a.inverse() * a == 1


def test_field_zero_has_no_inverse():
    with pytest.raises(ZeroDivisionError):
        GF(101).zero().inverse()


def test_sqrt_of_residue_and_non_residue():
    F = GF(103)
    root = F(4).sqrt()
    assert root * root == 4
    assert F(5).sqrt() is None


def test_generator_has_group_order():
    G = GroupP256.generator()
    assert G * GroupP256.n == GroupP256.identity()
    assert G * (GroupP256.n - 1) == -G


def test_scalar_mult_is_linear(rng):
    G = GroupP256.generator()
    x = P256ScalarField.random(rng)
    y = P256ScalarField.random(rng)
    assert G * x + G * y == G * (x + y)
    assert GroupP256.msm([x, y], [G, G]) == G * (x + y)


def test_point_encoding_round_trip(rng):
    for _ in range(4):
        point = GroupP256.random(rng)
        encoded = GroupP256.serialize([point])
        assert len(encoded) == GroupP256.element_byte_length()
        assert GroupP256.deserialize(encoded) == [point]


def test_identity_encoding():
    encoded = GroupP256.serialize([GroupP256.identity()])
    assert encoded == b"\x00" * 33
    assert GroupP256.deserialize(encoded)[0].is_infinity


@pytest.mark.parametrize("data", [
    b"\x04" + b"\x01" * 32,
    b"\x00" + b"\x01" + b"\x00" * 31,
    b"\x02" + b"\xff" * 32,
    b"\x02" * 32,
])
def test_invalid_point_encodings(data):
    with pytest.raises(ValueError):
        GroupP256.deserialize(data)


def test_scalar_encoding_is_canonical():
    assert P256ScalarField.deserialize((5).to_bytes(32, "little"))[0] == 5
    with pytest.raises(ValueError):
        P256ScalarField.deserialize(P256ScalarField.order.to_bytes(32, "little"))
    with pytest.raises(ValueError):
        P256ScalarField.deserialize(b"\x01" * 31)


def test_from_random_bytes():
    n = P256ScalarField.order
    assert P256ScalarField.from_random_bytes((n - 1).to_bytes(32, "little")) == n - 1
    assert P256ScalarField.from_random_bytes(n.to_bytes(32, "little")) is None
    assert P256ScalarField.from_random_bytes(b"\xff" * 32) is None
