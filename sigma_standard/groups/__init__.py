"""
Groups subpackage for cryptographic groups and mathematical primitives.
"""

from .base import Field, Group, ScalarField
from .p256 import GroupP256, P256ScalarField
from .field import GF, FiniteField, PrimeFieldElement
from .elliptic_curve import EllipticCurve, EllipticCurvePoint

__all__ = [
    'Field', 'Group', 'ScalarField', 'GroupP256', 'P256ScalarField',
    'GF', 'FiniteField', 'PrimeFieldElement',
    'EllipticCurve', 'EllipticCurvePoint'
]
