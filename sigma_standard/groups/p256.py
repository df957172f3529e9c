"""
NIST P-256 (secp256r1) group.
"""

from .field import GF
from .elliptic_curve import EllipticCurve
from .base import Group, ScalarField


class P256ScalarField(ScalarField, order=0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551):
    """Scalar field for P-256 group."""
    pass


class GroupP256(Group):
    """
    NIST P-256 group. Elements use the 33-byte SEC1 compressed encoding; the
    identity is encoded as 33 zero bytes.
    """

    name = "P-256"

    p = 0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff
    n = P256ScalarField.order
    a = p - 3
    b = 0x5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b

    Gx = 0x6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296
    Gy = 0x4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5

    field = GF(p)
    curve = EllipticCurve(field, a, b)
    ScalarField = P256ScalarField

    _generator = None
    _identity = None

    @classmethod
    def generator(cls):
        if cls._generator is None:
            cls._generator = cls.curve(cls.Gx, cls.Gy)
        return cls._generator

    @classmethod
    def identity(cls):
        if cls._identity is None:
            cls._identity = cls.curve.infinity()
        return cls._identity

    @classmethod
    def element_byte_length(cls):
        return 33

    @classmethod
    def serialize(cls, elements):
        result = b""
        for element in elements:
            if element.is_infinity:
                result += b'\x00' * 33
            else:
                prefix = b'\x03' if element.y.value & 1 else b'\x02'
                result += prefix + element.x.value.to_bytes(32, 'big')
        return result

    @classmethod
    def deserialize(cls, data):
        """Raises ValueError on any encoding that is not a valid point."""
        if len(data) % 33 != 0:
            raise ValueError("Invalid data length")

        elements = []
        for i in range(0, len(data), 33):
            chunk = data[i:i + 33]
            flag = chunk[0]
            if flag == 0x00:
                if any(chunk[1:]):
                    raise ValueError("Invalid identity encoding")
                elements.append(cls.identity())
            elif flag in (0x02, 0x03):
                x_value = int.from_bytes(chunk[1:], 'big')
                elements.append(cls.curve.lift_x(x_value, odd=(flag == 0x03)))
            else:
                raise ValueError(f"Invalid point prefix {flag:#04x}")
        return elements
