"""
Short Weierstrass elliptic curves over prime fields, affine coordinates.
"""

from .field import PrimeFieldElement


class EllipticCurvePoint:
    """Point on an elliptic curve. ``x`` and ``y`` are None for the identity."""

    __slots__ = ("curve", "x", "y")

    def __init__(self, curve, x, y):
        self.curve = curve
        self.x = x
        self.y = y

    @property
    def is_infinity(self):
        return self.x is None and self.y is None

    def __add__(self, other):
        if not isinstance(other, EllipticCurvePoint):
            return NotImplemented
        if self.is_infinity:
            return other
        if other.is_infinity:
            return self

        if self.x == other.x:
            if self.y != other.y or self.y.value == 0:
                return self.curve.infinity()
            # doubling
            s = (3 * self.x * self.x + self.curve.a) / (2 * self.y)
            x3 = s * s - 2 * self.x
        else:
            s = (other.y - self.y) / (other.x - self.x)
            x3 = s * s - self.x - other.x
        y3 = s * (self.x - x3) - self.y
        return EllipticCurvePoint(self.curve, x3, y3)

    def __sub__(self, other):
        if not isinstance(other, EllipticCurvePoint):
            return NotImplemented
        return self + (-other)

    def __neg__(self):
        if self.is_infinity:
            return self
        return EllipticCurvePoint(self.curve, self.x, -self.y)

    def __mul__(self, scalar):
        """Double-and-add scalar multiplication."""
        if isinstance(scalar, PrimeFieldElement):
            scalar = scalar.value
        if not isinstance(scalar, int):
            return NotImplemented
        if scalar < 0:
            return (-self) * (-scalar)

        result = self.curve.infinity()
        addend = self
        while scalar:
            if scalar & 1:
                result = result + addend
            addend = addend + addend
            scalar >>= 1
        return result

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, EllipticCurvePoint):
            return NotImplemented
        if self.is_infinity or other.is_infinity:
            return self.is_infinity and other.is_infinity
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        if self.is_infinity:
            return hash(None)
        return hash((self.x.value, self.y.value))

    def __repr__(self):
        if self.is_infinity:
            return "Point at infinity"
        return f"({self.x.value}, {self.y.value})"


class EllipticCurve:
    """Elliptic curve y^2 = x^3 + ax + b over a prime field."""

    def __init__(self, field, a, b):
        self.field = field
        self.a = field(a)
        self.b = field(b)

        if 4 * self.a * self.a * self.a + 27 * self.b * self.b == 0:
            raise ValueError("Singular curve")

    def __call__(self, x, y):
        """Create a point, checking that it lies on the curve."""
        x = self.field(x)
        y = self.field(y)
        if y * y != self.rhs(x):
            raise ValueError(f"Point ({x.value}, {y.value}) not on curve")
        return EllipticCurvePoint(self, x, y)

    def rhs(self, x):
        return x * x * x + self.a * x + self.b

    def infinity(self):
        return EllipticCurvePoint(self, None, None)

    def lift_x(self, x_value, odd):
        """Recover the point with abscissa ``x_value`` and the given y parity."""
        if not 0 <= x_value < self.field.p:
            raise ValueError("x coordinate out of range")
        x = self.field(x_value)
        y = self.rhs(x).sqrt()
        if y is None:
            raise ValueError("x coordinate is not on the curve")
        if (y.value & 1) != int(odd):
            y = -y
        return EllipticCurvePoint(self, x, y)

    def __repr__(self):
        return f"EllipticCurve(GF({self.field.p}), [{self.a.value}, {self.b.value}])"
