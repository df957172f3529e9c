"""
Pure Python implementation of prime field arithmetic.
"""


class PrimeFieldElement:
    """Element of a prime field GF(p)."""

    __slots__ = ("field", "value")

    def __init__(self, value, field):
        self.field = field
        self.value = value % field.p

    def _coerce(self, other):
        if isinstance(other, PrimeFieldElement):
            if other.field.p != self.field.p:
                raise ValueError("Elements belong to different fields")
            return other.value
        if isinstance(other, int):
            return other
        return None

    def __add__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return PrimeFieldElement(self.value + value, self.field)

    __radd__ = __add__

    def __sub__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return PrimeFieldElement(self.value - value, self.field)

    def __rsub__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return PrimeFieldElement(value - self.value, self.field)

    def __mul__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return PrimeFieldElement(self.value * value, self.field)

    __rmul__ = __mul__

    def __truediv__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self * self.field(value).inverse()

    def __pow__(self, exp):
        return PrimeFieldElement(pow(self.value, exp, self.field.p), self.field)

    def __neg__(self):
        return PrimeFieldElement(-self.value, self.field)

    def __eq__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self.value == value % self.field.p

    def __hash__(self):
        return hash((self.field.p, self.value))

    def __int__(self):
        return self.value

    def __bool__(self):
        return self.value != 0

    def __repr__(self):
        return f"PrimeFieldElement({self.value}, GF({self.field.p}))"

    def inverse(self):
        """Multiplicative inverse; zero has none."""
        if self.value == 0:
            raise ZeroDivisionError("Zero has no inverse")
        return PrimeFieldElement(pow(self.value, -1, self.field.p), self.field)

    def is_square(self):
        """Euler's criterion."""
        if self.value == 0:
            return True
        return pow(self.value, (self.field.p - 1) // 2, self.field.p) == 1

    def sqrt(self):
        """Square root, or None for non-residues (p = 3 mod 4 only)."""
        if self.field.p % 4 != 3:
            raise NotImplementedError("sqrt only implemented for p = 3 mod 4")
        if not self.is_square():
            return None
        return PrimeFieldElement(pow(self.value, (self.field.p + 1) // 4, self.field.p), self.field)


class FiniteField:
    """Prime field GF(p)."""

    def __init__(self, p):
        self.p = p
        self.order = p
        self.bit_length = p.bit_length()
        self.byte_length = (self.bit_length + 7) // 8

    def __call__(self, value):
        if isinstance(value, PrimeFieldElement):
            return PrimeFieldElement(value.value, self)
        return PrimeFieldElement(value, self)

    def __eq__(self, other):
        return isinstance(other, FiniteField) and other.p == self.p

    def __hash__(self):
        return hash(self.p)

    def zero(self):
        return PrimeFieldElement(0, self)

    def one(self):
        return PrimeFieldElement(1, self)

    def random(self, rng):
        """Uniform field element drawn from ``rng.randint``."""
        return PrimeFieldElement(rng.randint(0, self.p - 1), self)

    def __repr__(self):
        return f"GF({self.p})"


def GF(p):
    """Factory for prime fields."""
    return FiniteField(p)
