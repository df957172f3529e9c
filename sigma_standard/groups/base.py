"""
Base classes for prime-order groups and their scalar fields.
"""

from abc import ABC, abstractmethod
from .field import GF, PrimeFieldElement


class Field(ABC):
    """Abstract base class for fields."""

    # Class attributes to be defined by concrete implementations
    order = None
    field = None
    field_bytes_length = None

    @classmethod
    @abstractmethod
    def scalar_byte_length(cls):
        """Return the byte length of a scalar."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def random(cls, rng):
        """Generate a random field element."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def serialize(cls, scalars):
        """Serialize a list of field elements to bytes."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def deserialize(cls, data):
        """Deserialize bytes to a list of field elements."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def from_random_bytes(cls, data):
        """Map bytes to a field element, or return None if they do not fit."""
        raise NotImplementedError


class ScalarField(Field):
    """Scalar field of a prime-order group, subclassed with a specific order."""

    def __init_subclass__(cls, order=None, **kwargs):
        super().__init_subclass__(**kwargs)
        if order is not None:
            cls.order = order
            cls.field = GF(order)
            cls.field_bytes_length = (order.bit_length() + 7) // 8

    @classmethod
    def scalar_byte_length(cls):
        return cls.field_bytes_length

    @classmethod
    def random(cls, rng):
        """Random nonzero scalar drawn from ``rng.randint``."""
        return cls.field(rng.randint(1, cls.order - 1))

    @classmethod
    def serialize(cls, scalars):
        """Little-endian, fixed width."""
        result = b""
        for scalar in scalars:
            value = scalar.value if isinstance(scalar, PrimeFieldElement) else scalar % cls.order
            result += value.to_bytes(cls.field_bytes_length, 'little')
        return result

    @classmethod
    def deserialize(cls, data):
        """Deserialize bytes to a list of scalars, rejecting non-canonical values."""
        scalar_len = cls.field_bytes_length
        if len(data) % scalar_len != 0:
            raise ValueError("Invalid data length")

        scalars = []
        for i in range(0, len(data), scalar_len):
            value = int.from_bytes(data[i:i + scalar_len], 'little')
            if value >= cls.order:
                raise ValueError("Scalar is not reduced modulo the group order")
            scalars.append(cls.field(value))
        return scalars

    @classmethod
    def from_random_bytes(cls, data):
        """
        Interpret ``data`` as a little-endian integer, keep as many low bits as
        the order has, and return the scalar if it is below the order.

        Returns None otherwise. How often that happens depends on how close the
        order is to a power of two.
        """
        value = int.from_bytes(bytes(data), 'little')
        value &= (1 << cls.order.bit_length()) - 1
        if value >= cls.order:
            return None
        return cls.field(value)


class Group(ABC):
    """Abstract base class for prime-order groups written additively."""

    ScalarField = None
    name = None

    @classmethod
    @abstractmethod
    def generator(cls):
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def identity(cls):
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def serialize(cls, elements):
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def deserialize(cls, data):
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def element_byte_length(cls):
        raise NotImplementedError

    @classmethod
    def random(cls, rng):
        """Generate random group element."""
        scalar = cls.ScalarField.random(rng)
        return cls.scalar_mult(scalar, cls.generator())

    @classmethod
    def scalar_mult(cls, scalar, element):
        if isinstance(scalar, PrimeFieldElement):
            scalar = scalar.value
        return element * scalar

    @classmethod
    def msm(cls, scalars, elements):
        """Multi-scalar multiplication."""
        if len(scalars) != len(elements):
            raise ValueError("Scalars and elements must have same length")

        result = cls.identity()
        for scalar, element in zip(scalars, elements):
            result = result + cls.scalar_mult(scalar, element)
        return result
