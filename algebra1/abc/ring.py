"""Generic abstract classes specifying commutative rings. The classes act as
interfaces: algorithms like :func:`.sqf.sqf` are written once against them and
never look at the concrete type of coefficients.

A ring is represented by a *parent* object, which implements the arithmetic
on its elements. Elements themselves are raw values, e.g., :class:`gmpy2.mpz`
for :data:`.rings.ZZ`. This separation is what allows a polynomial to be a
coefficient of another polynomial.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar


ρ = TypeVar('ρ')
"""A type variable denoting the type of ring elements.
"""


class NotAUnitError(ArithmeticError):
    """Raised by :meth:`.CommutativeRing.assert_unit` when the asserted element
    is not invertible. This signals a violated precondition of the caller and
    is not meant to be caught in normal operation.
    """
    pass


@dataclass(frozen=True)
class Unit(Generic[ρ]):
    """An element that is known to be a unit, i.e., invertible in its ring.

    Instances are obtained from :meth:`.CommutativeRing.assert_unit`, which
    checks the property once. Afterwards, :meth:`.CommutativeRing.invert` can
    rely on it.

    >>> from algebra1.rings import ZZ
    >>> u = ZZ.assert_unit(ZZ(-1))
    >>> u.value
    mpz(-1)
    """

    value: ρ


class CommutativeRing(ABC, Generic[ρ]):
    """A commutative ring with one. Subclasses implement the abstract methods
    and properties; subtraction, equality, identity tests, and powers have
    generic implementations in terms of those.
    """

    @property
    @abstractmethod
    def characteristic(self) -> int:
        """The characteristic of the ring; 0 for rings containing the
        integers.
        """
        ...

    @property
    @abstractmethod
    def one(self) -> ρ:
        """The multiplicative identity.
        """
        ...

    @property
    @abstractmethod
    def zero(self) -> ρ:
        """The additive identity.
        """
        ...

    @abstractmethod
    def __call__(self, obj: Any) -> ρ:
        """Coerce `obj` into an element of this ring.
        """
        ...

    @abstractmethod
    def add(self, a: ρ, b: ρ) -> ρ:
        ...

    @abstractmethod
    def assert_unit(self, a: ρ) -> Unit[ρ]:
        """Wrap `a` as a :class:`Unit`. Raises :exc:`NotAUnitError` if `a` is
        not invertible.
        """
        ...

    def eq(self, a: ρ, b: ρ) -> bool:
        return bool(a == b)

    @abstractmethod
    def invert(self, u: Unit[ρ]) -> Unit[ρ]:
        """The multiplicative inverse of the unit `u`, again as a unit.
        """
        ...

    @abstractmethod
    def is_nilpotent(self, a: ρ) -> bool:
        """Return whether some power of `a` is zero. In reduced rings, e.g., in
        integral domains, this holds only for zero.
        """
        ...

    def is_one(self, a: ρ) -> bool:
        return self.eq(a, self.one)

    def is_zero(self, a: ρ) -> bool:
        return self.eq(a, self.zero)

    @abstractmethod
    def mul(self, a: ρ, b: ρ) -> ρ:
        ...

    @abstractmethod
    def neg(self, a: ρ) -> ρ:
        ...

    def power(self, a: ρ, n: int) -> ρ:
        """The `n`-th power of `a` via repeated squaring.

        >>> from algebra1.rings import QQ
        >>> QQ.power(QQ('2/3'), 3)
        mpq(8,27)
        >>> QQ.power(QQ(7), 0)
        mpq(1,1)
        """
        if n < 0:
            raise ValueError(f'negative exponent {n}')
        result = self.one
        while n > 0:
            if n & 1:
                result = self.mul(result, a)
            n >>= 1
            if n > 0:
                a = self.mul(a, a)
        return result

    def sub(self, a: ρ, b: ρ) -> ρ:
        return self.add(a, self.neg(b))


class FromInt(ABC, Generic[ρ]):
    """Rings that can lift a Python :class:`int` `n` to ``n * one``. This is
    used, e.g., for the factors in derivatives.
    """

    @abstractmethod
    def from_int(self, n: int) -> ρ:
        ...
