from __future__ import annotations

from abc import abstractmethod
from functools import reduce
from typing import Iterable

from .ring import CommutativeRing, Unit, ρ


class CoefficientDomain(CommutativeRing[ρ]):
    """A commutative ring with a notion of normal form modulo units and with
    greatest common divisors. These are the rings admissible as coefficients
    of polynomials whose gcd is computed via :meth:`.PolynomialRing.gcd`.
    """

    def content(self, elements: Iterable[ρ]) -> ρ:
        """The normalized gcd of all `elements`; zero for no elements.

        >>> from algebra1.rings import ZZ
        >>> ZZ.content([ZZ(-6), ZZ(4), ZZ(10)])
        mpz(2)
        """
        return reduce(self.gcd, elements, self.zero)

    @abstractmethod
    def exact_div(self, a: ρ, b: ρ) -> ρ:
        """The quotient `a / b`, where the caller knows that `b` divides `a`.
        Raises :exc:`ArithmeticError` otherwise.
        """
        ...

    @abstractmethod
    def gcd(self, a: ρ, b: ρ) -> ρ:
        """A greatest common divisor of `a` and `b` in normal form.
        """
        ...

    def normal(self, a: ρ) -> ρ:
        """The normal part of :meth:`unit_and_normal`.
        """
        return self.unit_and_normal(a)[1]

    @abstractmethod
    def unit_and_normal(self, a: ρ) -> tuple[Unit[ρ], ρ]:
        """Decompose `a` into a unit `u` and a normal part `n` with ``a == u *
        n``. The normal part is the canonical representative among all
        associates of `a`. For zero, the unit is one and the normal part is
        zero.
        """
        ...
