from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Optional

import gmpy2
from gmpy2 import mpq, mpz

from ..abc import CoefficientDomain, Field, FromInt, NotAUnitError, Unit


@dataclass(frozen=True, repr=False)
class PrimeField(Field[mpz], CoefficientDomain[mpz], FromInt[mpz]):
    """The field of integers modulo a prime `modulus`. Elements are
    instances of :class:`gmpy2.mpz` in the range ``0, ..., modulus - 1``.

    >>> F = GF(101)
    >>> F
    GF(101)
    >>> F(-1), F('1/2')
    (mpz(100), mpz(51))
    >>> F.mul(F(51), F(2))
    mpz(1)

    Square-free factorization over such fields is restricted to polynomials
    whose degree is smaller than the modulus; compare :mod:`.sqf`.
    """

    modulus: int

    @property
    def characteristic(self) -> int:
        return self.modulus

    @property
    def one(self) -> mpz:
        return mpz(1)

    @property
    def zero(self) -> mpz:
        return mpz(0)

    def __call__(self, obj: Any) -> mpz:
        match obj:
            case bool():
                raise ValueError(f'{obj!r} is not an element of {self}')
            case int() | mpz():
                return mpz(obj) % self.modulus
            case str():
                return self(mpq(obj))
            case Fraction() | mpq():
                den = mpz(obj.denominator)
                if den % self.modulus == 0:
                    raise ValueError(f'{obj} has no image in {self}')
                return mpz(obj.numerator) * gmpy2.invert(den, self.modulus) % self.modulus
            case _:
                raise ValueError(f'{obj!r} is not an element of {self}')

    def __post_init__(self) -> None:
        if not gmpy2.is_prime(self.modulus):
            raise ValueError(f'{self.modulus} is not a prime')

    def __repr__(self) -> str:
        return f'GF({self.modulus})'

    def add(self, a: mpz, b: mpz) -> mpz:
        return (a + b) % self.modulus

    def assert_unit(self, a: mpz) -> Unit[mpz]:
        if a == 0:
            raise NotAUnitError(f'0 is not a unit in {self}')
        return Unit(a)

    def checked_inv(self, a: mpz) -> Optional[mpz]:
        if a == 0:
            return None
        return gmpy2.invert(a, self.modulus)

    def exact_div(self, a: mpz, b: mpz) -> mpz:
        if b == 0:
            raise ZeroDivisionError(f'division of {a} by zero')
        return a * gmpy2.invert(b, self.modulus) % self.modulus

    def from_int(self, n: int) -> mpz:
        return mpz(n) % self.modulus

    def gcd(self, a: mpz, b: mpz) -> mpz:
        if a == 0 and b == 0:
            return self.zero
        return self.one

    def invert(self, u: Unit[mpz]) -> Unit[mpz]:
        return Unit(gmpy2.invert(u.value, self.modulus))

    def is_nilpotent(self, a: mpz) -> bool:
        return a == 0

    def mul(self, a: mpz, b: mpz) -> mpz:
        return a * b % self.modulus

    def neg(self, a: mpz) -> mpz:
        return -a % self.modulus

    def unit_and_normal(self, a: mpz) -> tuple[Unit[mpz], mpz]:
        if a == 0:
            return Unit(self.one), self.zero
        return Unit(a), self.one


GF = PrimeField
