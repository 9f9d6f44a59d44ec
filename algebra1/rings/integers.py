from __future__ import annotations

from fractions import Fraction
from typing import Any, final, Optional

import gmpy2
from gmpy2 import mpq, mpz

from ..abc import CoefficientDomain, FromInt, NotAUnitError, Unit


@final
class IntegerRing(CoefficientDomain[mpz], FromInt[mpz]):
    """The ring of integers. Elements are instances of :class:`gmpy2.mpz`.

    This is a singleton class, whose unique instance is assigned to
    :data:`ZZ`.

    >>> IntegerRing() is ZZ
    True
    >>> ZZ(-12), ZZ.unit_and_normal(ZZ(-12))
    (mpz(-12), (Unit(value=mpz(-1)), mpz(12)))
    """

    _instance: Optional[IntegerRing] = None

    @property
    def characteristic(self) -> int:
        return 0

    @property
    def one(self) -> mpz:
        return mpz(1)

    @property
    def zero(self) -> mpz:
        return mpz(0)

    def __call__(self, obj: Any) -> mpz:
        match obj:
            case bool():
                raise ValueError(f'{obj!r} is not an integer')
            case int() | str():
                return mpz(obj)
            case Fraction() if obj.denominator == 1:
                return mpz(obj.numerator)
            case mpz():
                return obj
            case mpq() if obj.denominator == 1:
                return mpz(obj.numerator)
            case _:
                raise ValueError(f'{obj!r} is not an integer')

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'ZZ'

    def add(self, a: mpz, b: mpz) -> mpz:
        return a + b

    def assert_unit(self, a: mpz) -> Unit[mpz]:
        if abs(a) != 1:
            raise NotAUnitError(f'{a} is not a unit in {self}')
        return Unit(a)

    def exact_div(self, a: mpz, b: mpz) -> mpz:
        """
        >>> ZZ.exact_div(ZZ(-12), ZZ(4))
        mpz(-3)
        >>> ZZ.exact_div(ZZ(7), ZZ(2))
        Traceback (most recent call last):
        ...
        ArithmeticError: 2 does not divide 7 in ZZ
        """
        if b == 0:
            raise ZeroDivisionError(f'division of {a} by zero')
        q, r = gmpy2.t_divmod(a, b)
        if r != 0:
            raise ArithmeticError(f'{b} does not divide {a} in {self}')
        return q

    def from_int(self, n: int) -> mpz:
        return mpz(n)

    def gcd(self, a: mpz, b: mpz) -> mpz:
        return gmpy2.gcd(a, b)

    def invert(self, u: Unit[mpz]) -> Unit[mpz]:
        # The units 1 and -1 are their own inverses.
        return Unit(u.value)

    def is_nilpotent(self, a: mpz) -> bool:
        return a == 0

    def mul(self, a: mpz, b: mpz) -> mpz:
        return a * b

    def neg(self, a: mpz) -> mpz:
        return -a

    def unit_and_normal(self, a: mpz) -> tuple[Unit[mpz], mpz]:
        if a < 0:
            return Unit(mpz(-1)), -a
        return Unit(mpz(1)), a


ZZ = IntegerRing()
"""The unique instance of :class:`IntegerRing`.
"""
