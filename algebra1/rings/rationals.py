from __future__ import annotations

from fractions import Fraction
from typing import Any, final, Optional

from gmpy2 import mpq, mpz

from ..abc import CoefficientDomain, Field, FromInt, NotAUnitError, Unit


@final
class RationalField(Field[mpq], CoefficientDomain[mpq], FromInt[mpq]):
    """The field of rational numbers. Elements are instances of
    :class:`gmpy2.mpq`.

    This is a singleton class, whose unique instance is assigned to
    :data:`QQ`. Every non-zero rational is a unit, so the normal form of an
    element is either 0 or 1:

    >>> QQ.unit_and_normal(QQ('-3/4'))
    (Unit(value=mpq(-3,4)), mpq(1,1))
    >>> QQ.checked_inv(QQ('2/3'))
    mpq(3,2)
    >>> QQ.checked_inv(QQ.zero) is None
    True
    """

    _instance: Optional[RationalField] = None

    @property
    def characteristic(self) -> int:
        return 0

    @property
    def one(self) -> mpq:
        return mpq(1)

    @property
    def zero(self) -> mpq:
        return mpq(0)

    def __call__(self, obj: Any) -> mpq:
        match obj:
            case bool():
                raise ValueError(f'{obj!r} is not a rational number')
            case int() | str() | mpz():
                return mpq(obj)
            case Fraction():
                return mpq(obj.numerator, obj.denominator)
            case mpq():
                return obj
            case _:
                raise ValueError(f'{obj!r} is not a rational number')

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'QQ'

    def add(self, a: mpq, b: mpq) -> mpq:
        return a + b

    def assert_unit(self, a: mpq) -> Unit[mpq]:
        if a == 0:
            raise NotAUnitError(f'0 is not a unit in {self}')
        return Unit(a)

    def checked_inv(self, a: mpq) -> Optional[mpq]:
        if a == 0:
            return None
        return mpq(1) / a

    def exact_div(self, a: mpq, b: mpq) -> mpq:
        if b == 0:
            raise ZeroDivisionError(f'division of {a} by zero')
        return a / b

    def from_int(self, n: int) -> mpq:
        return mpq(n)

    def gcd(self, a: mpq, b: mpq) -> mpq:
        """
        >>> QQ.gcd(QQ(6), QQ('1/2')), QQ.gcd(QQ(0), QQ(0))
        (mpq(1,1), mpq(0,1))
        """
        if a == 0 and b == 0:
            return self.zero
        return self.one

    def invert(self, u: Unit[mpq]) -> Unit[mpq]:
        return Unit(mpq(1) / u.value)

    def is_nilpotent(self, a: mpq) -> bool:
        return a == 0

    def mul(self, a: mpq, b: mpq) -> mpq:
        return a * b

    def neg(self, a: mpq) -> mpq:
        return -a

    def unit_and_normal(self, a: mpq) -> tuple[Unit[mpq], mpq]:
        if a == 0:
            return Unit(self.one), self.zero
        return Unit(a), self.one


QQ = RationalField()
"""The unique instance of :class:`RationalField`.
"""
