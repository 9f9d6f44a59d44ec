"""Concrete coefficient rings: the integers :data:`ZZ`, the rationals
:data:`QQ`, prime fields :class:`GF`, and polynomial rings
:class:`PolynomialRing` over any of those, including other polynomial rings.
"""

from .integers import IntegerRing, ZZ
from .rationals import RationalField, QQ
from .modular import GF, PrimeField
from .polynomial import Polynomial, PolynomialRing

__all__ = [
    'IntegerRing', 'ZZ',

    'RationalField', 'QQ',

    'GF', 'PrimeField',

    'Polynomial', 'PolynomialRing'
]
