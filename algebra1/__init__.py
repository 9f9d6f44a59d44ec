__version__ = 0.1

from . import rings

from .rings import GF, Polynomial, PolynomialRing, QQ, ZZ  # noqa

from .sqf import sqf, square_free_factorization, SquareFreeFactorization  # noqa

__all__ = rings.__all__ + ['sqf', 'square_free_factorization', 'SquareFreeFactorization']
