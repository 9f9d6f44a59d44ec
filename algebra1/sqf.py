"""This module :mod:`algebra1.sqf` provides square-free factorization of
univariate polynomials over fields via Yun's algorithm.

A polynomial :math:`f` is *square-free* if it has no repeated irreducible
factor, equivalently :math:`\\gcd(f, f') = 1`. Every non-zero :math:`f` over a
field of characteristic 0 can be written as :math:`f = c \\prod_j s_j^j`,
where :math:`c` is the leading coefficient and the :math:`s_j` are monic,
square-free, and pairwise coprime. Yun's algorithm computes the non-trivial
:math:`s_j` with gcd computations only; it does not split the :math:`s_j`
into irreducible factors.

>>> from algebra1.rings import PolynomialRing, QQ
>>> x = PolynomialRing(QQ, 'x').gen()
>>> f = 2 * (x - 1) * (x + 1)**3 * (x**2 + 1)**3
>>> result = sqf(f)
>>> result
SquareFreeFactorization(2, [(x - 1, 1), (x^3 + x^2 + x + 1, 3)])
>>> print(result)
2(x - 1)(x^3 + x^2 + x + 1)^3
>>> result.expand() == f
True
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import sys
import time
from typing import Any, Generic, Iterator, Optional

from .abc import CommutativeRing, Field, FromInt, is_field
from .abc.ring import ρ
from .rings.polynomial import Polynomial, PolynomialRing
from .support.excepthook import NoTraceException
from .support.logging import DeltaTimeFormatter, Timer

# Create logger
delta_time_formatter = DeltaTimeFormatter(
    '%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(delta_time_formatter)

logger = logging.getLogger(__name__)
logger.propagate = False
logger.addHandler(stream_handler)
logger.addFilter(lambda record: record.msg.strip() != '')
logger.setLevel(logging.WARNING)


def show_progress(flag: bool = True) -> None:
    if flag:
        logger.setLevel(logging.INFO)
    else:
        logger.setLevel(logging.WARNING)


class Multiplicity(int):
    """A positive integer. Multiplicities grow by :meth:`succ`, which
    saturates at :data:`sys.maxsize`.

    >>> Multiplicity(1).succ()
    2
    >>> Multiplicity(sys.maxsize).succ() == sys.maxsize
    True
    >>> Multiplicity(0)
    Traceback (most recent call last):
    ...
    ValueError: multiplicity must be positive; got 0
    """

    def __new__(cls, value: int) -> Multiplicity:
        if value < 1:
            raise ValueError(f'multiplicity must be positive; got {value}')
        return super().__new__(cls, value)

    def succ(self) -> Multiplicity:
        return Multiplicity(min(self + 1, sys.maxsize))


@dataclass(frozen=True)
class SquareFreeFactorization(Generic[ρ]):
    """The result of :func:`sqf`. The original polynomial equals
    :attr:`leading_coeff` times the product of all `factor ** multiplicity`
    for `factor, multiplicity` in :attr:`factors`; compare :meth:`expand`.
    """

    leading_coeff: ρ
    """The leading coefficient of the original polynomial; zero for the zero
    polynomial.
    """

    factors: tuple[tuple[Polynomial[ρ], Multiplicity], ...]
    """Monic, square-free, non-constant, pairwise coprime factors together
    with their multiplicities, ordered by strictly increasing multiplicity.
    """

    parent: PolynomialRing[ρ]
    """The polynomial ring of the original polynomial.
    """

    @property
    def ring(self) -> Field[ρ]:
        """The field of coefficients.
        """
        ring = self.parent.base
        assert is_field(ring)
        return ring

    def __iter__(self) -> Iterator[tuple[Polynomial[ρ], Multiplicity]]:
        return iter(self.factors)

    def __len__(self) -> int:
        return len(self.factors)

    def __repr__(self) -> str:
        factors = ', '.join(f'({f!r}, {m})' for f, m in self.factors)
        return f'SquareFreeFactorization({self.leading_coeff}, [{factors}])'

    def __str__(self) -> str:
        from .printing import sqf_to_str
        return sqf_to_str(self)

    def as_latex(self) -> str:
        """LaTeX representation as a string.

        >>> from algebra1.rings import PolynomialRing, QQ
        >>> x = PolynomialRing(QQ, 'x').gen()
        >>> latex = sqf(2 * x * (x - 1)**2).as_latex()
        >>> latex.startswith('2'), '\\\\left(x - 1\\\\right)^{2}' in latex
        (True, True)
        """
        import sympy
        from .printing import to_sympy
        factors = [to_sympy(f)**int(m) for f, m in self.factors]
        lc = to_sympy(self.parent(self.leading_coeff))
        return sympy.latex(sympy.Mul(lc, *factors))

    def expand(self) -> Polynomial[ρ]:
        """The product of :attr:`leading_coeff` and the powers of all
        :attr:`factors`.
        """
        result = self.parent(self.leading_coeff)
        for f, multiplicity in self.factors:
            result = result * f**multiplicity
        return result


class Options:
    """This class holds options that can be provided to
    :meth:`.SquareFreeFactorizer.__call__`.
    """

    log_level: int
    """The `log_level` of the logger of this module during the call. The
    default :data:`logging.NOTSET` leaves the level as it is.
    """

    log_rate: float
    """The minimal timespan (in s) between two progress logs within the main
    loop of Yun's algorithm.
    """

    def __init__(self, log_level: int = logging.NOTSET, log_rate: float = 0.5) -> None:
        self.log_level = log_level
        self.log_rate = log_rate

    def __repr__(self) -> str:
        return f'Options(log_level={self.log_level}, log_rate={self.log_rate})'


class SquareFreeFactorizer:
    """A callable class that implements square-free factorization via Yun's
    algorithm. Its unique instance is assigned to :data:`sqf`.
    """

    options: Optional[Options] = None
    """The options that have been passed to :meth:`.__call__`.
    """

    time_total: Optional[float] = None
    """The wall time of the last call in seconds.
    """

    def __call__(self, f: Polynomial[ρ], **options: Any) -> SquareFreeFactorization[ρ]:
        """Square-free factorization of `f`.

        :param f:
          A polynomial over a field of characteristic 0 or of characteristic
          larger than the degree of `f`.

        :param `**options`:
          Keyword arguments with keywords corresponding to attributes of
          :class:`.Options`.

        :returns:
          The leading coefficient of `f` together with the monic square-free
          factors of `f` and their multiplicities.

        :raises TypeError:
          if the coefficients of `f` do not form a field.

        :raises ValueError:
          if the characteristic of the coefficient field is positive and not
          larger than the degree of `f`.

        >>> from algebra1.rings import GF, PolynomialRing, QQ, ZZ
        >>> x = PolynomialRing(QQ, 'x').gen()
        >>> sqf(x**2 - 2*x + 1)
        SquareFreeFactorization(1, [(x - 1, 2)])
        >>> sqf(x**3 - x)
        SquareFreeFactorization(1, [(x^3 - x, 1)])
        >>> sqf(0 * x), sqf(x - x + 5)
        (SquareFreeFactorization(0, []), SquareFreeFactorization(5, []))
        >>> y = PolynomialRing(GF(7), 'y').gen()
        >>> sqf(3 * y**3 * (y + 1))
        SquareFreeFactorization(3, [(y + 1, 1), (y, 3)])
        >>> sqf(y**7 - y)
        Traceback (most recent call last):
        ...
        ValueError: characteristic 7 of GF(7) does not exceed degree 7
        >>> sqf(PolynomialRing(ZZ, 'z').gen())
        Traceback (most recent call last):
        ...
        TypeError: coefficient ring ZZ is not a field
        """
        timer = Timer()
        delta_time_formatter.set_reference_time(time.time())
        self.options = Options(**options)
        save_level = logger.level
        try:
            if self.options.log_level != logging.NOTSET:
                logger.setLevel(self.options.log_level)
            logger.info(f'{self.options}')
            result = self.square_free_factorization(f)
            logger.info('finished')
        except KeyboardInterrupt:
            logger.info('keyboard interrupt')
            raise NoTraceException('KeyboardInterrupt')
        finally:
            logger.setLevel(save_level)
        self.time_total = timer.get()
        return result

    @staticmethod
    def _check_field(ring: CommutativeRing[ρ], degree: int) -> Field[ρ]:
        if not is_field(ring):
            raise TypeError(f'coefficient ring {ring} is not a field')
        if not isinstance(ring, FromInt):
            raise TypeError(f'cannot lift integers into {ring}')
        p = ring.characteristic
        if 0 < p <= degree:
            raise ValueError(f'characteristic {p} of {ring} does not exceed degree {degree}')
        return ring

    def square_free_factorization(self, f: Polynomial[ρ]) -> SquareFreeFactorization[ρ]:
        assert self.options is not None
        parent = f.parent
        if f.is_zero():
            field = self._check_field(f.ring, 0)
            return SquareFreeFactorization(field.zero, (), parent)
        degree = len(f.coeffs) - 1
        field = self._check_field(f.ring, degree)
        logger.info(f'degree {degree} over {field}')
        leading_coeff = f.lc()
        inv = field.checked_inv(leading_coeff)
        assert inv is not None, 'leading coefficient is not invertible'
        u = f.scalar_mul(inv)
        factors: list[tuple[Polynomial[ρ], Multiplicity]] = []
        r = parent.gcd(u, u.derivative())
        w = u.div_rem(r)[0]
        j = Multiplicity(1)
        log_timer = Timer()
        while not r.is_one():
            if log_timer.get() >= self.options.log_rate:
                logger.info(f'multiplicity {j}, degree of remaining part {r.degree()}')
                log_timer.reset()
            g = parent.gcd(r, w)
            s = w.div_rem(g)[0]
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f'{j=}, {g=}, {s=}')
            if not s.is_one():
                factors.append((s, j))
            r = r.div_rem(g)[0]
            w = g
            j = j.succ()
        if not w.is_one():
            factors.append((w, j))
        logger.info(f'found {len(factors)} square-free factors')
        return SquareFreeFactorization(leading_coeff, tuple(factors), parent)


sqf = square_free_factorization = SquareFreeFactorizer()
