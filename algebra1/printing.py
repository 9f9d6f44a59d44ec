"""String, LaTeX, and :mod:`sympy` representations of polynomials and
square-free factorizations. None of these functions modifies its argument.

Polynomials are printed with decreasing degrees. Coefficients 1 in front of
powers of the variable are omitted, integer coefficients are juxtaposed, and
other coefficients are parenthesized:

>>> from algebra1.rings import PolynomialRing, QQ
>>> x = PolynomialRing(QQ, 'x').gen()
>>> poly_to_str(-x**3 + 2*x**2 - x / 2 - 1)
'-x^3 + 2x^2 - (1/2)x - 1'
>>> poly_to_str(x**2 - 1, var='t')
't^2 - 1'
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Optional, TYPE_CHECKING

from gmpy2 import mpq, mpz
import sympy

from .rings.polynomial import Polynomial, PolynomialRing

if TYPE_CHECKING:
    from .abc import CommutativeRing
    from .sqf import SquareFreeFactorization


def _is_negative(c: Any) -> bool:
    return isinstance(c, (mpz, mpq)) and c < 0


def _coeff_to_str(c: Any, in_front: bool) -> str:
    s = str(c)
    if isinstance(c, Polynomial):
        if in_front or len([d for d in c.coeffs if not c.ring.is_zero(d)]) > 1:
            return f'({s})'
        return s
    if in_front and not isinstance(c, mpz) and '/' in s:
        return f'({s})'
    return s


def poly_to_str(f: Polynomial, var: Optional[str] = None) -> str:
    """The string representation of `f`, using `var` as the name of the
    variable. By default, the name is taken from the parent of `f`.
    """
    if var is None:
        var = f.var
    ring = f.ring
    terms = []
    for degree in range(len(f.coeffs) - 1, -1, -1):
        c = f.coeffs[degree]
        if ring.is_zero(c):
            continue
        negative = _is_negative(c)
        if negative:
            c = ring.neg(c)
        if terms:
            terms.append(' - ' if negative else ' + ')
        elif negative:
            terms.append('-')
        if degree == 0:
            terms.append(_coeff_to_str(c, in_front=False))
            continue
        if not ring.is_one(c):
            terms.append(_coeff_to_str(c, in_front=True))
        terms.append(var if degree == 1 else f'{var}^{degree}')
    if not terms:
        return '0'
    return ''.join(terms)


def sqf_to_str(result: SquareFreeFactorization, var: Optional[str] = None) -> str:
    """The string representation of a square-free factorization as a product
    of the leading coefficient and powers of the factors.

    >>> from algebra1.rings import PolynomialRing, QQ
    >>> from algebra1.sqf import sqf
    >>> x = PolynomialRing(QQ, 'x').gen()
    >>> sqf_to_str(sqf(-x**3 + x**2))
    '-(x - 1)(x)^2'
    >>> sqf_to_str(sqf(3*(x + 1)**2), var='y')
    '3(y + 1)^2'
    >>> sqf_to_str(sqf(0 * x)), sqf_to_str(sqf(x - x + 5))
    ('0', '5')
    """
    ring = result.ring
    lc = result.leading_coeff
    if not result.factors:
        return poly_to_str(result.parent(lc))
    if ring.is_one(lc):
        s = ''
    elif ring.is_one(ring.neg(lc)):
        s = '-'
    elif _is_negative(lc):
        s = '-' + _coeff_to_str(ring.neg(lc), in_front=True)
    else:
        s = _coeff_to_str(lc, in_front=True)
    for f, multiplicity in result.factors:
        s += f'({poly_to_str(f, var)})'
        if multiplicity > 1:
            s += f'^{multiplicity}'
    return s


def _coeff_to_sympy(c: Any) -> sympy.Expr:
    match c:
        case Polynomial():
            return to_sympy(c)
        case mpz():
            return sympy.Integer(int(c))
        case mpq():
            return sympy.Rational(int(c.numerator), int(c.denominator))
        case _:
            raise ValueError(f'cannot convert {c!r} to sympy')


def to_sympy(f: Polynomial) -> sympy.Expr:
    """Convert `f` into a :class:`sympy.Expr` in the symbol named after the
    variable of `f`. Prime field elements are converted to their
    representatives in ``0, ..., p - 1``.

    >>> from algebra1.rings import PolynomialRing, ZZ
    >>> x = PolynomialRing(ZZ, 'x').gen()
    >>> to_sympy(3*x**2 - 1)
    3*x**2 - 1
    """
    x = sympy.Symbol(f.var)
    return sympy.Add(*(_coeff_to_sympy(c) * x**k for k, c in enumerate(f.coeffs)))


def _coeff_from_sympy(c: sympy.Expr, ring: CommutativeRing) -> Any:
    if isinstance(ring, PolynomialRing):
        return from_sympy(c, ring)
    if not c.is_Rational:
        raise ValueError(f'{c} is not a rational number')
    return ring(Fraction(int(c.p), int(c.q)))


def from_sympy(expr: sympy.Expr, parent: PolynomialRing) -> Polynomial:
    """Convert a polynomial :class:`sympy.Expr` into an element of `parent`.
    Symbols are matched with the variables of `parent` and its coefficient
    rings by name.

    >>> from algebra1.rings import PolynomialRing, QQ, ZZ
    >>> from sympy.abc import x, y
    >>> from_sympy(x**2 / 2 - 1, PolynomialRing(QQ, 'x'))
    (1/2)x^2 - 1
    >>> from_sympy(x*y + 2*x + y, PolynomialRing(PolynomialRing(ZZ, 'y'), 'x'))
    (y + 2)x + y
    """
    try:
        poly = sympy.Poly(expr, sympy.Symbol(parent.var))
    except sympy.PolynomialError as exc:
        raise ValueError(f'{expr} is not a polynomial in {parent.var}') from exc
    coeffs = reversed(poly.all_coeffs())
    return Polynomial(parent, [_coeff_from_sympy(c, parent.base) for c in coeffs])


def as_latex(f: Polynomial) -> str:
    return sympy.latex(to_sympy(f))
