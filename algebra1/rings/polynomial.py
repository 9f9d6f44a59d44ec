"""Dense univariate polynomials over commutative rings.

A :class:`PolynomialRing` is a parent object in the sense of
:mod:`algebra1.abc`, and its elements are instances of :class:`Polynomial`.
Polynomial rings are coefficient domains themselves, so that rings like
:math:`\\mathbb{Z}[y][x]` can be built recursively:

>>> from algebra1.rings import QQ, ZZ
>>> R = PolynomialRing(QQ, 'x')
>>> x = R.gen()
>>> f = (x - 1)**2 * (x + 2)
>>> f
x^3 - 3x + 2
>>> f.derivative()
3x^2 - 3
>>> divmod(f, x - 1)
(x^2 + x - 2, 0)
>>> S = PolynomialRing(PolynomialRing(ZZ, 'y'), 'x')
>>> y = S.base.gen()
>>> y * S.gen() + 1
(y)x + 1
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Optional

from ..abc import (CoefficientDomain, CommutativeRing, Field, FromInt,
                   NotAUnitError, Unit, is_field)
from ..abc.ring import ρ


class Polynomial(Generic[ρ]):
    """An immutable dense univariate polynomial. The coefficient of
    :math:`x^k` is ``coeffs[k]``, and trailing zero coefficients are trimmed
    at construction. In particular, the zero polynomial has ``coeffs ==
    ()``, no matter how it was created.

    Instances are created via their :class:`PolynomialRing`:

    >>> from algebra1.rings import ZZ
    >>> R = PolynomialRing(ZZ, 'x')
    >>> R([1, 0, 3, 0, 0]).coeffs
    (mpz(1), mpz(0), mpz(3))
    >>> R([0, 0]) == R([]) == 0
    True
    """

    parent: PolynomialRing[ρ]
    coeffs: tuple[ρ, ...]

    @property
    def ring(self) -> CommutativeRing[ρ]:
        """The ring of coefficients.
        """
        return self.parent.base

    @property
    def var(self) -> str:
        return self.parent.var

    def __add__(self, other: object) -> Polynomial[ρ]:
        if self._is_coefficient_of(other):
            return other.__radd__(self)
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        add = self.ring.add
        zero = self.ring.zero
        n = max(len(self.coeffs), len(b.coeffs))
        coeffs = [add(self[k] if k < len(self.coeffs) else zero,
                      b[k] if k < len(b.coeffs) else zero) for k in range(n)]
        return self.parent._from_list(coeffs)

    def __call__(self, x: Any) -> ρ:
        """Evaluate at `x` using Horner's scheme.

        >>> from algebra1.rings import QQ
        >>> R = PolynomialRing(QQ, 'x')
        >>> R([1, 0, 2])('1/2')
        mpq(3,2)
        """
        ring = self.ring
        x = ring(x)
        result = ring.zero
        for c in reversed(self.coeffs):
            result = ring.add(ring.mul(result, x), c)
        return result

    def __divmod__(self, other: object) -> tuple[Polynomial[ρ], Polynomial[ρ]]:
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self.div_rem(b)

    def __eq__(self, other: object) -> bool:
        if self._is_coefficient_of(other):
            return other.__eq__(self)
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        if len(self.coeffs) != len(b.coeffs):
            return False
        eq = self.ring.eq
        return all(eq(c, d) for c, d in zip(self.coeffs, b.coeffs))

    def __floordiv__(self, other: object) -> Polynomial[ρ]:
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self.div_rem(b)[0]

    def __getitem__(self, k: int) -> ρ:
        """The coefficient of :math:`x^k`, which is zero beyond the degree.
        """
        if k < 0:
            raise IndexError(f'negative index {k}')
        if k < len(self.coeffs):
            return self.coeffs[k]
        return self.ring.zero

    def __hash__(self) -> int:
        # Constants hash like their coefficient, to which they compare equal.
        if len(self.coeffs) == 0:
            return hash(0)
        if len(self.coeffs) == 1:
            return hash(self.coeffs[0])
        return hash((self.parent, self.coeffs))

    def __init__(self, parent: PolynomialRing[ρ], coeffs: Iterable[Any] = ()) -> None:
        base = parent.base
        trimmed = [base(c) for c in coeffs]
        while trimmed and base.is_zero(trimmed[-1]):
            trimmed.pop()
        self.parent = parent
        self.coeffs = tuple(trimmed)

    def __mod__(self, other: object) -> Polynomial[ρ]:
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self.div_rem(b)[1]

    def __mul__(self, other: object) -> Polynomial[ρ]:
        if self._is_coefficient_of(other):
            return other.__rmul__(self)
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        if self.is_zero() or b.is_zero():
            return self.parent.zero
        ring = self.ring
        coeffs = [ring.zero] * (len(self.coeffs) + len(b.coeffs) - 1)
        for i, c in enumerate(self.coeffs):
            if ring.is_zero(c):
                continue
            for j, d in enumerate(b.coeffs):
                coeffs[i + j] = ring.add(coeffs[i + j], ring.mul(c, d))
        return self.parent._from_list(coeffs)

    def __neg__(self) -> Polynomial[ρ]:
        return self.parent._from_list([self.ring.neg(c) for c in self.coeffs])

    def __pow__(self, n: int) -> Polynomial[ρ]:
        return self.parent.power(self, n)

    def __radd__(self, other: object) -> Polynomial[ρ]:
        return self.__add__(other)

    def __repr__(self) -> str:
        from ..printing import poly_to_str
        return poly_to_str(self)

    def __rmul__(self, other: object) -> Polynomial[ρ]:
        return self.__mul__(other)

    def __rsub__(self, other: object) -> Polynomial[ρ]:
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return b - self

    def __sub__(self, other: object) -> Polynomial[ρ]:
        if self._is_coefficient_of(other):
            return other.__rsub__(self)
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self + (-b)

    def __truediv__(self, other: object) -> Polynomial[ρ]:
        """Division by a non-zero constant of a field.

        >>> from algebra1.rings import QQ
        >>> x = PolynomialRing(QQ, 'x').gen()
        >>> (3*x + 1) / 3
        x + 1/3
        """
        field = self._field()
        try:
            c = field(other)
        except ValueError:
            return NotImplemented
        inv = field.checked_inv(c)
        if inv is None:
            raise ZeroDivisionError('polynomial division by zero')
        return self.scalar_mul(inv)

    def _coerce(self, other: object) -> Optional[Polynomial[ρ]]:
        if isinstance(other, Polynomial):
            if other.parent == self.parent:
                return other
            if other.parent != self.ring:
                return None
        try:
            return self.parent(other)
        except ValueError:
            return None

    def _is_coefficient_of(self, other: object) -> bool:
        # Python does not try reflected operators for operands of equal type.
        return isinstance(other, Polynomial) and other.ring == self.parent

    def _field(self) -> Field[ρ]:
        ring = self.ring
        if not is_field(ring):
            raise TypeError(f'coefficient ring {ring} is not a field')
        return ring

    def as_latex(self) -> str:
        """LaTeX representation as a string.

        >>> from algebra1.rings import QQ
        >>> x = PolynomialRing(QQ, 'x').gen()
        >>> (x**2 / 2 - 1).as_latex()
        '\\\\frac{x^{2}}{2} - 1'
        """
        from ..printing import as_latex
        return as_latex(self)

    def content(self) -> ρ:
        """The normalized gcd of the coefficients.

        >>> from algebra1.rings import ZZ
        >>> PolynomialRing(ZZ, 'x')([-4, 6, -2]).content()
        mpz(2)
        """
        return self.parent._base_domain().content(self.coeffs)

    def degree(self) -> Optional[int]:
        """The degree, which is :obj:`None` for the zero polynomial.
        """
        if not self.coeffs:
            return None
        return len(self.coeffs) - 1

    def derivative(self) -> Polynomial[ρ]:
        """The formal derivative. Its degree is one less than the degree of
        `self`, or it is zero.
        """
        ring = self.ring
        if not isinstance(ring, FromInt):
            raise TypeError(f'cannot lift integers into {ring}')
        coeffs = [ring.mul(ring.from_int(k), c) for k, c in enumerate(self.coeffs) if k > 0]
        return self.parent._from_list(coeffs)

    def div_rem(self, other: Polynomial[ρ]) -> tuple[Polynomial[ρ], Polynomial[ρ]]:
        """Polynomial long division over a field. Return `q` and `r` such that
        ``self == q * other + r``, where `r` is zero or has a smaller degree
        than `other`.

        >>> from algebra1.rings import QQ, ZZ
        >>> x = PolynomialRing(QQ, 'x').gen()
        >>> (x**3 + 1).div_rem(x + 1)
        (x^2 - x + 1, 0)
        >>> (x**3 + 1).div_rem(2*x)
        ((1/2)x^2, 1)
        >>> (x**3 + 1).div_rem(0 * x)
        Traceback (most recent call last):
        ...
        ZeroDivisionError: polynomial division by zero
        >>> z = PolynomialRing(ZZ, 'z').gen()
        >>> z.div_rem(z)
        Traceback (most recent call last):
        ...
        TypeError: coefficient ring ZZ is not a field
        """
        field = self._field()
        b = self._coerce(other)
        if b is None:
            raise ValueError(f'{other!r} is not in {self.parent}')
        if b.is_zero():
            raise ZeroDivisionError('polynomial division by zero')
        db = len(b.coeffs) - 1
        inv = field.checked_inv(b.coeffs[db])
        assert inv is not None, 'leading coefficient is not invertible'
        r = list(self.coeffs)
        if len(r) <= db:
            return self.parent.zero, self
        q = [field.zero] * (len(r) - db)
        for k in range(len(q) - 1, -1, -1):
            c = field.mul(r[k + db], inv)
            q[k] = c
            if field.is_zero(c):
                continue
            for i, d in enumerate(b.coeffs):
                r[k + i] = field.sub(r[k + i], field.mul(c, d))
            assert field.is_zero(r[k + db])
        return self.parent._from_list(q), self.parent._from_list(r[:db])

    def gcd(self, other: Polynomial[ρ]) -> Polynomial[ρ]:
        """A greatest common divisor via the Euclidean algorithm over a field.
        The result is not normalized; use :meth:`PolynomialRing.gcd` for the
        monic gcd.

        >>> from algebra1.rings import QQ
        >>> x = PolynomialRing(QQ, 'x').gen()
        >>> (2*x**2 - 2).gcd(4*x - 4)
        4x - 4
        """
        self._field()
        a = self
        b = self._coerce(other)
        if b is None:
            raise ValueError(f'{other!r} is not in {self.parent}')
        while not b.is_zero():
            a, b = b, a.div_rem(b)[1]
        return a

    def is_constant(self) -> bool:
        return len(self.coeffs) <= 1

    def is_one(self) -> bool:
        return len(self.coeffs) == 1 and self.ring.is_one(self.coeffs[0])

    def is_zero(self) -> bool:
        return not self.coeffs

    def lc(self) -> ρ:
        """The leading coefficient. The zero polynomial has none.
        """
        if not self.coeffs:
            raise ValueError('zero polynomial has no leading coefficient')
        return self.coeffs[-1]

    def monic(self) -> Polynomial[ρ]:
        """The associate with leading coefficient one over a field. The zero
        polynomial is returned unchanged.
        """
        field = self._field()
        if self.is_zero():
            return self
        inv = field.checked_inv(self.lc())
        assert inv is not None, 'leading coefficient is not invertible'
        return self.scalar_mul(inv)

    def primitive_part(self) -> Polynomial[ρ]:
        """`self` divided by its :meth:`content`. The zero polynomial is its
        own primitive part.

        >>> from algebra1.rings import ZZ
        >>> PolynomialRing(ZZ, 'x')([-4, 6, -2]).primitive_part()
        -x^2 + 3x - 2
        """
        if self.is_zero():
            return self
        domain = self.parent._base_domain()
        c = domain.content(self.coeffs)
        return self.parent._from_list([domain.exact_div(d, c) for d in self.coeffs])

    def pseudo_rem(self, other: Polynomial[ρ]) -> Polynomial[ρ]:
        """The pseudo-remainder, i.e., the remainder of ``lc(other)^(m - n + 1)
        * self`` by `other`, where `m` and `n` are the degrees of `self` and
        `other`, respectively. This requires no division in the coefficient
        ring.

        >>> from algebra1.rings import ZZ
        >>> x = PolynomialRing(ZZ, 'x').gen()
        >>> (x**2 + 1).pseudo_rem(2*x + 1)
        5
        """
        b = self._coerce(other)
        if b is None:
            raise ValueError(f'{other!r} is not in {self.parent}')
        if b.is_zero():
            raise ZeroDivisionError('polynomial pseudo-division by zero')
        ring = self.ring
        db = len(b.coeffs) - 1
        lcb = b.coeffs[db]
        e = len(self.coeffs) - db
        if e <= 0:
            return self
        r = self
        while len(r.coeffs) - 1 >= db:
            t = self.parent.monomial(r.coeffs[-1], len(r.coeffs) - 1 - db)
            r = r.scalar_mul(lcb) - t * b
            e -= 1
        return r.scalar_mul(ring.power(lcb, e))

    def scalar_mul(self, c: Any) -> Polynomial[ρ]:
        ring = self.ring
        c = ring(c)
        return self.parent._from_list([ring.mul(d, c) for d in self.coeffs])

    def square_free_factorization(self):
        """Shortcut for :func:`algebra1.sqf.sqf`.
        """
        from ..sqf import sqf
        return sqf(self)


@dataclass(frozen=True, repr=False)
class PolynomialRing(CoefficientDomain[Polynomial[ρ]], FromInt[Polynomial[ρ]], Generic[ρ]):
    """The ring of univariate polynomials in the variable `var` over `base`.
    The name `var` is used only for printing.

    >>> from algebra1.rings import ZZ
    >>> PolynomialRing(ZZ, 'x')
    ZZ[x]
    >>> PolynomialRing(ZZ, 'x') == PolynomialRing(ZZ, 'x')
    True
    """

    base: CommutativeRing[ρ]
    var: str = 'x'

    @property
    def characteristic(self) -> int:
        return self.base.characteristic

    @property
    def one(self) -> Polynomial[ρ]:
        return self._from_list([self.base.one])

    @property
    def zero(self) -> Polynomial[ρ]:
        return self._from_list([])

    def __call__(self, obj: Any) -> Polynomial[ρ]:
        match obj:
            case Polynomial() if obj.parent == self:
                return obj
            case list() | tuple():
                return Polynomial(self, obj)
            case _:
                return self._from_list([self.base(obj)])

    def __repr__(self) -> str:
        return f'{self.base}[{self.var}]'

    def _base_domain(self) -> CoefficientDomain[ρ]:
        if not isinstance(self.base, CoefficientDomain):
            raise TypeError(f'{self.base} is not a coefficient domain')
        return self.base

    def _from_list(self, coeffs: list[ρ]) -> Polynomial[ρ]:
        # The elements of coeffs are in base already, so there is no coercion.
        base = self.base
        while coeffs and base.is_zero(coeffs[-1]):
            coeffs.pop()
        f = Polynomial.__new__(Polynomial)
        f.parent = self
        f.coeffs = tuple(coeffs)
        return f

    def add(self, a: Polynomial[ρ], b: Polynomial[ρ]) -> Polynomial[ρ]:
        return a + b

    def assert_unit(self, a: Polynomial[ρ]) -> Unit[Polynomial[ρ]]:
        """A polynomial is a unit if and only if its constant coefficient is a
        unit and all other coefficients are nilpotent.
        """
        if a.is_zero():
            raise NotAUnitError(f'0 is not a unit in {self}')
        self.base.assert_unit(a.coeffs[0])
        for c in a.coeffs[1:]:
            if not self.base.is_nilpotent(c):
                raise NotAUnitError(f'{a} is not a unit in {self}')
        return Unit(a)

    def eq(self, a: Polynomial[ρ], b: Polynomial[ρ]) -> bool:
        return a == b

    def exact_div(self, a: Polynomial[ρ], b: Polynomial[ρ]) -> Polynomial[ρ]:
        """
        >>> from algebra1.rings import ZZ
        >>> R = PolynomialRing(ZZ, 'x')
        >>> x = R.gen()
        >>> R.exact_div(4*x**2 - 1, 2*x + 1)
        2x - 1
        """
        if b.is_zero():
            raise ZeroDivisionError('polynomial division by zero')
        domain = self._base_domain()
        db = len(b.coeffs) - 1
        lcb = b.coeffs[db]
        q = [domain.zero] * max(len(a.coeffs) - db, 0)
        r = a
        while len(r.coeffs) - 1 >= db:
            d = len(r.coeffs) - 1 - db
            c = domain.exact_div(r.coeffs[-1], lcb)
            q[d] = c
            r = r - self.monomial(c, d) * b
        if not r.is_zero():
            raise ArithmeticError(f'{b} does not divide {a} in {self}')
        return self._from_list(q)

    def from_int(self, n: int) -> Polynomial[ρ]:
        if not isinstance(self.base, FromInt):
            raise TypeError(f'cannot lift integers into {self.base}')
        return self._from_list([self.base.from_int(n)])

    def gcd(self, a: Polynomial[ρ], b: Polynomial[ρ]) -> Polynomial[ρ]:
        """The gcd in normal form. Over fields this is the monic gcd, computed
        with the Euclidean algorithm. Over other coefficient domains, we use a
        primitive pseudo-remainder sequence.

        >>> from algebra1.rings import QQ, ZZ
        >>> R = PolynomialRing(ZZ, 'x')
        >>> x = R.gen()
        >>> R.gcd(6*x**2 - 6, -4*x**2 - 4*x)
        2x + 2
        >>> S = PolynomialRing(QQ, 'x')
        >>> x = S.gen()
        >>> S.gcd(6*x**2 - 6, -4*x**2 - 4*x)
        x + 1
        """
        if is_field(self.base):
            return self.normal(a.gcd(b))
        domain = self._base_domain()
        if a.is_zero():
            return self.normal(b)
        if b.is_zero():
            return self.normal(a)
        c = domain.gcd(a.content(), b.content())
        a, b = a.primitive_part(), b.primitive_part()
        if len(a.coeffs) < len(b.coeffs):
            a, b = b, a
        while not b.is_zero():
            r = a.pseudo_rem(b)
            a, b = b, r.primitive_part()
        return self.normal(a.scalar_mul(c))

    def gen(self) -> Polynomial[ρ]:
        """The generator, i.e., the variable as a polynomial.
        """
        return self.monomial(self.base.one, 1)

    def invert(self, u: Unit[Polynomial[ρ]]) -> Unit[Polynomial[ρ]]:
        """The inverse of a unit ``u = a + n``, where `a` is a unit of the
        coefficient ring and `n` is nilpotent. It is given by the finite
        geometric series :math:`a^{-1} \\sum_k (-a^{-1} n)^k`.

        >>> from algebra1.rings import ZZ
        >>> R = PolynomialRing(ZZ, 'x')
        >>> R.invert(R.assert_unit(R(-1))).value
        -1
        """
        f = u.value
        a_inv = self.base.invert(self.base.assert_unit(f.coeffs[0])).value
        n = f - self(f.coeffs[0])
        t = -n.scalar_mul(a_inv)
        s = self.one
        power = t
        while not power.is_zero():
            s = s + power
            power = power * t
        return Unit(s.scalar_mul(a_inv))

    def is_nilpotent(self, a: Polynomial[ρ]) -> bool:
        """A polynomial is nilpotent if and only if all its coefficients are.
        """
        return all(self.base.is_nilpotent(c) for c in a.coeffs)

    def monomial(self, c: ρ, k: int) -> Polynomial[ρ]:
        """The polynomial :math:`c x^k`.
        """
        return self._from_list([self.base.zero] * k + [c])

    def mul(self, a: Polynomial[ρ], b: Polynomial[ρ]) -> Polynomial[ρ]:
        return a * b

    def neg(self, a: Polynomial[ρ]) -> Polynomial[ρ]:
        return -a

    def unit_and_normal(self, a: Polynomial[ρ]) -> tuple[Unit[Polynomial[ρ]], Polynomial[ρ]]:
        """Divide out the unit part of the leading coefficient. Over fields,
        the normal part is monic.

        >>> from algebra1.rings import QQ, ZZ
        >>> PolynomialRing(ZZ, 'x').unit_and_normal(PolynomialRing(ZZ, 'x')([1, -2]))
        (Unit(value=-1), 2x - 1)
        >>> PolynomialRing(QQ, 'x').unit_and_normal(PolynomialRing(QQ, 'x')([1, 2]))
        (Unit(value=2), x + 1/2)
        """
        if a.is_zero():
            return Unit(self.one), self.zero
        domain = self._base_domain()
        unit, _ = domain.unit_and_normal(a.lc())
        inv = domain.invert(unit)
        return Unit(self._from_list([unit.value])), a.scalar_mul(inv.value)
