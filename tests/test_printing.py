import pytest
import sympy
from sympy.abc import t, x as X, y as Y

from algebra1.printing import as_latex, from_sympy, poly_to_str, to_sympy
from algebra1.rings import GF, PolynomialRing, QQ, ZZ

R = PolynomialRing(QQ, 'x')
x = R.gen()


def test_poly_to_str():
    assert poly_to_str(R.zero) == '0'
    assert poly_to_str(x) == 'x'
    assert poly_to_str(-x**2 + 1) == '-x^2 + 1'
    assert poly_to_str(x * QQ('-3/2') - 1, var='t') == '-(3/2)t - 1'
    assert poly_to_str(R('2/5')) == '2/5'


def test_nested_coefficients_are_parenthesized():
    S = PolynomialRing(PolynomialRing(ZZ, 'y'), 'x')
    y = S.base.gen()
    z = S.gen()
    assert str(y * z**2 + (y + 1) * z + y - 1) == '(y)x^2 + (y + 1)x + (y - 1)'


def test_to_sympy():
    assert to_sympy(x**2 / 2 - 3) == X**2 / 2 - 3
    assert to_sympy(R.zero) == 0
    F = GF(7)
    u = PolynomialRing(F, 't').gen()
    assert to_sympy(u - 1) == t + 6


def test_to_sympy_nested():
    S = PolynomialRing(PolynomialRing(ZZ, 'y'), 'x')
    f = S([S.base([0, 1]), 2])
    assert sympy.expand(to_sympy(f) - (2 * X + Y)) == 0


def test_from_sympy():
    assert from_sympy(X**3 - X / 4, R) == x**3 - x / 4
    assert from_sympy(sympy.Integer(0), R).is_zero()
    with pytest.raises(ValueError):
        from_sympy(sympy.sqrt(2) * X, R)
    with pytest.raises(ValueError):
        from_sympy(1 / X, R)


def test_conversion_back_and_forth():
    f = (x - QQ('1/3'))**3 * (x + 2)
    assert from_sympy(to_sympy(f), R) == f


def test_as_latex():
    assert as_latex(x**2 + 1) == 'x^{2} + 1'
    assert (x**2 + 1).as_latex() == 'x^{2} + 1'
