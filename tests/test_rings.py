from fractions import Fraction

from gmpy2 import mpq, mpz
import pytest

from algebra1.abc import NotAUnitError, is_field
from algebra1.rings import GF, PolynomialRing, QQ, ZZ


def test_integer_units():
    assert ZZ.assert_unit(ZZ(1)).value == 1
    assert ZZ.invert(ZZ.assert_unit(ZZ(-1))).value == -1
    with pytest.raises(NotAUnitError):
        ZZ.assert_unit(ZZ(2))
    with pytest.raises(NotAUnitError):
        ZZ.assert_unit(ZZ(0))


def test_integer_normal_form_and_gcd():
    assert ZZ.unit_and_normal(ZZ(7))[1] == 7
    unit, normal = ZZ.unit_and_normal(ZZ(-7))
    assert (unit.value, normal) == (-1, 7)
    assert ZZ.gcd(ZZ(-12), ZZ(18)) == 6
    assert ZZ.gcd(ZZ(0), ZZ(0)) == 0
    assert ZZ.is_nilpotent(ZZ(0)) and not ZZ.is_nilpotent(ZZ(3))


def test_integer_coercion():
    assert ZZ(Fraction(4, 1)) == 4
    assert ZZ(mpq(6, 3)) == 2
    with pytest.raises(ValueError):
        ZZ(Fraction(1, 2))
    with pytest.raises(ValueError):
        ZZ(True)


def test_rational_checked_inverse():
    assert QQ.checked_inv(QQ(0)) is None
    assert QQ.checked_inv(QQ('2/3')) == mpq(3, 2)
    assert QQ.div(QQ(1), QQ(0)) is None
    assert QQ.div(QQ(3), QQ(4)) == mpq(3, 4)


def test_rational_units():
    u = QQ.assert_unit(QQ('-5/2'))
    assert QQ.invert(u).value == mpq(-2, 5)
    with pytest.raises(NotAUnitError):
        QQ.assert_unit(QQ(0))
    assert QQ.unit_and_normal(QQ(0)) == (QQ.assert_unit(QQ(1)), 0)


def test_from_int():
    assert ZZ.from_int(5) == mpz(5)
    assert QQ.from_int(5) == mpq(5)
    assert GF(5).from_int(7) == 2


def test_prime_field():
    F = GF(13)
    assert is_field(F)
    assert F.checked_inv(F(0)) is None
    assert F.mul(F.checked_inv(F(5)), F(5)) == 1
    assert F.sub(F(3), F(5)) == 11
    assert F('2/3') == F.mul(F(2), F.checked_inv(F(3)))
    assert F.characteristic == 13
    assert GF(13) == F and hash(GF(13)) == hash(F)
    with pytest.raises(ValueError):
        GF(12)
    with pytest.raises(ValueError):
        F(Fraction(1, 13))


def test_power():
    assert ZZ.power(ZZ(-2), 5) == -32
    assert GF(7).power(GF(7)(3), 6) == 1
    with pytest.raises(ValueError):
        ZZ.power(ZZ(2), -1)


def test_polynomial_ring_units():
    R = PolynomialRing(ZZ, 'x')
    assert R.assert_unit(R(-1)).value == -1
    with pytest.raises(NotAUnitError):
        R.assert_unit(R.gen() + 1)
    with pytest.raises(NotAUnitError):
        R.assert_unit(R(2))
    with pytest.raises(NotAUnitError):
        R.assert_unit(R.zero)
    assert R.is_nilpotent(R.zero)
    assert not R.is_nilpotent(R.gen())


def test_polynomial_ring_invert_constant():
    R = PolynomialRing(QQ, 'x')
    u = R.assert_unit(R('3/4'))
    assert R.invert(u).value == R('4/3')


def test_polynomial_ring_normal_form():
    R = PolynomialRing(ZZ, 'x')
    x = R.gen()
    unit, normal = R.unit_and_normal(-3*x**2 + 6)
    assert unit.value == -1
    assert normal == 3*x**2 - 6
    assert R.unit_and_normal(R.zero) == (R.assert_unit(R.one), R.zero)


def test_nested_polynomial_ring():
    S = PolynomialRing(PolynomialRing(ZZ, 'y'), 'x')
    y = S.base.gen()
    x = S.gen()
    f = (x*y + 1) * (x - y)
    assert f.degree() == 2
    assert f.lc() == y
    assert S.gcd(f, (x - y) * (x + y)) == x - y
    assert S.from_int(3) == 3
