import pytest

from algebra1.rings import QQ
from algebra1.utils import divisors, interpolate


def test_divisors():
    assert divisors(1) == [1]
    assert divisors(36) == [1, 2, 3, 4, 6, 9, 12, 18, 36]
    assert divisors(-13) == [1, 13]
    with pytest.raises(ValueError):
        divisors(0)


def test_interpolation_passes_through_points():
    points = [(-2, 5), ('1/3', 0), (4, '-7/2'), (10, 1)]
    f = interpolate(points)
    assert f.degree() <= 3
    for a, b in points:
        assert f(a) == QQ(b)


def test_interpolation_recovers_polynomial():
    f = interpolate([(k, k**3 - 2*k) for k in range(6)], var='t')
    t = f.parent.gen()
    assert f == t**3 - 2*t


def test_interpolation_edge_cases():
    assert interpolate([]).is_zero()
    assert interpolate([(3, 4)]) == 4
    with pytest.raises(ValueError):
        interpolate([(1, 2), (1, 3)])
