from __future__ import annotations

from typing import Any, Iterable

from gmpy2 import mpq

from ..rings import Polynomial, PolynomialRing, QQ


def interpolate(points: Iterable[tuple[Any, Any]], var: str = 'x') -> Polynomial[mpq]:
    """The unique polynomial over :data:`.QQ` of degree less than the number of
    `points` that passes through all `points`, computed by Lagrange's formula.
    The points are pairs of rationals with pairwise different first
    components.

    >>> f = interpolate([(0, 1), (1, 3), (2, 7)])
    >>> f
    x^2 + x + 1
    >>> interpolate([('1/2', 1), ('1/2', 2)])
    Traceback (most recent call last):
    ...
    ValueError: repeated interpolation node 1/2
    """
    R = PolynomialRing(QQ, var)
    x = R.gen()
    nodes: list[mpq] = []
    values: list[mpq] = []
    for a, b in points:
        a = QQ(a)
        if a in nodes:
            raise ValueError(f'repeated interpolation node {a}')
        nodes.append(a)
        values.append(QQ(b))
    result = R.zero
    for i, (a, b) in enumerate(zip(nodes, values)):
        basis = R.one
        for k, c in enumerate(nodes):
            if k != i:
                basis = basis * (x - c) / (a - c)
        result = result + basis.scalar_mul(b)
    return result
