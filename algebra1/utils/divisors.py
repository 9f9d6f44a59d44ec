from __future__ import annotations

from typing import Any

import gmpy2
from gmpy2 import mpz


def divisors(n: Any) -> list[mpz]:
    """The positive divisors of a non-zero integer `n` in increasing order.

    >>> divisors(12)
    [mpz(1), mpz(2), mpz(3), mpz(4), mpz(6), mpz(12)]
    >>> divisors(-7)
    [mpz(1), mpz(7)]
    >>> divisors(0)
    Traceback (most recent call last):
    ...
    ValueError: 0 has infinitely many divisors
    """
    n = abs(mpz(n))
    if n == 0:
        raise ValueError('0 has infinitely many divisors')
    small = []
    large = []
    for d in range(1, int(gmpy2.isqrt(n)) + 1):
        if n % d == 0:
            small.append(mpz(d))
            if d * d != n:
                large.append(n // d)
    return small + large[::-1]
