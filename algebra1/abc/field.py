from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional

from typing_extensions import TypeIs

from .ring import CommutativeRing, ρ


class CheckedInv(ABC, Generic[ρ]):
    """Rings with a checked multiplicative inverse.
    """

    @abstractmethod
    def checked_inv(self, a: ρ) -> Optional[ρ]:
        """The inverse of `a`, or :obj:`None` if `a` is not invertible. This
        never raises.
        """
        ...


class Field(CommutativeRing[ρ], CheckedInv[ρ]):
    """A commutative ring in which every non-zero element is a unit. The set of
    field elements is the set of values the element type can take.
    """

    def div(self, a: ρ, b: ρ) -> Optional[ρ]:
        """The quotient `a / b`, or :obj:`None` if `b` is zero.

        >>> from algebra1.rings import QQ
        >>> QQ.div(QQ(1), QQ(3))
        mpq(1,3)
        >>> QQ.div(QQ(1), QQ(0)) is None
        True
        """
        b_inv = self.checked_inv(b)
        if b_inv is None:
            return None
        return self.mul(a, b_inv)


def is_field(ring: CommutativeRing[ρ]) -> TypeIs[Field[ρ]]:
    """Type guard distinguishing fields from general commutative rings.

    >>> from algebra1.rings import QQ, ZZ
    >>> is_field(QQ), is_field(ZZ)
    (True, False)
    """
    return isinstance(ring, Field)
