from . import ring, field, domain  # noqa

from .ring import CommutativeRing, FromInt, NotAUnitError, Unit  # noqa
from .field import CheckedInv, Field, is_field  # noqa
from .domain import CoefficientDomain  # noqa
