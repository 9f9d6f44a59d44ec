from .divisors import divisors  # noqa
from .interpolation import interpolate  # noqa
