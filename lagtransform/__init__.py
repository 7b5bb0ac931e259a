"""lagtransform, Laguerre functions and the Laguerre transform."""
from importlib.metadata import version, PackageNotFoundError

from lagtransform.conf import config
from lagtransform.errors import InvalidParameter, InvalidRange, DegenerateBoundWarning
from lagtransform.quadrature import integrate
from lagtransform.laguerre import (
    LaguerreEngine,
    OptimalBound,
    laguerre_function,
    laguerre_function_seq,
)

__all__ = [
    'config',
    'InvalidParameter',
    'InvalidRange',
    'DegenerateBoundWarning',
    'integrate',
    'LaguerreEngine',
    'OptimalBound',
    'laguerre_function',
    'laguerre_function_seq',
]

try:
    __version__ = version('lagtransform')
except PackageNotFoundError:
    __version__ = 'unknown'
