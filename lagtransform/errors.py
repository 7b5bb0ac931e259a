"""Exceptions and warnings raised by lagtransform."""


class InvalidParameter(ValueError):
    """A numeric argument violates its precondition."""


class InvalidRange(ValueError):
    """An integration interval has its lower bound above its upper bound."""


class DegenerateBoundWarning(UserWarning):
    """No sampled point satisfied the decay criterion; the bound fell back to zero."""
