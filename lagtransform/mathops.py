"""A submodule which allows the user to swap out the backend for mathematics."""
import math

import numpy as np


class BackendShim:
    """A shim that allows a backend to be swapped at runtime."""
    def __init__(self, src):
        self._srcmodule = src

    def __getattr__(self, key):
        if key == '_srcmodule':
            return self._srcmodule

        return getattr(self._srcmodule, key)


_np = np
np = BackendShim(np)


def set_backend_to_cupy():
    """Convenience method to automatically configure lagtransform's backend to cupy."""
    import cupy as cp

    np._srcmodule = cp
    return


def set_backend_to_defaults():
    """Convenience method to restore lagtransform's default backend options."""
    np._srcmodule = _np
    return


def array_to_true_numpy(*args):
    """convert one or more arrays from an alternate backend to numpy.

    Needed for serialization.  Does nothing if given an actual numpy array

    Parameters
    ----------
    args : any number of arrays, of any dimension and dtype

    Returns
    -------
    array, or list of bonefide numpy arrays

    """
    if len(args) == 0:
        return

    out = []
    for arg in args:
        if isinstance(arg, _np.ndarray):
            out.append(arg)
        # cupy
        elif hasattr(arg, 'get'):
            out.append(arg.get())
        else:
            out.append(_np.asarray(arg))

    if len(out) == 1:
        return out[0]

    return out


def normal_distribution(x, mu=0, lam=1):
    """Normal (gaussian) probability density.

    Parameters
    ----------
    x : numpy.ndarray
        points to evaluate at
    mu : float
        mean of the distribution
    lam : float
        standard deviation of the distribution

    Returns
    -------
    numpy.ndarray
        the density evaluated at x

    """
    return np.exp(-(x - mu) ** 2 / (2 * lam ** 2)) / (lam * math.sqrt(2 * math.pi))


def square(x):
    """x^2, the reference function for the transform pair."""
    return x ** 2
