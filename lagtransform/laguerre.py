"""Laguerre functions and the Laguerre transform."""
import math
import warnings

from collections import namedtuple
from functools import lru_cache

from .mathops import np
from .conf import config
from .errors import InvalidParameter, DegenerateBoundWarning
from .quadrature import integrate, as_array_function


OptimalBound = namedtuple('OptimalBound', ['t', 'tabulation'])
OptimalBound.__doc__ = """Upper integration bound and the laguerre functions observed at it.

Attributes
----------
t : float
    smallest sampled abscissa at which all orders are within epsilon of zero,
    or 0 if no sample qualified
tabulation : dict
    {n: L_n(t)} for n in [0, max_n]

"""


def _laguerre_function_iter(max_n, t, beta, sigma):
    """Yield L_0 ... L_max_n at t, one order at a time."""
    # the functions are the ordinary laguerre polynomials of x = sigma t,
    # scaled by sqrt(sigma) and damped by exp(-beta t / 2).  The damping
    # rides along in the first two terms, so the recurrence is the usual
    # n Ln = (2n - 1 - x) Ln-1 - (n-1) Ln-2
    x = sigma * t
    decay = np.exp(-beta * t / 2)
    root = math.sqrt(sigma)

    Lnm1 = root * decay
    yield Lnm1
    if max_n == 0:
        return

    Ln = root * (1 - x) * decay
    yield Ln

    for n in range(2, max_n+1):
        Lnp1 = (2 * n - 1 - x) * Ln / n - (n - 1) * Lnm1 / n
        Lnm1, Ln = Ln, Lnp1
        yield Ln


def laguerre_function(n, t, beta, sigma):
    """Laguerre function of order n.

    Parameters
    ----------
    n : int
        order, >= 0
    t : numpy.ndarray
        points to evaluate at; the functions are orthogonal on [0,inf)
    beta : float
        damping parameter
    sigma : float
        scaling parameter

    Returns
    -------
    numpy.ndarray
        sqrt(sigma) * L_n(sigma t) * exp(-beta t / 2)

    """
    if n < 0:
        raise InvalidParameter(f'n must be non-negative, got {n}')

    for Ln in _laguerre_function_iter(n, t, beta, sigma):
        pass

    return Ln


def laguerre_function_seq(ns, t, beta, sigma):
    """Laguerre functions of orders ns.

    Parameters
    ----------
    ns : sequence
        orders, ascending order
    t : numpy.ndarray
        points to evaluate at
    beta : float
        damping parameter
    sigma : float
        scaling parameter

    Returns
    -------
    numpy.ndarray
        shape (k, *t.shape)
        laguerre functions evaluated at the given points

    """
    ns = list(ns)
    if any(n < 0 for n in ns):
        raise InvalidParameter(f'orders must be non-negative, got {ns}')

    if any(b < a for a, b in zip(ns, ns[1:])):
        raise InvalidParameter(f'orders must be ascending, got {ns}')

    t = np.asarray(t, dtype=config.precision)
    out = np.empty((len(ns), *t.shape), dtype=t.dtype)
    if len(ns) == 0:
        return out

    min_i = 0
    for n, Ln in enumerate(_laguerre_function_iter(ns[-1], t, beta, sigma)):
        while min_i < len(ns) and ns[min_i] == n:
            out[min_i] = Ln
            min_i += 1

    return out


def _half_open_count(max_t, t_step):
    """Number of integers i with i * t_step < max_t."""
    if max_t <= 0:
        return 0

    count = math.ceil(max_t / t_step)
    # the division may round either way of an exact multiple
    while count > 0 and (count - 1) * t_step >= max_t:
        count -= 1
    while count * t_step < max_t:
        count += 1

    return count


@lru_cache(512)
def _search_optimal_t(beta, sigma, max_n, epsilon, max_t, t_points, dtype):
    """Smallest sample where all orders have decayed below epsilon, or None."""
    if t_points > 1:
        step = max_t / (t_points - 1)
    else:
        step = 0.

    t = np.arange(t_points, dtype=dtype) * step
    decayed = np.ones(t.shape, dtype=bool)
    for Ln in _laguerre_function_iter(max_n, t, beta, sigma):
        decayed &= np.abs(Ln) <= epsilon
        if not decayed.any():
            return None

    idx = np.flatnonzero(decayed)
    if len(idx) == 0:
        return None

    return float(t[idx[0]])


def _maybe_scalar(value, t):
    if np.ndim(t) == 0:
        return float(value)

    return value


class LaguerreEngine:
    """Evaluation, tabulation, and transforms of Laguerre functions."""
    def __init__(self, beta=2., sigma=4.):
        """Create a new LaguerreEngine.

        Parameters
        ----------
        beta : float
            damping parameter, > 0
        sigma : float
            scaling parameter, >= beta

        Raises
        ------
        InvalidParameter
            if beta is not positive or sigma < beta

        """
        if beta <= 0:
            raise InvalidParameter(f'beta must be positive, got {beta}')

        if sigma < beta:
            raise InvalidParameter(f'sigma must be at least beta, got sigma={sigma}, beta={beta}')

        self._beta = beta
        self._sigma = sigma

    @property
    def beta(self):
        """Damping parameter."""
        return self._beta

    @property
    def sigma(self):
        """Scaling parameter."""
        return self._sigma

    def __repr__(self):
        return f'LaguerreEngine(beta={self.beta}, sigma={self.sigma})'

    def evaluate(self, t, n):
        """Laguerre function of order n at t.

        Parameters
        ----------
        t : float or numpy.ndarray
            point(s) to evaluate at
        n : int
            order

        Returns
        -------
        float or numpy.ndarray
            L_n(t), same shape as t

        """
        if n < 0:
            raise InvalidParameter(f'n must be non-negative, got {n}')

        value = laguerre_function(n, np.asarray(t, dtype=config.precision), self.beta, self.sigma)
        return _maybe_scalar(value, t)

    def tabulate(self, n, max_t, t_step=None):
        """Tabulate the Laguerre function of order n on [0, max_t).

        Parameters
        ----------
        n : int
            order
        max_t : float
            end of the interval, exclusive
        t_step : float, optional
            spacing between points; if None, config.t_step

        Returns
        -------
        dict
            {t: L_n(t)} for t = 0, t_step, 2 t_step, ... < max_t

        """
        if t_step is None:
            t_step = config.t_step

        if n < 0:
            raise InvalidParameter(f'n must be non-negative, got {n}')

        if max_t < 0:
            raise InvalidParameter(f'max_t must be non-negative, got {max_t}')

        if t_step < 0:
            raise InvalidParameter(f't_step must be non-negative, got {t_step}')

        if t_step == 0 and max_t > 0:
            raise InvalidParameter('t_step must be positive when max_t is positive')

        count = _half_open_count(max_t, t_step)
        t = np.arange(count, dtype=config.precision) * t_step
        values = laguerre_function(n, t, self.beta, self.sigma)
        return {float(k): float(v) for k, v in zip(t, values)}

    def find_optimal_t(self, max_n=20, epsilon=None, max_t=None, t_points=None):
        """Find the point by which all Laguerre functions up to max_n have decayed.

        Parameters
        ----------
        max_n : int
            highest order considered
        epsilon : float, optional
            decay threshold on |L_n(t)|; if None, config.epsilon
        max_t : float, optional
            end of the interval searched; if None, config.max_t
        t_points : int, optional
            number of samples evenly spaced on [0, max_t]; if None,
            config.t_points

        Returns
        -------
        OptimalBound
            the bound and {n: L_n(t)} for n in [0, max_n]

        Notes
        -----
        If no sample qualifies, the bound is zero and a DegenerateBoundWarning
        is issued.

        """
        if epsilon is None:
            epsilon = config.epsilon
        if max_t is None:
            max_t = config.max_t
        if t_points is None:
            t_points = config.t_points

        if max_n < 0:
            raise InvalidParameter(f'max_n must be non-negative, got {max_n}')

        if epsilon < 0:
            raise InvalidParameter(f'epsilon must be non-negative, got {epsilon}')

        if max_t < 0:
            raise InvalidParameter(f'max_t must be non-negative, got {max_t}')

        if t_points < 0:
            raise InvalidParameter(f't_points must be non-negative, got {t_points}')

        t = _search_optimal_t(self.beta, self.sigma, max_n, epsilon, max_t, t_points, config.precision)
        if t is None:
            warnings.warn(f'no t in [0, {max_t}] with {t_points} samples had all orders up to {max_n} within {epsilon} of zero; bound is 0',
                          DegenerateBoundWarning)
            t = 0.

        ts = np.asarray(t, dtype=config.precision)
        tabulation = {n: float(Ln) for n, Ln in enumerate(_laguerre_function_iter(max_n, ts, self.beta, self.sigma))}
        return OptimalBound(t, tabulation)

    def forward_transform(self, f, n, points=None, vectorized=False):
        """Laguerre transform coefficient of f of order n.

        Parameters
        ----------
        f : callable
            function of one float argument
        n : int
            order
        points : int, optional
            number of quadrature samples; if None, config.points
        vectorized : bool, optional
            if True, f accepts and returns arrays and is called once per
            quadrature; otherwise it is evaluated element by element

        Returns
        -------
        float
            integral of f(t) L_n(t) exp(-(sigma-beta) t) over [0, t*]

        """
        if n < 0:
            raise InvalidParameter(f'n must be non-negative, got {n}')

        if points is not None and points < 0:
            raise InvalidParameter(f'points must be non-negative, got {points}')

        alpha = self.sigma - self.beta
        f = as_array_function(f, vectorized)

        def integrand(t):
            return f(t) * laguerre_function(n, t, self.beta, self.sigma) * np.exp(-alpha * t)

        bound = self.find_optimal_t(n)
        return integrate(integrand, 0, bound.t, points, vectorized=True)

    def forward_transform_vector(self, f, max_n, points=None, vectorized=False):
        """Laguerre transform coefficients of f of orders [0, max_n).

        Parameters
        ----------
        f : callable
            function of one float argument
        max_n : int
            number of coefficients
        points : int, optional
            number of quadrature samples; if None, config.points
        vectorized : bool, optional
            as for forward_transform

        Returns
        -------
        dict
            {n: h_n}, max_n entries

        """
        if max_n < 0:
            raise InvalidParameter(f'max_n must be non-negative, got {max_n}')

        if points is not None and points < 0:
            raise InvalidParameter(f'points must be non-negative, got {points}')

        return {n: self.forward_transform(f, n, points, vectorized) for n in range(max_n)}

    def inverse_transform(self, h, t):
        """Reconstruct a function value from its transform coefficients.

        Parameters
        ----------
        h : sequence of float or dict
            coefficients, h[k] of order k; a dict from
            forward_transform_vector is read in key order
        t : float or numpy.ndarray
            point(s) to evaluate at

        Returns
        -------
        float or numpy.ndarray
            sum of h[k] L_k(t)

        """
        if isinstance(h, dict):
            h = [h[k] for k in sorted(h)]
        else:
            h = list(h)
        ts = np.asarray(t, dtype=config.precision)
        out = np.zeros_like(ts)
        if len(h) == 0:
            return _maybe_scalar(out, t)

        for hk, Lk in zip(h, _laguerre_function_iter(len(h) - 1, ts, self.beta, self.sigma)):
            out = out + hk * Lk

        return _maybe_scalar(out, t)
