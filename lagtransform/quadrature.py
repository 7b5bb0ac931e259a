"""Fixed-step numerical integration."""
from .mathops import np
from .conf import config
from .errors import InvalidParameter, InvalidRange


def as_array_function(f, vectorized=False):
    """Make a scalar function callable on arrays.

    Parameters
    ----------
    f : callable
        function of one float argument, returning a float
    vectorized : bool, optional
        if True, f already accepts and returns arrays and is used as-is

    Returns
    -------
    callable
        function of one ndarray argument; numpy ufuncs are returned as-is,
        anything else is evaluated element by element

    """
    if vectorized or isinstance(f, np.ufunc):
        return f

    return np.vectorize(f, otypes=[config.precision])


def riemann_nodes(a, b, points):
    """Left endpoints of a uniform partition of [a, b].

    Parameters
    ----------
    a : float
        lower bound
    b : float
        upper bound
    points : int
        number of subintervals

    Returns
    -------
    numpy.ndarray
        a + i * (b-a)/points for i in [0, points)

    """
    step = (b - a) / points
    return a + np.arange(points, dtype=config.precision) * step


def integrate(f, a, b, points=None, vectorized=False):
    """Integrate f over [a, b] with a left Riemann sum.

    Parameters
    ----------
    f : callable
        function of one float argument
    a : float
        lower bound
    b : float
        upper bound
    points : int, optional
        number of subintervals; if None, config.points
    vectorized : bool, optional
        if True, f is called once with the array of nodes and must return an
        array of the same shape (or a scalar, which is broadcast)

    Returns
    -------
    float
        approximate value of the integral

    Raises
    ------
    InvalidRange
        if a > b
    InvalidParameter
        if points is not a positive integer

    Notes
    -----
    The sum is not adaptive; the same inputs always produce the same result.

    """
    if a > b:
        raise InvalidRange(f'a must not exceed b, got a={a}, b={b}')

    if points is None:
        points = config.points

    if int(points) != points or points <= 0:
        raise InvalidParameter(f'points must be a positive integer, got {points}')

    points = int(points)
    if a == b:
        return 0.

    x = riemann_nodes(a, b, points)
    y = np.broadcast_to(as_array_function(f, vectorized)(x), x.shape)
    return float(np.sum(y) * abs(b - a) / points)
