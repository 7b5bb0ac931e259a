"""Macro routines that run a complete Laguerre transform experiment."""
from collections import namedtuple

from .mathops import np, normal_distribution, square
from .conf import config
from .laguerre import LaguerreEngine
from .quadrature import as_array_function


DEFAULT_FUNCTIONS = {
    'square': square,
    'normal': normal_distribution,
}

TransformResult = namedtuple('TransformResult', ['function', 'coefficients', 'inverse', 'reconstruction'])
Experiment = namedtuple('Experiment', ['engine', 'tabulation', 'optimal', 'transforms'])


def run_experiment(beta=2., sigma=4., n=5, max_t=10, t_step=None, points=None, t=10, functions=None):
    """Tabulate, bound, and transform a set of functions.

    Parameters
    ----------
    beta : float
        damping parameter of the engine
    sigma : float
        scaling parameter of the engine
    n : int
        order tabulated, bounded, and number of transform coefficients
    max_t : float
        end of the tabulated interval
    t_step : float, optional
        tabulation step; if None, config.t_step
    points : int, optional
        quadrature sample count; if None, config.points
    t : float
        point at which each inverse transform is reported
    functions : dict, optional
        name -> callable of one float argument; if None, x^2 and the standard normal density

    Returns
    -------
    Experiment
        engine, the tabulation of L_n, the optimal bound for n, and one
        TransformResult per function with the tabulations of f and of its
        reconstruction on the same points

    """
    if t_step is None:
        t_step = config.t_step
    if functions is None:
        functions = DEFAULT_FUNCTIONS

    engine = LaguerreEngine(beta, sigma)
    tabulation = engine.tabulate(n, max_t, t_step)
    optimal = engine.find_optimal_t(n)

    ts = np.asarray(list(tabulation.keys()), dtype=config.precision)
    transforms = {}
    for name, f in functions.items():
        h = engine.forward_transform_vector(f, n, points)
        fvals = np.broadcast_to(as_array_function(f)(ts), ts.shape)
        hvals = engine.inverse_transform(h, ts)
        transforms[name] = TransformResult(
            function={float(k): float(v) for k, v in zip(ts, fvals)},
            coefficients=h,
            inverse=engine.inverse_transform(h, t),
            reconstruction={float(k): float(v) for k, v in zip(ts, hvals)},
        )

    return Experiment(engine, tabulation, optimal, transforms)
